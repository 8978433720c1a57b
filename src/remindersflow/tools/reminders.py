# Reminders node tools — expose each node to an LLM agent.
# Created: 2026-03-02
#
# The agent's arguments become the single input item of a node run. Failures
# come back as error records (continue_on_fail), never as exceptions.

from __future__ import annotations

import json
import logging
from typing import Any

from remindersflow.nodes.base import BaseNode
from remindersflow.tools.protocol import BaseTool

logger = logging.getLogger(__name__)


class RemindersNodeTool(BaseTool):
    """Wrap a node class as a function-calling tool."""

    def __init__(self, node_cls: type[BaseNode], client, parameters=None):
        self._node_cls = node_cls
        self._client = client
        self._parameters = parameters

    @property
    def name(self) -> str:
        return self._node_cls.name

    @property
    def description(self) -> str:
        return self._node_cls.description

    @property
    def parameters(self) -> dict[str, Any]:
        return self._node_cls.tool_schema()

    async def execute(self, **params: Any) -> str:
        node = self._node_cls(self._client, self._parameters, continue_on_fail=True)
        results = await node.execute([params])
        if not results:
            logger.debug("%s returned no items", self.name)
        return json.dumps([item.json for item in results], default=str)
