# Tool registry — look up and run the Reminders tools by name.
# Created: 2026-03-02

from __future__ import annotations

import logging
from typing import Any

from remindersflow.nodes import NODE_TYPES
from remindersflow.tools.protocol import BaseTool
from remindersflow.tools.reminders import RemindersNodeTool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Registry of tools available to an agent.

    Usage:
        registry = build_reminders_registry(RemindersClient())

        # Definitions for the LLM
        definitions = registry.get_definitions("anthropic")

        # Run a tool call
        result = await registry.execute("remindersTask", operation="getAll")
    """

    def __init__(self):
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        self._tools[tool.name] = tool
        logger.debug("Registered tool: %s", tool.name)

    def unregister(self, name: str) -> None:
        self._tools.pop(name, None)

    def get(self, name: str) -> BaseTool | None:
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        return name in self._tools

    def get_definitions(self, format: str = "openai") -> list[dict[str, Any]]:
        """Tool definitions in ``"openai"`` or ``"anthropic"`` format."""
        definitions = []
        for tool in self._tools.values():
            defn = tool.definition
            if format == "anthropic":
                definitions.append(defn.to_anthropic_schema())
            else:
                definitions.append(defn.to_openai_schema())
        return definitions

    async def execute(self, name: str, **params: Any) -> str:
        tool = self._tools.get(name)
        if not tool:
            return f"Error: Tool '{name}' not found. Available: {list(self._tools.keys())}"

        logger.debug("Executing %s with %s", name, params)
        result = await tool.execute(**params)
        log_result = result[:200] + "..." if len(result) > 200 else result
        logger.debug("%s result: %s", name, log_result)
        return result

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools.keys())

    def __len__(self) -> int:
        return len(self._tools)


def build_reminders_registry(client, parameters=None) -> ToolRegistry:
    """A registry holding one tool per Reminders node."""
    registry = ToolRegistry()
    for node_cls in NODE_TYPES.values():
        registry.register(RemindersNodeTool(node_cls, client, parameters))
    return registry
