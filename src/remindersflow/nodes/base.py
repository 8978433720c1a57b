# Node base — per-item operation dispatch shared by every resource module.
# Created: 2026-03-02
#
# Items are processed strictly in order, one outbound request (or two, with
# AI context) at a time. A failing item either aborts the batch or, with
# continue_on_fail, is replaced by an error record.

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel

from remindersflow.builders import OperationRequest
from remindersflow.enrich import enrich_reminder
from remindersflow.errors import UnknownOperationError
from remindersflow.resolver import ItemContext, NodeParameters, ParameterResolver

logger = logging.getLogger(__name__)


@dataclass
class OutputItem:
    """One emitted result, paired with the index of the input that produced it."""

    json: dict[str, Any]
    item_index: int

    def to_dict(self) -> dict[str, Any]:
        return {"json": self.json, "pairedItem": {"item": self.item_index}}


class BaseNode:
    """A resource module: resolve -> build -> send -> enrich, per input item.

    Subclasses declare ``operations`` and implement ``resolve_params`` and
    ``build_request``. ``client`` is anything with an async
    ``send(OperationRequest)``; ``parameters`` is the host's parameter store.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    input_schema: ClassVar[type[BaseModel]]
    operations: ClassVar[tuple[str, ...]] = ()
    default_operation: ClassVar[str | None] = None
    aliases: ClassVar[Mapping[str, Sequence[str]]] = {}
    # Operations whose output is a confirmation record, never enriched.
    acknowledged: ClassVar[frozenset[str]] = frozenset()
    enrich_results: ClassVar[bool] = True
    operation_field: ClassVar[str] = "operation"

    def __init__(
        self,
        client,
        parameters: NodeParameters | None = None,
        continue_on_fail: bool = False,
    ):
        self.client = client
        self.continue_on_fail = continue_on_fail
        self.resolver = ParameterResolver(parameters, self.aliases)

    # -- hooks -------------------------------------------------------------

    def resolve_params(self, operation: str, ctx: ItemContext) -> dict[str, Any]:
        raise NotImplementedError

    def build_request(self, operation: str, params: Mapping[str, Any]) -> OperationRequest:
        raise NotImplementedError

    async def after_response(
        self, operation: str, ctx: ItemContext, params: Mapping[str, Any], data: Any
    ) -> Any:
        """Post-process the raw response. Default: unchanged."""
        return data

    def format_result(self, operation: str, data: Any) -> list[dict[str, Any]]:
        """Fan a response out into output records."""
        enrich = self.enrich_results and operation not in self.acknowledged
        if isinstance(data, list):
            return [self._shape(item, enrich) for item in data]
        if data:
            return [self._shape(data, enrich)]
        return [{"success": True, "operation": operation}]

    def format_error(self, operation: str | None, error: Exception) -> dict[str, Any]:
        return {"error": str(error)}

    # -- dispatch ----------------------------------------------------------

    def resolve_operation(self, ctx: ItemContext) -> str:
        operation = ctx.get(self.operation_field) or self.default_operation
        if operation not in self.operations:
            raise UnknownOperationError(operation)
        return operation

    async def run_operation(self, operation: str, ctx: ItemContext) -> list[dict[str, Any]]:
        params = self.resolve_params(operation, ctx)
        request = self.build_request(operation, params)
        data = await self.client.send(request)
        data = await self.after_response(operation, ctx, params, data)
        return self.format_result(operation, data)

    async def execute(self, items: Sequence[Mapping[str, Any]]) -> list[OutputItem]:
        """Run the node over ``items``; returns one or more records per item."""
        output: list[OutputItem] = []
        for index, payload in enumerate(items):
            ctx = ItemContext(self.resolver, index, payload or {})
            operation = None
            try:
                operation = self.resolve_operation(ctx)
                logger.debug("%s item %d: %s", self.name, index, operation)
                records = await self.run_operation(operation, ctx)
            except Exception as e:
                if not self.continue_on_fail:
                    logger.error("%s item %d failed: %s", self.name, index, e)
                    raise
                logger.warning("%s item %d failed, continuing: %s", self.name, index, e)
                records = [self.format_error(operation, e)]
            output.extend(OutputItem(json=record, item_index=index) for record in records)
        return output

    @classmethod
    def tool_schema(cls) -> dict[str, Any]:
        """JSON schema an AI agent fills in to call this node."""
        return cls.input_schema.model_json_schema()

    @staticmethod
    def _shape(item: Any, enrich: bool) -> dict[str, Any]:
        if not isinstance(item, Mapping):
            return {"value": item}
        return enrich_reminder(item) if enrich else dict(item)
