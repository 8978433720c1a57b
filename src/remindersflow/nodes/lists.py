# Reminders List node — enumerate lists and read a list's reminders.
# Created: 2026-03-02

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from remindersflow.builders import (
    OperationRequest,
    extract_list_identifier,
    format_bool,
    parse_bool,
    require,
)
from remindersflow.lookups import prefetch_lists, prefetch_reminders
from remindersflow.nodes.base import BaseNode
from remindersflow.resolver import ItemContext
from remindersflow.schemas import ListsInput

logger = logging.getLogger(__name__)


class RemindersListNode(BaseNode):
    """Get reminder lists and their reminders."""

    name = "remindersList"
    description = "Get reminder lists and their reminders from macOS Reminders"
    input_schema = ListsInput
    operations = ("getAllLists", "getListReminders")
    default_operation = "getAllLists"
    aliases = {
        "listName": ("list", "listUUID"),
        "includeCompleted": ("completed",),
    }

    def resolve_params(self, operation: str, ctx: ItemContext) -> dict[str, Any]:
        ai_options = ctx.collection("aiContextOptions")
        params: dict[str, Any] = {
            "includeAIContext": (
                parse_bool(ctx.get("includeAIContext"))
                or parse_bool(ai_options.get("includeAIContext"))
            ),
        }
        if operation == "getListReminders":
            params["listName"] = extract_list_identifier(ctx.get("listName", ""))
            params["includeCompleted"] = parse_bool(ctx.get("includeCompleted"))
        return params

    def build_request(self, operation: str, params: Mapping[str, Any]) -> OperationRequest:
        if operation == "getAllLists":
            return OperationRequest("GET", "/lists")

        list_name = require(params.get("listName"), "listName", operation)
        return OperationRequest(
            "GET",
            "/lists/{listName}",
            path_params={"listName": list_name},
            query={"completed": format_bool(params.get("includeCompleted"))},
        )

    async def after_response(
        self, operation: str, ctx: ItemContext, params: Mapping[str, Any], data: Any
    ) -> Any:
        if not isinstance(data, list):
            return []
        if not params.get("includeAIContext"):
            return data

        if operation == "getAllLists":
            sample = await prefetch_reminders(self.client, limit=10, completed=False)
            context = {"totalLists": len(data), "sampleReminders": sample[:5]}
        else:
            lists = await prefetch_lists(self.client)
            context = {
                "listName": params["listName"],
                "totalReminders": len(data),
                "availableLists": [
                    entry.get("title") or entry.get("name") if isinstance(entry, dict) else entry
                    for entry in lists
                ],
            }
        # Non-object entries are wrapped the same way format_result wraps them.
        return [
            {**(entry if isinstance(entry, dict) else {"value": entry}), "aiContext": dict(context)}
            for entry in data
        ]
