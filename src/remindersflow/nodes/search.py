# Reminders Search node — filtered search across all lists.
# Created: 2026-03-02

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from remindersflow.builders import (
    OperationRequest,
    format_bool,
    normalize_date,
    parse_bool,
    priority_filter_value,
    query_params,
    split_list,
)
from remindersflow.errors import InvalidFieldError
from remindersflow.nodes.base import BaseNode
from remindersflow.resolver import ItemContext
from remindersflow.schemas import SearchInput

logger = logging.getLogger(__name__)

_DATE_FILTERS = ("dueBefore", "dueAfter", "createdAfter", "modifiedAfter")
_TRI_STATE_FILTERS = ("isSubtask", "hasAttachedUrl", "hasMailUrl")


def _priority_bound(value: Any, default: int, field: str, operation: str) -> int:
    """Blank means the open end of the range; words map like the priority filter."""
    if value is None or value == "":
        return default
    value = priority_filter_value(value)
    if isinstance(value, bool):
        raise InvalidFieldError(field, value, operation)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidFieldError(field, value, operation) from e


class RemindersSearchNode(BaseNode):
    """Advanced search across reminders with filtering, sorting and limits.

    A resolved ``reminderId`` turns the search into a direct lookup of that
    reminder.
    """

    name = "remindersSearch"
    description = "Search reminders with filters, sorting and private API fields"
    input_schema = SearchInput
    operations = ("search",)
    default_operation = "search"
    aliases = {
        "query": ("search", "text"),
        "reminderId": ("uuid", "reminderUUID"),
        "lists": ("listNames",),
        "dueBefore": ("dueBy",),
        "dueAfter": ("dueFrom",),
        "priorityMin": ("minPriority",),
        "priorityMax": ("maxPriority",),
        "limit": ("count", "maxResults"),
    }

    def resolve_params(self, operation: str, ctx: ItemContext) -> dict[str, Any]:
        reminder_id = ctx.get("reminderId", "")
        if reminder_id:
            return {"reminderId": reminder_id}

        options = ctx.collection("searchOptions")
        params: dict[str, Any] = {
            "query": ctx.get("query", options.get("query", "")),
            "lists": ctx.get("lists", options.get("lists", "")),
            "listUUIDs": ctx.get("listUUIDs", options.get("listUUIDs", "")),
            "completed": ctx.get("completed", options.get("completed") or "false"),
            "hasDueDate": ctx.get("hasDueDate", options.get("hasDueDate")),
            "hasNotes": ctx.get("hasNotes", options.get("hasNotes")),
            "priority": ctx.get("priority", options.get("priority")),
            "priorityMin": ctx.get("priorityMin", options.get("priorityMin") or 0),
            "priorityMax": ctx.get("priorityMax", options.get("priorityMax") or 9),
            "sortBy": ctx.get("sortBy", options.get("sortBy") or "lastModified"),
            "sortOrder": ctx.get("sortOrder", options.get("sortOrder") or "desc"),
            "limit": ctx.get("limit", options.get("limit") or 50),
        }
        for name in _DATE_FILTERS:
            params[name] = normalize_date(ctx.get(name, options.get(name)))
        for name in _TRI_STATE_FILTERS:
            params[name] = ctx.get(name, options.get(name) or "all")
        return params

    def build_request(self, operation: str, params: Mapping[str, Any]) -> OperationRequest:
        if params.get("reminderId"):
            return OperationRequest(
                "GET", "/reminders/{reminderId}", {"reminderId": params["reminderId"]}
            )

        query: dict[str, Any] = {
            "query": params.get("query"),
            "lists": ",".join(split_list(params.get("lists"))),
            "listUUIDs": ",".join(split_list(params.get("listUUIDs"))),
            "completed": params.get("completed"),
        }
        for name in _DATE_FILTERS:
            query[name] = params.get(name)

        if parse_bool(params.get("hasDueDate")):
            query["hasDueDate"] = "true"
        if parse_bool(params.get("hasNotes")):
            query["hasNotes"] = "true"
        for name in _TRI_STATE_FILTERS:
            value = params.get(name, "all")
            if value is not None and value != "all":
                query[name] = format_bool(value)

        if params.get("priority") not in (None, ""):
            query["priority"] = priority_filter_value(params["priority"])
        priority_min = _priority_bound(params.get("priorityMin"), 0, "priorityMin", operation)
        if priority_min > 0:
            query["priorityMin"] = priority_min
        priority_max = _priority_bound(params.get("priorityMax"), 9, "priorityMax", operation)
        if priority_max < 9:
            query["priorityMax"] = priority_max

        query["sortBy"] = params.get("sortBy")
        query["sortOrder"] = params.get("sortOrder")
        query["limit"] = params.get("limit")
        return OperationRequest("GET", "/search", query=query_params(query))

    async def after_response(
        self, operation: str, ctx: ItemContext, params: Mapping[str, Any], data: Any
    ) -> Any:
        if params.get("reminderId"):
            return data
        return data if isinstance(data, list) else []

    def format_result(self, operation: str, data: Any) -> list[dict[str, Any]]:
        # A lookup that found nothing emits nothing.
        if not data:
            return []
        return super().format_result(operation, data)
