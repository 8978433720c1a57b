# Reminders AI Tool node — one action per call, structured result for an agent.
# Created: 2026-03-02
#
# Every result has the same envelope: {success, action, data, summary}.
# The summary is a sentence the agent can relay to the user verbatim.

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from remindersflow.builders import (
    OperationRequest,
    extract_list_identifier,
    map_priority,
    normalize_date,
    parse_bool,
    query_params,
    require,
    sparse,
    split_list,
)
from remindersflow.enrich import enrich_reminder, parse_datetime
from remindersflow.nodes.base import BaseNode
from remindersflow.nodes.webhooks import build_webhook_filter
from remindersflow.resolver import ItemContext
from remindersflow.schemas import AiToolInput

logger = logging.getLogger(__name__)

DEFAULT_WEBHOOK_NAME = "AI Tool Webhook"


def _count(data: Any) -> int:
    return len(data) if isinstance(data, list) else 0


def _enrich_all(data: Any) -> list[dict[str, Any]]:
    if not isinstance(data, list):
        return []
    return [enrich_reminder(r) for r in data if isinstance(r, Mapping)]


class RemindersAiToolNode(BaseNode):
    """AI-powered tool for managing macOS Reminders.

    Unlike the other nodes, an unknown action does not raise: it produces a
    failure record so the calling agent can correct itself.
    """

    name = "remindersAiTool"
    description = "AI-powered tool for managing macOS Reminders"
    input_schema = AiToolInput
    operations = (
        "get_lists",
        "get_reminders",
        "create_reminder",
        "update_reminder",
        "delete_reminder",
        "search_reminders",
        "complete_reminder",
        "setup_webhook",
    )
    operation_field = "action"

    def resolve_operation(self, ctx: ItemContext) -> str:
        return ctx.get("action") or "unknown"

    async def run_operation(self, operation: str, ctx: ItemContext) -> list[dict[str, Any]]:
        if operation not in self.operations:
            return [
                self._failure(
                    operation, f"Unknown action: {operation}", f'Unknown action "{operation}"'
                )
            ]
        return await super().run_operation(operation, ctx)

    def format_error(self, operation: str | None, error: Exception) -> dict[str, Any]:
        return self._failure(operation or "unknown", str(error), str(error))

    @staticmethod
    def _failure(action: str, error: str, summary: str) -> dict[str, Any]:
        return {"success": False, "action": action, "error": error, "summary": f"Error: {summary}"}

    # -- resolve / build ---------------------------------------------------

    def resolve_params(self, operation: str, ctx: ItemContext) -> dict[str, Any]:
        if operation == "get_lists":
            return {}
        if operation == "get_reminders":
            return {
                "list_name": extract_list_identifier(ctx.get("list_name", "")),
                "include_completed": parse_bool(ctx.get("include_completed")),
            }
        if operation == "create_reminder":
            tool_config = ctx.collection("toolConfig")
            return {
                "title": ctx.get("title"),
                "list_name": extract_list_identifier(
                    ctx.get("list_name") or tool_config.get("defaultList") or ""
                ),
                "notes": ctx.get("notes"),
                "due_date": normalize_date(ctx.get("due_date")),
                "priority": map_priority(ctx.get("priority")),
            }
        if operation == "update_reminder":
            return {
                "uuid": ctx.get("uuid"),
                "title": ctx.get("title"),
                "notes": ctx.get("notes"),
                "due_date": normalize_date(ctx.get("due_date")),
                "priority": map_priority(ctx.get("priority")),
                "is_completed": ctx.get("is_completed"),
            }
        if operation in ("delete_reminder", "complete_reminder"):
            return {"uuid": ctx.get("uuid"), "completed": ctx.get("completed")}
        if operation == "search_reminders":
            return {"search_query": ctx.get("search_query"), "filters": ctx.get("filters") or {}}
        # setup_webhook
        config = ctx.get("webhook_config") or {}
        return {"webhook_config": config if isinstance(config, Mapping) else {}}

    def build_request(self, operation: str, params: Mapping[str, Any]) -> OperationRequest:
        if operation == "get_lists":
            return OperationRequest("GET", "/lists")

        if operation == "get_reminders":
            query = {"completed": "true"} if params.get("include_completed") else {}
            if params.get("list_name"):
                return OperationRequest(
                    "GET", "/lists/{listName}", {"listName": params["list_name"]}, query
                )
            return OperationRequest("GET", "/reminders", query=query)

        if operation == "create_reminder":
            title = require(params.get("title"), "title", operation)
            list_name = require(params.get("list_name"), "list_name", operation)
            body = sparse(
                {
                    "title": title,
                    "notes": params.get("notes"),
                    "dueDate": params.get("due_date"),
                    "priority": params.get("priority"),
                }
            )
            return OperationRequest(
                "POST", "/lists/{listName}/reminders", {"listName": list_name}, body=body
            )

        if operation == "search_reminders":
            query = dict(params.get("filters") or {})
            if "lists" in query:
                query["lists"] = ",".join(split_list(query["lists"]))
            if "listUUIDs" in query:
                query["listUUIDs"] = ",".join(split_list(query["listUUIDs"]))
            if params.get("search_query"):
                query["query"] = params["search_query"]
            return OperationRequest("GET", "/search", query=query_params(query))

        if operation == "setup_webhook":
            config = params.get("webhook_config") or {}
            url = require(config.get("url"), "webhook_config.url", operation)
            body: dict[str, Any] = {"url": url, "name": config.get("name") or DEFAULT_WEBHOOK_NAME}
            webhook_filter = build_webhook_filter(list_names=config.get("lists"))
            if webhook_filter:
                body["filter"] = webhook_filter
            return OperationRequest("POST", "/webhooks", body=body)

        uuid = require(params.get("uuid"), "uuid", operation)
        path = {"uuid": uuid}
        if operation == "delete_reminder":
            return OperationRequest("DELETE", "/reminders/{uuid}", path)
        if operation == "complete_reminder":
            completed = parse_bool(params.get("completed"), default=True)
            endpoint = "complete" if completed else "uncomplete"
            return OperationRequest("PATCH", f"/reminders/{{uuid}}/{endpoint}", path)

        body = sparse(
            {
                "title": params.get("title"),
                "notes": params.get("notes"),
                "dueDate": params.get("due_date"),
                "priority": params.get("priority"),
                "isCompleted": params.get("is_completed"),
            }
        )
        return OperationRequest("PATCH", "/reminders/{uuid}", path, body=body)

    # -- result envelope ---------------------------------------------------

    async def after_response(
        self, operation: str, ctx: ItemContext, params: Mapping[str, Any], data: Any
    ) -> Any:
        result: dict[str, Any] = {"success": True, "action": operation}

        if operation == "get_lists":
            lists = data if isinstance(data, list) else []
            titles = [
                (entry.get("title") or entry.get("name") or "")
                if isinstance(entry, Mapping)
                else str(entry)
                for entry in lists
            ]
            result["data"] = {"lists": lists, "count": len(lists)}
            result["summary"] = f"Found {len(lists)} reminder lists: {', '.join(titles)}"

        elif operation == "get_reminders":
            list_name = params.get("list_name")
            where = f" from {list_name} list" if list_name else " across all lists"
            result["data"] = {"reminders": _enrich_all(data), "count": _count(data)}
            result["summary"] = f"Found {_count(data)} reminders{where}"

        elif operation == "create_reminder":
            due = parse_datetime(params.get("due_date"))
            due_info = f" due {due.date().isoformat()}" if due else ""
            result["data"] = enrich_reminder(data) if isinstance(data, Mapping) else data
            result["summary"] = (
                f'Created reminder "{params["title"]}" in {params["list_name"]} list{due_info}'
            )

        elif operation == "update_reminder":
            title = data.get("title") if isinstance(data, Mapping) else None
            result["data"] = enrich_reminder(data) if isinstance(data, Mapping) else data
            result["summary"] = f'Updated reminder "{title or params["uuid"]}"'

        elif operation == "delete_reminder":
            result["data"] = {"uuid": params["uuid"]}
            result["summary"] = f"Deleted reminder with UUID {params['uuid']}"

        elif operation == "search_reminders":
            matching = f' matching "{params["search_query"]}"' if params.get("search_query") else ""
            result["data"] = {"reminders": _enrich_all(data), "count": _count(data)}
            result["summary"] = f"Found {_count(data)} reminders{matching}"

        elif operation == "complete_reminder":
            completed = parse_bool(params.get("completed"), default=True)
            result["data"] = {"uuid": params["uuid"], "completed": completed}
            result["summary"] = (
                "Reminder marked as completed" if completed else "Reminder unmarked as completed"
            )

        elif operation == "setup_webhook":
            hook = data if isinstance(data, Mapping) else {}
            result["data"] = data
            result["summary"] = (
                f'Created webhook "{hook.get("name", "")}" for URL {hook.get("url", "")}'
            )

        return result

    def format_result(self, operation: str, data: Any) -> list[dict[str, Any]]:
        return [data]
