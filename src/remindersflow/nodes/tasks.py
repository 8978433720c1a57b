# Reminders Task node — CRUD on individual reminders, plus subtasks.
# Created: 2026-03-02

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from remindersflow.builders import (
    OperationRequest,
    extract_list_identifier,
    format_bool,
    map_priority,
    normalize_date,
    parse_bool,
    require,
    sparse,
)
from remindersflow.nodes.base import BaseNode
from remindersflow.resolver import ItemContext
from remindersflow.schemas import TasksInput

logger = logging.getLogger(__name__)

_BY_ID = ("get", "update", "delete", "complete")
_WRITES = ("create", "createSubtask", "update")


class RemindersTaskNode(BaseNode):
    """Manage individual reminders with full CRUD operations and private API features."""

    name = "remindersTask"
    description = "Manage individual reminders with full CRUD operations and private API features"
    input_schema = TasksInput
    operations = ("getAll", "get", "create", "update", "delete", "complete", "createSubtask")
    default_operation = "getAll"
    aliases = {
        "listName": ("list", "listUUID"),
        "notes": ("description",),
        "attachedUrl": ("url",),
    }
    acknowledged = frozenset({"delete", "complete"})

    def resolve_params(self, operation: str, ctx: ItemContext) -> dict[str, Any]:
        if operation == "getAll":
            return {"includeCompleted": parse_bool(ctx.get("includeCompleted"))}

        params: dict[str, Any] = {}
        if operation in _BY_ID:
            params["reminderId"] = ctx.get("reminderId")
        if operation not in _WRITES:
            return params

        # Secondary sources: the host's "Additional Fields" and
        # "Private Features" collections.
        extra = ctx.collection("additionalFields")
        private = ctx.collection("privateFeatures")

        params["title"] = ctx.get("title")
        params["notes"] = ctx.get("notes") or extra.get("notes")
        params["dueDate"] = normalize_date(ctx.get("dueDate") or extra.get("dueDate"))
        params["startDate"] = normalize_date(ctx.get("startDate") or extra.get("startDate"))
        params["priority"] = map_priority(ctx.get("priority") or extra.get("priority"))
        params["attachedUrl"] = ctx.get("attachedUrl") or private.get("attachedUrl")

        if operation == "update":
            completed = ctx.get("isCompleted")
            params["isCompleted"] = extra.get("isCompleted") if completed is None else completed
        else:
            params["listName"] = extract_list_identifier(ctx.get("listName", ""))
        if operation == "createSubtask":
            params["parentId"] = ctx.get("parentId") or private.get("parentId")
        return params

    def build_request(self, operation: str, params: Mapping[str, Any]) -> OperationRequest:
        if operation == "getAll":
            return OperationRequest(
                "GET",
                "/reminders",
                query={"completed": format_bool(params.get("includeCompleted"))},
            )

        if operation in _BY_ID:
            reminder_id = require(params.get("reminderId"), "reminderId", operation)
            path = {"reminderId": reminder_id}
            if operation == "get":
                return OperationRequest("GET", "/reminders/{reminderId}", path)
            if operation == "delete":
                return OperationRequest("DELETE", "/reminders/{reminderId}", path)
            if operation == "complete":
                return OperationRequest("PATCH", "/reminders/{reminderId}/complete", path)
            body = sparse(
                {
                    "title": params.get("title"),
                    "notes": params.get("notes"),
                    "dueDate": params.get("dueDate"),
                    "startDate": params.get("startDate"),
                    "priority": params.get("priority"),
                    "isCompleted": params.get("isCompleted"),
                    "attachedUrl": params.get("attachedUrl"),
                }
            )
            return OperationRequest("PATCH", "/reminders/{reminderId}", path, body=body)

        # create / createSubtask
        title = require(params.get("title"), "title", operation)
        list_name = require(params.get("listName"), "listName", operation)
        fields = {
            "title": title,
            "notes": params.get("notes"),
            "dueDate": params.get("dueDate"),
            "startDate": params.get("startDate"),
            "priority": params.get("priority"),
            "attachedUrl": params.get("attachedUrl"),
        }
        if operation == "createSubtask":
            fields["parentId"] = require(params.get("parentId"), "parentId", operation)
        return OperationRequest(
            "POST",
            "/lists/{listName}/reminders",
            {"listName": list_name},
            body=sparse(fields),
        )

    async def after_response(
        self, operation: str, ctx: ItemContext, params: Mapping[str, Any], data: Any
    ) -> Any:
        if operation == "getAll":
            return data if isinstance(data, list) else []
        if operation == "delete":
            return {"success": True, "deleted": params["reminderId"]}
        if operation == "complete":
            return {"success": True, "completed": params["reminderId"]}
        return data
