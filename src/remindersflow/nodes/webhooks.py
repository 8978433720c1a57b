# Reminders Webhook node — manage webhook subscriptions on the API server.
# Created: 2026-03-02

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from remindersflow.builders import OperationRequest, require, sparse, split_int_list, split_list
from remindersflow.nodes.base import BaseNode
from remindersflow.resolver import MISSING, ItemContext
from remindersflow.schemas import WebhooksInput

logger = logging.getLogger(__name__)

_FILTER_FIELDS = ("listNames", "listUUIDs", "completed", "priorityLevels", "hasQuery")


def build_webhook_filter(
    list_names: Any = None,
    list_uuids: Any = None,
    completed: str | None = None,
    priority_levels: Any = None,
    has_query: str | None = None,
) -> dict[str, Any]:
    """Sparse webhook filter; absent and default values are left out."""
    webhook_filter: dict[str, Any] = {}
    if names := split_list(list_names):
        webhook_filter["listNames"] = names
    if uuids := split_list(list_uuids):
        webhook_filter["listUUIDs"] = uuids
    if completed and completed != "all":
        webhook_filter["completed"] = completed
    if levels := split_int_list(priority_levels):
        webhook_filter["priorityLevels"] = levels
    if has_query:
        webhook_filter["hasQuery"] = has_query
    return webhook_filter


class RemindersWebhookNode(BaseNode):
    """Create and manage webhooks for reminder change notifications."""

    name = "remindersWebhook"
    description = "Manage webhooks for real-time reminder notifications"
    input_schema = WebhooksInput
    operations = ("list", "get", "create", "update", "delete", "test")
    default_operation = "list"
    aliases = {
        "listNames": ("lists",),
        "listUUIDs": ("listIds",),
        "priorityLevels": ("priorities",),
        "hasQuery": ("textFilter", "query"),
    }
    acknowledged = frozenset({"delete"})
    enrich_results = False

    def _filter_value(self, ctx: ItemContext, options: Mapping[str, Any], name: str) -> Any:
        value = ctx.from_payload(name)
        if value is MISSING:
            for candidate in self.resolver.names_for(name):
                if options.get(candidate) not in (None, ""):
                    return options[candidate]
            value = ctx.from_host(f"filterOptions.{name}")
        return None if value is MISSING else value

    def resolve_params(self, operation: str, ctx: ItemContext) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if operation != "list":
            params["webhookId"] = ctx.get("webhookId")
        if operation in ("create", "update"):
            params["url"] = ctx.get("url")
            params["name"] = ctx.get("name")
            options = ctx.collection("filterOptions")
            params["filter"] = build_webhook_filter(
                *(self._filter_value(ctx, options, name) for name in _FILTER_FIELDS)
            )
        if operation == "update":
            params["isActive"] = ctx.get("isActive")
        return params

    def build_request(self, operation: str, params: Mapping[str, Any]) -> OperationRequest:
        if operation == "list":
            return OperationRequest("GET", "/webhooks")

        if operation == "create":
            url = require(params.get("url"), "url", operation)
            name = require(params.get("name"), "name", operation)
            body: dict[str, Any] = {"url": url, "name": name}
            if params.get("filter"):
                body["filter"] = params["filter"]
            return OperationRequest("POST", "/webhooks", body=body)

        webhook_id = require(params.get("webhookId"), "webhookId", operation)
        path = {"webhookId": webhook_id}
        if operation == "get":
            return OperationRequest("GET", "/webhooks/{webhookId}", path)
        if operation == "delete":
            return OperationRequest("DELETE", "/webhooks/{webhookId}", path)
        if operation == "test":
            return OperationRequest("POST", "/webhooks/{webhookId}/test", path)

        body = sparse(
            {
                "url": params.get("url"),
                "name": params.get("name"),
                "isActive": params.get("isActive"),
                "filter": params.get("filter") or None,
            }
        )
        return OperationRequest("PATCH", "/webhooks/{webhookId}", path, body=body)

    async def after_response(
        self, operation: str, ctx: ItemContext, params: Mapping[str, Any], data: Any
    ) -> Any:
        if operation == "delete":
            return {"success": True, "webhookId": params["webhookId"]}
        return data
