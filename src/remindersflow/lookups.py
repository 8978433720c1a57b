# Read-through lookups — list search for interactive selection and
# pre-fetched context for AI agents.
# Created: 2026-03-02
#
# Everything here is fail-soft: a failed fetch yields an empty result.

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from remindersflow.builders import OperationRequest, format_bool, is_valid_uuid
from remindersflow.errors import RemindersError

logger = logging.getLogger(__name__)


def _list_name(entry: Any) -> str:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        return entry.get("name") or entry.get("title") or str(entry)
    return str(entry)


async def search_lists(client, filter_text: str | None = None) -> list[dict[str, str]]:
    """Lists whose name contains ``filter_text`` (case-insensitive).

    Returns:
        ``[{"name", "value", "url"}]``; empty when the API is unreachable.
    """
    try:
        response = await client.send(OperationRequest("GET", "/lists"))
    except RemindersError as e:
        logger.debug("List search failed: %s", e)
        return []

    needle = (filter_text or "").lower()
    results = []
    for entry in response if isinstance(response, list) else []:
        name = _list_name(entry)
        if needle and needle not in name.lower():
            continue
        uuid = entry.get("uuid") if isinstance(entry, dict) else None
        url = f"/lists/{uuid}" if is_valid_uuid(uuid) else f"/lists/{quote(name, safe='')}"
        results.append({"name": name, "value": name, "url": url})
    return results


async def prefetch_reminders(
    client,
    limit: int = 20,
    completed: bool = False,
    include_private_fields: bool = True,
) -> list[dict[str, Any]]:
    """A slim sample of reminders to give an AI agent some context."""
    request = OperationRequest(
        "GET",
        "/reminders",
        query={"completed": format_bool(completed), "limit": str(limit)},
    )
    try:
        response = await client.send(request)
    except RemindersError as e:
        logger.debug("Reminder pre-fetch failed: %s", e)
        return []

    sample = []
    for reminder in response if isinstance(response, list) else []:
        entry = {
            "uuid": reminder.get("uuid"),
            "title": reminder.get("title"),
            "notes": reminder.get("notes"),
            "isCompleted": reminder.get("isCompleted"),
            "priority": reminder.get("priority"),
            "list": reminder.get("list"),
            "dueDate": reminder.get("dueDate"),
        }
        if include_private_fields:
            entry["isSubtask"] = reminder.get("isSubtask") or False
            entry["parentId"] = reminder.get("parentId")
            entry["attachedUrl"] = reminder.get("attachedUrl")
            entry["mailUrl"] = reminder.get("mailUrl")
            entry["hasAttachments"] = bool(reminder.get("attachedUrl") or reminder.get("mailUrl"))
        sample.append(entry)
    return sample


async def prefetch_lists(client) -> list[Any]:
    try:
        response = await client.send(OperationRequest("GET", "/lists"))
    except RemindersError as e:
        logger.debug("List pre-fetch failed: %s", e)
        return []
    return response if isinstance(response, list) else []
