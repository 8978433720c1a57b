# Response enrichment — derived convenience fields on reminder objects.
# Created: 2026-03-02

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any


def priority_level_name(priority: Any) -> str:
    """Bucket a 0-9 priority: 0 none, 1-3 low, 4-6 medium, 7-9 high."""
    if isinstance(priority, bool) or not isinstance(priority, int):
        return "unknown"
    if priority == 0:
        return "none"
    if 1 <= priority <= 3:
        return "low"
    if 4 <= priority <= 6:
        return "medium"
    if 7 <= priority <= 9:
        return "high"
    return "unknown"


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO-8601 string; naive values are taken as UTC."""
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def is_overdue(due_date: Any, now: datetime | None = None) -> bool:
    # Completed reminders are not excluded.
    due = parse_datetime(due_date)
    if due is None:
        return False
    return due < (now or datetime.now(UTC))


def enrich_reminder(reminder: Mapping[str, Any], now: datetime | None = None) -> dict[str, Any]:
    """Copy ``reminder`` and add hasAttachments, priorityLevel, isOverdue,
    hasParent and hasSubtasks.

    Derived fields are computed from the raw fields only, so enriching twice
    gives the same result. ``hasSubtasks`` is always ``False``; the API does
    not report children on the parent.
    """
    return {
        **reminder,
        "hasAttachments": bool(reminder.get("attachedUrl") or reminder.get("mailUrl")),
        "priorityLevel": priority_level_name(reminder.get("priority")),
        "isOverdue": is_overdue(reminder.get("dueDate"), now),
        "hasParent": bool(reminder.get("parentId")),
        "hasSubtasks": False,
    }
