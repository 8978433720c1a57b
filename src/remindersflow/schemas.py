# Input schemas — the fields an AI agent may populate for each node.
# Created: 2026-03-02
#
# Alias fields sit next to their canonical field; the resolver maps them back.

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

PriorityWord = Literal["none", "low", "medium", "high"]
StringOrList = str | list[str]


class NodeInput(BaseModel):
    """Common base: unknown keys are kept so nested ``params`` still resolve."""

    model_config = ConfigDict(extra="allow")


class ListsInput(NodeInput):
    operation: Literal["getAllLists", "getListReminders"] = Field(
        description="The operation to perform"
    )

    # List identification (for getListReminders operation)
    listName: str | None = Field(None, description="Name or UUID of the list to get reminders from")
    list: str | None = Field(None, description="Alias for listName")
    listUUID: str | None = Field(None, description="Alias for listName - UUID of the list")

    # Query options
    includeCompleted: bool | None = Field(
        None, description="Whether to include completed reminders in results"
    )
    completed: bool | None = Field(None, description="Alias for includeCompleted")

    includeAIContext: bool | None = Field(
        None, description="Include pre-fetched reminders for AI context"
    )


class TasksInput(NodeInput):
    operation: Literal[
        "getAll", "get", "create", "update", "delete", "complete", "createSubtask"
    ] = Field(description="The operation to perform on reminders")

    listName: str | None = Field(
        None, description="Name or UUID of the reminder list (for create operations)"
    )
    reminderId: str | None = Field(
        None,
        description="UUID of the specific reminder (for get, update, delete, complete operations)",
    )

    title: str | None = Field(None, description="Title/name of the reminder")
    notes: str | None = Field(None, description="Additional notes or description for the reminder")

    dueDate: str | None = Field(
        None, description="Due date in ISO format (e.g., 2024-01-15T10:00:00Z)"
    )
    startDate: str | None = Field(None, description="Start date in ISO format")

    priority: PriorityWord | None = Field(None, description="Priority level of the reminder")
    isCompleted: bool | None = Field(None, description="Whether the reminder is completed")

    # Private API features
    parentId: str | None = Field(
        None, description="UUID of parent reminder (for creating subtasks)"
    )
    attachedUrl: str | None = Field(None, description="URL to attach to the reminder")

    includeCompleted: bool | None = Field(
        None, description="Whether to include completed reminders in results"
    )


class SearchInput(NodeInput):
    operation: Literal["search"] | None = Field(
        "search", description='Search operation (always "search")'
    )

    query: str | None = Field(None, description="Text to search for in reminder titles and notes")
    search: str | None = Field(None, description="Alias for query - text to search for")
    text: str | None = Field(None, description="Alias for query - text to search for")

    reminderId: str | None = Field(None, description="Search for a specific reminder by UUID")
    uuid: str | None = Field(None, description="Alias for reminderId - reminder UUID to find")
    reminderUUID: str | None = Field(
        None, description="Alias for reminderId - reminder UUID to find"
    )

    lists: StringOrList | None = Field(
        None, description="List names to search in (comma-separated string or array)"
    )
    listNames: StringOrList | None = Field(
        None, description="Alias for lists - list names to search in"
    )
    listUUIDs: StringOrList | None = Field(
        None, description="List UUIDs to search in (comma-separated string or array)"
    )

    completed: Literal["all", "true", "false", "incomplete", "complete"] | None = Field(
        "false", description="Filter by completion status (defaults to incomplete only)"
    )

    dueBefore: str | None = Field(
        None, description="Find reminders due before this date (ISO format)"
    )
    dueAfter: str | None = Field(
        None, description="Find reminders due after this date (ISO format)"
    )
    dueBy: str | None = Field(None, description="Alias for dueBefore")
    dueFrom: str | None = Field(None, description="Alias for dueAfter")
    modifiedAfter: str | None = Field(
        None, description="Find reminders modified after this date (ISO format)"
    )
    createdAfter: str | None = Field(
        None, description="Find reminders created after this date (ISO format)"
    )

    hasNotes: bool | None = Field(
        False, description="Filter by presence of notes (defaults to all)"
    )
    hasDueDate: bool | None = Field(
        False, description="Filter by presence of due date (defaults to all)"
    )

    # Private API filters
    isSubtask: bool | None = Field(False, description="Filter for subtasks only (defaults to all)")
    hasAttachedUrl: bool | None = Field(
        False, description="Filter for reminders with URL attachments (defaults to all)"
    )
    hasMailUrl: bool | None = Field(
        False, description="Filter for reminders with mail links (defaults to all)"
    )

    priority: PriorityWord | None = Field(
        None, description="Exact priority level to match (none=0, low=1, medium=5, high=9)"
    )
    priorityMin: int | None = Field(
        0, ge=0, le=9, description="Minimum priority level (0-9, defaults to 0)"
    )
    priorityMax: int | None = Field(
        9, ge=0, le=9, description="Maximum priority level (0-9, defaults to 9)"
    )
    minPriority: int | None = Field(None, ge=0, le=9, description="Alias for priorityMin")
    maxPriority: int | None = Field(None, ge=0, le=9, description="Alias for priorityMax")

    sortBy: Literal[
        "title", "dueDate", "creationDate", "lastModified", "priority", "list"
    ] | None = Field(
        "lastModified", description="Field to sort results by (defaults to lastModified)"
    )
    sortOrder: Literal["asc", "desc"] | None = Field(
        "desc", description="Sort direction (defaults to desc)"
    )
    limit: int | None = Field(
        50, ge=1, le=1000, description="Maximum number of results to return (defaults to 50)"
    )
    count: int | None = Field(None, ge=1, le=1000, description="Alias for limit")
    maxResults: int | None = Field(None, ge=1, le=1000, description="Alias for limit")

    includeAIContext: bool | None = Field(
        False, description="Include pre-fetched reminders for AI context"
    )


class WebhooksInput(NodeInput):
    operation: Literal["list", "get", "create", "update", "delete", "test"] = Field(
        description="The webhook operation to perform"
    )

    webhookId: str | None = Field(
        None, description="UUID of the webhook (for get, update, delete, test operations)"
    )

    url: str | None = Field(None, description="Webhook URL endpoint to receive notifications")
    name: str | None = Field(None, description="Name/description for the webhook")
    isActive: bool | None = Field(None, description="Whether the webhook is active")

    listNames: StringOrList | None = Field(
        None, description="List names to monitor (comma-separated string or array)"
    )
    lists: StringOrList | None = Field(None, description="Alias for listNames")
    listUUIDs: StringOrList | None = Field(
        None, description="List UUIDs to monitor (comma-separated string or array)"
    )
    listIds: StringOrList | None = Field(None, description="Alias for listUUIDs")

    completed: Literal["all", "complete", "incomplete"] | None = Field(
        None, description="Completion status filter for webhook notifications"
    )

    priorityLevels: int | list[int] | None = Field(
        None, description="Priority levels to monitor (0-9, single number or array)"
    )
    priorities: int | list[int] | None = Field(None, description="Alias for priorityLevels")

    hasQuery: str | None = Field(
        None, description="Text that must be present in reminder title/notes"
    )
    textFilter: str | None = Field(None, description="Alias for hasQuery")
    query: str | None = Field(None, description="Alias for hasQuery")


class WebhookConfig(BaseModel):
    url: str = Field(description="Webhook URL endpoint")
    name: str | None = Field(None, description="Webhook name (defaults to 'AI Tool Webhook')")
    lists: list[str] | None = Field(None, description="List names to monitor")


class AiToolInput(NodeInput):
    action: Literal[
        "get_lists",
        "get_reminders",
        "create_reminder",
        "update_reminder",
        "delete_reminder",
        "search_reminders",
        "complete_reminder",
        "setup_webhook",
    ] = Field(description="The reminders action to perform")

    list_name: str | None = Field(None, description="Name or UUID of the reminder list")
    include_completed: bool | None = Field(
        None, description="Whether to include completed reminders"
    )

    uuid: str | None = Field(
        None, description="UUID of the reminder (update, delete, complete)"
    )
    title: str | None = Field(None, description="Title of the reminder")
    notes: str | None = Field(None, description="Notes for the reminder")
    due_date: str | None = Field(None, description="Due date in ISO format")
    priority: PriorityWord | int | None = Field(
        None, description="Priority: none, low, medium, high (or 0-9)"
    )
    is_completed: bool | None = Field(None, description="Completion state (update_reminder)")
    completed: bool | None = Field(
        None, description="false to mark a reminder incomplete (complete_reminder)"
    )

    search_query: str | None = Field(None, description="Text to search for")
    filters: dict[str, Any] | None = Field(
        None, description="Extra search filters passed to the search endpoint"
    )

    webhook_config: WebhookConfig | None = Field(
        None, description="Webhook settings (setup_webhook)"
    )
