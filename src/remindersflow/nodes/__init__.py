# Reminders nodes — one class per resource module.
# Created: 2026-03-02

from remindersflow.nodes.ai_tool import RemindersAiToolNode
from remindersflow.nodes.base import BaseNode, OutputItem
from remindersflow.nodes.lists import RemindersListNode
from remindersflow.nodes.search import RemindersSearchNode
from remindersflow.nodes.tasks import RemindersTaskNode
from remindersflow.nodes.webhooks import RemindersWebhookNode, build_webhook_filter

NODE_TYPES: dict[str, type[BaseNode]] = {
    node.name: node
    for node in (
        RemindersListNode,
        RemindersTaskNode,
        RemindersSearchNode,
        RemindersWebhookNode,
        RemindersAiToolNode,
    )
}


def get_node_class(name: str) -> type[BaseNode] | None:
    """Look up a node class by its type name (e.g. ``remindersTask``)."""
    return NODE_TYPES.get(name)


__all__ = [
    "NODE_TYPES",
    "BaseNode",
    "OutputItem",
    "RemindersAiToolNode",
    "RemindersListNode",
    "RemindersSearchNode",
    "RemindersTaskNode",
    "RemindersWebhookNode",
    "build_webhook_filter",
    "get_node_class",
]
