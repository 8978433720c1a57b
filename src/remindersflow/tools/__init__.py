# LLM function-calling surface for the Reminders nodes.
# Created: 2026-03-02

from remindersflow.tools.protocol import BaseTool, ToolDefinition
from remindersflow.tools.registry import ToolRegistry, build_reminders_registry
from remindersflow.tools.reminders import RemindersNodeTool

__all__ = [
    "BaseTool",
    "RemindersNodeTool",
    "ToolDefinition",
    "ToolRegistry",
    "build_reminders_registry",
]
