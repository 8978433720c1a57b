# Tool protocol — string-in, string-out tools for LLM function calling.
# Created: 2026-03-02

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class ToolDefinition:
    """Name, description and JSON-schema parameters of a callable tool."""

    name: str
    description: str
    parameters: dict[str, Any]  # JSON Schema

    def to_openai_schema(self) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    def to_anthropic_schema(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.parameters,
        }


class BaseTool(ABC):
    """A tool takes keyword parameters and returns a string result.

    Reminders tools return JSON text: the list of output records of one node
    run, with failures as error records rather than exceptions.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def description(self) -> str: ...

    @property
    def parameters(self) -> dict[str, Any]:
        """JSON schema of the keyword arguments ``execute`` accepts."""
        return {"type": "object", "properties": {}, "required": []}

    @property
    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters=self.parameters,
        )

    @abstractmethod
    async def execute(self, **params: Any) -> str:
        """Run the tool; the arguments are one input item, the result is JSON text."""
