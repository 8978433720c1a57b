# Error taxonomy for the Reminders nodes.
# Created: 2026-03-02

from __future__ import annotations

from typing import Any


class RemindersError(Exception):
    """Base class for every error raised by this package."""


class MissingRequiredFieldError(RemindersError):
    """A required field resolved to nothing; the request was never sent."""

    def __init__(self, field: str, operation: str):
        self.field = field
        self.operation = operation
        super().__init__(f"{field} is required for the {operation} operation")


class UnknownOperationError(RemindersError):
    """The operation name is not supported by the resource module."""

    def __init__(self, operation: Any):
        self.operation = operation
        super().__init__(f"Unknown operation: {operation}")


class RemoteRequestError(RemindersError):
    """The Reminders API answered with a non-2xx status or could not be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)


class InvalidFieldError(RemindersError):
    """A field resolved to a value the operation cannot use; the request was never sent."""

    def __init__(self, field: str, value: Any, operation: str):
        self.field = field
        self.value = value
        self.operation = operation
        super().__init__(f"Invalid {field} for the {operation} operation: {value!r}")
