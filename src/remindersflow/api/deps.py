# Shared FastAPI dependencies for the API layer.
# Created: 2026-03-02

from __future__ import annotations

from remindersflow.client import RemindersClient
from remindersflow.config import get_settings


def get_client() -> RemindersClient:
    """Reminders API client built from the current settings.

    Tests swap it out with ``app.dependency_overrides[get_client]``.
    """
    return RemindersClient(get_settings())
