# Shared fixtures for the Reminders node tests.
# Created: 2026-03-02

import pytest


class FakeClient:
    """Stands in for RemindersClient: records requests, replays canned responses.

    A response that is an exception instance is raised instead of returned.
    Once the queue is empty every call returns ``None``.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    async def send(self, request):
        self.requests.append(request)
        if not self.responses:
            return None
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_client():
    """Factory: ``fake_client(resp1, resp2, ...)``."""
    return FakeClient
