# Tests for API v1 nodes router.
# Created: 2026-03-02

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from remindersflow.api.deps import get_client
from remindersflow.api.v1.nodes import router
from remindersflow.errors import RemoteRequestError


@pytest.fixture
def test_app():
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    return app


@pytest.fixture
def use_remote(test_app, fake_client):
    """Install a fake Reminders API client; returns it for request assertions."""

    def install(*responses):
        remote = fake_client(*responses)
        test_app.dependency_overrides[get_client] = lambda: remote
        return remote

    return install


@pytest.fixture
def client(test_app):
    return TestClient(test_app)


class TestExecuteNode:
    """Tests for POST /api/v1/nodes/{node}/execute."""

    def test_get_all_lists(self, client, use_remote):
        remote = use_remote([{"title": "Work"}, {"title": "Home"}])

        resp = client.post("/api/v1/nodes/remindersList/execute", json={"items": [{}]})

        assert resp.status_code == 200
        items = resp.json()["items"]
        assert [i["json"]["title"] for i in items] == ["Work", "Home"]
        assert items[0]["pairedItem"] == {"item": 0}
        assert remote.requests[0].path == "/lists"

    def test_default_items(self, client, use_remote):
        use_remote([])
        resp = client.post("/api/v1/nodes/remindersTask/execute", json={})
        assert resp.status_code == 200
        assert resp.json()["items"] == []

    def test_configured_parameters(self, client, use_remote):
        remote = use_remote({"uuid": "r1", "title": "Buy milk"})

        resp = client.post(
            "/api/v1/nodes/remindersTask/execute",
            json={
                "items": [{"title": "Buy milk"}],
                "parameters": {
                    "operation": "create",
                    "listName": {"mode": "list", "value": "Groceries"},
                },
            },
        )

        assert resp.status_code == 200
        assert resp.json()["items"][0]["json"]["uuid"] == "r1"
        assert remote.requests[0].path == "/lists/Groceries/reminders"

    def test_unknown_node(self, client, use_remote):
        use_remote()
        resp = client.post("/api/v1/nodes/remindersCalendar/execute", json={})
        assert resp.status_code == 404

    def test_missing_field(self, client, use_remote):
        remote = use_remote()
        resp = client.post(
            "/api/v1/nodes/remindersTask/execute",
            json={"items": [{"operation": "create", "listName": "Work"}]},
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "title is required for the create operation"
        assert remote.requests == []

    def test_unknown_operation(self, client, use_remote):
        use_remote()
        resp = client.post(
            "/api/v1/nodes/remindersWebhook/execute",
            json={"items": [{"operation": "frobnicate"}]},
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Unknown operation: frobnicate"

    def test_invalid_field(self, client, use_remote):
        remote = use_remote()
        resp = client.post(
            "/api/v1/nodes/remindersSearch/execute",
            json={"items": [{"query": "milk", "priorityMax": "lots"}]},
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Invalid priorityMax for the search operation: 'lots'"
        assert remote.requests == []

    def test_remote_failure(self, client, use_remote):
        use_remote(RemoteRequestError("Reminders API returned 500 for GET /lists", status_code=500))
        resp = client.post("/api/v1/nodes/remindersList/execute", json={"items": [{}]})
        assert resp.status_code == 502

    def test_continue_on_fail(self, client, use_remote):
        use_remote({"uuid": "b"})
        resp = client.post(
            "/api/v1/nodes/remindersTask/execute",
            json={
                "items": [{"operation": "get"}, {"operation": "get", "reminderId": "b"}],
                "continueOnFail": True,
            },
        )
        assert resp.status_code == 200
        items = resp.json()["items"]
        assert items[0]["json"] == {"error": "reminderId is required for the get operation"}
        assert items[1]["json"]["uuid"] == "b"
        assert items[1]["pairedItem"] == {"item": 1}


class TestNodeSchema:
    """Tests for GET /api/v1/nodes/{node}/schema."""

    def test_schema(self, client):
        resp = client.get("/api/v1/nodes/remindersAiTool/schema")
        assert resp.status_code == 200
        data = resp.json()
        assert "action" in data["properties"]
        assert "action" in data["required"]

    def test_unknown(self, client):
        resp = client.get("/api/v1/nodes/nope/schema")
        assert resp.status_code == 404
