# Tests for API v1 lists router.
# Created: 2026-03-02

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from remindersflow.api.deps import get_client
from remindersflow.api.v1.lists import router
from remindersflow.errors import RemoteRequestError

GROCERIES_UUID = "7F3C2A10-1B2C-4D5E-8F90-123456789ABC"


@pytest.fixture
def test_app():
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    return app


@pytest.fixture
def client(test_app):
    return TestClient(test_app)


class TestListSearch:
    """Tests for GET /api/v1/lists/search."""

    def test_filtered(self, test_app, client, fake_client):
        remote = fake_client([{"name": "Groceries", "uuid": GROCERIES_UUID}, {"name": "Work"}])
        test_app.dependency_overrides[get_client] = lambda: remote

        resp = client.get("/api/v1/lists/search", params={"filter": "gro"})

        assert resp.status_code == 200
        assert resp.json()["results"] == [
            {"name": "Groceries", "value": "Groceries", "url": f"/lists/{GROCERIES_UUID}"}
        ]

    def test_unfiltered(self, test_app, client, fake_client):
        remote = fake_client(["Work", "Home"])
        test_app.dependency_overrides[get_client] = lambda: remote

        resp = client.get("/api/v1/lists/search")

        assert [r["name"] for r in resp.json()["results"]] == ["Work", "Home"]

    def test_unreachable_server(self, test_app, client, fake_client):
        remote = fake_client(RemoteRequestError("Reminders API request failed"))
        test_app.dependency_overrides[get_client] = lambda: remote

        resp = client.get("/api/v1/lists/search", params={"filter": "x"})

        assert resp.status_code == 200
        assert resp.json()["results"] == []
