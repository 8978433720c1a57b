# Tests for the Reminders List node.
# Created: 2026-03-02

import pytest

from remindersflow.errors import MissingRequiredFieldError, RemoteRequestError
from remindersflow.nodes import RemindersListNode
from remindersflow.resolver import StaticNodeParameters

LISTS = [
    {"uuid": "L1", "title": "Work", "color": "#ff0000"},
    {"uuid": "L2", "title": "Groceries", "color": "#00ff00"},
]

REMINDERS = [
    {"uuid": f"r{i}", "title": f"Task {i}", "priority": 0, "list": "Work"} for i in range(7)
]


# ---------------------------------------------------------------------------
# getAllLists
# ---------------------------------------------------------------------------


class TestGetAllLists:
    async def test_one_item_per_list(self, fake_client):
        client = fake_client(LISTS)
        node = RemindersListNode(client)

        out = await node.execute([{"operation": "getAllLists"}])

        assert [o.json["title"] for o in out] == ["Work", "Groceries"]
        assert all(o.item_index == 0 for o in out)
        req = client.requests[0]
        assert (req.method, req.path) == ("GET", "/lists")

    async def test_default_operation(self, fake_client):
        client = fake_client(LISTS)
        out = await RemindersListNode(client).execute([{}])
        assert len(out) == 2
        assert client.requests[0].path == "/lists"

    async def test_non_list_response_emits_nothing(self, fake_client):
        out = await RemindersListNode(fake_client({"unexpected": True})).execute([{}])
        assert out == []

    async def test_ai_context(self, fake_client):
        client = fake_client(LISTS, REMINDERS)
        node = RemindersListNode(client)

        out = await node.execute([{"operation": "getAllLists", "includeAIContext": True}])

        assert len(out) == 2
        context = out[0].json["aiContext"]
        assert context["totalLists"] == 2
        assert len(context["sampleReminders"]) == 5
        assert context["sampleReminders"][0]["title"] == "Task 0"
        prefetch = client.requests[1]
        assert prefetch.path == "/reminders"
        assert prefetch.query == {"completed": "false", "limit": "10"}

    async def test_ai_context_from_host_collection(self, fake_client):
        client = fake_client(LISTS, REMINDERS)
        params = StaticNodeParameters({"aiContextOptions": {"includeAIContext": True}})
        out = await RemindersListNode(client, params).execute([{}])
        assert "aiContext" in out[0].json

    async def test_ai_context_prefetch_failure_is_soft(self, fake_client):
        client = fake_client(LISTS, RemoteRequestError("boom", status_code=500))
        out = await RemindersListNode(client).execute([{"includeAIContext": True}])
        assert out[0].json["aiContext"] == {"totalLists": 2, "sampleReminders": []}


# ---------------------------------------------------------------------------
# getListReminders
# ---------------------------------------------------------------------------


class TestGetListReminders:
    async def test_alias_and_default_completed(self, fake_client):
        client = fake_client(REMINDERS[:2])
        node = RemindersListNode(client)

        out = await node.execute([{"operation": "getListReminders", "list": "Work"}])

        assert len(out) == 2
        assert out[0].json["priorityLevel"] == "none"
        req = client.requests[0]
        assert req.path == "/lists/Work"
        assert req.query == {"completed": "false"}

    async def test_include_completed(self, fake_client):
        client = fake_client([])
        await RemindersListNode(client).execute(
            [{"operation": "getListReminders", "listName": "Work", "completed": True}]
        )
        assert client.requests[0].query == {"completed": "true"}

    async def test_list_selector_from_host(self, fake_client):
        client = fake_client([])
        params = StaticNodeParameters(
            {"operation": "getListReminders", "listName": {"mode": "list", "value": "Work/Home"}}
        )
        await RemindersListNode(client, params).execute([{}])
        assert client.requests[0].path == "/lists/Work%2FHome"

    async def test_missing_list_raises_before_send(self, fake_client):
        client = fake_client()
        node = RemindersListNode(client)
        with pytest.raises(MissingRequiredFieldError, match="listName is required"):
            await node.execute([{"operation": "getListReminders"}])
        assert client.requests == []

    async def test_ai_context(self, fake_client):
        client = fake_client(REMINDERS[:3], LISTS)
        node = RemindersListNode(client)

        out = await node.execute(
            [{"operation": "getListReminders", "listName": "Work", "includeAIContext": True}]
        )

        assert len(out) == 3
        assert out[0].json["aiContext"] == {
            "listName": "Work",
            "totalReminders": 3,
            "availableLists": ["Work", "Groceries"],
        }


# ---------------------------------------------------------------------------
# Text booleans and plain-string entries
# ---------------------------------------------------------------------------


class TestTextBooleans:
    @pytest.mark.parametrize("flag, expected", [("false", "false"), ("true", "true")])
    async def test_completed_text(self, fake_client, flag, expected):
        client = fake_client([])
        await RemindersListNode(client).execute(
            [{"operation": "getListReminders", "listName": "Work", "completed": flag}]
        )
        assert client.requests[0].query == {"completed": expected}

    async def test_ai_context_text_false(self, fake_client):
        client = fake_client(LISTS)
        out = await RemindersListNode(client).execute([{"includeAIContext": "false"}])
        assert len(client.requests) == 1
        assert all("aiContext" not in o.json for o in out)


class TestPlainStringEntries:
    async def test_wrapped_without_ai_context(self, fake_client):
        out = await RemindersListNode(fake_client(["Work", "Home"])).execute([{}])
        assert [o.json["value"] for o in out] == ["Work", "Home"]

    async def test_wrapped_with_ai_context(self, fake_client):
        client = fake_client(["Work", "Home"], REMINDERS)
        out = await RemindersListNode(client).execute([{"includeAIContext": True}])

        assert [o.json["value"] for o in out] == ["Work", "Home"]
        assert out[1].json["aiContext"]["totalLists"] == 2
