# Tests for the Reminders HTTP client.
# Created: 2026-03-02

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from remindersflow.builders import OperationRequest
from remindersflow.client import RemindersClient
from remindersflow.config import Settings
from remindersflow.errors import RemoteRequestError


def _response(status: int, **kwargs) -> httpx.Response:
    return httpx.Response(status, request=httpx.Request("GET", "https://rem.local"), **kwargs)


@pytest.fixture
def settings():
    return Settings(base_url="https://rem.local/", api_token="tok", request_timeout=5.0)


def _mock_http(mock_client_cls, response=None, side_effect=None):
    mock_client = AsyncMock()
    if side_effect is not None:
        mock_client.request.side_effect = side_effect
    else:
        mock_client.request.return_value = response
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    mock_client_cls.return_value = mock_client
    return mock_client


class TestRemindersClient:
    def test_settings_applied(self, settings):
        client = RemindersClient(settings)
        assert client.base_url == "https://rem.local"
        assert client.timeout == 5.0
        assert client.verify is True

    def test_overrides(self, settings):
        client = RemindersClient(settings, base_url="http://other/", verify=False, timeout=1)
        assert client.base_url == "http://other"
        assert client.verify is False
        assert client.timeout == 1

    def test_headers(self, settings):
        headers = RemindersClient(settings)._headers()
        assert headers["Authorization"] == "Bearer tok"
        assert headers["Accept"] == "application/json"

    def test_no_token_no_auth_header(self, settings):
        headers = RemindersClient(settings, api_token="")._headers()
        assert "Authorization" not in headers

    async def test_send_json(self, settings):
        request = OperationRequest(
            "GET", "/lists/{listName}", {"listName": "Work Stuff"}, {"completed": "false"}
        )
        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = _mock_http(mock_client_cls, _response(200, json=[{"uuid": "a"}]))
            result = await RemindersClient(settings).send(request)

        assert result == [{"uuid": "a"}]
        mock_client_cls.assert_called_once_with(timeout=5.0, verify=True)
        args, kwargs = mock_client.request.call_args
        assert args == ("GET", "https://rem.local/lists/Work%20Stuff")
        assert kwargs["params"] == {"completed": "false"}
        assert kwargs["json"] is None
        assert kwargs["headers"]["Authorization"] == "Bearer tok"

    async def test_send_body(self, settings):
        request = OperationRequest("POST", "/webhooks", body={"url": "https://hook"})
        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = _mock_http(mock_client_cls, _response(201, json={"id": "w1"}))
            result = await RemindersClient(settings).send(request)

        assert result == {"id": "w1"}
        _, kwargs = mock_client.request.call_args
        assert kwargs["params"] is None
        assert kwargs["json"] == {"url": "https://hook"}

    async def test_empty_body(self, settings):
        with patch("httpx.AsyncClient") as mock_client_cls:
            _mock_http(mock_client_cls, _response(204))
            result = await RemindersClient(settings).send(
                OperationRequest("DELETE", "/reminders/{id}", {"id": "a"})
            )
        assert result is None

    async def test_text_body(self, settings):
        with patch("httpx.AsyncClient") as mock_client_cls:
            _mock_http(mock_client_cls, _response(200, text="ok"))
            result = await RemindersClient(settings).send(OperationRequest("GET", "/health"))
        assert result == "ok"

    async def test_http_status_error(self, settings):
        with patch("httpx.AsyncClient") as mock_client_cls:
            _mock_http(mock_client_cls, _response(404, text="list not found"))
            with pytest.raises(RemoteRequestError) as exc:
                await RemindersClient(settings).send(
                    OperationRequest("GET", "/lists/{n}", {"n": "Nope"})
                )

        assert exc.value.status_code == 404
        assert exc.value.response_body == "list not found"
        assert "404" in str(exc.value)
        assert "/lists/Nope" in str(exc.value)

    async def test_transport_error(self, settings):
        with patch("httpx.AsyncClient") as mock_client_cls:
            _mock_http(mock_client_cls, side_effect=httpx.ConnectError("connection refused"))
            with pytest.raises(RemoteRequestError) as exc:
                await RemindersClient(settings).send(OperationRequest("GET", "/lists"))

        assert exc.value.status_code is None
        assert "connection refused" in str(exc.value)
