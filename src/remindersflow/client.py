# Reminders API client — HTTP transport for OperationRequest descriptors.
# Created: 2026-03-02
#
# Timeouts and TLS policy come from Settings. No retries: a failed call
# surfaces as RemoteRequestError and the caller decides what to do.

from __future__ import annotations

import logging
from typing import Any

import httpx

from remindersflow.builders import OperationRequest
from remindersflow.config import Settings, get_settings
from remindersflow.errors import RemoteRequestError

logger = logging.getLogger(__name__)


class RemindersClient:
    """HTTP client for the Reminders API server.

    Uses an optional bearer token from settings.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        base_url: str | None = None,
        api_token: str | None = None,
        verify: bool | None = None,
        timeout: float | None = None,
    ):
        settings = settings or get_settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self._api_token = settings.api_token if api_token is None else api_token
        self.verify = settings.verify_tls if verify is None else verify
        self.timeout = settings.request_timeout if timeout is None else timeout

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        return headers

    async def send(self, request: OperationRequest) -> Any:
        """Perform ``request`` and return the decoded response.

        Returns:
            Parsed JSON, the raw text for non-JSON bodies, or ``None`` when
            the server sent no body.

        Raises:
            RemoteRequestError: non-2xx status or transport failure.
        """
        path = request.path
        logger.debug("%s %s", request.method, path)

        async with httpx.AsyncClient(timeout=self.timeout, verify=self.verify) as client:
            try:
                resp = await client.request(
                    request.method,
                    f"{self.base_url}{path}",
                    params=request.query or None,
                    json=request.body,
                    headers=self._headers(),
                )
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                raise RemoteRequestError(
                    f"Reminders API returned {status} for {request.method} {path}",
                    status_code=status,
                    response_body=e.response.text,
                ) from e
            except httpx.HTTPError as e:
                raise RemoteRequestError(
                    f"Reminders API request failed for {request.method} {path}: {e}"
                ) from e

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text
