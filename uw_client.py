"""Async Unusual Whales API client with bearer auth and error normalization."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from config import Settings

logger = logging.getLogger(__name__)


class UnusualWhalesError(Exception):
    """Raised when a request to the Unusual Whales API fails."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class TransportError(UnusualWhalesError):
    """Network failure or timeout; no HTTP status is available."""


class RemoteApiError(UnusualWhalesError):
    """The API answered with a non-2xx status."""


class SerializationError(RemoteApiError):
    """The API answered with a body that is not valid JSON."""


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop None-valued entries. Falsy values such as 0 and False are kept."""
    return {k: v for k, v in (params or {}).items() if v is not None}


def _error_message(resp: httpx.Response) -> str:
    """Best-effort message from an error response body."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    text = resp.text.strip()
    if text:
        return text[:200]
    return resp.reason_phrase or "no response body"


class UnusualWhalesClient:
    """Async HTTP client for the Unusual Whales REST API.

    Features:
    - Bearer token injection from startup settings
    - None-valued query parameters stripped, lists sent as repeated keys
    - One GET per call with a wall-clock timeout; no retries, no cache
    - Transport and HTTP failures normalized into UnusualWhalesError
    """

    def __init__(self, settings: Settings):
        self.base_url = settings.base_url
        self.timeout = settings.timeout
        self._api_key = settings.api_key
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={
                    "Accept": "application/json",
                    "Authorization": f"Bearer {self._api_key}",
                },
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request to the Unusual Whales API.

        Args:
            path: Resolved API path (e.g. "/api/stock/AAPL/info")
            params: Query parameters; None values are omitted

        Returns:
            Parsed JSON response

        Raises:
            TransportError: On timeout or network failure
            RemoteApiError: On non-2xx responses
            SerializationError: When a 2xx body is not JSON
        """
        params = _clean_params(params)
        logger.debug("GET %s params=%s", path, sorted(params))

        # httpx timeouts are per phase; wait_for bounds the whole call, body read included.
        try:
            resp = await asyncio.wait_for(
                self._get_client().get(path, params=params), timeout=self.timeout
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.warning("Timeout after %ss on %s", self.timeout, path)
            raise TransportError(f"Request timed out after {self.timeout:g}s") from e
        except httpx.RequestError as e:
            logger.warning("Request to %s failed: %s", path, e)
            raise TransportError(f"Request failed: {e}") from e

        if not resp.is_success:
            message = _error_message(resp)
            logger.warning("API error %s on %s: %s", resp.status_code, path, message)
            raise RemoteApiError(
                f"API Error ({resp.status_code}): {message}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise SerializationError(
                f"Invalid JSON response ({resp.status_code}): {resp.text[:200]}",
                status_code=resp.status_code,
            ) from e
