"""aiohttp transport for the Hue bridge."""
from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
import async_timeout

from .const import REQUEST_TIMEOUT
from .exceptions import HueApiError, HueConnectionError, HueParseError

_LOGGER = logging.getLogger(__name__)


class BridgeTransport:
    """Sends requests below a base URL and returns the parsed JSON body."""

    def __init__(
        self,
        base_url: str,
        session: aiohttp.ClientSession | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize transport."""
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._owns_session = session is None
        self._timeout = timeout

    async def __aenter__(self) -> BridgeTransport:
        """Async context manager entry."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the session if we own it."""
        if self._owns_session and self._session:
            await self._session.close()
            self._session = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str) -> str:
        path = path.strip("/")
        return f"{self._base_url}/{path}" if path else self._base_url

    async def send(
        self,
        method: str,
        path: str,
        body: Any | None = None,
    ) -> Any:
        """Send a request to the bridge.

        Args:
            method: HTTP method (GET, PUT, POST, DELETE)
            path: Path relative to the base URL
            body: Optional JSON payload

        Returns:
            Parsed JSON response

        Raises:
            HueConnectionError: Network error or timeout
            HueParseError: Response body is not JSON
            HueApiError: HTTP error status
        """
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True

        url = self._url(path)
        _LOGGER.debug("%s %s %s", method, url, body if body is not None else "")

        try:
            async with async_timeout.timeout(self._timeout):
                async with self._session.request(method, url, json=body) as response:
                    # The bridge reports most errors with status 200 and an
                    # error entry in the body
                    if response.status >= 400:
                        raise HueApiError(f"HTTP {response.status}", code=response.status)

                    try:
                        return await response.json(content_type=None)
                    except ValueError as err:
                        raise HueParseError(f"Invalid JSON from {url}: {err}") from err

        except asyncio.TimeoutError as err:
            raise HueConnectionError("Request timed out") from err
        except aiohttp.ClientError as err:
            raise HueConnectionError(str(err)) from err
