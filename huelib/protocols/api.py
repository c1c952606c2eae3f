"""Transport protocol interface.

The resource client depends only on this contract, so tests and alternative
HTTP stacks can stand in for the aiohttp transport.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IBridgeTransport(Protocol):
    """Protocol for sending one request to a bridge."""

    async def send(
        self,
        method: str,
        path: str,
        body: Any | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method (GET, PUT, POST, DELETE).
            path: Path relative to the transport's base URL, e.g. "lights/1/state".
            body: Optional JSON-serializable request body.

        Returns:
            Parsed JSON value.

        Raises:
            HueConnectionError: Network error or timeout.
            HueParseError: Body is not valid JSON.
        """
        ...

    async def close(self) -> None:
        """Release resources held by the transport."""
        ...
