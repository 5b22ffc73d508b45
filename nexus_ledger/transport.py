"""
Transport protocol for JSON-RPC calls.

Defines the seam where a concrete HTTP (or WebSocket, or fake)
implementation plugs in. JsonRpcClient depends on this protocol, not on
httpx, so the transport can be swapped without touching decoding.

Concrete implementations:
    - HttpxTransport (default, uses httpx.AsyncClient)
    - FakeTransport (tests, returns canned responses)

No retries, pooling or backoff. Callers that need them wrap or replace
the transport.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

import httpx

from nexus_ledger.wire import decode_body, encode_body

DEFAULT_TIMEOUT = 30.0


@runtime_checkable
class JsonRpcTransport(Protocol):
    """Async transport for JSON-RPC POST requests."""

    async def post_json(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Send a JSON-RPC request and return the parsed response.

        Args:
            url: The JSON-RPC endpoint URL.
            payload: The JSON-RPC request envelope (method, params, id).

        Returns:
            Parsed JSON response as a dict.

        Raises:
            Exception: On transport-level failures (connection refused,
                timeout, TLS error, HTTP status). These propagate to the
                caller unchanged.
        """
        ...


class HttpxTransport:
    """Default transport using httpx.AsyncClient.

    Args:
        timeout: Request timeout in seconds.
        headers: Extra headers sent with every request.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._timeout = timeout
        self._headers = dict(headers or {})

    @property
    def timeout(self) -> float:
        return self._timeout

    async def post_json(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Send JSON-RPC request via httpx.

        Raises:
            httpx.HTTPStatusError: On a non-2xx status.
            httpx.TransportError: On connection or timeout failures.
            DecodeError: If the response body is not a JSON object.
        """
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.post(
                url,
                content=encode_body(payload),
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                    **self._headers,
                },
            )
            response.raise_for_status()
            return decode_body(response.content)
