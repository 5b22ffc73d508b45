"""
XRPL JSON-RPC client for typed ledger queries.

Wraps a request body in the JSON-RPC envelope, hands it to an injectable
transport, unwraps ``result`` and decodes it into the request's paired
response type.

Envelope conventions (rippled JSON-RPC):
    - Request: {"method": "...", "params": [<body>], "id": N}
    - Success: {"result": {"status": "success", ...}}
    - Error:   {"result": {"status": "error", "error": "...", ...}}

Errors:
    - Node error results raise NodeError.
    - A missing or non-object ``result`` raises DecodeError at "result".
    - Result bodies that fail decoding raise DecodeError with the field
      path inside the result.
    - Transport exceptions propagate unchanged.

No retry loops. Pagination is followed only by iter_pages(), one request
per page, and stops as soon as the caller stops iterating.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, TypeVar

from nexus_ledger.contracts import Request, Response
from nexus_ledger.errors import DecodeError, NodeError
from nexus_ledger.pagination import WithRequestPagination, next_page_request
from nexus_ledger.transport import HttpxTransport, JsonRpcTransport

logger = logging.getLogger(__name__)

# JSON-RPC request ID counter (simple, no thread-safety needed for async)
_REQUEST_ID = 0


def _next_request_id() -> int:
    global _REQUEST_ID
    _REQUEST_ID += 1
    return _REQUEST_ID


_ResponseT = TypeVar("_ResponseT", bound=Response)
_PagedRequestT = TypeVar("_PagedRequestT", bound=WithRequestPagination)


class JsonRpcClient:
    """Sends typed requests to a node's JSON-RPC endpoint.

    Args:
        url: The JSON-RPC endpoint URL (e.g. "http://localhost:5005").
        transport: Injectable transport for HTTP POST. Defaults to
            HttpxTransport. Pass a FakeTransport for testing.
    """

    def __init__(
        self,
        url: str,
        transport: JsonRpcTransport | None = None,
    ) -> None:
        self._url = url
        self._transport = transport or HttpxTransport()

    @property
    def url(self) -> str:
        """The JSON-RPC endpoint URL."""
        return self._url

    async def request(self, request: Request[_ResponseT]) -> _ResponseT:
        """Send one request and decode the paired response.

        Returns:
            An instance of ``request.response_type``.

        Raises:
            NodeError: The node returned an error result.
            DecodeError: The result does not match the response shape.
        """
        method = request.method()
        payload = {
            "method": method,
            "params": [request.to_body()],
            "id": _next_request_id(),
        }
        logger.debug("sending %s request id=%s to %s", method, payload["id"], self._url)

        response = await self._transport.post_json(self._url, payload)
        result = _extract_result(response, method)
        return request.response_type.from_dict(result)

    async def iter_pages(
        self,
        request: _PagedRequestT,
        max_pages: int | None = None,
    ) -> AsyncIterator[Any]:
        """Yield one decoded response per page until the node stops
        returning a marker.

        The marker of each page is copied verbatim into the next request;
        everything else about ``request`` is kept. ``request`` itself is
        never modified.

        Args:
            request: First-page request (usually with no marker).
            max_pages: Stop after this many pages even if a marker remains.
        """
        current: _PagedRequestT | None = request
        pages = 0
        while current is not None:
            if max_pages is not None and pages >= max_pages:
                logger.debug("stopping pagination after %d pages", pages)
                return
            response = await self.request(current)  # type: ignore[arg-type]
            pages += 1
            yield response
            current = next_page_request(current, response)
            if current is not None:
                logger.debug("following marker to page %d", pages + 1)


# =====================================================================
# Envelope parsing (pure functions, no I/O)
# =====================================================================


def _extract_result(response: dict[str, Any], method: str) -> dict[str, Any]:
    """Unwrap the ``result`` object from a JSON-RPC response.

    Raises:
        NodeError: If the result reports status "error".
        DecodeError: If ``result`` is missing or not an object.
    """
    result = response.get("result")
    if not isinstance(result, dict):
        raise DecodeError("response has no result object", ["result"])

    if result.get("status") == "error":
        error_code = result.get("error_code")
        raise NodeError(
            str(result.get("error", "unknown")),
            error_message=result.get("error_message"),
            error_code=error_code if isinstance(error_code, int) else None,
            request_method=method,
        )

    return result

