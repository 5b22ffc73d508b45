"""
Cursor-based pagination.

A paginated query is consumed page by page:

    1. Send the request with no marker and the desired limit.
    2. If the response carries a marker, copy it verbatim into the next
       request's pagination and send again.
    3. Stop when a response carries no marker.

The marker is opaque. It is whatever JSON value the node returned and is
passed back unchanged; this layer never builds, parses, or edits one. A
hand-made marker cannot be detected here, the node is the authority that
rejects it.

Records are kept in the order the node emits them. No reordering or
deduplication happens across page boundaries.

Wire form (flattened into the body, both keys optional):
    {"limit": 50, "marker": <opaque>}
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Mapping, Protocol, TypeVar, runtime_checkable


def _validate_limit(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"limit must be an int, got: {value!r}")
    if value < 0:
        raise ValueError(f"limit must be >= 0, got: {value}")


# =========================================================================
# Request / response pagination
# =========================================================================


@dataclass(frozen=True)
class RequestPagination:
    """Pagination parameters sent with a request.

    Attributes:
        marker: Continuation value from a previous response, or None for
            the first page.
        limit: Maximum number of records to return, or None for the node
            default.
    """

    marker: Any = None
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None:
            _validate_limit(self.limit)

    @classmethod
    def resume(
        cls,
        response_pagination: ResponsePagination,
        limit: int | None = None,
    ) -> RequestPagination:
        """Pagination for the page after ``response_pagination``."""
        return cls(marker=response_pagination.marker, limit=limit)

    def to_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if self.limit is not None:
            fields["limit"] = self.limit
        if self.marker is not None:
            fields["marker"] = self.marker
        return fields

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> RequestPagination:
        return cls(marker=fields.get("marker"), limit=fields.get("limit"))


@dataclass(frozen=True)
class ResponsePagination:
    """Pagination state echoed by the node.

    Attributes:
        limit: Limit the node actually applied, when reported.
        marker: Continuation value for the next page. None means the result
            set is exhausted.
    """

    limit: int | None = None
    marker: Any = None

    @property
    def has_more(self) -> bool:
        return self.marker is not None

    def to_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if self.limit is not None:
            fields["limit"] = self.limit
        if self.marker is not None:
            fields["marker"] = self.marker
        return fields

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> ResponsePagination:
        """Build from a response body whose shape was already checked."""
        return cls(limit=fields.get("limit"), marker=fields.get("marker"))


# =========================================================================
# Capabilities
# =========================================================================


@runtime_checkable
class WithRequestPagination(Protocol):
    """A request whose result set may be split across calls."""

    pagination: RequestPagination


@runtime_checkable
class WithResponsePagination(Protocol):
    """A response that may carry a continuation marker."""

    @property
    def pagination(self) -> ResponsePagination: ...


_PagedT = TypeVar("_PagedT", bound=WithRequestPagination)


def next_page_request(
    request: _PagedT,
    response: WithResponsePagination,
) -> _PagedT | None:
    """Build the follow-up request for the page after ``response``.

    The copy keeps everything from ``request`` (account, ledger spec,
    limit) and only swaps in the response marker. The original request is
    not modified.

    Returns:
        The next request, or None when ``response`` has no marker.
    """
    if not response.pagination.has_more:
        return None
    follow_up = copy.copy(request)
    follow_up.pagination = RequestPagination.resume(
        response.pagination,
        limit=request.pagination.limit,
    )
    return follow_up
