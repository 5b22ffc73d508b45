"""
Request / response contracts shared by every query type.

A query type is a pair:

    - a request, which names its JSON-RPC method and produces a flat body;
    - the paired response, which decodes the node's result body.

Ledger pinning (WithLedgerSpec) and pagination (WithRequestPagination)
are separate capabilities. A request embeds whichever it needs; neither
implies the other.

The outer JSON-RPC envelope (method/params/id) is not part of a request's
body. See JsonRpcClient for the one place that builds it.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Self, TypeVar, runtime_checkable

from nexus_ledger.ledger_spec import ReturnLedgerSpec


@runtime_checkable
class Response(Protocol):
    """A decoded method result."""

    @property
    def ledger_spec(self) -> ReturnLedgerSpec: ...

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Decode a result body.

        Raises:
            DecodeError: If the body does not have the documented shape.
        """
        ...


ResponseT_co = TypeVar("ResponseT_co", bound=Response, covariant=True)


@runtime_checkable
class Request(Protocol[ResponseT_co]):
    """A query that can be sent to a node.

    ``Request[AccountNftsResponse]`` is a request whose result decodes into
    AccountNftsResponse.
    """

    @property
    def response_type(self) -> type[ResponseT_co]:
        """The paired response type (a class attribute on concrete requests)."""
        ...

    def method(self) -> str:
        """JSON-RPC method name used to route the call."""
        ...

    def to_body(self) -> dict[str, Any]:
        """Flat request body (the single element of ``params``)."""
        ...
