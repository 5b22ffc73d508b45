"""
Typed ledger queries for XRPL-style nodes.

Public API:

    Ledger version (request and response side):
        - ``RetrieveLedgerSpec``, ``LedgerShortcut``, ``pin_ledger()``
        - ``ReturnLedgerSpec``
        - ``WithLedgerSpec``, ``WithReturnLedgerSpec`` capabilities

    Pagination:
        - ``RequestPagination``, ``ResponsePagination``
        - ``next_page_request()``
        - ``WithRequestPagination``, ``WithResponsePagination`` capabilities

    Contracts:
        - ``Request``, ``Response``

    Value objects:
        - ``NFToken``

    Queries:
        - ``AccountNftsRequest``, ``AccountNftsResponse``

    Errors:
        - ``DecodeError``, ``LedgerSpecConflictError``,
          ``FieldCollisionError``, ``NodeError``

    Network seam:
        - ``JsonRpcClient``, ``JsonRpcTransport``, ``HttpxTransport``
"""

from nexus_ledger.api.account_nfts import AccountNftsRequest, AccountNftsResponse
from nexus_ledger.client import JsonRpcClient
from nexus_ledger.contracts import Request, Response
from nexus_ledger.errors import (
    DecodeError,
    FieldCollisionError,
    LedgerSpecConflictError,
    NodeError,
)
from nexus_ledger.ledger_spec import (
    LedgerShortcut,
    RetrieveLedgerSpec,
    ReturnLedgerSpec,
    WithLedgerSpec,
    WithReturnLedgerSpec,
    pin_ledger,
)
from nexus_ledger.nftoken import NFToken
from nexus_ledger.pagination import (
    RequestPagination,
    ResponsePagination,
    WithRequestPagination,
    WithResponsePagination,
    next_page_request,
)
from nexus_ledger.transport import HttpxTransport, JsonRpcTransport

__version__ = "0.1.0"

__all__ = [
    "AccountNftsRequest",
    "AccountNftsResponse",
    "DecodeError",
    "FieldCollisionError",
    "HttpxTransport",
    "JsonRpcClient",
    "JsonRpcTransport",
    "LedgerShortcut",
    "LedgerSpecConflictError",
    "NFToken",
    "NodeError",
    "Request",
    "RequestPagination",
    "Response",
    "ResponsePagination",
    "RetrieveLedgerSpec",
    "ReturnLedgerSpec",
    "WithLedgerSpec",
    "WithRequestPagination",
    "WithResponsePagination",
    "WithReturnLedgerSpec",
    "next_page_request",
    "pin_ledger",
]
