"""Concrete query types, one module per JSON-RPC method."""

from nexus_ledger.api.account_nfts import AccountNftsRequest, AccountNftsResponse

__all__ = [
    "AccountNftsRequest",
    "AccountNftsResponse",
]
