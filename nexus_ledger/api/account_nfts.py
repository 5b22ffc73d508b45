"""
The ``account_nfts`` method: list the NFTokens owned by an account.

Request body:
    {"account": "r...", "ledger_index": "validated", "limit": 100,
     "marker": <opaque>}

Result body:
    {"account": "r...", "account_nfts": [<NFToken>, ...],
     "ledger_index": 61000000, "ledger_hash": "...", "validated": true,
     "limit": 100, "marker": <opaque>}

Reference:
    https://xrpl.org/account_nfts.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

from nexus_ledger.decoding import (
    LEDGER_FIELDS,
    PAGINATION_FIELDS,
    check_shape,
    compile_schema,
    object_schema,
)
from nexus_ledger.ledger_spec import RetrieveLedgerSpec, ReturnLedgerSpec
from nexus_ledger.nftoken import NFTOKEN_SCHEMA, NFToken
from nexus_ledger.pagination import RequestPagination, ResponsePagination
from nexus_ledger.wire import merge_fields

METHOD = "account_nfts"

ACCOUNT_NFTS_RESULT_SCHEMA: dict[str, Any] = object_schema(
    {
        "account": {"type": "string"},
        "account_nfts": {"type": "array", "items": NFTOKEN_SCHEMA},
        **LEDGER_FIELDS,
        **PAGINATION_FIELDS,
    },
    required=["account_nfts"],
)

_RESULT_VALIDATOR = compile_schema(ACCOUNT_NFTS_RESULT_SCHEMA)


@dataclass(frozen=True)
class AccountNftsResponse:
    """Decoded ``account_nfts`` result.

    ``account_nfts`` keeps the order the node returned.
    """

    account_nfts: tuple[NFToken, ...]
    ledger_spec: ReturnLedgerSpec = field(default_factory=ReturnLedgerSpec)
    pagination: ResponsePagination = field(default_factory=ResponsePagination)
    account: str | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "account_nfts": [token.to_dict() for token in self.account_nfts],
        }
        if self.account is not None:
            body["account"] = self.account
        return merge_fields(
            body,
            self.ledger_spec.to_fields(),
            self.pagination.to_fields(),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AccountNftsResponse:
        """Decode a result body.

        Raises:
            DecodeError: With the path of the first field that does not
                match the documented shape.
        """
        check_shape(_RESULT_VALIDATOR, data)
        return cls(
            account_nfts=tuple(
                NFToken._from_checked(item) for item in data["account_nfts"]
            ),
            ledger_spec=ReturnLedgerSpec.from_fields(data),
            pagination=ResponsePagination.from_fields(data),
            account=data.get("account"),
        )


@dataclass
class AccountNftsRequest:
    """Request for the NFTokens owned by ``account``.

    Attributes:
        account: Address of the account whose tokens are listed.
        ledger_spec: Ledger version to read; node default when unset.
        pagination: Marker and limit for this page.
    """

    response_type: ClassVar[type[AccountNftsResponse]] = AccountNftsResponse

    account: str
    ledger_spec: RetrieveLedgerSpec = field(default_factory=RetrieveLedgerSpec)
    pagination: RequestPagination = field(default_factory=RequestPagination)

    def __post_init__(self) -> None:
        if not isinstance(self.account, str) or not self.account:
            raise ValueError(f"account must be a non-empty str, got: {self.account!r}")

    def method(self) -> str:
        return METHOD

    def to_body(self) -> dict[str, Any]:
        return merge_fields(
            {"account": self.account},
            self.ledger_spec.to_fields(),
            self.pagination.to_fields(),
        )

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> AccountNftsRequest:
        return cls(
            account=body["account"],
            ledger_spec=RetrieveLedgerSpec.from_fields(body),
            pagination=RequestPagination.from_fields(body),
        )
