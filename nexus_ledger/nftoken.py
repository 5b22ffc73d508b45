"""
NFToken value object.

One non-fungible token entry as reported by ``account_nfts``. Tokens are
not ledger objects on their own; they live inside NFTokenPage entries.

Wire names are mapped one by one. The node mixes capitalized field names
with a snake_case one, so no case-conversion rule applies:

    flags    <-> Flags          uint32 bit map
    issuer   <-> Issuer         account address
    token_id <-> NFTokenID      64 hex chars, the natural key
    taxon    <-> NFTokenTaxon   uint32, kept exactly as sent
    uri      <-> URI            hex, optional
    serial   <-> nft_serial     uint32, unique per issuer only

Round-trip rules:
    - Hex strings are kept as strings. Case and leading zeros survive.
    - ``uri`` is None when URI is absent and "" when it is present but
      empty; to_dict() reproduces whichever was read.
    - Flags and taxon are not interpreted. has_flag() is a convenience
      bit test only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from nexus_ledger.decoding import (
    HEX,
    HEX_256,
    UINT32,
    UINT32_MAX,
    check_shape,
    compile_schema,
    object_schema,
)
from nexus_ledger.errors import PathElement

# Flag bits defined by the ledger protocol for NFToken.Flags.
LSF_BURNABLE = 0x0001
LSF_ONLY_XRP = 0x0002
LSF_TRUSTLINE = 0x0004
LSF_TRANSFERABLE = 0x0008

# Python attribute -> wire field name.
WIRE_NAMES: dict[str, str] = {
    "flags": "Flags",
    "issuer": "Issuer",
    "token_id": "NFTokenID",
    "taxon": "NFTokenTaxon",
    "uri": "URI",
    "serial": "nft_serial",
}

NFTOKEN_SCHEMA: dict[str, Any] = object_schema(
    {
        WIRE_NAMES["flags"]: UINT32,
        WIRE_NAMES["issuer"]: {"type": "string"},
        WIRE_NAMES["token_id"]: HEX_256,
        WIRE_NAMES["taxon"]: UINT32,
        WIRE_NAMES["uri"]: HEX,
        WIRE_NAMES["serial"]: UINT32,
    },
    required=[
        WIRE_NAMES["flags"],
        WIRE_NAMES["issuer"],
        WIRE_NAMES["token_id"],
        WIRE_NAMES["taxon"],
        WIRE_NAMES["serial"],
    ],
)

_NFTOKEN_VALIDATOR = compile_schema(NFTOKEN_SCHEMA)

_TOKEN_ID_RE = re.compile(r"[0-9A-Fa-f]{64}")
_HEX_RE = re.compile(r"[0-9A-Fa-f]*")


# =========================================================================
# Validation helpers
# =========================================================================


def _validate_uint32(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got: {value!r}")
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"{name} must be in 0..{UINT32_MAX}, got: {value}")


def _validate_token_id(value: str) -> None:
    if not isinstance(value, str) or not _TOKEN_ID_RE.fullmatch(value):
        raise ValueError(f"token_id must be 64 hex chars, got: {value!r}")


def _validate_uri(value: str) -> None:
    if not isinstance(value, str) or not _HEX_RE.fullmatch(value):
        raise ValueError(f"uri must be a hex string, got: {value!r}")


@dataclass(frozen=True)
class NFToken:
    """A single non-fungible token.

    Attributes:
        flags: Bit map of flags enabled for this token.
        issuer: Account that issued the token.
        token_id: Unique identifier, in hexadecimal.
        taxon: Token taxon as it appears on the wire. Tokens sharing a
            taxon may be instances of one series.
        serial: Sequence number of the token, unique for its issuer.
        uri: URI data in hexadecimal, or None when the token has none.
    """

    flags: int
    issuer: str
    token_id: str
    taxon: int
    serial: int
    uri: str | None = None

    def __post_init__(self) -> None:
        _validate_uint32("flags", self.flags)
        if not isinstance(self.issuer, str):
            raise ValueError(f"issuer must be a str, got: {self.issuer!r}")
        _validate_token_id(self.token_id)
        _validate_uint32("taxon", self.taxon)
        _validate_uint32("serial", self.serial)
        if self.uri is not None:
            _validate_uri(self.uri)

    def has_flag(self, mask: int) -> bool:
        return self.flags & mask == mask

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        """Wire representation, field names as the node sends them."""
        result: dict[str, Any] = {
            WIRE_NAMES["flags"]: self.flags,
            WIRE_NAMES["issuer"]: self.issuer,
            WIRE_NAMES["token_id"]: self.token_id,
            WIRE_NAMES["taxon"]: self.taxon,
            WIRE_NAMES["serial"]: self.serial,
        }
        if self.uri is not None:
            result[WIRE_NAMES["uri"]] = self.uri
        return result

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        path: Sequence[PathElement] = (),
    ) -> NFToken:
        """Decode a wire object.

        Args:
            data: The token object from the node.
            path: Location of ``data`` in the enclosing body, used in
                error paths (e.g. ``("account_nfts", 3)``).

        Raises:
            DecodeError: On a missing required field, a wrong type, an
                out-of-range number, or malformed hex.
        """
        check_shape(_NFTOKEN_VALIDATOR, data, path)
        return cls._from_checked(data)

    @classmethod
    def _from_checked(cls, data: Mapping[str, Any]) -> NFToken:
        return cls(
            flags=data[WIRE_NAMES["flags"]],
            issuer=data[WIRE_NAMES["issuer"]],
            token_id=data[WIRE_NAMES["token_id"]],
            taxon=data[WIRE_NAMES["taxon"]],
            serial=data[WIRE_NAMES["serial"]],
            uri=data.get(WIRE_NAMES["uri"]),
        )
