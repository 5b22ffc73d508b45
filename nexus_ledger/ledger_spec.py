"""
Ledger version specifiers.

Request side (RetrieveLedgerSpec):
    Pins a query to one ledger version, chosen by exactly one of:
        - shortcut: "validated", "closed" or "current"
        - index: ledger sequence number (non-negative)
        - hash: 64 hex chars, case preserved

    Wire form (flattened into the request body, no wrapper object):
        shortcut -> {"ledger_index": "validated"}
        index    -> {"ledger_index": 61000000}
        hash     -> {"ledger_hash": "E6DB7365..."}
        unset    -> {}   (node picks its default)

    Setting more than one variant fails at construction time with
    LedgerSpecConflictError. No precedence order is applied.

Response side (ReturnLedgerSpec):
    The node's echo of the ledger it actually read: ledger_index or
    ledger_current_index, ledger_hash, and the validated flag. Read-only,
    built only while decoding a response.

Capabilities:
    WithLedgerSpec is satisfied by any request that embeds a
    RetrieveLedgerSpec as ``ledger_spec``; reading the attribute is the read
    accessor, assigning it (or calling pin_ledger) is the mutable one.
    WithReturnLedgerSpec is the read-only response counterpart.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Mapping, Protocol, TypeVar, runtime_checkable

from nexus_ledger.errors import LedgerSpecConflictError

_LEDGER_HASH_RE = re.compile(r"[0-9A-Fa-f]{64}")


class LedgerShortcut(StrEnum):
    """Symbolic references to well-known ledger states."""

    VALIDATED = "validated"
    CLOSED = "closed"
    CURRENT = "current"


# =========================================================================
# Validation helpers
# =========================================================================


def _validate_index(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"ledger index must be an int, got: {value!r}")
    if value < 0:
        raise ValueError(f"ledger index must be >= 0, got: {value}")


def _validate_hash(value: str) -> None:
    if not isinstance(value, str) or not _LEDGER_HASH_RE.fullmatch(value):
        raise ValueError(f"ledger hash must be 64 hex chars, got: {value!r}")


# =========================================================================
# RetrieveLedgerSpec
# =========================================================================


@dataclass(frozen=True)
class RetrieveLedgerSpec:
    """Which ledger version a request reads from. At most one field is set."""

    shortcut: LedgerShortcut | None = None
    index: int | None = None
    hash: str | None = None

    def __post_init__(self) -> None:
        chosen = [
            name
            for name in ("shortcut", "index", "hash")
            if getattr(self, name) is not None
        ]
        if len(chosen) > 1:
            raise LedgerSpecConflictError(chosen)
        if self.shortcut is not None:
            # Normalize plain strings ("validated") to the enum.
            object.__setattr__(self, "shortcut", LedgerShortcut(self.shortcut))
        if self.index is not None:
            _validate_index(self.index)
        if self.hash is not None:
            _validate_hash(self.hash)

    @classmethod
    def at_shortcut(cls, shortcut: LedgerShortcut | str) -> RetrieveLedgerSpec:
        return cls(shortcut=LedgerShortcut(shortcut))

    @classmethod
    def validated(cls) -> RetrieveLedgerSpec:
        return cls(shortcut=LedgerShortcut.VALIDATED)

    @classmethod
    def at_index(cls, index: int) -> RetrieveLedgerSpec:
        return cls(index=index)

    @classmethod
    def at_hash(cls, ledger_hash: str) -> RetrieveLedgerSpec:
        return cls(hash=ledger_hash)

    @property
    def is_default(self) -> bool:
        """True when no variant is set and the node chooses the ledger."""
        return self.shortcut is None and self.index is None and self.hash is None

    # --- Serialization ---

    def to_fields(self) -> dict[str, Any]:
        """Top-level body fields for this spec (empty when unset)."""
        if self.shortcut is not None:
            return {"ledger_index": self.shortcut.value}
        if self.index is not None:
            return {"ledger_index": self.index}
        if self.hash is not None:
            return {"ledger_hash": self.hash}
        return {}

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> RetrieveLedgerSpec:
        """Read the spec back out of a flattened request body.

        Raises:
            LedgerSpecConflictError: If both ledger_index and ledger_hash
                are present.
            ValueError: If a present field has an invalid value.
        """
        ledger_index = fields.get("ledger_index")
        ledger_hash = fields.get("ledger_hash")
        if ledger_index is not None and ledger_hash is not None:
            raise LedgerSpecConflictError(["ledger_index", "ledger_hash"])
        if isinstance(ledger_index, str):
            return cls(shortcut=LedgerShortcut(ledger_index))
        if ledger_index is not None:
            return cls(index=ledger_index)
        if ledger_hash is not None:
            return cls(hash=ledger_hash)
        return cls()


# =========================================================================
# ReturnLedgerSpec
# =========================================================================


@dataclass(frozen=True)
class ReturnLedgerSpec:
    """The ledger version the node actually used to answer a query.

    Attributes:
        ledger_index: Sequence of the ledger that was read. Present for
            closed/validated ledgers.
        ledger_hash: Hash of that ledger, when the node reports it.
        ledger_current_index: Sequence of the open ledger, reported instead
            of ledger_index when the query ran against the current ledger.
        validated: The node's validated flag. None when the node omitted it,
            which callers should treat as not validated.
    """

    ledger_index: int | None = None
    ledger_hash: str | None = None
    ledger_current_index: int | None = None
    validated: bool | None = None

    @property
    def is_validated(self) -> bool:
        return self.validated is True

    @property
    def is_validated_index(self) -> bool:
        """True when the node reports a validated ledger by sequence number."""
        return self.is_validated and self.ledger_index is not None

    def to_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if self.ledger_index is not None:
            fields["ledger_index"] = self.ledger_index
        if self.ledger_hash is not None:
            fields["ledger_hash"] = self.ledger_hash
        if self.ledger_current_index is not None:
            fields["ledger_current_index"] = self.ledger_current_index
        if self.validated is not None:
            fields["validated"] = self.validated
        return fields

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> ReturnLedgerSpec:
        """Build from a response body whose shape was already checked."""
        return cls(
            ledger_index=fields.get("ledger_index"),
            ledger_hash=fields.get("ledger_hash"),
            ledger_current_index=fields.get("ledger_current_index"),
            validated=fields.get("validated"),
        )


# =========================================================================
# Capabilities
# =========================================================================


@runtime_checkable
class WithLedgerSpec(Protocol):
    """A request that can be pinned to a ledger version."""

    ledger_spec: RetrieveLedgerSpec


@runtime_checkable
class WithReturnLedgerSpec(Protocol):
    """A response that echoes the ledger version it was read from."""

    @property
    def ledger_spec(self) -> ReturnLedgerSpec: ...


_PinnedT = TypeVar("_PinnedT", bound=WithLedgerSpec)


def pin_ledger(
    request: _PinnedT,
    *,
    shortcut: LedgerShortcut | str | None = None,
    index: int | None = None,
    ledger_hash: str | None = None,
) -> _PinnedT:
    """Replace the request's ledger spec with exactly one variant.

    Passing none of the keywords resets the request to the node default.

    Raises:
        LedgerSpecConflictError: If more than one keyword is given.
    """
    request.ledger_spec = RetrieveLedgerSpec(
        shortcut=LedgerShortcut(shortcut) if shortcut is not None else None,
        index=index,
        hash=ledger_hash,
    )
    return request
