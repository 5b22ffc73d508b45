"""
Error taxonomy for ledger queries.

Every error raised here is returned to the caller as a typed exception.
Nothing in the query layer logs, retries, or substitutes defaults; those
policies belong to whoever owns the transport.

Taxonomy:
    - DecodeError: a node body does not match the expected shape
      (missing required field, wrong primitive type, malformed hex).
      Always carries the path of the field that failed.
    - LedgerSpecConflictError: more than one ledger version variant was
      set on a request. Raised at construction time.
    - FieldCollisionError: flattening ledger/pagination fields into a
      request body would overwrite a key that is already present.
    - NodeError: the node answered with an error envelope instead of a
      result (raised by the JSON-RPC client, not by decoding).

Each exception exposes ``error_code`` and ``details`` so callers can
branch on a stable code instead of parsing messages.
"""

from __future__ import annotations

from typing import Any, Sequence

PathElement = str | int


def format_path(path: Sequence[PathElement]) -> str:
    """Render a field path as ``account_nfts[0].NFTokenID``.

    An empty path renders as ``<root>``.
    """
    rendered = ""
    for element in path:
        if isinstance(element, int):
            rendered += f"[{element}]"
        elif rendered:
            rendered += f".{element}"
        else:
            rendered = element
    return rendered or "<root>"


class DecodeError(ValueError):
    """A node body could not be decoded into the expected type.

    Args:
        reason: Human-readable description of what was wrong.
        path: Keys and list indices leading to the offending field.
    """

    error_code = "DECODE_ERROR"

    def __init__(self, reason: str, path: Sequence[PathElement] = ()) -> None:
        self.reason = reason
        self.path: tuple[PathElement, ...] = tuple(path)
        super().__init__(f"{self.field_path}: {reason}")

    @property
    def field_path(self) -> str:
        """The offending field path, rendered for display."""
        return format_path(self.path)

    @property
    def details(self) -> dict[str, Any]:
        return {"field_path": self.field_path, "reason": self.reason}

    def prefixed(self, prefix: Sequence[PathElement]) -> DecodeError:
        """Return a copy of this error rooted under ``prefix``."""
        return DecodeError(self.reason, (*prefix, *self.path))


class LedgerSpecConflictError(ValueError):
    """More than one ledger version variant was set at once."""

    error_code = "LEDGER_SPEC_CONFLICT"

    def __init__(self, variants: Sequence[str]) -> None:
        self.variants = tuple(variants)
        super().__init__(
            "ledger spec accepts exactly one of shortcut, index or hash, "
            f"got: {', '.join(self.variants)}"
        )

    @property
    def details(self) -> dict[str, Any]:
        return {"variants": list(self.variants)}


class FieldCollisionError(ValueError):
    """Two field mappings tried to claim the same top-level key."""

    error_code = "FIELD_COLLISION"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"field {key!r} is set by more than one component")

    @property
    def details(self) -> dict[str, Any]:
        return {"key": self.key}


class NodeError(Exception):
    """The node returned an error result instead of a method result.

    Args:
        error: Node error token (e.g. "actNotFound", "lgrNotFound").
        error_message: Optional human-readable message from the node.
        error_code: Optional numeric code from the node.
        request_method: Method name of the request that failed.
    """

    def __init__(
        self,
        error: str,
        *,
        error_message: str | None = None,
        error_code: int | None = None,
        request_method: str | None = None,
    ) -> None:
        self.error = error
        self.error_message = error_message
        self.error_code = error_code
        self.request_method = request_method
        super().__init__(error_message or error)

    @property
    def details(self) -> dict[str, Any]:
        result: dict[str, Any] = {"error": self.error}
        if self.error_message is not None:
            result["error_message"] = self.error_message
        if self.error_code is not None:
            result["error_code"] = self.error_code
        if self.request_method is not None:
            result["request_method"] = self.request_method
        return result
