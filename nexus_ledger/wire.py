"""
Wire helpers: field flattening and JSON body encoding.

The node speaks flat JSON objects. Nested concepts on our side (ledger
spec, pagination) are flattened into the top level of the request body by
an explicit merge, never by attribute introspection.

Encoding follows the canonical JSON rules used elsewhere in nexus:
sorted keys, no whitespace, UTF-8, no NaN.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from nexus_ledger.errors import DecodeError, FieldCollisionError


def merge_fields(*mappings: Mapping[str, Any]) -> dict[str, Any]:
    """Merge field mappings into one top-level body.

    Raises:
        FieldCollisionError: If a key appears in more than one mapping.
    """
    merged: dict[str, Any] = {}
    for mapping in mappings:
        for key, value in mapping.items():
            if key in merged:
                raise FieldCollisionError(key)
            merged[key] = value
    return merged


def encode_body(body: Mapping[str, Any]) -> bytes:
    """Serialize a body to canonical JSON bytes."""
    return json.dumps(
        body,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-finite number {token} is not allowed")


def decode_body(raw: bytes | str) -> dict[str, Any]:
    """Parse a raw node body into a dict.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected. They are not JSON
    and encode_body() could not send them back.

    Raises:
        DecodeError: If the body is not valid JSON or is not an object.
    """
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        raise DecodeError(f"body is not valid JSON ({e})") from e
    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}")
    return data
