"""
Shape checking for node response bodies.

Response types describe their wire shape as JSON Schema and check it with
``jsonschema`` before touching any field. The first failing field becomes
a DecodeError carrying the exact path, so a malformed body never produces
a half-filled value object.

Rules:
    - Required wire fields are listed in ``required`` and never defaulted.
    - Numeric ledger fields are unsigned 32-bit integers. Floats are
      rejected even when integral, so numbers re-serialize unchanged.
    - Hex fields stay strings; only their alphabet (and length, where the
      format is fixed) is checked. Case is preserved.
    - Unknown extra fields are tolerated. Nodes add fields over time.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from jsonschema import Draft202012Validator, validators  # type: ignore[import-untyped]
from jsonschema.exceptions import ValidationError, best_match  # type: ignore[import-untyped]

from nexus_ledger.errors import DecodeError, PathElement

UINT32_MAX = 0xFFFFFFFF

# --- Schema fragments ---

UINT32: dict[str, Any] = {"type": "integer", "minimum": 0, "maximum": UINT32_MAX}

# Patterns run as Python regexes, where "$" also matches before a trailing
# newline. "\Z" anchors at the true end of the string.
HEX: dict[str, Any] = {"type": "string", "pattern": r"^[0-9A-Fa-f]*\Z"}

# 256-bit identifiers (ledger hashes, NFToken IDs) are 64 hex chars.
HEX_256: dict[str, Any] = {
    "type": "string",
    "minLength": 64,
    "maxLength": 64,
    "pattern": r"^[0-9A-Fa-f]{64}\Z",
}

LEDGER_FIELDS: dict[str, Any] = {
    "ledger_index": UINT32,
    "ledger_current_index": UINT32,
    "ledger_hash": HEX_256,
    "validated": {"type": "boolean"},
}

# The marker is opaque: any JSON value the node chose to send.
PAGINATION_FIELDS: dict[str, Any] = {
    "limit": {"type": "integer", "minimum": 0},
    "marker": {},
}


def object_schema(
    properties: Mapping[str, Any],
    required: Sequence[str] = (),
) -> dict[str, Any]:
    """Build an object schema from property fragments."""
    schema: dict[str, Any] = {"type": "object", "properties": dict(properties)}
    if required:
        schema["required"] = list(required)
    return schema


def _is_wire_integer(checker: Any, instance: Any) -> bool:
    # JSON Schema counts 8.0 as an integer; the wire format does not.
    return isinstance(instance, int) and not isinstance(instance, bool)


WireValidator = validators.extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine(
        "integer", _is_wire_integer
    ),
)


def compile_schema(schema: Mapping[str, Any]) -> Draft202012Validator:
    """Check a schema once and return a reusable validator.

    Integers are strict: floats such as ``8.0`` or ``1e3`` fail the
    ``integer`` type so that decoded numbers re-serialize unchanged.
    """
    WireValidator.check_schema(schema)
    return WireValidator(schema)


def check_shape(
    validator: Draft202012Validator,
    instance: Any,
    path: Sequence[PathElement] = (),
) -> None:
    """Validate ``instance`` against a compiled schema.

    Args:
        validator: Output of compile_schema().
        instance: Decoded JSON value to check.
        path: Location of ``instance`` within the enclosing body, prepended
            to any reported field path.

    Raises:
        DecodeError: On the most relevant shape violation.
    """
    error = best_match(validator.iter_errors(instance))
    if error is not None:
        raise _to_decode_error(error).prefixed(path)


def _to_decode_error(error: ValidationError) -> DecodeError:
    path: list[PathElement] = list(error.absolute_path)

    if error.validator == "required" and isinstance(error.instance, dict):
        missing = [name for name in error.validator_value if name not in error.instance]
        if missing:
            return DecodeError("required field is missing", [*path, missing[0]])

    if error.validator == "type":
        return DecodeError(
            f"expected {error.validator_value}, got {_json_type_name(error.instance)}",
            path,
        )

    if error.validator == "pattern":
        return DecodeError(f"malformed hex value {error.instance!r}", path)

    if error.validator in ("minLength", "maxLength"):
        return DecodeError(
            f"malformed hex value {error.instance!r} (expected "
            f"{error.validator_value} chars, got {len(error.instance)})",
            path,
        )

    return DecodeError(error.message, path)


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
