"""Output shape declarations.

A shape is a flat mapping of field name to `FieldDescriptor`. Callers may
also pass plain mappings (``{"kind": "number", "description": "..."}``),
which are checked against `FIELD_SCHEMA` before use.

The kind itself is not restricted here: an unknown kind is reported by the
coercion engine when it reaches that field.
"""

from __future__ import annotations

from typing import Any, Mapping

from ._json import validate_json
from .errors import EmptyShapeError, InvalidShapeError
from .types import FieldDescriptor

FIELD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "kind": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
    },
    "required": ["kind", "description"],
}


def _to_descriptor(name: str, value: Any) -> FieldDescriptor:
    if isinstance(value, FieldDescriptor):
        return value
    if not isinstance(value, Mapping):
        raise InvalidShapeError(
            f'Field "{name}" must be a FieldDescriptor or a mapping, got {type(value).__name__}'
        )
    try:
        validate_json(dict(value), FIELD_SCHEMA)
    except InvalidShapeError as e:
        raise InvalidShapeError(f'Field "{name}": {e}') from e
    return FieldDescriptor(kind=value["kind"], description=value["description"])


def normalize_shape(shape: Mapping[str, Any]) -> dict[str, FieldDescriptor]:
    """Return a new dict of `FieldDescriptor`, preserving declaration order."""

    if not isinstance(shape, Mapping):
        raise InvalidShapeError(
            f"Shape declaration must be a mapping, got {type(shape).__name__}"
        )
    return {str(name): _to_descriptor(name, value) for name, value in shape.items()}


def require_fields(shape: Mapping[str, Any], owner: str) -> dict[str, FieldDescriptor]:
    """Normalize `shape` and reject it when empty."""

    fields = normalize_shape(shape)
    if not fields:
        raise EmptyShapeError(f"{owner} requires a non-empty shape declaration.")
    return fields
