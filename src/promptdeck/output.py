"""Output coercion engine.

Turns raw model text into a record holding exactly the declared fields.

Kinds other than ``string`` are strict: a value that cannot be read as the
declared kind raises `TypeMismatchError`. ``string`` never rejects; any
value is stringified. Objects and arrays are checked for their outer
structure only, element types are not inspected.
"""

from __future__ import annotations

import json
import math
from typing import Any, Mapping

from ._json import parse_json
from .errors import (
    EmptyInputError,
    MissingKeyError,
    TypeMismatchError,
    UnknownKindError,
)
from .shape import require_fields


def _as_string(key: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _as_number(key: str, value: Any) -> int | float:
    # bool is an int subclass; JSON true/false is not a number.
    if isinstance(value, bool):
        raise TypeMismatchError(key, "number", value)
    if isinstance(value, (int, float)):
        # json.loads accepts the NaN literal
        if isinstance(value, float) and math.isnan(value):
            raise TypeMismatchError(key, "number", value, "not a number")
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            number = math.nan
        if math.isnan(number):
            raise TypeMismatchError(key, "number", value, "could not convert")
        return number
    raise TypeMismatchError(key, "number", value)


def _as_boolean(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise TypeMismatchError(key, "boolean", value, "could not convert")
    raise TypeMismatchError(key, "boolean", value)


def _as_object(key: str, value: Any) -> dict:
    if not isinstance(value, dict):
        raise TypeMismatchError(key, "object", value)
    return value


def _as_array(key: str, value: Any) -> list:
    if not isinstance(value, list):
        raise TypeMismatchError(key, "array", value)
    return value


_CASTERS = {
    "string": _as_string,
    "number": _as_number,
    "boolean": _as_boolean,
    "object": _as_object,
    "array": _as_array,
}


def coerce_output(shape: Mapping[str, Any], raw_text: str) -> dict[str, Any]:
    """Validate and coerce `raw_text` against `shape`.

    Raises:
        EmptyShapeError: the shape declares no fields.
        EmptyInputError: `raw_text` is empty or blank.
        JsonParseError: no JSON object could be parsed.
        MissingKeyError: a declared field is absent or null.
        TypeMismatchError: a value cannot be read as its declared kind.
        UnknownKindError: a field declares an unsupported kind.
    """

    fields = require_fields(shape, "coerce_output")
    if not raw_text or not raw_text.strip():
        raise EmptyInputError("coerce_output requires a non-empty input string.")

    parsed = parse_json(raw_text)

    result: dict[str, Any] = {}
    for key, descriptor in fields.items():
        value = parsed.get(key)
        if value is None:
            raise MissingKeyError(key)

        caster = _CASTERS.get(descriptor.kind)
        if caster is None:
            raise UnknownKindError(key, descriptor.kind)
        result[key] = caster(key, value)

    # Undeclared keys in `parsed` are dropped.
    return result
