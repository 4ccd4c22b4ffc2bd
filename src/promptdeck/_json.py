from __future__ import annotations

import json
import re
from typing import Any

from jsonschema import validate
from jsonschema.exceptions import ValidationError as _SchemaValidationError

from .errors import InvalidShapeError, JsonParseError

_FENCED_JSON = re.compile(r"```json\s*(\{.*?\})\s*```", re.IGNORECASE | re.DOTALL)


def extract_json_candidate(text: str) -> str:
    """Return the {...} object inside the first ```json fence, else the trimmed text."""

    match = _FENCED_JSON.search(text)
    if match and match.group(1):
        return match.group(1)
    return text.strip()


def parse_json(text: str) -> dict[str, Any]:
    """Parse a single JSON object out of a model response.

    The response may wrap the object in a ```json fence and surround it with
    prose; anything outside the fence is ignored.
    """

    candidate = extract_json_candidate(text)
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise JsonParseError(str(e), text, candidate) from e

    if not isinstance(data, dict):
        raise JsonParseError(
            f"expected a JSON object, got {type(data).__name__}", text, candidate
        )
    return data


def validate_json(instance: Any, schema: dict[str, Any]) -> None:
    try:
        validate(instance=instance, schema=schema)
    except _SchemaValidationError as e:
        raise InvalidShapeError(f"Shape validation failed: {e.message}") from e
