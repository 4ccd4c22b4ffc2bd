from __future__ import annotations

from typing import Any, Mapping, Optional

from ..helpers import wrap_in_json_block
from ..shape import require_fields
from ..types import Provider

OUTPUT_SHAPE_KEY = "outputShape"
OUTPUT_REMINDER_KEY = "outputReminder"


def output_provider(
    shape: Mapping[str, Any], order: float = 100, scope: Optional[str] = None
) -> Provider:
    """System provider describing the JSON object the model must return."""

    fields = require_fields(shape, "output_provider")

    async def produce() -> str:
        shape_lines = ",\n".join(
            f'  "{name}": "({d.kind}) {d.description}"' for name, d in fields.items()
        )
        json_block = wrap_in_json_block(f"{{\n{shape_lines}\n}}")
        return (
            "The output MUST be a single, valid JSON object. This JSON object "
            f"must contain exactly {len(fields)} keys in the shape:\n{json_block}"
        )

    return Provider(
        key=OUTPUT_SHAPE_KEY,
        role="system",
        producer=produce,
        order=order,
        title="Output Shape",
        scope=scope,
    )


def output_reminder(
    shape: Mapping[str, Any], order: float = 100, scope: Optional[str] = None
) -> Provider:
    """Prompt provider restating the field kinds on one line."""

    fields = require_fields(shape, "output_reminder")

    async def produce() -> str:
        pairs = ", ".join(f'"{name}" : {d.kind}' for name, d in fields.items())
        return (
            "Remember to provide the output strictly in the specified JSON "
            f"format: {{{pairs}}}"
        )

    return Provider(
        key=OUTPUT_REMINDER_KEY,
        role="prompt",
        producer=produce,
        order=order,
        title="Output Reminder",
        scope=scope,
    )
