"""Content providers.

Public API:
- prompt_provider / system_provider (seed content, always first)
- prompt_suffix_provider / system_suffix_provider (always last)
- output_provider / output_reminder (generated from an output shape)
- current_time_provider
"""

from .clock import current_time_provider
from .output import (
    OUTPUT_REMINDER_KEY,
    OUTPUT_SHAPE_KEY,
    output_provider,
    output_reminder,
)
from .prompt import (
    prompt_provider,
    prompt_suffix_provider,
    system_provider,
    system_suffix_provider,
)

__all__ = [
    "OUTPUT_REMINDER_KEY",
    "OUTPUT_SHAPE_KEY",
    "current_time_provider",
    "output_provider",
    "output_reminder",
    "prompt_provider",
    "prompt_suffix_provider",
    "system_provider",
    "system_suffix_provider",
]
