"""Static text providers.

The seed providers sort before every other provider of their role and the
suffix providers after every other one.
"""

from __future__ import annotations

from ..types import ORDER_FIRST, ORDER_LAST, Provider, Role


def _static(key: str, role: Role, text: str, order: float) -> Provider:
    async def produce() -> str:
        return text

    return Provider(key=key, role=role, producer=produce, order=order)


def prompt_provider(prompt: str) -> Provider:
    """Base prompt; always first in the prompt."""
    return _static("prompt", "prompt", prompt, ORDER_FIRST)


def system_provider(system: str) -> Provider:
    """Base system message; always first in the system instructions."""
    return _static("system", "system", system, ORDER_FIRST)


def prompt_suffix_provider(suffix: str) -> Provider:
    """Always last in the prompt (before the end-of-prompt marker)."""
    return _static("promptSuffix", "prompt", suffix, ORDER_LAST)


def system_suffix_provider(suffix: str) -> Provider:
    """Always last in the system instructions."""
    return _static("systemSuffix", "system", suffix, ORDER_LAST)
