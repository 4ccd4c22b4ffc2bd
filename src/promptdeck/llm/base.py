from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Protocol

from promptdeck import config

from .errors import LLMError


@dataclass(frozen=True)
class LLMConfig:
    provider: str
    api_key_env: str
    timeout_s: float = config.LLM_TIMEOUT_S

    def api_key(self) -> str:
        key = os.getenv(self.api_key_env)
        if not key:
            raise LLMError(
                f"Missing env var {self.api_key_env} for {self.provider} API key"
            )
        return key


class TextClient(Protocol):
    """Small interface for "prompt -> text" generation."""

    async def generate(
        self, prompt: str, *, model: str, system_instruction: str = ""
    ) -> str:
        raise NotImplementedError
