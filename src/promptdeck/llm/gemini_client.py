from __future__ import annotations

import asyncio
from typing import Any, Optional

from promptdeck import logger as logger_mod

from .base import LLMConfig, TextClient
from .errors import LLMError

log = logger_mod.get_logger()


class GeminiTextClient(TextClient):
    """Thin wrapper around *google-genai*.

    The credential is checked when the client is constructed, not on first use.
    """

    def __init__(self, config: LLMConfig, client: Optional[Any] = None):
        self._cfg = config
        if client is not None:
            self._client = client
            return

        api_key = config.api_key()
        try:
            from google import genai  # type: ignore
        except ModuleNotFoundError as e:
            raise LLMError(
                "google-genai SDK not installed. Add dependency 'google-genai'."
            ) from e

        self._client = genai.Client(api_key=api_key)

    def _generate_sync(self, prompt: str, model: str, system_instruction: str) -> str:
        gen_config: dict[str, Any] = {}
        if system_instruction:
            gen_config["system_instruction"] = system_instruction
        res = self._client.models.generate_content(
            model=model,
            contents=prompt,
            config=gen_config or None,
        )
        return getattr(res, "text", None) or ""

    async def generate(
        self, prompt: str, *, model: str, system_instruction: str = ""
    ) -> str:
        log.debug(f"Gemini generate model={model}")
        return await asyncio.to_thread(
            self._generate_sync, prompt, model, system_instruction
        )
