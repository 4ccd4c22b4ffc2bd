from __future__ import annotations

import asyncio
from typing import Any, Optional

from promptdeck import logger as logger_mod

from .base import LLMConfig, TextClient
from .errors import LLMError
from .types import LLMMessage

log = logger_mod.get_logger()


class OpenAITextClient(TextClient):
    """OpenAI chat completions wrapper.

    The SDK is synchronous; calls run in a worker thread.
    """

    def __init__(self, config: LLMConfig, client: Optional[Any] = None):
        self._cfg = config
        if client is not None:
            self._client = client
            return

        api_key = config.api_key()
        try:
            from openai import OpenAI  # type: ignore
        except Exception as e:  # noqa: BLE001
            raise LLMError(
                "openai SDK not installed. Add dependency 'openai'."
            ) from e

        self._client = OpenAI(api_key=api_key)

    @staticmethod
    def _messages(prompt: str, system_instruction: str) -> list[LLMMessage]:
        messages = []
        if system_instruction:
            messages.append(LLMMessage(role="system", content=system_instruction))
        messages.append(LLMMessage(role="user", content=prompt))
        return messages

    def _complete(self, prompt: str, model: str, system_instruction: str) -> str:
        resp = self._client.chat.completions.create(
            model=model,
            messages=[
                {"role": m.role, "content": m.content}
                for m in self._messages(prompt, system_instruction)
            ],
            timeout=self._cfg.timeout_s,
        )
        choices = getattr(resp, "choices", None) or []
        if not choices:
            return ""
        return (choices[0].message.content or "").strip()

    async def generate(
        self, prompt: str, *, model: str, system_instruction: str = ""
    ) -> str:
        log.debug(f"OpenAI generate model={model}")
        return await asyncio.to_thread(
            self._complete, prompt, model, system_instruction
        )
