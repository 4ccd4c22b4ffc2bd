from __future__ import annotations

from promptdeck import config

from .base import LLMConfig, TextClient
from .errors import LLMError
from .gemini_client import GeminiTextClient
from .openai_client import OpenAITextClient


def build_client(provider: str) -> TextClient:
    """Factory for backend clients.

    Providers:
    - openai
    - google

    Extend by adding new provider clients and mapping here.
    """

    p = provider.lower().strip()
    if p == "openai":
        return OpenAITextClient(
            LLMConfig(provider="openai", api_key_env=config.OPENAI_API_KEY_ENV)
        )
    if p == "google":
        return GeminiTextClient(
            LLMConfig(provider="google", api_key_env=config.GEMINI_API_KEY_ENV)
        )

    raise LLMError(f"Unknown LLM provider: {provider}")
