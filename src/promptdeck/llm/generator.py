from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

from promptdeck import config
from promptdeck import logger as logger_mod

from .base import TextClient
from .errors import EmptyResponseError, UnsupportedModelError
from .factory import build_client

log = logger_mod.get_logger()

# model id -> backend name
MODEL_PROVIDERS: Dict[str, str] = {
    "gemini-2.0-flash": "google",
    "gemini-2.5-pro-exp-03-25": "google",
    "gemini-2.5-flash": "google",
    "gpt-4o": "openai",
    "gpt-4o-mini": "openai",
    "gpt-4.1": "openai",
    "gpt-4.1-mini": "openai",
}

_BACKEND_KEY_ENVS = {
    "google": config.GEMINI_API_KEY_ENV,
    "openai": config.OPENAI_API_KEY_ENV,
}


class TextGenerator:
    """Routes a generation request to the backend client serving its model.

    Clients are constructed once by the caller and reused for every call.
    """

    def __init__(
        self,
        clients: Mapping[str, TextClient],
        models: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._clients = dict(clients)
        self._models = dict(MODEL_PROVIDERS if models is None else models)

    @classmethod
    def from_env(cls) -> "TextGenerator":
        """Build one client for every backend whose API key is set."""

        clients: Dict[str, TextClient] = {}
        for backend, env_name in _BACKEND_KEY_ENVS.items():
            if os.getenv(env_name):
                clients[backend] = build_client(backend)
            else:
                log.debug(f"{env_name} not set; {backend} backend unavailable")
        return cls(clients)

    def register_model(self, model: str, backend: str) -> "TextGenerator":
        self._models[model] = backend
        return self

    def backend_for(self, model: str) -> str:
        backend = self._models.get(model)
        if backend is None or backend not in self._clients:
            raise UnsupportedModelError(model)
        return backend

    async def generate(
        self, prompt: str, model: str, system_instruction: str = ""
    ) -> str:
        backend = self.backend_for(model)
        try:
            text = await self._clients[backend].generate(
                prompt, model=model, system_instruction=system_instruction
            )
        except Exception as e:
            log.error(f"❌ Error generating content with {backend}/{model}: {e}")
            raise

        if not text:
            raise EmptyResponseError(f"No response from {backend} for model {model}")
        return text
