"""Generation backends (OpenAI / Google Gemini).

Design goals:
- Keep provider-specific SDKs isolated.
- Provide a single "prompt + system instruction -> text" call.
- Route by model identifier through a plain name-to-backend lookup.
"""

from .base import LLMConfig, TextClient
from .errors import EmptyResponseError, LLMError, UnsupportedModelError
from .factory import build_client
from .generator import MODEL_PROVIDERS, TextGenerator

__all__ = [
    "EmptyResponseError",
    "LLMConfig",
    "LLMError",
    "MODEL_PROVIDERS",
    "TextClient",
    "TextGenerator",
    "UnsupportedModelError",
    "build_client",
]
