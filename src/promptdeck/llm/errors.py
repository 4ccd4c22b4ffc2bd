from ..errors import PromptDeckError


class LLMError(PromptDeckError):
    pass


class UnsupportedModelError(LLMError):
    def __init__(self, model: str):
        super().__init__(f"Unsupported model: {model}")
        self.model = model


class EmptyResponseError(LLMError):
    """Raised when a backend returns no text."""
