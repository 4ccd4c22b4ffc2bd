from typing import Any


class PromptDeckError(RuntimeError):
    """Base error for promptdeck."""


class DuplicateKeyError(PromptDeckError):
    """Strict registration collided with an existing key."""

    def __init__(self, key: str, kind: str = "Entry"):
        super().__init__(f'{kind} with key "{key}" already exists.')
        self.key = key


class ActionNotFoundError(PromptDeckError):
    def __init__(self, key: str):
        super().__init__(f'Action with key "{key}" not found.')
        self.key = key


class InvalidShapeError(PromptDeckError):
    """An output shape declaration is malformed."""


class ProviderExecutionError(PromptDeckError):
    """A provider's producer failed. Logged and dropped, never raised."""

    def __init__(self, label: str, cause: BaseException):
        super().__init__(f'Error executing provider "{label}": {cause}')
        self.label = label
        self.cause = cause


class ActionExecutionError(PromptDeckError):
    """An action failed. Surfaced as a keyed error result, never raised."""

    def __init__(self, key: str, cause: BaseException):
        super().__init__(f"Action failed: {cause}")
        self.key = key
        self.cause = cause

    def as_result(self) -> dict[str, str]:
        return {"error": str(self)}


# ----------------------------------------------------------------------
# Output coercion
# ----------------------------------------------------------------------


class OutputError(PromptDeckError):
    """Base error for output coercion."""


class EmptyShapeError(OutputError):
    pass


class EmptyInputError(OutputError):
    pass


class JsonParseError(OutputError):
    def __init__(self, message: str, raw_text: str, candidate: str):
        super().__init__(
            f"Failed to parse JSON: {message}\n"
            f"Original String: {raw_text}\n"
            f"Extracted JSON: {candidate}"
        )
        self.parser_message = message
        self.raw_text = raw_text
        self.candidate = candidate


class MissingKeyError(OutputError):
    def __init__(self, key: str):
        super().__init__(f'Missing key "{key}" in parsed JSON data.')
        self.key = key


class TypeMismatchError(OutputError):
    def __init__(self, key: str, expected: str, value: Any, detail: str = ""):
        got = type(value).__name__
        msg = f'Type mismatch for key "{key}": expected {expected}, got {got} {value!r}'
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
        self.key = key
        self.expected = expected
        self.value = value


class UnknownKindError(OutputError):
    def __init__(self, key: str, kind: str):
        super().__init__(
            f'Unknown kind "{kind}" specified in shape declaration for key "{key}".'
        )
        self.key = key
        self.kind = kind
