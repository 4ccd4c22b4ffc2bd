from typing import Iterable, Optional

from promptdeck import config


def join_with_newlines(parts: Iterable[Optional[str]]) -> str:
    """Join the non-empty parts with a blank line between each."""
    return "\n\n".join(p for p in parts if p)


def wrap_in_json_block(text: str) -> str:
    return f"```json\n{text}\n```"


def format_provider_content(content: str, title: Optional[str] = None) -> str:
    if title:
        return f"{config.TITLE_MARKER}{title}\n{content}"
    return content
