from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    Literal,
    Mapping,
    Optional,
    Union,
)

from promptdeck import config

if TYPE_CHECKING:
    from .agent import Agent

Role = Literal["system", "prompt"]
FieldKind = Literal["string", "number", "boolean", "object", "array"]

FIELD_KINDS: tuple[str, ...] = ("string", "number", "boolean", "object", "array")

# Sentinel ranks: seed content sorts before everything, suffixes after.
ORDER_FIRST = float("-inf")
ORDER_LAST = float("inf")

Producer = Callable[[], Union[Awaitable[str], str]]
Operation = Callable[["Agent", Optional[Any]], Awaitable[Any]]


@dataclass(frozen=True)
class Provider:
    """A keyed, ordered, role-tagged source of text content."""

    key: str
    role: Role
    producer: Producer
    order: float = 0
    title: Optional[str] = None
    scope: Optional[str] = None

    def label(self) -> str:
        return self.title or self.key


@dataclass(frozen=True)
class Action:
    key: str
    operation: Operation
    title: Optional[str] = None
    enabled: bool = True
    order: float = 0

    def label(self) -> str:
        return self.title or self.key


@dataclass(frozen=True)
class FieldDescriptor:
    kind: str
    description: str = ""


ShapeDescriptor = Mapping[str, FieldDescriptor]


@dataclass(frozen=True)
class AgentSettings:
    end_prompt_string: str = config.END_PROMPT_STRING
    model: str = config.DEFAULT_MODEL
    debug: bool = config.DEBUG
