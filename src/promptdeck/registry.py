from __future__ import annotations

import itertools
from typing import Callable, Dict, Generic, Iterator, Optional, Protocol, Tuple, TypeVar

from .errors import DuplicateKeyError


class Keyed(Protocol):
    key: str
    order: float


T = TypeVar("T", bound=Keyed)


class Registry(Generic[T]):
    """Ordered keyed collection with strict-insert and upsert entry points.

    Each registration takes a sequence number so that items sharing the same
    `order` sort in registration order.
    """

    def __init__(self, kind: str = "Entry") -> None:
        self._kind = kind
        self._items: Dict[str, Tuple[int, T]] = {}
        self._seq = itertools.count()

    def add(self, item: T, key: Optional[str] = None) -> "Registry[T]":
        resolved = key if key is not None else item.key
        if resolved in self._items:
            raise DuplicateKeyError(resolved, self._kind)
        self._items[resolved] = (next(self._seq), item)
        return self

    def set(self, item: T, key: Optional[str] = None) -> "Registry[T]":
        resolved = key if key is not None else item.key
        # a replacement is a new registration
        self._items.pop(resolved, None)
        self._items[resolved] = (next(self._seq), item)
        return self

    def replace(self, key: str, item: T) -> "Registry[T]":
        """Swap the item under an existing key, keeping its registration position."""
        seq, _ = self._items[key]
        self._items[key] = (seq, item)
        return self

    def delete(self, key: str) -> "Registry[T]":
        self._items.pop(key, None)
        return self

    def get(self, key: str) -> Optional[T]:
        entry = self._items.get(key)
        return entry[1] if entry else None

    def keys(self) -> list[str]:
        return list(self._items)

    def values(self) -> list[T]:
        return [item for _, item in self._items.values()]

    def items(self) -> list[tuple[str, T]]:
        return [(k, item) for k, (_, item) in self._items.items()]

    def ordered(
        self, predicate: Optional[Callable[[T], bool]] = None
    ) -> list[tuple[str, T]]:
        """Return (key, item) pairs sorted by ascending order, stable on ties."""

        selected = [
            (seq, k, item)
            for k, (seq, item) in self._items.items()
            if predicate is None or predicate(item)
        ]
        selected.sort(key=lambda e: (e[2].order, e[0]))
        return [(k, item) for _, k, item in selected]

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))
