from dataclasses import dataclass

import pytest

from promptdeck.errors import DuplicateKeyError
from promptdeck.registry import Registry


@dataclass(frozen=True)
class Item:
    key: str
    order: float = 0


def test_add_uses_item_key_or_override():
    r = Registry()
    r.add(Item("a")).add(Item("a"), key="b")
    assert r.keys() == ["a", "b"]
    assert len(r) == 2


def test_add_duplicate_raises_with_kind():
    r = Registry("Provider").add(Item("a"))
    with pytest.raises(DuplicateKeyError) as exc:
        r.add(Item("a"))
    assert str(exc.value) == 'Provider with key "a" already exists.'
    assert exc.value.key == "a"


def test_set_overwrites_and_moves_to_end_of_ties():
    r = Registry()
    first = Item("a")
    r.add(first).add(Item("b"))
    replacement = Item("a")
    r.set(replacement)
    assert r.get("a") is replacement
    assert [k for k, _ in r.ordered()] == ["b", "a"]


def test_replace_keeps_position():
    r = Registry().add(Item("a")).add(Item("b"))
    r.replace("a", Item("a", order=0))
    assert [k for k, _ in r.ordered()] == ["a", "b"]
    with pytest.raises(KeyError):
        r.replace("missing", Item("missing"))


def test_delete_is_noop_when_absent():
    r = Registry().add(Item("a"))
    r.delete("zzz").delete("a")
    assert "a" not in r
    assert r.get("a") is None


def test_ordered_is_stable_and_filters():
    r = Registry()
    r.add(Item("x", 3)).add(Item("y", 1)).add(Item("z", 3)).add(Item("w", float("-inf")))
    assert [k for k, _ in r.ordered()] == ["w", "y", "x", "z"]
    assert [k for k, _ in r.ordered(lambda i: i.order > 1)] == ["x", "z"]
