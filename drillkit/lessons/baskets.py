"""Collections: fruit baskets as dictionaries and simple list transformations."""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from enum import Enum

NEW_FRUIT_COUNT = 5


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    return {"banana": 2, "apple": 2, "mango": 2}


class Fruit(Enum):
    """Kinds of fruit that can go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add five of every fruit kind missing from the basket, leaving present ones alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, NEW_FRUIT_COUNT)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple of numbers and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Return the values each multiplied by two."""
    return [value * 2 for value in values]