"""Small quiz functions: apple pricing, doubling and greeting."""

from __future__ import annotations

BULK_THRESHOLD = 40
REGULAR_APPLE_PRICE = 2
BULK_APPLE_PRICE = 1


def calculate_apple_price(nb: int) -> int:
    """Price of an order of apples; more than 40 at once costs 1 each, else 2."""
    if nb > BULK_THRESHOLD:
        return nb * BULK_APPLE_PRICE
    return nb * REGULAR_APPLE_PRICE


def times_two(num: int) -> int:
    """Return twice the given number."""
    return num * 2


def greet(val: str) -> str:
    """Prefix the given text with "Hello "."""
    return "Hello " + val