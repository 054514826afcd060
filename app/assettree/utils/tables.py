"""Collection helpers for lists and mappings."""

import random
from collections.abc import Mapping, Sequence
from typing import Any


def table_contains(items: Sequence[Any] | Mapping[Any, Any] | None, value: Any) -> tuple[bool, int | None]:
    """Check if a list or mapping contains a value.

    Sequences are searched in order and report the index of the first
    match. Mappings are searched by value and report no index.

    Args:
        items: The list or mapping to check.
        value: The value to look for.

    Returns:
        Tuple of (found, index).
    """
    if items is None:
        return False, None

    if isinstance(items, Mapping):
        return any(v == value for v in items.values()), None

    for index, item in enumerate(items):
        if item == value:
            return True, index
    return False, None


def find_nearest_value(values: Sequence[float], value: float) -> int | None:
    """Find the index of the element nearest to a value.

    Ties resolve to the earliest element.

    Returns:
        Index of the nearest element, or None for an empty sequence.
    """
    nearest: int | None = None
    closest: float | None = None

    for index, candidate in enumerate(values):
        distance = abs(value - candidate)
        if closest is None or distance < closest:
            closest = distance
            nearest = index

    return nearest


def count_table(items: Sequence[Any] | Mapping[Any, Any]) -> int:
    """Count the elements of a list or mapping."""
    return len(items)


def reverse_table(items: list[Any]) -> list[Any]:
    """Reverse a list in place and return it."""
    items.reverse()
    return items


def shuffle_table(items: list[Any], rng: random.Random | None = None) -> list[Any]:
    """Shuffle a list in place and return it.

    Args:
        items: The list to shuffle.
        rng: Random generator to use. Defaults to the module-level generator.
    """
    (rng or random).shuffle(items)
    return items


def sort_table(items: list[Any]) -> list[Any]:
    """Sort a list of numbers (or numeric strings) in descending order, in place."""
    items.sort(key=float, reverse=True)
    return items
