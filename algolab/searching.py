"""Searching a sequence for a key."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(items: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in the ascending ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        value = items[middle]
        if value == key:
            return middle
        if value < key:
            low = middle + 1
        else:
            high = middle - 1
    return None


def linear_search(items: Sequence[int], key: int) -> int | None:
    """Return the index of the first occurrence of ``key``, or None if absent."""
    return next((index for index, value in enumerate(items) if value == key), None)