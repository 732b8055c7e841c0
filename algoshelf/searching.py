"""Searching in sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["binary_search", "linear_search"]


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending sequence ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        current = values[middle]
        if current == target:
            return middle
        if current > target:
            high = middle - 1
        else:
            low = middle + 1
    return None


def linear_search(values: Iterable[Any], target: Any) -> list[int]:
    """Return the indices of every element equal to ``target``, in order."""
    return [index for index, value in enumerate(values) if value == target]