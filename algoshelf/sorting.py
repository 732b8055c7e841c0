"""Classic sorting algorithms.

Every function accepts any iterable and returns a new sorted list in
ascending order; the input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "bucket_sort",
    "comb_sort",
    "heap_sort",
    "insertion_sort",
    "merge",
    "merge_sort",
    "pigeonhole_sort",
    "quick_sort",
    "radix_sort",
    "selection_sort",
    "shell_sort",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) by distributing them into buckets.

    Raises ValueError for a value outside [0, 1).
    """
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(count * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def _next_gap(gap: int) -> int:
    return max(1, gap * 10 // 13)


def comb_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by comparing elements a shrinking gap apart (shrink factor 1.3)."""
    items = list(values)
    gap = len(items)
    swapped = True
    while gap != 1 or swapped:
        gap = _next_gap(gap)
        swapped = False
        for i in range(len(items) - gap):
            if items[i] > items[i + gap]:
                items[i], items[i + gap] = items[i + gap], items[i]
                swapped = True
    return items


def _sift_down(items: list[Any], root: int, last: int) -> None:
    """Restore the max-heap property below ``root`` within ``items[:last + 1]``."""
    while True:
        left = 2 * root + 1
        right = left + 1
        largest = root
        if left <= last and items[left] > items[largest]:
            largest = left
        if right <= last and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    items = list(values)
    last = len(items) - 1
    for root in range((len(items) - 1) // 2, -1, -1):
        _sift_down(items, root, last)
    for end in range(last, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end - 1)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for j in range(1, len(items)):
        key = items[j]
        i = j - 1
        while i >= 0 and items[i] > key:
            items[i + 1] = items[i]
            i -= 1
        items[i + 1] = key
    return items


def merge(left: Iterable[Any], right: Iterable[Any]) -> list[Any]:
    """Merge two sorted sequences into one sorted list.

    On ties the element from ``left`` comes first, which keeps the merge stable.
    """
    first = list(left)
    second = list(right)
    merged: list[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if second[j] < first[i]:
            merged.append(second[j])
            j += 1
        else:
            merged.append(first[i])
            i += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def pigeonhole_sort(values: Iterable[int]) -> list[int]:
    """Sort integers by dropping each into a hole indexed by its offset from the minimum."""
    items = list(values)
    if not items:
        return []
    low = min(items)
    holes: list[list[int]] = [[] for _ in range(max(items) - low + 1)]
    for value in items:
        holes[value - low].append(value)
    return [value for hole in holes for value in hole]


def _partition(items: list[Any], low: int, high: int) -> int:
    """Lomuto partition around ``items[high]``; return the pivot's final index."""
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort in base 10 for non-negative integers.

    Raises ValueError for a negative value.
    """
    items = list(values)
    if not items:
        return []
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    passes = 0
    while largest > 0:
        passes += 1
        largest //= 10
    divisor = 1
    for _ in range(passes):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // divisor) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        divisor *= 10
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly selecting the minimum of the unsorted suffix."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items