"""Dynamic-programming classics: coin change, knapsack, LCS, subset sum, egg drop."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "egg_drop",
    "is_subset_sum",
    "knapsack",
    "longest_common_subsequence",
    "min_coins",
]

DEFAULT_DENOMINATIONS = (1, 2, 5, 10)


def min_coins(amount: int, denominations: Iterable[int] = DEFAULT_DENOMINATIONS) -> int | None:
    """Fewest coins from ``denominations`` (unlimited supply) summing to ``amount``.

    Returns None when the amount cannot be made.
    """
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount!r}")
    coins = list(denominations)
    if any(coin <= 0 for coin in coins):
        raise ValueError("denominations must be positive")
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            best[total] = min(best[total], best[total - coin] + 1)
    return best[amount] if best[amount] < unreachable else None


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Maximum total value of items whose total weight fits in ``capacity`` (0-1 knapsack)."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity!r}")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def longest_common_subsequence(a: Sequence[Any], b: Sequence[Any]) -> str | list[Any]:
    """A longest common subsequence of ``a`` and ``b``.

    Returns a string when ``a`` is a string, otherwise a list. When the two
    directions tie, the path prefers dropping an element of ``a``.
    """
    rows, cols = len(a), len(b)
    length = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i, x in enumerate(a, start=1):
        for j, y in enumerate(b, start=1):
            if x == y:
                length[i][j] = length[i - 1][j - 1] + 1
            else:
                length[i][j] = max(length[i - 1][j], length[i][j - 1])
    picked: list[Any] = []
    i, j = rows, cols
    while i and j:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif length[i - 1][j] >= length[i][j - 1]:
            i -= 1
        else:
            j -= 1
    picked.reverse()
    return "".join(picked) if isinstance(a, str) else picked


def is_subset_sum(values: Iterable[int], total: int) -> bool:
    """Whether some subset of the non-negative ``values`` sums exactly to ``total``."""
    if total < 0:
        return False
    mask = (1 << (total + 1)) - 1
    reachable = 1
    for value in values:
        if value < 0:
            raise ValueError("values must be non-negative")
        reachable |= (reachable << value) & mask
    return bool(reachable >> total & 1)


def egg_drop(eggs: int, floors: int) -> int:
    """Minimum number of drops that finds the critical floor in the worst case."""
    if floors < 0:
        raise ValueError(f"floors must be non-negative, got {floors!r}")
    if floors == 0:
        return 0
    if eggs < 1:
        raise ValueError("at least one egg is needed when there are floors")
    # covered[e] = floors that can be resolved with e eggs and the drops so far
    covered = [0] * (eggs + 1)
    drops = 0
    while covered[eggs] < floors:
        drops += 1
        for e in range(eggs, 0, -1):
            covered[e] = covered[e] + covered[e - 1] + 1
    return drops