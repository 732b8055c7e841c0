"""Greedy algorithms: job sequencing with deadlines and coin change."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["DEFAULT_DENOMINATIONS", "Job", "greedy_change", "job_sequence"]

DEFAULT_DENOMINATIONS = (1, 2, 5, 10, 20, 50, 100, 500, 1000)


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns ``profit`` if done by slot ``deadline``."""

    name: str
    deadline: int
    profit: int


def job_sequence(jobs: Iterable[Job]) -> list[Job]:
    """Schedule jobs to maximise profit; return the chosen jobs in slot order.

    Jobs are taken by decreasing profit and each goes into the latest free
    slot no later than its deadline; jobs with no free slot are dropped.
    """
    candidates = list(jobs)
    for job in candidates:
        if job.deadline < 1:
            raise ValueError(f"deadline must be at least 1, got {job.deadline!r} for {job.name!r}")
    if not candidates:
        return []
    slots: list[Job | None] = [None] * (max(job.deadline for job in candidates) + 1)
    for job in sorted(candidates, key=lambda j: j.profit, reverse=True):
        for slot in range(job.deadline, 0, -1):
            if slots[slot] is None:
                slots[slot] = job
                break
    return [job for job in slots[1:] if job is not None]


def greedy_change(amount: int, denominations: Iterable[int] = DEFAULT_DENOMINATIONS) -> list[int]:
    """Make ``amount`` by always taking the largest coin that still fits.

    Returns the coins used, largest first. Raises ValueError if the amount
    cannot be made exactly.
    """
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount!r}")
    coins = sorted(set(denominations), reverse=True)
    if any(coin <= 0 for coin in coins):
        raise ValueError("denominations must be positive")
    change: list[int] = []
    remaining = amount
    for coin in coins:
        count, remaining = divmod(remaining, coin)
        change.extend([coin] * count)
    if remaining:
        raise ValueError(f"cannot make {amount} from denominations {coins}")
    return change