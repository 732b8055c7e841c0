"""Recreational puzzles: Tower of Hanoi, bishop placement, Monty Hall, character counts."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Iterable, Iterator
from typing import NamedTuple

__all__ = [
    "BOARD_SIZE",
    "MontyHallResult",
    "Move",
    "monty_hall",
    "place_bishops",
    "random_enemies",
    "running_character_counts",
    "tower_of_hanoi",
]

BOARD_SIZE = 8

Square = tuple[int, int]

# Rays in the order they are scanned: up-right, up-left, down-left, down-right.
_DIRECTIONS = ((-1, 1), (-1, -1), (1, -1), (1, 1))

# A square already holding a bishop ranks like one attacked by six enemies.
_EXISTING_BISHOP_SCORE = 6


class Move(NamedTuple):
    """Move ``disk`` from rod ``source`` to rod ``target``."""

    disk: int
    source: str
    target: str


def _hanoi(n: int, source: str, target: str, auxiliary: str) -> Iterator[Move]:
    if n == 0:
        return
    yield from _hanoi(n - 1, source, auxiliary, target)
    yield Move(n, source, target)
    yield from _hanoi(n - 1, auxiliary, target, source)


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 0:
        raise ValueError(f"number of disks must be non-negative, got {n!r}")
    return _hanoi(n, source, target, auxiliary)


def random_enemies(count: int, rng: random.Random | None = None) -> frozenset[Square]:
    """Pick ``count`` distinct squares of the board at random."""
    if not 0 <= count <= BOARD_SIZE * BOARD_SIZE:
        raise ValueError(f"count must lie in 0..{BOARD_SIZE * BOARD_SIZE}, got {count!r}")
    if rng is None:
        rng = random.Random()
    squares = [(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]
    return frozenset(rng.sample(squares, count))


def _ray(row: int, col: int, d_row: int, d_col: int) -> Iterator[Square]:
    row += d_row
    col += d_col
    while 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
        yield row, col
        row += d_row
        col += d_col


def _diagonals(square: Square) -> Iterator[Square]:
    for d_row, d_col in _DIRECTIONS:
        yield from _ray(*square, d_row, d_col)


def place_bishops(enemies: Iterable[Square]) -> frozenset[Square]:
    """Place bishops so that every enemy piece lies on a bishop's diagonal.

    Each free square is scored by how many enemies share a diagonal with it
    (diagonals run through other pieces). Enemies are handled in row-major
    order; each gets the best-scoring free square on its diagonals, where a
    square that already holds a bishop is preferred unless another is attacked
    by more than six enemies. An enemy with no free diagonal square gets none.
    """
    targets = sorted(set(enemies))
    for row, col in targets:
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise ValueError(f"square {(row, col)} is off the board")
    occupied = set(targets)
    attacks: Counter[Square] = Counter(
        square for enemy in targets for square in _diagonals(enemy) if square not in occupied
    )
    bishops: set[Square] = set()
    for enemy in targets:
        best: Square | None = None
        best_score = -1
        for square in _diagonals(enemy):
            if square in occupied:
                continue
            score = _EXISTING_BISHOP_SCORE if square in bishops else attacks[square]
            if score > best_score:
                best, best_score = square, score
        if best is not None:
            bishops.add(best)
    return frozenset(bishops)


class MontyHallResult(NamedTuple):
    """Outcome of a Monty Hall simulation."""

    games: int
    stay_wins: int
    switch_wins: int


def monty_hall(games: int = 10_000, rng: random.Random | None = None) -> MontyHallResult:
    """Play ``games`` rounds, staying or switching at random each time, and count wins."""
    if games < 0:
        raise ValueError(f"number of games must be non-negative, got {games!r}")
    if rng is None:
        rng = random.Random()
    doors = (1, 2, 3)
    stay_wins = switch_wins = 0
    for _ in range(games):
        chosen = rng.choice(doors)
        winning = rng.choice(doors)
        revealed = rng.choice([door for door in doors if door not in (chosen, winning)])
        remaining = next(door for door in doors if door not in (chosen, revealed))
        if rng.randrange(2) == 0:
            stay_wins += chosen == winning
        else:
            switch_wins += remaining == winning
    return MontyHallResult(games, stay_wins, switch_wins)


def running_character_counts(text: str) -> list[tuple[str, int]]:
    """Pair each character of ``text`` with how often it has appeared so far."""
    seen: Counter[str] = Counter()
    counts: list[tuple[str, int]] = []
    for char in text:
        seen[char] += 1
        counts.append((char, seen[char]))
    return counts