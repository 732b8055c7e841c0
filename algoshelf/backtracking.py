"""Backtracking searches: counting N-queens placements and solving Sudoku."""

from __future__ import annotations

from collections.abc import Sequence
from math import isqrt

__all__ = ["count_n_queens", "solve_sudoku"]


def count_n_queens(n: int) -> int:
    """Number of ways to place ``n`` non-attacking queens on an n x n board."""
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n!r}")
    rows: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def place(column: int) -> int:
        if column == n:
            return 1
        total = 0
        for row in range(n):
            if row in rows or row - column in falling or row + column in rising:
                continue
            rows.add(row)
            falling.add(row - column)
            rising.add(row + column)
            total += place(column + 1)
            rows.remove(row)
            falling.remove(row - column)
            rising.remove(row + column)
        return total

    return place(0)


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Solve a Sudoku whose side is a perfect square; 0 marks an empty cell.

    Empty cells are filled in row-major order, trying digits in ascending
    order. Returns a new solved grid, or None if no solution exists. The
    input is left untouched. Raises ValueError for a malformed grid.
    """
    board = [list(row) for row in grid]
    size = len(board)
    box = isqrt(size)
    if size == 0 or box * box != size:
        raise ValueError(f"grid side must be a positive perfect square, got {size}")
    if any(len(row) != size for row in board):
        raise ValueError("grid must be square")
    if any(not 0 <= value <= size for row in board for value in row):
        raise ValueError(f"cell values must lie in 0..{size}")

    def box_of(row: int, col: int) -> int:
        return (row // box) * box + col // box

    in_row: list[set[int]] = [set() for _ in range(size)]
    in_col: list[set[int]] = [set() for _ in range(size)]
    in_box: list[set[int]] = [set() for _ in range(size)]
    empty: list[tuple[int, int]] = []
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if not value:
                empty.append((r, c))
                continue
            b = box_of(r, c)
            if value in in_row[r] or value in in_col[c] or value in in_box[b]:
                return None
            in_row[r].add(value)
            in_col[c].add(value)
            in_box[b].add(value)

    def fill(position: int) -> bool:
        if position == len(empty):
            return True
        r, c = empty[position]
        b = box_of(r, c)
        for digit in range(1, size + 1):
            if digit in in_row[r] or digit in in_col[c] or digit in in_box[b]:
                continue
            board[r][c] = digit
            in_row[r].add(digit)
            in_col[c].add(digit)
            in_box[b].add(digit)
            if fill(position + 1):
                return True
            board[r][c] = 0
            in_row[r].remove(digit)
            in_col[c].remove(digit)
            in_box[b].remove(digit)
        return False

    return board if fill(0) else None