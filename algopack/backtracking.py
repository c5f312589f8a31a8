"""Backtracking puzzles: rat in a maze, N queens and the towers of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Path from the top-left to the bottom-right moving down or right over cells equal to 1.

    Returns a grid marking the path with 1s, or None when no path exists.
    """
    rows = len(maze)
    if rows == 0:
        raise ValueError("maze must not be empty")
    cols = len(maze[0])
    if cols == 0 or any(len(row) != cols for row in maze):
        raise ValueError("maze rows must be non-empty and of equal length")
    solution = [[0] * cols for _ in range(rows)]

    def walk(x: int, y: int) -> bool:
        if not (0 <= x < rows and 0 <= y < cols) or maze[x][y] != 1:
            return False
        if x == rows - 1 and y == cols - 1:
            solution[x][y] = 1
            return True
        if solution[x][y] == 1:
            return False
        solution[x][y] = 1
        if walk(x + 1, y) or walk(x, y + 1):
            return True
        solution[x][y] = 0
        return False

    return solution if walk(0, 0) else None


def n_queens(n: int) -> list[tuple[int, ...]]:
    """Every placement of ``n`` non-attacking queens, as the column of the queen in each row."""
    if n < 0:
        raise ValueError("n must not be negative")
    solutions: list[tuple[int, ...]] = []
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diag: set[int] = set()
    used_anti: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(tuple(columns))
            return
        for col in range(n):
            if col in used_cols or row - col in used_diag or row + col in used_anti:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diag.add(row - col)
            used_anti.add(row + col)
            place(row + 1)
            columns.pop()
            used_cols.remove(col)
            used_diag.remove(row - col)
            used_anti.remove(row + col)

    place(0)
    return solutions


def hanoi_moves(
    disks: int, source: Any = "1", target: Any = "2", spare: Any = "3"
) -> list[tuple[Any, Any]]:
    """Moves, as (from, to) pairs, that shift ``disks`` disks from ``source`` to ``target``."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")

    def moves(d: int, frm: Any, to: Any, via: Any) -> Iterator[tuple[Any, Any]]:
        if d == 0:
            return
        yield from moves(d - 1, frm, via, to)
        yield (frm, to)
        yield from moves(d - 1, via, to, frm)

    return list(moves(disks, source, target, spare))