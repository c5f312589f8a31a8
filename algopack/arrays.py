"""Small array and string utilities."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import combinations
from typing import Any


def leaders(values: Iterable[Any]) -> list[Any]:
    """Elements greater than or equal to every element to their right, in order."""
    found: list[Any] = []
    for value in reversed(list(values)):
        if not found or value >= found[-1]:
            found.append(value)
    found.reverse()
    return found


def rotate_left(values: Iterable[Any], d: int) -> list[Any]:
    """Rotate a sequence counter-clockwise by ``d`` positions."""
    items = list(values)
    if not items:
        return items
    shift = d % len(items)
    return items[shift:] + items[:shift]


def power_set(text: str) -> list[str]:
    """All non-empty subsequences of ``text``, sorted lexicographically."""
    subsets = [
        "".join(chosen)
        for size in range(1, len(text) + 1)
        for chosen in combinations(text, size)
    ]
    return sorted(subsets)


def sorted_union(a: Iterable[Any], b: Iterable[Any]) -> list[Any]:
    """Distinct elements of both inputs in ascending order."""
    return sorted(set(a).union(b))


def binary_search(values: Iterable[Any], target: Any) -> int | None:
    """Sort ``values`` and return the index of ``target`` in that order, or None."""
    ordered = sorted(values)
    index = bisect_left(ordered, target)
    if index < len(ordered) and ordered[index] == target:
        return index
    return None


def matrix_multiply(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> list[list[float]]:
    """Product of two matrices given as lists of rows."""
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of the first matrix must match rows of the second")
    width = len(b[0]) if b else 0
    if any(len(row) != width for row in b):
        raise ValueError("second matrix rows must all have the same length")
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        if columns
        else []
        for row in a
    ]


def is_palindrome(text: str) -> bool:
    """True when a non-empty string reads the same backwards."""
    return bool(text) and text == text[::-1]