"""Dynamic-programming classics."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import NamedTuple


def cut_rod(prices: Sequence[int], length: int) -> int:
    """Best revenue for a rod of ``length``; ``prices[i]`` is the price of a piece of length i + 1."""
    if length < 0:
        raise ValueError("length must not be negative")
    best = [0]
    for size in range(1, length + 1):
        best.append(
            max(
                (price + best[size - piece] for piece, price in enumerate(prices[:size], 1)),
                default=0,
            )
        )
    return best[length]


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    sequence = [0, 1]
    for _ in range(2, n + 1):
        sequence.append(sequence[-1] + sequence[-2])
    return sequence[n]


def max_knapsack_value(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Largest total value of (weight, value) items whose weight fits in ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    pairs = list(items)
    if any(weight < 0 or value < 0 for weight, value in pairs):
        raise ValueError("weights and values must not be negative")
    total = sum(value for _, value in pairs)
    lightest: list[float] = [0] + [math.inf] * total
    for weight, value in pairs:
        for reached in range(total, value - 1, -1):
            candidate = lightest[reached - value] + weight
            if candidate < lightest[reached]:
                lightest[reached] = candidate
    return max(value for value, weight in enumerate(lightest) if weight <= capacity)


def grid_traveler(rows: int, cols: int) -> int:
    """Number of right/down paths from the top-left to the bottom-right of a grid."""
    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must not be negative")
    if rows == 0 or cols == 0:
        return 0
    row = [1] * cols
    for _ in range(rows - 1):
        row = list(accumulate(row))
    return row[-1]


def lcs_length(x: str, y: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(y) + 1)
    for a in x:
        current = [0]
        for j, b in enumerate(y, 1):
            current.append(previous[j - 1] + 1 if a == b else max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def shortest_supersequence_length(x: str, y: str) -> int:
    """Length of the shortest string having both inputs as subsequences."""
    return len(x) + len(y) - lcs_length(x, y)


def wildcard_match(text: str, pattern: str) -> bool:
    """Whole-string match where '?' is any one character and '*' any run of characters."""
    previous = [True]
    for p in pattern:
        previous.append(previous[-1] and p == "*")
    for ch in text:
        current = [False]
        for j, p in enumerate(pattern, 1):
            if p == ch or p == "?":
                current.append(previous[j - 1])
            elif p == "*":
                current.append(previous[j] or current[j - 1])
            else:
                current.append(False)
        previous = current
    return previous[-1]


class Subarray(NamedTuple):
    """Best contiguous sum and the inclusive index range producing it."""

    total: int
    start: int
    end: int


def max_subarray(values: Iterable[int]) -> Subarray:
    """Kadane's algorithm: the largest sum of a non-empty contiguous run."""
    best: Subarray | None = None
    running = 0
    run_start = 0
    for i, value in enumerate(values):
        running += value
        if best is None or running > best.total:
            best = Subarray(running, run_start, i)
        if running < 0:
            running = 0
            run_start = i + 1
    if best is None:
        raise ValueError("max_subarray needs at least one value")
    return best