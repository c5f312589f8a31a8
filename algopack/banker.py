"""Banker's algorithm for deadlock avoidance."""

from __future__ import annotations

from collections.abc import Sequence


class UnsafeStateError(ValueError):
    """Raised when no order lets every process finish."""

    def __init__(self, completed: list[int]) -> None:
        super().__init__(f"system is not in a safe state; only {completed} can finish")
        self.completed = completed


def need_matrix(
    allocation: Sequence[Sequence[int]], maximum: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Remaining need of every process: maximum minus allocation."""
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum must list the same processes")
    try:
        return [
            [most - held for held, most in zip(held_row, max_row, strict=True)]
            for held_row, max_row in zip(allocation, maximum)
        ]
    except ValueError:
        raise ValueError("allocation and maximum rows must have the same length") from None


def safe_sequence(
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
    available: Sequence[int],
) -> list[int]:
    """Order in which the processes can run to completion.

    Processes are scanned in index order repeatedly; each one whose need fits in
    the work vector runs and releases its allocation. Raises UnsafeStateError if
    a full scan finishes no process.
    """
    need = need_matrix(allocation, maximum)
    work = list(available)
    if any(len(row) != len(work) for row in need):
        raise ValueError("every process must list one count per resource")
    finished = [False] * len(need)
    order: list[int] = []
    while len(order) < len(need):
        progressed = False
        for process, row in enumerate(need):
            if finished[process] or any(n > w for n, w in zip(row, work)):
                continue
            work = [w + held for w, held in zip(work, allocation[process])]
            finished[process] = True
            order.append(process)
            progressed = True
        if not progressed:
            raise UnsafeStateError(order)
    return order