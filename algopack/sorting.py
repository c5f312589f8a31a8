"""Comparison and distribution sorts returning new sorted lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) using one bucket per element."""
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(value * count)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def hoare_quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with Hoare partitioning around the first element of each range."""
    items = list(values)

    def partition(low: int, high: int) -> int:
        pivot = items[low]
        i, j = low - 1, high + 1
        while True:
            i += 1
            while items[i] < pivot:
                i += 1
            j -= 1
            while items[j] > pivot:
                j -= 1
            if i >= j:
                return j
            items[i], items[j] = items[j], items[i]

    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = partition(low, high)
            pending.append((low, split))
            pending.append((split + 1, high))
    return items


def lomuto_quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort partitioning around the last element of each range."""
    items = list(values)

    def partition(left: int, right: int) -> int:
        pivot = items[right]
        first, last = left - 1, right
        while True:
            first += 1
            while items[first] < pivot:
                first += 1
            last -= 1
            while pivot < items[last]:
                if last == left:
                    break
                last -= 1
            if first >= last:
                break
            items[first], items[last] = items[last], items[first]
        items[first], items[right] = items[right], items[first]
        return first

    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if right > left:
            middle = partition(left, right)
            pending.append((left, middle - 1))
            pending.append((middle + 1, right))
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort: each pass floats the largest remaining element to the end."""
    items = list(values)
    count = len(items)
    for done in range(count - 1):
        for j in range(count - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Insertion sort into ascending order."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        prev = i - 1
        while prev >= 0 and items[prev] > current:
            items[prev + 1] = items[prev]
            prev -= 1
        items[prev + 1] = current
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Selection sort into ascending order."""
    items = list(values)
    count = len(items)
    for pos in range(count - 1):
        smallest = min(range(pos, count), key=items.__getitem__)
        items[pos], items[smallest] = items[smallest], items[pos]
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Shell sort with gaps halving from n // 2 down to 1."""
    items = list(values)
    count = len(items)
    gap = count // 2
    while gap > 0:
        for j in range(gap, count):
            k = j - gap
            while k >= 0 and items[k + gap] < items[k]:
                items[k], items[k + gap] = items[k + gap], items[k]
                k -= gap
        gap //= 2
    return items


def dutch_flag_sort(values: Iterable[int]) -> list[int]:
    """Group 0s, then 1s, then everything else (normally 2s) in one pass."""
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def wave_sort(values: Iterable[Any]) -> list[Any]:
    """Rearrange so that every even-indexed element is >= its neighbours."""
    items = list(values)
    count = len(items)
    for i in range(1, count, 2):
        if items[i] > items[i - 1]:
            items[i - 1], items[i] = items[i], items[i - 1]
        if i + 1 < count and items[i] > items[i + 1]:
            items[i + 1], items[i] = items[i], items[i + 1]
    return items