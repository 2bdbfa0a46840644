"""Classic comparison and counting sorts.

Every function accepts any iterable, leaves it untouched and returns a new
sorted list.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeated adjacent swaps, stopping after a pass with no swap."""
    values = list(items)
    n = len(values)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return values


def count_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    values = list(items)
    if not values:
        return []
    if any(v < 0 for v in values):
        raise ValueError("count_sort only handles non-negative integers")
    counts = [0] * (max(values) + 1)
    for v in values:
        counts[v] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    values = list(items)
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
    return values


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low + 1, high
    while True:
        while i <= high and values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
        else:
            break
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element of each range."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(values, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return values


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front."""
    values = list(items)
    n = len(values)
    for i in range(n - 1):
        min_index = min(range(i, n), key=values.__getitem__)
        values[i], values[min_index] = values[min_index], values[i]
    return values