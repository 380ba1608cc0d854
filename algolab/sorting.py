"""Comparison sorts: bubble, selection, merge, quick and heap sort.

Each function leaves its argument untouched and returns a new ascending list.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeated adjacent swaps, stopping early once a pass makes none."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    size = len(result)
    for i in range(size - 1):
        smallest = min(range(i, size), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged = []
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


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable sort by splitting in halves and merging the sorted halves."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(data: list[Any], low: int, high: int) -> int:
    pivot = data[high]
    boundary = low
    for j in range(low, high):
        if data[j] < pivot:
            data[boundary], data[j] = data[j], data[boundary]
            boundary += 1
    data[boundary], data[high] = data[high], data[boundary]
    return boundary


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the last element of each range."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(result, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return result


def _sift_down(data: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    result = list(items)
    size = len(result)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(result, size, root)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result