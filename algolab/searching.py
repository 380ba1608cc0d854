"""Searching a sequence for a key: linear, binary and interpolation search."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def linear_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of the first element equal to ``key``, or None."""
    return next((index for index, item in enumerate(items) if item == key), None)


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending sequence ``items``, or None."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = items[mid]
        if value == key:
            return mid
        if value < key:
            left = mid + 1
        else:
            right = mid - 1
    return None


def interpolation_search(items: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in the ascending integer sequence ``items``, or None.

    The probe position is estimated by linear interpolation between the
    values at both ends of the current range, which suits uniformly
    distributed data.
    """
    low, high = 0, len(items) - 1
    while low <= high and items[low] <= key <= items[high]:
        if low == high or items[low] == items[high]:
            return low if items[low] == key else None
        span = items[high] - items[low]
        offset = int((high - low) / span * (key - items[low]))
        pos = min(max(low + offset, low), high)
        value = items[pos]
        if value == key:
            return pos
        if value < key:
            low = pos + 1
        else:
            high = pos - 1
    return None