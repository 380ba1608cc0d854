"""Finding every occurrence of a pattern in a text: naive and Knuth-Morris-Pratt."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def naive_search(text: Sequence[Any], pattern: Sequence[Any]) -> list[int]:
    """Return every start index of ``pattern`` in ``text``, overlaps included."""
    size = len(pattern)
    return [
        start
        for start in range(len(text) - size + 1)
        if text[start:start + size] == pattern
    ]


def prefix_function(pattern: Sequence[Any]) -> list[int]:
    """Return, for each prefix, the length of its longest proper prefix that is also a suffix."""
    lps = [0] * len(pattern)
    length = 0
    for position, item in enumerate(pattern[1:], start=1):
        while length and item != pattern[length]:
            length = lps[length - 1]
        if item == pattern[length]:
            length += 1
        lps[position] = length
    return lps


def kmp_search(text: Sequence[Any], pattern: Sequence[Any]) -> list[int]:
    """Return every start index of ``pattern`` in ``text`` in linear time, overlaps included."""
    size = len(pattern)
    if size == 0:
        return list(range(len(text) + 1))
    lps = prefix_function(pattern)
    matches = []
    matched = 0
    for position, item in enumerate(text):
        while matched and item != pattern[matched]:
            matched = lps[matched - 1]
        if item == pattern[matched]:
            matched += 1
        if matched == size:
            matches.append(position - size + 1)
            matched = lps[matched - 1]
    return matches