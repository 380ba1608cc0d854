"""Small recursive number routines: factorial, digit sum and binary form."""

from __future__ import annotations

import math


def factorial(n: int) -> int:
    """Return ``n!``; any ``n`` of 1 or less gives 1."""
    return math.prod(range(2, n + 1))


def sum_digits(n: int) -> int:
    """Return the sum of the decimal digits of ``n``, carrying its sign."""
    if n == 0:
        return 0
    sign = -1 if n < 0 else 1
    remaining = abs(n)
    total = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        total += digit
    return sign * total


def to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer, most significant first."""
    if n < 0:
        raise ValueError(f"cannot convert negative number {n} to binary")
    if n == 0:
        return "0"
    digits = []
    while n:
        n, bit = divmod(n, 2)
        digits.append(str(bit))
    return "".join(reversed(digits))