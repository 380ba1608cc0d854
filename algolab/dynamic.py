"""Dynamic programming: Fibonacci numbers, matrix-chain order and 0/1 knapsack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def fib_naive(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion; ``n <= 1`` gives ``n``."""
    if n <= 1:
        return n
    return fib_naive(n - 1) + fib_naive(n - 2)


def fib_dp(n: int) -> int:
    """Return the ``n``-th Fibonacci number bottom-up; ``n <= 1`` gives ``n``."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def matrix_chain_order(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications needed to multiply a matrix chain.

    Matrix ``i`` of the chain has shape ``dims[i] x dims[i + 1]``, so a chain
    of ``k`` matrices is described by ``k + 1`` dimensions.
    """
    dims = list(dims)
    count = len(dims) - 1
    if count < 1:
        raise ValueError("at least two dimensions are needed to describe a matrix")
    cost = [[0] * count for _ in range(count)]
    for length in range(2, count + 1):
        for first in range(count - length + 1):
            last = first + length - 1
            cost[first][last] = min(
                cost[first][split]
                + cost[split + 1][last]
                + dims[first] * dims[split + 1] * dims[last + 1]
                for split in range(first, last)
            )
    return cost[0][count - 1]


def knapsack_01(values: Iterable[int], weights: Iterable[int], capacity: int) -> int:
    """Return the best total value of whole items whose weights fit in ``capacity``."""
    values = list(values)
    weights = list(weights)
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]