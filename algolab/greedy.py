"""Greedy algorithms: fractional knapsack and job sequencing with deadlines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns ``profit`` if done by slot ``deadline``."""

    id: str
    deadline: int
    profit: int


@dataclass(frozen=True)
class JobSchedule:
    """Chosen jobs in the order of their time slots, with their total profit."""

    jobs: tuple[Job, ...]
    total_profit: int


def fractional_knapsack(items: Iterable[tuple[int, int]], capacity: int) -> float:
    """Return the best value that fits in ``capacity`` when items may be split.

    ``items`` holds ``(value, weight)`` pairs. Items are taken whole in
    order of falling value per unit weight; the first that does not fit is
    taken in part and the filling stops.
    """
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    ranked = []
    for value, weight in items:
        if weight <= 0:
            raise ValueError(f"item weight must be positive, got {weight}")
        ranked.append((value / weight, value, weight))
    ranked.sort(key=lambda entry: entry[0], reverse=True)

    remaining = capacity
    total = 0.0
    for ratio, value, weight in ranked:
        if remaining >= weight:
            remaining -= weight
            total += value
        else:
            total += ratio * remaining
            break
    return total


def job_sequencing(jobs: Iterable[Job]) -> JobSchedule:
    """Schedule jobs greedily by profit, each in the latest free slot before its deadline."""
    ranked = sorted(jobs, key=lambda job: job.profit, reverse=True)
    horizon = max((job.deadline for job in ranked), default=0)
    slots: list[Job | None] = [None] * max(horizon, 0)
    total = 0
    for job in ranked:
        for slot in range(job.deadline - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                total += job.profit
                break
    return JobSchedule(
        jobs=tuple(job for job in slots if job is not None), total_profit=total
    )