"""Greedy scheduling helpers."""

from collections.abc import Iterable


def max_customers(events: Iterable[int]) -> int:
    """Return the largest running total of arrival (+1) and departure (-1) events."""
    best = counter = 0
    for event in events:
        counter += event
        best = max(best, counter)
    return best


def deadline_score(tasks: Iterable[tuple[int, int]]) -> int:
    """Score (duration, deadline) tasks as the sum of deadline minus duration."""
    return sum(deadline - duration for duration, deadline in sorted(tasks))