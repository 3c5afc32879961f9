"""Sorting and searching problems solved with greedy scans and binary search."""

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Optional


def towers(cubes: Iterable[int]) -> int:
    """Fewest towers when each cube goes on the smallest top larger than it."""
    tops: list[int] = []
    for cube in cubes:
        position = bisect_right(tops, cube)
        if position < len(tops):
            tops[position] = cube
        else:
            tops.append(cube)
    return len(tops)


def apartments(applicants: Iterable[int], sizes: Iterable[int], k: int) -> int:
    """Most applicants given an apartment within k of their desired size."""
    wanted = sorted(applicants)
    available = sorted(sizes)
    assigned = 0
    j = 0
    for desired in wanted:
        low, high = desired - k, desired + k
        while j < len(available) and available[j] < low:
            j += 1
        if j < len(available) and available[j] <= high:
            j += 1
            assigned += 1
    return assigned


def ferris_wheel(weights: Iterable[int], limit: int) -> int:
    """Fewest gondolas holding at most two children of total weight up to limit."""
    ordered = sorted(weights, reverse=True)
    heavy, light = 0, len(ordered) - 1
    gondolas = 0
    while heavy <= light:
        if ordered[light] <= limit - ordered[heavy]:
            light -= 1
        heavy += 1
        gondolas += 1
    return gondolas


def concert_tickets(
    prices: Iterable[int], bids: Iterable[int]
) -> list[Optional[int]]:
    """For each bid in turn, sell the dearest ticket not above it.

    A bid that cannot buy anything gets None.
    """
    remaining = sorted(prices)
    sold: list[Optional[int]] = []
    for bid in bids:
        position = bisect_right(remaining, bid)
        sold.append(remaining.pop(position - 1) if position else None)
    return sold


def restaurant_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Most customers present at once, given (arrival, departure) times."""
    events = []
    for arrival, departure in intervals:
        events.append((arrival, 1))
        events.append((departure, -1))
    events.sort()
    return max(accumulate(delta for _, delta in events), default=0)


def distinct_numbers(values: Iterable[int]) -> int:
    """Number of distinct values."""
    return len(set(values))


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Most whole movies one can watch, given (start, end) times."""
    count = 0
    last_end: Optional[int] = None
    for end, start in sorted((end, start) for start, end in movies):
        if last_end is None or start >= last_end:
            count += 1
            last_end = end
    return count


def tasks_and_deadlines(tasks: Iterable[tuple[int, int]]) -> int:
    """Best total reward for (duration, deadline) tasks, shortest first."""
    time = score = 0
    for duration, deadline in sorted(tasks):
        time += duration
        score += deadline - time
    return score


def sum_of_two(values: Sequence[int], target: int) -> tuple[int, int]:
    """1-based positions of two values summing to target.

    The position of the smaller value comes first. Raises ValueError when
    no such pair exists.
    """
    indexed = sorted((value, index) for index, value in enumerate(values, 1))
    left, right = 0, len(indexed) - 1
    while left < right:
        total = indexed[left][0] + indexed[right][0]
        if total == target:
            return indexed[left][1], indexed[right][1]
        if total > target:
            right -= 1
        else:
            left += 1
    raise ValueError("impossible")


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    numbers = iter(values)
    try:
        best = current = next(numbers)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in numbers:
        current = max(value, current + value)
        best = max(best, current)
    return best