"""Complete search and binary search helpers."""

from bisect import bisect_right
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional


def count_queens(n: int) -> int:
    """Count the ways to place n non-attacking queens on an n x n board."""
    if n < 0:
        raise ValueError("board size must be non-negative")

    columns: set[int] = set()
    left_diagonals: set[int] = set()
    right_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        total = 0
        for col in range(n):
            left, right = col + row, col - row
            if col in columns or left in left_diagonals or right in right_diagonals:
                continue
            columns.add(col)
            left_diagonals.add(left)
            right_diagonals.add(right)
            total += place(row + 1)
            columns.remove(col)
            left_diagonals.remove(left)
            right_diagonals.remove(right)
        return total

    return place(0)


def subsets(items: Iterable[Any]) -> list[list[Any]]:
    """Return every subset of items, each element taken before it is left out."""
    pool = list(items)

    def build(index: int, chosen: list[Any]) -> Iterator[list[Any]]:
        if index == len(pool):
            yield list(chosen)
            return
        chosen.append(pool[index])
        yield from build(index + 1, chosen)
        chosen.pop()
        yield from build(index + 1, chosen)

    return list(build(0, []))


def permutations_of(n: int) -> Iterator[tuple[int, ...]]:
    """Yield the permutations of 1..n in lexicographic order."""
    if n < 0:
        raise ValueError("n must be non-negative")

    chosen: set[int] = set()
    current: list[int] = []

    def search() -> Iterator[tuple[int, ...]]:
        if len(current) == n:
            yield tuple(current)
            return
        for value in range(1, n + 1):
            if value in chosen:
                continue
            chosen.add(value)
            current.append(value)
            yield from search()
            current.pop()
            chosen.remove(value)

    yield from search()


def binary_search(seq: Sequence[Any], x: Any) -> int:
    """Find x in a sorted sequence by halving jumps; return its index.

    With repeated values the last matching index is returned.
    Raises ValueError when x is not present.
    """
    n = len(seq)
    if n == 0:
        raise ValueError(f"{x!r} not found")
    k = 0
    step = n // 2
    while step >= 1:
        while k + step < n and seq[k + step] <= x:
            k += step
        step //= 2
    if seq[k] == x:
        return k
    raise ValueError(f"{x!r} not found")


def first_not_greater(values: Iterable[Any], x: Any) -> Optional[Any]:
    """Return the largest value that is at most x, or None if there is none."""
    ordered = sorted(values)
    position = bisect_right(ordered, x)
    if position == 0:
        return None
    return ordered[position - 1]