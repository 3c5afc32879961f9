"""Introductory problems: repetitions, permutations, spirals and more."""

from collections.abc import Iterable
from itertools import groupby

MOD = 1_000_000_007


def longest_repetition(text: str) -> int:
    """Length of the longest run of one character, whitespace ignored."""
    chars = (ch for ch in text if not ch.isspace())
    return max((sum(1 for _ in run) for _, run in groupby(chars)), default=1)


def beautiful_permutation(n: int) -> list[int]:
    """A permutation of 1..n with no adjacent values differing by one.

    Raises ValueError when none exists.
    """
    if n == 1:
        return [1]
    if n <= 3:
        raise ValueError("no solution")
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def number_spiral(y: int, x: int) -> int:
    """The number at row y, column x of the number spiral."""
    if y < 1 or x < 1:
        raise ValueError("coordinates start at 1")
    if x >= y:
        if x % 2 == 0:
            return (x - 1) * (x - 1) + y
        return x * x - (y - 1)
    if y % 2 == 0:
        return y * y - (x - 1)
    return (y - 1) * (y - 1) + x


def two_knights(n: int) -> list[int]:
    """Ways to place two non-attacking knights on k x k boards, k = 1..n."""
    counts = [0]
    counts.extend(
        k * k * (k * k - 1) // 2 - 4 * (k - 2) * (k - 1) for k in range(2, n + 1)
    )
    return counts


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """The smallest number in 1..n absent from numbers."""
    present = set(numbers)
    for i in range(1, n + 1):
        if i not in present:
            return i
    raise ValueError("no number is missing")


def two_sets(n: int) -> tuple[list[int], list[int]]:
    """Split 1..n into two sets of equal sum, each listed in descending order.

    Raises ValueError when no split exists.
    """
    if n < 3:
        raise ValueError("no solution")
    first: set[int] = set()
    second: set[int] = set()
    if n % 2 == 0:
        k = n
        while k >= 1:
            first.add(k)
            if k - 3 >= 1:
                k -= 3
                first.add(k)
            k -= 1
        if k != 0:
            raise ValueError("no solution")
        k = n - 1
        while k >= 2:
            second.add(k)
            if k - 1 >= 2:
                k -= 1
                second.add(k)
            k -= 3
        if k + 3 != 2:
            raise ValueError("no solution")
    else:
        k = n
        while k >= 3:
            first.add(k)
            if k - 3 >= 3:
                k -= 3
                first.add(k)
            k -= 1
        if k + 1 != 3:
            raise ValueError("no solution")
        k = n - 1
        while k >= 1:
            second.add(k)
            if k - 1 >= 1:
                k -= 1
                second.add(k)
            k -= 3
        if k + 3 != 1:
            raise ValueError("no solution")
    return sorted(first, reverse=True), sorted(second, reverse=True)


def increasing_array_moves(values: Iterable[int]) -> int:
    """Fewest unit increments that make the sequence non-decreasing."""
    largest = moves = 0
    for value in values:
        if largest > value:
            moves += largest - value
        else:
            largest = value
    return moves


def bit_strings(n: int) -> int:
    """Number of bit strings of length n, modulo 10**9 + 7."""
    if n < 0:
        raise ValueError("length must be non-negative")
    return pow(2, n, MOD)