import itertools

import pytest

from cpalgos.search import (
    binary_search,
    count_queens,
    first_not_greater,
    permutations_of,
    subsets,
)


def _brute_queens(n):
    total = 0
    for cols in itertools.permutations(range(n)):
        if len({c + r for r, c in enumerate(cols)}) == n and len(
            {c - r for r, c in enumerate(cols)}
        ) == n:
            total += 1
    return total


def test_queens_known_counts():
    assert count_queens(4) == 2
    assert count_queens(8) == 92


@pytest.mark.parametrize("n", range(1, 7))
def test_queens_matches_brute_force(n):
    assert count_queens(n) == _brute_queens(n)


def test_queens_negative_raises():
    with pytest.raises(ValueError):
        count_queens(-1)


def test_subsets_count_and_order():
    nums = [3, 6, 9, 12]
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert result[0] == nums
    assert result[-1] == []


def test_subsets_cover_all_combinations():
    nums = [3, 6, 9, 12]
    expected = {
        combo
        for size in range(len(nums) + 1)
        for combo in itertools.combinations(nums, size)
    }
    assert {tuple(s) for s in subsets(nums)} == expected


def test_subsets_empty():
    assert subsets([]) == [[]]


@pytest.mark.parametrize("n", range(0, 6))
def test_permutations_lexicographic(n):
    assert list(permutations_of(n)) == list(itertools.permutations(range(1, n + 1)))


def test_binary_search_finds_index():
    a = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    for x in a:
        assert binary_search(a, x) == a.index(x)


def test_binary_search_missing_raises():
    with pytest.raises(ValueError):
        binary_search([1, 2, 4, 5], 3)
    with pytest.raises(ValueError):
        binary_search([1, 2, 4, 5], 0)
    with pytest.raises(ValueError):
        binary_search([], 1)


def test_binary_search_duplicates_returns_last():
    a = [1, 2, 2, 2, 3]
    index = binary_search(a, 2)
    assert a[index] == 2
    assert a[index + 1] != 2


def test_first_not_greater_examples():
    values = [9, 3, 9, 6, 6, 8, 6, 2, 6, 3]
    assert first_not_greater(values, 5) == 3
    assert first_not_greater(values, 9) == 9
    assert first_not_greater(values, 2) == 2
    assert first_not_greater(values, 1) is None


@pytest.mark.parametrize("x", [9, 5, 4, 6, 3, 9, 3, 3, 5, 2])
def test_first_not_greater_invariant(x):
    values = [9, 3, 9, 6, 6, 8, 6, 2, 6, 3]
    result = first_not_greater(values, x)
    assert result in values
    assert result <= x
    assert not any(result < v <= x for v in values)