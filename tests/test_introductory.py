import pytest

from cpalgos.cses.introductory import (
    beautiful_permutation,
    bit_strings,
    increasing_array_moves,
    longest_repetition,
    missing_number,
    number_spiral,
    two_knights,
    two_sets,
)


@pytest.mark.parametrize("k", [1, 2, 5, 9])
def test_longest_repetition_single_run(k):
    assert longest_repetition("G" * k) == k


def test_longest_repetition_ignores_whitespace():
    assert longest_repetition("AA\nAA ") == longest_repetition("AAAA")
    assert longest_repetition("ACGT" + "T" * 3 + "A") == 4


def test_longest_repetition_empty_input():
    assert longest_repetition("") == 1


@pytest.mark.parametrize("n", range(4, 20))
def test_beautiful_permutation_is_valid(n):
    perm = beautiful_permutation(n)
    assert sorted(perm) == list(range(1, n + 1))
    assert all(abs(a - b) != 1 for a, b in zip(perm, perm[1:]))


def test_beautiful_permutation_single():
    assert beautiful_permutation(1) == [1]


@pytest.mark.parametrize("n", [2, 3])
def test_beautiful_permutation_impossible(n):
    with pytest.raises(ValueError):
        beautiful_permutation(n)


def test_number_spiral_fills_squares():
    size = 6
    values = {number_spiral(y, x) for y in range(1, size + 1) for x in range(1, size + 1)}
    assert values == set(range(1, size * size + 1))
    assert number_spiral(1, 1) == 1


def test_number_spiral_rejects_zero():
    with pytest.raises(ValueError):
        number_spiral(0, 3)


def _brute_knights(k):
    cells = [(r, c) for r in range(k) for c in range(k)]
    count = 0
    for i, (r1, c1) in enumerate(cells):
        for r2, c2 in cells[i + 1:]:
            if {abs(r1 - r2), abs(c1 - c2)} != {1, 2}:
                count += 1
    return count


def test_two_knights_against_enumeration():
    counts = two_knights(6)
    assert len(counts) == 6
    assert counts == [_brute_knights(k) for k in range(1, 7)]


@pytest.mark.parametrize("missing", range(1, 8))
def test_missing_number(missing):
    numbers = [i for i in range(1, 8) if i != missing]
    assert missing_number(7, reversed(numbers)) == missing


def test_missing_number_none_missing():
    with pytest.raises(ValueError):
        missing_number(3, [3, 1, 2])


@pytest.mark.parametrize("n", range(1, 40))
def test_two_sets(n):
    total = n * (n + 1) // 2
    if total % 2:
        with pytest.raises(ValueError):
            two_sets(n)
        return_value = None
        assert return_value is None
    else:
        first, second = two_sets(n)
        assert sum(first) == sum(second) == total // 2
        assert sorted(first + second) == list(range(1, n + 1))
        assert first == sorted(first, reverse=True)


def test_two_sets_small_is_impossible():
    with pytest.raises(ValueError):
        two_sets(2)


def test_increasing_array_sorted_needs_no_moves():
    assert increasing_array_moves([1, 1, 2, 5, 8]) == 0


@pytest.mark.parametrize("drop", [1, 3, 10])
def test_increasing_array_single_drop(drop):
    assert increasing_array_moves([4, 20, 20 - drop]) == drop


@pytest.mark.parametrize("n", range(0, 30))
def test_bit_strings_small(n):
    assert bit_strings(n) == 2**n


def test_bit_strings_multiplicative_modulo():
    mod = 1000000007
    a, b = 123456, 654321
    assert bit_strings(a + b) == bit_strings(a) * bit_strings(b) % mod
    assert 0 <= bit_strings(a) < mod


def test_bit_strings_negative():
    with pytest.raises(ValueError):
        bit_strings(-1)