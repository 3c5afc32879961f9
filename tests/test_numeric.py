import math

import pytest

from cpalgos.numeric import factorial_mods, nearly_equal


def test_factorial_mods_length_and_range():
    values = factorial_mods(100, 3)
    assert len(values) == 100
    assert all(0 <= v < 3 for v in values)


@pytest.mark.parametrize("mod", [3, 7, 1000000007])
def test_factorial_mods_match_factorial(mod):
    values = factorial_mods(20, mod)
    assert values == [math.factorial(i) % mod for i in range(1, 21)]


def test_factorial_mods_empty():
    assert factorial_mods(0, 3) == []


def test_factorial_mods_bad_modulus():
    with pytest.raises(ValueError):
        factorial_mods(5, 0)


def test_nearly_equal_rounding_error():
    a = 0.3 * 3 + 0.1
    assert a != 1.0
    assert nearly_equal(a, 1.0) is True


def test_nearly_equal_distinct():
    assert nearly_equal(1.0, 1.1) is False
    assert nearly_equal(1.0, 1.1, eps=0.5) is True