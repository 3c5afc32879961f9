"""Modular arithmetic and floating-point comparison helpers."""


def factorial_mods(n: int, mod: int) -> list[int]:
    """Return i! modulo mod for i = 1..n, reducing at every step."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    result = []
    x = 1
    for i in range(1, n + 1):
        x = x * i % mod
        result.append(x)
    return result


def nearly_equal(a: float, b: float, eps: float = 1e-9) -> bool:
    """Whether a and b differ by less than eps."""
    return abs(a - b) < eps