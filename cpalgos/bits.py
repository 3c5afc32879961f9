"""Bit manipulation helpers working on fixed-width two's complement integers."""

from collections.abc import Iterator


def _mask(width: int) -> int:
    if width <= 0:
        raise ValueError("width must be positive")
    return (1 << width) - 1


def bit_string(x: int, width: int = 32) -> str:
    """Render x as its width-bit two's complement binary string."""
    return format(x & _mask(width), f"0{width}b")


def set_bits(x: int, width: int = 32) -> list[int]:
    """Return the positions of the one bits of x among the lowest width bits."""
    value = x & _mask(width)
    return [k for k in range(width) if value >> k & 1]


def bit_set(x: int, k: int) -> int:
    """Set bit k of x."""
    return x | (1 << k)


def bit_reset(x: int, k: int) -> int:
    """Clear bit k of x."""
    return x & ~(1 << k)


def bit_flip(x: int, k: int) -> int:
    """Invert bit k of x."""
    return x ^ (1 << k)


def twos_complement(x: int, width: int = 32) -> int:
    """Return ~x + 1 as a signed width-bit integer."""
    value = (~x + 1) & _mask(width)
    if value >= 1 << (width - 1):
        value -= 1 << width
    return value


def mask_subsets(n: int) -> Iterator[list[int]]:
    """Yield the members of every subset of {0, ..., n-1}, in mask order."""
    if n < 0:
        raise ValueError("n must be non-negative")
    for mask in range(1 << n):
        yield [k for k in range(n) if mask >> k & 1]