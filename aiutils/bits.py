"""Bit manipulation helpers for non-negative integers."""

from __future__ import annotations

import operator

__all__ = [
    "clz",
    "ctz",
    "popcount",
    "parity",
    "mssb",
    "log2",
    "ceil_log2",
    "reverse_bits",
    "is_power_of_two",
    "nearest_power_of_two",
    "nearest_multiple_of_power_of_two",
]


def _as_int(n: int) -> int:
    return operator.index(n)


def _non_negative(n: int, name: str = "n") -> int:
    value = _as_int(n)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _positive_width(width: int) -> int:
    value = _as_int(width)
    if value <= 0:
        raise ValueError(f"width must be positive, got {value}")
    return value


def clz(n: int, width: int = 64) -> int:
    """Return the number of leading zero bits of ``n`` in a ``width``-bit word.

    Raises ValueError when ``n`` is zero or does not fit in ``width`` bits.
    """
    value = _non_negative(n)
    bits = _positive_width(width)
    if value == 0:
        raise ValueError("clz is undefined for zero")
    if value.bit_length() > bits:
        raise ValueError(f"{value} does not fit in {bits} bits")
    return bits - value.bit_length()


def ctz(n: int) -> int:
    """Return the index of the least significant set bit of ``n``.

    Raises ValueError when ``n`` is zero.
    """
    value = _non_negative(n)
    if value == 0:
        raise ValueError("ctz is undefined for zero")
    return (value & -value).bit_length() - 1


def popcount(n: int) -> int:
    """Return the number of set bits in ``n``."""
    return bin(_non_negative(n)).count("1")


def parity(n: int) -> int:
    """Return 0 if ``n`` has an even number of set bits, 1 if odd."""
    return popcount(n) & 1


def mssb(n: int) -> int:
    """Return ``n`` with only its most significant set bit kept; 1 for zero."""
    value = _non_negative(n)
    if value == 0:
        return 1
    return 1 << (value.bit_length() - 1)


def log2(n: int) -> int:
    """Return floor(log2(n)) for positive ``n`` and -1 for zero."""
    return _non_negative(n).bit_length() - 1


def ceil_log2(n: int) -> int:
    """Return ceil(log2(n)); raises ValueError when ``n`` is zero."""
    value = _non_negative(n)
    if value == 0:
        raise ValueError("ceil_log2 is undefined for zero")
    return 1 + log2(value - 1)


def reverse_bits(n: int, width: int = 64) -> int:
    """Return ``n`` with the order of its ``width`` low bits reversed."""
    value = _non_negative(n)
    bits = _positive_width(width)
    if value.bit_length() > bits:
        raise ValueError(f"{value} does not fit in {bits} bits")
    return int(format(value, f"0{bits}b")[::-1], 2)


def is_power_of_two(n: int) -> bool:
    """Return True when ``n`` is a positive integral power of two."""
    value = _as_int(n)
    return value > 0 and (value - 1) & value == 0


def nearest_power_of_two(n: int) -> int:
    """Round ``n`` up to the nearest power of two; zero and negatives give 0."""
    value = _as_int(n)
    if value <= 0:
        return 0
    return 1 << (value - 1).bit_length()


def nearest_multiple_of_power_of_two(n: int, power_of_two: int) -> int:
    """Return the smallest multiple of ``power_of_two`` that is >= ``n``."""
    value = _non_negative(n)
    step = _as_int(power_of_two)
    if not is_power_of_two(step):
        raise ValueError(f"{step} is not a power of two")
    return (value + step - 1) & -step