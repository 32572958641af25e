"""Approximate comparison and ceiling helpers."""

from __future__ import annotations

__all__ = ["almost_equal", "ceil_int"]


def _norm(z: complex) -> float:
    return z.real * z.real + z.imag * z.imag


def almost_equal(
    z1: complex | float, z2: complex | float, abs_relative_error: float
) -> bool:
    """Return True when ``z1`` and ``z2`` are approximately the same.

    For real numbers the test is ``|z1 - z2| <= |z1 + z2| / 2 * abs_relative_error``;
    for complex numbers the same relation is checked on squared magnitudes.
    Any NaN involved makes the result False.
    """
    if isinstance(z1, complex) or isinstance(z2, complex):
        a, b = complex(z1), complex(z2)
        return 4 * _norm(a - b) <= abs_relative_error * abs_relative_error * _norm(a + b)
    return 2 * abs(z1 - z2) <= abs_relative_error * abs(z1 + z2)


def ceil_int(num: float) -> int:
    """Return the smallest integer not less than ``num``."""
    truncated = int(num)
    if float(truncated) == num:
        return truncated
    return truncated + (1 if num > 0 else 0)