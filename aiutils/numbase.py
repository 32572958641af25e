"""Render unsigned integers with an arbitrary digit alphabet."""

from __future__ import annotations

import operator
from collections.abc import Sequence

__all__ = ["ulong_to_base"]

_ULONG_MAX = (1 << 64) - 1


def ulong_to_base(n: int, digits: Sequence[str]) -> str:
    """Write ``n`` in base ``len(digits)``, where ``digits[k]`` stands for k.

    ``n`` must fit in an unsigned 64-bit integer and at least two digits are needed.
    """
    value = operator.index(n)
    if not 0 <= value <= _ULONG_MAX:
        raise ValueError(f"{value} does not fit in an unsigned 64-bit integer")
    base = len(digits)
    if base < 2:
        raise ValueError("at least two digits are required")
    out = []
    while True:
        value, remainder = divmod(value, base)
        out.append(digits[remainder])
        if not value:
            break
    return "".join(reversed(out))