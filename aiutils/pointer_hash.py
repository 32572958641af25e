"""A 64-bit hash for pairs of addresses."""

from __future__ import annotations

import operator

__all__ = ["pointer_hash_combine", "pointer_hash"]

_M1 = 0x73B7B5E0BD014E8D
_M2 = 0x9E3779B97F4A7C15
_MASK = (1 << 64) - 1


def _uint64(value: int, name: str) -> int:
    number = operator.index(value)
    if not 0 <= number <= _MASK:
        raise ValueError(f"{name} must fit in an unsigned 64-bit integer, got {number}")
    return number


def pointer_hash_combine(h1: int, p2: int) -> int:
    """Mix the address ``p2`` into the 64-bit hash ``h1``."""
    hash_value = _uint64(h1, "h1")
    address = _uint64(p2, "p2")
    return (hash_value * _M1 - address * _M2) & _MASK


def pointer_hash(p1: int, p2: int) -> int:
    """Return a 64-bit hash of the two addresses ``p1`` and ``p2``."""
    return pointer_hash_combine(p1, p2)