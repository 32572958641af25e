"""Strict weak orderings for lists and pairs that may hold lists."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import Any

__all__ = ["VectorCompare", "PairCompare"]

Less = Callable[[Any, Any], bool]


class VectorCompare:
    """Orders lists first by length and then element by element."""

    def __init__(self, element_less: Less = operator.lt) -> None:
        self.element_less = element_less

    def __call__(self, lhs: Sequence[Any], rhs: Sequence[Any]) -> bool:
        """Return True when ``lhs`` comes before ``rhs``."""
        if len(lhs) != len(rhs):
            return len(lhs) < len(rhs)
        for left, right in zip(lhs, rhs):
            if self.element_less(left, right):
                return True
            if self.element_less(right, left):
                return False
        return False


class PairCompare:
    """Orders pairs by their first member and then by their second.

    A member that is a list is ordered with VectorCompare using the matching
    element ordering; any other member is ordered with ``<``.
    """

    def __init__(self, first_less: Less = operator.lt, second_less: Less = operator.lt) -> None:
        self._first = VectorCompare(first_less)
        self._second = VectorCompare(second_less)

    @staticmethod
    def _less(vector_compare: VectorCompare, lhs: Any, rhs: Any) -> bool:
        if isinstance(lhs, list):
            return vector_compare(lhs, rhs)
        return lhs < rhs

    def __call__(self, lhs: tuple[Any, Any], rhs: tuple[Any, Any]) -> bool:
        """Return True when pair ``lhs`` comes before pair ``rhs``."""
        if self._less(self._first, lhs[0], rhs[0]):
            return True
        if self._less(self._first, rhs[0], lhs[0]):
            return False
        return self._less(self._second, lhs[1], rhs[1])