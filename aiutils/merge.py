"""Three-way merge of sorted sequences."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

__all__ = ["three_way_merge"]

PayloadMerger = Callable[[Any, Any, Any], Iterable[Any]]


class _Cursor:
    """Walks an iterable, keeping the current element at hand."""

    __slots__ = ("_iterator", "value", "done")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iterator: Iterator[Any] = iter(iterable)
        self.value: Any = None
        self.done = False
        self.advance()

    def advance(self) -> None:
        try:
            self.value = next(self._iterator)
        except StopIteration:
            self.value = None
            self.done = True

    def take(self) -> Any:
        value = self.value
        self.advance()
        return value


def three_way_merge(
    left: Iterable[Any],
    base: Iterable[Any],
    right: Iterable[Any],
    payload_merger: PayloadMerger,
    key: Callable[[Any], Any] | None = None,
    payload_equal: Callable[[Any, Any], bool] = operator.eq,
) -> list[Any]:
    """Merge the changes that ``left`` and ``right`` made to ``base``.

    All three inputs must be sorted by ``key`` (the element itself when None),
    with each key present at most once per input. Elements with equal keys are
    compared with ``payload_equal``. Where only one side changed an element the
    change is kept; where both sides made the same change it is kept once.
    In every real conflict ``payload_merger(left_item, base_item, right_item)``
    is called, with None for a side that lacks the key, and the elements of
    the iterable it returns are placed in the result.
    """
    key_of = (lambda item: item) if key is None else key

    def before(x: Any, y: Any) -> bool:
        return key_of(x) < key_of(y)

    b = _Cursor(base)
    l = _Cursor(left)  # noqa: E741
    r = _Cursor(right)
    result: list[Any] = []

    while not (b.done and l.done and r.done):
        if not b.done and (l.done or before(b.value, l.value)):
            if r.done or before(b.value, r.value):
                # Only in base: removed by both sides.
                b.advance()
                continue
            if before(r.value, b.value):
                # Only in right: added there.
                result.append(r.take())
                continue
            # Base and right share a key that left removed.
            if not payload_equal(b.value, r.value):
                result.extend(payload_merger(None, b.value, r.value))
            b.advance()
            r.advance()
            continue

        if not l.done and (r.done or before(l.value, r.value)):
            if b.done or before(l.value, b.value):
                # Only in left: added there.
                result.append(l.take())
                continue
            # Base and left share a key that right removed.
            if not payload_equal(b.value, l.value):
                result.extend(payload_merger(l.value, b.value, None))
            b.advance()
            l.advance()
            continue

        if not r.done and (l.done or before(r.value, l.value)):
            result.append(r.take())
            continue

        if not r.done and (b.done or before(r.value, b.value)):
            # Both sides added the same key.
            if payload_equal(r.value, l.value):
                result.append(r.value)
            else:
                result.extend(payload_merger(l.value, None, r.value))
            r.advance()
            l.advance()
            continue

        # The key is present in all three.
        if payload_equal(b.value, r.value):
            result.append(l.value)
        elif payload_equal(b.value, l.value):
            result.append(r.value)
        elif payload_equal(l.value, r.value):
            result.append(r.value)
        else:
            result.extend(payload_merger(l.value, b.value, r.value))
        b.advance()
        l.advance()
        r.advance()

    return result