"""Small helpers for lists, strings and other sequences."""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

__all__ = [
    "QuotedList",
    "sorted_insert",
    "unstable_remove_if",
    "unstable_remove",
    "split",
    "split_n",
    "for_each_until",
    "concat",
    "zconcat",
]

T = TypeVar("T")


@dataclass
class QuotedList:
    """Formats the elements of a container, each in double quotes."""

    open: str = "{ "
    separator: str = ", "
    close: str = " }"

    def format(self, container: Iterable[Any]) -> str:
        """Return the quoted elements between ``open`` and ``close``."""
        body = self.separator.join(f'"{element}"' for element in container)
        return f"{self.open}{body}{self.close}"


def sorted_insert(
    seq: MutableSequence[T], item: T, key: Callable[[T], Any] | None = None
) -> int:
    """Insert ``item`` into the sorted ``seq`` after any equal elements.

    Returns the index at which the item was inserted.
    """
    if key is None:
        index = bisect.bisect_right(seq, item)
    else:
        index = bisect.bisect_right(seq, key(item), key=key)
    seq.insert(index, item)
    return index


def _unstable_remove_end(seq: MutableSequence[T], matches: Callable[[T], bool]) -> int:
    first, last = 0, len(seq)
    while first < last:
        if not matches(seq[first]):
            first += 1
            continue
        last -= 1
        while first < last and matches(seq[last]):
            last -= 1
        if first == last:
            break
        seq[first] = seq[last]
        first += 1
    return first


def unstable_remove_if(seq: MutableSequence[T], predicate: Callable[[T], Any]) -> int:
    """Remove, in place, every element for which ``predicate`` is true.

    Removed elements are overwritten by elements taken from the end, so the
    order of what remains is not kept. Returns the number of removed elements.
    """
    end = _unstable_remove_end(seq, lambda element: bool(predicate(element)))
    removed = len(seq) - end
    del seq[end:]
    return removed


def unstable_remove(seq: MutableSequence[T], value: Any) -> int:
    """Remove, in place, every element equal to ``value``; order is not kept.

    Returns the number of removed elements.
    """
    end = _unstable_remove_end(seq, lambda element: element == value)
    removed = len(seq) - end
    del seq[end:]
    return removed


def _check_delim(delim: str) -> None:
    if len(delim) != 1:
        raise ValueError(f"the delimiter must be a single character, got {delim!r}")


def split(text: str, delim: str) -> list[str]:
    """Split ``text`` at every ``delim``; empty tokens are kept.

    There is always one token more than there are delimiters.
    """
    _check_delim(delim)
    return text.split(delim)


def split_n(text: str, delim: str, n: int) -> list[str]:
    """Split ``text`` into exactly ``n`` tokens separated by ``delim``.

    Raises ValueError when there are too many or too few delimiters.
    """
    _check_delim(delim)
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    tokens = text.split(delim)
    verb = "is" if n == 2 else "are"
    if len(tokens) > n:
        raise ValueError(
            f"Too many separator characters ('{delim}') in \"{text}\" "
            f"(exactly {n - 1} {verb} required)"
        )
    if len(tokens) < n:
        raise ValueError(
            f"Not enough separator characters ('{delim}') in \"{text}\" "
            f"(exactly {n - 1} {verb} required)"
        )
    return tokens


def for_each_until(iterable: Iterable[T], fn: Callable[[T], Any]) -> bool:
    """Call ``fn`` on each element until it returns true; return whether it did."""
    return any(fn(element) for element in iterable)


def _join(first: Sequence[Any], second: Sequence[Any]) -> Any:
    if isinstance(first, str) and isinstance(second, str):
        return first + second
    if isinstance(first, (bytes, bytearray)) and isinstance(second, (bytes, bytearray)):
        return bytes(first) + bytes(second)
    return tuple(first) + tuple(second)


def concat(first: Sequence[Any], second: Sequence[Any]) -> Any:
    """Return the elements of ``first`` followed by those of ``second``.

    Two strings or two byte strings give a string or bytes; anything else a tuple.
    """
    return _join(first, second)


def zconcat(first: Sequence[Any], second: Sequence[Any]) -> Any:
    """Concatenate two zero terminated sequences into one zero terminated one.

    The terminator of ``first`` is dropped.
    """
    if len(first) == 0:
        raise ValueError("the first sequence must hold at least its terminator")
    return _join(first[:-1], second)