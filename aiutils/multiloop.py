"""A variable number of nested loops driven by one object."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field

__all__ = ["MultiLoopState", "MultiLoop"]


@dataclass
class MultiLoopState:
    """A snapshot of the counters and position of a MultiLoop."""

    counters: list[int] = field(default_factory=list)
    current_loop: int = 0
    continued: bool = False


class MultiLoop:
    """Runs ``n`` loops nested inside each other.

    Typical use::

        ml = MultiLoop(3)
        while not ml.finished():
            while ml() < 4:
                if ml.inner_loop():
                    ...  # body of the innermost loop, counters in ml[0..2]
                ml.start_next_loop_at(0)
            if (loop := ml.end_of_loop()) >= 0:
                ...  # end of the body of loop ``loop``
            ml.next_loop()
    """

    def __init__(self, n: int, b: int = 0) -> None:
        count = operator.index(n)
        if count < 0:
            raise ValueError(f"the number of loops must be non-negative, got {count}")
        self._counters = [0] * (count + 1)
        self._current = 1 if count > 0 else 0
        self._continued = False
        self._counters[self._current] = b

    def state(self) -> MultiLoopState:
        """Return a copy of the internal state."""
        return MultiLoopState(list(self._counters), self._current, self._continued)

    def set_state(self, state: MultiLoopState) -> None:
        """Continue from a state previously returned by state()."""
        self._counters = list(state.counters)
        self._current = state.current_loop
        self._continued = state.continued

    def loop(self) -> int:
        """Return the number of the current loop, counting from 0."""
        return self._current - 1

    def _check_index(self, i: int) -> int:
        index = operator.index(i)
        if not 0 <= index < self._current:
            raise IndexError(f"loop {index} is not active (active loops: 0..{self._current - 1})")
        return index

    def __getitem__(self, i: int) -> int:
        """Return the counter of loop ``i``."""
        return self._counters[self._check_index(i) + 1]

    def __setitem__(self, i: int, value: int) -> None:
        self._counters[self._check_index(i) + 1] = value

    def __call__(self, n: int = 0) -> int:
        """Return the counter of the loop ``n`` levels above the current one."""
        offset = operator.index(n)
        if not 0 <= offset < self._current:
            raise IndexError(f"no loop {offset} levels above the current one")
        return self._counters[self._current - offset]

    def set_counter(self, value: int) -> None:
        """Set the counter of the current loop to ``value``."""
        self._counters[self._current] = value

    def start_next_loop_at(self, b: int) -> None:
        """Enter the next loop starting at ``b``, or advance the innermost one."""
        if self._current < len(self._counters) - 1:
            self._current += 1
            self._counters[self._current] = b
        else:
            self._counters[self._current] += 1

    def next_loop(self) -> None:
        """Leave the current loop and advance the loop around it."""
        if self._current <= 0:
            raise RuntimeError("all loops are already finished")
        self._current -= 1
        self._counters[self._current] += 1
        self._continued = False

    def breaks(self, n: int) -> None:
        """Break out of ``n`` loops; 0 means continue the current loop."""
        count = operator.index(n)
        if count < 0:
            raise ValueError(f"cannot break out of {count} loops")
        new_current = self._current - (count - 1)
        if new_current <= 0:
            raise ValueError(f"cannot break out of {count} loops from loop {self._current - 1}")
        self._continued = count == 0
        self._current = new_current

    def finished(self) -> bool:
        """Return True when all loops are finished."""
        return self._current == 0

    def inner_loop(self) -> bool:
        """Return True when the current loop is the innermost one."""
        return self._current == len(self._counters) - 1

    def end_of_loop(self) -> int:
        """Return the loop whose body just ended, or -1 if there is none."""
        return -1 if self._continued else self._current - 2