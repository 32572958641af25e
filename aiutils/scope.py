"""Run an action when a scope is left."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType
from typing import Any

__all__ = ["AtScopeEnd", "at_scope_end"]


class AtScopeEnd:
    """Calls ``action`` once when the ``with`` block ends, unless already run.

    Not thread-safe; meant for use by the thread that created it.
    """

    def __init__(self, action: Callable[[], Any]) -> None:
        self._action = action
        self._executed = False

    def now(self) -> None:
        """Run the action now; it will not run again at scope end."""
        self._action()
        self._executed = True

    def once(self) -> None:
        """Run the action unless now() or once() already ran it."""
        if not self._executed:
            self._action()
        self._executed = True

    def extra(self) -> None:
        """Run the action one additional time, whatever happened before."""
        self._action()

    def copy(self) -> AtScopeEnd:
        """Return a new object with the same action that has not run yet."""
        return AtScopeEnd(self._action)

    def __enter__(self) -> AtScopeEnd:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.once()
        return False


def at_scope_end(action: Callable[[], Any]) -> AtScopeEnd:
    """Return an AtScopeEnd for ``action``, for use in a ``with`` statement."""
    return AtScopeEnd(action)