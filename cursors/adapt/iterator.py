"""
Iterator cursor
===============

Wraps a foreign Python iterator. `close` and `fail` are synthesized from
whatever the iterator exposes (`close()` / `throw()`, as generators do);
absent operations degrade to a no-op close and a re-raising fail.
"""

from __future__ import annotations

import typing
from collections.abc import Iterator

from ..protocol import Closable, Cursor, Failable
from ..step import DONE, Done, Next, StepResult


class IteratorCursor[T](Cursor[T], Closable[typing.Any], Failable):
    """Cursor over a Python iterator or generator."""

    __slots__ = ("_iterator",)

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iterator: Iterator[T] | None = iterator

    def advance(self) -> StepResult[T, typing.Any]:
        iterator = self._iterator
        if iterator is None:
            return DONE
        try:
            value = next(iterator)
        except StopIteration as stop:
            self._iterator = None
            return Done(stop.value)
        except Exception:
            self._iterator = None
            raise
        return Next(value)

    def close[U](self, value: U = None) -> Done[U]:  # type: ignore[assignment]
        iterator, self._iterator = self._iterator, None
        if iterator is not None:
            closer = getattr(iterator, "close", None)
            if callable(closer):
                closer()
        return Done(value)

    def fail(self, error: BaseException) -> StepResult[T, typing.Any]:
        iterator = self._iterator
        thrower = getattr(iterator, "throw", None)
        if not callable(thrower):
            raise error
        try:
            value = thrower(error)
        except StopIteration as stop:
            self._iterator = None
            return Done(stop.value)
        except BaseException:
            self._iterator = None
            raise
        return Next(value)

    def __repr__(self) -> str:
        return f"IteratorCursor({self._iterator!r})"


__all__ = ("IteratorCursor",)
