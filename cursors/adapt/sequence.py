"""
Sequence cursor
===============

Index-based cursor over a Python `Sequence`. Reversible: `reverse()` walks
the items not consumed yet, back to front.
"""

from __future__ import annotations

import typing
from collections.abc import Sequence

from ..protocol import Closable, Cursor, Reversible
from ..step import DONE, Done, Next, StepResult


class SequenceCursor[T](Cursor[T], Closable[typing.Any], Reversible[T]):
    """
    Cursor over `items[lo:hi]`, forwards or backwards.

    Walking forwards without `hi` reads `len(items)` on every pull, so items
    appended before the cursor runs out are produced, like a list iterator.
    Walking backwards, and `reverse()`, fix the bounds at call time.
    """

    __slots__ = ("_items", "_lo", "_hi", "_backwards")

    def __init__(
        self,
        items: Sequence[T],
        lo: int = 0,
        hi: int | None = None,
        *,
        backwards: bool = False,
    ) -> None:
        self._items: Sequence[T] | None = items
        self._lo = lo
        # None: up to the current end of `items`
        self._hi = len(items) if hi is None and backwards else hi
        self._backwards = backwards

    def _end(self, items: Sequence[T]) -> int:
        return len(items) if self._hi is None else self._hi

    def advance(self) -> StepResult[T, None]:
        items = self._items
        if items is None:
            return DONE
        if self._lo >= self._end(items):
            self._items = None
            return DONE
        if self._backwards:
            self._hi -= 1  # type: ignore[operator]
            return Next(items[self._hi])  # type: ignore[index]
        value = items[self._lo]
        self._lo += 1
        return Next(value)

    def close[U](self, value: U = None) -> Done[U]:  # type: ignore[assignment]
        self._items = None
        return Done(value)

    def reverse(self) -> SequenceCursor[T]:
        items = self._items
        if items is None:
            return SequenceCursor(())
        return SequenceCursor(items, self._lo, self._end(items), backwards=not self._backwards)

    def __repr__(self) -> str:
        if self._items is None:
            state = "spent"
        else:
            state = f"{self._lo}:{'' if self._hi is None else self._hi}"
        return f"SequenceCursor({state}, backwards={self._backwards})"


__all__ = ("SequenceCursor",)
