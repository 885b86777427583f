"""
Zip combinator
==============

Advances N cursors in lockstep, stopping at the first exhausted one.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._helpers import abandon, close_all
from ..adapt import cursor_of
from ..protocol import Closable, Cursor
from ..step import DONE, Done, Next, StepResult


@dataclass(slots=True)
class _ZipState:
    cursors: list[Cursor[typing.Any]]

    def others(self, index: int) -> list[Cursor[typing.Any]]:
        return self.cursors[:index] + self.cursors[index + 1 :]


class ZipCursor(Cursor[tuple[typing.Any, ...]], Closable[typing.Any]):
    """Cursor produced by `zipped`."""

    __slots__ = ("_state",)

    def __init__(self, cursors: list[Cursor[typing.Any]]) -> None:
        self._state: _ZipState | None = _ZipState(cursors)

    def advance(self) -> StepResult[tuple[typing.Any, ...], typing.Any]:
        state = self._state
        if state is None:
            return DONE

        values: list[typing.Any] = []
        for index, cursor in enumerate(state.cursors):
            try:
                step = cursor.advance()
            except Exception as exc:
                self._state = None
                abandon(state.others(index), exc)
                raise
            if step.done:
                # Cursor `index` is exhausted, the rest are abandoned
                self._state = None
                close_all(state.others(index))
                return step
            values.append(step.value)
        return Next(tuple(values))

    def close[U](self, value: U = None) -> Done[U]:  # type: ignore[assignment]
        state, self._state = self._state, None
        if state is not None:
            close_all(state.cursors)
        return Done(value)


def zipped(first: typing.Any, *others: typing.Any) -> ZipCursor:
    """
    Example:
        zipped([1, 2, 3], "ab")  # (1, "a"), (2, "b")
    """
    cursors: list[Cursor[typing.Any]] = []
    for item in (first, *others):
        try:
            cursors.append(cursor_of(item))
        except Exception as exc:
            abandon(cursors, exc)
            raise
    return ZipCursor(cursors)


__all__ = ("ZipCursor", "zipped")
