"""
Concat combinator
=================

Chains sources one after another. Spreadable arguments contribute their
items, everything else contributes itself as a single item.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._helpers import abandon, close_all
from ..adapt import SequenceCursor, cursor_of, is_spreadable
from ..protocol import Closable, Cursor
from ..step import DONE, Done, StepResult


@dataclass(slots=True)
class _ConcatState:
    cursors: list[Cursor[typing.Any]]
    index: int = 0


class ConcatCursor(Cursor[typing.Any], Closable[typing.Any]):
    """Cursor produced by `concat`."""

    __slots__ = ("_state",)

    def __init__(self, cursors: list[Cursor[typing.Any]]) -> None:
        self._state: _ConcatState | None = _ConcatState(cursors)

    def advance(self) -> StepResult[typing.Any, typing.Any]:
        state = self._state
        if state is None:
            return DONE

        step: StepResult[typing.Any, typing.Any] = DONE
        while state.index < len(state.cursors):
            try:
                step = state.cursors[state.index].advance()
            except Exception as exc:
                self._state = None
                abandon(state.cursors[state.index + 1 :], exc)
                raise
            if not step.done:
                return step
            state.index += 1

        self._state = None
        return step

    def close[U](self, value: U = None) -> Done[U]:  # type: ignore[assignment]
        state, self._state = self._state, None
        if state is not None:
            # Finished cursors need no closing
            close_all(state.cursors[state.index :])
        return Done(value)


def concat(first: typing.Any, *rest: typing.Any) -> ConcatCursor:
    """
    Example:
        concat(["A", "B"], atom(["C", "D"]), "E")  # A, B, ["C", "D"], "E"
    """
    cursors: list[Cursor[typing.Any]] = [cursor_of(first)]
    for item in rest:
        if not is_spreadable(item):
            cursors.append(SequenceCursor((item,)))
            continue
        try:
            cursors.append(cursor_of(item))
        except Exception as exc:
            abandon(cursors, exc)
            raise
    return ConcatCursor(cursors)


__all__ = ("ConcatCursor", "concat")
