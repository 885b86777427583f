"""
Traced cursor
=============

Records every protocol call made on a cursor into a `Log`, without changing
what the cursor does. This is how pulls and closes are observed: how many
times an upstream was advanced, in which order siblings were closed.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._helpers import close_cursor
from ..adapt import cursor_of
from ..protocol import Closable, Cursor, Failable
from ..step import Done, StepResult
from .log import Log

type TraceKind = typing.Literal["advance", "close", "fail"]


@dataclass(frozen=True, slots=True)
class TraceEvent:
    """
    One protocol call.

    payload: the step returned by `advance`, the value passed to `close`,
    or the error passed to `fail`.
    """

    label: str
    kind: TraceKind
    payload: typing.Any = None


class TracedCursor[T](Cursor[T], Closable[typing.Any], Failable):
    """Cursor produced by `traced`."""

    __slots__ = ("_source", "_log", "_label")

    def __init__(self, source: Cursor[T], log: Log[TraceEvent], label: str) -> None:
        self._source = source
        self._log = log
        self._label = label

    def advance(self) -> StepResult[T, typing.Any]:
        step = self._source.advance()
        self._log.append(TraceEvent(self._label, "advance", step))
        return step

    def close[U](self, value: U = None) -> Done[U]:  # type: ignore[assignment]
        self._log.append(TraceEvent(self._label, "close", value))
        return close_cursor(self._source, value)

    def fail(self, error: BaseException) -> StepResult[T, typing.Any]:
        self._log.append(TraceEvent(self._label, "fail", error))
        if not isinstance(self._source, Failable):
            raise error
        return self._source.fail(error)


def traced[T](source: Cursor[T], log: Log[TraceEvent], *, label: str = "") -> TracedCursor[T]:
    """
    Example:
        log = Log[TraceEvent]()
        some(traced(cursor_of("ABC"), log, label="src"), lambda x: x == "B")
        [e.kind for e in log]  # ["advance", "advance", "close"]
    """
    return TracedCursor(cursor_of(source), log, label)


def count(log: Log[TraceEvent], kind: TraceKind, label: str | None = None) -> int:
    """How many `kind` events (optionally for one `label`) the log holds."""
    return len(log.where(lambda e: e.kind == kind and (label is None or e.label == label)))


__all__ = ("TraceEvent", "TraceKind", "TracedCursor", "count", "traced")
