"""
Transform core
==============

One generic engine: a cursor that rewrites each upstream step through a
transform function. map, filter, slice, scan and tap are all policies over it.

The transform function answers with a closed variant:

    Pass()         emit the upstream step unchanged
    Remap(value)   emit Next(value)
    Skip()         pull the next upstream item
    Stop(value)    end early: close upstream, emit Done(value)
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._helpers import abandon, close_cursor, require_callable
from ..adapt import SequenceCursor, cursor_of
from ..protocol import Closable, Cursor, Failable, Reversible
from ..step import DONE, Done, Next, StepResult

# ============================================================================
# Verdict
# ============================================================================


@dataclass(frozen=True, slots=True)
class Pass:
    pass


@dataclass(frozen=True, slots=True)
class Remap[R]:
    value: R


@dataclass(frozen=True, slots=True)
class Skip:
    pass


@dataclass(frozen=True, slots=True)
class Stop[U]:
    value: U = None  # type: ignore[assignment]


type Verdict[R] = Pass | Remap[R] | Skip | Stop[typing.Any]

PASS: typing.Final = Pass()
SKIP: typing.Final = Skip()
STOP: typing.Final = Stop()

# TransformFn = (context, upstream step) -> verdict
type TransformFn[C, T, R] = Callable[[C, Next[T]], Verdict[R]]


# ============================================================================
# Transformed cursor
# ============================================================================


@dataclass(slots=True)
class TransformState[C, T, R]:
    """Everything a transformed cursor owns while it is live."""

    source: Cursor[T]
    fn: TransformFn[C, T, R]
    context: C


class TransformedCursor[C, T, R](Cursor[R], Closable[typing.Any], Failable):
    """
    Cursor produced by `create_transformed`.

    Becomes spent (state cleared) on the first completion it sees or causes.
    """

    __slots__ = ("_state",)

    def __init__(self, state: TransformState[C, T, R]) -> None:
        self._state: TransformState[C, T, R] | None = state

    def advance(self) -> StepResult[R, typing.Any]:
        state = self._state
        if state is None:
            return DONE

        while True:
            try:
                step = state.source.advance()
            except Exception:
                self._state = None
                raise

            if step.done:
                # Upstream is exhausted, not abandoned: nothing to close
                self._state = None
                return step

            try:
                verdict = state.fn(state.context, step)
            except Exception as exc:
                self._state = None
                abandon((state.source,), exc)
                raise

            match verdict:
                case Pass():
                    return step
                case Remap(value):
                    return Next(value)
                case Skip():
                    continue
                case Stop(value):
                    self._state = None
                    close_cursor(state.source)
                    return Done(value)
                case _:
                    self._state = None
                    error = TypeError(
                        f"transform must return Pass, Remap, Skip or Stop, got {verdict!r}"
                    )
                    abandon((state.source,), error)
                    raise error

    def close[U](self, value: U = None) -> Done[U]:  # type: ignore[assignment]
        state, self._state = self._state, None
        if state is None:
            return Done(value)
        return close_cursor(state.source, value)

    def fail(self, error: BaseException) -> StepResult[R, typing.Any]:
        state = self._state
        if state is None or not isinstance(state.source, Failable):
            raise error
        try:
            step = state.source.fail(error)
        except BaseException:
            self._state = None
            raise
        if step.done:
            self._state = None
        return step


class ReversibleTransformedCursor[C, T, R](TransformedCursor[C, T, R], Reversible[R]):
    """Transformed cursor over a reversible upstream, for stateless transforms."""

    __slots__ = ()

    def reverse(self) -> Cursor[R]:
        state = self._state
        if state is None:
            return SequenceCursor(())
        upstream = typing.cast(Reversible[T], state.source)
        return create_transformed(upstream.reverse(), state.fn, state.context, reversible=True)


def create_transformed[C, T, R](
    source: Cursor[T],
    fn: TransformFn[C, T, R],
    context: C,
    *,
    reversible: bool = False,
) -> TransformedCursor[C, T, R]:
    """
    Generic transform combinator.

    `reversible=True` declares the transform stateless: when the upstream is
    Reversible, so is the result.
    """
    require_callable(fn, "transform")
    source = cursor_of(source)
    state = TransformState(source, fn, context)
    if reversible and isinstance(source, Reversible):
        return ReversibleTransformedCursor(state)
    return TransformedCursor(state)


# ============================================================================
# Public transform
# ============================================================================


def _call_user[T, R](fn: Callable[[Next[T]], Verdict[R]], step: Next[T]) -> Verdict[R]:
    return fn(step)


def transform[T, R](
    source: Cursor[T],
    fn: Callable[[Next[T]], Verdict[R]],
) -> Cursor[R]:
    """
    Rewrite each step of `source` with `fn(step) -> Verdict`.

    Example:
        def evens_until_ten(step):
            if step.value >= 10:
                return Stop()
            return PASS if step.value % 2 == 0 else SKIP

        transform(cursor_of(range(100)), evens_until_ten)  # 0, 2, 4, 6, 8
    """
    require_callable(fn, "transform")
    return create_transformed(source, _call_user, fn)


__all__ = (
    # Verdict
    "PASS",
    "SKIP",
    "STOP",
    "Pass",
    "Remap",
    "Skip",
    "Stop",
    "Verdict",
    # Core
    "TransformFn",
    "TransformState",
    "TransformedCursor",
    "ReversibleTransformedCursor",
    "create_transformed",
    "transform",
)
