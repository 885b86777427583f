"""
Reduce combinators
==================

Свертка курсора в одно значение.

`reduce_right` is not a separate algorithm: it is `reduce` over the
cursor produced by the Reversible capability.
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from .._errors import EmptyReductionError, NotReversibleError
from .._helpers import abandon, require_callable
from .._types import MISSING, Reducer
from ..adapt import cursor_of
from ..protocol import Cursor, Reversible


def _fold[A, T](source: Cursor[T], fn: Reducer[A, T], accumulator: A) -> A:
    while True:
        step = source.advance()
        if step.done:
            return accumulator
        try:
            accumulator = fn(accumulator, step.value)
        except Exception as exc:
            abandon((source,), exc)
            raise


def try_reduce[A, T](
    source: Cursor[T],
    fn: Reducer[A, T],
    initial: A | typing.Any = MISSING,
) -> Result[A, EmptyReductionError]:
    """
    Fold `source` to a single value.

    An unseeded reduction of an empty source is `Error(EmptyReductionError())`.

    Example:
        match try_reduce(cursor_of(words), operator.add):
            case Ok(text): ...
            case Error(_): ...
    """
    require_callable(fn, "reducer")
    source = cursor_of(source)
    if initial is MISSING:
        first = source.advance()
        if first.done:
            return Error(EmptyReductionError())
        initial = first.value
    return Ok(_fold(source, fn, initial))


def reduce[A, T](
    source: Cursor[T],
    fn: Reducer[A, T],
    initial: A | typing.Any = MISSING,
) -> A:
    """
    Fold `source` to a single value, raising EmptyReductionError when an
    unseeded reduction meets an empty source.
    """
    match try_reduce(source, fn, initial):
        case Ok(value):
            return value
        case Error(error):
            raise error


def reduce_right[A, T](
    source: Cursor[T],
    fn: Reducer[A, T],
    initial: A | typing.Any = MISSING,
) -> A:
    """
    Fold from the back. Requires a Reversible source.

    Example:
        reduce_right(cursor_of("ABC"), operator.add)  # "CBA"
    """
    require_callable(fn, "reducer")
    source = cursor_of(source)
    if not isinstance(source, Reversible):
        raise NotReversibleError(source)
    return reduce(source.reverse(), fn, initial)


__all__ = ("reduce", "reduce_right", "try_reduce")
