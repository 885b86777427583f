"""
Search combinators
==================

Consume a cursor until an answer is known. Answering early closes the source.
"""

from __future__ import annotations

import typing

from kungfu import Nothing, Option, Some

from .._helpers import abandon, close_cursor, require_callable
from .._types import Predicate
from ..adapt import cursor_of
from ..protocol import Cursor


def _first_where[T](source: Cursor[T], predicate: Predicate[T], wanted: bool) -> Option[T]:
    """Pull until `bool(predicate(value)) is wanted`; close the source on a hit."""
    while True:
        step = source.advance()
        if step.done:
            return Nothing()
        try:
            hit = bool(predicate(step.value)) is wanted
        except Exception as exc:
            abandon((source,), exc)
            raise
        if hit:
            close_cursor(source)
            return Some(step.value)


def find[T](source: Cursor[T], predicate: Predicate[T]) -> Option[T]:
    """
    First value passing `predicate`.

    Example:
        find(cursor_of(users), lambda u: u.is_admin)  # Some(user) | Nothing()
    """
    require_callable(predicate, "predicate")
    return _first_where(cursor_of(source), predicate, True)


def some[T](source: Cursor[T], predicate: Predicate[T]) -> bool:
    """True as soon as one value passes; False when the source runs out."""
    require_callable(predicate, "predicate")
    match _first_where(cursor_of(source), predicate, True):
        case Some():
            return True
        case _:
            return False


def every[T](source: Cursor[T], predicate: Predicate[T]) -> bool:
    """False as soon as one value fails; True when the source runs out."""
    require_callable(predicate, "predicate")
    match _first_where(cursor_of(source), predicate, False):
        case Some():
            return False
        case _:
            return True


def _same_value_zero(a: typing.Any, b: typing.Any) -> bool:
    # nan never equals itself but is still "included"
    return a == b or (a != a and b != b)


def includes(source: Cursor[typing.Any], needle: typing.Any) -> bool:
    """`some` with SameValueZero equality (nan finds nan)."""
    return some(source, lambda value: _same_value_zero(value, needle))


__all__ = ("every", "find", "includes", "some")
