"""
Adaptor boundary
================

Подъем произвольных Python-итерируемых объектов в Cursor.

- `cursor_of(value)` - get a cursor for any cursor-producing value
- `is_spreadable(value)` - may concat/flatten expand this value?
- `atom(value)` - mark a value as non-spreadable
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Mapping, Sequence

from .._errors import NotIterableError
from ..protocol import Cursor
from .iterator import IteratorCursor
from .sequence import SequenceCursor

# Per-object override consulted by concat/flatten
SPREADABLE: typing.Final = "__spreadable__"

# Iterable, but treated as scalars unless they opt in through SPREADABLE
_SCALAR_TYPES: typing.Final = (str, bytes, bytearray, memoryview, Mapping)


def cursor_of[T](value: Iterable[T] | Cursor[T]) -> Cursor[T]:
    """
    Adapt `value` into a Cursor.

    Cursors come back unchanged, sequences become reversible
    `SequenceCursor`s, other iterables go through `iter()`.

    Example:
        cursor_of(["A", "B"]).map(str.lower)  # a, b
    """
    match value:
        case Cursor():
            return value
        case Sequence():
            return SequenceCursor(value)
        case Iterable():
            return IteratorCursor(iter(value))
        case _:
            raise NotIterableError(value)


def is_cursor_producing(value: typing.Any) -> bool:
    return isinstance(value, (Cursor, Iterable))


def is_spreadable(value: typing.Any) -> bool:
    """
    Cursor-producing and not flagged otherwise.

    Without an explicit flag, strings, bytes and mappings are scalars.
    """
    if not is_cursor_producing(value):
        return False
    flag = getattr(value, SPREADABLE, None)
    if flag is not None:
        return bool(flag)
    return not isinstance(value, _SCALAR_TYPES)


class AtomList[T](list[T]):
    """List that concat/flatten emit as a single item."""

    __spreadable__ = False


class AtomTuple[T](tuple[T, ...]):
    """Tuple that concat/flatten emit as a single item."""

    __spreadable__ = False


def atom[T](value: T) -> T:
    """
    Mark `value` as non-spreadable.

    Lists and tuples come back as equal `AtomList` / `AtomTuple` copies,
    other objects get the flag set on them.
    """
    match value:
        case list():
            return AtomList(value)  # type: ignore[return-value]
        case tuple():
            return AtomTuple(value)  # type: ignore[return-value]
    try:
        setattr(value, SPREADABLE, False)
    except AttributeError as exc:
        raise TypeError(f"cannot flag {type(value).__name__} as non-spreadable") from exc
    return value


__all__ = (
    "SPREADABLE",
    "AtomList",
    "AtomTuple",
    "IteratorCursor",
    "SequenceCursor",
    "atom",
    "cursor_of",
    "is_cursor_producing",
    "is_spreadable",
)
