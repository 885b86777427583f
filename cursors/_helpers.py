"""Internal helpers for cursors.

Closing and argument checks shared by the combinator modules.
These are not part of the public API but can be used for writing custom cursors."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from .protocol import Closable, Cursor
from .step import Done


def require_callable(fn: typing.Any, name: str) -> None:
    """Usage check, raised before any upstream is touched."""
    if not callable(fn):
        raise TypeError(f"{name} must be callable, got {type(fn).__name__}")


def close_cursor[U](cursor: Cursor[typing.Any], value: U = None) -> Done[U]:  # type: ignore[assignment]
    """
    Close `cursor` if it has the capability.

    Closing a cursor without `Closable` is a no-op terminal result.
    """
    if isinstance(cursor, Closable):
        return cursor.close(value)
    return Done(value)


def close_all(cursors: Iterable[Cursor[typing.Any]]) -> None:
    """
    Close every cursor in order.

    Every close is attempted; the first failure is re-raised afterwards.
    """
    failure: Exception | None = None
    for cursor in cursors:
        try:
            close_cursor(cursor)
        except Exception as exc:
            if failure is None:
                failure = exc
    if failure is not None:
        raise failure


def abandon(cursors: Iterable[Cursor[typing.Any]], error: BaseException) -> None:
    """
    Close cursors left behind because `error` is propagating.

    Every close is attempted. Close failures never replace `error`;
    they are attached to it as notes. The caller re-raises `error`.
    """
    for cursor in cursors:
        try:
            close_cursor(cursor)
        except Exception as exc:
            error.add_note(f"closing {cursor!r} also failed: {exc!r}")


__all__ = (
    "require_callable",
    "close_cursor",
    "close_all",
    "abandon",
)
