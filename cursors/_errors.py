from __future__ import annotations

import typing


class EmptyReductionError(TypeError):
    """Reduction of an empty cursor without an initial value."""

    def __init__(self) -> None:
        super().__init__("Reduce of empty cursor with no initial value")


class NotReversibleError(TypeError):
    """Cursor has no reverse capability."""

    cursor: typing.Any

    def __init__(self, cursor: typing.Any) -> None:
        self.cursor = cursor
        super().__init__(f"{type(cursor).__name__} is not reversible")


class NotIterableError(TypeError):
    """Value cannot produce a cursor."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"{type(value).__name__} object cannot produce a cursor")


__all__ = ("EmptyReductionError", "NotIterableError", "NotReversibleError")
