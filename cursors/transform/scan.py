"""
Scan combinator
===============

Running reductions: emits every intermediate accumulator.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._helpers import require_callable
from .._types import MISSING, Reducer
from ..protocol import Cursor
from ..step import Next
from .core import PASS, Pass, Remap, create_transformed


@dataclass(slots=True)
class _ScanState[A, T]:
    fn: Reducer[A, T]
    accumulator: typing.Any


def _scan_step[A, T](state: _ScanState[A, T], step: Next[T]) -> Pass | Remap[A]:
    if state.accumulator is MISSING:
        # Unseeded: the first value seeds the accumulator and passes through
        state.accumulator = step.value
        return PASS
    state.accumulator = state.fn(state.accumulator, step.value)
    return Remap(state.accumulator)


def scan[A, T](
    source: Cursor[T],
    fn: Reducer[A, T],
    initial: A | typing.Any = MISSING,
) -> Cursor[A]:
    """
    Example:
        scan(cursor_of([1, 2, 3, 4]), operator.add)     # 1, 3, 6, 10
        scan(cursor_of([1, 2, 3]), operator.add, 10)    # 11, 13, 16
    """
    require_callable(fn, "scan function")
    return create_transformed(source, _scan_step, _ScanState(fn, initial))


__all__ = ("scan",)
