"""
Slice combinator
================

Index window over a cursor. Reaching `end` stops the chain and closes the
upstream, so an infinite source can be sliced.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from ..protocol import Cursor
from ..step import Next
from .core import PASS, SKIP, STOP, Verdict, create_transformed


@dataclass(frozen=True, slots=True)
class SlicePolicy:
    """
    Slice window: indices in [start, end), `end=None` means unbounded.
    """

    start: int = 0
    end: int | None = None

    def __post_init__(self) -> None:
        _check_bound(self.start, "start")
        if self.end is not None:
            _check_bound(self.end, "end")


def _check_bound(bound: typing.Any, name: str) -> None:
    if isinstance(bound, bool) or not isinstance(bound, int):
        raise TypeError(f"slice {name} must be an int, got {type(bound).__name__}")
    if bound < 0:
        raise ValueError(f"slice {name} must be >= 0, got {bound}")


@dataclass(slots=True)
class _SliceState:
    policy: SlicePolicy
    index: int = 0


def _slice_step(state: _SliceState, step: Next[typing.Any]) -> Verdict[typing.Any]:
    index = state.index
    state.index += 1
    end = state.policy.end
    if end is not None and index >= end:
        return STOP
    if index < state.policy.start:
        return SKIP
    return PASS


def sliced[T](
    source: Cursor[T],
    start: int = 0,
    end: int | None = None,
    *,
    policy: SlicePolicy | None = None,
) -> Cursor[T]:
    """
    Values at indices [start, end).

    Example:
        sliced(cursor_of("ABCDEF"), 1, 3)  # B, C
        sliced(cursor_of("ABCDEF"), 3)     # D, E, F
    """
    if policy is None:
        policy = SlicePolicy(start=start, end=end)
    return create_transformed(source, _slice_step, _SliceState(policy))


__all__ = ("SlicePolicy", "sliced")
