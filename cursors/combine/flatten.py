"""
Flatten combinator
==================

Depth-first descent into nested spreadable values, bounded by `depth`.
Uses an explicit stack of cursors (innermost last), so nesting depth is
not tied to the interpreter recursion limit.
"""

from __future__ import annotations

import math
import typing
from dataclasses import dataclass

from .._helpers import abandon, close_all
from ..adapt import cursor_of, is_spreadable
from ..protocol import Closable, Cursor
from ..step import DONE, Done, StepResult


@dataclass(frozen=True, slots=True)
class FlattenPolicy:
    """
    How many levels of nested spreadable values to descend.

    `0` (the falsy default) means unbounded, like `math.inf`.
    """

    depth: float = math.inf

    def __post_init__(self) -> None:
        depth = self.depth
        if isinstance(depth, bool) or not isinstance(depth, (int, float)):
            raise TypeError(f"flatten depth must be a number, got {type(depth).__name__}")
        if math.isnan(depth) or depth < 0:
            raise ValueError(f"flatten depth must be >= 0, got {depth}")
        if depth != math.inf and depth != int(depth):
            raise ValueError(f"flatten depth must be a whole number, got {depth}")
        if depth == 0:
            object.__setattr__(self, "depth", math.inf)


@dataclass(slots=True)
class _FlattenState:
    stack: list[Cursor[typing.Any]]
    depth: float


class FlattenCursor(Cursor[typing.Any], Closable[typing.Any]):
    """Cursor produced by `flatten`."""

    __slots__ = ("_state",)

    def __init__(self, source: Cursor[typing.Any], policy: FlattenPolicy) -> None:
        self._state: _FlattenState | None = _FlattenState([source], policy.depth)

    def advance(self) -> StepResult[typing.Any, typing.Any]:
        state = self._state
        if state is None:
            return DONE

        stack = state.stack
        step: StepResult[typing.Any, typing.Any] = DONE
        while stack:
            try:
                step = stack[-1].advance()
            except Exception as exc:
                self._state = None
                stack.pop()
                abandon(reversed(stack), exc)
                raise
            if step.done:
                stack.pop()
                continue
            if len(stack) <= state.depth and is_spreadable(step.value):
                try:
                    nested = cursor_of(step.value)
                except Exception as exc:
                    self._state = None
                    abandon(reversed(stack), exc)
                    raise
                stack.append(nested)
                continue
            return step

        # Root exhausted; `step` is its terminal result
        self._state = None
        return step

    def close[U](self, value: U = None) -> Done[U]:  # type: ignore[assignment]
        state, self._state = self._state, None
        if state is not None:
            close_all(reversed(state.stack))
        return Done(value)


def flatten(
    source: typing.Any,
    depth: float | None = None,
    *,
    policy: FlattenPolicy | None = None,
) -> FlattenCursor:
    """
    Example:
        flatten([["x"], [["y"]]], 1)  # "x", ["y"]
        flatten([["x"], [["y"]]])     # "x", "y"
    """
    if policy is None:
        policy = FlattenPolicy() if depth is None else FlattenPolicy(depth)
    return FlattenCursor(cursor_of(source), policy)


__all__ = ("FlattenCursor", "FlattenPolicy", "flatten")
