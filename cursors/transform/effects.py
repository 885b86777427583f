"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the values flowing through."""

from __future__ import annotations

from .._helpers import require_callable
from .._types import Effect
from ..protocol import Cursor
from ..step import Next
from .core import PASS, Pass, create_transformed


def _tap_step[T](effect: Effect[T], step: Next[T]) -> Pass:
    effect(step.value)
    return PASS


def tap[T](source: Cursor[T], effect: Effect[T]) -> Cursor[T]:
    """Call `effect` on every value as it is pulled."""
    require_callable(effect, "effect")
    return create_transformed(source, _tap_step, effect)


__all__ = ("tap",)
