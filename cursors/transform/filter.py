"""Filter combinator"""

from __future__ import annotations

from .._helpers import require_callable
from .._types import Predicate
from ..protocol import Cursor
from ..step import Next
from .core import PASS, SKIP, Pass, Skip, create_transformed


def _filter_step[T](predicate: Predicate[T], step: Next[T]) -> Pass | Skip:
    return PASS if predicate(step.value) else SKIP


def filtered[T](source: Cursor[T], predicate: Predicate[T]) -> Cursor[T]:
    """
    Keep values passing `predicate`. Reversible when `source` is.
    """
    require_callable(predicate, "predicate")
    return create_transformed(source, _filter_step, predicate, reversible=True)


__all__ = ("filtered",)
