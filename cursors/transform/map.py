"""Map combinator"""

from __future__ import annotations

from .._helpers import require_callable
from .._types import Mapper
from ..protocol import Cursor
from ..step import Next
from .core import Remap, create_transformed


def _map_step[T, R](fn: Mapper[T, R], step: Next[T]) -> Remap[R]:
    return Remap(fn(step.value))


def mapped[T, R](source: Cursor[T], fn: Mapper[T, R]) -> Cursor[R]:
    """
    Rewrite every value with `fn`. Reversible when `source` is.
    """
    require_callable(fn, "map function")
    return create_transformed(source, _map_step, fn, reversible=True)


__all__ = ("mapped",)
