"""
Cursor protocol
===============

`Cursor` is the shared contract every combinator implements and consumes.

Optional capabilities are explicit traits. A cursor implementation either
inherits them or it does not, and combinators check them with `isinstance`
when they are composed:

- `Closable`   - can be told it will no longer be advanced
- `Failable`   - can receive an error injected by the consumer
- `Reversible` - can produce a cursor walking the rest of the sequence backwards

Cursor also doubles as a fluent builder: every combinator is reachable as a
method, each delegating to the module-level function.
"""

from __future__ import annotations

import abc
import typing
from collections.abc import Callable

from kungfu import Option, Result

from ._errors import EmptyReductionError
from ._types import MISSING, Effect, Mapper, Predicate, Reducer
from .step import Done, Next, StepResult

if typing.TYPE_CHECKING:
    from .combine.flatten import FlattenPolicy
    from .combine.tee import TeeBranch, TeePolicy
    from .trace import Log, TraceEvent
    from .transform.core import Verdict
    from .transform.slice import SlicePolicy


class Cursor[T](abc.ABC):
    """
    Single-consumption stepper over a sequence.

    Once `advance` returns a `Done`, every later call returns `Done` again.
    """

    __slots__ = ()

    @abc.abstractmethod
    def advance(self) -> StepResult[T, typing.Any]:
        """Produce the next step."""

    # Python iterator protocol

    def __iter__(self) -> Cursor[T]:
        return self

    def __next__(self) -> T:
        step = self.advance()
        if step.done:
            raise StopIteration(step.value)
        return step.value

    # Transform

    def transform[R](self, fn: Callable[[Next[T]], Verdict[R]]) -> Cursor[R]:
        from .transform.core import transform
        return transform(self, fn)

    def map[R](self, fn: Mapper[T, R]) -> Cursor[R]:
        from .transform.map import mapped
        return mapped(self, fn)

    def filter(self, predicate: Predicate[T]) -> Cursor[T]:
        from .transform.filter import filtered
        return filtered(self, predicate)

    def slice(
        self,
        start: int = 0,
        end: int | None = None,
        *,
        policy: SlicePolicy | None = None,
    ) -> Cursor[T]:
        from .transform.slice import sliced
        return sliced(self, start, end, policy=policy)

    def scan[A](self, fn: Reducer[A, T], initial: typing.Any = MISSING) -> Cursor[A]:
        from .transform.scan import scan
        return scan(self, fn, initial)

    def tap(self, effect: Effect[T]) -> Cursor[T]:
        from .transform.effects import tap
        return tap(self, effect)

    # Combine

    def concat(self, *rest: typing.Any) -> Cursor[typing.Any]:
        from .combine.concat import concat
        return concat(self, *rest)

    def flatten(
        self,
        depth: float | None = None,
        *,
        policy: FlattenPolicy | None = None,
    ) -> Cursor[typing.Any]:
        from .combine.flatten import flatten
        return flatten(self, depth, policy=policy)

    def zip(self, *others: typing.Any) -> Cursor[tuple[typing.Any, ...]]:
        from .combine.zip import zipped
        return zipped(self, *others)

    def tee(self, n: int = 2, *, policy: TeePolicy | None = None) -> tuple[TeeBranch[T], ...]:
        from .combine.tee import tee
        return tee(self, n, policy=policy)

    # Terminal

    def reduce[A](self, fn: Reducer[A, T], initial: typing.Any = MISSING) -> A:
        from .collection.reduce import reduce
        return reduce(self, fn, initial)

    def try_reduce[A](
        self,
        fn: Reducer[A, T],
        initial: typing.Any = MISSING,
    ) -> Result[A, EmptyReductionError]:
        from .collection.reduce import try_reduce
        return try_reduce(self, fn, initial)

    def reduce_right[A](self, fn: Reducer[A, T], initial: typing.Any = MISSING) -> A:
        from .collection.reduce import reduce_right
        return reduce_right(self, fn, initial)

    def some(self, predicate: Predicate[T]) -> bool:
        from .collection.search import some
        return some(self, predicate)

    def every(self, predicate: Predicate[T]) -> bool:
        from .collection.search import every
        return every(self, predicate)

    def includes(self, needle: typing.Any) -> bool:
        from .collection.search import includes
        return includes(self, needle)

    def find(self, predicate: Predicate[T]) -> Option[T]:
        from .collection.search import find
        return find(self, predicate)

    # Observation

    def traced(self, log: Log[TraceEvent], *, label: str = "") -> Cursor[T]:
        from .trace import traced
        return traced(self, log, label=label)


class Closable[U](abc.ABC):
    """Cursor capability: release resources, never advance again."""

    __slots__ = ()

    @abc.abstractmethod
    def close(self, value: U = None) -> Done[U]:  # type: ignore[assignment]
        """Stop the cursor and return a terminal step carrying `value`."""


class Failable(abc.ABC):
    """Cursor capability: inject an error at the current position."""

    __slots__ = ()

    @abc.abstractmethod
    def fail(self, error: BaseException) -> StepResult[typing.Any, typing.Any]:
        """Hand `error` to the cursor; re-raises when it cannot be handled."""


class Reversible[T](abc.ABC):
    """Cursor capability: walk the not-yet-consumed items back to front."""

    __slots__ = ()

    @abc.abstractmethod
    def reverse(self) -> Cursor[T]:
        """Return a new cursor over the remaining items in reverse order."""

    def __reversed__(self) -> Cursor[T]:
        return self.reverse()


__all__ = ("Closable", "Cursor", "Failable", "Reversible")
