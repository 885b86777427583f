"""
Tee combinator
==============

Fans one cursor out into N independent branches.

Branches share a forward-only singly linked buffer with a single tail.
Each branch keeps its own head into it. A branch whose head has a successor
reads it; a branch standing on the tail pulls upstream and appends. The
upstream is advanced at most once per item, whatever the branch count, and
nodes behind the slowest head are left to the garbage collector.

Not thread-safe: sibling branches must be advanced from one thread.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._helpers import close_cursor
from ..adapt import cursor_of
from ..protocol import Closable, Cursor
from ..step import DONE, Done, StepResult


@dataclass(frozen=True, slots=True)
class TeePolicy:
    """Number of branches to create."""

    branches: int = 2

    def __post_init__(self) -> None:
        if isinstance(self.branches, bool) or not isinstance(self.branches, int):
            raise TypeError(f"tee branches must be an int, got {type(self.branches).__name__}")
        if self.branches < 1:
            raise ValueError(f"tee branches must be >= 1, got {self.branches}")


@dataclass(slots=True)
class _Node:
    step: StepResult[typing.Any, typing.Any] | None = None
    next: _Node | None = None


@dataclass(slots=True)
class _TeeShared:
    # None once the upstream finished, failed or was closed
    source: Cursor[typing.Any] | None
    tail: _Node
    live: int


class TeeBranch[T](Cursor[T], Closable[typing.Any]):
    """One of the cursors returned by `tee`."""

    __slots__ = ("_shared", "_head")

    def __init__(self, shared: _TeeShared) -> None:
        self._shared = shared
        self._head: _Node | None = shared.tail

    def advance(self) -> StepResult[T, typing.Any]:
        head = self._head
        if head is None:
            return DONE

        node = head.next
        if node is None:
            node = self._pull()
            if node is None:
                self._head = None
                return DONE

        step: StepResult[T, typing.Any] = node.step  # type: ignore[assignment]
        self._head = None if step.done else node
        return step

    def _pull(self) -> _Node | None:
        """Nobody is ahead of this branch: pull upstream and append to the buffer."""
        shared = self._shared
        source = shared.source
        if source is None:
            return None
        try:
            step = source.advance()
        except Exception:
            shared.source = None
            self._head = None
            raise
        if step.done:
            shared.source = None
        node = _Node(step)
        shared.tail.next = node
        shared.tail = node
        return node

    def close[U](self, value: U = None) -> Done[U]:  # type: ignore[assignment]
        if self._head is None:
            return Done(value)
        self._head = None
        shared = self._shared
        shared.live -= 1
        if shared.live == 0 and shared.source is not None:
            # Last live branch: nobody else can pull any more
            source, shared.source = shared.source, None
            close_cursor(source, value)
        return Done(value)


def tee[T](
    source: Cursor[T],
    n: int = 2,
    *,
    policy: TeePolicy | None = None,
) -> tuple[TeeBranch[T], ...]:
    """
    Example:
        left, right = tee(cursor_of("ABC"))
        zipped(left, right.map(str.lower))  # ("A", "a"), ("B", "b"), ("C", "c")
    """
    if policy is None:
        policy = TeePolicy(branches=n)
    shared = _TeeShared(source=cursor_of(source), tail=_Node(), live=policy.branches)
    return tuple(TeeBranch(shared) for _ in range(policy.branches))


__all__ = ("TeeBranch", "TeePolicy", "tee")
