"""
Step results
============

What `advance()` returns: a value (`Next`) or completion (`Done`).
Completion is data, not an exception, so combinators can inspect
`done` before deciding how to react.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Next[T]:
    """Non-terminal step carrying a value."""

    value: T

    @property
    def done(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Done[U]:
    """
    Terminal step.

    `value` is the completion value (a generator's return value, the value
    passed to `close`), usually None.
    """

    value: U = None  # type: ignore[assignment]

    @property
    def done(self) -> bool:
        return True


type StepResult[T, U] = Next[T] | Done[U]

# Shared result for spent cursors
DONE: typing.Final[Done[None]] = Done()


__all__ = ("DONE", "Done", "Next", "StepResult")
