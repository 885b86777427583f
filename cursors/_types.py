"""
Core type definitions for cursors.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Mapper = function that rewrites a value
type Mapper[T, R] = Callable[[T], R]

# Reducer = (accumulator, value) -> accumulator
type Reducer[A, T] = Callable[[A, T], A]

# Effect = observation-only callback
type Effect[T] = Callable[[T], None]


# ============================================================================
# Missing-argument sentinel
# ============================================================================


class _Missing:
    """Marks an omitted optional argument (None is a valid seed)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: typing.Final = _Missing()


__all__ = (
    # Type aliases
    "Predicate",
    "Mapper",
    "Reducer",
    "Effect",
    # Sentinel
    "MISSING",
)
