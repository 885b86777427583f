"""
Log - Моноидный аккумулятор для трассировки
===========================================
"""

from __future__ import annotations

from collections.abc import Callable


class Log[A](list[A]):
    """
    Log accumulator for traced cursors.

    Обёртка над list с моноидными операциями:
    - empty: пустой лог (просто Log())
    - combine: конкатенация логов

    Traced cursors append to the log they were given in place, so one log
    can collect events from several cursors in the order they happened.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """
        Append single item, returning a new log.
        """
        result: Log[A] = Log(self)
        result.append(item)
        return result

    def where(self, predicate: Callable[[A], bool], /) -> Log[A]:
        """Entries passing `predicate`, in order."""
        return Log(item for item in self if predicate(item))


__all__ = ("Log",)
