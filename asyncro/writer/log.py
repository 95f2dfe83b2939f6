"""
Log - Моноидный аккумулятор трассировки
=======================================
"""

from __future__ import annotations

from collections.abc import Hashable

from .event import StepEvent, StepPhase


class Log[A](list[A]):
    """
    Append-only trace for the Writer monad.

    A list with monoidal operations:
    - empty: Log()
    - combine: concatenation

    Monoid laws hold:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of(StepEvent.started(0)).combine(Log.of(StepEvent.settled(0)))
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """Return a copy with one more entry."""
        result: Log[A] = Log(self)
        result.append(item)
        return result

    def keys(self, phase: StepPhase, /) -> list[Hashable]:
        """
        Keys of the StepEvents with `phase`, in the order they were recorded.

        Example:
            wr = await map_w(urls, fetch)()
            wr.log.keys(StepPhase.SETTLED)  # completion order, e.g. [2, 0, 1]
        """
        return [
            item.key
            for item in self
            if isinstance(item, StepEvent) and item.phase is phase
        ]


__all__ = ("Log",)
