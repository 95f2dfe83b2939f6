"""
Writer Monad
============

LazyCoroResultWriter - комбинированная монада для трассировки шагов:
- Lazy (отложенные вычисления)
- Coro (асинхронность)
- Result[T, E] (успех/ошибка)
- Writer[Log[StepEvent]] (порядок запуска и завершения шагов)

Построена поверх kungfu library patterns.
"""

from .event import StepEvent, StepPhase
from .log import Log
from .result import WriterResult
from .monad import LazyCoroResultWriter

__all__ = (
    "Log",
    "LazyCoroResultWriter",
    "StepEvent",
    "StepPhase",
    "WriterResult",
)
