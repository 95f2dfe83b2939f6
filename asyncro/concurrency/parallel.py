"""
Parallel combinators
====================

Комбинаторы для параллельного выполнения списка задач (thunks).
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from kungfu import LazyCoroResult

from .._helpers import (
    join,
    launch_all,
    wrap_awaitable,
    wrap_lazy_coro_result,
    wrap_lazy_coro_result_writer,
)
from .._types import TaskMap, Tell, Traced
from ..writer import LazyCoroResultWriter, StepEvent
from ._tasks import tasks_of


# ============================================================================
# Generic combinator (traced run + wrap pattern)
# ============================================================================


def parallelM[M, T](
    task_map: TaskMap[T],
    *,
    wrap: Callable[[Traced[typing.Any]], M],
) -> M:
    """
    Generic parallel combinator.

    Invoke every thunk in one pass, wait for all of them, return the
    results in the task map's shape. Fail-fast on first error; the
    other thunks keep running but their outcomes are dropped.
    """

    async def run(tell: Tell) -> typing.Any:
        tasks = tasks_of(task_map)
        futures = launch_all(((key, thunk, ()) for key, thunk in tasks.entries), tell=tell)
        return tasks.rebuild(await join(futures))

    return wrap(run)


# ============================================================================
# Sugar for plain awaitables
# ============================================================================


def parallel[T](task_map: TaskMap[T]) -> Coroutine[typing.Any, typing.Any, typing.Any]:
    """
    Run all thunks concurrently.

    Example:
        user, posts = await parallel([
            lambda: fetch_user(42),
            lambda: fetch_posts(42),
        ])

        pages = await parallel({"foo": lambda: fetch("/foo"), "baz": lambda: fetch("/baz")})
        # {"foo": ..., "baz": ...}
    """
    return parallelM(task_map, wrap=wrap_awaitable)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def parallel_r[T](task_map: TaskMap[T]) -> LazyCoroResult[typing.Any, Exception]:
    """Run all thunks concurrently; the first failure becomes Error(exc)."""
    return parallelM(task_map, wrap=wrap_lazy_coro_result)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def parallel_w[T](
    task_map: TaskMap[T],
) -> LazyCoroResultWriter[typing.Any, Exception, StepEvent]:
    """Run all thunks concurrently with a trace keyed by index or mapping key."""
    return parallelM(task_map, wrap=wrap_lazy_coro_result_writer)


__all__ = ("parallel", "parallel_r", "parallel_w", "parallelM")
