"""
Series combinators
==================

Последовательный сбор результатов списка задач.

Two initiation modes:

- eager=True (default): every thunk is invoked up front, exactly like
  parallel(), so their work can overlap. Results are then *collected*
  one at a time, in key order, through the sequential reduce core.
- eager=False: thunk N+1 is not invoked until thunk N has settled.
  Use this when the thunks must not overlap.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine, Hashable

from kungfu import LazyCoroResult

from .._helpers import (
    discard,
    invoke,
    launch_all,
    settle,
    silent,
    wrap_awaitable,
    wrap_lazy_coro_result,
    wrap_lazy_coro_result_writer,
)
from .._types import TaskMap, Tell, Thunk, Traced
from ..collection.reduce import reduce_steps
from ..writer import LazyCoroResultWriter, StepEvent
from ._tasks import TaskList, tasks_of


async def _collect_eager(tasks: TaskList[typing.Any], tell: Tell) -> list[typing.Any]:
    pending = launch_all(((key, thunk, ()) for key, thunk in tasks.entries), tell=tell)

    async def collect(
        acc: list[typing.Any],
        fut: asyncio.Future[typing.Any],
        *_: typing.Any,
    ) -> None:
        acc.append(await fut)

    try:
        return await reduce_steps(pending, collect, [], pure=False, tell=silent)
    except BaseException:
        discard(pending)
        raise


async def _collect_lazy(tasks: TaskList[typing.Any], tell: Tell) -> list[typing.Any]:
    async def collect(
        acc: list[typing.Any],
        entry: tuple[Hashable, Thunk[typing.Any]],
        *_: typing.Any,
    ) -> None:
        key, thunk = entry
        outcome = invoke(thunk, (), key=key, tell=tell)
        acc.append(await settle(outcome, key=key, tell=tell))

    return await reduce_steps(tasks.entries, collect, [], pure=False, tell=silent)


# ============================================================================
# Generic combinator (traced run + wrap pattern)
# ============================================================================


def seriesM[M, T](
    task_map: TaskMap[T],
    *,
    eager: bool = True,
    wrap: Callable[[Traced[typing.Any]], M],
) -> M:
    """
    Generic series combinator.

    Results are collected in key order and returned in the task map's
    shape. A failure at position N stops collection there; with
    eager=False the thunks after N are never invoked.
    """

    async def run(tell: Tell) -> typing.Any:
        tasks = tasks_of(task_map)
        collect = _collect_eager if eager else _collect_lazy
        return tasks.rebuild(await collect(tasks, tell))

    return wrap(run)


# ============================================================================
# Sugar for plain awaitables
# ============================================================================


def series[T](
    task_map: TaskMap[T],
    *,
    eager: bool = True,
) -> Coroutine[typing.Any, typing.Any, typing.Any]:
    """
    Collect thunk results one at a time, in order.

    Example:
        await series([
            lambda: fetch("foo"),
            lambda: fetch("baz"),
        ])

        # one request at a time:
        await series(migrations, eager=False)
    """
    return seriesM(task_map, eager=eager, wrap=wrap_awaitable)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def series_r[T](
    task_map: TaskMap[T],
    *,
    eager: bool = True,
) -> LazyCoroResult[typing.Any, Exception]:
    return seriesM(task_map, eager=eager, wrap=wrap_lazy_coro_result)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def series_w[T](
    task_map: TaskMap[T],
    *,
    eager: bool = True,
) -> LazyCoroResultWriter[typing.Any, Exception, StepEvent]:
    return seriesM(task_map, eager=eager, wrap=wrap_lazy_coro_result_writer)


__all__ = ("series", "series_r", "series_w", "seriesM")
