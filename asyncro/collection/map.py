"""
Map combinators
===============

Параллельный map: все шаги запускаются за один проход, затем одно общее ожидание.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import LazyCoroResult

from .._helpers import (
    fit_arity,
    join,
    launch_all,
    wrap_awaitable,
    wrap_lazy_coro_result,
    wrap_lazy_coro_result_writer,
)
from .._types import Step, Tell, Traced
from ..writer import LazyCoroResultWriter, StepEvent


async def map_steps[T](
    items: Sequence[T],
    mapper: Callable[..., typing.Any],
    *,
    tell: Tell,
) -> list[typing.Any]:
    """Invoke `mapper` for every index without waiting, then await them jointly."""
    futures = launch_all(
        ((index, mapper, (value, index, items)) for index, value in enumerate(items)),
        tell=tell,
    )
    return await join(futures)


# ============================================================================
# Generic combinator (traced run + wrap pattern)
# ============================================================================


def mapM[M, T, U](
    items: Sequence[T],
    mapper: Step[T, U],
    *,
    wrap: Callable[[Traced[list[U]]], M],
) -> M:
    """
    Generic map combinator.

    Results line up with `items` by index, whatever order the steps
    finish in. Fail-fast on the first failure; steps still running are
    not cancelled, their outcomes are dropped.
    """
    step = fit_arity(mapper, 3)

    async def run(tell: Tell) -> list[U]:
        return await map_steps(items, step, tell=tell)

    return wrap(run)


# ============================================================================
# Sugar for plain awaitables
# ============================================================================


def map[T, U](
    items: Sequence[T],
    mapper: Step[T, U],
) -> Coroutine[typing.Any, typing.Any, list[U]]:
    """
    Concurrent version of the builtin map().

    Example:
        pages = await map(["/foo", "/baz"], fetch)

    The mapper may also take the index and the whole sequence. Parameters
    with defaults are left alone, so `fetch(url, retries=3)` never sees
    the index.
    """
    return mapM(items, mapper, wrap=wrap_awaitable)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def map_r[T, U](
    items: Sequence[T],
    mapper: Step[T, U],
) -> LazyCoroResult[list[U], Exception]:
    """Concurrent map; the first failing step becomes Error(exc)."""
    return mapM(items, mapper, wrap=wrap_lazy_coro_result)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def map_w[T, U](
    items: Sequence[T],
    mapper: Step[T, U],
) -> LazyCoroResultWriter[list[U], Exception, StepEvent]:
    """Concurrent map with a step trace."""
    return mapM(items, mapper, wrap=wrap_lazy_coro_result_writer)


__all__ = ("map", "map_r", "map_w", "mapM", "map_steps")
