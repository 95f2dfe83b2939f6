"""
Selection combinators
=====================

filter / find / every / some: one concurrent predicate pass (same as map),
then a synchronous selection pass in index order.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import LazyCoroResult

from .._helpers import (
    fit_arity,
    wrap_awaitable,
    wrap_lazy_coro_result,
    wrap_lazy_coro_result_writer,
)
from .._types import Predicate, Tell, Traced
from ..writer import LazyCoroResultWriter, StepEvent
from .map import map_steps


# ============================================================================
# Generic combinators (traced run + wrap pattern)
# ============================================================================


def filterM[M, T](
    items: Sequence[T],
    predicate: Predicate[T],
    *,
    wrap: Callable[[Traced[list[T]]], M],
) -> M:
    """Generic filter combinator. Keeps items with a truthy verdict, in original order."""
    step = fit_arity(predicate, 3)

    async def run(tell: Tell) -> list[T]:
        verdicts = await map_steps(items, step, tell=tell)
        return [value for value, keep in zip(items, verdicts) if keep]

    return wrap(run)


def findM[M, T, D](
    items: Sequence[T],
    predicate: Predicate[T],
    *,
    default: D,
    wrap: Callable[[Traced[T | D]], M],
) -> M:
    """
    Generic find combinator.

    Every predicate runs; the lowest index with a truthy verdict wins,
    not the fastest one.
    """
    step = fit_arity(predicate, 3)

    async def run(tell: Tell) -> T | D:
        verdicts = await map_steps(items, step, tell=tell)
        return next((value for value, ok in zip(items, verdicts) if ok), default)

    return wrap(run)


def everyM[M, T](
    items: Sequence[T],
    predicate: Predicate[T],
    *,
    wrap: Callable[[Traced[bool]], M],
) -> M:
    """Generic every combinator. Vacuously True on empty input."""
    step = fit_arity(predicate, 3)

    async def run(tell: Tell) -> bool:
        verdicts = await map_steps(items, step, tell=tell)
        return all(verdicts)

    return wrap(run)


def someM[M, T](
    items: Sequence[T],
    predicate: Predicate[T],
    *,
    wrap: Callable[[Traced[bool]], M],
) -> M:
    """Generic some combinator. False on empty input."""
    step = fit_arity(predicate, 3)

    async def run(tell: Tell) -> bool:
        verdicts = await map_steps(items, step, tell=tell)
        return any(verdicts)

    return wrap(run)


# ============================================================================
# Sugar for plain awaitables
# ============================================================================


def filter[T](
    items: Sequence[T],
    predicate: Predicate[T],
) -> Coroutine[typing.Any, typing.Any, list[T]]:
    """
    Concurrent version of the builtin filter().

    Example:
        reachable = await filter(urls, async_is_up)
    """
    return filterM(items, predicate, wrap=wrap_awaitable)


def find[T, D](
    items: Sequence[T],
    predicate: Predicate[T],
    *,
    default: D = None,
) -> Coroutine[typing.Any, typing.Any, T | D]:
    """First item (by index) the predicate accepts, else `default`."""
    return findM(items, predicate, default=default, wrap=wrap_awaitable)


def every[T](
    items: Sequence[T],
    predicate: Predicate[T],
) -> Coroutine[typing.Any, typing.Any, bool]:
    """True if the predicate accepts every item."""
    return everyM(items, predicate, wrap=wrap_awaitable)


def some[T](
    items: Sequence[T],
    predicate: Predicate[T],
) -> Coroutine[typing.Any, typing.Any, bool]:
    """True if the predicate accepts at least one item."""
    return someM(items, predicate, wrap=wrap_awaitable)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def filter_r[T](
    items: Sequence[T],
    predicate: Predicate[T],
) -> LazyCoroResult[list[T], Exception]:
    return filterM(items, predicate, wrap=wrap_lazy_coro_result)


def find_r[T, D](
    items: Sequence[T],
    predicate: Predicate[T],
    *,
    default: D = None,
) -> LazyCoroResult[T | D, Exception]:
    return findM(items, predicate, default=default, wrap=wrap_lazy_coro_result)


def every_r[T](
    items: Sequence[T],
    predicate: Predicate[T],
) -> LazyCoroResult[bool, Exception]:
    return everyM(items, predicate, wrap=wrap_lazy_coro_result)


def some_r[T](
    items: Sequence[T],
    predicate: Predicate[T],
) -> LazyCoroResult[bool, Exception]:
    return someM(items, predicate, wrap=wrap_lazy_coro_result)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def filter_w[T](
    items: Sequence[T],
    predicate: Predicate[T],
) -> LazyCoroResultWriter[list[T], Exception, StepEvent]:
    return filterM(items, predicate, wrap=wrap_lazy_coro_result_writer)


def find_w[T, D](
    items: Sequence[T],
    predicate: Predicate[T],
    *,
    default: D = None,
) -> LazyCoroResultWriter[T | D, Exception, StepEvent]:
    return findM(items, predicate, default=default, wrap=wrap_lazy_coro_result_writer)


def every_w[T](
    items: Sequence[T],
    predicate: Predicate[T],
) -> LazyCoroResultWriter[bool, Exception, StepEvent]:
    return everyM(items, predicate, wrap=wrap_lazy_coro_result_writer)


def some_w[T](
    items: Sequence[T],
    predicate: Predicate[T],
) -> LazyCoroResultWriter[bool, Exception, StepEvent]:
    return someM(items, predicate, wrap=wrap_lazy_coro_result_writer)


__all__ = (
    # Plain
    "filter",
    "find",
    "every",
    "some",
    # LazyCoroResult
    "filter_r",
    "find_r",
    "every_r",
    "some_r",
    # LazyCoroResultWriter
    "filter_w",
    "find_w",
    "every_w",
    "some_w",
    # Generic
    "filterM",
    "findM",
    "everyM",
    "someM",
)
