"""
Reduce combinators
==================

Последовательная свёртка: единственный последовательный примитив библиотеки.
Step N+1 is never invoked before step N's result is known.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine, Sequence

from kungfu import LazyCoroResult

from .._helpers import (
    detach,
    fit_arity,
    invoke,
    wrap_awaitable,
    wrap_lazy_coro_result,
    wrap_lazy_coro_result_writer,
)
from .._types import Reducer, Tell, Traced
from ..writer import LazyCoroResultWriter, StepEvent


async def reduce_steps[A, T](
    items: Sequence[T],
    reducer: Callable[..., typing.Any],
    initial: A,
    *,
    pure: bool,
    tell: Tell,
) -> A:
    """Run `reducer` once per index, in order, awaiting each before the next."""
    acc = initial
    for index, value in enumerate(items):
        outcome = invoke(reducer, (acc, value, index, items), key=index, tell=tell)
        result = await detach(outcome, key=index, tell=tell)
        if pure:
            acc = result
    return acc


# ============================================================================
# Generic combinator (traced run + wrap pattern)
# ============================================================================


def reduceM[M, A, T](
    items: Sequence[T],
    reducer: Reducer[A, T],
    initial: A | None = None,
    *,
    pure: bool = True,
    wrap: Callable[[Traced[A | None]], M],
) -> M:
    """
    Generic reduce combinator.

    Args:
        items: Sequence to walk, index 0 first
        reducer: Gets (accumulator, value, index, items), returns the
                 next accumulator (awaitable or plain)
        initial: Starting accumulator; the first reducer call receives it
                 as-is, there is no seeding from items[0]
        pure: When False the reducer's return value is ignored and the
              accumulator object is carried through unchanged (reducers
              that mutate it in place)
        wrap: Turns the traced run into the exposed form
    """
    step = fit_arity(reducer, 4)

    async def run(tell: Tell) -> A | None:
        return await reduce_steps(items, step, initial, pure=pure, tell=tell)

    return wrap(run)


# ============================================================================
# Sugar for plain awaitables
# ============================================================================


def reduce[A, T](
    items: Sequence[T],
    reducer: Reducer[A, T],
    initial: A | None = None,
    *,
    pure: bool = True,
) -> Coroutine[typing.Any, typing.Any, A | None]:
    """
    Async version of functools.reduce, strictly sequential.

    Example:
        async def load(acc, url):
            acc[url] = await fetch_json(url)
            return acc

        pages = await reduce(["/foo", "/bar"], load, {})

    Empty `items` returns `initial` untouched. The reducer may also take
    (index, items); parameters with defaults keep them.
    """
    return reduceM(items, reducer, initial, pure=pure, wrap=wrap_awaitable)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def reduce_r[A, T](
    items: Sequence[T],
    reducer: Reducer[A, T],
    initial: A | None = None,
    *,
    pure: bool = True,
) -> LazyCoroResult[A | None, Exception]:
    """Sequential reduce; a failing step becomes Error(exc)."""
    return reduceM(items, reducer, initial, pure=pure, wrap=wrap_lazy_coro_result)


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def reduce_w[A, T](
    items: Sequence[T],
    reducer: Reducer[A, T],
    initial: A | None = None,
    *,
    pure: bool = True,
) -> LazyCoroResultWriter[A | None, Exception, StepEvent]:
    """Sequential reduce with a step trace."""
    return reduceM(items, reducer, initial, pure=pure, wrap=wrap_lazy_coro_result_writer)


__all__ = ("reduce", "reduce_r", "reduce_w", "reduceM", "reduce_steps")
