"""Internal helpers for asyncro.

Step invocation, outcome settling and the wrap functions shared by
every combinator module. Not part of the public API, but usable for
building custom wrappers around the generic *M combinators."""

from __future__ import annotations

import asyncio
import inspect
import typing
from collections.abc import Callable, Coroutine, Hashable, Iterable

from kungfu import Error, LazyCoroResult, Ok, Result

from ._types import Tell, Traced
from .writer import LazyCoroResultWriter, Log, StepEvent, WriterResult

def silent(event: StepEvent) -> None:
    """Tell that drops every event (untraced runs)."""
    _ = event

# Step arity
def fit_arity[R](fn: Callable[..., R], available: int) -> Callable[..., R]:
    """
    Trim positional arguments to what `fn` accepts.

    Steps are offered `(value, index, sequence)` (reducers get the
    accumulator first), but `async def fetch(url)` only wants the value.

    Only required positional parameters claim the extra arguments, so
    `fetch(url, retries=3)` keeps its default instead of receiving the
    index. The value itself (accumulator and value, for reducers) is always
    passed while the callable has room for it; builtins like `int` or
    `bool` whose signature can't be read get just that. Callables taking
    *args get everything.
    """
    # (acc, value) for reducers, (value,) for everything else
    leading = available - 2

    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        total = required = leading
    else:
        total = required = 0
        for param in params:
            if param.kind is inspect.Parameter.VAR_POSITIONAL:
                return fn
            if param.kind in (
                inspect.Parameter.POSITIONAL_ONLY,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
            ):
                total += 1
                if param.default is param.empty:
                    required += 1

    accepted = min(total, max(required, leading))
    if accepted >= available:
        return fn

    def fitted(*args: typing.Any) -> R:
        return fn(*args[:accepted])

    return fitted

# Invocation and settling
def invoke(
    step: Callable[..., typing.Any],
    args: tuple[typing.Any, ...],
    *,
    key: Hashable,
    tell: Tell,
) -> typing.Any:
    """Call a step synchronously. Returns its raw outcome (awaitable or plain value)."""
    tell(StepEvent.started(key))
    try:
        return step(*args)
    except Exception:
        tell(StepEvent.failed(key))
        raise

async def settle(outcome: typing.Any, *, key: Hashable, tell: Tell) -> typing.Any:
    """Await an outcome if it is awaitable, recording how it ended."""
    try:
        value = await outcome if inspect.isawaitable(outcome) else outcome
    except Exception:
        tell(StepEvent.failed(key))
        raise
    tell(StepEvent.settled(key))
    return value

def _consume(fut: asyncio.Future[typing.Any]) -> None:
    # Outcome is discarded; only mark the exception as retrieved.
    if not fut.cancelled():
        fut.exception()

def discard(futures: Iterable[asyncio.Future[typing.Any]]) -> None:
    """Let futures run to completion while ignoring whatever they produce."""
    for fut in futures:
        fut.add_done_callback(_consume)

def launch_all(
    calls: Iterable[tuple[Hashable, Callable[..., typing.Any], tuple[typing.Any, ...]]],
    *,
    tell: Tell,
) -> list[asyncio.Future[typing.Any]]:
    """
    Invoke every step in one synchronous pass, each settling in its own task.

    If a step raises synchronously, steps already launched keep running
    with their outcomes discarded, and the exception propagates.
    """
    launched: list[asyncio.Future[typing.Any]] = []
    try:
        for key, step, args in calls:
            outcome = invoke(step, args, key=key, tell=tell)
            launched.append(asyncio.ensure_future(settle(outcome, key=key, tell=tell)))
    except BaseException:
        discard(launched)
        raise
    return launched

async def join(futures: list[asyncio.Future[typing.Any]]) -> list[typing.Any]:
    """
    Wait for all futures. First failure wins, the rest are discarded.

    Cancelling the caller stops the wait only: the steps keep running and
    whatever they produce is dropped.
    """
    if not futures:
        return []
    return list(await asyncio.shield(asyncio.gather(*futures)))

async def detach(outcome: typing.Any, *, key: Hashable, tell: Tell) -> typing.Any:
    """Settle one outcome in its own task, shielded from caller cancellation."""
    return await asyncio.shield(asyncio.ensure_future(settle(outcome, key=key, tell=tell)))

# Wrap functions (Traced -> exposed form)
def wrap_awaitable[T](run: Traced[T]) -> Coroutine[typing.Any, typing.Any, T]:
    """Plain form: a coroutine that raises the step's own exception."""
    return run(silent)

def wrap_lazy_coro_result[T](run: Traced[T]) -> LazyCoroResult[T, Exception]:
    """
    Result form: step exceptions become Error(exc), same object.

    BaseException (cancellation, KeyboardInterrupt) is not captured.
    """
    async def go() -> Result[T, Exception]:
        try:
            return Ok(await run(silent))
        except Exception as exc:
            return Error(exc)

    return LazyCoroResult(go)

def wrap_lazy_coro_result_writer[T](
    run: Traced[T],
) -> LazyCoroResultWriter[T, Exception, StepEvent]:
    """
    Traced form: like the Result form, plus a Log[StepEvent].

    The log is snapshotted when the combinator finishes, so steps still
    in flight after a failure don't show up in it.
    """
    async def go() -> WriterResult[T, Exception, Log[StepEvent]]:
        trace = Log[StepEvent]()
        try:
            value = await run(trace.append)
        except Exception as exc:
            return WriterResult(Error(exc), Log(trace))
        return WriterResult(Ok(value), Log(trace))

    return LazyCoroResultWriter(go)

__all__ = (
    # Tell
    "silent",
    # Steps
    "fit_arity",
    "invoke",
    "settle",
    "discard",
    "launch_all",
    "join",
    "detach",
    # Wrap functions
    "wrap_awaitable",
    "wrap_lazy_coro_result",
    "wrap_lazy_coro_result_writer",
)
