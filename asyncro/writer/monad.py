"""LazyCoroResultWriter Monad

Combined monad returned by the traced (*_w) combinators:
- Lazy (nothing runs until called or awaited)
- Coro (asynchronous)
- Result[T, E] (success/error)
- Writer[Log[W]] (step trace)

Built on top of kungfu library patterns."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result
from kungfu.library.caching import acache

from .log import Log
from .result import WriterResult


class LazyCoroResultWriter[T, E, W]:
    """Lazy Coroutine Result Writer Monad.

    Every call re-runs the underlying combinator from scratch and
    produces a fresh trace; use `cache()` to run once.
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]],
        /,
    ) -> None:
        self._value = value

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> LazyCoroResultWriter[U, E, W]:
        """Apply function to success value, preserve trace."""

        async def wrapper() -> WriterResult[U, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result.map(f), wr.log)

        return LazyCoroResultWriter(wrapper)

    def map_err[F](self, f: Callable[[E], F], /) -> LazyCoroResultWriter[T, F, W]:
        """Map over error type."""

        async def wrapper() -> WriterResult[T, F, Log[W]]:
            wr = await self()
            return WriterResult(wr.result.map_err(f), wr.log)

        return LazyCoroResultWriter(wrapper)

    # Writer operations

    def with_log(self, *entries: W) -> LazyCoroResultWriter[T, E, W]:
        """Append entries to the trace without changing the computation."""

        async def wrapper() -> WriterResult[T, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result, wr.log.combine(Log.of(*entries)))

        return LazyCoroResultWriter(wrapper)

    # Utility operations

    def cache(self) -> LazyCoroResultWriter[T, E, W]:
        """Cache the result - only compute once."""
        return LazyCoroResultWriter(acache(self))

    def unwrap(self) -> Coroutine[typing.Any, typing.Any, T]:
        """Return the value, re-raising the step's exception on error. Drops the trace."""

        async def inner() -> T:
            wr = await self()
            match wr.result:
                case Ok(value):
                    return value
                case Error(err) if isinstance(err, BaseException):
                    raise err
                case Error(err):
                    raise RuntimeError(f"Combinator failed with {err!r}")
                case _ as unreachable:
                    assert_never(unreachable)

        return inner()

    def to_lazy_coro_result(self) -> LazyCoroResult[tuple[T, Log[W]], E]:
        """Convert to kungfu LazyCoroResult, including the trace in the success value."""

        async def wrapper() -> Result[tuple[T, Log[W]], E]:
            wr = await self()
            match wr.result:
                case Ok(value):
                    return Ok((value, wr.log))
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return LazyCoroResult(wrapper)

    # Protocol methods

    def __call__(self) -> Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]:
        """Execute the lazy computation, returning coroutine."""
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, Log[W]]]:
        return self().__await__()


__all__ = ("LazyCoroResultWriter",)
