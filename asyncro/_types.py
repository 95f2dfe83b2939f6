"""
Core type definitions for asyncro.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine, Hashable, Mapping, Sequence

from .writer.event import StepEvent

# ============================================================================
# Step functions
# ============================================================================

# Step = (value, index, sequence) -> U | Awaitable[U]
type Step[T, U] = Callable[..., Awaitable[U] | U]

# Reducer = (accumulator, value, index, sequence) -> A | Awaitable[A]
type Reducer[A, T] = Callable[..., Awaitable[A] | A]

# Predicate = step whose result is judged by truthiness
# NOTE: Любое значение допустимо, проверяется через bool().
type Predicate[T] = Callable[..., Awaitable[typing.Any] | typing.Any]

# Thunk = zero-arg callable that starts a computation
type Thunk[T] = Callable[[], Awaitable[T] | T]

# TaskMap = ordered list or keyed mapping of thunks
type TaskMap[T] = Sequence[Thunk[T]] | Mapping[Hashable, Thunk[T]]

# ============================================================================
# Tracing
# ============================================================================

# Tell = sink for step events (no-op for untraced runs)
type Tell = Callable[[StepEvent], None]

# Traced = the body of a combinator, parameterized by its event sink
type Traced[T] = Callable[[Tell], Coroutine[typing.Any, typing.Any, T]]

__all__ = (
    "Step",
    "Reducer",
    "Predicate",
    "Thunk",
    "TaskMap",
    "Tell",
    "Traced",
)
