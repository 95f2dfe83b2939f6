"""
asyncro: async versions of the sequence combinators.

reduce, map, filter, find, every and some over async step functions,
plus parallel() and series() for lists or mappings of thunks.

Ordering contract:
- reduce (and series collection) is strictly sequential: step N+1 is
  never invoked before step N has settled
- map, filter, find, every, some and parallel invoke every step in one
  pass and await them jointly; output follows input order, not
  completion order
- failures propagate as the step's own exception, first failure wins,
  nothing is cancelled

Scheduling model: a single asyncio event loop. Concurrent steps are
asyncio tasks and start in the order they were invoked; there are no
threads and no shared mutable state inside the library. Cancelling the
caller stops its wait but not the steps already invoked: they run to
completion and their outcomes are dropped.

Architecture:
- Generic combinators (*M functions) take a `wrap` that decides the exposed form
- Sugar returning plain coroutines (no suffix)
- Sugar for LazyCoroResult (*_r suffix)
- Sugar for LazyCoroResultWriter with a step trace (*_w suffix)
"""

# Core types
from ._types import Predicate, Reducer, Step, TaskMap, Tell, Thunk, Traced

# Internal helpers (for custom wrappers)
from . import _helpers

# Writer monad
from . import writer
from .writer import LazyCoroResultWriter, Log, StepEvent, StepPhase, WriterResult

# Collection operations
from .collection import (
    # Plain
    every,
    filter,
    find,
    map,
    reduce,
    some,
    # LazyCoroResult
    every_r,
    filter_r,
    find_r,
    map_r,
    reduce_r,
    some_r,
    # LazyCoroResultWriter
    every_w,
    filter_w,
    find_w,
    map_w,
    reduce_w,
    some_w,
    # Generic
    everyM,
    filterM,
    findM,
    mapM,
    reduceM,
    someM,
)

# Task lists
from .concurrency import (
    KeyedTasks,
    OrderedTasks,
    TaskList,
    tasks_of,
    # Plain
    parallel,
    series,
    # LazyCoroResult
    parallel_r,
    series_r,
    # LazyCoroResultWriter
    parallel_w,
    series_w,
    # Generic
    parallelM,
    seriesM,
)

# Errors
from ._errors import TaskMapTypeError

__version__ = "3.0.0"

__all__ = (
    # Types
    "Predicate",
    "Reducer",
    "Step",
    "TaskMap",
    "Tell",
    "Thunk",
    "Traced",
    # Internal helpers (for custom wrappers)
    "_helpers",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "StepEvent",
    "StepPhase",
    "WriterResult",
    # Collection - plain
    "every",
    "filter",
    "find",
    "map",
    "reduce",
    "some",
    # Collection - LazyCoroResult
    "every_r",
    "filter_r",
    "find_r",
    "map_r",
    "reduce_r",
    "some_r",
    # Collection - LazyCoroResultWriter
    "every_w",
    "filter_w",
    "find_w",
    "map_w",
    "reduce_w",
    "some_w",
    # Collection - Generic
    "everyM",
    "filterM",
    "findM",
    "mapM",
    "reduceM",
    "someM",
    # Task lists
    "KeyedTasks",
    "OrderedTasks",
    "TaskList",
    "tasks_of",
    "parallel",
    "series",
    "parallel_r",
    "series_r",
    "parallel_w",
    "series_w",
    "parallelM",
    "seriesM",
    # Errors
    "TaskMapTypeError",
)
