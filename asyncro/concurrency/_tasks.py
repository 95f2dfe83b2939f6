"""
Task lists
==========

A task map is classified once, at the start of parallel()/series(), into
one of two shapes that share the same interface:

- OrderedTasks: list/tuple of thunks, keys are indices
- KeyedTasks: mapping of thunks, keys are the mapping's keys

Both expose `entries` (key, thunk) in iteration order and `rebuild()`,
which puts resolved values back into the caller's shape.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass

from .._errors import TaskMapTypeError
from .._types import TaskMap, Thunk


@dataclass(frozen=True)
class OrderedTasks[T]:
    entries: tuple[tuple[int, Thunk[T]], ...]
    as_tuple: bool = False

    def rebuild(self, values: Sequence[T]) -> list[T] | tuple[T, ...]:
        return tuple(values) if self.as_tuple else list(values)


@dataclass(frozen=True)
class KeyedTasks[T]:
    entries: tuple[tuple[Hashable, Thunk[T]], ...]

    def rebuild(self, values: Sequence[T]) -> dict[Hashable, T]:
        return {key: value for (key, _), value in zip(self.entries, values, strict=True)}


type TaskList[T] = OrderedTasks[T] | KeyedTasks[T]


def tasks_of[T](task_map: TaskMap[T]) -> TaskList[T]:
    """Classify a task map. Raises TaskMapTypeError for anything else."""
    match task_map:
        case Mapping():
            return KeyedTasks(tuple(task_map.items()))
        case str() | bytes() | bytearray():
            raise TaskMapTypeError(type(task_map))
        case Sequence():
            return OrderedTasks(
                tuple(enumerate(task_map)),
                as_tuple=isinstance(task_map, tuple),
            )
        case _:
            raise TaskMapTypeError(type(task_map))


__all__ = ("KeyedTasks", "OrderedTasks", "TaskList", "tasks_of")
