"""
StepEvent - одна запись трассировки шага
========================================
"""

from __future__ import annotations

import enum
from collections.abc import Hashable
from dataclasses import dataclass


class StepPhase(enum.Enum):
    """Lifecycle point of a single step or thunk."""

    STARTED = "started"
    SETTLED = "settled"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class StepEvent:
    """
    Trace entry recorded by the *_w combinators.

    `key` is the element index, or the mapping key for keyed task maps.
    """

    key: Hashable
    phase: StepPhase

    @staticmethod
    def started(key: Hashable) -> StepEvent:
        return StepEvent(key, StepPhase.STARTED)

    @staticmethod
    def settled(key: Hashable) -> StepEvent:
        return StepEvent(key, StepPhase.SETTLED)

    @staticmethod
    def failed(key: Hashable) -> StepEvent:
        return StepEvent(key, StepPhase.FAILED)


__all__ = ("StepEvent", "StepPhase")
