"""
WriterResult - итог комбинатора вместе с трассой шагов
======================================================

What awaiting a `*_w` combinator yields: the combinator's outcome as a
kungfu Result plus the `Log[StepEvent]` recorded while it ran. The log
lists every step the combinator started, settled or saw fail, keyed by
index (sequences) or by key (task mappings), in the order it happened.
"""

from __future__ import annotations

from kungfu import Ok, Result


class WriterResult[T, E, W]:
    """
    Outcome of a traced combinator run.

    `result` is Ok(value) or Error(exc) with the step's own exception.
    `log` is the step trace, a snapshot taken when the run finished, so
    steps still in flight after a failure are not in it.

        wr = await map_w(urls, fetch)()
        match wr:
            case WriterResult(Ok(pages), log):
                print(log.keys(StepPhase.SETTLED))
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("result", "log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @property
    def result(self) -> Result[T, E]:
        return self._result

    @property
    def log(self) -> W:
        return self._log

    @property
    def ok(self) -> bool:
        """True when every awaited step settled and the combinator produced a value."""
        return isinstance(self._result, Ok)

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


__all__ = ("WriterResult",)
