"""Tests for series()."""

import asyncio

import pytest
from kungfu import Error

from asyncro import series, series_r
from _tools import Boom, expect_over, expect_under, fail_later, later


class TestShape:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("eager", [True, False])
    async def test_mapping(self, eager):
        assert await series({"a": lambda: 1, "b": lambda: 2}, eager=eager) == {"a": 1, "b": 2}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("eager", [True, False])
    async def test_list(self, eager):
        assert await series([lambda: 1, lambda: 2], eager=eager) == [1, 2]

    @pytest.mark.asyncio
    async def test_collected_in_order_when_later_task_finishes_first(self):
        result = await series([
            lambda: later("slow", 0.03),
            lambda: later("fast", 0.001),
        ])
        assert result == ["slow", "fast"]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await series([]) == []
        assert await series({}, eager=False) == {}


class TestEager:
    @pytest.mark.asyncio
    async def test_all_thunks_invoked_up_front(self):
        invoked = []

        def thunk(i):
            def start():
                invoked.append(i)
                return later(i, 0.01)
            return start

        async def check():
            await asyncio.sleep(0.01)
            assert invoked == [0, 1, 2]
            return 0

        def first():
            invoked.append(0)
            return check()

        assert await series([first, thunk(1), thunk(2)]) == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_work_overlaps(self):
        with expect_under(0.1):
            result = await series([lambda i=i: later(i, 0.05) for i in range(3)])
        assert result == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_failure_stops_collection(self):
        boom = Boom()
        invoked = []

        def thunk(i, outcome):
            def start():
                invoked.append(i)
                return outcome
            return start

        with pytest.raises(Boom) as excinfo:
            await series([
                thunk(0, later(0, 0.001)),
                thunk(1, fail_later(boom, 0.01)),
                thunk(2, fail_later(Boom("discarded"), 0.02)),
            ])
        assert excinfo.value is boom
        # Eager: everything was already invoked.
        assert invoked == [0, 1, 2]
        await asyncio.sleep(0.03)

    @pytest.mark.asyncio
    async def test_cancelling_caller_leaves_thunks_running(self):
        finished = []

        def thunk(i):
            async def start():
                await asyncio.sleep(0.02)
                finished.append(i)
                return i
            return start

        task = asyncio.ensure_future(series([thunk(i) for i in range(3)]))
        await asyncio.sleep(0.005)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        await asyncio.sleep(0.05)
        assert sorted(finished) == [0, 1, 2]


class TestLazy:
    @pytest.mark.asyncio
    async def test_one_at_a_time(self):
        log = []

        def thunk(i):
            async def start():
                log.append(("start", i))
                await asyncio.sleep(0.01)
                log.append(("end", i))
                return i
            return start

        assert await series([thunk(0), thunk(1), thunk(2)], eager=False) == [0, 1, 2]
        assert log == [
            ("start", 0), ("end", 0),
            ("start", 1), ("end", 1),
            ("start", 2), ("end", 2),
        ]

    @pytest.mark.asyncio
    async def test_work_does_not_overlap(self):
        with expect_over(0.12):
            await series([lambda: later(None, 0.05) for _ in range(3)], eager=False)

    @pytest.mark.asyncio
    async def test_later_thunks_never_invoked_after_failure(self):
        boom = Boom()
        invoked = []

        def thunk(key, fail=False):
            def start():
                invoked.append(key)
                return fail_later(boom, 0.001) if fail else later(key, 0.001)
            return start

        with pytest.raises(Boom) as excinfo:
            await series(
                {"a": thunk("a"), "b": thunk("b", fail=True), "c": thunk("c")},
                eager=False,
            )
        assert excinfo.value is boom
        assert invoked == ["a", "b"]


class TestSeriesResult:
    @pytest.mark.asyncio
    async def test_ok(self):
        result = await series_r({"x": lambda: later(1, 0.001)})()
        assert result.unwrap() == {"x": 1}

    @pytest.mark.asyncio
    async def test_error(self):
        boom = Boom()
        result = await series_r([lambda: fail_later(boom, 0.001)], eager=False)()
        match result:
            case Error(exc):
                assert exc is boom
            case _:
                pytest.fail(f"expected Error, got {result!r}")
