"""Tests for sequential reduce."""

import asyncio

import pytest
from kungfu import Error

from asyncro import reduce, reduce_r
from _tools import Boom, later


class TestReduce:
    @pytest.mark.asyncio
    async def test_sums_with_initial(self):
        assert await reduce([1, 2], lambda acc, v: acc + v, 0) == 3

    @pytest.mark.asyncio
    async def test_async_reducer(self):
        async def add(acc, v):
            return await later(acc + v, 0.001)

        assert await reduce([1, 2, 3, 4], add, 0) == 10

    @pytest.mark.asyncio
    async def test_empty_returns_initial(self):
        assert await reduce([], lambda acc, v: acc + v, 10) == 10

    @pytest.mark.asyncio
    async def test_empty_without_initial(self):
        assert await reduce([], lambda acc, v: acc + v) is None

    @pytest.mark.asyncio
    async def test_no_seeding_from_first_element(self):
        seen = []

        def reducer(acc, v):
            seen.append(acc)
            return (acc or 0) + v

        assert await reduce([5, 6], reducer) == 11
        assert seen == [None, 5]

    @pytest.mark.asyncio
    async def test_receives_index_and_sequence(self):
        items = ["a", "b", "c"]
        calls = []

        async def reducer(acc, value, index, seq):
            calls.append((value, index, seq))
            return acc + value

        assert await reduce(items, reducer, "") == "abc"
        assert [(v, i) for v, i, _ in calls] == [("a", 0), ("b", 1), ("c", 2)]
        assert all(seq is items for _, _, seq in calls)

    @pytest.mark.asyncio
    async def test_log_follows_index_order_under_staggered_delays(self):
        log = []

        async def reducer(acc, v, i):
            log.append(("start", i))
            # Earlier indices take longer; order must still hold.
            await asyncio.sleep((3 - i) * 0.01)
            log.append(("end", i))
            return acc + [v]

        assert await reduce(["x", "y", "z"], reducer, []) == ["x", "y", "z"]
        assert log == [
            ("start", 0), ("end", 0),
            ("start", 1), ("end", 1),
            ("start", 2), ("end", 2),
        ]

    @pytest.mark.asyncio
    async def test_step_sees_previous_accumulator(self):
        async def reducer(acc, v):
            await asyncio.sleep(0.001)
            return {**acc, v: len(acc)}

        assert await reduce(["a", "b", "c"], reducer, {}) == {"a": 0, "b": 1, "c": 2}

    @pytest.mark.asyncio
    async def test_impure_keeps_accumulator_object(self):
        async def load(acc, url):
            acc[url] = await later(url.upper(), 0.001)

        target = {}
        result = await reduce(["/foo", "/bar"], load, target, pure=False)
        assert result is target
        assert result == {"/foo": "/FOO", "/bar": "/BAR"}

    @pytest.mark.asyncio
    async def test_failure_aborts_and_later_steps_never_run(self):
        boom = Boom("index 1")
        invoked = []

        async def reducer(acc, v, i):
            invoked.append(i)
            if i == 1:
                raise boom
            return acc + v

        with pytest.raises(Boom) as excinfo:
            await reduce([1, 2, 3], reducer, 0)
        assert excinfo.value is boom
        assert invoked == [0, 1]

    @pytest.mark.asyncio
    async def test_sync_failure_propagates_unwrapped(self):
        boom = Boom("sync")

        def reducer(acc, v):
            raise boom

        with pytest.raises(Boom) as excinfo:
            await reduce([1], reducer, 0)
        assert excinfo.value is boom

    @pytest.mark.asyncio
    async def test_cancelling_caller_finishes_current_step_only(self):
        finished = []

        async def reducer(acc, v):
            await asyncio.sleep(0.02)
            finished.append(v)
            return acc + v

        task = asyncio.ensure_future(reduce([1, 2, 3], reducer, 0))
        await asyncio.sleep(0.005)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        await asyncio.sleep(0.05)
        assert finished == [1]


class TestReduceResult:
    @pytest.mark.asyncio
    async def test_ok(self):
        result = await reduce_r([1, 2, 3], lambda acc, v: acc * v, 1)()
        assert result.unwrap() == 6

    @pytest.mark.asyncio
    async def test_error_carries_original_exception(self):
        boom = Boom()

        async def reducer(acc, v):
            raise boom

        result = await reduce_r([1], reducer, 0)()
        match result:
            case Error(exc):
                assert exc is boom
            case _:
                pytest.fail(f"expected Error, got {result!r}")

    @pytest.mark.asyncio
    async def test_lazy_until_called(self):
        invoked = []
        lazy = reduce_r([1], lambda acc, v: invoked.append(v), None)
        assert invoked == []
        await lazy()
        assert invoked == [1]
