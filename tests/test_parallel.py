"""Tests for parallel()."""

import asyncio

import pytest
from kungfu import Error

from asyncro import TaskMapTypeError, parallel, parallel_r
from _tools import Boom, expect_under, fail_later, later


class TestShape:
    @pytest.mark.asyncio
    async def test_mapping(self):
        assert await parallel({"a": lambda: 1, "b": lambda: 2}) == {"a": 1, "b": 2}

    @pytest.mark.asyncio
    async def test_list(self):
        assert await parallel([lambda: 1, lambda: 2]) == [1, 2]

    @pytest.mark.asyncio
    async def test_tuple_stays_tuple(self):
        assert await parallel((lambda: "a", lambda: later("b", 0.001))) == ("a", "b")

    @pytest.mark.asyncio
    async def test_async_thunks(self):
        result = await parallel([
            lambda: asyncio.sleep(0, "a"),
            lambda: later("b", 0.001),
        ])
        assert result == ["a", "b"]

    @pytest.mark.asyncio
    async def test_mapping_keeps_keys_whatever_finishes_first(self):
        result = await parallel({
            "slow": lambda: later("s", 0.03),
            "fast": lambda: later("f", 0.001),
        })
        assert result == {"slow": "s", "fast": "f"}
        assert list(result) == ["slow", "fast"]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await parallel([]) == []
        assert await parallel({}) == {}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("task_map", [42, "ab", None, {1, 2}])
    async def test_rejects_other_types(self, task_map):
        with pytest.raises(TaskMapTypeError):
            await parallel(task_map)


class TestConcurrency:
    @pytest.mark.asyncio
    async def test_runs_concurrently(self):
        with expect_under(0.1):
            result = await parallel([lambda i=i: later(i, 0.05) for i in range(3)])
        assert result == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_thunks_invoked_in_order_in_one_pass(self):
        invoked = []

        def thunk(name):
            def start():
                invoked.append(name)
                return later(name, 0.01)
            return start

        result = await parallel({"x": thunk("x"), "y": thunk("y"), "z": thunk("z")})
        assert invoked == ["x", "y", "z"]
        assert result == {"x": "x", "y": "y", "z": "z"}


class TestFailures:
    @pytest.mark.asyncio
    async def test_one_of_three_rejects(self):
        boom = Boom("b")
        finished = []

        async def ok(name):
            await asyncio.sleep(0.02)
            finished.append(name)
            return name

        with pytest.raises(Boom) as excinfo:
            await parallel({
                "a": lambda: ok("a"),
                "b": lambda: fail_later(boom, 0.001),
                "c": lambda: ok("c"),
            })
        assert excinfo.value is boom
        # Not cancelled, just ignored.
        await asyncio.sleep(0.04)
        assert sorted(finished) == ["a", "c"]

    @pytest.mark.asyncio
    async def test_result_flavor(self):
        boom = Boom()
        result = await parallel_r([lambda: 1, lambda: fail_later(boom, 0.001)])()
        match result:
            case Error(exc):
                assert exc is boom
            case _:
                pytest.fail(f"expected Error, got {result!r}")

    @pytest.mark.asyncio
    async def test_result_flavor_bad_task_map(self):
        result = await parallel_r(42)()
        match result:
            case Error(exc):
                assert isinstance(exc, TaskMapTypeError)
            case _:
                pytest.fail(f"expected Error, got {result!r}")
