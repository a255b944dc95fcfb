"""Application tests for the deferred task scheduler."""

import asyncio

import pytest
from ordering.workflow.scheduler import DeferredTaskScheduler


def _recorder():
    calls = []

    async def callback():
        calls.append("ran")

    return calls, callback


class TestDeferredTaskScheduler:
    @pytest.mark.asyncio
    async def test_callback_runs_after_delay(self):
        scheduler = DeferredTaskScheduler()
        calls, callback = _recorder()

        scheduler.schedule("k", 0.01, callback)
        assert scheduler.is_scheduled("k")

        await asyncio.sleep(0.05)
        assert calls == ["ran"]
        assert not scheduler.is_scheduled("k")

    @pytest.mark.asyncio
    async def test_cancel_before_delay_prevents_callback(self):
        scheduler = DeferredTaskScheduler()
        calls, callback = _recorder()

        scheduler.schedule("k", 0.05, callback)
        assert scheduler.cancel("k") is True

        await asyncio.sleep(0.08)
        assert calls == []

    @pytest.mark.asyncio
    async def test_cancel_unknown_key_returns_false(self):
        assert DeferredTaskScheduler().cancel("missing") is False

    @pytest.mark.asyncio
    async def test_rescheduling_replaces_earlier_task(self):
        scheduler = DeferredTaskScheduler()
        calls, callback = _recorder()

        scheduler.schedule("k", 0.02, callback)
        scheduler.schedule("k", 0.02, callback)

        await asyncio.sleep(0.06)
        assert calls == ["ran"]

    @pytest.mark.asyncio
    async def test_failing_callback_is_contained(self):
        scheduler = DeferredTaskScheduler()

        async def explode():
            raise RuntimeError("boom")

        task = scheduler.schedule("k", 0, explode)
        await task
        assert not scheduler.is_scheduled("k")

    @pytest.mark.asyncio
    async def test_shutdown_cancels_everything(self):
        scheduler = DeferredTaskScheduler()
        calls, callback = _recorder()
        scheduler.schedule("a", 0.05, callback)
        scheduler.schedule("b", 0.05, callback)

        await scheduler.shutdown()
        await asyncio.sleep(0.08)

        assert calls == []
        assert not scheduler.is_scheduled("a")
