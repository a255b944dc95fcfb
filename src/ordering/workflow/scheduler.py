"""Deferred task scheduler — cancellable delayed callbacks keyed by name.

Used by the order workflow for the post-delivery review reminder. At most
one task exists per key; scheduling again replaces the earlier task.
"""

import asyncio
from collections.abc import Awaitable, Callable

import structlog

logger = structlog.get_logger(__name__)


class DeferredTaskScheduler:
    def __init__(self):
        self._tasks: dict[str, asyncio.Task] = {}

    def schedule(self, key: str, delay: float, callback: Callable[[], Awaitable]) -> asyncio.Task:
        """Run ``callback()`` after ``delay`` seconds unless cancelled first."""
        self.cancel(key)
        task = asyncio.get_running_loop().create_task(self._run(key, delay, callback))
        self._tasks[key] = task
        return task

    async def _run(self, key: str, delay: float, callback) -> None:
        try:
            await asyncio.sleep(delay)
            # Past this point the task can no longer be cancelled by key
            if self._tasks.get(key) is asyncio.current_task():
                del self._tasks[key]
            await callback()
        except Exception as e:
            logger.error("Deferred task failed", key=key, error=str(e), error_type=type(e).__name__)

    def cancel(self, key: str) -> bool:
        """Cancel the pending task for ``key``. Returns False when none was pending."""
        task = self._tasks.pop(key, None)
        if task is None or task.done():
            return False
        task.cancel()
        return True

    def is_scheduled(self, key: str) -> bool:
        task = self._tasks.get(key)
        return task is not None and not task.done()

    async def shutdown(self) -> None:
        """Cancel every pending task and wait for them to finish."""
        tasks = list(self._tasks.values())
        self._tasks.clear()
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
