"""
Scheduler

Timer abstraction used by the fade primitive and the AnimationController.
All times are in milliseconds.

Two implementations:
- AsyncioScheduler: real time, one tracked asyncio task per timer
- VirtualScheduler (engine.virtual_scheduler): virtual clock driven by advance()
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional, Protocol

from lifecycle.task_registry import TaskCategory, create_tracked_task
from models.enums import LogCategory
from utils.logger import get_category_logger

log = get_category_logger(LogCategory.TASK)

TimerCallback = Callable[[], None]


class TimerHandle(Protocol):
    """Handle returned for every scheduled timer"""

    @property
    def cancelled(self) -> bool:
        ...

    def cancel(self) -> None:
        """Stop the timer. Idempotent; the callback never fires afterwards."""
        ...


class IScheduler(Protocol):
    """
    Protocol for timer scheduling.

    - call_later: one-shot callback after delay_ms
    - call_every: repeating callback every interval_ms (first call after one interval)
    - now: current time in ms
    """

    def call_later(self, delay_ms: float, callback: TimerCallback, description: str = "") -> TimerHandle:
        ...

    def call_every(self, interval_ms: float, callback: TimerCallback, description: str = "") -> TimerHandle:
        ...

    def now(self) -> float:
        ...


class AsyncioTimerHandle:
    """Timer backed by an asyncio task"""

    def __init__(self):
        self._cancelled = False
        self.task: Optional[asyncio.Task] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        if self.task is not None and not self.task.done():
            # Cancelling from inside our own callback is fine: the loop exits on the flag first
            if self.task is not _current_task():
                self.task.cancel()

    def __repr__(self):
        return f"AsyncioTimerHandle(cancelled={self._cancelled})"


def _current_task() -> Optional[asyncio.Task]:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


class AsyncioScheduler:
    """
    Real-time scheduler on the running asyncio loop.

    Every timer runs as its own task registered in TaskRegistry, so the
    shutdown coordinator can see and cancel anything left behind.
    Callback errors are logged; repeating timers keep running.

    Example:
        scheduler = AsyncioScheduler()
        handle = scheduler.call_every(50, step)
        ...
        handle.cancel()
    """

    def __init__(self, category: TaskCategory = TaskCategory.ANIMATION):
        self.category = category

    def now(self) -> float:
        return asyncio.get_running_loop().time() * 1000

    def _invoke(self, callback: TimerCallback, description: str) -> None:
        try:
            callback()
        except Exception as e:
            log.error(f"Timer callback failed: {description or callback!r}", error=str(e), exc_info=True)

    async def _run_once(self, handle: AsyncioTimerHandle, delay_ms: float, callback: TimerCallback, description: str):
        await asyncio.sleep(delay_ms / 1000)
        if not handle.cancelled:
            self._invoke(callback, description)

    async def _run_every(self, handle: AsyncioTimerHandle, interval_ms: float, callback: TimerCallback, description: str):
        loop = asyncio.get_running_loop()
        next_due = loop.time()
        while not handle.cancelled:
            # Fixed cadence: schedule from the previous deadline, not from callback end
            next_due += interval_ms / 1000
            await asyncio.sleep(max(0.0, next_due - loop.time()))
            if handle.cancelled:
                break
            self._invoke(callback, description)

    def call_later(self, delay_ms: float, callback: TimerCallback, description: str = "") -> AsyncioTimerHandle:
        handle = AsyncioTimerHandle()
        handle.task = create_tracked_task(
            self._run_once(handle, delay_ms, callback, description),
            category=self.category,
            description=description or f"timer after {delay_ms}ms",
        )
        return handle

    def call_every(self, interval_ms: float, callback: TimerCallback, description: str = "") -> AsyncioTimerHandle:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive: {interval_ms}")
        handle = AsyncioTimerHandle()
        handle.task = create_tracked_task(
            self._run_every(handle, interval_ms, callback, description),
            category=self.category,
            description=description or f"timer every {interval_ms}ms",
        )
        return handle
