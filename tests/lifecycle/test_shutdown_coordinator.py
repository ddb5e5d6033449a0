"""
Tests for the shutdown coordinator and the shutdown handlers.
"""

import asyncio

import pytest

from canvas.svg_canvas import SvgCanvas
from engine.animation_controller import AnimationController
from engine.scheduler import AsyncioScheduler
from lifecycle.handlers import AnimationShutdownHandler, TaskCancellationHandler
from lifecycle.shutdown_coordinator import ShutdownCoordinator
from lifecycle.task_registry import TaskCategory, TaskRegistry, create_tracked_task
from models.config import SVG_NAMESPACE


class RecordingHandler:

    def __init__(self, name, priority, calls, fail=False):
        self.name = name
        self._priority = priority
        self.calls = calls
        self.fail = fail

    @property
    def shutdown_priority(self):
        return self._priority

    async def shutdown(self):
        self.calls.append(self.name)
        if self.fail:
            raise RuntimeError("handler failure")


@pytest.mark.asyncio
async def test_handlers_run_in_priority_order():
    calls = []
    coordinator = ShutdownCoordinator()
    coordinator.register(RecordingHandler("low", 10, calls))
    coordinator.register(RecordingHandler("high", 100, calls))
    coordinator.register(RecordingHandler("mid", 50, calls))

    await coordinator.shutdown_all()

    assert calls == ["high", "mid", "low"]


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_sequence():
    calls = []
    coordinator = ShutdownCoordinator()
    coordinator.register(RecordingHandler("first", 2, calls, fail=True))
    coordinator.register(RecordingHandler("second", 1, calls))

    await coordinator.shutdown_all()

    assert calls == ["first", "second"]


def test_register_rejects_incomplete_handler():
    with pytest.raises(ValueError):
        ShutdownCoordinator().register(object())


@pytest.mark.asyncio
async def test_wait_for_shutdown_timeout_sets_reason():
    coordinator = ShutdownCoordinator()

    await asyncio.wait_for(coordinator.wait_for_shutdown(timeout=0.01), timeout=1.0)

    assert "Run time elapsed" in coordinator.reason


@pytest.mark.asyncio
async def test_request_shutdown():
    coordinator = ShutdownCoordinator()
    waiter = asyncio.create_task(coordinator.wait_for_shutdown())
    await asyncio.sleep(0)

    coordinator.request_shutdown("test")
    await asyncio.wait_for(waiter, timeout=1.0)

    assert coordinator.reason == "test"


@pytest.mark.asyncio
async def test_animation_handler_stops_sessions():
    controller = AnimationController(AsyncioScheduler())
    canvas = SvgCanvas()
    session = controller.start(canvas, SVG_NAMESPACE, "circle")

    coordinator = ShutdownCoordinator()
    coordinator.register(AnimationShutdownHandler(controller))
    coordinator.register(TaskCancellationHandler())
    await coordinator.shutdown_all()

    mutations = canvas.mutations
    await asyncio.sleep(0.1)

    assert not session.active
    assert not controller.is_running()
    assert canvas.mutations == mutations
    assert TaskRegistry.instance().active() == []


@pytest.mark.asyncio
async def test_task_cancellation_handler_cancels_tracked_tasks():
    async def forever():
        while True:
            await asyncio.sleep(1)

    task = create_tracked_task(forever(), category=TaskCategory.BACKGROUND, description="forever")

    await TaskCancellationHandler().shutdown()

    assert task.cancelled()
