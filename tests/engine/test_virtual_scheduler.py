"""
Tests for VirtualScheduler (virtual clock used to drive timers in tests).
"""

import pytest

from engine.virtual_scheduler import VirtualScheduler


def test_call_later_fires_once():
    scheduler = VirtualScheduler()
    calls = []

    scheduler.call_later(100, lambda: calls.append(scheduler.now()))

    scheduler.advance(99)
    assert calls == []
    scheduler.advance(1)
    assert calls == [100]
    scheduler.advance(1000)
    assert calls == [100]


def test_call_every_fixed_cadence():
    scheduler = VirtualScheduler()
    calls = []

    scheduler.call_every(50, lambda: calls.append(scheduler.now()))
    fired = scheduler.advance(200)

    assert fired == 4
    assert calls == [50, 100, 150, 200]


def test_same_instant_fires_in_scheduling_order():
    scheduler = VirtualScheduler()
    order = []

    scheduler.call_later(10, lambda: order.append("a"))
    scheduler.call_every(10, lambda: order.append("b"))
    scheduler.call_later(10, lambda: order.append("c"))
    scheduler.advance(10)

    assert order == ["a", "b", "c"]


def test_cancel_is_idempotent():
    scheduler = VirtualScheduler()
    calls = []

    handle = scheduler.call_every(10, lambda: calls.append(1))
    scheduler.advance(30)
    handle.cancel()
    handle.cancel()
    scheduler.advance(100)

    assert len(calls) == 3
    assert handle.cancelled
    assert scheduler.pending() == 0


def test_callback_can_cancel_itself():
    scheduler = VirtualScheduler()
    calls = []
    handle = None

    def tick():
        calls.append(scheduler.now())
        if len(calls) == 2:
            handle.cancel()

    handle = scheduler.call_every(25, tick)
    scheduler.advance(500)

    assert calls == [25, 50]


def test_callback_can_schedule_within_same_advance():
    scheduler = VirtualScheduler()
    calls = []

    scheduler.call_later(10, lambda: scheduler.call_later(10, lambda: calls.append(scheduler.now())))
    scheduler.advance(20)

    assert calls == [20]


def test_clock_moves_to_target():
    scheduler = VirtualScheduler(start_ms=1000)
    scheduler.advance(250)
    assert scheduler.now() == 1250


def test_rejects_bad_arguments():
    scheduler = VirtualScheduler()
    with pytest.raises(ValueError):
        scheduler.advance(-1)
    with pytest.raises(ValueError):
        scheduler.call_every(0, lambda: None)
