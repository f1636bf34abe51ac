import asyncio

import pytest

from classlist.core.scheduler import AsyncioScheduler, ManualScheduler


def test_manual_scheduler_fires_in_due_order():
    s = ManualScheduler()
    fired = []
    s.call_later(300, lambda: fired.append("late"))
    s.call_later(100, lambda: fired.append("early"))
    s.call_later(100, lambda: fired.append("early-2"))

    assert s.advance(99) == 0
    assert s.advance(201) == 3
    assert fired == ["early", "early-2", "late"]
    assert s.now == 300


def test_cancelled_timer_never_fires():
    s = ManualScheduler()
    fired = []
    timer = s.call_later(100, lambda: fired.append("x"))
    timer.cancel()

    assert timer.cancelled()
    assert s.pending == 0
    assert s.advance(1000) == 0
    assert fired == []


def test_timers_scheduled_while_advancing_fire_when_due():
    s = ManualScheduler()
    fired = []

    def first():
        fired.append(s.now)
        s.call_later(50, lambda: fired.append(s.now))

    s.call_later(100, first)
    s.advance(200)

    assert fired == [100, 150]


def test_run_until_idle_drains_chained_timers():
    s = ManualScheduler()
    fired = []
    s.call_later(500, lambda: s.call_later(500, lambda: fired.append(s.now)))

    assert s.run_until_idle() == 2
    assert fired == [1000]
    assert s.pending == 0


def test_negative_delay_is_rejected():
    with pytest.raises(ValueError):
        ManualScheduler().call_later(-1, lambda: None)
    with pytest.raises(ValueError):
        ManualScheduler().advance(-5)


def test_asyncio_scheduler_uses_running_loop():
    fired = []

    async def scenario():
        s = AsyncioScheduler()
        s.call_later(5, lambda: fired.append("kept"))
        s.call_later(5, lambda: fired.append("dropped")).cancel()
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert fired == ["kept"]
