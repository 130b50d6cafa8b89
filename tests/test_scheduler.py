from __future__ import annotations

from typing import List

import pytest

from geoquest.core.scheduler import ManualScheduler, RealtimeScheduler


def test_manual_scheduler_fires_only_when_due() -> None:
    scheduler = ManualScheduler()
    fired: List[str] = []
    scheduler.schedule(lambda: fired.append("a"), 550)

    assert scheduler.advance(549) == 0
    assert fired == []
    assert scheduler.advance(1) == 1
    assert fired == ["a"]
    assert scheduler.pending_count() == 0


def test_manual_scheduler_fires_in_due_then_registration_order() -> None:
    scheduler = ManualScheduler()
    fired: List[str] = []
    scheduler.schedule(lambda: fired.append("late"), 200)
    scheduler.schedule(lambda: fired.append("first"), 100)
    scheduler.schedule(lambda: fired.append("second"), 100)

    scheduler.run_all()

    assert fired == ["first", "second", "late"]
    assert scheduler.now_ms() == 200


def test_cancelled_call_never_fires() -> None:
    scheduler = ManualScheduler()
    fired: List[str] = []
    call = scheduler.schedule(lambda: fired.append("x"), 10)

    assert call.cancel() is True
    assert call.cancel() is False
    scheduler.advance(100)

    assert fired == []
    assert call.cancelled
    assert not call.fired
    assert scheduler.pending_count() == 0


def test_callback_can_schedule_follow_up() -> None:
    scheduler = ManualScheduler()
    fired: List[float] = []

    def first() -> None:
        fired.append(scheduler.now_ms())
        scheduler.schedule(lambda: fired.append(scheduler.now_ms()), 50)

    scheduler.schedule(first, 100)
    scheduler.advance(1000)

    assert fired == [100, 150]


def test_negative_delay_rejected() -> None:
    with pytest.raises(ValueError):
        ManualScheduler().schedule(lambda: None, -1)


def test_manual_scheduler_cannot_rewind() -> None:
    with pytest.raises(ValueError):
        ManualScheduler().advance(-5)


def test_realtime_scheduler_sleeps_until_due() -> None:
    now = [0.0]
    sleeps: List[float] = []

    def fake_sleep(seconds: float) -> None:
        sleeps.append(seconds)
        now[0] += seconds

    scheduler = RealtimeScheduler(clock=lambda: now[0], sleep=fake_sleep)
    fired: List[str] = []
    scheduler.schedule(lambda: fired.append("counter"), 550)

    assert scheduler.run_pending() == 0
    assert scheduler.wait_until_idle() == 1
    assert fired == ["counter"]
    assert sleeps[0] == pytest.approx(0.55)


def test_realtime_scheduler_idle_without_calls() -> None:
    scheduler = RealtimeScheduler(clock=lambda: 0.0, sleep=lambda _: None)
    assert scheduler.wait_until_idle() == 0
