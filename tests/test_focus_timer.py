# tests/test_focus_timer.py

from __future__ import annotations

import asyncio
import threading

import pytest

from zentask.core.models import TimerMode
from zentask.focus.timer import FocusTimer, format_time, run_focus_ticker

from .fakes import RecordingNotifier


def _timer(notifier: RecordingNotifier, minutes: list[int], focus: int = 1500, brk: int = 300) -> FocusTimer:
    return FocusTimer(
        focus_seconds=focus,
        break_seconds=brk,
        notifier=notifier,
        on_focus_minutes=minutes.append,
        completion_message=lambda: "done",
    )


def test_focus_completes_exactly_once_and_switches_to_break() -> None:
    notifier = RecordingNotifier()
    minutes: list[int] = []
    timer = _timer(notifier, minutes)
    timer.start()

    completions = [c for c in (timer.tick() for _ in range(1500)) if c is not None]

    assert len(completions) == 1
    assert completions[0].finished_mode is TimerMode.FOCUS
    assert completions[0].focus_minutes == 25
    assert minutes == [25]
    assert notifier.messages == ["done"]
    assert timer.mode is TimerMode.BREAK
    assert timer.time_left == 300
    assert timer.is_active is False


def test_break_completion_returns_to_focus_without_minutes() -> None:
    notifier = RecordingNotifier()
    minutes: list[int] = []
    timer = _timer(notifier, minutes, focus=3, brk=2)
    timer.switch_mode(TimerMode.BREAK)
    timer.start()

    assert timer.tick() is None
    completion = timer.tick()

    assert completion is not None
    assert completion.finished_mode is TimerMode.BREAK
    assert completion.focus_minutes == 0
    assert minutes == []
    assert notifier.messages == ["done"]
    assert (timer.mode, timer.time_left, timer.is_active) == (TimerMode.FOCUS, 3, False)


def test_inactive_timer_ignores_ticks() -> None:
    timer = _timer(RecordingNotifier(), [])
    for _ in range(10):
        assert timer.tick() is None
    assert timer.time_left == 1500


def test_reset_switch_and_progress() -> None:
    timer = _timer(RecordingNotifier(), [], focus=100, brk=50)
    timer.start()
    for _ in range(25):
        timer.tick()
    assert timer.progress == pytest.approx(0.25)

    timer.reset()
    assert (timer.time_left, timer.is_active, timer.progress) == (100, False, 0.0)

    timer.start()
    timer.tick()
    timer.switch_mode(TimerMode.BREAK)
    assert (timer.mode, timer.time_left, timer.is_active) == (TimerMode.BREAK, 50, False)


def test_toggle_flips_running_state() -> None:
    timer = _timer(RecordingNotifier(), [])
    timer.toggle()
    assert timer.is_active is True
    timer.toggle()
    assert timer.is_active is False


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(1500, "25:00"), (300, "05:00"), (59, "00:59"), (0, "00:00"), (-3, "00:00")],
)
def test_format_time(seconds: int, expected: str) -> None:
    assert format_time(seconds) == expected


def test_non_positive_durations_are_rejected() -> None:
    with pytest.raises(ValueError):
        FocusTimer(focus_seconds=0)


@pytest.mark.asyncio
async def test_ticker_drives_timer_to_completion() -> None:
    notifier = RecordingNotifier()
    minutes: list[int] = []
    timer = _timer(notifier, minutes, focus=3, brk=5)
    timer.start()

    job = asyncio.create_task(run_focus_ticker(timer, interval_seconds=0.01, lock=threading.RLock()))
    try:
        for _ in range(200):
            if timer.mode is TimerMode.BREAK:
                break
            await asyncio.sleep(0.01)
    finally:
        job.cancel()
        with pytest.raises(asyncio.CancelledError):
            await job

    assert timer.mode is TimerMode.BREAK
    assert notifier.messages == ["done"]
    assert minutes == [0]
