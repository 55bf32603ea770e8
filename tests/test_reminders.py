# tests/test_reminders.py

from __future__ import annotations

import asyncio

import pytest

from zentask.core.models import ReminderKind, ReminderSettings
from zentask.storage.prefs import KEY_LAST_STRETCH, KEY_LAST_WATER, Preferences
from zentask.wellness.reminders import ReminderScheduler, is_due, run_reminder_poller

from .fakes import MemoryKeyValueStore, RecordingNotifier

MINUTE = 60_000
T0 = 1_700_000_000_000


class _Settings:
    def __init__(self, value: ReminderSettings) -> None:
        self.value = value

    def __call__(self) -> ReminderSettings:
        return self.value


def _scheduler(
    kv: MemoryKeyValueStore, settings: _Settings, notifier: RecordingNotifier, now: int = T0
) -> ReminderScheduler:
    return ReminderScheduler(
        Preferences(kv),
        notifier,
        settings_provider=settings,
        message_for=lambda kind: f"{kind.value}!",
        clock_ms=lambda: now,
    )


def test_is_due_is_strictly_greater_than_interval() -> None:
    assert is_due(T0 + 60 * MINUTE + 1, T0, 60)
    assert not is_due(T0 + 60 * MINUTE, T0, 60)


def test_disabled_scheduler_is_dormant() -> None:
    kv = MemoryKeyValueStore()
    notifier = RecordingNotifier()
    sched = _scheduler(kv, _Settings(ReminderSettings(enabled=False)), notifier)

    assert sched.poll() == []
    assert notifier.messages == []
    assert kv.keys() == []


def test_first_enabled_poll_fires_both_and_records_watermarks() -> None:
    kv = MemoryKeyValueStore()
    notifier = RecordingNotifier()
    sched = _scheduler(kv, _Settings(ReminderSettings(enabled=True)), notifier)

    assert sched.poll() == [ReminderKind.WATER, ReminderKind.STRETCH]
    assert notifier.messages == ["water!", "stretch!"]
    assert kv.get(KEY_LAST_WATER) == str(T0)
    assert kv.get(KEY_LAST_STRETCH) == str(T0)


def test_due_kind_fires_once_per_interval() -> None:
    kv = MemoryKeyValueStore({KEY_LAST_WATER: str(T0), KEY_LAST_STRETCH: str(T0)})
    notifier = RecordingNotifier()
    settings = _Settings(
        ReminderSettings(enabled=True, water_interval_minutes=30, stretch_interval_minutes=60)
    )
    sched = _scheduler(kv, settings, notifier)

    assert sched.poll(T0 + 10 * MINUTE) == []
    assert sched.poll(T0 + 31 * MINUTE) == [ReminderKind.WATER]
    assert sched.poll(T0 + 32 * MINUTE) == []
    # Water is 30m+1ms past its last firing as well.
    assert sched.poll(T0 + 61 * MINUTE + 1) == [ReminderKind.WATER, ReminderKind.STRETCH]
    assert sched.poll(T0 + 62 * MINUTE) == []
    assert sched.poll(T0 + 91 * MINUTE + 2) == [ReminderKind.WATER]
    assert notifier.messages == ["water!", "water!", "stretch!", "water!"]


def test_watermarks_survive_disable_enable_cycle() -> None:
    kv = MemoryKeyValueStore({KEY_LAST_WATER: str(T0), KEY_LAST_STRETCH: str(T0)})
    notifier = RecordingNotifier()
    settings = _Settings(ReminderSettings(enabled=True))
    sched = _scheduler(kv, settings, notifier)

    settings.value = ReminderSettings(enabled=False)
    assert sched.poll(T0 + 90 * MINUTE) == []
    assert kv.get(KEY_LAST_WATER) == str(T0)

    settings.value = ReminderSettings(enabled=True)
    assert sched.poll(T0 + 20 * MINUTE) == []
    assert sched.poll(T0 + 61 * MINUTE) == [ReminderKind.WATER, ReminderKind.STRETCH]


def test_corrupted_watermark_is_treated_as_never() -> None:
    kv = MemoryKeyValueStore({KEY_LAST_WATER: "garbage", KEY_LAST_STRETCH: str(T0)})
    notifier = RecordingNotifier()
    sched = _scheduler(kv, _Settings(ReminderSettings(enabled=True)), notifier)

    assert sched.poll(T0 + MINUTE) == [ReminderKind.WATER]
    assert kv.get(KEY_LAST_WATER) == str(T0 + MINUTE)


@pytest.mark.asyncio
async def test_poller_loop_fires_and_stops_on_cancel() -> None:
    kv = MemoryKeyValueStore()
    notifier = RecordingNotifier()
    sched = _scheduler(kv, _Settings(ReminderSettings(enabled=True)), notifier)

    job = asyncio.create_task(run_reminder_poller(sched, interval_seconds=0.01))
    try:
        for _ in range(200):
            if notifier.messages:
                break
            await asyncio.sleep(0.01)
    finally:
        job.cancel()
        with pytest.raises(asyncio.CancelledError):
            await job

    # The clock is frozen, so later polls find nothing due.
    assert notifier.messages == ["water!", "stretch!"]
