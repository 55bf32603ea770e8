# src/zentask/wellness/reminders.py

"""
Wellness reminder scheduler.

A small polling loop that:
- reads the current ReminderSettings,
- compares wall-clock time against the persisted per-kind watermark,
- fires a notification and advances the watermark for every due kind.

While reminders are disabled the scheduler is dormant: nothing is read
or written. Watermarks outlive the enabled flag, so turning reminders
off and on again resumes the previous schedule.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from collections.abc import Callable
from contextlib import AbstractContextManager

from ..core.models import ReminderKind, ReminderSettings
from ..core.ports import Notifier
from ..storage.prefs import Preferences

logger = logging.getLogger(__name__)

MS_PER_MINUTE = 60_000
DEFAULT_POLL_SECONDS = 10.0


def _now_ms() -> int:
    return int(time.time() * 1000)


def is_due(now_ms: int, watermark_ms: int, interval_minutes: int) -> bool:
    return now_ms - watermark_ms > interval_minutes * MS_PER_MINUTE


class ReminderScheduler:
    def __init__(
        self,
        prefs: Preferences,
        notifier: Notifier,
        *,
        settings_provider: Callable[[], ReminderSettings],
        message_for: Callable[[ReminderKind], str],
        clock_ms: Callable[[], int] = _now_ms,
    ) -> None:
        self._prefs = prefs
        self._notifier = notifier
        self._settings_provider = settings_provider
        self._message_for = message_for
        self._clock_ms = clock_ms

    def poll(self, now_ms: int | None = None) -> list[ReminderKind]:
        """Evaluate both reminder kinds once. Returns the kinds that fired."""
        settings = self._settings_provider()
        if not settings.enabled:
            return []

        now = self._clock_ms() if now_ms is None else int(now_ms)
        fired: list[ReminderKind] = []

        for kind in (ReminderKind.WATER, ReminderKind.STRETCH):
            watermark = self._prefs.load_watermark(kind)
            if not is_due(now, watermark, settings.interval_minutes(kind)):
                continue
            self._prefs.save_watermark(kind, now)
            self._notifier.notify(self._message_for(kind))
            fired.append(kind)
            logger.info("Reminder fired kind=%s (last=%s)", kind.value, watermark)

        return fired


async def run_reminder_poller(
        scheduler: ReminderScheduler,
        *,
        interval_seconds: float = DEFAULT_POLL_SECONDS,
        lock: AbstractContextManager | None = None,
) -> None:
    """
    Simple polling loop: every interval_seconds call scheduler.poll().

    The interval only changes firing latency; it should stay short compared
    to the configured reminder intervals (minutes). To stop the poller,
    cancel the coroutine/task.
    """
    sleep_s = max(0.01, float(interval_seconds))

    while True:
        await asyncio.sleep(sleep_s)
        try:
            with lock if lock is not None else contextlib.nullcontext():
                scheduler.poll()
        except Exception:
            logger.exception("reminder poll failed")
