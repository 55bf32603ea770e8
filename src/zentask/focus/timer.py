# src/zentask/focus/timer.py

"""
Focus/break countdown.

State is (mode, time_left, is_active). The state machine is synchronous and
clock-free: something else calls tick() once per second while the timer is
running (see run_focus_ticker). Completion happens inside the tick that
reaches zero, so it can never fire twice for the same countdown.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass

from ..core.models import TimerMode
from ..core.ports import Notifier

logger = logging.getLogger(__name__)

DEFAULT_FOCUS_SECONDS = 25 * 60
DEFAULT_BREAK_SECONDS = 5 * 60


@dataclass(slots=True, frozen=True)
class TimerCompletion:
    finished_mode: TimerMode
    next_mode: TimerMode
    focus_minutes: int  # 0 when a break finished


def format_time(seconds: int) -> str:
    mins, secs = divmod(max(0, int(seconds)), 60)
    return f"{mins:02d}:{secs:02d}"


class FocusTimer:
    def __init__(
        self,
        *,
        focus_seconds: int = DEFAULT_FOCUS_SECONDS,
        break_seconds: int = DEFAULT_BREAK_SECONDS,
        notifier: Notifier | None = None,
        on_focus_minutes: Callable[[int], None] | None = None,
        completion_message: Callable[[], str] = lambda: "Session finished!",
    ) -> None:
        if focus_seconds <= 0 or break_seconds <= 0:
            raise ValueError("timer durations must be positive")
        self._durations = {TimerMode.FOCUS: int(focus_seconds), TimerMode.BREAK: int(break_seconds)}
        self._notifier = notifier
        self._on_focus_minutes = on_focus_minutes
        self._completion_message = completion_message

        self.mode = TimerMode.FOCUS
        self.time_left = self._durations[TimerMode.FOCUS]
        self.is_active = False

    def full_duration(self, mode: TimerMode | None = None) -> int:
        return self._durations[mode or self.mode]

    @property
    def progress(self) -> float:
        full = self.full_duration()
        frac = (full - self.time_left) / full
        return min(1.0, max(0.0, frac))

    def display(self) -> str:
        return format_time(self.time_left)

    # ---- transitions ----

    def start(self) -> None:
        self.is_active = True

    def pause(self) -> None:
        self.is_active = False

    def toggle(self) -> None:
        self.is_active = not self.is_active

    def reset(self) -> None:
        self.is_active = False
        self.time_left = self.full_duration()

    def switch_mode(self, mode: TimerMode) -> None:
        """Switch to `mode`, abandoning any progress in the current countdown."""
        self.is_active = False
        self.mode = mode
        self.time_left = self.full_duration(mode)

    def tick(self) -> TimerCompletion | None:
        """Advance one second. Returns the completion event on the tick that reaches zero."""
        if not self.is_active:
            return None
        if self.time_left > 0:
            self.time_left -= 1
        if self.time_left > 0:
            return None
        return self._complete()

    def _complete(self) -> TimerCompletion:
        finished = self.mode
        self.is_active = False

        if self._notifier is not None:
            self._notifier.notify(self._completion_message())

        focus_minutes = 0
        if finished is TimerMode.FOCUS:
            focus_minutes = self.full_duration(TimerMode.FOCUS) // 60
            if self._on_focus_minutes is not None:
                self._on_focus_minutes(focus_minutes)
            next_mode = TimerMode.BREAK
        else:
            next_mode = TimerMode.FOCUS

        self.mode = next_mode
        self.time_left = self.full_duration(next_mode)
        logger.info("Timer %s finished -> %s (focus_minutes=%d)", finished.value, next_mode.value, focus_minutes)
        return TimerCompletion(finished_mode=finished, next_mode=next_mode, focus_minutes=focus_minutes)


async def run_focus_ticker(
        timer: FocusTimer,
        *,
        interval_seconds: float = 1.0,
        lock: AbstractContextManager | None = None,
) -> None:
    """
    Call timer.tick() every interval_seconds.

    Each tick runs under `lock` (if given) so it cannot interleave with
    user commands. To stop the ticker, cancel the coroutine/task.
    """
    sleep_s = max(0.01, float(interval_seconds))

    while True:
        await asyncio.sleep(sleep_s)
        try:
            with lock if lock is not None else contextlib.nullcontext():
                timer.tick()
        except Exception:
            logger.exception("focus timer tick failed")
