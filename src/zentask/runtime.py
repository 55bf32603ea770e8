# src/zentask/runtime.py

"""
Background runtime.

The console REPL blocks on input(), so the periodic callbacks (one-second
timer tick, ten-second reminder poll) live on their own asyncio loop in a
daemon thread. Both loops take AppState.lock around each callback.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from dataclasses import dataclass

from .core.state import AppState
from .focus.timer import run_focus_ticker
from .wellness.reminders import run_reminder_poller

logger = logging.getLogger(__name__)


async def run_background_loops(state: AppState, stop_event: asyncio.Event) -> None:
    settings = state.settings
    jobs = [
        asyncio.create_task(
            run_focus_ticker(state.timer, interval_seconds=settings.tick_seconds, lock=state.lock),
            name="focus-ticker",
        ),
        asyncio.create_task(
            run_reminder_poller(
                state.reminders, interval_seconds=settings.reminder_poll_seconds, lock=state.lock
            ),
            name="reminder-poller",
        ),
    ]
    logger.info("Background loops started (tick=%.2fs poll=%.2fs).", settings.tick_seconds, settings.reminder_poll_seconds)
    try:
        await stop_event.wait()
    finally:
        for job in jobs:
            job.cancel()
        await asyncio.gather(*jobs, return_exceptions=True)
        logger.info("Background loops stopped.")


@dataclass
class BackgroundRuntime:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except Exception:
            logger.debug("Failed to signal runtime stop.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_background_runtime(state: AppState) -> BackgroundRuntime | None:
    """Start the ticker + poller loop in a daemon thread."""
    ready = threading.Event()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        holder["loop"] = loop
        holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(run_background_loops(state, stop_event))
        finally:
            with contextlib.suppress(Exception):
                loop.close()

    t = threading.Thread(target=runner, name="zentask-runtime", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        logger.error("Runtime thread did not initialize properly.")
        return None

    logger.info("Runtime background thread started.")
    return BackgroundRuntime(thread=t, loop=loop, stop_event=stop_event)
