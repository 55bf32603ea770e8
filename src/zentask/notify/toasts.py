# src/zentask/notify/toasts.py

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Toast:
    id: int
    message: str
    kind: str
    created_at: float
    expires_at: float


class ToastQueue:
    """
    In-app messages that disappear after ttl_seconds or on dismissal,
    whichever comes first. Expiry is evaluated lazily against `clock`.
    """

    def __init__(self, ttl_seconds: float = 5.0, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = max(0.0, float(ttl_seconds))
        self._clock = clock
        self._ids = itertools.count(1)
        self._items: list[Toast] = []
        self._listeners: list[Callable[[Toast], None]] = []

    def subscribe(self, listener: Callable[[Toast], None]) -> None:
        """Call `listener` for every pushed toast (used by connectors to render them)."""
        self._listeners.append(listener)

    def push(self, message: str, kind: str = "info") -> Toast:
        now = self._clock()
        self._purge(now)
        toast = Toast(id=next(self._ids), message=message, kind=kind, created_at=now, expires_at=now + self._ttl)
        self._items.append(toast)
        for listener in list(self._listeners):
            try:
                listener(toast)
            except Exception:
                logger.debug("Toast listener failed.", exc_info=True)
        return toast

    def _purge(self, now: float) -> None:
        self._items = [t for t in self._items if t.expires_at > now]

    def active(self) -> list[Toast]:
        self._purge(self._clock())
        return list(self._items)

    def dismiss(self, toast_id: int | None = None) -> bool:
        """Dismiss a toast by id, or the newest one when no id is given."""
        items = self.active()
        if not items:
            return False
        target = items[-1].id if toast_id is None else toast_id
        before = len(self._items)
        self._items = [t for t in self._items if t.id != target]
        return len(self._items) != before

    def clear(self) -> None:
        self._items.clear()


class FlashIndicator:
    """Bounded-duration visual highlight; is_on() turns false by itself."""

    def __init__(self, duration_seconds: float = 0.5, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._duration = max(0.0, float(duration_seconds))
        self._clock = clock
        self._until = 0.0

    def trigger(self) -> None:
        self._until = self._clock() + self._duration

    def is_on(self) -> bool:
        return self._clock() < self._until
