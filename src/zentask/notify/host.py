# src/zentask/notify/host.py

from __future__ import annotations

import logging
from typing import Any

from ..core.models import SoundType
from .tones import SAMPLE_RATE, synthesize

logger = logging.getLogger(__name__)


class DesktopHost:
    """
    Best-effort desktop capabilities.

    Design goals:
    - Optional dependencies (sounddevice for audio, plyer for OS notifications);
      missing libraries or devices disable the channel instead of crashing.
    - Audio playback is non-blocking (sounddevice plays in its own stream).
    - Imports happen lazily, on first use, so start-up stays fast.
    """

    def __init__(self, *, app_name: str = "ZenTask", audio_enabled: bool = True, os_notifications: bool = True) -> None:
        self.app_name = app_name
        self.audio_enabled = bool(audio_enabled)
        self.os_notifications = bool(os_notifications)

        self._sd: Any = None
        self._notification: Any = None
        self._audio_checked = False
        self._notify_checked = False

    # ---- audio ----

    def _audio_backend(self) -> Any:
        if not self.audio_enabled:
            return None
        if not self._audio_checked:
            self._audio_checked = True
            try:
                import sounddevice as sd  # type: ignore

                self._sd = sd
            except Exception as e:
                self.audio_enabled = False
                logger.warning("Audio cues disabled: sounddevice unavailable (%s).", repr(e))
        return self._sd

    def play_tone(self, kind: SoundType) -> None:
        sd = self._audio_backend()
        if sd is None:
            return
        try:
            sd.play(synthesize(kind), SAMPLE_RATE)
        except Exception as e:
            logger.debug("Tone playback failed kind=%s: %s", kind, repr(e))

    # ---- OS notifications ----

    def _notify_backend(self) -> Any:
        if not self.os_notifications:
            return None
        if not self._notify_checked:
            self._notify_checked = True
            try:
                from plyer import notification  # type: ignore

                self._notification = notification
            except Exception as e:
                self.os_notifications = False
                logger.info("OS notifications disabled: plyer unavailable (%s).", repr(e))
        return self._notification

    def can_notify(self) -> bool:
        return self._notify_backend() is not None

    def notify(self, title: str, message: str) -> None:
        backend = self._notify_backend()
        if backend is None:
            return
        try:
            backend.notify(title=title, message=message, app_name=self.app_name, timeout=10)
        except Exception as e:
            logger.debug("OS notification failed: %s", repr(e))
