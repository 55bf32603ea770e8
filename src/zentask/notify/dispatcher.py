# src/zentask/notify/dispatcher.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.models import NotificationMode, ReminderSettings
from ..core.ports import HostCapabilities
from .toasts import FlashIndicator, ToastQueue

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """
    One call, three channels:
    - audio cue (unless mode is "visual")
    - flash + in-app toast (unless mode is "sound")
    - OS notification whenever the host has permission, regardless of mode

    notify() never raises; a failing channel is logged and skipped.
    """

    def __init__(
        self,
        host: HostCapabilities,
        *,
        settings_provider: Callable[[], ReminderSettings],
        toasts: ToastQueue | None = None,
        flash: FlashIndicator | None = None,
        title: str = "ZenTask",
    ) -> None:
        self._host = host
        self._settings_provider = settings_provider
        self.toasts = toasts or ToastQueue()
        self.flash = flash or FlashIndicator()
        self._title = title

    def notify(self, message: str) -> None:
        try:
            settings = self._settings_provider()
        except Exception:
            logger.exception("Cannot read reminder settings; using defaults.")
            settings = ReminderSettings()

        mode = settings.notification_mode

        if mode != NotificationMode.VISUAL:
            try:
                self._host.play_tone(settings.sound_type)
            except Exception:
                logger.debug("Audio channel failed.", exc_info=True)

        if mode != NotificationMode.SOUND:
            try:
                self.flash.trigger()
                self.toasts.push(message)
            except Exception:
                logger.debug("Visual channel failed.", exc_info=True)

        try:
            if self._host.can_notify():
                self._host.notify(self._title, message)
        except Exception:
            logger.debug("OS notification channel failed.", exc_info=True)

        logger.debug("Notification (%s): %s", mode.value, message)
