# src/zentask/core/state.py

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from typing import Any

from ..achievements.tracker import StatsTracker
from ..focus.timer import FocusTimer
from ..notify.dispatcher import NotificationDispatcher
from ..storage.prefs import Preferences
from ..tasks.task_list import TaskList
from ..wellness.reminders import ReminderScheduler
from .models import Language, ReminderSettings, ThemeId
from .ports import LLMClient

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Everything a connector or command needs, wired once by the composition root.

    `lock` serializes timer ticks, reminder polls and user commands, so each
    handler runs to completion before the next one starts.
    """

    settings: Any
    prefs: Preferences
    dispatcher: NotificationDispatcher
    tracker: StatsTracker
    tasks: TaskList
    timer: FocusTimer
    reminders: ReminderScheduler
    llm: LLMClient | None = None

    language: Language = Language.EN
    theme: ThemeId = ThemeId.MIDNIGHT
    reminder_settings: ReminderSettings = field(default_factory=ReminderSettings)

    lock: threading.RLock = field(default_factory=threading.RLock)

    def set_language(self, lang: Language) -> None:
        self.language = lang
        self.prefs.save_language(lang)

    def set_theme(self, theme: ThemeId) -> None:
        self.theme = theme
        self.prefs.save_theme(theme)

    def update_reminder_settings(self, **changes: Any) -> ReminderSettings:
        """Replace the settings wholesale (intervals are clamped to the minimum) and persist."""
        updated = replace(self.reminder_settings, **changes)
        self.reminder_settings = updated
        self.prefs.save_reminder_settings(updated)
        logger.info("Reminder settings updated: %s", updated.to_json())
        return updated
