# src/zentask/storage/prefs.py

"""
Typed access to every persisted key.

Values are JSON-encoded where structured. Reads never raise: a missing or
corrupted value is replaced by its documented default (and logged). Writes
are whole-value overwrites; a failing write is logged and the in-memory state
stays authoritative for the rest of the session.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, Callable, TypeVar

from ..core.models import (
    Language,
    ReminderKind,
    ReminderSettings,
    Task,
    ThemeId,
    UserStats,
)
from ..core.ports import KeyValueRepo

logger = logging.getLogger(__name__)

KEY_THEME = "zen-theme"
KEY_LANGUAGE = "zen-lang"
KEY_TASKS = "zen-tasks"
KEY_REMINDERS = "zen-reminders"
KEY_STATS = "zen-stats"
KEY_LAST_WATER = "last-water"
KEY_LAST_STRETCH = "last-stretch"

_WATERMARK_KEYS = {
    ReminderKind.WATER: KEY_LAST_WATER,
    ReminderKind.STRETCH: KEY_LAST_STRETCH,
}

T = TypeVar("T")


class Preferences:
    """Persistence facade over a KeyValueRepo."""

    def __init__(self, kv: KeyValueRepo) -> None:
        self._kv = kv

    # ---- low-level helpers ----

    def _read(self, key: str) -> str | None:
        try:
            return self._kv.get(key)
        except sqlite3.Error:
            logger.exception("Failed to read key=%s; using default.", key)
            return None

    def _write(self, key: str, value: str) -> None:
        try:
            self._kv.set(key, value)
        except sqlite3.Error:
            logger.exception("Failed to persist key=%s", key)

    def _load_json(self, key: str, decode: Callable[[Any], T], default: T) -> T:
        raw = self._read(key)
        if raw is None:
            return default
        try:
            return decode(json.loads(raw))
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning("Corrupted value for key=%s (%s); using default.", key, e)
            return default

    def _save_json(self, key: str, value: Any) -> None:
        self._write(key, json.dumps(value, ensure_ascii=False))

    # ---- theme / language ----

    def load_theme(self) -> ThemeId:
        raw = self._read(KEY_THEME)
        try:
            return ThemeId(raw) if raw else ThemeId.MIDNIGHT
        except ValueError:
            logger.warning("Unknown theme %r; using default.", raw)
            return ThemeId.MIDNIGHT

    def save_theme(self, theme: ThemeId) -> None:
        self._write(KEY_THEME, theme.value)

    def load_language(self) -> Language:
        raw = self._read(KEY_LANGUAGE)
        try:
            return Language(raw) if raw else Language.EN
        except ValueError:
            logger.warning("Unknown language %r; using default.", raw)
            return Language.EN

    def save_language(self, lang: Language) -> None:
        self._write(KEY_LANGUAGE, lang.value)

    # ---- tasks ----

    def load_tasks(self) -> list[Task]:
        def decode(data: Any) -> list[Task]:
            if not isinstance(data, list):
                raise TypeError("task collection must be a list")
            out: list[Task] = []
            for item in data:
                # Skip single malformed entries rather than dropping the whole list.
                try:
                    out.append(Task.from_json(item))
                except (ValueError, TypeError, KeyError, AttributeError):
                    logger.warning("Skipping malformed task entry: %r", item)
            return out

        return self._load_json(KEY_TASKS, decode, [])

    def save_tasks(self, tasks: list[Task]) -> None:
        self._save_json(KEY_TASKS, [t.to_json() for t in tasks])

    # ---- reminder settings ----

    def load_reminder_settings(self) -> ReminderSettings:
        def decode(data: Any) -> ReminderSettings:
            if not isinstance(data, dict):
                raise TypeError("reminder settings must be an object")
            return ReminderSettings.from_json(data)

        return self._load_json(KEY_REMINDERS, decode, ReminderSettings())

    def save_reminder_settings(self, settings: ReminderSettings) -> None:
        self._save_json(KEY_REMINDERS, settings.to_json())

    # ---- stats ----

    def load_stats(self) -> UserStats:
        def decode(data: Any) -> UserStats:
            if not isinstance(data, dict):
                raise TypeError("stats must be an object")
            return UserStats.from_json(data)

        return self._load_json(KEY_STATS, decode, UserStats())

    def save_stats(self, stats: UserStats) -> None:
        self._save_json(KEY_STATS, stats.to_json())

    # ---- reminder watermarks (epoch ms) ----

    def load_watermark(self, kind: ReminderKind) -> int:
        raw = self._read(_WATERMARK_KEYS[kind])
        if not raw:
            return 0
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning("Corrupted watermark for %s: %r; using 0.", kind.value, raw)
            return 0

    def save_watermark(self, kind: ReminderKind, now_ms: int) -> None:
        self._write(_WATERMARK_KEYS[kind], str(int(now_ms)))
