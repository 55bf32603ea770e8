# src/zentask/core/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def score(self) -> int:
        return _PRIORITY_SCORE[self]

    @classmethod
    def parse(cls, raw: str | None, default: Priority | None = None) -> Priority | None:
        """Accept stored values ("High") and short console forms ("high", "med", "!low")."""
        if not raw:
            return default
        key = raw.strip().lstrip("!").lower()
        for p in cls:
            if key == p.value.lower() or (key and p.value.lower().startswith(key)):
                return p
        return default


_PRIORITY_SCORE = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}


class NotificationMode(StrEnum):
    SOUND = "sound"
    VISUAL = "visual"
    BOTH = "both"


class SoundType(StrEnum):
    BEEP = "beep"
    CHIME = "chime"
    PULSE = "pulse"


class TimerMode(StrEnum):
    FOCUS = "focus"
    BREAK = "break"


class ThemeId(StrEnum):
    MIDNIGHT = "midnight"
    SUNRISE = "sunrise"
    FOREST = "forest"
    OCEAN = "ocean"
    BERRY = "berry"


class Language(StrEnum):
    EN = "en"
    ZH = "zh"

    def toggled(self) -> Language:
        return Language.ZH if self is Language.EN else Language.EN


class ReminderKind(StrEnum):
    WATER = "water"
    STRETCH = "stretch"


MIN_REMINDER_INTERVAL_MINUTES = 15


def _json_bool(raw: dict[str, Any], key: str, default: bool = False) -> bool:
    """Read a JSON boolean; strings like "false" are rejected rather than coerced."""
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a boolean, got {type(value).__name__}")
    return value


@dataclass(slots=True, frozen=True)
class Task:
    """
    A single to-do item.

    Tasks are immutable values: toggling produces a new Task via with_completed().
    created_at is epoch milliseconds.
    """

    id: str
    text: str
    completed: bool
    created_at: int
    priority: Priority
    tags: tuple[str, ...] = ()

    def with_completed(self, completed: bool) -> Task:
        return Task(
            id=self.id,
            text=self.text,
            completed=completed,
            created_at=self.created_at,
            priority=self.priority,
            tags=self.tags,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
            "priority": self.priority.value,
            "tags": list(self.tags),
        }

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> Task:
        """Raise ValueError/TypeError/KeyError on malformed input; callers decide recovery."""
        task_id = str(raw["id"])
        text = str(raw["text"])
        if not task_id:
            raise ValueError("task id is empty")
        priority = Priority.parse(str(raw.get("priority") or ""), Priority.MEDIUM)
        tags_raw = raw.get("tags") or []
        if not isinstance(tags_raw, list):
            raise TypeError("tags must be a list")
        return cls(
            id=task_id,
            text=text,
            completed=_json_bool(raw, "completed"),
            created_at=int(raw.get("createdAt", 0)),
            priority=priority or Priority.MEDIUM,
            tags=tuple(str(t) for t in tags_raw),
        )


@dataclass(slots=True, frozen=True)
class ReminderSettings:
    water_interval_minutes: int = 60
    stretch_interval_minutes: int = 60
    enabled: bool = False
    notification_mode: NotificationMode = NotificationMode.BOTH
    sound_type: SoundType = SoundType.CHIME

    def __post_init__(self) -> None:
        # Intervals below the floor are clamped, matching the settings slider.
        object.__setattr__(
            self, "water_interval_minutes", max(MIN_REMINDER_INTERVAL_MINUTES, int(self.water_interval_minutes))
        )
        object.__setattr__(
            self, "stretch_interval_minutes", max(MIN_REMINDER_INTERVAL_MINUTES, int(self.stretch_interval_minutes))
        )

    def interval_minutes(self, kind: ReminderKind) -> int:
        if kind is ReminderKind.WATER:
            return self.water_interval_minutes
        return self.stretch_interval_minutes

    def to_json(self) -> dict[str, Any]:
        return {
            "waterIntervalMinutes": self.water_interval_minutes,
            "stretchIntervalMinutes": self.stretch_interval_minutes,
            "enabled": self.enabled,
            "notificationMode": self.notification_mode.value,
            "soundType": self.sound_type.value,
        }

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> ReminderSettings:
        return cls(
            water_interval_minutes=int(raw.get("waterIntervalMinutes", 60)),
            stretch_interval_minutes=int(raw.get("stretchIntervalMinutes", 60)),
            enabled=_json_bool(raw, "enabled"),
            notification_mode=NotificationMode(raw.get("notificationMode", NotificationMode.BOTH.value)),
            sound_type=SoundType(raw.get("soundType", SoundType.CHIME.value)),
        )


@dataclass(slots=True, frozen=True)
class UserStats:
    """
    Aggregate statistics.

    Counters only grow; unlocked_achievements is append-only and keeps unlock order.
    """

    total_tasks_completed: int = 0
    total_focus_minutes: int = 0
    unlocked_achievements: tuple[str, ...] = field(default_factory=tuple)

    def is_unlocked(self, achievement_id: str) -> bool:
        return achievement_id in self.unlocked_achievements

    def to_json(self) -> dict[str, Any]:
        return {
            "totalTasksCompleted": self.total_tasks_completed,
            "totalFocusMinutes": self.total_focus_minutes,
            "unlockedAchievements": list(self.unlocked_achievements),
        }

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> UserStats:
        unlocked = raw.get("unlockedAchievements") or []
        if not isinstance(unlocked, list):
            raise TypeError("unlockedAchievements must be a list")
        seen: list[str] = []
        for item in unlocked:
            s = str(item)
            if s not in seen:
                seen.append(s)
        return cls(
            total_tasks_completed=max(0, int(raw.get("totalTasksCompleted", 0))),
            total_focus_minutes=max(0, int(raw.get("totalFocusMinutes", 0))),
            unlocked_achievements=tuple(seen),
        )
