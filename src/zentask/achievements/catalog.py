# src/zentask/achievements/catalog.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..core.models import Language, UserStats


@dataclass(slots=True, frozen=True)
class Achievement:
    id: str
    title: Mapping[Language, str]
    description: Mapping[Language, str]
    icon: str
    condition: Callable[[UserStats], bool]

    def title_for(self, lang: Language) -> str:
        return self.title.get(lang) or self.title[Language.EN]

    def description_for(self, lang: Language) -> str:
        return self.description.get(lang) or self.description[Language.EN]


def _text(en: str, zh: str) -> Mapping[Language, str]:
    return MappingProxyType({Language.EN: en, Language.ZH: zh})


# Evaluation and notification follow this order.
ACHIEVEMENTS: tuple[Achievement, ...] = (
    Achievement(
        id="first_step",
        title=_text("First Step", "第一步"),
        description=_text("Complete your first task.", "完成第一个任务。"),
        icon="🌱",
        condition=lambda s: s.total_tasks_completed >= 1,
    ),
    Achievement(
        id="task_master",
        title=_text("Task Master", "任务大师"),
        description=_text("Complete 10 tasks.", "完成 10 个任务。"),
        icon="🏆",
        condition=lambda s: s.total_tasks_completed >= 10,
    ),
    Achievement(
        id="unstoppable",
        title=_text("Unstoppable", "势不可挡"),
        description=_text("Complete 50 tasks.", "完成 50 个任务。"),
        icon="🚀",
        condition=lambda s: s.total_tasks_completed >= 50,
    ),
    Achievement(
        id="deep_focus",
        title=_text("Deep Focus", "深度专注"),
        description=_text("Finish your first focus session.", "完成第一次专注。"),
        icon="🧘",
        condition=lambda s: s.total_focus_minutes >= 25,
    ),
    Achievement(
        id="focus_marathon",
        title=_text("Focus Marathon", "专注马拉松"),
        description=_text("Accumulate 100 focus minutes.", "累计专注 100 分钟。"),
        icon="⏳",
        condition=lambda s: s.total_focus_minutes >= 100,
    ),
    Achievement(
        id="zen_master",
        title=_text("Zen Master", "禅定大师"),
        description=_text("Accumulate 500 focus minutes.", "累计专注 500 分钟。"),
        icon="☯️",
        condition=lambda s: s.total_focus_minutes >= 500,
    ),
    Achievement(
        id="balanced",
        title=_text("Balanced Day", "平衡之道"),
        description=_text(
            "Complete 5 tasks and 50 focus minutes.", "完成 5 个任务并专注 50 分钟。"
        ),
        icon="⚖️",
        condition=lambda s: s.total_tasks_completed >= 5 and s.total_focus_minutes >= 50,
    ),
)

ACHIEVEMENTS_BY_ID: Mapping[str, Achievement] = MappingProxyType({a.id: a for a in ACHIEVEMENTS})
