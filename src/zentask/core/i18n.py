# src/zentask/core/i18n.py

"""Per-language text tables. Read-only lookups keyed by Language."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import Language

_EN = {
    "app_title": "ZenTask",
    "session_finished": "Session finished! Time for a change of pace.",
    "water_reminder": "Time to drink some water!",
    "stretch_reminder": "Stand up and stretch!",
    "achievement_unlocked": "Achievement Unlocked: {title}!",
    "focus": "Focus",
    "break": "Break",
    "tasks_done": "Tasks done",
    "focus_mins": "Focus minutes",
    "achievements": "Achievements",
    "no_tasks": "No tasks yet. Add one with /task add <text>.",
    "summary_empty": (
        "It looks like you haven't completed any tasks yet. "
        "Get started to see your summary here!"
    ),
    "summary_failed": (
        "Sorry, I couldn't connect to the AI service at the moment. Please try again later."
    ),
    "summary_not_configured": "API Key not found. Please check your environment configuration.",
    "summary_no_content": "Could not generate summary.",
}

_ZH = {
    "app_title": "禅意任务",
    "session_finished": "本轮结束！换个节奏吧。",
    "water_reminder": "该喝水啦！",
    "stretch_reminder": "起来伸展一下吧！",
    "achievement_unlocked": "解锁成就：{title}！",
    "focus": "专注",
    "break": "休息",
    "tasks_done": "已完成任务",
    "focus_mins": "专注分钟",
    "achievements": "成就",
    "no_tasks": "还没有任务。使用 /task add <内容> 添加。",
    "summary_empty": "看来你今天还没完成任何任务。开始行动吧，总结会在这里显示！",
    "summary_failed": "抱歉，暂时无法连接到AI服务，请稍后再试。",
    "summary_not_configured": "未找到 API 密钥，请检查环境配置。",
    "summary_no_content": "无法生成总结。",
}

TRANSLATIONS: Mapping[Language, Mapping[str, str]] = MappingProxyType(
    {
        Language.EN: MappingProxyType(_EN),
        Language.ZH: MappingProxyType(_ZH),
    }
)


def t(lang: Language, key: str, **kwargs: object) -> str:
    """Look up `key` for `lang`, falling back to English, then to the key itself."""
    table = TRANSLATIONS.get(lang, TRANSLATIONS[Language.EN])
    text = table.get(key) or TRANSLATIONS[Language.EN].get(key) or key
    return text.format(**kwargs) if kwargs else text
