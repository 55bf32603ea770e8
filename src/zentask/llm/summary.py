# src/zentask/llm/summary.py

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.i18n import t
from ..core.models import Language
from ..core.ports import LLMClient

logger = logging.getLogger(__name__)

SUMMARY_SYSTEM_PROMPT = """
You are a friendly productivity coach inside a small to-do widget.

Task:
- Given the tasks the user completed today, write a brief, encouraging
  daily summary (under 80 words).
- Highlight the productivity and suggest a mood for the evening.

Rules:
- Talk to the user directly as "you".
- Use emojis sparingly but effectively.
""".strip()

_ZH_SUFFIX = "\nIMPORTANT: Please reply strictly in CHINESE (Simplified)."

MAX_SUMMARY_CHARS = 1200


def build_summary_prompt(completed_tasks: Sequence[str], lang: Language) -> str:
    lines = "\n".join(f"- {task}" for task in completed_tasks)
    prompt = f"I have completed the following tasks today:\n{lines}"
    if lang == Language.ZH:
        prompt += _ZH_SUFFIX
    return prompt


def generate_daily_summary(
    llm: LLMClient | None,
    completed_tasks: Sequence[str],
    lang: Language,
) -> str:
    """
    Produce a short summary of today's completed tasks in `lang`.

    Never raises:
    - no completed tasks -> canned empty-state text
    - no configured client -> canned "not configured" text
    - any client failure -> canned apology text
    """
    tasks = [s.strip() for s in completed_tasks if s and s.strip()]
    if not tasks:
        return t(lang, "summary_empty")

    if llm is None or getattr(llm, "configured", True) is False:
        return t(lang, "summary_not_configured")

    raw = ""
    try:
        for piece in llm.stream_chat(
            [{"role": "user", "content": build_summary_prompt(tasks, lang)}],
            SUMMARY_SYSTEM_PROMPT,
        ):
            raw += piece
    except Exception:
        logger.exception("Daily summary generation failed.")
        return t(lang, "summary_failed")

    summary = raw.strip()
    if not summary:
        return t(lang, "summary_no_content")

    if len(summary) > MAX_SUMMARY_CHARS:
        summary = summary[:MAX_SUMMARY_CHARS] + "…"

    logger.debug("Daily summary produced len=%d tasks=%d", len(summary), len(tasks))
    return summary
