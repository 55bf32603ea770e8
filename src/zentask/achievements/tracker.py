# src/zentask/achievements/tracker.py

"""
Statistics + achievement unlocking.

Flow for every statistics mutation:
  bump counter -> evaluate(stats) -> merge newly unlocked ids -> persist
  -> one notification per new achievement, in catalog order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace

from ..core.models import Language, UserStats
from ..core.ports import Notifier
from ..storage.prefs import Preferences
from .catalog import ACHIEVEMENTS, Achievement

logger = logging.getLogger(__name__)


def evaluate(stats: UserStats, catalog: Sequence[Achievement] = ACHIEVEMENTS) -> list[str]:
    """
    Return ids of achievements whose condition holds but which are not yet unlocked.

    Pure: no mutation, no I/O. Result follows catalog order.
    """
    return [
        a.id
        for a in catalog
        if not stats.is_unlocked(a.id) and a.condition(stats)
    ]


def merge_unlocked(stats: UserStats, new_ids: Sequence[str]) -> UserStats:
    if not new_ids:
        return stats
    merged = list(stats.unlocked_achievements)
    for aid in new_ids:
        if aid not in merged:
            merged.append(aid)
    return replace(stats, unlocked_achievements=tuple(merged))


class StatsTracker:
    def __init__(
        self,
        prefs: Preferences,
        notifier: Notifier | None = None,
        *,
        language: Callable[[], Language] = lambda: Language.EN,
        unlocked_message: Callable[[Achievement, Language], str] | None = None,
        catalog: Sequence[Achievement] = ACHIEVEMENTS,
    ) -> None:
        self._prefs = prefs
        self._notifier = notifier
        self._language = language
        self._unlocked_message = unlocked_message or (
            lambda a, lang: f"Achievement Unlocked: {a.title_for(lang)}!"
        )
        self._catalog = tuple(catalog)
        self._by_id = {a.id: a for a in self._catalog}
        self.stats: UserStats = prefs.load_stats()

    def record_task_completed(self, count: int = 1) -> list[str]:
        if count <= 0:
            return []
        return self._apply(
            replace(self.stats, total_tasks_completed=self.stats.total_tasks_completed + int(count))
        )

    def record_focus_minutes(self, minutes: int) -> list[str]:
        if minutes <= 0:
            return []
        return self._apply(
            replace(self.stats, total_focus_minutes=self.stats.total_focus_minutes + int(minutes))
        )

    def check_achievements(self) -> list[str]:
        """Re-evaluate without changing counters; persists only if something unlocked."""
        new_ids = evaluate(self.stats, self._catalog)
        if not new_ids:
            return []
        self._commit(merge_unlocked(self.stats, new_ids), new_ids)
        return new_ids

    def _apply(self, next_stats: UserStats) -> list[str]:
        new_ids = evaluate(next_stats, self._catalog)
        self._commit(merge_unlocked(next_stats, new_ids), new_ids)
        return new_ids

    def _commit(self, stats: UserStats, new_ids: Sequence[str]) -> None:
        self.stats = stats
        self._prefs.save_stats(stats)

        if new_ids:
            logger.info("Achievements unlocked: %s", ", ".join(new_ids))
        if not new_ids or self._notifier is None:
            return

        lang = self._language()
        for aid in new_ids:
            self._notifier.notify(self._unlocked_message(self._by_id[aid], lang))
