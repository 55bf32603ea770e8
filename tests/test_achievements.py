# tests/test_achievements.py

from __future__ import annotations

from zentask.achievements.catalog import ACHIEVEMENTS, ACHIEVEMENTS_BY_ID
from zentask.achievements.tracker import StatsTracker, evaluate, merge_unlocked
from zentask.core.models import Language, UserStats
from zentask.storage.prefs import Preferences

from .fakes import RecordingNotifier


def test_catalog_ids_are_unique() -> None:
    assert len(ACHIEVEMENTS_BY_ID) == len(ACHIEVEMENTS)


def test_evaluate_is_pure_and_follows_catalog_order() -> None:
    stats = UserStats(total_tasks_completed=10, total_focus_minutes=100)
    first = evaluate(stats)
    assert first == evaluate(stats)
    assert first == ["first_step", "task_master", "deep_focus", "focus_marathon", "balanced"]
    assert stats.unlocked_achievements == ()


def test_evaluate_skips_already_unlocked() -> None:
    stats = merge_unlocked(UserStats(total_tasks_completed=1), ["first_step"])
    assert evaluate(stats) == []
    assert merge_unlocked(stats, ["first_step"]) == stats


def test_tracker_notifies_once_per_unlock(prefs: Preferences) -> None:
    notifier = RecordingNotifier()
    tracker = StatsTracker(prefs, notifier)

    assert tracker.record_task_completed() == ["first_step"]
    assert tracker.record_task_completed() == []
    assert notifier.messages == ["Achievement Unlocked: First Step!"]
    assert tracker.stats.total_tasks_completed == 2


def test_tracker_unlocks_several_at_once_in_order(prefs: Preferences) -> None:
    notifier = RecordingNotifier()
    tracker = StatsTracker(
        prefs,
        notifier,
        language=lambda: Language.ZH,
        unlocked_message=lambda a, lang: a.title_for(lang),
    )

    tracker.record_task_completed(5)
    notifier.messages.clear()
    assert tracker.record_focus_minutes(50) == ["deep_focus", "balanced"]
    assert notifier.messages == ["深度专注", "平衡之道"]


def test_tracker_persists_and_reloads(prefs: Preferences) -> None:
    tracker = StatsTracker(prefs, RecordingNotifier())
    tracker.record_focus_minutes(25)
    tracker.record_focus_minutes(0)
    tracker.record_task_completed(-1)

    reloaded = StatsTracker(prefs).stats
    assert reloaded == UserStats(total_tasks_completed=0, total_focus_minutes=25, unlocked_achievements=("deep_focus",))


def test_check_achievements_unlocks_from_loaded_counters(prefs: Preferences) -> None:
    prefs.save_stats(UserStats(total_tasks_completed=12))
    notifier = RecordingNotifier()
    tracker = StatsTracker(prefs, notifier)

    assert tracker.check_achievements() == ["first_step", "task_master"]
    assert tracker.check_achievements() == []
    assert len(notifier.messages) == 2
    assert prefs.load_stats().unlocked_achievements == ("first_step", "task_master")
