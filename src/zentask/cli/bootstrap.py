# src/zentask/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations (SQLite store, desktop host, LLM client)
  into the core components and AppState.
"""

from __future__ import annotations

import logging

from ..achievements.tracker import StatsTracker
from ..config import get_settings
from ..core.i18n import t
from ..core.models import ReminderKind
from ..core.ports import HostCapabilities, KeyValueRepo, LLMClient
from ..core.state import AppState
from ..focus.timer import FocusTimer
from ..llm.client import OpenAICompatibleClient
from ..llm.offline import OfflineLLMClient
from ..notify.dispatcher import NotificationDispatcher
from ..notify.host import DesktopHost
from ..notify.toasts import FlashIndicator, ToastQueue
from ..storage.kv_store import KeyValueStore
from ..storage.prefs import Preferences
from ..tasks.task_list import TaskList
from ..wellness.reminders import ReminderScheduler

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_db_path.parent.mkdir(parents=True, exist_ok=True)


def _build_llm(settings) -> LLMClient:
    try:
        return OpenAICompatibleClient(settings)
    except Exception as e:
        # /summary falls back to its "not configured" text.
        logger.info("LLM client not configured (%s); daily summary runs offline.", e)
        return OfflineLLMClient()


def create_initial_state(
    *,
    settings=None,
    kv: KeyValueRepo | None = None,
    host: HostCapabilities | None = None,
    llm: LLMClient | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Every collaborator is injectable so tests can swap in fakes
    (in-memory store, recording host, fake LLM).
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = KeyValueStore(settings.store_db_path)
    if host is None:
        host = DesktopHost(
            app_name=settings.app_name,
            audio_enabled=settings.audio_enabled,
            os_notifications=settings.os_notifications,
        )
    if llm is None:
        llm = _build_llm(settings)

    prefs = Preferences(kv)

    # Closures below read `state` lazily, so language/settings changes apply immediately.
    state: AppState

    dispatcher = NotificationDispatcher(
        host,
        settings_provider=lambda: state.reminder_settings,
        toasts=ToastQueue(settings.toast_seconds),
        flash=FlashIndicator(settings.flash_seconds),
        title=settings.app_name,
    )
    tracker = StatsTracker(
        prefs,
        dispatcher,
        language=lambda: state.language,
        unlocked_message=lambda a, lang: t(lang, "achievement_unlocked", title=a.title_for(lang)),
    )
    tasks = TaskList(prefs, on_completed=lambda _task: tracker.record_task_completed())
    timer = FocusTimer(
        focus_seconds=settings.focus_seconds,
        break_seconds=settings.break_seconds,
        notifier=dispatcher,
        on_focus_minutes=tracker.record_focus_minutes,
        completion_message=lambda: t(state.language, "session_finished"),
    )
    reminders = ReminderScheduler(
        prefs,
        dispatcher,
        settings_provider=lambda: state.reminder_settings,
        message_for=lambda kind: t(
            state.language, "water_reminder" if kind is ReminderKind.WATER else "stretch_reminder"
        ),
    )

    state = AppState(
        settings=settings,
        prefs=prefs,
        dispatcher=dispatcher,
        tracker=tracker,
        tasks=tasks,
        timer=timer,
        reminders=reminders,
        llm=llm,
        language=prefs.load_language(),
        theme=prefs.load_theme(),
        reminder_settings=prefs.load_reminder_settings(),
    )
    # Counters loaded from storage may already satisfy locked achievements.
    tracker.check_achievements()

    logger.info(
        "State ready: tasks=%d reminders=%s lang=%s theme=%s",
        len(tasks),
        "on" if state.reminder_settings.enabled else "off",
        state.language.value,
        state.theme.value,
    )
    return state
