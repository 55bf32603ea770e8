# src/zentask/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..achievements.catalog import ACHIEVEMENTS
from ..core.i18n import t
from ..core.models import (
    Language,
    NotificationMode,
    Priority,
    SoundType,
    Task,
    ThemeId,
    TimerMode,
)
from ..core.state import AppState
from ..llm.summary import generate_daily_summary
from ..tasks.task_list import TaskFilter

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /task, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _short_id(task: Task) -> str:
    return task.id[:8]


def _format_task(task: Task) -> str:
    box = "[x]" if task.completed else "[ ]"
    tags = " " + " ".join(f"#{tag}" for tag in task.tags) if task.tags else ""
    return f"{box} {_short_id(task)} ({task.priority.value}) {task.text}{tags}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    rs = state.reminder_settings
    timer = state.timer
    return (
        "Status:\n"
        f"  Timer: {timer.mode.value} {timer.display()} ({'running' if timer.is_active else 'paused'})\n"
        f"  Tasks: {len(state.tasks.active())} active, {len(state.tasks.completed())} done\n"
        f"  Reminders: {'ON' if rs.enabled else 'OFF'} "
        f"(water {rs.water_interval_minutes}m, stretch {rs.stretch_interval_minutes}m, "
        f"{rs.notification_mode.value}/{rs.sound_type.value})\n"
        f"  Language: {state.language.value}  Theme: {state.theme.value}"
    )


def cmd_task(state: AppState, args: list[str]) -> str:
    """
    /task add [!high|!med|!low] <text #tags>
    /task done <id>      -> toggle completion
    /task rm <id>
    /task list [priority] [#tag]
    """
    usage = "Usage: /task add [!high|!med|!low] <text> | /task done <id> | /task rm <id> | /task list [priority] [#tag]"
    if not args:
        args = ["list"]

    sub, rest = args[0].lower(), args[1:]

    if sub == "add":
        priority = Priority.MEDIUM
        if rest and rest[0].startswith("!"):
            parsed = Priority.parse(rest[0])
            if parsed is None:
                return f"Unknown priority: {rest[0]}. Use !high, !med or !low."
            priority, rest = parsed, rest[1:]
        try:
            task = state.tasks.add(" ".join(rest), priority)
        except ValueError:
            return "Task text is empty."
        return f"Added: {_format_task(task)}"

    if sub in ("done", "toggle", "rm", "del", "delete"):
        if not rest:
            return usage
        task = state.tasks.resolve(rest[0])
        if task is None:
            return f"No task matches id {rest[0]!r}."
        if sub in ("done", "toggle"):
            updated = state.tasks.toggle(task.id)
            return f"Updated: {_format_task(updated)}" if updated else f"No task matches id {rest[0]!r}."
        state.tasks.delete(task.id)
        return f"Deleted: {task.text}"

    if sub == "list":
        prio_filter: Priority | None = None
        tag: str | None = None
        for token in rest:
            if token.startswith("#"):
                tag = token[1:]
            elif token.lower() != "all":
                prio_filter = Priority.parse(token)
                if prio_filter is None:
                    return f"Unknown priority filter: {token}."
        flt = TaskFilter(priority=prio_filter, tag=tag)
        active = state.tasks.active(flt)
        done = state.tasks.completed(flt)
        if not active and not done:
            return t(state.language, "no_tasks")
        lines = [_format_task(x) for x in active + done]
        tags = state.tasks.all_tags()
        if tags:
            lines.append("Tags: " + " ".join(f"#{x}" for x in tags))
        return "\n".join(lines)

    return usage


def cmd_timer(state: AppState, args: list[str]) -> str:
    """
    /timer                -> show
    /timer start|pause    -> run / stop the countdown
    /timer reset          -> full duration of the current mode
    /timer focus|break    -> switch mode (abandons progress)
    """
    timer = state.timer
    if args:
        sub = args[0].lower()
        if sub in ("start", "go"):
            timer.start()
        elif sub in ("pause", "stop"):
            timer.pause()
        elif sub == "toggle":
            timer.toggle()
        elif sub == "reset":
            timer.reset()
        elif sub in ("focus", "break"):
            timer.switch_mode(TimerMode(sub))
        else:
            return "Usage: /timer [start|pause|reset|focus|break]"

    label = t(state.language, timer.mode.value)
    pct = int(round(timer.progress * 100))
    run = "running" if timer.is_active else "paused"
    return f"{label}: {timer.display()} ({run}, {pct}%)"


def cmd_remind(state: AppState, args: list[str]) -> str:
    """
    /remind                -> show settings
    /remind on|off
    /remind water <min>    /remind stretch <min>   (minimum 15)
    /remind mode sound|visual|both
    /remind sound beep|chime|pulse
    """
    usage = "Usage: /remind [on|off|water N|stretch N|mode sound|visual|both|sound beep|chime|pulse]"
    if args:
        sub = args[0].lower()
        value = args[1].lower() if len(args) > 1 else ""
        try:
            if sub in ("on", "off"):
                state.update_reminder_settings(enabled=(sub == "on"))
            elif sub == "water" and value:
                state.update_reminder_settings(water_interval_minutes=int(value))
            elif sub == "stretch" and value:
                state.update_reminder_settings(stretch_interval_minutes=int(value))
            elif sub == "mode" and value:
                state.update_reminder_settings(notification_mode=NotificationMode(value))
            elif sub == "sound" and value:
                state.update_reminder_settings(sound_type=SoundType(value))
            else:
                return usage
        except ValueError:
            return usage

    rs = state.reminder_settings
    return (
        f"Reminders {'ON' if rs.enabled else 'OFF'}: water every {rs.water_interval_minutes}m, "
        f"stretch every {rs.stretch_interval_minutes}m, mode={rs.notification_mode.value}, "
        f"sound={rs.sound_type.value}"
    )


def cmd_stats(state: AppState, args: list[str]) -> str:
    lang = state.language
    stats = state.tracker.stats
    lines = [
        f"{t(lang, 'tasks_done')}: {stats.total_tasks_completed}",
        f"{t(lang, 'focus_mins')}: {stats.total_focus_minutes}",
        f"{t(lang, 'achievements')}:",
    ]
    for a in ACHIEVEMENTS:
        mark = "✔" if stats.is_unlocked(a.id) else "·"
        lines.append(f"  {mark} {a.icon} {a.title_for(lang)} - {a.description_for(lang)}")
    return "\n".join(lines)


def cmd_summary(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit:
        with contextlib.suppress(Exception):
            emit("[SUMMARY] Generating...")
    return generate_daily_summary(state.llm, state.tasks.completed_texts(), state.language)


def cmd_lang(state: AppState, args: list[str]) -> str:
    if args:
        try:
            lang = Language(args[0].lower())
        except ValueError:
            return "Usage: /lang [en|zh]"
    else:
        lang = state.language.toggled()
    state.set_language(lang)
    return f"Language: {lang.value}"


def cmd_theme(state: AppState, args: list[str]) -> str:
    options = ", ".join(x.value for x in ThemeId)
    if not args:
        return f"Theme: {state.theme.value} (available: {options})"
    try:
        theme = ThemeId(args[0].lower())
    except ValueError:
        return f"Unknown theme. Available: {options}"
    state.set_theme(theme)
    return f"Theme: {theme.value}"


def cmd_toasts(state: AppState, args: list[str]) -> str:
    toasts = state.dispatcher.toasts
    if args and args[0].lower() in ("dismiss", "clear", "x"):
        return "Dismissed." if toasts.dismiss() else "Nothing to dismiss."
    items = toasts.active()
    if not items:
        return "No notifications."
    return "\n".join(f"#{x.id} {x.message}" for x in items)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show timer, tasks and reminder status.")
registry.register(
    "task", cmd_task, help_text="Tasks: /task add|done|rm|list.", aliases=["t", "todo"]
)
registry.register("timer", cmd_timer, help_text="Focus timer: /timer start|pause|reset|focus|break.")
registry.register("remind", cmd_remind, help_text="Wellness reminders: /remind on|off|water N|stretch N|mode|sound.")
registry.register("stats", cmd_stats, help_text="Show statistics and achievements.")
registry.register("summary", cmd_summary, help_text="AI summary of today's completed tasks.")
registry.register("lang", cmd_lang, help_text="Switch language: /lang [en|zh].")
registry.register("theme", cmd_theme, help_text="Show or set the theme.")
registry.register("toasts", cmd_toasts, help_text="Show or dismiss in-app notifications.")
