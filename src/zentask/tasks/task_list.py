# src/zentask/tasks/task_list.py

from __future__ import annotations

import logging
import re
import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass

from ..core.models import Priority, Task
from ..storage.prefs import Preferences

logger = logging.getLogger(__name__)

# A tag together with the whitespace in front of it.
TAG_REGEX = re.compile(r"\s*#(\w+)")


def _now_ms() -> int:
    return int(time.time() * 1000)


def extract_tags(raw: str) -> tuple[str, list[str]]:
    """
    Split user input into display text and tags.

    "Buy milk #grocery #home" -> ("Buy milk", ["grocery", "home"])
    "#onlytag"                -> ("#onlytag", ["onlytag"])   (original text is kept)
    """
    tags: list[str] = []

    def _collect(m: re.Match[str]) -> str:
        tag = m.group(1)
        if tag not in tags:
            tags.append(tag)
        return ""

    clean = TAG_REGEX.sub(_collect, raw).strip()
    return (clean or raw.strip()), tags


@dataclass(slots=True, frozen=True)
class TaskFilter:
    priority: Priority | None = None  # None means "All"
    tag: str | None = None

    def matches(self, task: Task) -> bool:
        if self.priority is not None and task.priority != self.priority:
            return False
        if self.tag and self.tag not in task.tags:
            return False
        return True


class TaskList:
    """
    In-memory ordered task collection (newest first), persisted on every mutation.

    Completing a task (active -> completed) reports to `on_completed`; the reverse
    toggle does not, so statistics never go down.
    """

    def __init__(
        self,
        prefs: Preferences,
        *,
        on_completed: Callable[[Task], None] | None = None,
        clock_ms: Callable[[], int] = _now_ms,
    ) -> None:
        self._prefs = prefs
        self._on_completed = on_completed
        self._clock_ms = clock_ms
        self._tasks: list[Task] = prefs.load_tasks()
        logger.info("TaskList loaded total=%d", len(self._tasks))

    def _persist(self) -> None:
        self._prefs.save_tasks(self._tasks)

    # ---- queries ----

    @property
    def tasks(self) -> list[Task]:
        """All tasks in insertion order (newest first)."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def resolve(self, id_or_prefix: str) -> Task | None:
        """Exact id match, else a unique id prefix; None if missing or ambiguous."""
        key = (id_or_prefix or "").strip()
        if not key:
            return None
        exact = self.get(key)
        if exact is not None:
            return exact
        hits = [t for t in self._tasks if t.id.startswith(key)]
        return hits[0] if len(hits) == 1 else None

    def active(self, flt: TaskFilter | None = None) -> list[Task]:
        """Active tasks: priority descending, then newest first."""
        flt = flt or TaskFilter()
        items = [t for t in self._tasks if not t.completed and flt.matches(t)]
        items.sort(key=lambda t: (-t.priority.score, -t.created_at))
        return items

    def completed(self, flt: TaskFilter | None = None) -> list[Task]:
        """Completed tasks: newest first."""
        flt = flt or TaskFilter()
        items = [t for t in self._tasks if t.completed and flt.matches(t)]
        items.sort(key=lambda t: -t.created_at)
        return items

    def all_tags(self) -> list[str]:
        seen: list[str] = []
        for t in self._tasks:
            for tag in t.tags:
                if tag not in seen:
                    seen.append(tag)
        return seen

    def completed_texts(self) -> list[str]:
        return [t.text for t in self._tasks if t.completed]

    # ---- mutations ----

    def add(self, raw_text: str, priority: Priority = Priority.MEDIUM) -> Task:
        if not raw_text or not raw_text.strip():
            raise ValueError("task text is required")

        text, tags = extract_tags(raw_text)
        task = Task(
            id=str(uuid.uuid4()),
            text=text,
            completed=False,
            created_at=self._clock_ms(),
            priority=priority,
            tags=tuple(tags),
        )
        self._tasks.insert(0, task)
        self._persist()
        logger.debug("Task added id=%s priority=%s tags=%s", task.id, priority.value, tags)
        return task

    def toggle(self, task_id: str) -> Task | None:
        for i, t in enumerate(self._tasks):
            if t.id != task_id:
                continue
            updated = t.with_completed(not t.completed)
            self._tasks[i] = updated
            self._persist()
            logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
            if updated.completed and self._on_completed is not None:
                self._on_completed(updated)
            return updated
        return None

    def delete(self, task_id: str) -> bool:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        if len(self._tasks) == before:
            return False
        self._persist()
        logger.debug("Task deleted id=%s", task_id)
        return True
