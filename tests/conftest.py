# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from zentask.cli.bootstrap import create_initial_state
from zentask.core.state import AppState
from zentask.storage.kv_store import KeyValueStore
from zentask.storage.prefs import Preferences

from .fakes import FakeLLMClient, RecordingHost


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and core modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="ZenTask",
        data_dir=tmp_path,
        store_db_path=tmp_path / "zentask.sqlite3",
        focus_seconds=1500,
        break_seconds=300,
        tick_seconds=0.01,
        reminder_poll_seconds=0.01,
        toast_seconds=5.0,
        flash_seconds=0.5,
        audio_enabled=False,
        os_notifications=False,
    )


@pytest.fixture()
def kv(settings: SimpleNamespace) -> KeyValueStore:
    return KeyValueStore(settings.store_db_path)


@pytest.fixture()
def prefs(kv: KeyValueStore) -> Preferences:
    return Preferences(kv)


@pytest.fixture()
def host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture()
def state(settings: SimpleNamespace, kv: KeyValueStore, host: RecordingHost) -> AppState:
    """
    AppState wired with deterministic fakes.

    NOTE: We keep the real SQLite KeyValueStore here because persistence
    round-trips are part of what we want to test.
    """
    return create_initial_state(settings=settings, kv=kv, host=host, llm=FakeLLMClient("Great day!"))
