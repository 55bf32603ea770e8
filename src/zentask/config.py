# src/zentask/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time (the LLM key is only needed for /summary).
- Timer durations are fixed for the process lifetime.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

ENV_PREFIX = "ZEN"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    store_db_path: Path

    # ---- Focus timer (fixed per process) ----
    focus_seconds: int
    break_seconds: int
    tick_seconds: float

    # ---- Wellness reminders ----
    reminder_poll_seconds: float

    # ---- Notifications ----
    toast_seconds: float
    flash_seconds: float
    audio_enabled: bool
    os_notifications: bool

    # ---- LLM (daily summary) ----
    llm_api_key: Optional[str]
    llm_base_url: str
    llm_models: List[str]
    extra_headers: Dict[str, str]

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "ZenTask") or "ZenTask"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/zentask"))
        store_db_path = _env_path(_k("STORE_DB_PATH"), data_dir / "zentask.sqlite3")

        focus_seconds = max(1, _env_int(_k("FOCUS_SECONDS"), 25 * 60))
        break_seconds = max(1, _env_int(_k("BREAK_SECONDS"), 5 * 60))
        tick_seconds = max(0.05, _env_float(_k("TICK_SECONDS"), 1.0))

        reminder_poll_seconds = max(0.5, _env_float(_k("REMINDER_POLL_SECONDS"), 10.0))

        toast_seconds = max(0.1, _env_float(_k("TOAST_SECONDS"), 5.0))
        flash_seconds = max(0.05, _env_float(_k("FLASH_SECONDS"), 0.5))
        audio_enabled = _env_bool(_k("AUDIO_ENABLED"), True)
        os_notifications = _env_bool(_k("OS_NOTIFICATIONS"), True)

        api_key_raw = _env(_k("LLM_API_KEY"), "").strip()
        llm_api_key = api_key_raw or None
        llm_base_url = _env(_k("LLM_BASE_URL"), "https://openrouter.ai/api/v1")
        llm_models = _env_list(
            _k("LLM_MODELS"),
            [
                "qwen/qwen-2.5-72b-instruct:free",
                "deepseek/deepseek-chat-v3-0324:free",
            ],
        )
        extra_headers = {
            "HTTP-Referer": _env(_k("HTTP_REFERER"), "https://example.com"),
            "X-Title": app_name,
        }

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            store_db_path=store_db_path,
            focus_seconds=focus_seconds,
            break_seconds=break_seconds,
            tick_seconds=tick_seconds,
            reminder_poll_seconds=reminder_poll_seconds,
            toast_seconds=toast_seconds,
            flash_seconds=flash_seconds,
            audio_enabled=audio_enabled,
            os_notifications=os_notifications,
            llm_api_key=llm_api_key,
            llm_base_url=llm_base_url,
            llm_models=llm_models,
            extra_headers=extra_headers,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide Settings (built lazily on first use)."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
