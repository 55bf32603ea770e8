# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets. Use .env (local, gitignored).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "ZEN_APP_NAME": "App display name, also the OS notification title (default: ZenTask).",
    "ZEN_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths (gitignored)
    "ZEN_DATA_DIR": "Local data directory (default: .local/zentask).",
    "ZEN_STORE_DB_PATH": "Key-value SQLite path (default: <data_dir>/zentask.sqlite3).",
    # Focus timer
    "ZEN_FOCUS_SECONDS": "Focus session length in seconds (default: 1500).",
    "ZEN_BREAK_SECONDS": "Break length in seconds (default: 300).",
    "ZEN_TICK_SECONDS": "Timer tick period (default: 1.0).",
    # Wellness reminders
    "ZEN_REMINDER_POLL_SECONDS": "How often reminders are evaluated (default: 10.0).",
    # Notifications
    "ZEN_TOAST_SECONDS": "In-app toast lifetime (default: 5.0).",
    "ZEN_FLASH_SECONDS": "Flash indicator duration (default: 0.5).",
    "ZEN_AUDIO_ENABLED": "Play audio cues via sounddevice (true/false, default: true).",
    "ZEN_OS_NOTIFICATIONS": "Send OS notifications via plyer (true/false, default: true).",
    # LLM (daily summary)
    "ZEN_LLM_API_KEY": "OpenAI-compatible API key (required only for /summary).",
    "ZEN_LLM_BASE_URL": "API base URL (default: https://openrouter.ai/api/v1).",
    "ZEN_LLM_MODELS": "Comma/space separated list of models to try in order.",
    "ZEN_HTTP_REFERER": "Optional OpenRouter metadata header.",
    "ZEN_LLM_FIRST_TOKEN_TIMEOUT_SECONDS": "Give up on a model without a first token after N s (default: 20).",
    "ZEN_LLM_READ_TIMEOUT_SECONDS": "HTTP read timeout (default: 25).",
    "ZEN_LLM_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout (default: 5).",
}
