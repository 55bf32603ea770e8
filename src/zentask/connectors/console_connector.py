# src/zentask/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..notify.toasts import Toast

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    try:
        if sys.stdout.isatty():
            sys.stdout.write("\033[1A\033[2K\r")
            sys.stdout.write(line + "\n")
            sys.stdout.flush()
        else:
            print(line)
    except Exception:
        print(line)


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def _show_toast(toast: Toast) -> None:
    # Called from the runtime thread for timer/reminder notifications.
    _print_ts(f"🔔 {toast.message}")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(state.settings, "app_name", "ZenTask"))
    _print_ts(f"[{app_name}] Type a command. Use /help for commands. Use /exit to quit.\n")

    state.dispatcher.toasts.subscribe(_show_toast)

    def emit(text: str) -> None:
        # Immediate user-visible feedback for long operations (e.g., /summary)
        _print_ts(text)

    while True:
        try:
            prompt = "(!) >>> " if state.dispatcher.flash.is_on() else ">>> "
            user_input = input(prompt).strip()
            _rewrite_prev_line(f"[{_ts_local()}] {prompt}{user_input}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            # Plain text is a shortcut for adding a task.
            user_input = f"/task add {user_input}"

        try:
            if user_input.lower().startswith("/summary"):
                # The LLM call may take seconds; it only reads tasks, so the timer keeps ticking.
                reply = command_registry.handle(state, user_input, emit=emit)
            else:
                with state.lock:
                    reply = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            _print_ts(reply)

    logger.info("Console connector finished.")
