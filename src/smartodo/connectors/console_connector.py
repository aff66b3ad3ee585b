# src/smartodo/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    One console line -> reply text (None for blank input).

    Plain text without a leading slash is treated as "/list <text>".
    """
    line = line.strip()
    if not line:
        return None

    if not line.startswith("/"):
        line = f"/list {line}"

    try:
        return command_registry.handle(state, line, emit=_print_ts)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."


def run_console_loop(state: AppState) -> None:
    logger.info("Console started (tasks=%d presets=%d).", len(state.tasks), len(state.presets))
    _print_ts("[CONSOLE] Type /help for commands, plain text to search. Use /exit to quit.\n")

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            _print_ts(reply)

    logger.info("Console finished.")
