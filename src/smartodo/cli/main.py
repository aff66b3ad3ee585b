# src/smartodo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs the console, saves presets.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, save_presets
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled (SMARTODO_CONSOLE_ENABLED=false); nothing to do.")
    finally:
        save_presets(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
