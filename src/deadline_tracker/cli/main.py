# src/deadline_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs on one asyncio event loop:
- the overdue monitor (optional, every N seconds),
- the console REPL until /exit or EOF.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state, create_overdue_monitor
from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _run(settings) -> None:
    state = create_initial_state(settings=settings)

    monitor = None
    if settings.monitor_enabled:
        monitor = create_overdue_monitor(state, ConsoleNotifier())
        monitor.start()

    try:
        await run_console_loop(state)
    finally:
        if monitor is not None:
            await monitor.stop()


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/tracker")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "deadline-tracker"))

    try:
        asyncio.run(_run(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    logger.info("Bye.")


if __name__ == "__main__":
    main()
