# src/deadline_tracker/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import OverdueNotification

logger = logging.getLogger(__name__)

OVERDUE_TITLE = "Prazo Ultrapassado"


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def overdue_message(notification: OverdueNotification) -> str:
    return f'A tarefa "{notification.title}" ultrapassou o prazo!'


class ConsoleNotifier:
    """Notifier that prints overdue warnings as console lines (the "toast")."""

    def notify(self, notification: OverdueNotification) -> None:
        _print_ts(f"[{notification.severity.upper()}] {OVERDUE_TITLE}: {overdue_message(notification)}")


async def run_console_loop(state: AppState) -> None:
    """
    REPL over the command registry.

    stdin is read in a worker thread; commands run on the event loop thread,
    so they never interleave with an overdue-monitor tick.
    """
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = (await asyncio.to_thread(input, ">>> ")).strip()
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

        try:
            response = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            response = "Commands start with '/'. Use /help to list available commands."
        _print_ts(response)

    logger.info("Console connector finished.")
