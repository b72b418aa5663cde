# src/deadline_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the task store, metrics engine and overdue monitor together.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ..config import get_settings
from ..core.ports import Clock, DayNameFormatter, Notifier
from ..core.state import AppState
from ..metrics.day_names import BabelDayNameFormatter
from ..metrics.engine import MetricsEngine
from ..tasks.overdue_monitor import OverdueMonitor
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    clock: Clock = datetime.now,
    day_name: DayNameFormatter | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if day_name is None:
        day_name = BabelDayNameFormatter(getattr(settings, "locale", "pt_BR"))

    store = TaskStore(clock=clock)
    metrics = MetricsEngine(clock=clock, day_name=day_name)
    metrics.attach(store)

    logger.debug("AppState created (locale=%s)", getattr(settings, "locale", None))
    return AppState(settings=settings, task_store=store, metrics=metrics)


def create_overdue_monitor(
    state: AppState,
    notifier: Notifier,
    *,
    clock: Clock = datetime.now,
) -> OverdueMonitor:
    interval = float(getattr(state.settings, "overdue_check_interval_seconds", 60.0))
    return OverdueMonitor(state.task_store, notifier, interval_seconds=interval, clock=clock)
