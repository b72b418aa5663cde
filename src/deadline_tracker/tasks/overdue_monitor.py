# src/deadline_tracker/tasks/overdue_monitor.py

from __future__ import annotations

"""
Overdue monitor.

A small polling loop that, every interval:
- reads the current task list from the store (never a stale snapshot),
- emits one notification per incomplete task whose deadline has passed.

There is no deduplication: a task that stays overdue is reported again on
every tick until it is completed or removed.
"""

import asyncio
import contextlib
import logging
from datetime import datetime

from ..core.ports import Clock, Notifier, TaskRepo
from .task_models import OverdueNotification

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 60.0


def check_overdue(task_store: TaskRepo, notifier: Notifier, now: datetime) -> int:
    """
    One monitor tick. Returns the number of notifications emitted.

    Runs without awaiting, so no mutation can interleave with a tick.
    """
    emitted = 0
    for task in task_store.list_tasks():
        if task.completed:
            continue
        deadline = task.deadline_instant
        if deadline is None or deadline > now:
            continue

        notification = OverdueNotification(task_id=task.id, title=task.title)
        try:
            notifier.notify(notification)
        except Exception:
            logger.exception("notify failed task_id=%s", task.id)
            continue
        emitted += 1
        logger.info("Task %s is overdue (deadline %s)", task.id, deadline)
    return emitted


async def run_overdue_monitor(
        task_store: TaskRepo,
        notifier: Notifier,
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        clock: Clock = datetime.now,
) -> None:
    """
    Polling loop: wait one interval, then check, forever.

    To stop the monitor, cancel the coroutine/task.
    """
    sleep_s = max(0.01, float(interval_seconds))

    while True:
        await asyncio.sleep(sleep_s)
        try:
            check_overdue(task_store, notifier, clock())
        except Exception:
            logger.exception("overdue check failed")


class OverdueMonitor:
    """Owns the monitor's asyncio task: start() on activation, stop() on teardown."""

    def __init__(
        self,
        task_store: TaskRepo,
        notifier: Notifier,
        *,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        clock: Clock = datetime.now,
    ) -> None:
        self._store = task_store
        self._notifier = notifier
        self._interval = interval_seconds
        self._clock = clock
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the polling loop on the running event loop (no-op if already running)."""
        if self.running:
            return
        self._task = asyncio.create_task(
            run_overdue_monitor(
                self._store,
                self._notifier,
                interval_seconds=self._interval,
                clock=self._clock,
            ),
            name="overdue-monitor",
        )
        logger.info("Overdue monitor started (interval=%ss)", self._interval)

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Overdue monitor stopped")
