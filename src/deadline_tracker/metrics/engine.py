# src/deadline_tracker/metrics/engine.py

from __future__ import annotations

"""
Derived dashboard metrics.

Two pure functions do the work:
- compute_statistics: completion rate, average grade, overdue count
- compute_progress: completed-per-day histogram over the trailing 7 days

MetricsEngine only wires them to the store: it subscribes as a listener and
keeps the latest results. Same tasks + same instant => same output.
"""

import logging
import math
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from ..core.ports import Clock, DayNameFormatter, TaskRepo
from ..tasks.task_models import ProgressPoint, Statistics, Task
from .day_names import BabelDayNameFormatter

logger = logging.getLogger(__name__)

WINDOW_DAYS = 7


def _round_half_up(value: float, places: int = 0) -> float:
    # Decimal(str(...)) so 2.675 rounds like it reads, not like its binary form.
    # inf/nan (huge grades overflowing the sum) pass through unrounded.
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def compute_statistics(tasks: Iterable[Task], now: datetime) -> Statistics:
    tasks = list(tasks)
    completed = [t for t in tasks if t.completed]
    total = len(tasks)

    percentage = int(_round_half_up(len(completed) / total * 100)) if total > 0 else 0
    overdue = sum(1 for t in tasks if t.is_overdue(now))

    if completed:
        grades_sum = sum((t.grade or 0) for t in completed)
        average = _round_half_up(grades_sum / len(completed), 2)
    else:
        average = 0.0

    return Statistics(
        completed_tasks_percentage=percentage,
        average_grade=average,
        days_until_next_exam=0,
        overdue_activities=overdue,
    )


def week_window(today: date) -> list[date]:
    """Seven consecutive days ending today, oldest first."""
    start = today - timedelta(days=WINDOW_DAYS - 1)
    return [start + timedelta(days=i) for i in range(WINDOW_DAYS)]


def compute_progress(
    tasks: Iterable[Task],
    today: date,
    day_name: DayNameFormatter,
) -> list[ProgressPoint]:
    per_day: dict[date, int] = {}
    for t in tasks:
        day = t.completion_day()
        if day is not None:
            per_day[day] = per_day.get(day, 0) + 1

    return [ProgressPoint(name=day_name(d), tarefas=per_day.get(d, 0)) for d in week_window(today)]


class MetricsEngine:
    """
    Recomputes Statistics and the weekly histogram on every store change.

    Register with attach(store); the store then calls recompute(tasks)
    synchronously after each mutation.
    """

    def __init__(
        self,
        *,
        clock: Clock = datetime.now,
        day_name: DayNameFormatter | None = None,
    ) -> None:
        self._clock = clock
        self._day_name: DayNameFormatter = day_name or BabelDayNameFormatter()
        self.statistics = Statistics()
        self.progress: tuple[ProgressPoint, ...] = ()
        self.recompute_count = 0

    def attach(self, store: TaskRepo) -> None:
        store.subscribe(self.recompute)
        self.recompute(store.list_tasks())

    def recompute(self, tasks: list[Task]) -> None:
        now = self._clock()
        self.statistics = compute_statistics(tasks, now)
        self.progress = tuple(compute_progress(tasks, now.date(), self._day_name))
        self.recompute_count += 1
        logger.debug(
            "Metrics recomputed tasks=%d completed=%s%% overdue=%d",
            len(tasks),
            self.statistics.completed_tasks_percentage,
            self.statistics.overdue_activities,
        )
