# src/deadline_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class FilterMode(StrEnum):
    """Which slice of the task list the dashboard shows."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"
    OVERDUE = "overdue"

    @classmethod
    def parse(cls, raw: str | None) -> FilterMode:
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"unknown filter mode: {raw!r}") from None


@dataclass(slots=True, frozen=True)
class Task:
    id: int
    title: str
    deadline: str  # YYYY-MM-DD
    deadline_time: str  # HH:MM

    completed: bool = False
    completed_at: datetime | None = None

    grade: float | None = None
    notes: str | None = None

    @property
    def deadline_instant(self) -> datetime | None:
        """
        Deadline date and time combined into one naive local datetime.

        None when either part cannot be parsed; such a task is never overdue.
        """
        try:
            return datetime.fromisoformat(f"{self.deadline}T{self.deadline_time}")
        except (TypeError, ValueError):
            return None

    @property
    def deadline_date(self) -> date | None:
        try:
            return date.fromisoformat(self.deadline)
        except (TypeError, ValueError):
            return None

    def is_overdue(self, now: datetime) -> bool:
        if self.completed:
            return False
        instant = self.deadline_instant
        return instant is not None and instant < now

    def completion_day(self) -> date | None:
        """Day used to bucket a completed task in the weekly histogram."""
        if not self.completed:
            return None
        if self.completed_at is not None:
            return self.completed_at.date()
        return self.deadline_date


@dataclass(slots=True, frozen=True)
class Statistics:
    completed_tasks_percentage: int = 0
    average_grade: float = 0.0
    days_until_next_exam: int = 0  # exam dates are not tracked
    overdue_activities: int = 0


@dataclass(slots=True, frozen=True)
class ProgressPoint:
    name: str
    tarefas: int


@dataclass(slots=True, frozen=True)
class OverdueNotification:
    """What the overdue monitor asks the front-end to show."""

    task_id: int
    title: str
    severity: str = "warning"
