# src/deadline_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the front-end, the locale formatter and the clock swappable and
makes testing easier.
"""

from collections.abc import Callable
from datetime import date, datetime
from typing import Any, Protocol

Clock = Callable[[], datetime]
# Returns the current naive local instant (datetime.now by default).

TaskListener = Callable[[list[Any]], None]
# Called with the full task list after every store mutation.


class Notifier(Protocol):
    """
    Front-end port: how the overdue monitor raises a notification.

    The core decides *when* to notify; the connector decides how it looks
    (toast, console line, chat message, ...).
    """

    def notify(self, notification: Any) -> None: ...


class DayNameFormatter(Protocol):
    """Locale-aware abbreviated weekday name for a calendar day."""

    def __call__(self, day: date) -> str: ...


class TaskRepo(Protocol):
    # Read API used by the metrics engine and the overdue monitor
    def list_tasks(self) -> list[Any]: ...
    def get(self, task_id: int) -> Any | None: ...

    # Mutations (each one fires the registered listeners)
    def add(
            self,
            title: str,
            deadline: str,
            deadline_time: str,
            grade: float | None = None,
            notes: str | None = None,
    ) -> Any | None: ...
    def remove(self, task_id: int) -> None: ...
    def toggle_complete(self, task_id: int) -> None: ...
    def update(self, task: Any) -> None: ...

    def subscribe(self, listener: TaskListener) -> None: ...
