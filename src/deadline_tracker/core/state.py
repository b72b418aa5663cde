# src/deadline_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..metrics.engine import MetricsEngine
from ..tasks.task_models import FilterMode, ProgressPoint, Statistics, Task
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: Any

    task_store: TaskStore
    metrics: MetricsEngine

    filter_mode: FilterMode = field(default=FilterMode.ALL)


@dataclass(slots=True, frozen=True)
class DashboardView:
    """Read-only snapshot returned by every command."""

    statistics: Statistics
    progress: tuple[ProgressPoint, ...]
    tasks: tuple[Task, ...]
    filter_mode: FilterMode
    editing: Task | None = None
