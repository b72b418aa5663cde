# src/deadline_tracker/tasks/task_api.py

from __future__ import annotations

"""
Command surface consumed by front-ends.

Every command mutates (or reads) AppState and returns a fresh DashboardView,
so callers detect rejected input by comparing views, never by catching errors.
"""

import logging
from dataclasses import replace

from ..core.state import AppState, DashboardView
from .task_models import FilterMode, Task

logger = logging.getLogger(__name__)


def current_view(state: AppState) -> DashboardView:
    store = state.task_store
    return DashboardView(
        statistics=state.metrics.statistics,
        progress=state.metrics.progress,
        tasks=tuple(store.filter(state.filter_mode)),
        filter_mode=state.filter_mode,
        editing=store.editing,
    )


def add_task(
    state: AppState,
    *,
    title: str,
    deadline: str,
    deadline_time: str,
    grade: float | None = None,
    notes: str | None = None,
) -> DashboardView:
    task = state.task_store.add(title, deadline, deadline_time, grade=grade, notes=notes)
    if task is None:
        logger.debug("add_task rejected: title/deadline/time required")
    return current_view(state)


def remove_task(state: AppState, task_id: int) -> DashboardView:
    state.task_store.remove(task_id)
    return current_view(state)


def toggle_task(state: AppState, task_id: int) -> DashboardView:
    state.task_store.toggle_complete(task_id)
    return current_view(state)


def update_task(state: AppState, task: Task) -> DashboardView:
    state.task_store.update(task)
    return current_view(state)


def set_filter_mode(state: AppState, mode: FilterMode | str) -> DashboardView:
    """Raises ValueError for an unknown mode (parsing boundary)."""
    state.filter_mode = mode if isinstance(mode, FilterMode) else FilterMode.parse(mode)
    return current_view(state)


def begin_edit(state: AppState, task_id: int) -> DashboardView:
    state.task_store.begin_edit(task_id)
    return current_view(state)


def cancel_edit(state: AppState) -> DashboardView:
    state.task_store.cancel_edit()
    return current_view(state)


def save_edit(state: AppState, **changes: object) -> DashboardView:
    """
    Apply field changes to the task in the edit session and store it.

    The result is written with update(), i.e. as a full overwrite.
    Without an open session the edit is closed as a no-op update.
    """
    editing = state.task_store.editing
    if editing is None:
        logger.debug("save_edit without an open edit session")
        state.task_store.cancel_edit()
        return current_view(state)

    allowed = {"title", "deadline", "deadline_time", "grade", "notes"}
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"cannot edit fields: {', '.join(sorted(unknown))}")

    return update_task(state, replace(editing, **changes))  # type: ignore[arg-type]
