# src/deadline_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime

from ..core.ports import Clock, TaskListener
from .task_models import FilterMode, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory, ordered task collection.

    Rules:
    - invalid input and unknown ids are silent no-ops (no exceptions)
    - every mutating call (remove/toggle_complete/update, and add when it
      actually appends) notifies the subscribed listeners exactly once
    - tasks are frozen; mutations replace the stored object

    The store itself never computes metrics; MetricsEngine subscribes to it.
    """

    def __init__(self, *, clock: Clock = datetime.now) -> None:
        self._clock = clock
        self._tasks: list[Task] = []
        self._listeners: list[TaskListener] = []
        self._editing_id: int | None = None
        self._last_id = 0
        logger.debug("TaskStore ready")

    # ---- observers ----

    def subscribe(self, listener: TaskListener) -> None:
        self._listeners.append(listener)

    def _publish(self) -> None:
        snapshot = list(self._tasks)
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Task listener failed listener=%r", listener)

    def _next_id(self) -> int:
        candidate = int(self._clock().timestamp() * 1000)
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    # ---- read API ----

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get(self, task_id: int) -> Task | None:
        i = self._index_of(task_id)
        return None if i is None else self._tasks[i]

    def filter(self, mode: FilterMode | str = FilterMode.ALL, now: datetime | None = None) -> list[Task]:
        """
        Filtered view in insertion order.

        overdue   -> not completed and deadline instant < now
        completed -> completed flag set
        pending   -> completed flag not set
        all       -> everything
        """
        mode = FilterMode(mode)
        if mode == FilterMode.COMPLETED:
            return [t for t in self._tasks if t.completed]
        if mode == FilterMode.PENDING:
            return [t for t in self._tasks if not t.completed]
        if mode == FilterMode.OVERDUE:
            if now is None:
                now = self._clock()
            return [t for t in self._tasks if t.is_overdue(now)]
        return list(self._tasks)

    # ---- mutations ----

    def add(
        self,
        title: str,
        deadline: str,
        deadline_time: str,
        grade: float | None = None,
        notes: str | None = None,
    ) -> Task | None:
        if not title or not deadline or not deadline_time:
            return None

        task = Task(
            id=self._next_id(),
            title=title,
            deadline=deadline,
            deadline_time=deadline_time,
            grade=grade,
            notes=notes,
        )
        self._tasks.append(task)
        logger.debug("Task added id=%s deadline=%s %s", task.id, task.deadline, task.deadline_time)
        self._publish()
        return task

    def remove(self, task_id: int) -> None:
        i = self._index_of(task_id)
        if i is not None:
            del self._tasks[i]
            if self._editing_id == task_id:
                self._editing_id = None
            logger.debug("Task removed id=%s", task_id)
        self._publish()

    def toggle_complete(self, task_id: int) -> None:
        i = self._index_of(task_id)
        if i is not None:
            t = self._tasks[i]
            if t.completed:
                self._tasks[i] = replace(t, completed=False, completed_at=None)
            else:
                self._tasks[i] = replace(t, completed=True, completed_at=self._clock())
            logger.debug("Task toggled id=%s completed=%s", task_id, not t.completed)
        self._publish()

    def update(self, task: Task) -> None:
        """Full overwrite of the stored task with the same id; closes any edit session."""
        i = self._index_of(task.id)
        if i is not None:
            if task.completed and task.completed_at is None:
                logger.debug("Task id=%s saved as completed without completed_at", task.id)
            self._tasks[i] = task
            logger.debug("Task updated id=%s", task.id)
        self._editing_id = None
        self._publish()

    # ---- edit session ----

    @property
    def editing(self) -> Task | None:
        if self._editing_id is None:
            return None
        return self.get(self._editing_id)

    def begin_edit(self, task_id: int) -> Task | None:
        task = self.get(task_id)
        self._editing_id = None if task is None else task.id
        return task

    def cancel_edit(self) -> None:
        self._editing_id = None
