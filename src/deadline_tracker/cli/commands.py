# src/deadline_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState, DashboardView
from ..tasks import task_api
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        name, _, rest = line[1:].strip().partition(" ")
        if not name:
            return "Empty command. Use /help to list available commands."

        handler = self._handlers.get(name.lower())
        if not handler:
            return f"Unknown command: /{name.lower()}. Use /help to list available commands."

        return handler(state, rest.strip())

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    line = f"[{mark}] #{task.id} {task.title} (prazo {task.deadline} {task.deadline_time})"
    if task.grade is not None:
        line += f" nota={task.grade:g}"
    if task.notes:
        line += f" - {task.notes}"
    return line


def format_tasks(view: DashboardView) -> str:
    if not view.tasks:
        return f"No tasks ({view.filter_mode.value})."
    lines = [f"Tasks ({view.filter_mode.value}):"]
    lines.extend(f"  {format_task(t)}" for t in view.tasks)
    return "\n".join(lines)


def format_stats(view: DashboardView) -> str:
    s = view.statistics
    return (
        "Statistics:\n"
        f"  Completed: {s.completed_tasks_percentage}%\n"
        f"  Average grade: {s.average_grade:.2f}\n"
        f"  Days until next exam: {s.days_until_next_exam}\n"
        f"  Overdue: {s.overdue_activities}"
    )


def format_week(view: DashboardView) -> str:
    lines = ["Completed per day (last 7 days):"]
    for p in view.progress:
        lines.append(f"  {p.name:<6} {'#' * p.tarefas} {p.tarefas}")
    return "\n".join(lines)


# ---- argument parsing ----


def _parse_id(rest: str) -> int | None:
    try:
        return int(rest.strip().lstrip("#"))
    except ValueError:
        return None


def _parse_grade(raw: str) -> float | None:
    raw = raw.strip().replace(",", ".")
    if not raw:
        return None
    return float(raw)


def _parse_fields(parts: list[str]) -> dict[str, str]:
    """["grade=8", "notes=x"] -> {"grade": "8", "notes": "x"}"""
    out: dict[str, str] = {}
    for p in parts:
        key, sep, value = p.partition("=")
        if not sep:
            raise ValueError(f"expected key=value, got {p.strip()!r}")
        out[key.strip().lower().replace("-", "_")] = value.strip()
    return out


# ---- handlers ----


def cmd_help(state: AppState, rest: str) -> str:
    return registry.build_help()


def cmd_add(state: AppState, rest: str) -> str:
    """
    /add <title> | <YYYY-MM-DD> | <HH:MM> [| grade=<n>] [| notes=<text>]
    """
    usage = "Usage: /add <title> | <YYYY-MM-DD> | <HH:MM> [| grade=<n>] [| notes=<text>]"
    parts = [p.strip() for p in rest.split("|")]
    if len(parts) < 3:
        return usage

    title, deadline, deadline_time = parts[:3]
    try:
        extra = _parse_fields(parts[3:])
        grade = _parse_grade(extra.get("grade", ""))
    except ValueError as e:
        return f"{e}\n{usage}"

    before = state.task_store.count_tasks()
    view = task_api.add_task(
        state,
        title=title,
        deadline=deadline,
        deadline_time=deadline_time,
        grade=grade,
        notes=extra.get("notes") or None,
    )
    if state.task_store.count_tasks() == before:
        return "Task not added: title, deadline and time are required."
    return format_tasks(view)


def cmd_remove(state: AppState, rest: str) -> str:
    task_id = _parse_id(rest)
    if task_id is None:
        return "Usage: /rm <id>"
    return format_tasks(task_api.remove_task(state, task_id))


def cmd_done(state: AppState, rest: str) -> str:
    task_id = _parse_id(rest)
    if task_id is None:
        return "Usage: /done <id>"
    return format_tasks(task_api.toggle_task(state, task_id))


def cmd_edit(state: AppState, rest: str) -> str:
    task_id = _parse_id(rest)
    if task_id is None:
        return "Usage: /edit <id>"
    view = task_api.begin_edit(state, task_id)
    if view.editing is None:
        return f"No task with id {task_id}."
    logger.debug("Edit session opened task_id=%s", task_id)
    return (
        f"Editing {format_task(view.editing)}\n"
        "Use /save field=value | field=value ... (title, deadline, deadline_time, grade, notes) or /cancel."
    )


def cmd_save(state: AppState, rest: str) -> str:
    if state.task_store.editing is None:
        return "No task is being edited. Use /edit <id> first."
    try:
        changes: dict[str, object] = dict(_parse_fields([p for p in rest.split("|") if p.strip()]))
        if "grade" in changes:
            changes["grade"] = _parse_grade(str(changes["grade"]))
        if "notes" in changes:
            changes["notes"] = changes["notes"] or None
        view = task_api.save_edit(state, **changes)
    except ValueError as e:
        return f"{e}\nUsage: /save field=value | field=value ..."
    return format_tasks(view)


def cmd_cancel(state: AppState, rest: str) -> str:
    task_api.cancel_edit(state)
    return "Edit cancelled."


def cmd_filter(state: AppState, rest: str) -> str:
    if not rest:
        return f"Current filter: {state.filter_mode.value}. Use /filter all|completed|pending|overdue."
    try:
        view = task_api.set_filter_mode(state, rest)
    except ValueError:
        return "Usage: /filter all|completed|pending|overdue"
    return format_tasks(view)


def cmd_list(state: AppState, rest: str) -> str:
    return format_tasks(task_api.current_view(state))


def cmd_stats(state: AppState, rest: str) -> str:
    return format_stats(task_api.current_view(state))


def cmd_week(state: AppState, rest: str) -> str:
    return format_week(task_api.current_view(state))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <title> | <YYYY-MM-DD> | <HH:MM> [| grade=<n>] [| notes=<text>].",
)
registry.register("rm", cmd_remove, help_text="Delete a task: /rm <id>.", aliases=["del"])
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("edit", cmd_edit, help_text="Start editing a task: /edit <id>.")
registry.register("save", cmd_save, help_text="Save the edited task: /save field=value | ...")
registry.register("cancel", cmd_cancel, help_text="Close the edit session without saving.")
registry.register("filter", cmd_filter, help_text="Filter tasks: /filter all|completed|pending|overdue.")
registry.register("list", cmd_list, help_text="List tasks with the current filter.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show completion rate, average grade and overdue count.")
registry.register("week", cmd_week, help_text="Show tasks completed per day over the last 7 days.")
