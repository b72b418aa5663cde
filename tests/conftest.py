# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from deadline_tracker.cli.bootstrap import create_initial_state
from deadline_tracker.core.state import AppState
from deadline_tracker.tasks.task_store import TaskStore

from .fakes import FakeClock, iso_day_name

# Monday.
NOW = datetime(2024, 1, 15, 12, 0)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="deadline-tracker-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        monitor_enabled=True,
        overdue_check_interval_seconds=0.01,
        locale="pt_BR",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FakeClock) -> AppState:
    """
    AppState wired through the real composition root, with a fake clock and
    ISO-date histogram labels.
    """
    return create_initial_state(settings=settings, clock=clock, day_name=iso_day_name)
