# tests/test_logging_setup.py

from __future__ import annotations

import logging

import pytest

from deadline_tracker.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("deadline_tracker.tasks.overdue_monitor", logging.INFO, True),
        ("deadline_tracker.tasks.task_store", logging.DEBUG, False),
        ("deadline_tracker.tasks.task_store", logging.WARNING, True),
        ("deadline_tracker.metrics.engine", logging.INFO, False),
        ("py.warnings", logging.WARNING, False),
        ("asyncio", logging.WARNING, False),
        ("asyncio", logging.ERROR, True),
    ],
)
def test_console_filter_levels(name: str, level: int, shown: bool) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is shown


def test_setup_logging_replaces_handlers_and_writes_file(tmp_path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs")
    setup_logging(log_dir=tmp_path / "logs")

    root = logging.getLogger()
    assert len(root.handlers) == 2

    logging.getLogger("deadline_tracker.tasks.task_store").debug("Task added id=1")
    for h in root.handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "tracker.log"
    assert "Task added id=1" in log_file.read_text(encoding="utf-8")
