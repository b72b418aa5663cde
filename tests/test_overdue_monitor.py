# tests/test_overdue_monitor.py

from __future__ import annotations

import asyncio
import logging

import pytest

from deadline_tracker.tasks.overdue_monitor import OverdueMonitor, check_overdue, run_overdue_monitor
from deadline_tracker.tasks.task_store import TaskStore

from .fakes import FailingNotifier, FakeClock, FakeNotifier


def test_tick_reports_incomplete_tasks_due_at_or_before_now(store: TaskStore, clock: FakeClock) -> None:
    store.add("late", "2024-01-10", "23:59")
    store.add("due now", "2024-01-15", "12:00")
    store.add("future", "2024-01-15", "12:01")
    done = store.add("late but done", "2024-01-01", "08:00")
    store.add("no date", "??", "??")
    assert done is not None
    store.toggle_complete(done.id)

    notifier = FakeNotifier()
    emitted = check_overdue(store, notifier, clock())

    assert emitted == 2
    assert notifier.titles == ["late", "due now"]
    assert all(n.severity == "warning" for n in notifier.sent)


def test_persistently_overdue_task_is_reported_every_tick(store: TaskStore, clock: FakeClock) -> None:
    task = store.add("Essay", "2024-01-10", "23:59")
    assert task is not None
    notifier = FakeNotifier()

    check_overdue(store, notifier, clock())
    check_overdue(store, notifier, clock())

    assert notifier.titles == ["Essay", "Essay"]
    assert [n.task_id for n in notifier.sent] == [task.id, task.id]


def test_tick_observes_latest_store_state(store: TaskStore, clock: FakeClock) -> None:
    a = store.add("a", "2024-01-10", "23:59")
    b = store.add("b", "2024-01-11", "23:59")
    assert a is not None and b is not None
    notifier = FakeNotifier()

    check_overdue(store, notifier, clock())
    store.toggle_complete(a.id)
    store.remove(b.id)
    store.add("c", "2024-01-14", "08:00")
    check_overdue(store, notifier, clock())

    assert notifier.titles == ["a", "b", "c"]


def test_failing_notifier_is_logged_and_tick_continues(
    store: TaskStore, clock: FakeClock, caplog: pytest.LogCaptureFixture
) -> None:
    store.add("a", "2024-01-10", "23:59")
    store.add("b", "2024-01-11", "23:59")
    notifier = FailingNotifier()

    with caplog.at_level(logging.ERROR, logger="deadline_tracker.tasks.overdue_monitor"):
        emitted = check_overdue(store, notifier, clock())

    assert emitted == 0
    assert notifier.calls == 2
    assert "notify failed" in caplog.text


@pytest.mark.asyncio
async def test_polling_loop_ticks_until_cancelled(store: TaskStore, clock: FakeClock) -> None:
    store.add("Essay", "2024-01-10", "23:59")
    notifier = FakeNotifier()

    runner = asyncio.create_task(
        run_overdue_monitor(store, notifier, interval_seconds=0.01, clock=clock)
    )

    await asyncio.sleep(0.1)
    runner.cancel()
    with pytest.raises(asyncio.CancelledError):
        await runner

    assert len(notifier.sent) >= 2, "a persistently overdue task should be reported on every tick"
    assert set(notifier.titles) == {"Essay"}


@pytest.mark.asyncio
async def test_first_tick_waits_one_interval(store: TaskStore, clock: FakeClock) -> None:
    store.add("Essay", "2024-01-10", "23:59")
    notifier = FakeNotifier()

    monitor = OverdueMonitor(store, notifier, interval_seconds=60.0, clock=clock)
    monitor.start()
    await asyncio.sleep(0.05)
    await monitor.stop()

    assert notifier.sent == []


@pytest.mark.asyncio
async def test_monitor_start_stop_leaves_no_running_task(store: TaskStore, clock: FakeClock) -> None:
    store.add("Essay", "2024-01-10", "23:59")
    notifier = FakeNotifier()
    monitor = OverdueMonitor(store, notifier, interval_seconds=0.01, clock=clock)

    assert monitor.running is False
    monitor.start()
    monitor.start()  # already running: no second loop
    assert monitor.running is True

    await asyncio.sleep(0.05)
    await monitor.stop()
    assert monitor.running is False

    seen = len(notifier.sent)
    assert seen >= 1
    await asyncio.sleep(0.05)
    assert len(notifier.sent) == seen

    await monitor.stop()  # second stop is a no-op
