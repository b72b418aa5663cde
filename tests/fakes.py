# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from deadline_tracker.core.ports import Notifier
from deadline_tracker.tasks.task_models import OverdueNotification


class FakeClock:
    """
    Deterministic clock for unit tests.

    Callable like datetime.now; advance() moves it forward.
    """

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


def iso_day_name(day: date) -> str:
    """Day-name formatter that keeps histogram labels easy to assert on."""
    return day.isoformat()


@dataclass(slots=True)
class FakeNotifier(Notifier):
    """
    Fake Notifier used by overdue monitor tests.
    """

    sent: list[OverdueNotification] = field(default_factory=list)

    def notify(self, notification: OverdueNotification) -> None:
        self.sent.append(notification)

    @property
    def titles(self) -> list[str]:
        return [n.title for n in self.sent]


class FailingNotifier:
    def __init__(self) -> None:
        self.calls = 0

    def notify(self, notification: OverdueNotification) -> None:
        self.calls += 1
        raise RuntimeError("toast backend down")
