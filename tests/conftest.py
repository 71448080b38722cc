"""Shared fixtures for the analogue clock tests."""

from datetime import datetime
from typing import Dict, List, Tuple

import pytest

from analogue_clock.core.exceptions import HandNotAttachedError
from analogue_clock.display.surface import DisplaySurface
from analogue_clock.engine.hands import HandId


class RecordingSurface(DisplaySurface):
    """Surface that remembers every rotation it was given."""

    def __init__(self) -> None:
        self.calls: List[Tuple[HandId, float]] = []
        self._rotations: Dict[HandId, float] = {hand: 0.0 for hand in HandId}

    def set_rotation(self, hand: HandId, absolute_degrees: float) -> None:
        if hand not in self._rotations:
            raise HandNotAttachedError(hand.value)
        self._rotations[hand] = absolute_degrees
        self.calls.append((hand, absolute_degrees))

    def detach(self) -> None:
        self._rotations.clear()

    def rotations(self) -> Dict[HandId, float]:
        return dict(self._rotations)


class FakeScheduler:
    """Scheduler stand-in that records jobs without running them."""

    def __init__(self) -> None:
        self.jobs = {}
        self.intervals = {}
        self.removed: List[str] = []

    def schedule_interval(self, job_name, callback, interval_seconds) -> None:
        self.jobs[job_name] = callback
        self.intervals[job_name] = interval_seconds

    def remove_job(self, job_name: str) -> None:
        self.jobs.pop(job_name, None)
        self.removed.append(job_name)

    def has_job(self, job_name: str) -> bool:
        return job_name in self.jobs


class SteppingClock:
    """Callable clock returning a scripted sequence of instants."""

    def __init__(self, *instants: datetime) -> None:
        self._instants = list(instants)
        self._index = 0

    def __call__(self) -> datetime:
        value = self._instants[min(self._index, len(self._instants) - 1)]
        self._index += 1
        return value


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    return FakeScheduler()
