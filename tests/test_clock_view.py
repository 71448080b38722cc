"""Tests for the clock view lifecycle and the view manager."""

import asyncio
from datetime import datetime

import pytest

from conftest import SteppingClock

from analogue_clock.core.config import ClockConfig
from analogue_clock.engine.hands import HandId
from analogue_clock.views.base import BaseView
from analogue_clock.views.clock_view import CLOCK_VIEW_TYPE, AnalogueClockView
from analogue_clock.views.manager import ViewManager
from analogue_clock.views.registry import ViewRegistry


def test_clock_view_is_registered() -> None:
    assert ViewRegistry.get_view_class(CLOCK_VIEW_TYPE) is AnalogueClockView
    assert AnalogueClockView.view_type == CLOCK_VIEW_TYPE
    assert CLOCK_VIEW_TYPE in ViewRegistry.list_registered()


def test_unknown_view_type_raises() -> None:
    with pytest.raises(ValueError, match="Unknown view type"):
        ViewRegistry.create_view("digital-clock")


def test_attach_snaps_hands_and_schedules_tick(fake_scheduler) -> None:
    view = AnalogueClockView(
        fake_scheduler,
        clock=ClockConfig(tick_interval_seconds=0.5),
        now=lambda: datetime(2024, 1, 1, 3, 0, 59),
    )
    view.open()

    assert view.attached
    assert view.absolute_angles() == {
        HandId.HOUR: 90.0,
        HandId.MINUTE: 0.0,
        HandId.SECOND: 354.0,
    }
    assert fake_scheduler.intervals[view.job_name] == 0.5
    assert 'transform="rotate(354, 100, 100)"' in view.render_svg()


def test_tick_crosses_the_minute_without_rewinding(fake_scheduler) -> None:
    clock = SteppingClock(
        datetime(2024, 1, 1, 3, 0, 59),
        datetime(2024, 1, 1, 3, 1, 0),
        datetime(2024, 1, 1, 3, 1, 1),
    )
    view = AnalogueClockView(fake_scheduler, now=clock)
    view.open()

    first = view.tick()
    second = view.tick()

    assert first[HandId.SECOND] == 360.0
    assert second[HandId.SECOND] == 366.0
    assert first[HandId.MINUTE] == 6.0
    assert first[HandId.HOUR] == 90.5
    assert view.last_target.second == 6.0


def test_scheduled_job_runs_a_tick(fake_scheduler) -> None:
    clock = SteppingClock(
        datetime(2024, 1, 1, 9, 30, 10),
        datetime(2024, 1, 1, 9, 30, 11),
    )
    view = AnalogueClockView(fake_scheduler, now=clock)
    view.open()

    asyncio.run(fake_scheduler.jobs[view.job_name]())

    assert view.absolute_angles()[HandId.SECOND] == 66.0


def test_detach_removes_job_before_dropping_state(fake_scheduler) -> None:
    view = AnalogueClockView(fake_scheduler)
    view.open()
    job_name = view.job_name

    view.close()

    assert not view.attached
    assert fake_scheduler.removed == [job_name]
    assert not fake_scheduler.has_job(job_name)
    assert view.surface is None
    assert view.tracker is None
    assert view.tick() is None
    assert view.render_svg() is None


def test_close_is_idempotent(fake_scheduler) -> None:
    view = AnalogueClockView(fake_scheduler)
    view.open()
    view.close()
    view.close()

    assert fake_scheduler.removed == [view.job_name]


def test_each_view_owns_its_angles(fake_scheduler) -> None:
    first = AnalogueClockView(fake_scheduler, now=lambda: datetime(2024, 1, 1, 1, 0, 0))
    second = AnalogueClockView(fake_scheduler, now=lambda: datetime(2024, 1, 1, 2, 0, 0))
    first.open()
    second.open()

    assert first.job_name != second.job_name
    assert first.absolute_angles()[HandId.HOUR] == 30.0
    assert second.absolute_angles()[HandId.HOUR] == 60.0


def test_activate_view_replaces_open_view(fake_scheduler) -> None:
    manager = ViewManager(scheduler=fake_scheduler)

    first = manager.activate_view(CLOCK_VIEW_TYPE)
    second = manager.activate_view(CLOCK_VIEW_TYPE)

    assert not first.attached
    assert second.attached
    assert manager.get_views_of_type(CLOCK_VIEW_TYPE) == [second]
    assert list(fake_scheduler.jobs) == [second.job_name]


@ViewRegistry.register("flaky-clock")
class FlakyClockView(AnalogueClockView):
    def __init__(self, scheduler, fail: bool = False) -> None:
        super().__init__(scheduler)
        self.fail = fail

    def on_attach(self) -> None:
        if self.fail:
            raise RuntimeError("surface unavailable")
        super().on_attach()


def test_failed_activation_keeps_previous_view(fake_scheduler) -> None:
    manager = ViewManager(scheduler=fake_scheduler)
    first = manager.activate_view("flaky-clock")

    manager.configure(scheduler=fake_scheduler, fail=True)
    with pytest.raises(RuntimeError, match="surface unavailable"):
        manager.activate_view("flaky-clock")

    assert first.attached
    assert manager.get_views_of_type("flaky-clock") == [first]
    assert list(fake_scheduler.jobs) == [first.job_name]


def test_detach_all_closes_everything(fake_scheduler) -> None:
    manager = ViewManager(scheduler=fake_scheduler)
    view = manager.activate_view(CLOCK_VIEW_TYPE)

    manager.detach_all()

    assert not view.attached
    assert manager.get_views_of_type(CLOCK_VIEW_TYPE) == []
    assert fake_scheduler.jobs == {}


def test_detach_views_of_type_reports_count(fake_scheduler) -> None:
    manager = ViewManager(scheduler=fake_scheduler)

    assert manager.detach_views_of_type(CLOCK_VIEW_TYPE) == 0
    manager.activate_view(CLOCK_VIEW_TYPE)
    assert manager.detach_views_of_type(CLOCK_VIEW_TYPE) == 1


def test_configure_applies_to_next_view(fake_scheduler) -> None:
    manager = ViewManager(scheduler=fake_scheduler)
    manager.configure(scheduler=fake_scheduler, clock=ClockConfig(sweep_seconds=True))

    view = manager.activate_view(CLOCK_VIEW_TYPE)

    assert view.sampler.sweep_seconds is True


def test_base_view_open_and_close_call_hooks_once() -> None:
    events = []

    class ProbeView(BaseView):
        view_type = "probe"

        def on_attach(self) -> None:
            events.append("attach")

        def on_detach(self) -> None:
            events.append("detach")

    view = ProbeView()
    view.open()
    view.open()
    view.close()
    view.close()

    assert events == ["attach", "detach"]
