"""Analogue clock view."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Callable, Dict, Optional

from ..core.config import ClockConfig, FaceConfig
from ..core.logging import get_logger
from ..display.svg_face import SvgClockFace
from ..engine.hands import HandId
from ..engine.sampler import HandAngles, TimeSampler
from ..engine.tracker import ContinuousAngleTracker
from .base import BaseView
from .registry import ViewRegistry

if TYPE_CHECKING:
    from ..core.scheduler import ClockScheduler

logger = get_logger("views.clock_view")

CLOCK_VIEW_TYPE = "analogue-clock"


@ViewRegistry.register(CLOCK_VIEW_TYPE)
class AnalogueClockView(BaseView):
    """
    SVG clock face whose hands follow wall-clock time.

    On attach the hands are snapped to the current time, then a job on the
    shared scheduler advances them once per tick interval. Detach removes
    the job first and only then drops the surface and angle state.
    """

    display_text = "Analogue Clock"

    def __init__(
        self,
        scheduler: "ClockScheduler",
        clock: Optional[ClockConfig] = None,
        face: Optional[FaceConfig] = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__()
        self.scheduler = scheduler
        self.clock = clock or ClockConfig()
        self.face = face or FaceConfig()
        self.sampler = TimeSampler(sweep_seconds=self.clock.sweep_seconds, clock=now)
        self.surface: Optional[SvgClockFace] = None
        self.tracker: Optional[ContinuousAngleTracker] = None
        self.last_target: Optional[HandAngles] = None

    @property
    def job_name(self) -> str:
        return f"{self.view_type}:{self.view_id}"

    def on_attach(self) -> None:
        self.surface = SvgClockFace(self.clock, self.face)
        self.tracker = ContinuousAngleTracker(self.surface)

        # Initial render shows the right time with no sweep from 0
        self.last_target = self.sampler.sample()
        self.tracker.reinitialize_all(self.last_target)

        self.scheduler.schedule_interval(
            self.job_name,
            self._scheduled_tick,
            self.clock.tick_interval_seconds,
        )

    def on_detach(self) -> None:
        self.scheduler.remove_job(self.job_name)
        if self.surface is not None:
            self.surface.detach()
        if self.tracker is not None:
            self.tracker.detach()
        self.surface = None
        self.tracker = None
        self.last_target = None

    def tick(self) -> Optional[Dict[HandId, float]]:
        """
        Sample the time and advance every hand.

        Returns:
            New absolute angles, or None when the view is already detached
        """
        tracker = self.tracker
        if tracker is None:
            return None
        self.last_target = self.sampler.sample()
        absolute = tracker.advance_all(self.last_target)
        logger.debug(
            "Tick "
            + ", ".join(f"{hand.value}={deg:.3f}" for hand, deg in absolute.items())
        )
        return absolute

    async def _scheduled_tick(self) -> None:
        self.tick()

    def absolute_angles(self) -> Dict[HandId, float]:
        if self.tracker is None:
            return {}
        return self.tracker.snapshot()

    def render_svg(self) -> Optional[str]:
        if self.surface is None:
            return None
        return self.surface.render()
