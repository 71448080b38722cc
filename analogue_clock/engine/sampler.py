"""Wall-clock time to target hand angles."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Dict, Optional

from pydantic import BaseModel, Field

from .hands import HandId

# Angular velocities in degrees per unit
HOUR_DEGREES = 30.0  # per hour on a 12h dial
HOUR_DEGREES_PER_MINUTE = 0.5
MINUTE_DEGREES = 6.0
MINUTE_DEGREES_PER_SECOND = 0.1
SECOND_DEGREES = 6.0
SECOND_DEGREES_PER_MILLISECOND = 0.006


class Tick(BaseModel):
    """A wall-clock instant reduced to the fields the hands need."""

    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: int = Field(ge=0, le=59)
    millisecond: int = Field(default=0, ge=0, le=999)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Tick":
        return cls(
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
            millisecond=dt.microsecond // 1000,
        )


class HandAngles(BaseModel):
    """Target angles in degrees, each in [0, 360)."""

    hour: float
    minute: float
    second: float

    def as_dict(self) -> Dict[HandId, float]:
        return {
            HandId.HOUR: self.hour,
            HandId.MINUTE: self.minute,
            HandId.SECOND: self.second,
        }


class TimeSampler:
    """
    Derives target hand angles from wall-clock time.

    Two variants, chosen by sweep_seconds:

    - ticking (default): minute and second hands move in 6 degree steps
    - sweeping: the minute hand also advances 0.1 degree per second and the
      second hand 0.006 degree per millisecond

    The hour hand always advances 0.5 degree per minute.
    """

    def __init__(
        self,
        sweep_seconds: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.sweep_seconds = sweep_seconds
        self._clock = clock

    def sample(self, now: Optional[datetime] = None) -> HandAngles:
        """
        Target angles for now, or for the injected clock's current time.

        Args:
            now: Optional explicit instant

        Returns:
            HandAngles for that instant
        """
        if now is None:
            now = self._clock()
        return self.angles_for(Tick.from_datetime(now))

    def angles_for(self, tick: Tick) -> HandAngles:
        hour = (tick.hour % 12) * HOUR_DEGREES + tick.minute * HOUR_DEGREES_PER_MINUTE
        minute = tick.minute * MINUTE_DEGREES
        second = tick.second * SECOND_DEGREES

        if self.sweep_seconds:
            minute += tick.second * MINUTE_DEGREES_PER_SECOND
            second += tick.millisecond * SECOND_DEGREES_PER_MILLISECOND

        return HandAngles(
            hour=hour % 360.0,
            minute=minute % 360.0,
            second=second % 360.0,
        )
