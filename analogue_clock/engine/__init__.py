"""Hand angle engine: time sampling and continuous rotation tracking."""

from .hands import HandId
from .sampler import HandAngles, Tick, TimeSampler
from .tracker import AngleState, ContinuousAngleTracker, shortest_delta

__all__ = [
    "HandId",
    "HandAngles",
    "Tick",
    "TimeSampler",
    "AngleState",
    "ContinuousAngleTracker",
    "shortest_delta",
]
