"""Continuous-rotation angle tracking for the clock hands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Set

from pydantic import BaseModel, Field

from ..core.exceptions import HandNotAttachedError
from ..core.logging import get_logger
from .hands import HandId
from .sampler import HandAngles

if TYPE_CHECKING:
    from ..display.surface import DisplaySurface

logger = get_logger("engine.tracker")

FULL_TURN = 360.0
HALF_TURN = 180.0


def shortest_delta(current: float, target: float) -> float:
    """
    Signed change in (-180, 180] that takes current onto target mod 360.

    A delta of exactly half a turn always resolves forward (+180).
    """
    diff = target - (current % FULL_TURN)
    if diff > HALF_TURN:
        diff -= FULL_TURN
    elif diff <= -HALF_TURN:
        diff += FULL_TURN
    return diff


class AngleState(BaseModel):
    """Unbounded absolute angle per hand, owned by a single tracker."""

    angles: Dict[HandId, float] = Field(
        default_factory=lambda: {hand: 0.0 for hand in HandId}
    )
    synchronized: Set[HandId] = Field(default_factory=set)

    def is_tracking(self, hand: HandId) -> bool:
        return hand in self.synchronized


class ContinuousAngleTracker:
    """
    Keeps each hand's exposed rotation continuous across the 0/360 seam.

    Each hand starts uninitialized. reinitialize() snaps it to its target
    and moves it to tracking; from then on advance() only ever applies the
    shortest-path delta, so the second hand goes 354 -> 360 -> 366 rather
    than 354 -> 0 -> 6.
    """

    def __init__(self, surface: Optional["DisplaySurface"] = None) -> None:
        self._surface = surface
        self._detached = False
        self.state = AngleState()

    def detach(self) -> None:
        """Drop the surface. Every later update is a no-op."""
        self._surface = None
        self._detached = True

    def angle(self, hand: HandId) -> float:
        return self.state.angles[hand]

    def snapshot(self) -> Dict[HandId, float]:
        return dict(self.state.angles)

    def reinitialize(self, hand: HandId, target_angle: float) -> float:
        """
        Force a hand onto its target with no delta computation.

        Args:
            hand: Hand to synchronize
            target_angle: True angle in [0, 360)

        Returns:
            The stored absolute angle, unchanged if the update was skipped
        """
        if self._apply(hand, target_angle):
            self.state.synchronized.add(hand)
        return self.state.angles[hand]

    def advance(self, hand: HandId, target_angle: float) -> float:
        """
        Move a hand to target_angle by the shorter arc.

        An uninitialized hand is force-synchronized instead, since there is
        no meaningful previous angle to move from. If the surface is gone the
        whole update is skipped and the stored angle keeps matching what was
        last drawn.

        Args:
            hand: Hand to move
            target_angle: True angle in [0, 360)

        Returns:
            The stored absolute angle, unchanged if the update was skipped
        """
        if not self.state.is_tracking(hand):
            logger.debug(f"{hand.value} hand not synchronized yet, reinitializing")
            return self.reinitialize(hand, target_angle)

        current = self.state.angles[hand]
        self._apply(hand, current + shortest_delta(current, target_angle))
        return self.state.angles[hand]

    def reinitialize_all(self, angles: HandAngles) -> None:
        for hand, target in angles.as_dict().items():
            self.reinitialize(hand, target)

    def advance_all(self, angles: HandAngles) -> Dict[HandId, float]:
        return {
            hand: self.advance(hand, target)
            for hand, target in angles.as_dict().items()
        }

    def _apply(self, hand: HandId, absolute_degrees: float) -> bool:
        """Emit then store; False if the surface is detached."""
        if self._detached:
            logger.debug(f"Skipped {hand.value} hand update: tracker detached")
            return False
        if self._surface is not None:
            try:
                self._surface.set_rotation(hand, absolute_degrees)
            except HandNotAttachedError:
                logger.debug(f"Skipped {hand.value} hand update: surface detached")
                return False
        self.state.angles[hand] = absolute_degrees
        return True
