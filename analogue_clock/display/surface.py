"""Display surface interface consumed by the angle tracker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict

from ..engine.hands import HandId


class DisplaySurface(ABC):
    """
    Something that can visually rotate the three clock hands.

    A surface:
    - Applies an absolute rotation about the face centre to a hand
    - Accepts values outside [0, 360) and keeps them unreduced, so a
      renderer that animates between values always takes the short way
    - Raises HandNotAttachedError once its hand elements are gone
    """

    @abstractmethod
    def set_rotation(self, hand: HandId, absolute_degrees: float) -> None:
        """
        Rotate a hand to an absolute angle.

        Args:
            hand: Which hand to rotate
            absolute_degrees: Unbounded rotation in degrees

        Raises:
            HandNotAttachedError: If the hand element no longer exists
        """
        pass

    @abstractmethod
    def detach(self) -> None:
        """Release the hand elements. Later set_rotation calls must raise."""
        pass

    @abstractmethod
    def rotations(self) -> Dict[HandId, float]:
        """Currently applied rotation per attached hand."""
        pass

    @property
    def attached(self) -> bool:
        return bool(self.rotations())
