"""Hand identifiers."""

from __future__ import annotations

from enum import Enum


class HandId(str, Enum):
    """The three clock hands."""

    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def element_id(self) -> str:
        """SVG group id of the hand, e.g. "hourHand"."""
        return f"{self.value}Hand"
