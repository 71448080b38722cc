"""Host-managed views."""

from .base import BaseView
from .registry import ViewRegistry
from .manager import ViewManager
from .clock_view import AnalogueClockView, CLOCK_VIEW_TYPE

__all__ = [
    "BaseView",
    "ViewRegistry",
    "ViewManager",
    "AnalogueClockView",
    "CLOCK_VIEW_TYPE",
]
