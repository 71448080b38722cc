"""Display surfaces for the clock hands."""

from .surface import DisplaySurface
from .svg_face import SvgClockFace

__all__ = [
    "DisplaySurface",
    "SvgClockFace",
]
