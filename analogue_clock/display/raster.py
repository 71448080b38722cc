"""Pillow snapshot of a clock face."""

from __future__ import annotations

import math
from io import BytesIO
from typing import Dict, Optional

from PIL import Image, ImageColor, ImageDraw

from ..core.config import ClockConfig, FaceConfig
from ..engine.hands import HandId
from .svg_face import AXIS_RADIUS, DIAL_RADIUS, FACEPLATE_RADIUS, HAND_WIDTHS, VIEWBOX


def _color(value: str) -> tuple:
    return ImageColor.getrgb(value)


def hand_endpoint(
    center: float, length: float, absolute_degrees: float
) -> tuple:
    """
    Tip of a hand rotated clockwise from 12 o'clock.

    Unbounded angles are fine: sin/cos only see the mod-360 position.
    """
    radians = math.radians(absolute_degrees)
    return (
        center + length * math.sin(radians),
        center - length * math.cos(radians),
    )


def render_image(
    rotations: Dict[HandId, float],
    clock: Optional[ClockConfig] = None,
    face: Optional[FaceConfig] = None,
) -> Image.Image:
    """
    Draw the face with hands at the given rotations.

    Args:
        rotations: Absolute rotation per hand; missing hands are not drawn
        clock: Hand geometry
        face: Colours and output size

    Returns:
        RGB image of face.png_size square
    """
    clock = clock or ClockConfig()
    face = face or FaceConfig()

    size = face.png_size
    scale = size / VIEWBOX
    center = size / 2

    img = Image.new("RGB", (size, size), color=(255, 255, 255))
    draw = ImageDraw.Draw(img)

    def circle(radius: float, fill: str, outline: str, width: float) -> None:
        r = radius * scale
        draw.ellipse(
            [center - r, center - r, center + r, center + r],
            fill=_color(fill),
            outline=_color(outline),
            width=max(1, round(width * scale)),
        )

    circle(FACEPLATE_RADIUS, face.faceplate_color, "black", 3)
    circle(DIAL_RADIUS, face.dial_color, "black", 3)

    lengths = {
        HandId.HOUR: clock.hour_hand_length,
        HandId.MINUTE: clock.minute_hand_length,
        HandId.SECOND: clock.second_hand_length,
    }

    for hand in HandId:
        if hand not in rotations:
            continue
        color = face.second_hand_color if hand is HandId.SECOND else face.hand_color
        tip = hand_endpoint(
            center, lengths[hand] * FACEPLATE_RADIUS * scale, rotations[hand]
        )
        draw.line(
            [(center, center), tip],
            fill=_color(color),
            width=max(1, round(HAND_WIDTHS[hand] * scale)),
        )

    circle(AXIS_RADIUS, face.axis_color, face.hand_color, 2)
    return img


def render_png(
    rotations: Dict[HandId, float],
    clock: Optional[ClockConfig] = None,
    face: Optional[FaceConfig] = None,
) -> bytes:
    """Render the face and return PNG bytes (for API preview)."""
    buffer = BytesIO()
    render_image(rotations, clock, face).save(buffer, format="PNG")
    return buffer.getvalue()
