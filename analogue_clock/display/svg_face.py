"""SVG clock face."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Dict, Optional

from ..core.config import ClockConfig, FaceConfig
from ..core.exceptions import HandNotAttachedError
from ..core.logging import get_logger
from ..engine.hands import HandId
from .surface import DisplaySurface

logger = get_logger("display.svg_face")

SVG_NS = "http://www.w3.org/2000/svg"

VIEWBOX = 200
CENTER = VIEWBOX / 2
FACEPLATE_RADIUS = 98
DIAL_RADIUS = 70
AXIS_RADIUS = 4

HAND_WIDTHS = {
    HandId.HOUR: 5,
    HandId.MINUTE: 3,
    HandId.SECOND: 2,
}


def format_number(value: float) -> str:
    """Compact decimal for SVG attributes: 354.0 -> "354", 6.006 -> "6.006"."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def rotate_transform(absolute_degrees: float) -> str:
    return f"rotate({format_number(absolute_degrees)}, {format_number(CENTER)}, {format_number(CENTER)})"


class SvgClockFace(DisplaySurface):
    """
    Clock face drawn as an SVG element tree.

    Hands are <g> groups with ids hourHand/minuteHand/secondHand, each
    holding a vertical line from the centre towards 12 o'clock; rotation is
    applied as a transform on the group.
    """

    def __init__(
        self,
        clock: Optional[ClockConfig] = None,
        face: Optional[FaceConfig] = None,
    ) -> None:
        self.clock = clock or ClockConfig()
        self.face = face or FaceConfig()
        self._root = self._build()
        self._hands: Dict[HandId, ET.Element] = {
            hand: self._find_group(hand.element_id) for hand in HandId
        }

    def _hand_length(self, hand: HandId) -> float:
        ratio = {
            HandId.HOUR: self.clock.hour_hand_length,
            HandId.MINUTE: self.clock.minute_hand_length,
            HandId.SECOND: self.clock.second_hand_length,
        }[hand]
        return ratio * FACEPLATE_RADIUS

    def _build(self) -> ET.Element:
        center = format_number(CENTER)
        root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "version": "1.1",
                "baseProfile": "full",
                "width": "100%",
                "height": "100%",
                "viewBox": f"0 0 {VIEWBOX} {VIEWBOX}",
            },
        )

        faceplate = ET.SubElement(root, "g", {"id": "faceplate"})
        ET.SubElement(
            faceplate,
            "circle",
            {
                "id": "faceplateCircle",
                "cx": center,
                "cy": center,
                "r": str(FACEPLATE_RADIUS),
                "style": f"fill: {self.face.faceplate_color}; stroke: black; stroke-width: 3.0",
            },
        )
        ET.SubElement(
            faceplate,
            "circle",
            {
                "id": "faceplateInnerCircle",
                "cx": center,
                "cy": center,
                "r": str(DIAL_RADIUS),
                "style": f"fill: {self.face.dial_color}; stroke: black; stroke-width: 3.0",
            },
        )

        for hand in HandId:
            color = (
                self.face.second_hand_color
                if hand is HandId.SECOND
                else self.face.hand_color
            )
            group = ET.SubElement(
                root,
                "g",
                {"id": hand.element_id, "transform": rotate_transform(0.0)},
            )
            ET.SubElement(
                group,
                "line",
                {
                    "x1": center,
                    "y1": center,
                    "x2": center,
                    "y2": format_number(CENTER - self._hand_length(hand)),
                    "style": f"stroke: {color}; stroke-width: {HAND_WIDTHS[hand]}",
                },
            )

        axis = ET.SubElement(root, "g", {"id": "axisCover"})
        ET.SubElement(
            axis,
            "circle",
            {
                "id": "axisCoverCircle",
                "cx": center,
                "cy": center,
                "r": str(AXIS_RADIUS),
                "style": f"fill: {self.face.axis_color}; stroke: {self.face.hand_color}; stroke-width: 2.0",
            },
        )
        return root

    def _find_group(self, element_id: str) -> ET.Element:
        element = self._root.find(f"g[@id='{element_id}']")
        if element is None:
            raise HandNotAttachedError(element_id)
        return element

    def set_rotation(self, hand: HandId, absolute_degrees: float) -> None:
        element = self._hands.get(hand)
        if element is None:
            raise HandNotAttachedError(hand.value)
        element.set("transform", rotate_transform(absolute_degrees))
        element.set("data-rotation", repr(float(absolute_degrees)))

    def rotations(self) -> Dict[HandId, float]:
        return {
            hand: float(element.get("data-rotation", "0"))
            for hand, element in self._hands.items()
        }

    def detach(self) -> None:
        for element in self._hands.values():
            self._root.remove(element)
        self._hands.clear()
        logger.debug("SVG face detached")

    def render(self) -> str:
        """Serialize the face, hands at their current rotation."""
        return ET.tostring(self._root, encoding="unicode")


PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Analogue Clock</title>
<style>
  .clock-container {{
    display: flex;
    align-items: center;
    justify-content: center;
    width: 100%;
    height: 100vh;
  }}
  .clock {{
    width: 300px;
    height: 300px;
  }}
</style>
</head>
<body>
<div class="clock-container">
  <div class="clock">{svg}</div>
</div>
<script>
  async function refresh() {{
    const response = await fetch("/api/clock");
    if (!response.ok) {{
      return;
    }}
    const status = await response.json();
    for (const [hand, degrees] of Object.entries(status.absolute)) {{
      const element = document.getElementById(hand + "Hand");
      if (element) {{
        element.setAttribute("transform", `rotate(${{degrees}}, {center}, {center})`);
      }}
    }}
  }}
  setInterval(refresh, {interval_ms});
</script>
</body>
</html>
"""


def render_page(svg: str, interval_seconds: float) -> str:
    """HTML page that embeds the face and follows the server-side angles."""
    return PAGE_TEMPLATE.format(
        svg=svg,
        center=format_number(CENTER),
        interval_ms=int(interval_seconds * 1000),
    )
