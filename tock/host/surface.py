"""Headless drawing surfaces backed by numpy RGBA arrays.

Mirrors the subset of a 2-D canvas the language uses: a current fill style and
`fillRect`. Coordinates are rounded to whole pixels and clipped to the canvas;
negative widths and heights extend left and up, as on a canvas.
"""

from __future__ import annotations

import logging
import re

import numpy as np

logger = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
TRANSPARENT: RGBA = (0, 0, 0, 0)

NAMED_COLORS: dict[str, RGBA] = {
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "red": (255, 0, 0, 255),
    "lime": (0, 255, 0, 255),
    "green": (0, 128, 0, 255),
    "blue": (0, 0, 255, 255),
    "yellow": (255, 255, 0, 255),
    "cyan": (0, 255, 255, 255),
    "aqua": (0, 255, 255, 255),
    "magenta": (255, 0, 255, 255),
    "fuchsia": (255, 0, 255, 255),
    "gray": (128, 128, 128, 255),
    "grey": (128, 128, 128, 255),
    "silver": (192, 192, 192, 255),
    "maroon": (128, 0, 0, 255),
    "olive": (128, 128, 0, 255),
    "navy": (0, 0, 128, 255),
    "purple": (128, 0, 128, 255),
    "teal": (0, 128, 128, 255),
    "orange": (255, 165, 0, 255),
    "transparent": TRANSPARENT,
}

RGB_FUNC_RE = re.compile(r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([\d.]+)\s*)?\)")


def parse_color(text: str) -> RGBA | None:
    """Parse `#rgb`, `#rrggbb`, `rgb(r, g, b)`, `rgba(r, g, b, a)` or a basic
    color name. Returns None when the text is not a color."""
    s = text.strip().lower()
    if s in NAMED_COLORS:
        return NAMED_COLORS[s]
    if s.startswith("#"):
        digits = s[1:]
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6:
            return None
        try:
            value = int(digits, 16)
        except ValueError:
            return None
        return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255
    m = RGB_FUNC_RE.fullmatch(s)
    if m:
        r, g, b = (min(int(c), 255) for c in m.group(1, 2, 3))
        alpha = 255 if m.group(4) is None else round(min(float(m.group(4)), 1.0) * 255)
        return r, g, b, alpha
    return None


class RasterSurface:
    """Named canvases; each keeps its own fill style like a 2-D context."""

    def __init__(self):
        self.canvases: dict[str, np.ndarray] = {}
        self.fill_styles: dict[str, RGBA] = {}

    def create(self, surface_id: str, width: int, height: int) -> np.ndarray:
        canvas = np.zeros((height, width, 4), dtype=np.uint8)
        self.canvases[surface_id] = canvas
        self.fill_styles[surface_id] = BLACK
        return canvas

    def array(self, surface_id: str) -> np.ndarray:
        return self.canvases[surface_id]

    def pixel(self, surface_id: str, x: int, y: int) -> RGBA:
        return tuple(int(c) for c in self.canvases[surface_id][y, x])

    def fill_rectangle(
        self,
        surface_id: str,
        x: float,
        y: float,
        width: float,
        height: float,
        color: str | None = None,
    ) -> None:
        canvas = self.canvases[surface_id]
        if color is not None:
            rgba = parse_color(str(color))
            if rgba is None:
                # Canvas semantics: an invalid fill style leaves the old one in place
                logger.debug("Ignoring unparseable color %r on %s", color, surface_id)
            else:
                self.fill_styles[surface_id] = rgba

        x0, x1 = sorted((x, x + width))
        y0, y1 = sorted((y, y + height))
        rows, cols = canvas.shape[:2]
        left, right = max(round(x0), 0), min(round(x1), cols)
        top, bottom = max(round(y0), 0), min(round(y1), rows)
        if left >= right or top >= bottom:
            return
        canvas[top:bottom, left:right] = np.array(self.fill_styles[surface_id], dtype=np.uint8)
