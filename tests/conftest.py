"""Shared test helpers."""

from __future__ import annotations

import re

import numpy as np
import pytest

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{6})$")
_RGBA_RE = re.compile(
    r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([0-9.]+)\s*)?\)$",
)


def parse_color(color: str) -> tuple[int, int, int, float]:
    """Parse ``#rrggbb`` or ``rgb[a](r, g, b[, a])`` into an RGBA tuple."""
    m = _HEX_RE.match(color)
    if m:
        value = int(m.group(1), 16)
        return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 1.0
    m = _RGBA_RE.match(color)
    if m:
        r, g, b = (min(int(c), 255) for c in m.group(1, 2, 3))
        alpha = float(m.group(4)) if m.group(4) is not None else 1.0
        return r, g, b, min(max(alpha, 0.0), 1.0)
    raise ValueError(f"Unsupported color: {color!r}")


class ArrayCanvas:
    """NumPy RGB raster of shape ``(height, width, 3)``.

    Translucent colors are alpha-blended over what is already drawn.
    Lines are axis-aligned only, which is all the grid needs.
    """

    def __init__(
        self, width: int, height: int, background: str = "#000000",
    ) -> None:
        self.width = width
        self.height = height
        self.background = background
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)
        self.clear()

    def clear(self) -> None:
        r, g, b, _ = parse_color(self.background)
        self.pixels[:] = (r, g, b)

    def _paint(self, region: np.ndarray, color: str) -> None:
        r, g, b, a = parse_color(color)
        if a >= 1.0:
            region[:] = (r, g, b)
            return
        blended = region.astype(np.float64) * (1.0 - a) + np.array((r, g, b)) * a
        region[:] = np.rint(blended).astype(np.uint8)

    def stroke_line(self, x0, y0, x1, y1, color):
        if x0 == x1:
            if 0 <= x0 < self.width:
                lo, hi = sorted((y0, y1))
                self._paint(self.pixels[max(lo, 0):hi + 1, x0], color)
        elif y0 == y1:
            if 0 <= y0 < self.height:
                lo, hi = sorted((x0, x1))
                self._paint(self.pixels[y0, max(lo, 0):hi + 1], color)
        else:
            raise ValueError("ArrayCanvas only draws axis-aligned lines.")

    def fill_rect(self, x, y, w, h, color):
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x1 > x0 and y1 > y0:
            self._paint(self.pixels[y0:y1, x0:x1], color)

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.pixels[y, x].tolist()
        return r, g, b


@pytest.fixture()
def array_canvas():
    """Factory for raster canvases the renderer can draw onto."""
    return ArrayCanvas
