"""
Canvas and color primitives shared by all visualizers.

A canvas is a (height, width, 4) uint8 RGBA array. Visualizers paint it through
`Canvas.pixel`, which hands back a writable view of one pixel when the
coordinates are in bounds and a scratch "sink" pixel otherwise, so mapping code
can draw outside the lines without separate bounds checks.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .utils.configs import BG, GRID, MAX_C16, OPAQUE, SATURATED

PASS_COLOR = (63, 63, SATURATED, OPAQUE)
FAIL_COLOR = (SATURATED, 11, 11, OPAQUE)


class Canvas:
    """Fixed-size RGBA pixel buffer filled with the background gray."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.empty((height, width, 4), dtype=np.uint8)
        self.pixels[:, :] = (BG, BG, BG, OPAQUE)
        # Shared target for out-of-bounds access; its content is meaningless.
        self._sink = np.zeros(4, dtype=np.uint8)

    def pixel(self, x: int, y: int) -> np.ndarray:
        """Return a writable view of the pixel at (x, y).

        Out-of-bounds coordinates return the sink pixel, so writes to it are
        quietly discarded. Callers should read/update the returned view and
        let it go, never keep it around.
        """
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.pixels[y, x]
        return self._sink

    def draw_x_grid_line(self, x: int) -> None:
        if 0 <= x < self.width:
            self.pixels[:, x] = (GRID, GRID, GRID, OPAQUE)

    def draw_y_grid_line(self, y: int) -> None:
        if 0 <= y < self.height:
            self.pixels[y, :] = (GRID, GRID, GRID, OPAQUE)

    def fill(self, x0: int, y0: int, x1: int, y1: int, color: Tuple[int, int, int, int]) -> None:
        """Fill the half-open rectangle [x0, x1) x [y0, y1), clipped to the canvas."""
        x0, x1 = max(0, x0), min(self.width, x1)
        y0, y1 = max(0, y0), min(self.height, y1)
        if x0 < x1 and y0 < y1:
            self.pixels[y0:y1, x0:x1] = color

    def image(self) -> np.ndarray:
        return self.pixels


# ---------------------------
# Color blending
# ---------------------------

def saturating_add(value: float, delta: float) -> int:
    """Add delta to an 8-bit channel value, clipping instead of wrapping."""
    return int(min(SATURATED, max(0.0, float(value) + delta)))


def blend_success(px: np.ndarray, delta: float) -> None:
    # Desaturates toward white in dense regions while staying blue-dominant.
    px[0] = saturating_add(px[0], delta / 4)
    px[1] = saturating_add(px[1], delta / 4)
    px[2] = saturating_add(px[2], delta)


def blend_failure(px: np.ndarray, delta: float) -> None:
    # Failures stay fully saturated red regardless of density.
    px[0] = saturating_add(px[0], delta)


def set_rgb16(px: np.ndarray, r16: float, g16: float, b16: float) -> None:
    """Store 16-bit channel intensities into an 8-bit pixel."""
    px[0] = int(min(MAX_C16, max(0.0, r16))) >> 8
    px[1] = int(min(MAX_C16, max(0.0, g16))) >> 8
    px[2] = int(min(MAX_C16, max(0.0, b16))) >> 8
    px[3] = OPAQUE


def error_stack_color(layer: int, layers: int) -> Tuple[int, int, int, int]:
    """Shade of red for one failure class in a stack of `layers` classes."""
    v = float(layer) * 255 / float(max(1, layers))
    return (int(127 + v / 2), int(11 + v * 2 / 3), int(11 + v * 2 / 3), OPAQUE)
