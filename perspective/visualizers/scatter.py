from __future__ import annotations

import math

import numpy as np

from ..canvas import blend_failure, blend_success
from ..events import EventDataPoint
from .base import BaseVisualizer, TimeRangeMixin, color_delta
from .sweep import check_log_scale


class ScatterVisualizer(TimeRangeMixin, BaseVisualizer):
    """One point per event: start time across, log2 of run time up."""

    def __init__(
        self,
        width: int,
        height: int,
        min_time: int,
        max_time: int,
        y_log2: float,
        color_steps: int,
        x_grid: int = 0,
    ) -> None:
        super().__init__(width, height)
        self._set_time_range(min_time, max_time)
        self.y_log2 = check_log_scale(y_log2)
        self.c_delta = color_delta(color_steps)
        self._draw_grid(x_grid)

    def record(self, event: EventDataPoint) -> None:
        if event.run <= 0:
            # log2 runs off to -inf; the point lands below the canvas.
            return
        x = self.time_to_x(event.start)
        y = self.h - int(self.y_log2 * math.log2(event.run))

        px = self.canvas.pixel(x, y)
        if event.status == 0:
            blend_success(px, self.c_delta)
        else:
            blend_failure(px, self.c_delta)

    def render(self) -> np.ndarray:
        return self.canvas.image()

    def _draw_grid(self, x_grid: int) -> None:
        if x_grid > 0:
            for x in range(0, self.w, max(1, self.w // x_grid)):
                self.canvas.draw_x_grid_line(x)

        # Single quadrant: doublings of run time measured up from the bottom.
        for y in range(self.h, 0, -max(1, int(self.y_log2))):
            self.canvas.draw_y_grid_line(y)

        self.canvas.draw_y_grid_line(0)
