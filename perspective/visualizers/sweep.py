from __future__ import annotations

import math

import numpy as np

from ..canvas import blend_failure, blend_success
from ..events import EventDataPoint
from .base import BaseVisualizer, TimeRangeMixin, color_delta


def check_log_scale(y_log2: float) -> float:
    if y_log2 <= 0:
        raise ValueError(f"y_log2 must be positive, got {y_log2}")
    return float(y_log2)


class SweepVisualizer(TimeRangeMixin, BaseVisualizer):
    """Arc-density plot of event lifetimes.

    The x-axis is absolute time and the y-axis is a logarithmic representation
    of time elapsed since each event started, so every event is drawn as an arc
    out from the center line: successes above it, failures mirrored below.
    Overlapping arcs accumulate color to show density.
    """

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

    def arc_floor(self, elapsed: int) -> int:
        """Row the arc walks down to (exclusive) after `elapsed` seconds."""
        return self.h // 2 - int(self.y_log2 * math.log2(max(1, elapsed)))

    def record(self, event: EventDataPoint) -> None:
        t_min = event.start
        mid = self.h // 2
        # Seconds before min_time map to negative columns and only ever paint
        # the sink; start at the first on-canvas second with the walk already
        # at the row it would have reached.
        t_first = max(t_min, math.ceil(self.t_a))
        y = mid
        if t_first > t_min:
            y = min(mid, self.arc_floor(t_first - 1 - t_min) + 1)
        last = None
        for t in range(t_first, event.start + event.run + 1):
            x = self.time_to_x(t)
            if x >= self.w:
                break
            y_min = self.arc_floor(t - t_min)
            for y_step in range(y, y_min, -1):
                y = y_step
                # The walk resumes on the row it stopped at; within one column
                # that pixel has already been painted by this event.
                if (x, y) == last:
                    continue
                last = (x, y)
                if event.status == 0:
                    # Successes are plotted above the center line and allowed
                    # to desaturate in high-density regions.
                    blend_success(self.canvas.pixel(x, y), self.c_delta)
                else:
                    # Failures are plotted below the center line and kept
                    # saturated red.
                    blend_failure(self.canvas.pixel(x, self.h - y), self.c_delta)

    def render(self) -> np.ndarray:
        return self.canvas.image()

    def _draw_grid(self, x_grid: int) -> None:
        if x_grid > 0:
            for x in range(0, self.w, max(1, self.w // x_grid)):
                self.canvas.draw_x_grid_line(x)

        # Horizontal grid lines on each doubling of the run time in seconds
        for y in range(self.h // 2, self.h, max(1, int(self.y_log2))):
            self.canvas.draw_y_grid_line(y)
            self.canvas.draw_y_grid_line(self.h - y)

        self.canvas.draw_y_grid_line(0)
