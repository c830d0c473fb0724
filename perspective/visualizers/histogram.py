from __future__ import annotations

import math

import numpy as np

from ..canvas import FAIL_COLOR, PASS_COLOR
from ..events import EventDataPoint
from .base import BaseVisualizer
from .stacks import stack_spans
from .sweep import check_log_scale


class HistogramVisualizer(BaseVisualizer):
    """Run-time histogram binned by log2 of elapsed time.

    Column x collects events whose run time falls in the bucket
    int(y_log2 * log2(run)); bars are stacked with passes at the bottom and
    failures above, scaled so the tallest column fills the canvas.
    """

    def __init__(self, width: int, height: int, y_log2: float) -> None:
        super().__init__(width, height)
        self.y_log2 = check_log_scale(y_log2)
        self.passed = np.zeros(width, dtype=np.int64)
        self.failed = np.zeros(width, dtype=np.int64)

    def record(self, event: EventDataPoint) -> None:
        x = int(self.y_log2 * math.log2(max(1, event.run)))
        if x >= self.w:
            return
        if event.status == 0:
            self.passed[x] += 1
        else:
            self.failed[x] += 1

    def render(self) -> np.ndarray:
        totals = self.passed + self.failed
        scale = int(totals.max())
        for x in np.flatnonzero(totals):
            segments = [(int(self.passed[x]), PASS_COLOR), (int(self.failed[x]), FAIL_COLOR)]
            for y0, y1, color in stack_spans(segments, scale, self.h):
                self.canvas.fill(int(x), y0, int(x) + 1, y1, color)
        return self.canvas.image()
