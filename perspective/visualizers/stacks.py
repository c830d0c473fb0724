"""
Stacked aggregate visualizers.

These accumulate counts while recording and only paint in `render`, scaling
each stack against the largest total seen.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence, Tuple

import numpy as np

from ..canvas import PASS_COLOR, error_stack_color
from ..events import EventDataPoint
from .base import BaseVisualizer, TimeRangeMixin

Color = Tuple[int, int, int, int]
Segment = Tuple[int, Color]


def stack_spans(segments: Sequence[Segment], scale: int, height: int) -> List[Tuple[int, int, Color]]:
    """Row spans (y0, y1, color) for segments stacked up from the bottom edge.

    A cumulative count equal to `scale` reaches the top of the canvas.
    """
    spans: List[Tuple[int, int, Color]] = []
    if scale <= 0:
        return spans
    cumulative = 0
    top = height
    for count, color in segments:
        if count <= 0:
            continue
        cumulative += count
        y0 = height - int(round(cumulative * height / scale))
        if y0 < top:
            spans.append((y0, top, color))
            top = y0
    return spans


def failure_segments(counts: Dict[int, int]) -> List[Segment]:
    """Failure classes in ascending status order, each in its own shade of red."""
    statuses = sorted(s for s in counts if s != 0)
    return [(counts[s], error_stack_color(i, len(statuses))) for i, s in enumerate(statuses)]


class RollingStackVisualizer(TimeRangeMixin, BaseVisualizer):
    """Stacked bars over time: successes, then each failure class, per column."""

    def __init__(self, width: int, height: int, min_time: int, max_time: int) -> None:
        super().__init__(width, height)
        self._set_time_range(min_time, max_time)
        self.passed = np.zeros(width, dtype=np.int64)
        self.failed: Dict[int, np.ndarray] = {}

    def record(self, event: EventDataPoint) -> None:
        x = self.time_to_x(event.start)
        if not 0 <= x < self.w:
            return
        if event.status == 0:
            self.passed[x] += 1
        else:
            if event.status not in self.failed:
                self.failed[event.status] = np.zeros(self.w, dtype=np.int64)
            self.failed[event.status][x] += 1

    def render(self) -> np.ndarray:
        totals = self.passed.copy()
        for column_counts in self.failed.values():
            totals += column_counts
        scale = int(totals.max())
        statuses = sorted(self.failed)
        for x in range(self.w):
            if totals[x] == 0:
                continue
            segments: List[Segment] = [(int(self.passed[x]), PASS_COLOR)]
            for i, s in enumerate(statuses):
                segments.append((int(self.failed[s][x]), error_stack_color(i, len(statuses))))
            for y0, y1, color in stack_spans(segments, scale, self.h):
                self.canvas.fill(x, y0, x + 1, y1, color)
        return self.canvas.image()


class StatusStackVisualizer(BaseVisualizer):
    """Full-width bands sized by each status's share of all recorded events."""

    include_successes = True

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self.counts: Counter = Counter()

    def record(self, event: EventDataPoint) -> None:
        self.counts[event.status] += 1

    def segments(self) -> List[Segment]:
        segments = failure_segments(self.counts)
        if self.include_successes:
            segments.insert(0, (self.counts[0], PASS_COLOR))
        return segments

    def render(self) -> np.ndarray:
        segments = self.segments()
        scale = sum(count for count, _ in segments)
        for y0, y1, color in stack_spans(segments, scale, self.h):
            self.canvas.fill(0, y0, self.w, y1, color)
        return self.canvas.image()


class ErrorStackVisualizer(StatusStackVisualizer):
    """Status stack over failures only; successes are counted but not drawn."""

    include_successes = False
