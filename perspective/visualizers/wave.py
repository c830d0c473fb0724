from __future__ import annotations

from typing import Iterable, List

import numpy as np

from ..canvas import set_rgb16
from ..events import EventDataPoint
from ..utils.configs import BG, MAX_C16
from .base import BaseVisualizer, TimeRangeMixin


def progress(event: EventDataPoint, now: int) -> float:
    """Fraction of an in-flight event's run time elapsed as of `now`."""
    return float(now - event.start) / float(max(1, event.run + 1))


class WaveVisualizer(TimeRangeMixin, BaseVisualizer):
    """Horizontally scrolling trace of in-flight events.

    Each column shows the events still running when the column was reached:
    passing events stack up from the center line, failing events stack down
    from it, and each event's shade tracks how far it has progressed through
    its run time.
    """

    def __init__(self, width: int, height: int, min_time: int, max_time: int) -> None:
        super().__init__(width, height)
        self._set_time_range(min_time, max_time)
        self.x = 0
        self.passing: List[EventDataPoint] = []
        self.failing: List[EventDataPoint] = []

    def record(self, event: EventDataPoint) -> None:
        # NOTE: Input is expected in chronological order. Out-of-order input
        #       leaves stale events in the window and skips columns already
        #       drawn, so the image degrades with the degree of misordering.
        self.passing = [p for p in self.passing if p.start + p.run > event.start]
        self.failing = [f for f in self.failing if f.start + f.run > event.start]
        if event.status == 0:
            self.passing.append(event)
        else:
            self.failing.append(event)

        # Columns past the right edge would only ever paint the sink pixel.
        target = min(self.time_to_x(event.start), self.w)
        while self.x < target:
            self.x += 1
            self._draw_column(event.start)

    def render(self) -> np.ndarray:
        return self.canvas.image()

    def column_order(self, events: List[EventDataPoint], now: int) -> Iterable[EventDataPoint]:
        """Order in which active events are stacked out from the center line."""
        return reversed(events)

    def _draw_column(self, now: int) -> None:
        mid = self.h // 2
        base16 = BG << 8
        for k, p in enumerate(self.column_order(self.passing, now)):
            if mid - k < 0:
                break
            prog = progress(p, now)
            rg16 = base16 + MAX_C16 * prog / 4
            b16 = base16 + MAX_C16 * prog
            set_rgb16(self.canvas.pixel(self.x, mid - k), rg16, rg16, b16)
        for k, f in enumerate(self.column_order(self.failing, now)):
            if mid + k >= self.h:
                break
            prog = progress(f, now)
            r16 = base16 + MAX_C16 * prog
            gb16 = base16 + MAX_C16 * prog / 4
            set_rgb16(self.canvas.pixel(self.x, mid + k), r16, gb16, gb16)


class SortedWaveVisualizer(WaveVisualizer):
    """Wave variant stacking the most progressed events nearest the center."""

    def column_order(self, events: List[EventDataPoint], now: int) -> Iterable[EventDataPoint]:
        return sorted(events, key=lambda e: progress(e, now), reverse=True)
