from __future__ import annotations

import math

import numpy as np

from ..canvas import Canvas
from ..events import EventDataPoint
from ..utils.configs import SATURATED


class BaseVisualizer:
    """Base visualizer interface.

    Events are recorded one at a time, in chronological order, and the image is
    rendered once after the last event. Out-of-order input degrades the image
    but must never raise.
    """

    def __init__(self, width: int, height: int) -> None:
        self.w = width
        self.h = height
        self.canvas = Canvas(width, height)

    def record(self, event: EventDataPoint) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def render(self) -> np.ndarray:  # pragma: no cover - interface
        raise NotImplementedError


class TimeRangeMixin:
    """Linear mapping of absolute time onto canvas columns."""

    w: int

    def _set_time_range(self, min_time: int, max_time: int) -> None:
        if max_time <= min_time:
            raise ValueError(f"max_time ({max_time}) must be greater than min_time ({min_time})")
        self.t_a = float(min_time)
        self.t_omega = float(max_time)

    def time_to_x(self, t: float) -> int:
        return math.floor(self.w * (t - self.t_a) / (self.t_omega - self.t_a))


def color_delta(color_steps: int) -> float:
    """Per-event channel increment for a given number of steps to saturation."""
    if color_steps < 1:
        raise ValueError(f"color_steps must be at least 1, got {color_steps}")
    return SATURATED / color_steps
