from __future__ import annotations

from typing import Callable, Dict

from ..utils.configs import VisualizationConfig
from .base import BaseVisualizer
from .histogram import HistogramVisualizer
from .scatter import ScatterVisualizer
from .stacks import ErrorStackVisualizer, RollingStackVisualizer, StatusStackVisualizer
from .sweep import SweepVisualizer
from .wave import SortedWaveVisualizer, WaveVisualizer

_BUILDERS: Dict[str, Callable[[VisualizationConfig], BaseVisualizer]] = {
    "error-stack": lambda c: ErrorStackVisualizer(c.width, c.height),
    "histogram": lambda c: HistogramVisualizer(c.width, c.height, c.y_log2),
    "rolling-stack": lambda c: RollingStackVisualizer(c.width, c.height, c.min_time, c.max_time),
    "scatter": lambda c: ScatterVisualizer(
        c.width, c.height, c.min_time, c.max_time, c.y_log2, c.color_steps, c.x_grid
    ),
    "status-stack": lambda c: StatusStackVisualizer(c.width, c.height),
    "sweep": lambda c: SweepVisualizer(
        c.width, c.height, c.min_time, c.max_time, c.y_log2, c.color_steps, c.x_grid
    ),
    "wave": lambda c: WaveVisualizer(c.width, c.height, c.min_time, c.max_time),
    "wave-sorted": lambda c: SortedWaveVisualizer(c.width, c.height, c.min_time, c.max_time),
}

VISUALIZER_NAMES = tuple(sorted(_BUILDERS))


def make_visualizer(name: str, cfg: VisualizationConfig) -> BaseVisualizer:
    """Factory for visualizers.

    Returns a fresh visualizer for one record/render cycle.
    """
    builder = _BUILDERS.get(name.lower())
    if builder is None:
        raise ValueError(f"Unknown visualization '{name}'. Available: {', '.join(VISUALIZER_NAMES)}")
    return builder(cfg)
