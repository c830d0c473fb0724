from .base import BaseVisualizer
from .factory import VISUALIZER_NAMES, make_visualizer
from .histogram import HistogramVisualizer
from .scatter import ScatterVisualizer
from .stacks import ErrorStackVisualizer, RollingStackVisualizer, StatusStackVisualizer
from .sweep import SweepVisualizer
from .wave import SortedWaveVisualizer, WaveVisualizer

__all__ = [
    "BaseVisualizer",
    "ErrorStackVisualizer",
    "HistogramVisualizer",
    "RollingStackVisualizer",
    "ScatterVisualizer",
    "SortedWaveVisualizer",
    "StatusStackVisualizer",
    "SweepVisualizer",
    "VISUALIZER_NAMES",
    "WaveVisualizer",
    "make_visualizer",
]
