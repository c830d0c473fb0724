"""Perspective: graphing library for quality control in event-driven systems."""

from .canvas import Canvas
from .events import EventData, EventDataPoint

__all__ = ["Canvas", "EventData", "EventDataPoint"]

__version__ = "0.1.0"
