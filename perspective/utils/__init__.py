from .configs import BG, GRID, MAX_C16, OPAQUE, SATURATED, VisualizationConfig

__all__ = ["BG", "GRID", "MAX_C16", "OPAQUE", "SATURATED", "VisualizationConfig"]
