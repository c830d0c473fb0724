from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional

# ---------------------------
# Constants
# ---------------------------

BG: int = 33                       # gray level for visualization backgrounds
GRID: int = 45                     # gray level for grid lines
OPAQUE: int = 255                  # alpha component of an opaque color value
SATURATED: int = 255               # saturated 8-bit color value
MAX_C16: int = 65535               # maximum 16-bit color channel value


def time_range_default() -> int:
    """Upper bound of the visualized time range when none is given: now."""
    return int(time.time())


# ---------------------------
# Config
# ---------------------------

@dataclass
class VisualizationConfig:
    # Canvas
    width: int = 256                   # rendered graph width, in pixels
    height: int = 128                  # rendered graph height, in pixels
    # Time range (seconds in Unix epoch time)
    min_time: int = 0
    max_time: int = field(default_factory=time_range_default)
    # Rendering
    x_grid: int = 0                    # vertical grid divisions; 0 = none
    y_log2: float = 16.0               # pixels along y for every doubling of run time
    color_steps: int = 1               # color steps before clipping
    # Filters; None disables the filter
    event_type: Optional[int] = None
    region: Optional[int] = None
    status: Optional[int] = None
    error_reason_filter: Optional[str] = None   # pipe-delimited regex config path
