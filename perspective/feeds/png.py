from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import cv2
import numpy as np

from ..visualizers.base import BaseVisualizer
from .base import FeedError, event_filter
from .binlog import read_binlog

PathLike = Union[str, Path]


def write_png(path: PathLike, image: np.ndarray) -> None:
    """Encode an RGBA canvas image as PNG."""
    bgra = cv2.cvtColor(image, cv2.COLOR_RGBA2BGRA)
    try:
        ok = cv2.imwrite(str(path), bgra)
    except cv2.error as exc:
        raise FeedError(f"Failed to encode PNG '{path}': {exc}") from exc
    if not ok:
        raise FeedError(f"Failed to write PNG '{path}'")


def generate_png_from_binlog(
    i_path: PathLike,
    o_path: PathLike,
    visualizer: BaseVisualizer,
    min_time: Optional[int] = None,
    max_time: Optional[int] = None,
    event_type: Optional[int] = None,
    region: Optional[int] = None,
    status: Optional[int] = None,
) -> int:
    """Feed filtered events from a binary log into a visualizer and save the result.

    Events are recorded in file order, which is expected to be chronological.
    Returns the number of events recorded.
    """
    recorded = 0
    for event in read_binlog(i_path):
        if event_filter(event, min_time, max_time, event_type, region, status):
            visualizer.record(event.to_point())
            recorded += 1
    write_png(o_path, visualizer.render())
    return recorded
