from __future__ import annotations

from typing import List

import pytest

from perspective.events import EventData, EventDataPoint
from perspective.utils.configs import VisualizationConfig


def make_synthetic_events(n: int = 100) -> List[EventData]:
    """Evenly spaced, chronologically sorted events; even indexes pass."""
    return [
        EventData(
            id=i,
            type=1,
            start=1000 + 10 * i,
            run=5 + (i * 7) % 50,
            status=0 if i % 2 == 0 else 1 + i % 3,
            region=i % 4,
            progress=100,
        )
        for i in range(n)
    ]


@pytest.fixture
def synthetic_events() -> List[EventData]:
    return make_synthetic_events()


@pytest.fixture
def synthetic_points(synthetic_events) -> List[EventDataPoint]:
    return [e.to_point() for e in synthetic_events]


@pytest.fixture
def small_config() -> VisualizationConfig:
    return VisualizationConfig(
        width=64, height=32, min_time=1000, max_time=2000, x_grid=4, y_log2=4.0, color_steps=8
    )
