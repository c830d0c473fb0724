import numpy as np
import pytest

from perspective.events import EventDataPoint as E
from perspective.visualizers import VISUALIZER_NAMES, make_visualizer


def render_all(name, cfg, points):
    vis = make_visualizer(name, cfg)
    for p in points:
        vis.record(p)
    return vis.render().copy()


def test_synthetic_stream_is_balanced(synthetic_points):
    assert len(synthetic_points) == 100
    assert sum(p.status == 0 for p in synthetic_points) == 50
    starts = [p.start for p in synthetic_points]
    assert starts == sorted(starts)


@pytest.mark.parametrize("name", VISUALIZER_NAMES)
def test_rendering_is_deterministic(name, small_config, synthetic_points):
    first = render_all(name, small_config, synthetic_points)
    second = render_all(name, small_config, synthetic_points)
    assert first.shape == (small_config.height, small_config.width, 4)
    assert first.dtype == np.uint8
    assert np.array_equal(first, second)
    assert np.all(first[:, :, 3] == 255)


@pytest.mark.parametrize("name", VISUALIZER_NAMES)
def test_adversarial_input_degrades_without_raising(name, small_config, synthetic_points):
    hostile = list(reversed(synthetic_points)) + [
        E(-(2**31), 5, 0),
        E(2**31 - 1, 5, 1),
        E(1500, -10, 0),
        E(1500, 0, -1),
        E(900, 200, 7),
        E(1999, 2**20, 1),
    ]
    image = render_all(name, small_config, hostile)
    assert image.shape == (small_config.height, small_config.width, 4)
    assert np.all(image[:, :, 3] == 255)


@pytest.mark.parametrize("name", ["sweep", "scatter"])
def test_repeated_stream_never_dims_a_pixel(name, small_config, synthetic_points):
    once = render_all(name, small_config, synthetic_points).astype(int)
    twice = render_all(name, small_config, synthetic_points * 2).astype(int)
    assert np.all(twice >= once)
    assert np.any(twice > once)
