import math

import numpy as np
import pytest

from chromagrad import Color
from chromagrad.gradients import SharpGradient
from chromagrad.gradients.sharp import sharp_stops


def test_stop_layout_without_smoothing(rgb_primaries):
    positions, colors = sharp_stops(rgb_primaries, (0.0, 1.0), 0.0)
    assert np.allclose(positions, [0.0, 1 / 3, 1 / 3, 2 / 3, 2 / 3, 1.0])
    assert colors == [c for c in rgb_primaries for _ in range(2)]


def test_stop_layout_with_smoothing(rgb_primaries):
    positions, _ = sharp_stops(rgb_primaries, (0.0, 1.0), 1.0)
    w = 1 / 12
    assert np.allclose(positions, [0.0, 1 / 3 - w, 1 / 3 + w, 2 / 3 - w, 2 / 3 + w, 1.0])


def test_smoothness_is_clamped(rgb_primaries):
    wide, _ = sharp_stops(rgb_primaries, (0.0, 1.0), 5.0)
    widest, _ = sharp_stops(rgb_primaries, (0.0, 1.0), 1.0)
    narrow, _ = sharp_stops(rgb_primaries, (0.0, 1.0), -1.0)
    step, _ = sharp_stops(rgb_primaries, (0.0, 1.0), 0.0)
    assert np.array_equal(wide, widest)
    assert np.array_equal(narrow, step)


@pytest.mark.parametrize("smoothness", [0.0, 0.5, 1.0])
def test_band_midpoints_are_flat(rgb_primaries, smoothness):
    grad = SharpGradient(rgb_primaries, (0.0, 30.0), smoothness)
    for k, color in enumerate(rgb_primaries):
        assert grad.at(10.0 * k + 5.0) == color


def test_step_without_smoothing(rgb_primaries):
    grad = SharpGradient(rgb_primaries, (0.0, 1.0), 0.0)
    assert grad.at(1 / 3 - 1e-9) == rgb_primaries[0]
    assert grad.at(1 / 3 + 1e-9) == rgb_primaries[1]


def test_ramp_blends_in_rgb(rgb_primaries, close):
    grad = SharpGradient(rgb_primaries, (0.0, 1.0), 1.0)
    expected = rgb_primaries[0].interpolate_rgb(rgb_primaries[1], 0.5)
    assert close(grad.at(1 / 3), expected, 1e-9)


def test_clamps_outside_domain(rgb_primaries):
    grad = SharpGradient(rgb_primaries, (0.0, 1.0), 0.3)
    assert grad.at(-1.0) == rgb_primaries[0]
    assert grad.at(0.0) == rgb_primaries[0]
    assert grad.at(1.0) == rgb_primaries[-1]
    assert grad.at(2.0) == rgb_primaries[-1]


def test_single_band():
    gold = Color.from_html("gold")
    grad = SharpGradient([gold], (0.0, 1.0), 0.5)
    assert all(grad.at(t) == gold for t in (-1.0, 0.0, 0.3, 0.99, 1.0))


def test_nan_gives_black_sentinel(rgb_primaries, black):
    grad = SharpGradient(rgb_primaries, (0.0, 1.0), 0.0)
    assert grad.at(math.nan) == black


def test_needs_a_color():
    with pytest.raises(ValueError):
        SharpGradient([], (0.0, 1.0), 0.0)
