import math

import pytest

from chromagrad import BlendMode, Color
from chromagrad.gradients import LinearGradient


def test_midpoint_is_exact(black, white):
    grad = LinearGradient([black, white], [0.0, 1.0], BlendMode.RGB)
    assert grad.at(0.5) == Color(0.5, 0.5, 0.5, 1.0)


def test_endpoints_and_clamping(rgb_primaries):
    grad = LinearGradient(rgb_primaries, [-1.0, 0.0, 3.0], BlendMode.OKLAB)
    assert grad.at(-1.0) == rgb_primaries[0]
    assert grad.at(3.0) == rgb_primaries[-1]
    assert grad.at(-100.0) == rgb_primaries[0]
    assert grad.at(math.inf) == rgb_primaries[-1]


def test_interior_stop_is_hit(rgb_primaries, close):
    grad = LinearGradient(rgb_primaries, [0.0, 0.25, 1.0], BlendMode.LINEAR_RGB)
    assert close(grad.at(0.25), rgb_primaries[1], 1e-9)


def test_hard_step_on_repeated_position(close):
    colors = [
        Color.from_html("deeppink"),
        Color.from_html("#470a5e"),
        Color.from_html("red"),
        Color.from_html("#ff0"),
    ]
    grad = LinearGradient(colors, [0.0, 0.7, 0.7, 1.0], BlendMode.RGB)
    assert close(grad.at(0.7), colors[1])
    assert close(grad.at(0.7 + 1e-9), colors[2], 1e-6)
    assert close(grad.at(0.85), colors[2].interpolate_rgb(colors[3], 0.5), 1e-9)


def test_linear_rgb_midpoint(black, white):
    grad = LinearGradient([black, white], [0.0, 1.0], BlendMode.LINEAR_RGB)
    mid = grad.at(0.5)
    assert abs(mid.r - 0.7354) < 1e-3
    assert mid.r == mid.g == mid.b
    assert mid.a == 1.0


def test_hsv_takes_shortest_hue_arc(close):
    red = Color(1.0, 0.0, 0.0)
    blue = Color(0.0, 0.0, 1.0)
    grad = LinearGradient([red, blue], [0.0, 1.0], BlendMode.HSV)
    # 0° -> 240° goes backwards through magenta
    assert close(grad.at(0.5), Color(1.0, 0.0, 1.0), 1e-9)


def test_alpha_is_blended(close):
    grad = LinearGradient(
        [Color(1.0, 0.0, 0.0, 1.0), Color(1.0, 0.0, 0.0, 0.0)], [0.0, 1.0], BlendMode.RGB
    )
    assert close(grad.at(0.25), Color(1.0, 0.0, 0.0, 0.75))


def test_nan_gives_black_sentinel(black, white):
    grad = LinearGradient([white, white], [0.0, 1.0], BlendMode.RGB)
    assert grad.at(math.nan) == black


def test_needs_two_stops(black):
    with pytest.raises(ValueError):
        LinearGradient([black], [0.0], BlendMode.RGB)
    with pytest.raises(ValueError):
        LinearGradient([black, black], [0.0], BlendMode.RGB)
