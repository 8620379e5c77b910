from typing import Tuple
from ..types.modes import HUE_360


def normalize_angle(h: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    h = h % HUE_360
    # tiny negative inputs round up to exactly 360
    return 0.0 if h >= HUE_360 else h


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Nonlinear sRGB (0..1) to HSV.

    Output:
        h ∈ [0, 360)   (0 for achromatic input)
        s ∈ [0, 1]
        v ∈ [0, 1]
    """
    v = max(r, g, b)
    m = min(r, g, b)
    delta = v - m

    if delta == 0:
        h = 0.0
    elif v == r:
        h = 60.0 * (((g - b) / delta) % 6)
    elif v == g:
        h = 60.0 * ((b - r) / delta + 2)
    else:
        h = 60.0 * ((r - g) / delta + 4)

    s = 0.0 if v == 0 else delta / v
    return normalize_angle(h), s, v


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """HSV (hue in degrees) to nonlinear sRGB (0..1)."""
    h = normalize_angle(h) / 60.0

    def channel(n: float) -> float:
        k = (n + h) % 6
        return v - v * s * max(0.0, min(k, 4.0 - k, 1.0))

    return channel(5), channel(3), channel(1)


def interpolate_hue(h0: float, h1: float, t: float) -> float:
    """Interpolate along the shortest arc between two hues."""
    delta = (h1 - h0) % HUE_360
    if delta > HUE_360 / 2:
        delta -= HUE_360
    return normalize_angle(h0 + t * delta)
