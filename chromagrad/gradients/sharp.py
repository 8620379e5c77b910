from __future__ import annotations
import math
import numpy as np
from typing import List, Sequence, Tuple
from boundednumbers.functions import clamp

from ..colors.color import Color, BLACK
from .base import GradientBase


def sharp_stops(
    colors: Sequence[Color],
    domain: Tuple[float, float],
    smoothness: float,
) -> Tuple[np.ndarray, List[Color]]:
    """
    Lay out ``n`` colors as ``n`` flat bands over the domain.

    Every color appears twice, at the start and end of its band. Interior band
    edges are pulled inward by ``smoothness * span / n / 4`` to open a linear
    ramp between neighbouring bands.
    """
    n = len(colors)
    dmin, dmax = domain
    width = clamp(smoothness, 0.0, 1.0) * (dmax - dmin) / n / 4.0
    edges = np.linspace(dmin, dmax, n + 1)

    positions = np.repeat(edges, 2)[1:-1].copy()
    positions[2::2] += width
    positions[1:-1:2] -= width

    stop_colors = [c for color in colors for c in (color, color)]
    return positions, stop_colors


class SharpGradient(GradientBase):
    """Posterized gradient: flat bands joined by optional thin RGB ramps."""

    __slots__ = ('positions', 'colors', 'domain', 'first_color', 'last_color')

    def __init__(self, colors: Sequence[Color], domain: Tuple[float, float], smoothness: float):
        if not colors:
            raise ValueError("SharpGradient needs at least one color")
        self.positions, self.colors = sharp_stops(colors, domain, smoothness)
        self.domain = (float(domain[0]), float(domain[1]))
        self.first_color = colors[0]
        self.last_color = colors[-1]

    def at(self, t: float) -> Color:
        if t <= self.domain[0]:
            return self.first_color
        if t >= self.domain[1]:
            return self.last_color
        if math.isnan(t):
            return BLACK

        high = max(int(np.searchsorted(self.positions, t, side='left')), 1)
        low = high - 1

        # even lower stop: inside a flat band
        if low % 2 == 0:
            return self.colors[low]

        p0 = self.positions[low]
        p1 = self.positions[high]
        return self.colors[low].interpolate_rgb(self.colors[high], float((t - p0) / (p1 - p0)))
