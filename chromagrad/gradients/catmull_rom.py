from __future__ import annotations
import numpy as np
from typing import Sequence

from ..colors.color import Color
from ..conversions.wrapper import channels_to_color
from ..types.modes import BlendMode
from .base import StopGradient

ALPHA = 0.5
TENSION = 0.0


def to_catmull_segments(values: np.ndarray) -> np.ndarray:
    """
    Centripetal Catmull-Rom segments through per-channel stop values.

    Args:
        values: (n, channels) stop values, n >= 2.

    Returns:
        (n - 1, 4, channels) array; ``[i, :, ch]`` holds the cubic
        coefficients ``a, b, c, d`` of segment ``i`` for channel ``ch``.
    """
    values = np.asarray(values, dtype=np.float64)
    padded = np.vstack((
        2.0 * values[0] - values[1],
        values,
        2.0 * values[-1] - values[-2],
    ))

    v0 = padded[:-3]
    v1 = padded[1:-2]
    v2 = padded[2:-1]
    v3 = padded[3:]

    t0 = 0.0
    t1 = t0 + np.abs(v0 - v1) ** ALPHA
    t2 = t1 + np.abs(v1 - v2) ** ALPHA
    t3 = t2 + np.abs(v2 - v3) ** ALPHA

    # flat runs give 0 / 0 here; such tangents are 0
    with np.errstate(divide='ignore', invalid='ignore'):
        m1 = (1.0 - TENSION) * (t2 - t1) * (
            (v0 - v1) / (t0 - t1) - (v0 - v2) / (t0 - t2) + (v1 - v2) / (t1 - t2)
        )
        m2 = (1.0 - TENSION) * (t2 - t1) * (
            (v1 - v2) / (t1 - t2) - (v1 - v3) / (t1 - t3) + (v2 - v3) / (t2 - t3)
        )
    m1 = np.where(np.isnan(m1), 0.0, m1)
    m2 = np.where(np.isnan(m2), 0.0, m2)

    a = 2.0 * v1 - 2.0 * v2 + m1 + m2
    b = -3.0 * v1 + 3.0 * v2 - 2.0 * m1 - m2
    c = m1
    d = v1
    return np.stack((a, b, c, d), axis=1)


class CatmullRomGradient(StopGradient):
    """Centripetal Catmull-Rom spline (alpha 0.5, tension 0) through the stops."""

    __slots__ = ('segments',)

    def __init__(self, colors: Sequence[Color], positions: Sequence[float], mode: BlendMode):
        super().__init__(colors, positions, mode)
        self.segments = to_catmull_segments(self.values)

    def at(self, t: float) -> Color:
        clamped = self._clamped(t)
        if clamped is not None:
            return clamped

        i, t1 = self._locate(t)
        a, b, c, d = self.segments[i]
        t2 = t1 * t1
        t3 = t2 * t1
        return channels_to_color(a * t3 + b * t2 + c * t1 + d, self.mode)
