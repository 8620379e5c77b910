from __future__ import annotations
import numpy as np
from typing import Sequence

from ..colors.color import Color
from ..conversions.wrapper import channels_to_color
from ..types.modes import BlendMode
from .base import StopGradient


def basis(t1: float, v0: np.ndarray, v1: np.ndarray, v2: np.ndarray, v3: np.ndarray) -> np.ndarray:
    """Uniform cubic B-spline blend of four control values at ``t1`` in [0, 1]."""
    t2 = t1 * t1
    t3 = t2 * t1
    return (
        (1.0 - 3.0 * t1 + 3.0 * t2 - t3) * v0
        + (4.0 - 6.0 * t2 + 3.0 * t3) * v1
        + (1.0 + 3.0 * t1 + 3.0 * t2 - 3.0 * t3) * v2
        + t3 * v3
    ) / 6.0


class BasisGradient(StopGradient):
    """
    Uniform cubic B-spline over the stop values.

    The curve smooths through the stops rather than hitting them; only the
    domain endpoints reproduce their colors exactly (by clamping).
    """

    __slots__ = ('control_points',)

    def __init__(self, colors: Sequence[Color], positions: Sequence[float], mode: BlendMode):
        super().__init__(colors, positions, mode)
        values = self.values
        self.control_points = np.vstack((
            2.0 * values[0] - values[1],
            values,
            2.0 * values[-1] - values[-2],
        ))

    def at(self, t: float) -> Color:
        clamped = self._clamped(t)
        if clamped is not None:
            return clamped

        i, t1 = self._locate(t)
        v0, v1, v2, v3 = self.control_points[i:i + 4]
        return channels_to_color(basis(t1, v0, v1, v2, v3), self.mode)
