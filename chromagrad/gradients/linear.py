from __future__ import annotations

from ..colors.color import Color
from ..conversions.hsv import interpolate_hue
from ..conversions.wrapper import channels_to_color
from ..types.modes import BlendMode
from .base import StopGradient


class LinearGradient(StopGradient):
    """Piecewise-linear blending between consecutive stops."""

    __slots__ = ()

    def at(self, t: float) -> Color:
        clamped = self._clamped(t)
        if clamped is not None:
            return clamped

        i, u = self._locate(t)
        start = self.values[i]
        end = self.values[i + 1]
        blended = start + u * (end - start)

        if self.mode == BlendMode.HSV:
            blended[0] = interpolate_hue(start[0], end[0], u)

        return channels_to_color(blended, self.mode)
