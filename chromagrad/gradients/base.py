from __future__ import annotations
import math
import numpy as np
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

from ..colors.color import Color, BLACK
from ..conversions.wrapper import convert_colors
from ..types.modes import BlendMode


class GradientBase(ABC):
    """Capability shared by every interpolation strategy: color at ``t``."""

    __slots__ = ()

    @abstractmethod
    def at(self, t: float) -> Color:
        """Evaluate the color at parameter ``t``. Never raises."""
        pass


class StopGradient(GradientBase):
    """
    Base for strategies built from a stop list.

    Holds the stop positions, the colors converted once into the blend mode's
    working space, the domain and the endpoint colors used for clamping.
    Nothing is mutated after ``__init__``.
    """

    __slots__ = ('positions', 'values', 'domain', 'mode', 'first_color', 'last_color')

    def __init__(self, colors: Sequence[Color], positions: Sequence[float], mode: BlendMode):
        if len(colors) < 2 or len(colors) != len(positions):
            raise ValueError(
                f"{self.__class__.__name__} needs at least 2 colors and one position per color, "
                f"got {len(colors)} colors and {len(positions)} positions"
            )
        self.positions = np.asarray(positions, dtype=np.float64)
        self.values = convert_colors(colors, mode)
        self.domain: Tuple[float, float] = (float(self.positions[0]), float(self.positions[-1]))
        self.mode = BlendMode(mode)
        self.first_color = colors[0]
        self.last_color = colors[-1]

    def _clamped(self, t: float) -> Optional[Color]:
        """Endpoint color for ``t`` outside the open domain, sentinel for NaN."""
        if t <= self.domain[0]:
            return self.first_color
        if t >= self.domain[1]:
            return self.last_color
        if math.isnan(t):
            return BLACK
        return None

    def _locate(self, t: float) -> Tuple[int, float]:
        """
        Segment index and local fraction for ``t`` strictly inside the domain.

        Picks the first segment with ``pos[i] <= t <= pos[i + 1]``, so a
        zero-width segment (hard step) is never selected.
        """
        i = int(np.searchsorted(self.positions, t, side='left')) - 1
        p0 = self.positions[i]
        p1 = self.positions[i + 1]
        return i, float((t - p0) / (p1 - p0))
