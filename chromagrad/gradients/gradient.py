from __future__ import annotations
import numpy as np
from typing import Iterable, List, Tuple
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import bounce, cyclic_wrap_float

from ..colors.color import Color
from .base import GradientBase
from .sharp import SharpGradient


class Gradient:
    """
    A color gradient over a one-dimensional domain.

    Wraps exactly one interpolation strategy. Built by ``GradientBuilder`` /
    ``build_gradient`` or by ``Gradient.sharp``; immutable afterwards, so it
    can be evaluated from several threads at once.

    Examples
    --------
    >>> from chromagrad import build_gradient
    >>> grad = build_gradient(html_colors=["deeppink", "gold", "seagreen"], positions=[0, 100])
    >>> grad.domain()
    (0.0, 100.0)
    >>> grad.at(0).to_rgba8()
    (255, 20, 147, 255)
    """

    __slots__ = ('_gradient', '_dmin', '_dmax')

    def __init__(self, gradient: GradientBase, dmin: float, dmax: float) -> None:
        self._gradient = gradient
        self._dmin = float(dmin)
        self._dmax = float(dmax)

    def at(self, t: float) -> Color:
        """Color at ``t``; positions outside the domain clamp to the end colors."""
        return self._gradient.at(float(t))

    def repeat_at(self, t: float) -> Color:
        """Color at ``t`` with the domain repeated end to end."""
        if self._dmin == self._dmax:
            return self.at(self._dmin)
        return self.at(cyclic_wrap_float(float(t), self._dmin, self._dmax))

    def reflect_at(self, t: float) -> Color:
        """Color at ``t`` with the domain mirrored back and forth."""
        if self._dmin == self._dmax:
            return self.at(self._dmin)
        return self.at(bounce(float(t), self._dmin, self._dmax))

    def domain(self) -> Tuple[float, float]:
        return self._dmin, self._dmax

    def colors(self, n: int) -> List[Color]:
        """``n`` colors sampled at evenly spaced positions across the domain."""
        if n == 1:
            return [self.at(self._dmin)]
        return [self.at(t) for t in np.linspace(self._dmin, self._dmax, n)]

    def sample(self, ts: Iterable[float], bound_type: BoundType = BoundType.CLAMP) -> np.ndarray:
        """
        Evaluate many positions at once.

        Args:
            ts: Positions in domain units.
            bound_type: How positions outside the domain are folded back
                (CLAMP, CYCLIC, BOUNCE; IGNORE leaves them to ``at``).

        Returns:
            (len(ts), 4) float64 RGBA array.
        """
        ts = np.asarray(list(ts), dtype=np.float64)
        span = self._dmax - self._dmin
        if span > 0 and bound_type is not BoundType.IGNORE:
            u = (ts - self._dmin) / span
            ts = self._dmin + bound_type_to_np_function[bound_type](u, 0.0, 1.0) * span
        return np.array([self.at(t).to_tuple() for t in ts], dtype=np.float64).reshape(-1, 4)

    def to_rgba8_array(self, width: int) -> np.ndarray:
        """(width, 4) uint8 strip sampled across the domain, saturated to [0, 255]."""
        rgba = self.sample(np.linspace(self._dmin, self._dmax, width))
        return np.floor(np.clip(rgba, 0.0, 1.0) * 255 + 0.5).astype(np.uint8)

    def sharp(self, segment_count: int, smoothness: float) -> Gradient:
        """
        Discretize into ``segment_count`` flat bands.

        Args:
            segment_count: Number of bands; below 2 gives a single band of
                the first color.
            smoothness: 0 for hard steps, up to 1 for the widest ramps.
        """
        domain = (self._dmin, self._dmax)
        if segment_count < 2:
            colors = [self.at(self._dmin)]
        else:
            colors = self.colors(segment_count)
        return Gradient(SharpGradient(colors, domain, smoothness), *domain)

    def __repr__(self) -> str:
        return f"Gradient({self._gradient.__class__.__name__}, domain=({self._dmin!r}, {self._dmax!r}))"
