from __future__ import annotations
import logging
import warnings
import numpy as np
from numbers import Real
from typing import Any, Dict, List, Sequence, Type, Union

from .colors.color import Color, BLACK, WHITE
from .errors import InvalidColorError, WrongDomainCountError, WrongDomainError
from .gradients.base import StopGradient
from .gradients.basis import BasisGradient
from .gradients.catmull_rom import CatmullRomGradient
from .gradients.gradient import Gradient
from .gradients.linear import LinearGradient
from .types.color_types import ColorLike
from .types.modes import BlendMode, Interpolation

logger = logging.getLogger(__name__)

DEFAULT_COLORS = (BLACK, WHITE)
DEFAULT_BLEND_MODE = BlendMode.RGB
DEFAULT_INTERPOLATION = Interpolation.LINEAR

STRATEGIES: Dict[Interpolation, Type[StopGradient]] = {
    Interpolation.LINEAR: LinearGradient,
    Interpolation.CATMULL_ROM: CatmullRomGradient,
    Interpolation.BASIS: BasisGradient,
}


def _flatten(items: Sequence[Any], keep_channel_tuples: bool = False) -> List[Any]:
    """Accept both ``f(a, b, c)`` and ``f([a, b, c])``."""
    if (
        len(items) == 1
        and isinstance(items[0], (list, tuple, np.ndarray))
        and not (keep_channel_tuples and _is_channel_tuple(items[0]))
    ):
        return list(items[0])
    return list(items)


def _is_channel_tuple(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) in (3, 4)
        and all(isinstance(v, Real) for v in value)
    )


class GradientBuilder:
    """
    Collects colors, positions and modes, then validates them into a Gradient.

    Color strings that fail to parse are remembered and reported together
    when ``build`` is called.

    Examples
    --------
    >>> grad = (
    ...     GradientBuilder()
    ...     .html_colors("#C41189", "#00BFFF", "#FFD700")
    ...     .domain(0, 100)
    ...     .interpolation(Interpolation.CATMULL_ROM)
    ...     .build()
    ... )
    >>> grad.domain()
    (0.0, 100.0)
    """

    def __init__(self) -> None:
        self._colors: List[Color] = []
        self._positions: List[float] = []
        self._mode: BlendMode = DEFAULT_BLEND_MODE
        self._interpolation: Interpolation = DEFAULT_INTERPOLATION
        self._invalid_html_colors: List[str] = []

    def colors(self, *colors: ColorLike) -> GradientBuilder:
        """Append colors: ``Color`` objects, ``(r, g, b[, a])`` float tuples or color strings."""
        for color in _flatten(colors, keep_channel_tuples=True):
            if isinstance(color, Color):
                self._colors.append(color)
            elif isinstance(color, str):
                self.html_colors(color)
            elif _is_channel_tuple(color):
                self._colors.append(Color(*color))
            else:
                raise TypeError(f"Cannot interpret {color!r} as a color")
        return self

    def html_colors(self, *html_colors: str) -> GradientBuilder:
        """Append colors given in CSS / web syntax; bad strings fail at ``build``."""
        for text in _flatten(html_colors):
            try:
                self._colors.append(Color.from_html(text))
            except ValueError:
                self._invalid_html_colors.append(str(text))
        return self

    def domain(self, *positions: float) -> GradientBuilder:
        """Set the color positions, or just ``(min, max)`` to spread colors evenly."""
        self._positions = [float(p) for p in _flatten(positions)]
        return self

    def positions(self, *positions: float) -> GradientBuilder:
        warnings.warn(
            "GradientBuilder.positions is deprecated. Use GradientBuilder.domain instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.domain(*positions)

    def mode(self, mode: Union[BlendMode, str]) -> GradientBuilder:
        self._mode = BlendMode(mode)
        return self

    def interpolation(self, interpolation: Union[Interpolation, str]) -> GradientBuilder:
        self._interpolation = Interpolation(interpolation)
        return self

    def _normalized_colors(self) -> List[Color]:
        if not self._colors:
            return list(DEFAULT_COLORS)
        if len(self._colors) == 1:
            return [self._colors[0], self._colors[0]]
        return list(self._colors)

    def _normalized_positions(self, count: int) -> List[float]:
        pos = self._positions
        if not pos:
            return np.linspace(0.0, 1.0, count).tolist()
        if len(pos) == count:
            if any(p0 > p1 for p0, p1 in zip(pos, pos[1:])):
                raise WrongDomainError()
            return list(pos)
        if len(pos) == 2:
            if pos[0] >= pos[1]:
                raise WrongDomainError()
            return np.linspace(pos[0], pos[1], count).tolist()
        raise WrongDomainCountError()

    def _resolved_mode(self) -> BlendMode:
        if self._mode == BlendMode.HSV and self._interpolation != Interpolation.LINEAR:
            logger.debug(
                "HSV blending has no spline form; using RGB for %s interpolation",
                self._interpolation.value,
            )
            return BlendMode.RGB
        return self._mode

    def build(self) -> Gradient:
        """
        Validate the collected input and construct the gradient.

        Raises:
            InvalidColorError: some color strings did not parse.
            WrongDomainError: positions decrease, or ``min >= max``.
            WrongDomainCountError: position count is not 0, 2 or the color count.
        """
        if self._invalid_html_colors:
            raise InvalidColorError(self._invalid_html_colors)

        colors = self._normalized_colors()
        positions = self._normalized_positions(len(colors))
        mode = self._resolved_mode()

        strategy = STRATEGIES[self._interpolation](colors, positions, mode)
        logger.debug(
            "Built %s gradient: %d stops over [%s, %s] in %s",
            self._interpolation.value, len(colors), positions[0], positions[-1], mode.value,
        )
        return Gradient(strategy, positions[0], positions[-1])


def build_gradient(
    colors: Sequence[ColorLike] = (),
    html_colors: Sequence[str] = (),
    positions: Sequence[float] = (),
    blend_mode: Union[BlendMode, str] = DEFAULT_BLEND_MODE,
    interpolation: Union[Interpolation, str] = DEFAULT_INTERPOLATION,
) -> Gradient:
    """One-call form of ``GradientBuilder``: colors first, then html colors."""
    builder = GradientBuilder()
    if colors:
        builder.colors(list(colors))
    if html_colors:
        builder.html_colors(list(html_colors))
    return (
        builder
        .domain(list(positions))
        .mode(blend_mode)
        .interpolation(interpolation)
        .build()
    )
