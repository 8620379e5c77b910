from __future__ import annotations
import numpy as np
from typing import Callable, Dict, Sequence, TYPE_CHECKING

from ..types.modes import BlendMode
from .srgb import np_srgb_to_linear
from .oklab import np_linear_rgb_to_oklab

if TYPE_CHECKING:
    from ..colors.color import Color


def convert_colors(colors: Sequence[Color], mode: BlendMode) -> np.ndarray:
    """
    Map colors into the channel space of a blend mode.

    Args:
        colors: Ordered colors.
        mode: Blend mode selecting the working space.

    Returns:
        (n, 4) float64 array, one row of channel values per color, alpha last.
    """
    mode = BlendMode(mode)
    if mode == BlendMode.HSV:
        return np.array([c.to_hsva() for c in colors], dtype=np.float64).reshape(-1, 4)

    values = np.array([c.to_tuple() for c in colors], dtype=np.float64).reshape(-1, 4)
    if mode == BlendMode.LINEAR_RGB:
        values[:, :3] = np_srgb_to_linear(values[:, :3])
    elif mode == BlendMode.OKLAB:
        values[:, :3] = np_linear_rgb_to_oklab(np_srgb_to_linear(values[:, :3]))
    return values


def channels_to_color(values: Sequence[float], mode: BlendMode) -> Color:
    """Inverse of ``convert_colors`` for a single row of channel values."""
    from ..colors.color import Color

    c0, c1, c2, c3 = (float(v) for v in values)
    builders: Dict[BlendMode, Callable[..., Color]] = {
        BlendMode.RGB: Color,
        BlendMode.LINEAR_RGB: Color.from_linear_rgba,
        BlendMode.OKLAB: Color.from_oklaba,
        BlendMode.HSV: Color.from_hsva,
    }
    return builders[mode](c0, c1, c2, c3)
