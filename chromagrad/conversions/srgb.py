import numpy as np
from numpy import ndarray as NDArray
# No dependencies


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c >= 0.04045:
        return ((c + 0.055) / 1.055) ** 2.4
    return c / 12.92


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if c >= 0.0031308:
        return 1.055 * (c ** (1 / 2.4)) - 0.055
    return 12.92 * c


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=np.float64)
    return np.where(
        c >= 0.04045,
        ((np.maximum(c, 0.04045) + 0.055) / 1.055) ** 2.4,
        c / 12.92,
    )


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    c = np.asarray(c, dtype=np.float64)
    return np.where(
        c >= 0.0031308,
        1.055 * (np.maximum(c, 0.0031308) ** (1 / 2.4)) - 0.055,
        12.92 * c,
    )
