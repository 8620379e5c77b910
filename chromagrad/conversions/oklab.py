"""
Oklab <-> linear-light RGB.

Reference: Björn Ottosson, "A perceptual color space for image processing"
https://bottosson.github.io/posts/oklab/
"""
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

_M1 = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ],
    dtype=np.float64,
)

_M2 = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)

_M2_INV = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ],
    dtype=np.float64,
)

_M1_INV = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ],
    dtype=np.float64,
)


def np_linear_rgb_to_oklab(rgb: NDArray) -> NDArray:
    """Vectorized: (..., 3) linear RGB to (..., 3) Oklab."""
    lms = np.asarray(rgb, dtype=np.float64) @ _M1.T
    # cbrt keeps the sign for out-of-gamut input
    return np.cbrt(lms) @ _M2.T


def np_oklab_to_linear_rgb(lab: NDArray) -> NDArray:
    """Vectorized: (..., 3) Oklab to (..., 3) linear RGB."""
    lms_cbrt = np.asarray(lab, dtype=np.float64) @ _M2_INV.T
    return (lms_cbrt ** 3) @ _M1_INV.T


def linear_rgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    l, a, b_ = np_linear_rgb_to_oklab(np.array([r, g, b]))
    return float(l), float(a), float(b_)


def oklab_to_linear_rgb(l: float, a: float, b: float) -> Tuple[float, float, float]:
    r, g, b_ = np_oklab_to_linear_rgb(np.array([l, a, b]))
    return float(r), float(g), float(b_)
