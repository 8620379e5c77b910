"""
Chromagrad Color Space Conversions
==================================

Scalar and vectorized (numpy) conversions between the channel spaces used
for gradient blending.

Conversion Functions
-------------------

sRGB ↔ linear RGB:
    srgb_to_linear(c), linear_to_srgb(c)
        Scalar transfer functions
    np_srgb_to_linear(c), np_linear_to_srgb(c)
        Vectorized transfer functions

linear RGB ↔ Oklab:
    linear_rgb_to_oklab(r, g, b), oklab_to_linear_rgb(l, a, b)
    np_linear_rgb_to_oklab(rgb), np_oklab_to_linear_rgb(lab)

RGB ↔ HSV:
    unit_rgb_to_hsv(r, g, b), hsv_to_unit_rgb(h, s, v)
    interpolate_hue(h0, h1, t)
        Shortest-arc hue blend

Blend Mode API
--------------
    convert_colors(colors, mode)
        Colors to an (n, 4) array in the blend mode's working space
    channels_to_color(values, mode)
        One row of working-space channels back to a Color

Notes
-----
None of these functions clamp. Out-of-gamut values pass through untouched so
that interpolation results survive the round trip.
"""

from .srgb import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb
from .oklab import (
    linear_rgb_to_oklab,
    oklab_to_linear_rgb,
    np_linear_rgb_to_oklab,
    np_oklab_to_linear_rgb,
)
from .hsv import unit_rgb_to_hsv, hsv_to_unit_rgb, interpolate_hue, normalize_angle
from .wrapper import convert_colors, channels_to_color

__all__ = [
    # sRGB ↔ linear
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # linear ↔ Oklab
    'linear_rgb_to_oklab',
    'oklab_to_linear_rgb',
    'np_linear_rgb_to_oklab',
    'np_oklab_to_linear_rgb',

    # RGB ↔ HSV
    'unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'interpolate_hue',
    'normalize_angle',

    # Blend mode API
    'convert_colors',
    'channels_to_color',
]
