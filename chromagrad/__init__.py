"""
Chromagrad - Color Gradient Evaluation
======================================

Sample smooth or posterized color gradients at any resolution, for heatmaps,
color ramps and other visualizations.

Key Features
------------
- Immutable RGBA colors with sRGB, linear RGB, Oklab and HSV conversions
- Blending in RGB, linear RGB, Oklab or HSV
- Linear, centripetal Catmull-Rom and uniform B-spline interpolation
- Arbitrary domains and explicit color positions (including hard steps)
- Sharp (discretized) gradients with adjustable transition width
- CSS / web color strings as input

Quick Start
-----------
>>> from chromagrad import build_gradient, BlendMode, Interpolation
>>>
>>> grad = build_gradient(
...     html_colors=["#C41189", "#00BFFF", "#FFD700"],
...     blend_mode=BlendMode.OKLAB,
...     interpolation=Interpolation.CATMULL_ROM,
... )
>>> grad.at(0.0).to_hex_string()
'#c41189'
>>>
>>> # Posterize into 5 flat bands
>>> bands = grad.sharp(5, 0.0)
>>> [c.to_hex_string() for c in bands.colors(5)]  # doctest: +SKIP

Modules
-------
- colors: the Color class
- conversions: channel space conversions and blend-mode mapping
- gradients: interpolation strategies and the Gradient wrapper
- builder: input validation and gradient construction
- errors: build failures
"""

from .colors import Color
from .types.modes import BlendMode, Interpolation
from .conversions import convert_colors, channels_to_color
from .gradients import Gradient
from .builder import GradientBuilder, build_gradient
from .errors import (
    GradientBuildError,
    InvalidColorError,
    WrongDomainCountError,
    WrongDomainError,
)

from boundednumbers import BoundType

__version__ = "1.0.0"

__all__ = [
    # Colors
    "Color",

    # Modes
    "BlendMode", "Interpolation", "BoundType",

    # Conversions
    "convert_colors", "channels_to_color",

    # Gradients
    "Gradient",
    "GradientBuilder", "build_gradient",

    # Errors
    "GradientBuildError", "InvalidColorError",
    "WrongDomainCountError", "WrongDomainError",

    # Version
    "__version__",
]
