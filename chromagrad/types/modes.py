# No dependencies
from enum import Enum


class BlendMode(str, Enum):
    RGB = "rgb"
    LINEAR_RGB = "linear_rgb"
    OKLAB = "oklab"
    HSV = "hsv"


class Interpolation(str, Enum):
    LINEAR = "linear"
    CATMULL_ROM = "catmull_rom"
    BASIS = "basis"


HUE_360 = 360.0
