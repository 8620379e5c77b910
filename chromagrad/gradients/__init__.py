from .base import GradientBase, StopGradient
from .linear import LinearGradient
from .catmull_rom import CatmullRomGradient
from .basis import BasisGradient
from .sharp import SharpGradient
from .gradient import Gradient

__all__ = [
    'GradientBase',
    'StopGradient',
    'LinearGradient',
    'CatmullRomGradient',
    'BasisGradient',
    'SharpGradient',
    'Gradient',
]
