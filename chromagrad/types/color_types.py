from __future__ import annotations
from typing import Sequence, Tuple, Union

Channels = Tuple[float, float, float, float]
RGBA8 = Tuple[int, int, int, int]
ColorLike = Union["Color", Sequence[float], str]
