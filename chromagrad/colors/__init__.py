"""
Chromagrad Color
================

A single immutable RGBA class. Values are gamma-encoded sRGB floats; every
other representation is reached through a named conversion:

>>> from chromagrad.colors import Color
>>> c = Color.from_html("gold")
>>> c.to_rgba8()
(255, 215, 0, 255)
>>> l, a, b, alpha = c.to_oklab()
>>> Color.from_oklaba(l, a, b, alpha).to_rgba8()
(255, 215, 0, 255)

Notes
-----
- Instances are frozen after ``__init__``.
- Channels are not clamped; ``to_rgba8`` saturates to [0, 255].
"""

from .color import Color, BLACK, WHITE

__all__ = ['Color', 'BLACK', 'WHITE']
