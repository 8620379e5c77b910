from __future__ import annotations
from typing import Iterator
from boundednumbers.functions import clamp
from coloraide import Color as CSSColor
from PIL import ImageColor
from ..conversions.srgb import srgb_to_linear, linear_to_srgb
from ..conversions.oklab import linear_rgb_to_oklab, oklab_to_linear_rgb
from ..conversions.hsv import unit_rgb_to_hsv, hsv_to_unit_rgb
from ..types.color_types import Channels, RGBA8


class Color:
    """
    Immutable RGBA color.

    Channels are gamma-encoded sRGB floats, normally in [0, 1] but never
    clamped on construction: interpolation results may fall outside the gamut
    and are only saturated when quantized with ``to_rgba8``.
    """
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    def __init__(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        self._value: Channels = (float(r), float(g), float(b), float(a))

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if hasattr(self, '_value'):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        return cls(r / 255, g / 255, b / 255, a / 255)

    @classmethod
    def from_linear_rgba(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        return cls(linear_to_srgb(r), linear_to_srgb(g), linear_to_srgb(b), a)

    @classmethod
    def from_oklaba(cls, l: float, a: float, b: float, alpha: float = 1.0) -> Color:
        return cls.from_linear_rgba(*oklab_to_linear_rgb(l, a, b), alpha)

    @classmethod
    def from_hsva(cls, h: float, s: float, v: float, a: float = 1.0) -> Color:
        return cls(*hsv_to_unit_rgb(h, s, v), a)

    @classmethod
    def from_html(cls, text: str) -> Color:
        """
        Parse a CSS / web color string.

        CSS syntax (named colors, ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``,
        ``rgb()``, ``rgba()``, ``hsl()``, ``hsla()``, ``hwb()``, percentages and
        fractional alpha) is read with coloraide. ``hsv()`` / ``hsb()``, which CSS
        lacks, are read with Pillow.

        Raises:
            ValueError: if the string is not a recognised color.
        """
        if not isinstance(text, str):
            raise ValueError(f"Color string expected, got {text!r}")
        text = text.strip()
        if text.lower().startswith(("hsv(", "hsb(")):
            return cls.from_rgba8(*ImageColor.getrgb(text))
        srgb = CSSColor(text).convert("srgb")
        return cls(srgb["red"], srgb["green"], srgb["blue"], srgb["alpha"])

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @property
    def a(self) -> float:
        return self._value[3]

    # ------------------ CONVERSIONS ------------------
    def to_tuple(self) -> Channels:
        return self._value

    def to_rgba8(self) -> RGBA8:
        """Quantize to 8 bits per channel, saturating to [0, 255]."""
        return tuple(int(clamp(c, 0.0, 1.0) * 255 + 0.5) for c in self._value)  # type: ignore

    def to_linear_rgba(self) -> Channels:
        r, g, b, a = self._value
        return srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b), a

    def to_oklab(self) -> Channels:
        """Return ``(L, a, b, alpha)``."""
        r, g, b, alpha = self.to_linear_rgba()
        return (*linear_rgb_to_oklab(r, g, b), alpha)

    def to_hsva(self) -> Channels:
        r, g, b, a = self._value
        return (*unit_rgb_to_hsv(r, g, b), a)

    def to_hex_string(self) -> str:
        r, g, b, a = self.to_rgba8()
        if a < 255:
            return f"#{r:02x}{g:02x}{b:02x}{a:02x}"
        return f"#{r:02x}{g:02x}{b:02x}"

    def interpolate_rgb(self, other: Color, t: float) -> Color:
        """Blend towards ``other`` in plain (gamma-encoded) RGB."""
        return Color(*(c0 + t * (c1 - c0) for c0, c1 in zip(self._value, other._value)))

    def is_close(self, other: Color, tol: float = 1e-9) -> bool:
        return all(abs(c0 - c1) <= tol for c0, c1 in zip(self._value, other._value))

    # ------------------ DUNDER ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"Color({r!r}, {g!r}, {b!r}, {a!r})"


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
