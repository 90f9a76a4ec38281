"""RGBA colours with float or byte components, packing and sRGB conversion."""

from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np


def srgb_to_linear(value: float) -> float:
    """Convert one sRGB-encoded component in [0, 1] to linear light."""
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value: float) -> float:
    """Convert one linear component in [0, 1] to sRGB encoding."""
    if value <= 0.0031308:
        return value * 12.92
    return value ** (1.0 / 2.4) * 1.055 - 0.055


class Color:
    """An immutable RGBA colour with float components in [0, 1]."""

    NORMAL_MAX: float = 1.0

    __slots__ = ("_rgba",)

    def __init__(self, r: float = 0, g: float = 0, b: float = 0, a: float | None = None) -> None:
        if a is None:
            a = self.NORMAL_MAX
        self._rgba = tuple(self._component(value) for value in (r, g, b, a))

    @classmethod
    def _component(cls, value: float):
        return float(value)

    @property
    def r(self):
        return self._rgba[0]

    @property
    def g(self):
        return self._rgba[1]

    @property
    def b(self):
        return self._rgba[2]

    @property
    def a(self):
        return self._rgba[3]

    @classmethod
    def hsv(cls, h: float, s: float, v: float) -> Color:
        """Build an opaque colour from hue (degrees), saturation and value."""
        h = 0.0 if h == 360.0 else h / 60.0
        fract = h - math.floor(h)
        p = v * (1.0 - s)
        q = v * (1.0 - s * fract)
        u = v * (1.0 - s * (1.0 - fract))
        if 0.0 <= h < 1.0:
            return cls(v, u, p)
        if 1.0 <= h < 2.0:
            return cls(q, v, p)
        if 2.0 <= h < 3.0:
            return cls(p, v, u)
        if 3.0 <= h < 4.0:
            return cls(p, q, v)
        if 4.0 <= h < 5.0:
            return cls(u, p, v)
        if 5.0 <= h < 6.0:
            return cls(v, p, q)
        return cls(0.0, 0.0, 0.0)

    def _packed(self, order: tuple[int, ...]) -> int:
        scale = 255.0 / self.NORMAL_MAX
        result = 0
        for index in order:
            result = (result << 8) | int(min(max(self._rgba[index] * scale, 0.0), 255.0))
        return result

    def pack(self) -> int:
        """Pack as a 32-bit RGBA integer, red in the high byte."""
        return self._packed((0, 1, 2, 3))

    def pack_abgr(self) -> int:
        """Pack as a 32-bit ABGR integer, alpha in the high byte."""
        return self._packed((3, 2, 1, 0))

    def linear(self) -> Color:
        """Convert the colour channels from sRGB to linear; alpha is kept."""
        top = self.NORMAL_MAX
        r, g, b = (srgb_to_linear(c / top) * top for c in self._rgba[:3])
        return type(self)(r, g, b, self.a)

    def to_vec4(self) -> np.ndarray:
        """Components scaled to [0, 1] as a float vector."""
        return np.array(self._rgba, dtype=np.float64) / self.NORMAL_MAX

    def __iter__(self) -> Iterator:
        return iter(self._rgba)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return type(self) is type(other) and self._rgba == other._rgba

    def __hash__(self) -> int:
        return hash((type(self), self._rgba))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self._rgba)})"


class Color255(Color):
    """An immutable RGBA colour with byte components in [0, 255]."""

    NORMAL_MAX = 255

    __slots__ = ()

    @classmethod
    def _component(cls, value: float) -> int:
        byte = int(value)
        if not 0 <= byte <= 255:
            raise ValueError(f"byte colour component {value!r} is out of range")
        return byte


class Colors:
    """Common colours."""

    TRANSPARENT = Color(0, 0, 0, 0)
    BLACK = Color(0, 0, 0, 1)
    WHITE = Color(1, 1, 1, 1)
    GREEN = Color(0, 1, 0, 1)