"""Vector helpers, coordinate-space constants and screen rectangles."""

from __future__ import annotations

from enum import Enum
from typing import Union

import numpy as np

EQUAL_EPSILON = 0.001

ArrayLike = Union[float, "np.ndarray", "list[float]", "tuple[float, ...]"]


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Create a 3-component float vector."""
    return np.array([x, y, z], dtype=np.float64)


def _constant(x: float, y: float, z: float) -> np.ndarray:
    vector = vec3(x, y, z)
    vector.setflags(write=False)
    return vector


def normalize(vector: ArrayLike) -> np.ndarray:
    """Return ``vector`` scaled to unit length (NaN for a zero vector)."""
    array = np.asarray(vector, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return array / np.linalg.norm(array)


class Space(Enum):
    """The space a transformation is expressed in."""

    WORLD = 0
    LOCAL = 1


class Vectors:
    """Axis vectors of a right-handed, Z-up space with +X forward and -Y right."""

    ONE = _constant(1, 1, 1)
    ZERO = _constant(0, 0, 0)

    FORWARD = _constant(+1, 0, 0)
    BACK = _constant(-1, 0, 0)

    UP = _constant(0, 0, +1)
    DOWN = _constant(0, 0, -1)

    RIGHT = _constant(0, +1, 0)
    LEFT = _constant(0, -1, 0)


def close_enough(a: ArrayLike, b: ArrayLike, epsilon: float = EQUAL_EPSILON) -> bool:
    """True if every component of ``a`` is within ``epsilon`` of ``b``."""
    difference = np.abs(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64))
    return bool(np.all(difference <= epsilon))


def snap(value: ArrayLike, step: ArrayLike) -> float | np.ndarray:
    """Round ``value`` to the nearest multiple of ``step``, halves away from zero."""
    step_array = np.asarray(step, dtype=np.float64)
    scaled = np.asarray(value, dtype=np.float64) / step_array
    rounded = np.sign(scaled) * np.floor(np.abs(scaled) + 0.5)
    result = rounded * step_array
    if np.ndim(result) == 0:
        return float(result)
    return result


class Rect:
    """An axis-aligned rectangle given by position and size."""

    __slots__ = ("x", "y", "w", "h")

    def __init__(self, x: float = 0.0, y: float = 0.0, w: float = 0.0, h: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.w = float(w)
        self.h = float(h)

    @classmethod
    def from_vec4(cls, vec: ArrayLike) -> Rect:
        """Build a rectangle from ``(x, y, w, h)``."""
        x, y, w, h = (float(component) for component in np.asarray(vec).reshape(4))
        return cls(x, y, w, h)

    @property
    def pos(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    @property
    def size(self) -> np.ndarray:
        return np.array([self.w, self.h], dtype=np.float64)

    @property
    def width(self) -> float:
        return self.w

    @property
    def height(self) -> float:
        return self.h

    def max(self) -> np.ndarray:
        """The corner opposite the position."""
        return self.pos + self.size

    def as_vec4(self) -> np.ndarray:
        return np.array([self.x, self.y, self.w, self.h], dtype=np.float64)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x, self.y, self.w, self.h) == (other.x, other.y, other.w, other.h)

    def __repr__(self) -> str:
        return f"Rect(x={self.x}, y={self.y}, w={self.w}, h={self.h})"