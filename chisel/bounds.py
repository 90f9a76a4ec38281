"""Axis-aligned bounding boxes."""

from __future__ import annotations

from itertools import product
from typing import Any

import numpy as np


def _as_vec3(value: Any) -> np.ndarray:
    vector = np.array(value, dtype=float).reshape(3)
    return vector


class AABB:
    """An axis-aligned box given by its minimum and maximum corners."""

    __slots__ = ("min", "max")

    def __init__(self, minimum: Any = None, maximum: Any = None) -> None:
        self.min = np.zeros(3) if minimum is None else _as_vec3(minimum)
        self.max = np.zeros(3) if maximum is None else _as_vec3(maximum)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return bool(np.array_equal(self.min, other.min) and np.array_equal(self.max, other.max))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AABB(min={self.min.tolist()}, max={self.max.tolist()})"

    def is_degenerate(self) -> bool:
        """True when the minimum and maximum corners coincide."""
        return bool(np.array_equal(self.min, self.max))

    def intersects(self, other: AABB) -> bool:
        """True if the boxes overlap or touch."""
        return bool(np.all(self.min <= other.max) and np.all(self.max >= other.min))

    def center(self) -> np.ndarray:
        return 0.5 * (self.min + self.max)

    def dimensions(self) -> np.ndarray:
        return np.abs(self.max - self.min)

    def compute_matrix(self) -> np.ndarray:
        """Matrix that maps a unit cube at the origin onto this box."""
        translation = np.eye(4)
        translation[:3, 3] = self.center()
        scale = np.diag(np.append(self.dimensions(), 1.0))
        return translation @ scale

    def extend(self, other: AABB | Any) -> AABB:
        """Return a new box that also encloses ``other`` (a point or a box)."""
        if isinstance(other, AABB):
            return self.extend(other.min).extend(other.max)
        point = _as_vec3(other)
        return AABB(np.minimum(self.min, point), np.maximum(self.max, point))

    def transformed(self, matrix: Any) -> AABB:
        """Transform both corners by a 4x4 (as points) or 3x3 matrix."""
        m = np.asarray(matrix, dtype=float)
        if m.shape == (4, 4):
            low = (m @ np.append(self.min, 1.0))[:3]
            high = (m @ np.append(self.max, 1.0))[:3]
        elif m.shape == (3, 3):
            low = m @ self.min
            high = m @ self.max
        else:
            raise ValueError(f"cannot transform a box by a matrix of shape {m.shape}")
        return AABB(low, high)

    def corners(self) -> np.ndarray:
        """The eight corners, x varying slowest and z fastest."""
        axes = zip(self.min, self.max)
        return np.array(list(product(*axes)), dtype=float)