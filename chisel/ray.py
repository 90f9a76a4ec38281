"""Rays and their intersection with boxes and planes."""

from __future__ import annotations

import numpy as np

from chisel.bounds import AABB
from chisel.plane import Plane

_FLOAT_EPSILON = 1.1920928955078125e-07


def _vec(value) -> np.ndarray:
    return np.array(value, dtype=np.float64).reshape(3)


class Ray:
    """A half-line from ``origin`` along ``direction``."""

    __slots__ = ("origin", "direction", "inv_direction")

    def __init__(self, origin, direction) -> None:
        self.origin = _vec(origin)
        self.direction = _vec(direction)
        with np.errstate(divide="ignore"):
            self.inv_direction = 1.0 / self.direction

    def get_point(self, distance: float) -> np.ndarray:
        return self.origin + distance * self.direction

    def intersects_box(self, box: AABB) -> bool:
        """Slab test against an axis-aligned box."""
        with np.errstate(invalid="ignore"):
            near = (box.min - self.origin) * self.inv_direction
            far = (box.max - self.origin) * self.inv_direction
        tmin = min(float(near[0]), float(far[0]))
        tmax = max(float(near[0]), float(far[0]))
        for t1, t2 in zip(near[1:].tolist(), far[1:].tolist()):
            tmin = max(tmin, min(t1, t2))
            tmax = min(tmax, max(t1, t2))
        return tmax > max(tmin, 0.0)

    def intersect_plane(self, plane: Plane) -> float | None:
        """Distance along the ray to ``plane``, or None if it is not hit ahead."""
        denominator = float(np.dot(self.direction, plane.normal))
        if abs(denominator) <= _FLOAT_EPSILON:
            return None
        plane_origin = plane.project_point(np.zeros(3))
        distance = float(np.dot(plane_origin - self.origin, plane.normal)) / denominator
        return distance if distance > 0 else None

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin.tolist()}, direction={self.direction.tolist()})"