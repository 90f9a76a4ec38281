"""Planes defined by a normal and offset, and view frustums made of them."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from chisel.vectors import normalize


def _vec(value) -> np.ndarray:
    return np.array(value, dtype=np.float64).reshape(3)


class Plane:
    """The plane ``dot(normal, p) + offset == 0``."""

    __slots__ = ("normal", "offset")

    def __init__(self, normal=(0.0, 0.0, 0.0), offset: float = 0.0) -> None:
        self.normal = _vec(normal)
        self.offset = float(offset)

    @classmethod
    def from_point_normal(cls, point, normal) -> Plane:
        """The plane through ``point`` with the given normal."""
        normal = _vec(normal)
        return cls(normal, -float(np.dot(_vec(point), normal)))

    @classmethod
    def from_points(cls, a, b, c) -> Plane:
        """The plane through three points."""
        return cls.from_point_normal(a, cls.normal_from_points(a, b, c))

    @staticmethod
    def normal_from_points(a, b, c) -> np.ndarray:
        """Unit normal of the triangle ``a, b, c``."""
        b = _vec(b)
        return normalize(np.cross(_vec(a) - b, _vec(c) - b))

    def signed_distance(self, point) -> float:
        return float(np.dot(self.normal, _vec(point))) + self.offset

    def project_point(self, point) -> np.ndarray:
        """The closest point on the plane to ``point``."""
        point = _vec(point)
        return point - self.signed_distance(point) * self.normal

    def transformed(self, matrix) -> Plane:
        """This plane under a 4x4 affine transformation."""
        matrix = np.asarray(matrix, dtype=np.float64)
        origin = matrix @ np.append(self.project_point(np.zeros(3)), 1.0)
        normal = np.linalg.inv(matrix).T @ np.append(self.normal, 0.0)
        return Plane.from_point_normal(origin[:3], normalize(normal[:3]))

    def dist(self) -> float:
        """Distance of the plane from the origin along its normal."""
        return -self.offset

    def inverse(self) -> Plane:
        """The same plane facing the other way."""
        return Plane(-self.normal, -self.offset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return bool(np.array_equal(self.normal, other.normal)) and self.offset == other.offset

    def __repr__(self) -> str:
        return f"Plane(normal={self.normal.tolist()}, offset={self.offset})"


@dataclass
class Frustum:
    """The six planes bounding a view volume."""

    top_face: Plane = field(default_factory=Plane)
    bottom_face: Plane = field(default_factory=Plane)
    right_face: Plane = field(default_factory=Plane)
    left_face: Plane = field(default_factory=Plane)
    far_face: Plane = field(default_factory=Plane)
    near_face: Plane = field(default_factory=Plane)