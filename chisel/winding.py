"""Convex polygons (windings) built from planes and clipped by planes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from chisel.plane import Plane
from chisel.vectors import normalize

PLANE_WINDING_POINTS = 4
DEFAULT_MAX_WINDING_POINTS = 128
MAX_TRACE_LENGTH = 1.732050807569 * 32768.0
SPLIT_EPSILON = 0.01

_FLT_MAX = 3.4028234663852886e38
_SIDE_FRONT = 0
_SIDE_BACK = 1
_SIDE_ON = 2


class Winding:
    """An ordered list of coplanar points with a capacity limit."""

    __slots__ = ("points", "max_points")

    def __init__(self, points: Iterable = (), max_points: int = DEFAULT_MAX_WINDING_POINTS) -> None:
        self.points = np.array(list(points), dtype=np.float64).reshape(-1, 3)
        self.max_points = max_points
        if len(self.points) > max_points:
            raise ValueError(f"winding has {len(self.points)} points, more than {max_points}")

    @classmethod
    def from_plane(cls, plane: Plane, max_points: int = DEFAULT_MAX_WINDING_POINTS) -> Winding:
        """A huge quad lying in ``plane``."""
        axis = None
        largest = -_FLT_MAX
        for index, component in enumerate(np.abs(plane.normal).tolist()):
            if component > largest:
                axis = index
                largest = component
        if axis is None:
            raise ValueError("plane normal has no usable component")

        up = np.zeros(3)
        if axis == 2:
            up[0] = 1.0
        else:
            up[2] = 1.0

        up = normalize(up - plane.normal * float(np.dot(up, plane.normal)))
        origin = plane.normal * plane.dist()
        right = np.cross(up, plane.normal)

        up = up * MAX_TRACE_LENGTH
        right = right * MAX_TRACE_LENGTH

        return cls(
            [
                (origin - right) + up,
                (origin + right) + up,
                (origin + right) - up,
                (origin - right) - up,
            ],
            max_points,
        )

    def clip(self, split: Plane) -> Winding | None:
        """Keep the part in front of ``split``.

        Returns this winding if nothing lies behind the plane, None if nothing
        lies in front of it, and otherwise a new clipped winding.
        """
        dists = [float(np.dot(point, split.normal)) - split.dist() for point in self.points]
        sides = [
            _SIDE_FRONT if d > SPLIT_EPSILON else _SIDE_BACK if d < -SPLIT_EPSILON else _SIDE_ON
            for d in dists
        ]
        front = sides.count(_SIDE_FRONT)
        back = sides.count(_SIDE_BACK)

        if not front and not back:
            return self
        if not front:
            return None
        if not back:
            return self

        count = len(self.points)
        if self.max_points < count + 4:
            raise ValueError(f"clipping {count} points needs room for {count + 4}")

        clipped = []
        for i, p1 in enumerate(self.points):
            j = (i + 1) % count
            if sides[i] != _SIDE_BACK:
                clipped.append(p1.copy())
                if sides[i] == _SIDE_ON:
                    continue
            if sides[j] == _SIDE_ON or sides[j] == sides[i]:
                continue
            p2 = self.points[j]
            t = dists[i] / (dists[i] - dists[j])
            clipped.append(p1 + t * (p2 - p1))

        return Winding(clipped, self.max_points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.points)

    def __getitem__(self, index: int) -> np.ndarray:
        return self.points[index]

    def __repr__(self) -> str:
        return f"Winding({len(self.points)} points, max={self.max_points})"