"""Quaternion rotations and position/rotation/scale transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from chisel.vectors import Vectors

_EPSILON = 1.1920928955078125e-07


def _vec3(value) -> np.ndarray:
    return np.array(value, dtype=np.float64).reshape(3)


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion; the default is the identity."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_euler(cls, radians) -> Quaternion:
        """Build from Euler angles (pitch about X, yaw about Y, roll about Z) in radians."""
        ex, ey, ez = (float(a) * 0.5 for a in _vec3(radians))
        cx, cy, cz = math.cos(ex), math.cos(ey), math.cos(ez)
        sx, sy, sz = math.sin(ex), math.sin(ey), math.sin(ez)
        return cls(
            w=cx * cy * cz + sx * sy * sz,
            x=sx * cy * cz - cx * sy * sz,
            y=cx * sy * cz + sx * cy * sz,
            z=cx * cy * sz - sx * sy * cz,
        )

    def rotate(self, vector) -> np.ndarray:
        """Rotate a 3-vector by this quaternion."""
        v = _vec3(vector)
        u = np.array([self.x, self.y, self.z], dtype=np.float64)
        uv = np.cross(u, v)
        uuv = np.cross(u, uv)
        return v + (uv * self.w + uuv) * 2.0

    def to_matrix(self) -> np.ndarray:
        """The equivalent 4x4 rotation matrix."""
        w, x, y, z = self.w, self.x, self.y, self.z
        matrix = np.eye(4)
        matrix[:3, :3] = [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ]
        return matrix

    def to_euler(self) -> np.ndarray:
        """Euler angles (pitch, yaw, roll) in radians."""
        w, x, y, z = self.w, self.x, self.y, self.z

        pitch_y = 2.0 * (y * z + w * x)
        pitch_x = w * w - x * x - y * y + z * z
        if abs(pitch_x) <= _EPSILON and abs(pitch_y) <= _EPSILON:
            pitch = 2.0 * math.atan2(x, w)
        else:
            pitch = math.atan2(pitch_y, pitch_x)

        yaw = math.asin(min(max(-2.0 * (x * z - w * y), -1.0), 1.0))

        roll_y = 2.0 * (x * y + w * z)
        roll_x = w * w + x * x - y * y - z * z
        if abs(roll_x) <= _EPSILON and abs(roll_y) <= _EPSILON:
            roll = 0.0
        else:
            roll = math.atan2(roll_y, roll_x)

        return np.array([pitch, yaw, roll], dtype=np.float64)


class Transform:
    """Position, rotation and scale, with cached Euler angles for editing."""

    def __init__(self, position=None, rotation: Quaternion | None = None, scale=None) -> None:
        self.position = Vectors.ZERO.copy() if position is None else _vec3(position)
        self.rotation = Quaternion() if rotation is None else rotation
        self.scale = Vectors.ONE.copy() if scale is None else _vec3(scale)
        self._euler_angles = np.zeros(3)
        self._euler_rotation: Quaternion | None = None

    def forward(self) -> np.ndarray:
        """Normalized forward direction."""
        return self.rotation.rotate(Vectors.FORWARD)

    def up(self) -> np.ndarray:
        """Normalized up direction."""
        return self.rotation.rotate(Vectors.UP)

    def right(self) -> np.ndarray:
        """Normalized right direction."""
        return self.rotation.rotate(Vectors.RIGHT)

    def matrix(self) -> np.ndarray:
        """The 4x4 translate * rotate * scale matrix."""
        translation = np.eye(4)
        translation[:3, 3] = self.position
        scaling = np.diag(np.append(self.scale, 1.0))
        return translation @ self.rotation.to_matrix() @ scaling

    def set_euler_angles(self, degrees) -> None:
        """Set the rotation from Euler angles in degrees and cache them."""
        degrees = _vec3(degrees)
        self.rotation = Quaternion.from_euler(np.radians(degrees))
        self._euler_angles = degrees
        self._euler_rotation = self.rotation

    def get_euler_angles(self) -> np.ndarray:
        """Euler angles in degrees; the cached ones while the rotation is unchanged."""
        if self.rotation != self._euler_rotation:
            self._euler_rotation = self.rotation
            self._euler_angles = np.degrees(self.rotation.to_euler())
        return self._euler_angles.copy()

    def __repr__(self) -> str:
        return (
            f"Transform(position={self.position.tolist()}, rotation={self.rotation}, "
            f"scale={self.scale.tolist()})"
        )