"""A perspective camera: orientation, view and projection matrices, frustum."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from chisel.plane import Frustum, Plane
from chisel.vectors import Rect, Vectors, normalize


def _rotation_about(axis: np.ndarray, angle: float) -> np.ndarray:
    k = normalize(axis)
    skew = np.array([[0.0, -k[2], k[1]], [k[2], 0.0, -k[0]], [-k[1], k[0], 0.0]])
    c, s = math.cos(angle), math.sin(angle)
    return c * np.eye(3) + s * skew + (1.0 - c) * np.outer(k, k)


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray, right_handed: bool) -> np.ndarray:
    f = normalize(center - eye)
    if right_handed:
        s = normalize(np.cross(f, up))
        u = np.cross(s, f)
        depth = np.append(-f, float(np.dot(f, eye)))
    else:
        s = normalize(np.cross(up, f))
        u = np.cross(f, s)
        depth = np.append(f, -float(np.dot(f, eye)))
    return np.array(
        [
            np.append(s, -float(np.dot(s, eye))),
            np.append(u, -float(np.dot(u, eye))),
            depth,
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def _perspective(fovy: float, aspect: float, near: float, far: float, right_handed: bool) -> np.ndarray:
    tan_half = math.tan(fovy / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 3] = -(far * near) / (far - near)
    if right_handed:
        matrix[2, 2] = far / (near - far)
        matrix[3, 2] = -1.0
    else:
        matrix[2, 2] = far / (far - near)
        matrix[3, 2] = 1.0
    return matrix


@dataclass(eq=False)
class Camera:
    """A perspective camera with Euler-angle orientation in a Z-up world.

    ``render_target`` may be any object with a ``size`` of (width, height);
    without one, ``screen_size`` gives the aspect ratio.
    """

    field_of_view: float = 90.0
    scale_fov_to_aspect: bool = False
    scale_fov_aspect: tuple[float, float] = (16.0, 9.0)
    near: float = 8.0
    far: float = 16384.0
    render_target: Any = None
    screen_size: tuple[float, float] = (1920.0, 1080.0)
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angles: np.ndarray = field(default_factory=lambda: np.zeros(3))
    right_handed: bool = True

    _aspect_ratio: float = field(default=16.0 / 9.0, init=False, repr=False)
    _view: np.ndarray = field(default_factory=lambda: np.eye(4), init=False, repr=False)
    _proj: np.ndarray = field(default_factory=lambda: np.eye(4), init=False, repr=False)
    _override_view: bool = field(default=False, init=False, repr=False)
    _override_proj: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=np.float64).reshape(3)
        self.angles = np.array(self.angles, dtype=np.float64).reshape(3)

    def up(self) -> np.ndarray:
        """Up direction, rolled about the forward axis by ``angles[2]``."""
        roll = _rotation_about(self.forward(), float(self.angles[2]))
        return normalize(roll @ Vectors.UP)

    def right(self) -> np.ndarray:
        result = normalize(np.cross(self.forward(), Vectors.UP))
        return result if self.right_handed else -result

    def forward(self) -> np.ndarray:
        ax, ay = float(self.angles[0]), float(self.angles[1])
        x = math.cos(ax) * math.cos(ay)
        y = math.sin(ax)
        z = math.cos(ax) * math.sin(ay)
        return normalize(np.array([x, z, y]))

    def screen_point_to_ray(self, pos, viewport: Rect):
        """The world-space ray through a point of the viewport."""
        from chisel.ray import Ray

        ndc = np.asarray(pos, dtype=np.float64).reshape(2) / (viewport.size * 0.5) - 1.0
        clip = np.array([ndc[0], -ndc[1], -1.0, 1.0])
        ray_view = np.linalg.inv(self.proj_matrix()) @ clip
        ray_world = np.linalg.inv(self.view_matrix()) @ np.append(ray_view[:3], 0.0)
        return Ray(self.position, ray_world[:3])

    def view_matrix(self) -> np.ndarray:
        """World-to-camera matrix."""
        if self._override_view:
            return self._view.copy()
        self._view = _look_at(
            self.position, self.position + self.forward(), self.up(), self.right_handed
        )
        return self._view.copy()

    def set_view_matrix(self, matrix) -> None:
        self._override_view = True
        self._view = np.array(matrix, dtype=np.float64).reshape(4, 4)

    def reset_view_matrix(self) -> None:
        self._override_view = False

    def aspect_ratio(self) -> float:
        """Width over height of the render target, or of the screen."""
        size = self.render_target.size if self.render_target is not None else self.screen_size
        width, height = size
        return float(width) / float(height)

    def get_fov(self) -> tuple[float, float]:
        """Horizontal and vertical field of view in degrees."""
        fov_x = self.field_of_view
        if self.scale_fov_to_aspect:
            base = self.scale_fov_aspect[0] / self.scale_fov_aspect[1]
            fov_x = self.scale_fov_by_width_ratio(fov_x, self._aspect_ratio, base)
        return fov_x, self.calc_vertical_fov(fov_x, self._aspect_ratio)

    def proj_matrix(self) -> np.ndarray:
        """Perspective projection with depth mapped to [0, 1]."""
        if self._override_proj:
            return self._proj.copy()
        self._aspect_ratio = self.aspect_ratio()
        _, fov_y = self.get_fov()
        self._proj = _perspective(
            math.radians(fov_y), self._aspect_ratio, self.near, self.far, self.right_handed
        )
        return self._proj.copy()

    def set_proj_matrix(self, matrix) -> None:
        self._override_proj = True
        self._proj = np.array(matrix, dtype=np.float64).reshape(4, 4)

    def reset_proj_matrix(self) -> None:
        self._override_proj = False

    def create_frustum(self) -> Frustum:
        """The six planes of the view volume, normals facing inwards."""
        _, fov_y = self.get_fov()
        forward, up, right = self.forward(), self.up(), self.right()
        front_far = self.far * forward
        half_v = self.far * math.tan(fov_y * 0.5)
        half_h = half_v * self._aspect_ratio
        at = Plane.from_point_normal
        pos = self.position
        return Frustum(
            top_face=at(pos, np.cross(right, front_far - up * half_v)),
            bottom_face=at(pos, np.cross(front_far + up * half_v, right)),
            right_face=at(pos, np.cross(front_far - right * half_h, up)),
            left_face=at(pos, np.cross(up, front_far + right * half_h)),
            far_face=at(pos + front_far, -forward),
            near_face=at(pos + self.near * forward, forward),
        )

    @staticmethod
    def scale_fov(fov_degrees: float, ratio: float) -> float:
        return math.degrees(math.atan(math.tan(math.radians(fov_degrees) * 0.5) * ratio)) * 2.0

    @staticmethod
    def calc_vertical_fov(fovx: float, aspect_ratio: float) -> float:
        """Vertical FOV from horizontal FOV and a width/height aspect ratio."""
        return Camera.scale_fov(fovx, 1.0 / aspect_ratio)

    @staticmethod
    def calc_horizontal_fov(fovy: float, aspect_ratio: float) -> float:
        """Horizontal FOV from vertical FOV and a width/height aspect ratio."""
        return Camera.scale_fov(fovy, aspect_ratio)

    @staticmethod
    def scale_fov_by_width_ratio(fov: float, aspect: float, base_aspect: float) -> float:
        """Scale a FOV by the ratio of an aspect ratio to a reference one."""
        return Camera.scale_fov(fov, aspect / base_aspect)