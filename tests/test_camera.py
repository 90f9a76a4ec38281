import math
from types import SimpleNamespace

import numpy as np
import pytest

from chisel.camera import Camera
from chisel.vectors import Vectors


def test_default_orientation():
    cam = Camera()
    assert np.allclose(cam.forward(), Vectors.FORWARD)
    assert np.allclose(cam.up(), Vectors.UP)
    assert np.allclose(cam.right(), Vectors.LEFT)


def test_left_handed_right_is_negated():
    rh = Camera(angles=(0.2, 0.7, 0.0))
    lh = Camera(angles=(0.2, 0.7, 0.0), right_handed=False)
    assert np.allclose(lh.right(), -rh.right())


def test_rolled_up_stays_perpendicular_to_forward():
    cam = Camera(angles=(0.3, 0.5, 0.8))
    up = cam.up()
    assert math.isclose(np.linalg.norm(up), 1.0)
    assert abs(float(np.dot(up, cam.forward()))) < 1e-9


def test_scale_fov_with_unit_ratio_is_identity():
    assert math.isclose(Camera.scale_fov(70.0, 1.0), 70.0)
    assert math.isclose(Camera.calc_vertical_fov(90.0, 1.0), 90.0)


def test_vertical_horizontal_round_trip():
    fovy = Camera.calc_vertical_fov(90.0, 1.5)
    assert fovy < 90.0
    assert math.isclose(Camera.calc_horizontal_fov(fovy, 1.5), 90.0)


def test_aspect_ratio_from_screen_and_target():
    assert Camera(screen_size=(800, 400)).aspect_ratio() == 800 / 400
    target = SimpleNamespace(size=(300, 100))
    assert Camera(render_target=target).aspect_ratio() == 300 / 100


def test_view_matrix_maps_eye_and_forward():
    cam = Camera(position=(10, 20, 30), angles=(0.3, 0.5, 0.1))
    view = cam.view_matrix()
    assert np.allclose(view @ np.append(cam.position, 1.0), (0, 0, 0, 1))
    ahead = view @ np.append(cam.position + cam.forward(), 1.0)
    assert np.allclose(ahead[:2], (0, 0))
    assert math.isclose(ahead[2], -1.0)


def test_view_matrix_override_and_reset():
    cam = Camera()
    custom = np.eye(4) * 3
    cam.set_view_matrix(custom)
    assert np.array_equal(cam.view_matrix(), custom)
    cam.reset_view_matrix()
    assert np.allclose(cam.view_matrix() @ np.array([0, 0, 0, 1.0]), (0, 0, 0, 1))


@pytest.mark.parametrize("right_handed", [True, False])
def test_projection_maps_near_and_far_to_unit_depth(right_handed):
    cam = Camera(right_handed=right_handed)
    proj = cam.proj_matrix()
    sign = -1.0 if right_handed else 1.0
    near = proj @ np.array([0, 0, sign * cam.near, 1.0])
    far = proj @ np.array([0, 0, sign * cam.far, 1.0])
    assert math.isclose(near[2] / near[3], 0.0, abs_tol=1e-9)
    assert math.isclose(far[2] / far[3], 1.0)
    assert proj[3, 2] == sign


def test_projection_override_and_reset():
    cam = Camera()
    custom = np.eye(4) * 2
    cam.set_proj_matrix(custom)
    assert np.array_equal(cam.proj_matrix(), custom)
    cam.reset_proj_matrix()
    assert cam.proj_matrix()[3, 2] == -1.0


def test_get_fov_scaled_by_matching_aspect_keeps_fov():
    cam = Camera(scale_fov_to_aspect=True, scale_fov_aspect=(16, 9), screen_size=(1600, 900))
    cam.proj_matrix()
    fov_x, fov_y = cam.get_fov()
    assert math.isclose(fov_x, 90.0)
    assert math.isclose(fov_y, Camera.calc_vertical_fov(90.0, 1600 / 900))


def test_frustum_near_and_far_faces_contain_point_ahead():
    cam = Camera()
    cam.proj_matrix()
    frustum = cam.create_frustum()
    point = cam.position + 100.0 * cam.forward()
    assert frustum.near_face.signed_distance(point) > 0
    assert frustum.far_face.signed_distance(point) > 0
    behind = cam.position - 100.0 * cam.forward()
    assert frustum.near_face.signed_distance(behind) < 0