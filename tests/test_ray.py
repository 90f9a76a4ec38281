import numpy as np
import pytest

from chisel.bounds import AABB
from chisel.plane import Plane
from chisel.ray import Ray
from chisel.vectors import Vectors, vec3

UNIT_BOX = AABB(Vectors.ZERO, Vectors.ONE)


def test_get_point():
    ray = Ray(vec3(1, 2, 3), vec3(0, 2, 0))
    np.testing.assert_array_equal(ray.get_point(0.0), ray.origin)
    np.testing.assert_allclose(ray.get_point(2.5) - ray.origin, 2.5 * ray.direction)


def test_inverse_direction_of_zero_component_is_infinite():
    ray = Ray(Vectors.ZERO, Vectors.FORWARD)
    inf = float("inf")
    assert ray.inv_direction.tolist() == [1.0, inf, inf]


def test_hits_box_ahead():
    ray = Ray(vec3(-5, 0.5, 0.5), Vectors.FORWARD)
    assert ray.intersects_box(UNIT_BOX)


def test_misses_box_behind():
    ray = Ray(vec3(-5, 0.5, 0.5), Vectors.BACK)
    assert not ray.intersects_box(UNIT_BOX)


def test_misses_box_to_the_side():
    ray = Ray(vec3(-5, 3, 0.5), Vectors.FORWARD)
    assert not ray.intersects_box(UNIT_BOX)


def test_origin_inside_box_hits():
    ray = Ray(vec3(0.5, 0.5, 0.5), vec3(0.3, -0.2, 0.9))
    assert ray.intersects_box(UNIT_BOX)


def test_intersect_plane_point_on_plane():
    plane = Plane(Vectors.UP, 0.0)
    ray = Ray(vec3(2, 3, 10), vec3(0.1, 0.2, -1))
    distance = ray.intersect_plane(plane)
    assert distance > 0
    assert plane.signed_distance(ray.get_point(distance)) == pytest.approx(0.0, abs=1e-9)


def test_intersect_plane_parallel_is_none():
    plane = Plane(Vectors.UP, 0.0)
    assert Ray(vec3(0, 0, 10), Vectors.FORWARD).intersect_plane(plane) is None


def test_intersect_plane_behind_is_none():
    plane = Plane(Vectors.UP, 0.0)
    assert Ray(vec3(0, 0, 10), Vectors.UP).intersect_plane(plane) is None