import math

import pytest

from raytracer.camera import Camera, Fov, MaxBounces, Resolution
from raytracer.vector import Point, Vector


def _camera(position=Point(0.0, 0.0, 0.0), look_at=Point(0.0, 0.0, -1.0), width=3, height=3):
    return Camera(
        position=position,
        look_at=look_at,
        up=Vector(0.0, 1.0, 0.0),
        horizontal_fov=Fov(angle=45.0),
        resolution=Resolution(horizontal=width, vertical=height),
        max_bounces=MaxBounces(n=8),
    )


def test_ray_starts_at_camera_with_source_range():
    camera = _camera(position=Point(1.0, 2.0, 3.0), look_at=Point(1.0, 2.0, 0.0))
    ray = camera.generate_ray(0, 0)
    assert ray.origin == Point(1.0, 2.0, 3.0)
    assert ray.t_min == 0.01
    assert ray.t_max == math.inf


def test_center_pixel_points_at_look_at():
    position = Point(1.0, 2.0, 3.0)
    look_at = Point(4.0, -1.0, 0.0)
    camera = _camera(position=position, look_at=look_at, width=5, height=5)
    direction = camera.generate_ray(2, 2).direction
    expected = (look_at - position).normalize()
    assert direction.x == pytest.approx(expected.x, abs=1e-9)
    assert direction.y == pytest.approx(expected.y, abs=1e-9)
    assert direction.z == pytest.approx(expected.z, abs=1e-9)


def test_all_directions_are_unit_length():
    camera = _camera(width=4, height=3)
    for v in range(3):
        for u in range(4):
            assert camera.generate_ray(u, v).direction.length() == pytest.approx(1.0)


def test_corner_pixels_point_to_their_quadrants():
    camera = _camera(width=4, height=4)
    top_left = camera.generate_ray(0, 0).direction
    bottom_right = camera.generate_ray(3, 3).direction
    assert top_left.x < 0 < top_left.y
    assert bottom_right.y < 0 < bottom_right.x
    assert top_left.z < 0 and bottom_right.z < 0


def test_opposite_corners_are_mirror_images():
    camera = _camera(width=6, height=4)
    top_left = camera.generate_ray(0, 0).direction
    bottom_right = camera.generate_ray(5, 3).direction
    assert top_left.x == pytest.approx(-bottom_right.x)
    assert top_left.y == pytest.approx(-bottom_right.y)
    assert top_left.z == pytest.approx(bottom_right.z)