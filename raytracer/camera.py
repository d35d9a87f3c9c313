"""Pinhole camera that produces primary rays."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytracer.ray import Ray
from raytracer.vector import Point, Vector


@dataclass
class Fov:
    angle: float


@dataclass
class Resolution:
    horizontal: int
    vertical: int


@dataclass
class MaxBounces:
    n: int


@dataclass
class Camera:
    """Camera position, orientation and image settings."""

    position: Point
    look_at: Point
    up: Vector
    horizontal_fov: Fov
    resolution: Resolution
    max_bounces: MaxBounces

    def generate_ray(self, u: int, v: int) -> Ray:
        """Return the world-space ray through the centre of pixel (u, v)."""
        width = self.resolution.horizontal
        height = self.resolution.vertical
        x_n = (u + 0.5) / width
        y_n = (v + 0.5) / height

        fov_x = math.radians(self.horizontal_fov.angle)
        fov_y = fov_x * (height / width)

        x_i = (2.0 * x_n - 1.0) * math.tan(fov_x)
        y_i = (1.0 - 2.0 * y_n) * math.tan(fov_y)

        z = (self.position - self.look_at).normalize()
        x = self.up.cross(z).normalize()
        y = z.cross(x).normalize()

        direction = x * x_i + y * y_i + z * -1.0
        return Ray(self.position, direction.normalize(), 0.01, math.inf)