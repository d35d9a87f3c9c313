"""Rays with a parametric range."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytracer.vector import Point, Vector


@dataclass
class Ray:
    """A ray from ``origin`` along ``direction``; the direction is normalised."""

    origin: Point
    direction: Vector
    t_min: float
    t_max: float

    def __post_init__(self) -> None:
        self.direction = self.direction.normalize()

    def at(self, t: float) -> Point:
        """Return the point at distance ``t`` along the ray."""
        return self.origin + self.direction * t

    def reflect(self, intersection_point: Point, normal: Vector) -> Ray:
        """Return the ray mirrored about ``normal`` at ``intersection_point``."""
        reflected = self.direction - normal * 2.0 * self.direction.dot(normal)
        return Ray(
            intersection_point + normal * 1e-6,
            reflected.normalize(),
            1e-6,
            math.inf,
        )