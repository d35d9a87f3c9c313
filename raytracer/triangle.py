"""Triangles and ray-triangle intersection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from raytracer.intersection import Intersection
from raytracer.material import Material
from raytracer.ray import Ray
from raytracer.vector import Point, Vector

_PARALLEL_EPSILON = 1e-8


@dataclass
class Triangle:
    """A triangle with a single face normal."""

    v0: Point
    v1: Point
    v2: Point
    normal: Vector

    @staticmethod
    def from_indices(
        vertices: Sequence[Point],
        normals: Sequence[Vector],
        v_indices: Sequence[int],
        n_index: int,
    ) -> Triangle:
        """Build a triangle from 0-based vertex indices and a normal index."""
        first, second, third = v_indices
        return Triangle(
            vertices[first],
            vertices[second],
            vertices[third],
            normals[n_index],
        )

    def intersect(self, ray: Ray, material: Material) -> Optional[Intersection]:
        """Möller–Trumbore intersection; return the hit or ``None``."""
        e1 = self.v1 - self.v0
        e2 = self.v2 - self.v0
        h = ray.direction.cross(e2)
        a = e1.dot(h)

        if abs(a) < _PARALLEL_EPSILON:
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(e1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * e2.dot(q)
        if t < ray.t_min or t > ray.t_max:
            return None

        return Intersection(t, ray.at(t), self.normal, material)