"""Results of ray-surface intersections."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.material import Material
from raytracer.vector import Point, Vector


@dataclass
class Intersection:
    """Where a ray hit a surface, with the surface's normal and material."""

    t: float
    point: Point
    normal: Vector
    material: Material