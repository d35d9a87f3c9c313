"""Spheres and ray-sphere intersection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from raytracer.intersection import Intersection
from raytracer.material import Material, MaterialSolid, MaterialTextured
from raytracer.ray import Ray
from raytracer.vector import Point


@dataclass
class Sphere:
    """A sphere with either a solid or a textured material."""

    radius: float
    position: Point
    material_solid: Optional[MaterialSolid] = None
    material_textured: Optional[MaterialTextured] = None

    def material(self) -> Material:
        """Return the sphere's material, preferring the solid one."""
        if self.material_solid is not None:
            return self.material_solid
        if self.material_textured is not None:
            return self.material_textured
        raise ValueError("a sphere must have either a solid or a textured material")

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Return the nearest hit within the ray's range, or ``None``."""
        oc = ray.origin - self.position
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2.0 * a)
        t2 = (-b + sqrt_disc) / (2.0 * a)

        if ray.t_min < t1 < ray.t_max:
            t = t1
        elif ray.t_min < t2 < ray.t_max:
            t = t2
        else:
            return None

        point = ray.at(t)
        normal = (point - self.position).normalize()
        return Intersection(t, point, normal, self.material())