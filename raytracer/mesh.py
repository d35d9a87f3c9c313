"""Triangle meshes loaded from OBJ files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from raytracer.intersection import Intersection
from raytracer.material import Material, MaterialSolid, MaterialTextured
from raytracer.obj_parser import read_obj_file
from raytracer.ray import Ray
from raytracer.triangle import Triangle


@dataclass
class Mesh:
    """A named mesh; its triangles are filled by :meth:`load_obj`."""

    name: str
    material_solid: Optional[MaterialSolid] = None
    material_textured: Optional[MaterialTextured] = None
    triangles: list[Triangle] = field(default_factory=list)

    def load_obj(self, path: str | os.PathLike) -> None:
        """Replace the triangles with those read from an OBJ file."""
        self.triangles = read_obj_file(path).to_triangles()

    def load_texture(self, base_path: str | os.PathLike) -> None:
        """Load the texture image if the mesh has a textured material."""
        if self.material_textured is not None:
            self.material_textured.texture.load(base_path)

    def material(self) -> Material:
        """Return the mesh's material, preferring the solid one."""
        if self.material_solid is not None:
            return self.material_solid
        if self.material_textured is not None:
            return self.material_textured
        raise ValueError("a mesh must have either a solid or a textured material")

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Return the closest hit over all triangles, or ``None``."""
        if not self.triangles:
            return None
        material = self.material()
        closest: Optional[Intersection] = None
        for triangle in self.triangles:
            hit = triangle.intersect(ray, material)
            if hit is not None and (closest is None or hit.t < closest.t):
                closest = hit
        return closest