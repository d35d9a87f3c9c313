"""A complete scene: camera, lights and surfaces."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from raytracer.camera import Camera
from raytracer.color import Color
from raytracer.lights import Lights
from raytracer.surface import Surfaces


@dataclass
class Scene:
    """Everything needed to render one image."""

    output_file: str
    background_color: Color
    camera: Camera
    lights: Lights
    surfaces: Surfaces

    def load_meshes(self, base_path: str | os.PathLike = ".") -> None:
        """Load geometry and textures of every mesh.

        OBJ files come from ``assets/obj_models`` and textures from
        ``assets/textures``, both under ``base_path``.
        """
        base = Path(base_path)
        obj_dir = base / "assets" / "obj_models"
        for mesh in self.surfaces.meshes:
            mesh.load_obj(obj_dir / mesh.name)
            if mesh.material_textured is not None:
                mesh.load_texture(base)