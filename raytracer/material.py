"""Surface materials: solid colours and image textures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from raytracer.color import Color


@dataclass
class Phong:
    """Phong shading coefficients."""

    ka: float
    kd: float
    ks: float
    exponent: float


@dataclass
class Reflectance:
    r: float


@dataclass
class Transmittance:
    t: float


@dataclass
class Refraction:
    iof: float


@dataclass
class Texture:
    """A named texture image; ``data`` is filled by :meth:`load`."""

    name: str
    data: Optional[Image.Image] = field(default=None, compare=False, repr=False)

    def load(self, base_path) -> None:
        """Load the image from ``assets/textures`` under ``base_path`` as RGB."""
        texture_path = Path(base_path) / "assets" / "textures" / self.name
        with Image.open(texture_path) as img:
            self.data = img.convert("RGB")


@dataclass
class MaterialSolid:
    """A material with a single uniform colour."""

    color: Color
    phong: Phong
    reflectance: Reflectance
    transmittance: Transmittance
    refraction: Refraction

    @property
    def texture_name(self) -> str:
        return "No Texture!"


@dataclass
class MaterialTextured:
    """A material whose colour comes from a texture image."""

    texture: Texture
    phong: Phong
    reflectance: Reflectance
    transmittance: Transmittance
    refraction: Refraction

    @property
    def color(self) -> Color:
        return Color.BLACK

    @property
    def texture_name(self) -> str:
        return self.texture.name


Material = Union[MaterialSolid, MaterialTextured]