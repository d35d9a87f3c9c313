"""The surface interface and the collection of surfaces in a scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Protocol, Union, runtime_checkable

from raytracer.intersection import Intersection
from raytracer.mesh import Mesh
from raytracer.ray import Ray
from raytracer.sphere import Sphere


@runtime_checkable
class Surface(Protocol):
    """Anything a ray can hit."""

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Return the nearest hit of ``ray`` with this surface, or ``None``."""
        ...


SurfaceType = Union[Sphere, Mesh]


@dataclass
class Surfaces:
    """The spheres and meshes of a scene, in document order."""

    surfaces: list[SurfaceType] = field(default_factory=list)

    def __iter__(self) -> Iterator[SurfaceType]:
        return iter(self.surfaces)

    def __len__(self) -> int:
        return len(self.surfaces)

    @property
    def spheres(self) -> list[Sphere]:
        return [surface for surface in self.surfaces if isinstance(surface, Sphere)]

    @property
    def meshes(self) -> list[Mesh]:
        return [surface for surface in self.surfaces if isinstance(surface, Mesh)]

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Return the closest hit over all surfaces; ties keep the earliest."""
        closest: Optional[Intersection] = None
        for surface in self.surfaces:
            hit = surface.intersect(ray)
            if hit is not None and (closest is None or hit.t < closest.t):
                closest = hit
        return closest