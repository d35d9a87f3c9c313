"""Reading scenes and their parts from XML descriptions."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Callable, Optional, TypeVar

from raytracer.camera import Camera, Fov, MaxBounces, Resolution
from raytracer.color import Color
from raytracer.lights import (
    AmbientLight,
    Falloff,
    Lights,
    ParallelLight,
    PointLight,
    SpotLight,
)
from raytracer.material import (
    MaterialSolid,
    MaterialTextured,
    Phong,
    Reflectance,
    Refraction,
    Texture,
    Transmittance,
)
from raytracer.mesh import Mesh
from raytracer.scene import Scene
from raytracer.sphere import Sphere
from raytracer.surface import Surfaces
from raytracer.vector import Point, Vector

T = TypeVar("T")


class SceneImportError(Exception):
    """Raised when a scene description cannot be read."""


def _parse(text: str) -> ET.Element:
    try:
        return ET.fromstring(text)
    except ET.ParseError as err:
        raise SceneImportError(f"invalid XML: {err}") from err


def _value(element: ET.Element, name: str) -> str:
    """Return a field given either as an attribute or as a child's text."""
    if name in element.attrib:
        return element.attrib[name]
    child = element.find(name)
    if child is not None and child.text is not None:
        return child.text.strip()
    raise SceneImportError(f"<{element.tag}> is missing field {name!r}")


def _float(element: ET.Element, name: str) -> float:
    text = _value(element, name)
    try:
        return float(text)
    except ValueError as err:
        raise SceneImportError(f"<{element.tag}> {name}={text!r} is not a number") from err


def _uint(element: ET.Element, name: str) -> int:
    text = _value(element, name).strip()
    if not text.isascii() or not text.isdigit():
        raise SceneImportError(
            f"<{element.tag}> {name}={text!r} is not a non-negative integer"
        )
    return int(text)


def _child(element: ET.Element, name: str) -> ET.Element:
    child = element.find(name)
    if child is None:
        raise SceneImportError(f"<{element.tag}> is missing <{name}>")
    return child


def _optional(
    element: ET.Element, name: str, build: Callable[[ET.Element], T]
) -> Optional[T]:
    child = element.find(name)
    return None if child is None else build(child)


def _point(element: ET.Element) -> Point:
    return Point(_float(element, "x"), _float(element, "y"), _float(element, "z"))


def _vector(element: ET.Element) -> Vector:
    return Vector(_float(element, "x"), _float(element, "y"), _float(element, "z"))


def _color(element: ET.Element) -> Color:
    return Color(_float(element, "r"), _float(element, "g"), _float(element, "b"))


def _phong(element: ET.Element) -> Phong:
    return Phong(
        _float(element, "ka"),
        _float(element, "kd"),
        _float(element, "ks"),
        _float(element, "exponent"),
    )


def _surface_properties(element: ET.Element):
    return (
        _phong(_child(element, "phong")),
        Reflectance(_float(_child(element, "reflectance"), "r")),
        Transmittance(_float(_child(element, "transmittance"), "t")),
        Refraction(_float(_child(element, "refraction"), "iof")),
    )


def _material_solid(element: ET.Element) -> MaterialSolid:
    return MaterialSolid(_color(_child(element, "color")), *_surface_properties(element))


def _material_textured(element: ET.Element) -> MaterialTextured:
    texture = Texture(_value(_child(element, "texture"), "name"))
    return MaterialTextured(texture, *_surface_properties(element))


def _camera(element: ET.Element) -> Camera:
    resolution = _child(element, "resolution")
    return Camera(
        position=_point(_child(element, "position")),
        look_at=_point(_child(element, "lookat")),
        up=_vector(_child(element, "up")),
        horizontal_fov=Fov(_float(_child(element, "horizontal_fov"), "angle")),
        resolution=Resolution(_uint(resolution, "horizontal"), _uint(resolution, "vertical")),
        max_bounces=MaxBounces(_uint(_child(element, "max_bounces"), "n")),
    )


def _lights(element: ET.Element) -> Lights:
    return Lights(
        ambient_light=[
            AmbientLight(_color(_child(light, "color")))
            for light in element.findall("ambient_light")
        ],
        point_light=[
            PointLight(_color(_child(light, "color")), _point(_child(light, "position")))
            for light in element.findall("point_light")
        ],
        parallel_light=[
            ParallelLight(_color(_child(light, "color")), _vector(_child(light, "direction")))
            for light in element.findall("parallel_light")
        ],
        spot_light=[
            SpotLight(
                _color(_child(light, "color")),
                _point(_child(light, "position")),
                _vector(_child(light, "direction")),
                Falloff(
                    _float(_child(light, "falloff"), "alpha1"),
                    _float(_child(light, "falloff"), "alpha2"),
                ),
            )
            for light in element.findall("spot_light")
        ],
    )


def _sphere(element: ET.Element) -> Sphere:
    return Sphere(
        radius=_float(element, "radius"),
        position=_point(_child(element, "position")),
        material_solid=_optional(element, "material_solid", _material_solid),
        material_textured=_optional(element, "material_textured", _material_textured),
    )


def _mesh(element: ET.Element) -> Mesh:
    return Mesh(
        name=_value(element, "name"),
        material_solid=_optional(element, "material_solid", _material_solid),
        material_textured=_optional(element, "material_textured", _material_textured),
    )


_SURFACE_BUILDERS = {"sphere": _sphere, "mesh": _mesh}


def _surfaces(element: ET.Element) -> Surfaces:
    surfaces = []
    for child in element:
        build = _SURFACE_BUILDERS.get(child.tag)
        if build is None:
            raise SceneImportError(f"unknown surface <{child.tag}>")
        surfaces.append(build(child))
    return Surfaces(surfaces)


def _scene(element: ET.Element) -> Scene:
    return Scene(
        output_file=_value(element, "output_file"),
        background_color=_color(_child(element, "background_color")),
        camera=_camera(_child(element, "camera")),
        lights=_lights(_child(element, "lights")),
        surfaces=_surfaces(_child(element, "surfaces")),
    )


def point_from_xml(text: str) -> Point:
    """Parse an element with x, y and z into a point."""
    return _point(_parse(text))


def vector_from_xml(text: str) -> Vector:
    """Parse an element with x, y and z into a vector."""
    return _vector(_parse(text))


def color_from_xml(text: str) -> Color:
    """Parse an element with r, g and b into a colour."""
    return _color(_parse(text))


def camera_from_xml(text: str) -> Camera:
    """Parse a camera element."""
    return _camera(_parse(text))


def material_solid_from_xml(text: str) -> MaterialSolid:
    """Parse a solid material element."""
    return _material_solid(_parse(text))


def sphere_from_xml(text: str) -> Sphere:
    """Parse a sphere element."""
    return _sphere(_parse(text))


def scene_from_xml(text: str) -> Scene:
    """Parse a whole scene; meshes are left without geometry."""
    return _scene(_parse(text))


def import_scene(path: str | os.PathLike, base_path: str | os.PathLike = ".") -> Scene:
    """Read a scene file and load its meshes and textures from ``base_path``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
        scene = scene_from_xml(text)
        scene.load_meshes(base_path)
    except (OSError, ValueError, IndexError, SceneImportError) as err:
        raise SceneImportError(f"Failed to parse scene: {err}") from err
    return scene