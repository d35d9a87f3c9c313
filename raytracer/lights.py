"""Light sources in a scene."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.color import Color
from raytracer.vector import Point, Vector


@dataclass
class AmbientLight:
    color: Color


@dataclass
class PointLight:
    color: Color
    position: Point


@dataclass
class ParallelLight:
    color: Color
    direction: Vector


@dataclass
class Falloff:
    alpha1: float
    alpha2: float


@dataclass
class SpotLight:
    color: Color
    position: Point
    direction: Vector
    falloff: Falloff


@dataclass
class Lights:
    """All lights of a scene, grouped by kind."""

    ambient_light: list[AmbientLight] = field(default_factory=list)
    point_light: list[PointLight] = field(default_factory=list)
    parallel_light: list[ParallelLight] = field(default_factory=list)
    spot_light: list[SpotLight] = field(default_factory=list)