"""Rendering a scene into an RGB image by recursive ray tracing."""

from __future__ import annotations

import math
import os
from pathlib import Path
from typing import Optional

from PIL import Image

from raytracer.color import Color
from raytracer.intersection import Intersection
from raytracer.material import Material
from raytracer.ray import Ray
from raytracer.scene import Scene
from raytracer.vector import Point, Vector

_OFFSET = 1e-4
_POINT_LIGHT_INTENSITY = 1.7


def render(scene: Scene) -> Image.Image:
    """Trace one ray per pixel and return the resulting image."""
    camera = scene.camera
    width = camera.resolution.horizontal
    height = camera.resolution.vertical
    max_bounces = camera.max_bounces.n

    image = Image.new("RGB", (width, height))
    image.putdata(
        [
            color_to_rgb(trace_ray(camera.generate_ray(x, y), scene, max_bounces))
            for y in range(height)
            for x in range(width)
        ]
    )
    return image


def generate_image(scene: Scene, output_dir: str | os.PathLike = "output") -> Path:
    """Render the scene and save it under ``output_dir``; return the file's path."""
    return save_image(render(scene), scene, output_dir)


def trace_ray(ray: Ray, scene: Scene, depth: int) -> Color:
    """Return the colour seen along ``ray``, following up to ``depth`` bounces."""
    if depth == 0:
        return scene.background_color

    hit = find_closest_intersection(ray, scene)
    if hit is None:
        return scene.background_color

    local = calculate_lighting(hit, ray, scene)
    material = hit.material
    reflectance = material.reflectance.r
    transmittance = material.transmittance.t
    local_weight = max(0.0, 1.0 - reflectance - transmittance)

    reflection_color = Color.BLACK
    if reflectance > 0.0:
        direction = reflect(ray.direction, hit.normal)
        origin = hit.point + hit.normal * _OFFSET
        reflection_color = trace_ray(
            Ray(origin, direction, _OFFSET, math.inf), scene, depth - 1
        )

    refraction_color = Color.BLACK
    if transmittance > 0.0:
        direction = refract(ray.direction, hit.normal, 1.0, material.refraction.iof)
        if direction is not None:
            origin = hit.point - hit.normal * _OFFSET
            refraction_color = trace_ray(
                Ray(origin, direction, _OFFSET, math.inf), scene, depth - 1
            )

    return (
        local * local_weight
        + reflection_color * reflectance
        + refraction_color * transmittance
    )


def find_closest_intersection(ray: Ray, scene: Scene) -> Optional[Intersection]:
    """Return the nearest hit of ``ray`` with any surface of the scene."""
    return scene.surfaces.intersect(ray)


def calculate_lighting(intersection: Intersection, ray: Ray, scene: Scene) -> Color:
    """Return the ambient, diffuse and specular light at an intersection."""
    material = intersection.material
    normal = intersection.normal
    view_dir = -ray.direction.normalize()
    point = intersection.point

    color = Color.BLACK

    for ambient in scene.lights.ambient_light:
        color = color + material.color * ambient.color * material.phong.ka

    for parallel in scene.lights.parallel_light:
        light_dir = -parallel.direction.normalize()
        if not is_in_shadow(point, normal, light_dir, math.inf, scene):
            color = color + calc_diffuse(material, parallel.color, light_dir, normal, 1.0)
            color = color + calc_specular(
                material, parallel.color, light_dir, normal, view_dir, 1.0
            )

    for point_light in scene.lights.point_light:
        to_light = point_light.position - point
        distance = to_light.length()
        light_dir = to_light.normalize()
        if not is_in_shadow(point, normal, light_dir, distance, scene):
            attenuation = 1.0 / (1.0 + 0.1 * distance + 0.01 * distance * distance)
            factor = attenuation * _POINT_LIGHT_INTENSITY
            color = color + calc_diffuse(material, point_light.color, light_dir, normal, factor)
            color = color + calc_specular(
                material, point_light.color, light_dir, normal, view_dir, factor
            )

    return color


def is_in_shadow(
    point: Point,
    normal: Vector,
    light_dir: Vector,
    max_distance: float,
    scene: Scene,
) -> bool:
    """Return True if a surface lies between ``point`` and the light."""
    shadow_ray = Ray(
        point + normal * _OFFSET,
        light_dir.normalize(),
        _OFFSET,
        max_distance - _OFFSET,
    )
    return any(surface.intersect(shadow_ray) is not None for surface in scene.surfaces)


def calc_diffuse(
    material: Material,
    light_color: Color,
    light_dir: Vector,
    normal: Vector,
    factor: float,
) -> Color:
    """Return the Lambertian contribution of one light."""
    intensity = max(normal.dot(light_dir), 0.0)
    return material.color * light_color * intensity * material.phong.kd * factor


def calc_specular(
    material: Material,
    light_color: Color,
    light_dir: Vector,
    normal: Vector,
    view_dir: Vector,
    factor: float,
) -> Color:
    """Return the Phong highlight of one light."""
    reflection_dir = (normal * (2.0 * normal.dot(light_dir)) - light_dir).normalize()
    intensity = max(view_dir.dot(reflection_dir), 0.0) ** material.phong.exponent
    return light_color * intensity * material.phong.ks * factor


def reflect(incident: Vector, normal: Vector) -> Vector:
    """Mirror ``incident`` about ``normal``."""
    return incident - normal * (2.0 * incident.dot(normal))


def refract(
    incident: Vector,
    normal: Vector,
    eta_incident: float,
    eta_transmitted: float,
) -> Optional[Vector]:
    """Return the refracted direction, or ``None`` on total internal reflection."""
    eta = eta_incident / eta_transmitted
    cos_i = min(max((-incident).dot(normal), -1.0), 1.0)
    sin2_t = eta * eta * (1.0 - cos_i * cos_i)
    if sin2_t > 1.0:
        return None
    cos_t = math.sqrt(1.0 - sin2_t)
    return (incident + normal * cos_i) * eta - normal * cos_t


def _channel(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 1.0) * 255.0)


def color_to_rgb(color: Color) -> tuple[int, int, int]:
    """Convert a colour with channels in [0, 1] to 8-bit RGB."""
    return (_channel(color.r), _channel(color.g), _channel(color.b))


def save_image(
    image: Image.Image, scene: Scene, output_dir: str | os.PathLike = "output"
) -> Path:
    """Save ``image`` as the scene's output file inside ``output_dir``."""
    output_path = Path(output_dir) / scene.output_file
    image.save(output_path)
    print(f"Image saved to: {output_path}")
    return output_path