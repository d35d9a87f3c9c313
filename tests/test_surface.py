import math

from raytracer.color import Color
from raytracer.material import (
    MaterialSolid,
    Phong,
    Reflectance,
    Refraction,
    Transmittance,
)
from raytracer.mesh import Mesh
from raytracer.ray import Ray
from raytracer.sphere import Sphere
from raytracer.surface import Surface, Surfaces
from raytracer.triangle import Triangle
from raytracer.vector import Point, Vector


def _material(r):
    return MaterialSolid(
        Color(r, 0.0, 0.0),
        Phong(0.3, 0.7, 1.0, 32.0),
        Reflectance(0.0),
        Transmittance(0.0),
        Refraction(1.0),
    )


def _forward_ray():
    return Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, -1.0), 0.01, math.inf)


def test_closest_sphere_wins_regardless_of_order():
    far = Sphere(1.0, Point(0.0, 0.0, -10.0), material_solid=_material(0.1))
    near = Sphere(1.0, Point(0.0, 0.0, -4.0), material_solid=_material(0.9))
    surfaces = Surfaces([far, near])
    hit = surfaces.intersect(_forward_ray())
    assert hit is not None
    assert hit.material.color == Color(0.9, 0.0, 0.0)
    assert hit.t == near.intersect(_forward_ray()).t


def test_mesh_in_front_of_sphere():
    sphere = Sphere(1.0, Point(0.0, 0.0, -5.0), material_solid=_material(0.1))
    triangle = Triangle(
        Point(-1.0, -1.0, -2.0), Point(1.0, -1.0, -2.0), Point(0.0, 1.0, -2.0), Vector(0.0, 0.0, 1.0)
    )
    mesh = Mesh("wall.obj", material_solid=_material(0.5), triangles=[triangle])
    surfaces = Surfaces([sphere, mesh])
    hit = surfaces.intersect(_forward_ray())
    assert hit is not None
    assert hit.material.color == Color(0.5, 0.0, 0.0)
    assert hit.t < sphere.intersect(_forward_ray()).t


def test_no_surfaces_no_hit():
    assert Surfaces().intersect(_forward_ray()) is None


def test_all_miss():
    surfaces = Surfaces([Sphere(1.0, Point(5.0, 5.0, -5.0), material_solid=_material(0.1))])
    assert surfaces.intersect(_forward_ray()) is None


def test_spheres_and_meshes_views():
    sphere = Sphere(1.0, Point(0.0, 0.0, -5.0), material_solid=_material(0.1))
    mesh = Mesh("m.obj", material_solid=_material(0.2))
    surfaces = Surfaces([mesh, sphere])
    assert surfaces.spheres == [sphere]
    assert surfaces.meshes == [mesh]
    assert len(surfaces) == 2
    assert list(surfaces) == [mesh, sphere]


def test_sphere_used_as_surface_reports_hit():
    surface = Sphere(1.0, Point(0.0, 0.0, -5.0), material_solid=_material(0.1))
    assert isinstance(surface, Surface)
    hit = surface.intersect(_forward_ray())
    assert hit is not None
    assert abs(hit.t - 4.0) < 1e-6
    assert hit.material.color == Color(0.1, 0.0, 0.0)


def test_empty_mesh_used_as_surface_reports_no_hit():
    surface = Mesh("m.obj", material_solid=_material(0.2))
    assert isinstance(surface, Surface)
    assert surface.intersect(_forward_ray()) is None