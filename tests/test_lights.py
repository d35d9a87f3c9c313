from raytracer.color import Color
from raytracer.lights import (
    AmbientLight,
    Falloff,
    Lights,
    ParallelLight,
    PointLight,
    SpotLight,
)
from raytracer.vector import Point, Vector


def test_lights_default_to_empty():
    lights = Lights()
    assert lights.ambient_light == []
    assert lights.point_light == []
    assert lights.parallel_light == []
    assert lights.spot_light == []


def test_default_lists_are_independent():
    first = Lights()
    second = Lights()
    first.ambient_light.append(AmbientLight(Color.WHITE))
    assert len(first.ambient_light) == 1
    assert second.ambient_light == []


def test_lights_hold_given_sources():
    ambient = AmbientLight(Color(1.0, 1.0, 1.0))
    point = PointLight(Color(0.5, 0.5, 0.5), Point(0.0, 5.0, 0.0))
    parallel = ParallelLight(Color(0.2, 0.2, 0.2), Vector(0.0, -1.0, 0.0))
    spot = SpotLight(
        Color(1.0, 0.0, 0.0),
        Point(0.0, 1.0, 0.0),
        Vector(0.0, -1.0, 0.0),
        Falloff(alpha1=15.0, alpha2=30.0),
    )
    lights = Lights([ambient], [point], [parallel], [spot])
    assert lights.ambient_light[0].color == Color(1.0, 1.0, 1.0)
    assert lights.point_light[0].position == Point(0.0, 5.0, 0.0)
    assert lights.parallel_light[0].direction == Vector(0.0, -1.0, 0.0)
    assert lights.spot_light[0].falloff == Falloff(15.0, 30.0)