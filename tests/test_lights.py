import pytest

from lumina.color import Color
from lumina.lights import LightSource, PointLightSource
from lumina.vector3d import Vector3D
from lumina.world import World


def test_point_light_reports_its_position():
    pos = Vector3D(0, 10, 0)
    light = PointLightSource(World(), pos, Color(1, 1, 1))
    assert light.position() == pos


def test_point_light_keeps_intensity_and_world():
    world = World()
    intensity = Color(0.2, 0.4, 0.6)
    light = PointLightSource(world, Vector3D(1, 2, 3), intensity)
    assert light.intensity == intensity
    assert light.world is world


def test_light_source_is_abstract():
    with pytest.raises(TypeError):
        LightSource(World(), Color(1, 1, 1))


def test_light_added_to_world_is_first():
    world = World()
    light = PointLightSource(world, Vector3D(0, 5, 0), Color(1, 1, 1))
    world.add_light(light)
    assert world.lights[0].position() == Vector3D(0, 5, 0)