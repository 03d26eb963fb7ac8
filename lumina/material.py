"""Surface materials and the Blinn-Phong shading with jittered shadow rays."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lumina.color import Color
from lumina.ray import Ray
from lumina.vector3d import Vector3D, dot_product, unit_vector

if TYPE_CHECKING:
    from lumina.world import World

_SHADOW_SAMPLES = 2


@dataclass(eq=False)
class Material:
    """Shading coefficients of a surface, bound to the world it lives in."""

    world: World = field(repr=False)
    color: Color = Color(0.0, 0.0, 0.0)
    ka: float = 0.0
    kd: float = 0.0
    ks: float = 0.0
    kr: float = 0.0
    kt: float = 0.0
    eta: float = 0.0
    n: float = 0.0
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def shade(self, ray: Ray, is_solid: bool) -> Color:
        """Colour seen along *ray* at its current hit point."""
        return self.recurse(ray)

    def recurse(self, ray: Ray) -> Color:
        """Shade the hit point of *ray* using the world's first light.

        Raises ValueError when the world has no light sources.
        """
        if not self.world.lights:
            raise ValueError("world has no light sources")
        light = self.world.lights[0]
        hit_point = ray.position
        to_light = light.position() - hit_point
        intensity = light.intensity
        ambient = self.world.ambient

        occluded = any(
            self._shadow_ray_hits(hit_point, to_light) for _ in range(_SHADOW_SAMPLES)
        )
        if not occluded:
            return self.color * ambient

        normal = unit_vector(ray.intersected.normal(hit_point))
        light_dir = unit_vector(light.position() - hit_point)
        view = -unit_vector(ray.direction)
        half = unit_vector(view + light_dir)

        lambert = intensity * (self.kd * max(0.0, dot_product(normal, light_dir)))
        specular = intensity * (self.ks * max(0.0, dot_product(normal, half))) ** _SHADOW_SAMPLES
        ambient_term = self.world.ambient * self.ka
        return self.color * (lambert + specular + ambient_term)

    def _shadow_ray_hits(self, hit_point: Vector3D, to_light: Vector3D) -> bool:
        eps_x = self.rng.random() - 0.5
        eps_y = self.rng.random() - 0.5
        origin = Vector3D(hit_point.x + eps_x, hit_point.y + eps_y, hit_point.z)
        shadow_ray = Ray(origin, to_light)
        self.world.first_intersection(shadow_ray)
        return shadow_ray.hit