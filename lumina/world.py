"""The scene: shapes, lights, ambient and background colours."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lumina.color import Color
from lumina.ray import Ray

if TYPE_CHECKING:
    from lumina.lights import LightSource
    from lumina.shapes import Shape


@dataclass(eq=False)
class World:
    """Everything a ray can meet, plus the lighting environment."""

    objects: list[Shape] = field(default_factory=list)
    lights: list[LightSource] = field(default_factory=list)
    ambient: Color = Color(0.0, 0.0, 0.0)
    background: Color = Color(0.0, 0.0, 0.0)

    def add_light(self, light: LightSource) -> None:
        """Append a light source."""
        self.lights.append(light)

    def add_object(self, obj: Shape) -> None:
        """Append a shape."""
        self.objects.append(obj)

    def first_intersection(self, ray: Ray) -> float:
        """Find the nearest hit of *ray* and return its parameter."""
        for obj in self.objects:
            obj.intersect(ray)
        return ray.t

    def shade_ray(self, ray: Ray) -> Color:
        """Colour seen along *ray*, or the background if it hits nothing."""
        self.first_intersection(ray)
        if ray.hit:
            return ray.intersected.shade(ray)
        return self.background

    def move_objects(self) -> None:
        """Advance every shape by its movement step."""
        for obj in self.objects:
            obj.move()

    def reset_objects(self) -> None:
        """Return every shape to its starting position."""
        for obj in self.objects:
            obj.reset_position()