"""Renderable shapes: spheres, triangles and quadrilaterals."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from lumina.color import Color
from lumina.ray import Ray
from lumina.vector3d import Vector3D, cross_product, dot_product, triple_product, unit_vector

if TYPE_CHECKING:
    from lumina.material import Material


class Shape(ABC):
    """A surface with a material that can move in fixed steps."""

    def __init__(self, material: Material, movement_step: Vector3D = Vector3D()) -> None:
        self.material = material
        self.movement_step = movement_step
        self.is_solid = True
        self.num_transform = 0

    @abstractmethod
    def intersect(self, ray: Ray) -> bool:
        """Test *ray* against the shape, recording a nearer hit on it."""

    @abstractmethod
    def normal(self, point: Vector3D) -> Vector3D:
        """Unit surface normal at *point*."""

    def shade(self, ray: Ray) -> Color:
        """Colour of the shape at the hit point of *ray*."""
        return self.material.shade(ray, self.is_solid)

    def move(self) -> None:
        """Advance the shape by one movement step."""
        self.num_transform += 1

    def reset_position(self) -> None:
        """Undo every movement step taken so far."""
        self.num_transform = 0

    def _total_offset(self) -> Vector3D:
        return self.movement_step * self.num_transform


def _triangle_hit(a: Vector3D, b: Vector3D, c: Vector3D, ray: Ray, shape: Shape) -> bool:
    """Barycentric ray-triangle test; records the parameter on a hit."""
    col0 = a - b
    col1 = a - c
    direction = ray.direction
    rhs = a - ray.origin
    det = triple_product(col0, col1, direction)
    if det == 0:
        return False
    beta = triple_product(rhs, col1, direction) / det
    gamma = triple_product(col0, rhs, direction) / det
    if beta > 0 and gamma > 0 and beta + gamma < 1:
        t = triple_product(col0, col1, rhs) / det
        ray.set_parameter(t, shape)
        return True
    return False


class Sphere(Shape):
    """A sphere given by its centre and radius."""

    def __init__(
        self,
        center: Vector3D,
        radius: float,
        material: Material,
        movement_step: Vector3D = Vector3D(),
    ) -> None:
        super().__init__(material, movement_step)
        self.center = center
        self.radius = radius

    def intersect(self, ray: Ray) -> bool:
        """Solve the ray-sphere quadratic and record the nearer valid root."""
        center_vector = ray.origin - self.center
        b = 2.0 * dot_product(ray.direction, center_vector)
        c = dot_product(center_vector, center_vector) - self.radius * self.radius
        discriminant = b * b - 4.0 * c
        if discriminant < 0.0:
            return False
        if discriminant == 0:
            ray.set_parameter(-b / 2.0, self)
            return True
        root = discriminant ** 0.5
        hit_far = ray.set_parameter((-b + root) / 2.0, self)
        hit_near = ray.set_parameter((-b - root) / 2.0, self)
        return hit_far or hit_near

    def normal(self, point: Vector3D) -> Vector3D:
        """Outward unit normal at *point*."""
        return unit_vector(point - self.center)

    def move(self) -> None:
        """Shift the centre by one movement step."""
        self.center = self.center + self.movement_step
        super().move()

    def reset_position(self) -> None:
        """Return the centre to where it started."""
        self.center = self.center - self._total_offset()
        super().reset_position()


class Triangle(Shape):
    """A triangle given by three vertices."""

    def __init__(
        self,
        a: Vector3D,
        b: Vector3D,
        c: Vector3D,
        material: Material,
        movement_step: Vector3D = Vector3D(),
    ) -> None:
        super().__init__(material, movement_step)
        self.a = a
        self.b = b
        self.c = c

    def intersect(self, ray: Ray) -> bool:
        """Test the ray against the triangle's interior."""
        return _triangle_hit(self.a, self.b, self.c, ray, self)

    def normal(self, point: Vector3D) -> Vector3D:
        """Unit normal following the vertex winding."""
        return unit_vector(cross_product(self.b - self.a, self.c - self.a))

    def move(self) -> None:
        """Shift every vertex by one movement step."""
        step = self.movement_step
        self.a, self.b, self.c = self.a + step, self.b + step, self.c + step
        super().move()

    def reset_position(self) -> None:
        """Return the vertices to where they started."""
        offset = self._total_offset()
        self.a, self.b, self.c = self.a - offset, self.b - offset, self.c - offset
        super().reset_position()


class Quad(Shape):
    """A quadrilateral split into triangles (p1, p2, p3) and (p2, p3, p4)."""

    def __init__(
        self,
        p1: Vector3D,
        p2: Vector3D,
        p3: Vector3D,
        p4: Vector3D,
        material: Material,
        movement_step: Vector3D = Vector3D(),
    ) -> None:
        super().__init__(material, movement_step)
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.p4 = p4

    def intersect(self, ray: Ray) -> bool:
        """Test the ray against both halves of the quadrilateral."""
        return _triangle_hit(self.p1, self.p2, self.p3, ray, self) or _triangle_hit(
            self.p2, self.p3, self.p4, ray, self
        )

    def normal(self, point: Vector3D) -> Vector3D:
        """Unit normal of the plane through the first three corners."""
        return unit_vector(cross_product(self.p2 - self.p1, self.p3 - self.p1))

    def move(self) -> None:
        """Shift every corner by one movement step."""
        step = self.movement_step
        self.p1, self.p2, self.p3, self.p4 = (p + step for p in self._corners())
        super().move()

    def reset_position(self) -> None:
        """Return the corners to where they started."""
        offset = self._total_offset()
        self.p1, self.p2, self.p3, self.p4 = (p - offset for p in self._corners())
        super().reset_position()

    def _corners(self) -> tuple[Vector3D, Vector3D, Vector3D, Vector3D]:
        return (self.p1, self.p2, self.p3, self.p4)