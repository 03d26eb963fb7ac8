"""Pinhole camera that spawns primary rays and holds the rendered image."""

from __future__ import annotations

import math

from lumina.color import Color
from lumina.vector3d import Vector3D, cross_product


class Camera:
    """A camera looking from *position* at *target*, down its -w axis."""

    def __init__(
        self,
        position: Vector3D,
        target: Vector3D,
        up: Vector3D,
        fovy: float,
        width: int,
        height: int,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.position = position
        self.target = target
        self.up = up.normalized()
        self.fovy = fovy
        self.width = width
        self.height = height

        self.line_of_sight = target - position
        self.w = (-self.line_of_sight).normalized()
        self.u = cross_product(self.up, self.w).normalized()
        self.v = cross_product(self.w, self.u).normalized()

        self.bitmap = bytearray(width * height * 3)
        self.focal_height = 1.0
        self.aspect = width / height
        self.focal_width = self.focal_height * self.aspect
        self.focal_distance = self.focal_height / (
            2.0 * math.tan(fovy * math.pi / (180.0 * 2.0))
        )

    def ray_direction(self, i: float, j: float) -> Vector3D:
        """Unit direction of the viewing ray through pixel coordinates (i, j)."""
        xw = self.aspect * (i - self.width / 2.0 + 0.5) / self.width
        yw = (j - self.height / 2.0 + 0.5) / self.height
        direction = -self.w * self.focal_distance + self.u * xw + self.v * yw
        return direction.normalized()

    def draw_pixel(self, i: int, j: int, color: Color) -> None:
        """Store *color* as 8-bit RGB at pixel (i, j) of the bitmap."""
        if not (0 <= i < self.width and 0 <= j < self.height):
            raise IndexError(f"pixel ({i}, {j}) outside {self.width}x{self.height}")
        index = (i + j * self.width) * 3
        self.bitmap[index:index + 3] = bytes(
            min(max(int(255 * c), 0), 255) for c in (color.r, color.g, color.b)
        )