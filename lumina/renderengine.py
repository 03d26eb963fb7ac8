"""Column-by-column rendering with motion blur, edge antialiasing and depth of field."""

from __future__ import annotations

import random

from lumina.camera import Camera
from lumina.color import Color
from lumina.ray import Ray
from lumina.vector3d import Vector3D
from lumina.world import World

_BLACK = Color(0.0, 0.0, 0.0)
_MOTION_BLUR_FRAMES = 5
_EDGE_THRESHOLD = 0.01
_GRID = 4
_DOF_APERTURE = 1.0
_DOF_FOCAL_LENGTH = 40.0
_DOF_SAMPLES = 8


class RenderEngine:
    """Traces the world through the camera and writes pixels into its bitmap."""

    def __init__(
        self,
        world: World,
        camera: Camera,
        *,
        motion_blur: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.camera = camera
        self.motion_blur = motion_blur
        self.rng = rng if rng is not None else random.Random()
        self.column = 0

    def trace(self, i: float, j: float) -> Color:
        """Colour seen through pixel coordinates (i, j)."""
        ray = Ray(self.camera.position, self.camera.ray_direction(i, j))
        return self.world.shade_ray(ray)

    def render_loop(self) -> bool:
        """Render the next column of pixels.

        Returns True when the last column has been drawn; the next call
        starts again at the first column.
        """
        i = self.column
        previous = _BLACK
        for j in range(self.camera.height):
            color = self.trace(i, j)
            if self.motion_blur:
                color = self._blurred(i, j, color, previous)
            self.camera.draw_pixel(i, j, color)
            previous = color

        self.column += 1
        if self.column == self.camera.width:
            self.column = 0
            return True
        return False

    def render(self) -> bytearray:
        """Render every remaining column and return the camera's bitmap."""
        while not self.render_loop():
            pass
        return self.camera.bitmap

    def dof(self, ray: Ray) -> Color:
        """Depth-of-field colour for a primary *ray*, averaged over a lens aperture."""
        eye = self.camera.position
        focal_point = eye + _DOF_FOCAL_LENGTH * ray.direction
        total = _BLACK
        for _ in range(_DOF_SAMPLES):
            eps_x = self.rng.random() - 0.5
            eps_y = self.rng.random() - 0.5
            origin = Vector3D(
                eye.x + _DOF_APERTURE * eps_x,
                eye.y + _DOF_APERTURE * eps_y,
                eye.z,
            )
            sample = self.world.shade_ray(Ray(origin, focal_point - origin))
            total = total + sample.clamped()
        return total / _DOF_SAMPLES

    def _blurred(self, i: int, j: int, color: Color, previous: Color) -> Color:
        frame = _BLACK
        weight_sum = 1.0
        for k in range(2, _MOTION_BLUR_FRAMES + 1):
            self.world.move_objects()
            left = self.trace(i - 1, j).clamped()
            sample = color
            if previous != _BLACK and (
                color.distance(left) > _EDGE_THRESHOLD
                or color.distance(previous) > _EDGE_THRESHOLD
            ):
                sample = self._supersample(i, j)
            frame = frame + sample * k
            weight_sum += k
        self.world.reset_objects()
        return (color + frame) * (1 / weight_sum)

    def _supersample(self, i: int, j: int) -> Color:
        """Stratified sampling over a grid of cells around the pixel."""
        eps = self.rng.random() * 0.5
        total = _BLACK
        for p in range(_GRID):
            for q in range(_GRID):
                total = total + self.trace(
                    i - 1 + (p + eps) / _GRID, j - 1 + (q + eps) / _GRID
                )
        return total / (_GRID * _GRID)