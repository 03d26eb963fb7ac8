"""Rays cast into the scene and the record of what they hit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lumina.vector3d import Vector3D

FLT_MAX = 3.4028234663852886e38
"""Initial parameter of a ray that has not hit anything."""

SMALLEST_DIST = 1e-4
"""Intersections closer than this to the origin are ignored."""


@dataclass
class Ray:
    """A half-line with a normalised direction and its nearest hit so far."""

    origin: Vector3D
    direction: Vector3D
    level: int = 0
    refractive_index: float = 1.0
    t: float = field(default=FLT_MAX, init=False)
    hit: bool = field(default=False, init=False)
    intersected: Any = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.direction = self.direction.normalized()

    @property
    def position(self) -> Vector3D:
        """Point reached at the current parameter."""
        return self.origin + self.t * self.direction

    def set_parameter(self, par: float, obj: Any) -> bool:
        """Record a hit at *par* if it is nearer than the current one.

        Returns True when the hit was accepted.
        """
        if SMALLEST_DIST < par < self.t:
            self.hit = True
            self.t = par
            self.intersected = obj
            return True
        return False