"""Light sources that illuminate a world."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from lumina.color import Color
from lumina.vector3d import Vector3D

if TYPE_CHECKING:
    from lumina.world import World


class LightSource(ABC):
    """A light belonging to a world, emitting a fixed intensity."""

    def __init__(self, world: World | None, intensity: Color) -> None:
        self.world = world
        self.intensity = intensity

    @abstractmethod
    def position(self) -> Vector3D:
        """Point the light is emitted from."""


class PointLightSource(LightSource):
    """A light emitted from a single point in space."""

    def __init__(self, world: World | None, position: Vector3D, intensity: Color) -> None:
        super().__init__(world, intensity)
        self._position = position

    def position(self) -> Vector3D:
        """Location of the point light."""
        return self._position