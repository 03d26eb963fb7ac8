"""RGB colours with arithmetic used during shading."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB colour whose channels are nominally in [0, 1]."""

    r: float
    g: float
    b: float

    @classmethod
    def gray(cls, value: float) -> Color:
        """Colour with all three channels set to *value*."""
        return cls(value, value, value)

    def clamped(self) -> Color:
        """Copy with each channel limited to [0, 1]."""
        return Color(*(min(max(c, 0.0), 1.0) for c in (self.r, self.g, self.b)))

    def distance(self, other: Color) -> float:
        """Euclidean distance between two colours in RGB space."""
        return math.sqrt(
            (self.r - other.r) ** 2 + (self.g - other.g) ** 2 + (self.b - other.b) ** 2
        )

    def __mul__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Color:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Color(self.r / scalar, self.g / scalar, self.b / scalar)

    def __add__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)