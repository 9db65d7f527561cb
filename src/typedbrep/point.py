"""Three-dimensional point value."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence


class Point3(NamedTuple):
    x: float
    y: float
    z: float

    @classmethod
    def of(cls, coordinates: Sequence[float]) -> Point3:
        """Build a point from any three-element sequence."""
        x, y, z = coordinates
        return cls(float(x), float(y), float(z))

    def distance(self, other: Sequence[float]) -> float:
        return math.dist(self, other)
