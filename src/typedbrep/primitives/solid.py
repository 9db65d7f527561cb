"""Closed volume."""

from __future__ import annotations

from ..casting import TypedShape
from ..kinds import ShapeKind
from ..mass import volume_center_of_mass
from ..point import Point3


class Solid(TypedShape):
    kind = ShapeKind.SOLID

    def center_of_mass(self) -> Point3:
        return volume_center_of_mass(self.occt_shape)
