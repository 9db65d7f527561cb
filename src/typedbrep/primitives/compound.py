"""Heterogeneous aggregate of shapes."""

from __future__ import annotations

from typing import Iterable, Union

from brepkernel import occt_ops
from brepkernel.builders import CompoundBuilder

from ..casting import TypedShape
from ..kinds import ShapeKind
from ..mass import surface_center_of_mass
from ..point import Point3
from ..shape import Shape

ShapeLike = Union[Shape, TypedShape]


class Compound(TypedShape):
    """Groups shapes without merging them.

    Children keep their own kinds; their order only affects enumeration.
    """

    kind = ShapeKind.COMPOUND

    @classmethod
    def from_shapes(cls, shapes: Iterable[ShapeLike]) -> Compound:
        builder = CompoundBuilder()
        for shape in shapes:
            builder.add(shape.occt_shape)
        return cls(builder.commit())

    def children(self) -> list[Shape]:
        """Direct children in insertion order."""
        return [Shape(child) for child in occt_ops.children(self.occt_shape)]

    def clean(self) -> Shape:
        return self.to_shape().clean()

    def center_of_mass(self) -> Point3:
        return surface_center_of_mass(self.occt_shape)
