"""Zero-dimensional topological entity."""

from __future__ import annotations

from typing import Sequence

from brepkernel import occt_ops

from ..casting import TypedShape
from ..kinds import ShapeKind
from ..point import Point3


class Vertex(TypedShape):
    """A single point. A vertex's coordinates never change."""

    kind = ShapeKind.VERTEX

    @classmethod
    def new(cls, point: Sequence[float]) -> Vertex:
        return cls(occt_ops.make_vertex(Point3.of(point)))

    def point(self) -> Point3:
        return Point3.of(occt_ops.vertex_point(self.occt_shape))

    def x(self) -> float:
        return self.point().x

    def y(self) -> float:
        return self.point().y

    def z(self) -> float:
        return self.point().z

    def dist(self, other: Vertex) -> float:
        """Euclidean distance to ``other``."""
        return occt_ops.vertex_distance(self.occt_shape, other.occt_shape)

    def __repr__(self) -> str:
        x, y, z = self.point()
        return f"Vertex({x}, {y}, {z})"
