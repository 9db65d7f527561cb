"""One-dimensional topological entity."""

from __future__ import annotations

from typing import Sequence

from brepkernel import occt_ops

from ..casting import TypedShape
from ..kinds import ShapeKind
from ..point import Point3


class Edge(TypedShape):
    kind = ShapeKind.EDGE

    @classmethod
    def segment(cls, start: Sequence[float], end: Sequence[float]) -> Edge:
        return cls(occt_ops.make_segment(Point3.of(start), Point3.of(end)))

    @classmethod
    def circle(cls, center: Sequence[float], normal: Sequence[float], radius: float) -> Edge:
        """Full circle of ``radius`` in the plane through ``center`` normal to ``normal``."""
        return cls(occt_ops.make_circle(Point3.of(center), Point3.of(normal), radius))
