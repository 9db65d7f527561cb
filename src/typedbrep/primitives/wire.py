"""Connected sequence of edges."""

from __future__ import annotations

from typing import Iterable, Sequence

from brepkernel import occt_ops

from ..casting import TypedShape
from ..kinds import ShapeKind
from ..point import Point3
from .edge import Edge


class Wire(TypedShape):
    kind = ShapeKind.WIRE

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> Wire:
        """Join edges, in the given order, into a wire.

        Raises:
            KernelOperationError: If no edges are given or they do not connect
        """
        return cls(occt_ops.make_wire(edge.occt_shape for edge in edges))

    @classmethod
    def polygon(cls, points: Iterable[Sequence[float]], closed: bool = True) -> Wire:
        return cls(occt_ops.make_polygon((Point3.of(p) for p in points), closed=closed))
