"""Bounded surface."""

from __future__ import annotations

from brepkernel import occt_ops

from ..casting import TypedShape
from ..kinds import ShapeKind
from .wire import Wire


class Face(TypedShape):
    kind = ShapeKind.FACE

    @classmethod
    def from_wire(cls, wire: Wire) -> Face:
        """Planar face bounded by a closed, planar wire."""
        return cls(occt_ops.make_face(wire.occt_shape))
