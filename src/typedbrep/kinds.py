"""Topological kind tags."""

from __future__ import annotations

from enum import Enum
from typing import Any

from brepkernel import occt_ops


class ShapeKind(str, Enum):
    """Runtime kind of a kernel shape handle."""

    VERTEX = "vertex"
    EDGE = "edge"
    WIRE = "wire"
    FACE = "face"
    SHELL = "shell"
    SOLID = "solid"
    COMPOUND = "compound"
    COMPSOLID = "compsolid"
    SHAPE = "shape"

    @classmethod
    def of(cls, occt_shape: Any) -> ShapeKind:
        """Read the kind tag of a kernel shape."""
        return cls(occt_ops.shape_type_name(occt_shape))
