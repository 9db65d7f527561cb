"""Typed ownership layer over the B-rep kernel.

Wraps kernel shapes in typed objects so that a shape is only ever used as
the topological kind its runtime tag says it is.
"""

from brepkernel.builders import BuilderConsumedError
from brepkernel.export import ExportError
from brepkernel.occt_ops import KernelOperationError, OCCTNotAvailableError

from .casting import KindMismatchError, TypedShape, downcast, upcast
from .kinds import ShapeKind
from .point import Point3
from .primitives import Compound, Edge, Face, Shell, Solid, Vertex, Wire
from .shape import Shape

__version__ = "0.1.0"
__all__ = [
    "BuilderConsumedError", "ExportError", "KernelOperationError", "OCCTNotAvailableError",
    "KindMismatchError", "TypedShape", "downcast", "upcast",
    "ShapeKind", "Point3", "Shape",
    "Compound", "Edge", "Face", "Shell", "Solid", "Vertex", "Wire",
]
