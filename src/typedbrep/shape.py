"""Generic shape of unspecified topological kind."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence, Union

import structlog

from brepkernel import occt_ops
from brepkernel.builders import FilletBuilder
from brepkernel.export import DEFAULT_DEFLECTION, write_stl
from brepkernel.summary import GeometrySummary, summarize_shape

from .kinds import ShapeKind

logger = structlog.get_logger(__name__)


class Shape:
    """Exclusively owns one kernel shape handle of any kind.

    Operations that transform geometry return a new Shape, except
    ``fillet_edges`` which swaps in a new handle. A handle is never
    modified in place, so views created by upcasting stay valid.
    """

    def __init__(self, occt_shape: Any) -> None:
        if occt_shape is None or occt_shape.IsNull():
            raise ValueError("Shape requires a non-null kernel shape")
        self._occt_shape = occt_shape

    @property
    def occt_shape(self) -> Any:
        return self._occt_shape

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.of(self._occt_shape)

    @classmethod
    def make_box(cls) -> Shape:
        """Unit box with its minimum corner at the origin."""
        return cls.box_with_dimensions((0.0, 0.0, 0.0), 1.0, 1.0, 1.0)

    @classmethod
    def box_with_dimensions(cls, origin: Sequence[float], dx: float, dy: float, dz: float) -> Shape:
        return cls(occt_ops.make_box(origin, dx, dy, dz))

    def clean(self) -> Shape:
        """Return a simplified copy with same-domain faces and edges merged."""
        return Shape(occt_ops.unify_same_domain(self._occt_shape))

    def fillet_edges(self, radius: float) -> None:
        """Round every edge of the shape with ``radius``.

        Edges are added in kernel exploration order. Radius values the
        kernel cannot honour (including non-positive ones) raise
        KernelOperationError and leave the shape unchanged.

        The new kind is whatever the kernel returns: filleting a box
        yields a compound holding one solid, so reading it back with
        ``Solid.from_shape`` raises KindMismatchError.
        """
        builder = FilletBuilder(self._occt_shape)
        for edge in occt_ops.explore(self._occt_shape, "edge"):
            builder.add(edge, radius)

        self._occt_shape = builder.commit()
        logger.debug("Edges filleted", radius=radius)

    def write_stl(self, path: Union[str, Path], deflection: float = DEFAULT_DEFLECTION) -> Path:
        """Triangulate the shape and write it as an STL file.

        Raises:
            ExportError: If the kernel fails to mesh or write the file
        """
        return write_stl(self._occt_shape, path, deflection)

    def subshapes(self, kind: Union[ShapeKind, str]) -> list[Shape]:
        """Distinct sub-shapes of ``kind`` in kernel exploration order."""
        kind = ShapeKind(kind)
        return [Shape(sub) for sub in occt_ops.explore(self._occt_shape, kind.value)]

    def count(self, kind: Union[ShapeKind, str]) -> int:
        kind = ShapeKind(kind)
        return len(occt_ops.explore(self._occt_shape, kind.value))

    def summary(self, model_id: str = "shape") -> GeometrySummary:
        return summarize_shape(self._occt_shape, model_id)

    def is_same(self, other: Shape) -> bool:
        """Check whether ``other`` refers to the same kernel geometry."""
        return occt_ops.is_same(self._occt_shape, other.occt_shape)

    def clone(self) -> Shape:
        """Deep copy through the kernel; the clone shares no geometry."""
        return Shape(occt_ops.copy_shape(self._occt_shape))

    def __copy__(self) -> Shape:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> Shape:
        return self.clone()

    def __repr__(self) -> str:
        return f"Shape(kind={self.kind.value})"
