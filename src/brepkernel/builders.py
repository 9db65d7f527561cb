"""Single-use kernel builders for multi-shape operations.

Each builder accumulates its inputs, then ``commit()`` runs the kernel
algorithm exactly once and returns the resulting ``TopoDS_Shape``. A
committed builder cannot be reused.
"""

from __future__ import annotations

from typing import Any

import structlog

from .occt_ops import KernelOperationError, ensure_not_null, narrow, require_occt

logger = structlog.get_logger(__name__)


class BuilderConsumedError(KernelOperationError):
    """Raised when a builder is used after it has been committed."""

    pass


class _Builder:
    """Commit-once bookkeeping shared by all builders."""

    operation = "builder"

    def __init__(self) -> None:
        require_occt()
        self._committed = False

    @property
    def committed(self) -> bool:
        return self._committed

    def _ensure_open(self) -> None:
        if self._committed:
            raise BuilderConsumedError(
                f"{self.operation} builder has already been committed", operation=self.operation
            )

    def _perform(self) -> Any:
        raise NotImplementedError

    def commit(self) -> Any:
        """Run the kernel algorithm and return its result.

        Raises:
            BuilderConsumedError: If the builder was already committed
            KernelOperationError: If the kernel cannot produce a result
        """
        self._ensure_open()
        self._committed = True

        try:
            result = self._perform()
        except KernelOperationError:
            raise
        except Exception as e:
            logger.warning("Kernel operation failed", operation=self.operation, error=str(e))
            raise KernelOperationError(
                f"{self.operation} failed: {e}", operation=self.operation
            ) from e

        return ensure_not_null(result, self.operation)


class FilletBuilder(_Builder):
    """Rounds edges of a shape with constant-radius blends."""

    operation = "fillet"

    def __init__(self, shape: Any) -> None:
        super().__init__()
        self._shape = shape
        self._edges: list[tuple[Any, float]] = []

    def add(self, edge: Any, radius: float) -> FilletBuilder:
        self._ensure_open()
        self._edges.append((narrow(edge, "edge"), radius))
        return self

    def _perform(self) -> Any:
        from OCP.BRepFilletAPI import BRepFilletAPI_MakeFillet

        if not self._edges:
            raise KernelOperationError("Fillet requires at least one edge", operation=self.operation)

        maker = BRepFilletAPI_MakeFillet(self._shape)
        for edge, radius in self._edges:
            maker.Add(radius, edge)

        maker.Build()
        if not maker.IsDone():
            logger.warning("Fillet not done", edges=len(self._edges))
            raise KernelOperationError(
                f"Fillet of {len(self._edges)} edges could not be computed", operation=self.operation
            )

        logger.debug("Fillet committed", edges=len(self._edges))
        return maker.Shape()


class LoftBuilder(_Builder):
    """Through-sections surface interpolating ordered wires."""

    operation = "loft"

    def __init__(self, check_compatibility: bool = True, ruled: bool = False) -> None:
        super().__init__()
        self._check_compatibility = check_compatibility
        self._ruled = ruled
        self._wires: list[Any] = []

    def add_wire(self, wire: Any) -> LoftBuilder:
        self._ensure_open()
        self._wires.append(narrow(wire, "wire"))
        return self

    def _perform(self) -> Any:
        from OCP.BRepOffsetAPI import BRepOffsetAPI_ThruSections

        if len(self._wires) < 2:
            raise KernelOperationError(
                f"Loft requires at least two wires, got {len(self._wires)}", operation=self.operation
            )

        maker = BRepOffsetAPI_ThruSections(False, self._ruled)
        for wire in self._wires:
            maker.AddWire(wire)

        # Compatibility checking keeps sections from twisting
        maker.CheckCompatibility(self._check_compatibility)

        maker.Build()
        if not maker.IsDone():
            logger.warning("Loft not done", wires=len(self._wires))
            raise KernelOperationError(
                f"Loft through {len(self._wires)} wires could not be computed",
                operation=self.operation,
            )

        logger.debug("Loft committed", wires=len(self._wires))
        return maker.Shape()


class VolumeBuilder(_Builder):
    """Boolean make-volume: builds solids from the space bounded by its arguments.

    The result is a general shape; a single solid comes back as a solid,
    several solids (or none) come back as a compound.
    """

    operation = "make_volume"

    def __init__(self) -> None:
        super().__init__()
        self._arguments: list[Any] = []

    def add_argument(self, shape: Any) -> VolumeBuilder:
        self._ensure_open()
        self._arguments.append(shape)
        return self

    def _perform(self) -> Any:
        from OCP.BOPAlgo import BOPAlgo_MakerVolume
        from OCP.Message import Message_ProgressRange
        from OCP.TopTools import TopTools_ListOfShape

        if not self._arguments:
            raise KernelOperationError("Make-volume requires arguments", operation=self.operation)

        arguments = TopTools_ListOfShape()
        for shape in self._arguments:
            arguments.Append(shape)

        maker = BOPAlgo_MakerVolume()
        maker.SetArguments(arguments)
        maker.Perform(Message_ProgressRange())

        if maker.HasErrors():
            logger.warning("Make-volume reported errors", arguments=len(self._arguments))
            raise KernelOperationError(
                "Make-volume could not be computed", operation=self.operation
            )

        logger.debug("Make-volume committed", arguments=len(self._arguments))
        return maker.Shape()


class CompoundBuilder(_Builder):
    """Groups shapes into a compound, keeping insertion order."""

    operation = "compound"

    def __init__(self) -> None:
        super().__init__()
        self._children: list[Any] = []

    def add(self, shape: Any) -> CompoundBuilder:
        self._ensure_open()
        self._children.append(shape)
        return self

    def _perform(self) -> Any:
        from OCP.BRep import BRep_Builder
        from OCP.TopoDS import TopoDS_Compound

        compound = TopoDS_Compound()
        builder = BRep_Builder()
        builder.MakeCompound(compound)
        for child in self._children:
            builder.Add(compound, child)

        logger.debug("Compound committed", children=len(self._children))
        return compound
