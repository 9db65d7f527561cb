"""Connected set of faces, open or closed."""

from __future__ import annotations

from typing import Iterable

import structlog

from brepkernel.builders import LoftBuilder, VolumeBuilder

from ..casting import TypedShape
from ..kinds import ShapeKind
from ..mass import surface_center_of_mass
from ..point import Point3
from ..shape import Shape
from .face import Face
from .solid import Solid
from .wire import Wire

logger = structlog.get_logger(__name__)


class Shell(TypedShape):
    kind = ShapeKind.SHELL

    @classmethod
    def loft(cls, wires: Iterable[Wire]) -> Shell:
        """Build a through-sections surface interpolating ``wires``.

        Wire order is kept: it defines the direction of the loft.
        Compatibility checking between sections is enabled.

        Raises:
            KernelOperationError: If fewer than two wires are given or the
                kernel cannot loft through them
            KindMismatchError: If the kernel result is not a shell
        """
        builder = LoftBuilder(check_compatibility=True)
        count = 0
        for wire in wires:
            if not isinstance(wire, Wire):
                raise TypeError(f"loft expects Wire sections, got {type(wire).__name__}")
            builder.add_wire(wire.occt_shape)
            count += 1

        result = Shape(builder.commit())
        logger.debug("Shell lofted", wires=count)
        return cls.from_shape(result)

    def volume(self, face: Face) -> Solid:
        """Build the solid bounded by this shell and ``face``.

        Raises:
            KernelOperationError: If the make-volume algorithm fails
            KindMismatchError: If the result is not a single solid
        """
        builder = VolumeBuilder()
        builder.add_argument(self.occt_shape)
        builder.add_argument(face.occt_shape)
        return Solid.from_shape(Shape(builder.commit()))

    def center_of_mass(self) -> Point3:
        return surface_center_of_mass(self.occt_shape)
