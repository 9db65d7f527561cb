"""Conversions between the generic Shape and the typed wrappers.

Upcasting (typed -> generic) always succeeds. Downcasting (generic ->
typed) checks the runtime kind tag and raises KindMismatchError on a
mismatch; there is no unchecked reinterpretation.
"""

from __future__ import annotations

from typing import Any, ClassVar, Type, TypeVar

import structlog

from brepkernel import occt_ops

from .kinds import ShapeKind
from .shape import Shape

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound="TypedShape")


class KindMismatchError(Exception):
    """Raised when a shape's kind tag does not match the requested wrapper."""

    def __init__(self, expected: ShapeKind, actual: ShapeKind) -> None:
        super().__init__(f"Expected a {expected.value} shape, got {actual.value}")
        self.expected = expected
        self.actual = actual


class TypedShape:
    """Base for wrappers owning a handle of one known kind."""

    kind: ClassVar[ShapeKind] = ShapeKind.SHAPE

    def __init__(self, occt_shape: Any) -> None:
        if occt_shape is None or occt_shape.IsNull():
            raise ValueError(f"{type(self).__name__} requires a non-null kernel shape")

        actual = ShapeKind.of(occt_shape)
        if actual is not self.kind:
            raise KindMismatchError(self.kind, actual)

        self._occt_shape = occt_ops.narrow(occt_shape, self.kind.value)

    @property
    def occt_shape(self) -> Any:
        return self._occt_shape

    @classmethod
    def from_shape(cls: Type[T], shape: Shape) -> T:
        """Fallible construction from a generic shape."""
        return downcast(shape, cls)

    def to_shape(self) -> Shape:
        return upcast(self)

    def clone(self: T) -> T:
        """Deep copy through the kernel; the clone shares no geometry."""
        return type(self)(occt_ops.copy_shape(self._occt_shape))

    def __copy__(self: T) -> T:
        return self.clone()

    def __deepcopy__(self: T, memo: dict) -> T:
        return self.clone()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def upcast(typed: TypedShape) -> Shape:
    """View a typed wrapper as a generic Shape.

    The returned Shape refers to the same kernel geometry; neither side
    ever mutates a handle in place, so the source stays untouched.
    """
    return Shape(typed.occt_shape)


def downcast(shape: Shape, cls: Type[T]) -> T:
    """Reinterpret ``shape`` as ``cls`` if its kind tag matches.

    Raises:
        KindMismatchError: If the shape is of another kind
    """
    actual = shape.kind
    if actual is not cls.kind:
        logger.debug("Downcast rejected", expected=cls.kind.value, actual=actual.value)
        raise KindMismatchError(cls.kind, actual)

    return cls(shape.occt_shape)
