"""Tests for the casting layer between Shape and typed wrappers."""

from __future__ import annotations

import pytest

from typedbrep import (
    Compound,
    Edge,
    Face,
    KindMismatchError,
    Shape,
    ShapeKind,
    Shell,
    Solid,
    Vertex,
    Wire,
    downcast,
    upcast,
)

pytestmark = [pytest.mark.occt, pytest.mark.usefixtures("skip_if_no_occt")]


def _typed_samples(square_wire):
    """One instance of every typed wrapper."""
    box = Shape.make_box()
    face = Face.from_wire(square_wire())
    return [
        Vertex.new((1.0, 2.0, 3.0)),
        Edge.segment((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
        square_wire(),
        face,
        Shell.from_shape(box.subshapes(ShapeKind.SHELL)[0]),
        Solid.from_shape(box),
        Compound.from_shapes([box, face]),
    ]


class TestRoundTrip:
    """Test cases for upcast followed by downcast."""

    def test_round_trip_every_kind(self, square_wire):
        """Test downcast(upcast(w)) succeeds and keeps the declared kind."""
        for typed in _typed_samples(square_wire):
            generic = upcast(typed)
            assert generic.kind is typed.kind

            back = downcast(generic, type(typed))
            assert isinstance(back, type(typed))
            assert back.kind is typed.kind
            assert back.to_shape().is_same(typed.to_shape())

    def test_upcast_leaves_source_untouched(self):
        """Test upcasting does not alter the typed wrapper."""
        vertex = Vertex.new((1.0, 2.0, 3.0))
        generic = vertex.to_shape()

        assert isinstance(generic, Shape)
        assert generic.kind is ShapeKind.VERTEX
        assert vertex.point() == (1.0, 2.0, 3.0)

    def test_downcast_keeps_source_valid(self, unit_box):
        """Test the generic shape stays usable after a successful downcast."""
        solid = Solid.from_shape(unit_box)

        assert unit_box.kind is ShapeKind.SOLID
        assert unit_box.count(ShapeKind.FACE) == 6
        assert solid.center_of_mass() == pytest.approx((0.5, 0.5, 0.5))


class TestRejection:
    """Test cases for mismatched downcasts."""

    def test_face_to_vertex_rejected(self, square_wire):
        """Test a face cannot be reinterpreted as a vertex."""
        generic = Face.from_wire(square_wire()).to_shape()

        with pytest.raises(KindMismatchError) as exc_info:
            Vertex.from_shape(generic)

        assert exc_info.value.expected is ShapeKind.VERTEX
        assert exc_info.value.actual is ShapeKind.FACE
        assert "Expected a vertex shape, got face" in str(exc_info.value)

    def test_wire_is_not_an_edge(self):
        """Test a single-edge wire is still not accepted as an edge."""
        edge = Edge.segment((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
        wire = Wire.from_edges([edge])

        with pytest.raises(KindMismatchError):
            Edge.from_shape(wire.to_shape())

    def test_compound_of_one_solid_is_not_a_solid(self, unit_box):
        """Test a compound holding one solid is not coerced to a solid."""
        compound = Compound.from_shapes([unit_box])

        with pytest.raises(KindMismatchError) as exc_info:
            Solid.from_shape(compound.to_shape())
        assert exc_info.value.actual is ShapeKind.COMPOUND

    def test_direct_construction_checks_kind(self, unit_box):
        """Test constructing a wrapper from a raw handle checks the tag too."""
        with pytest.raises(KindMismatchError):
            Shell(unit_box.occt_shape)

    def test_null_handle_rejected(self):
        """Test wrappers refuse a missing handle."""
        with pytest.raises(ValueError, match="non-null"):
            Vertex(None)
        with pytest.raises(ValueError, match="non-null"):
            Shape(None)
