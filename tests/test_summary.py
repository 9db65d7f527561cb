"""Tests for geometry summaries and their serialization."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from brepkernel.summary import (
    SUMMARY_VERSION,
    GeometrySummary,
    summarize_shape,
    to_json_dict,
    to_json_string,
)


def _sample_summary() -> GeometrySummary:
    return GeometrySummary(
        model_id="sample",
        kind="solid",
        solids=1,
        shells=1,
        faces=6,
        wires=6,
        edges=12,
        vertices=8,
        bounding_box={"min_x": 0.0, "min_y": 0.0, "min_z": 0.0,
                      "max_x": 1.0, "max_y": 1.0, "max_z": 1.0},
        surface_area=6.0,
        volume=1.0,
    )


class TestGeometrySummary:
    """Test cases for the summary dataclass."""

    def test_defaults(self):
        """Test counts default to zero and warnings to an empty list."""
        summary = GeometrySummary(model_id="empty", kind="compound")

        assert summary.faces == 0
        assert summary.bounding_box is None
        assert summary.analysis_warnings == []

    def test_warnings_not_shared(self):
        """Test each summary gets its own warnings list."""
        first = GeometrySummary(model_id="a", kind="solid")
        second = GeometrySummary(model_id="b", kind="solid")
        first.analysis_warnings.append("x")

        assert second.analysis_warnings == []


class TestSerialization:
    """Test cases for deterministic JSON output."""

    def test_to_json_dict(self):
        """Test the dictionary form carries the schema version and counts."""
        data = to_json_dict(_sample_summary())

        assert data["summary_version"] == SUMMARY_VERSION
        assert data["edges"] == 12
        assert data["bounding_box"]["max_z"] == 1.0

    def test_to_json_string_sorted(self):
        """Test keys are emitted in sorted order."""
        text = to_json_string(_sample_summary())
        keys = list(json.loads(text).keys())

        assert keys == sorted(keys)

    def test_to_json_string_deterministic(self):
        """Test repeated serialization gives identical output."""
        assert to_json_string(_sample_summary()) == to_json_string(_sample_summary())

    def test_to_json_string_pretty(self):
        """Test pretty output is indented and still valid JSON."""
        text = to_json_string(_sample_summary(), pretty=True)

        assert "\n  " in text
        assert json.loads(text)["model_id"] == "sample"


@pytest.mark.occt
class TestSummarizeShape:
    """Test cases for summarizing real kernel shapes."""

    def test_box_summary(self, unit_box):
        """Test the unit box summary."""
        summary = summarize_shape(unit_box.occt_shape, "box")

        assert summary.model_id == "box"
        assert summary.kind == "solid"
        assert (summary.solids, summary.faces, summary.edges, summary.vertices) == (1, 6, 12, 8)
        assert summary.surface_area == pytest.approx(6.0)
        assert summary.volume == pytest.approx(1.0)
        assert summary.analysis_warnings == []

    def test_surface_only_warning(self, square_wire):
        """Test a lone face is flagged as surface geometry without solids."""
        from typedbrep import Face

        face = Face.from_wire(square_wire())
        summary = summarize_shape(face.occt_shape)

        assert summary.solids == 0
        assert "Shape contains surface geometry but no solids" in summary.analysis_warnings

    def test_wireframe_warning(self, square_wire):
        """Test a wire is flagged as wireframe geometry."""
        summary = summarize_shape(square_wire().occt_shape)
        assert "Shape contains only wireframe geometry (no surfaces)" in summary.analysis_warnings

    def test_bounding_box_failure_recorded(self, unit_box):
        """Test a failed bounding box computation becomes a warning."""
        with patch("brepkernel.summary.occt_ops.bounding_box", side_effect=RuntimeError("void")):
            summary = summarize_shape(unit_box.occt_shape)

        assert summary.bounding_box is None
        assert "Could not compute bounding box" in summary.analysis_warnings

    def test_volume_failure_recorded(self, unit_box):
        """Test a failed volume computation leaves the rest of the summary intact."""
        with patch("brepkernel.summary.occt_ops.volume", side_effect=RuntimeError("void")):
            summary = summarize_shape(unit_box.occt_shape)

        assert summary.volume is None
        assert summary.surface_area == pytest.approx(6.0)
        assert "Could not compute volume" in summary.analysis_warnings
