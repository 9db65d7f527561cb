"""Geometry analysis and summary generation.

This module computes topology counts and mass properties of a kernel
shape and serializes them deterministically.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict

import orjson
import structlog

from . import occt_ops

logger = structlog.get_logger(__name__)

SUMMARY_VERSION = "0.1.0"

_TOPOLOGY_KEYS = (
    ("solids", "solid"),
    ("shells", "shell"),
    ("faces", "face"),
    ("wires", "wire"),
    ("edges", "edge"),
    ("vertices", "vertex"),
)


@dataclass
class GeometrySummary:
    """Summary of geometric properties and topology."""

    model_id: str
    kind: str

    # Topological counts
    solids: int = 0
    shells: int = 0
    faces: int = 0
    wires: int = 0
    edges: int = 0
    vertices: int = 0

    # Geometric properties
    bounding_box: dict[str, float] | None = None
    surface_area: float | None = None
    volume: float | None = None

    analysis_warnings: list[str] = field(default_factory=list)


def _try_measure(measure, shape: Any, what: str) -> float | None:
    try:
        return measure(shape)
    except Exception as e:
        logger.debug("Failed to compute property", prop=what, error=str(e))
        return None


def summarize_shape(shape: Any, model_id: str = "shape") -> GeometrySummary:
    """Generate a summary of a kernel shape.

    Args:
        shape: TopoDS_Shape to analyze
        model_id: Identifier recorded in the summary

    Returns:
        GeometrySummary with topology counts and properties
    """
    logger.info("Generating geometry summary", model_id=model_id)

    warnings = []
    topology_counts = {
        key: len(occt_ops.explore(shape, type_name)) for key, type_name in _TOPOLOGY_KEYS
    }

    try:
        bounding_box = occt_ops.bounding_box(shape)
    except Exception as e:
        logger.warning("Failed to compute bounding box", error=str(e))
        bounding_box = None

    surface_area = _try_measure(occt_ops.surface_area, shape, "surface_area")
    volume = _try_measure(occt_ops.volume, shape, "volume")

    if topology_counts["faces"] == 0 and topology_counts["edges"] > 0:
        warnings.append("Shape contains only wireframe geometry (no surfaces)")

    if topology_counts["solids"] == 0 and topology_counts["faces"] > 0:
        warnings.append("Shape contains surface geometry but no solids")

    if bounding_box is None:
        warnings.append("Could not compute bounding box")

    if surface_area is None:
        warnings.append("Could not compute surface area")

    if volume is None:
        warnings.append("Could not compute volume")

    summary = GeometrySummary(
        model_id=model_id,
        kind=occt_ops.shape_type_name(shape),
        bounding_box=bounding_box,
        surface_area=surface_area,
        volume=volume,
        analysis_warnings=warnings,
        **topology_counts,
    )

    logger.info(
        "Geometry summary completed",
        model_id=model_id,
        faces=summary.faces,
        edges=summary.edges,
        vertices=summary.vertices,
        warnings_count=len(warnings),
    )

    return summary


def to_json_dict(summary: GeometrySummary) -> Dict[str, Any]:
    """Convert a summary to a JSON-serializable dictionary."""
    data = asdict(summary)
    data["summary_version"] = SUMMARY_VERSION
    return data


def to_json_string(summary: GeometrySummary, pretty: bool = False) -> str:
    """Serialize a summary with sorted keys for reproducible output.

    Args:
        summary: The summary to serialize
        pretty: If True, format JSON with indentation

    Returns:
        JSON string representation
    """
    option = orjson.OPT_SORT_KEYS
    if pretty:
        option |= orjson.OPT_INDENT_2
    return orjson.dumps(to_json_dict(summary), option=option).decode("utf-8")
