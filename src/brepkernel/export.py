"""Mesh export functionality.

This module triangulates kernel shapes and writes them as STL files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import structlog

from .occt_ops import KernelOperationError

logger = structlog.get_logger(__name__)

# Linear deflection of the triangulation, in model length units
DEFAULT_DEFLECTION = 0.001
DEFAULT_ANGULAR_DEFLECTION = 0.5


class ExportError(Exception):
    """Raised when export operations fail."""
    pass


def triangulate(shape: Any,
                deflection: float = DEFAULT_DEFLECTION,
                angular_deflection: float = DEFAULT_ANGULAR_DEFLECTION) -> Any:
    """Compute the triangulation of every face of ``shape``.

    The triangulation is stored on the shape's faces; the returned shape is
    the meshed input.

    Args:
        shape: TopoDS_Shape to mesh
        deflection: Maximum linear distance between mesh and surface
        angular_deflection: Maximum angle between adjacent mesh facets

    Returns:
        The meshed TopoDS_Shape

    Raises:
        KernelOperationError: If meshing fails
    """
    from OCP.BRepMesh import BRepMesh_IncrementalMesh

    if deflection <= 0:
        raise KernelOperationError(
            f"Deflection must be positive, got {deflection}", operation="triangulate"
        )

    try:
        mesh = BRepMesh_IncrementalMesh(shape, deflection, False, angular_deflection, False)
    except Exception as e:
        logger.error("Triangulation failed", deflection=deflection, error=str(e))
        raise KernelOperationError(f"Triangulation failed: {e}", operation="triangulate") from e

    if not mesh.IsDone():
        raise KernelOperationError("Triangulation did not complete", operation="triangulate")

    logger.debug("Shape triangulated", deflection=deflection)
    return mesh.Shape()


def write_stl(shape: Any,
              output_path: Union[str, Path],
              deflection: float = DEFAULT_DEFLECTION,
              ascii_mode: bool = False) -> Path:
    """Triangulate ``shape`` and write it to an STL file.

    Args:
        shape: TopoDS_Shape to export
        output_path: Destination file path
        deflection: Linear deflection used for triangulation
        ascii_mode: Write ASCII STL instead of binary

    Returns:
        Resolved path of the written file

    Raises:
        ExportError: If triangulation or writing fails
    """
    from OCP.StlAPI import StlAPI_Writer

    path = Path(output_path)
    logger.info("Exporting STL", path=str(path), deflection=deflection)

    try:
        meshed = triangulate(shape, deflection)
    except KernelOperationError as e:
        raise ExportError(f"Failed to export STL: {e}") from e

    writer = StlAPI_Writer()
    writer.ASCIIMode = ascii_mode
    success = writer.Write(meshed, str(path))

    if not success:
        logger.error("STL writer reported failure", path=str(path))
        raise ExportError(f"Failed to write STL file: {path}")

    logger.info("STL exported", path=str(path), size_bytes=path.stat().st_size)
    return path.resolve()
