"""Open CASCADE operation contract.

This module is the only place that talks to the OCCT kernel through the
OCP binding. Everything above it handles ``TopoDS_Shape`` objects as
opaque handles and calls the functions defined here.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import structlog

logger = structlog.get_logger(__name__)

Coordinates = Sequence[float]


class OCCTNotAvailableError(Exception):
    """Raised when the OCP binding cannot be imported."""

    pass


class KernelOperationError(Exception):
    """Raised when a kernel computation cannot produce a valid result."""

    def __init__(self, message: str, operation: str = "kernel") -> None:
        super().__init__(message)
        self.operation = operation


def get_occt_info() -> dict[str, Any]:
    """Get information about the available OCCT binding.

    Returns:
        Dictionary with binding availability and version info
    """
    info = {
        "ocp_available": False,
        "binding": None,
        "occt_version": None,
    }

    try:
        import OCP

        info["ocp_available"] = True
        info["binding"] = "OCP"
        info["occt_version"] = getattr(OCP, "__version__", "unknown")
        logger.debug("OCP binding detected", version=info["occt_version"])
    except ImportError:
        logger.debug("OCP not available")

    return info


def require_occt() -> None:
    """Raise OCCTNotAvailableError unless the OCP binding is importable."""
    if not get_occt_info()["ocp_available"]:
        raise OCCTNotAvailableError(
            "No OCCT Python binding available. "
            "Please install the OCP binding:\n"
            "  pip install cadquery-ocp\n"
            "  OR\n"
            "  conda install -c conda-forge ocp"
        )


def ensure_not_null(shape: Any, operation: str) -> Any:
    """Return ``shape`` or raise KernelOperationError if the kernel gave a null shape."""
    if shape is None or shape.IsNull():
        logger.warning("Kernel returned a null shape", operation=operation)
        raise KernelOperationError(f"{operation} produced a null shape", operation=operation)
    return shape


# Kind tags

def _shape_type_table() -> dict[Any, str]:
    from OCP.TopAbs import (
        TopAbs_COMPOUND,
        TopAbs_COMPSOLID,
        TopAbs_EDGE,
        TopAbs_FACE,
        TopAbs_SHAPE,
        TopAbs_SHELL,
        TopAbs_SOLID,
        TopAbs_VERTEX,
        TopAbs_WIRE,
    )

    return {
        TopAbs_VERTEX: "vertex",
        TopAbs_EDGE: "edge",
        TopAbs_WIRE: "wire",
        TopAbs_FACE: "face",
        TopAbs_SHELL: "shell",
        TopAbs_SOLID: "solid",
        TopAbs_COMPOUND: "compound",
        TopAbs_COMPSOLID: "compsolid",
        TopAbs_SHAPE: "shape",
    }


def _shape_enum(name: str) -> Any:
    for shape_enum, type_name in _shape_type_table().items():
        if type_name == name:
            return shape_enum
    raise ValueError(f"Unknown shape type: {name}")


def shape_type_name(shape: Any) -> str:
    """Return the runtime kind tag of ``shape`` as a lowercase name."""
    return _shape_type_table()[shape.ShapeType()]


def narrow(shape: Any, name: str) -> Any:
    """Narrow ``shape`` to the TopoDS subclass for ``name``.

    The caller is responsible for checking the kind tag first; this
    function only performs the binding-level cast.
    """
    from OCP.TopoDS import TopoDS

    casts = {
        "vertex": TopoDS.Vertex_s,
        "edge": TopoDS.Edge_s,
        "wire": TopoDS.Wire_s,
        "face": TopoDS.Face_s,
        "shell": TopoDS.Shell_s,
        "solid": TopoDS.Solid_s,
        "compound": TopoDS.Compound_s,
        "compsolid": TopoDS.CompSolid_s,
    }
    if name == "shape":
        return shape
    return casts[name](shape)


# Primitive constructors

def make_box(origin: Coordinates, dx: float, dy: float, dz: float) -> Any:
    """Build an axis-aligned box with its minimum corner at ``origin``."""
    require_occt()
    from OCP.BRepPrimAPI import BRepPrimAPI_MakeBox
    from OCP.gp import gp_Pnt

    if min(dx, dy, dz) <= 0:
        raise KernelOperationError(
            f"Box extents must be positive, got ({dx}, {dy}, {dz})", operation="make_box"
        )

    try:
        shape = BRepPrimAPI_MakeBox(gp_Pnt(*origin), dx, dy, dz).Shape()
    except Exception as e:
        logger.warning("Box construction failed", origin=tuple(origin), error=str(e))
        raise KernelOperationError(f"Box construction failed: {e}", operation="make_box") from e

    return ensure_not_null(shape, "make_box")


def make_vertex(point: Coordinates) -> Any:
    """Build a vertex at ``point``."""
    require_occt()
    from OCP.BRepBuilderAPI import BRepBuilderAPI_MakeVertex
    from OCP.gp import gp_Pnt

    return ensure_not_null(BRepBuilderAPI_MakeVertex(gp_Pnt(*point)).Vertex(), "make_vertex")


def vertex_point(vertex: Any) -> tuple[float, float, float]:
    """Return the coordinates of a TopoDS_Vertex."""
    from OCP.BRep import BRep_Tool

    pnt = BRep_Tool.Pnt_s(vertex)
    return (pnt.X(), pnt.Y(), pnt.Z())


def vertex_distance(first: Any, second: Any) -> float:
    """Return the Euclidean distance between two vertices."""
    from OCP.BRep import BRep_Tool

    return BRep_Tool.Pnt_s(first).Distance(BRep_Tool.Pnt_s(second))


def make_segment(start: Coordinates, end: Coordinates) -> Any:
    """Build a straight edge between two points."""
    require_occt()
    from OCP.BRepBuilderAPI import BRepBuilderAPI_MakeEdge
    from OCP.gp import gp_Pnt

    try:
        maker = BRepBuilderAPI_MakeEdge(gp_Pnt(*start), gp_Pnt(*end))
    except Exception as e:
        raise KernelOperationError(f"Cannot build segment: {e}", operation="make_segment") from e

    if not maker.IsDone():
        raise KernelOperationError(
            f"Cannot build segment from {tuple(start)} to {tuple(end)}", operation="make_segment"
        )
    return ensure_not_null(maker.Edge(), "make_segment")


def make_circle(center: Coordinates, normal: Coordinates, radius: float) -> Any:
    """Build a full circular edge."""
    require_occt()
    from OCP.BRepBuilderAPI import BRepBuilderAPI_MakeEdge
    from OCP.gp import gp_Ax2, gp_Circ, gp_Dir, gp_Pnt

    if radius <= 0:
        raise KernelOperationError(
            f"Circle radius must be positive, got {radius}", operation="make_circle"
        )

    try:
        circle = gp_Circ(gp_Ax2(gp_Pnt(*center), gp_Dir(*normal)), radius)
        maker = BRepBuilderAPI_MakeEdge(circle)
    except Exception as e:
        raise KernelOperationError(f"Cannot build circle: {e}", operation="make_circle") from e

    if not maker.IsDone():
        raise KernelOperationError("Cannot build circle", operation="make_circle")
    return ensure_not_null(maker.Edge(), "make_circle")


def make_wire(edges: Iterable[Any]) -> Any:
    """Join connected edges into a wire, in the given order."""
    require_occt()
    from OCP.BRepBuilderAPI import BRepBuilderAPI_MakeWire

    maker = BRepBuilderAPI_MakeWire()
    count = 0
    for edge in edges:
        maker.Add(edge)
        count += 1

    if count == 0:
        raise KernelOperationError("A wire needs at least one edge", operation="make_wire")
    if not maker.IsDone():
        logger.warning("Wire construction failed", edges=count)
        raise KernelOperationError(
            f"Cannot join {count} edges into a wire (edges not connected?)", operation="make_wire"
        )
    return ensure_not_null(maker.Wire(), "make_wire")


def make_polygon(points: Iterable[Coordinates], closed: bool = True) -> Any:
    """Build a polyline wire through ``points``."""
    require_occt()
    from OCP.BRepBuilderAPI import BRepBuilderAPI_MakePolygon
    from OCP.gp import gp_Pnt

    maker = BRepBuilderAPI_MakePolygon()
    for point in points:
        maker.Add(gp_Pnt(*point))
    if closed:
        maker.Close()

    if not maker.IsDone():
        raise KernelOperationError("Cannot build polygon wire", operation="make_polygon")
    return ensure_not_null(maker.Wire(), "make_polygon")


def make_face(wire: Any) -> Any:
    """Build a planar face bounded by a closed wire."""
    require_occt()
    from OCP.BRepBuilderAPI import BRepBuilderAPI_MakeFace

    try:
        maker = BRepBuilderAPI_MakeFace(wire, True)
    except Exception as e:
        raise KernelOperationError(f"Cannot build face: {e}", operation="make_face") from e

    if not maker.IsDone():
        raise KernelOperationError(
            "Cannot build a planar face from wire", operation="make_face"
        )
    return ensure_not_null(maker.Face(), "make_face")


# Topology exploration

def explore(shape: Any, name: str) -> list[Any]:
    """Return the distinct sub-shapes of kind ``name``.

    Order follows the kernel's exploration order. It is stable for a given
    shape but carries no geometric meaning.
    """
    from OCP.TopExp import TopExp
    from OCP.TopTools import TopTools_IndexedMapOfShape

    if name == "shape":
        raise ValueError("Cannot explore sub-shapes of the generic kind")

    shape_map = TopTools_IndexedMapOfShape()
    TopExp.MapShapes_s(shape, _shape_enum(name), shape_map)
    return [shape_map.FindKey(i) for i in range(1, shape_map.Extent() + 1)]


def children(shape: Any) -> list[Any]:
    """Return the direct children of ``shape`` in insertion order."""
    from OCP.TopoDS import TopoDS_Iterator

    result = []
    iterator = TopoDS_Iterator(shape)
    while iterator.More():
        result.append(iterator.Value())
        iterator.Next()
    return result


# Whole-shape operations

def copy_shape(shape: Any) -> Any:
    """Deep-copy ``shape`` including its geometry."""
    from OCP.BRepBuilderAPI import BRepBuilderAPI_Copy

    copier = BRepBuilderAPI_Copy(shape, True, False)
    return ensure_not_null(copier.Shape(), "copy_shape")


def unify_same_domain(shape: Any) -> Any:
    """Merge coplanar faces and collinear edges of ``shape``."""
    from OCP.ShapeUpgrade import ShapeUpgrade_UnifySameDomain

    try:
        upgrader = ShapeUpgrade_UnifySameDomain(shape, True, True, True)
        upgrader.Build()
        result = upgrader.Shape()
    except Exception as e:
        logger.warning("Shape cleanup failed", error=str(e))
        raise KernelOperationError(f"Shape cleanup failed: {e}", operation="clean") from e

    return ensure_not_null(result, "clean")


def is_same(first: Any, second: Any) -> bool:
    """Check whether two handles refer to the same kernel geometry."""
    return bool(first.IsSame(second))


# Mass properties

def surface_centroid(shape: Any) -> tuple[float, float, float]:
    """Centroid of the bounding surfaces of ``shape``."""
    from OCP.BRepGProp import BRepGProp
    from OCP.GProp import GProp_GProps

    props = GProp_GProps()
    BRepGProp.SurfaceProperties_s(shape, props)
    center = props.CentreOfMass()
    return (center.X(), center.Y(), center.Z())


def volume_centroid(shape: Any) -> tuple[float, float, float]:
    """Centroid of the volume enclosed by ``shape``."""
    from OCP.BRepGProp import BRepGProp
    from OCP.GProp import GProp_GProps

    props = GProp_GProps()
    BRepGProp.VolumeProperties_s(shape, props)
    center = props.CentreOfMass()
    return (center.X(), center.Y(), center.Z())


def surface_area(shape: Any) -> float:
    from OCP.BRepGProp import BRepGProp
    from OCP.GProp import GProp_GProps

    props = GProp_GProps()
    BRepGProp.SurfaceProperties_s(shape, props)
    return float(props.Mass())


def volume(shape: Any) -> float:
    from OCP.BRepGProp import BRepGProp
    from OCP.GProp import GProp_GProps

    props = GProp_GProps()
    BRepGProp.VolumeProperties_s(shape, props)
    return float(props.Mass())


def bounding_box(shape: Any) -> dict[str, float] | None:
    """Compute the axis-aligned bounding box, or None for an empty shape."""
    from OCP.Bnd import Bnd_Box
    from OCP.BRepBndLib import BRepBndLib

    bbox = Bnd_Box()
    BRepBndLib.Add_s(shape, bbox)

    if bbox.IsVoid():
        return None

    xmin, ymin, zmin, xmax, ymax, zmax = bbox.Get()

    return {
        "min_x": float(xmin),
        "min_y": float(ymin),
        "min_z": float(zmin),
        "max_x": float(xmax),
        "max_y": float(ymax),
        "max_z": float(zmax),
    }
