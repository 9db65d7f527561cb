"""Mass-property queries shared by the typed wrappers."""

from __future__ import annotations

from typing import Any

from brepkernel import occt_ops

from .point import Point3


def surface_center_of_mass(occt_shape: Any) -> Point3:
    """Centroid integrated over the bounding surfaces of ``occt_shape``.

    Only meaningful for shapes with a well-formed boundary; the result for
    degenerate geometry is whatever the kernel computes.
    """
    return Point3.of(occt_ops.surface_centroid(occt_shape))


def volume_center_of_mass(occt_shape: Any) -> Point3:
    """Centroid integrated over the volume enclosed by ``occt_shape``."""
    return Point3.of(occt_ops.volume_centroid(occt_shape))
