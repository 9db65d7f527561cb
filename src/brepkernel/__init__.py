"""Kernel package for B-rep geometry operations.

This package is the operation contract over Open CASCADE Technology:
primitive construction, topology exploration, composition builders,
mass properties and mesh export.
"""

from .builders import (
    BuilderConsumedError,
    CompoundBuilder,
    FilletBuilder,
    LoftBuilder,
    VolumeBuilder,
)
from .export import DEFAULT_DEFLECTION, ExportError, write_stl
from .occt_ops import KernelOperationError, OCCTNotAvailableError, get_occt_info
from .summary import GeometrySummary, summarize_shape

__version__ = "0.1.0"
__all__ = [
    "BuilderConsumedError", "CompoundBuilder", "FilletBuilder", "LoftBuilder", "VolumeBuilder",
    "DEFAULT_DEFLECTION", "ExportError", "write_stl",
    "KernelOperationError", "OCCTNotAvailableError", "get_occt_info",
    "GeometrySummary", "summarize_shape",
]
