"""Typed wrappers, one per topological kind."""

from .compound import Compound
from .edge import Edge
from .face import Face
from .shell import Shell
from .solid import Solid
from .vertex import Vertex
from .wire import Wire

__all__ = ["Compound", "Edge", "Face", "Shell", "Solid", "Vertex", "Wire"]
