"""depthflow - visitor-driven depth-first traversal of directed graphs.
"""

__version__ = "0.1.0"

# Import main components for easy access
from .application.errors import (
    CycleError,
    EmptyTraversalError,
    InvalidStartError,
    TraversalError,
    VertexNotFoundError,
)
from .graph import DirectedAdjacencyGraph, DirectedGraph
from .traversal import find_cycles, find_sources, is_acyclic, toposort, traverse
from .visitor import DepthFirstNoOpVisitor, DepthFirstVisitor

__all__ = [
    "traverse",
    "find_sources",
    "toposort",
    "find_cycles",
    "is_acyclic",
    "DirectedGraph",
    "DirectedAdjacencyGraph",
    "DepthFirstVisitor",
    "DepthFirstNoOpVisitor",
    "TraversalError",
    "InvalidStartError",
    "EmptyTraversalError",
    "CycleError",
    "VertexNotFoundError",
    "__version__",
]
