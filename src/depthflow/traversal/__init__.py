"""
Depth-first traversal engine.

The engine (depthfirst) knows nothing about what a traversal computes; the
algorithms module pairs it with stock visitors for common tasks.
"""

from .depthfirst import (
    DepthFirstTraversal,
    StartKind,
    StartSpec,
    VertexState,
    VisitationState,
    find_sources,
    traverse,
)
from .algorithms import find_cycles, is_acyclic, toposort

__all__ = [
    "DepthFirstTraversal",
    "StartKind",
    "StartSpec",
    "VertexState",
    "VisitationState",
    "find_sources",
    "traverse",
    "find_cycles",
    "is_acyclic",
    "toposort",
]
