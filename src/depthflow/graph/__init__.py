"""
Directed graph types consumed by the depth-first traversal engine.

- DirectedGraph: the abstract capability set the engine relies on
- DirectedAdjacencyGraph: an identity-keyed adjacency-list implementation
- basic: conversions between successor mappings and graph objects
"""

from .base import DirectedGraph
from .adjacency import DirectedAdjacencyGraph

__all__ = ["DirectedGraph", "DirectedAdjacencyGraph"]
