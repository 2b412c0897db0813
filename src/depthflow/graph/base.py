"""
Abstract directed graph capability consumed by the traversal engine.

The traversal code never looks inside a graph; it only enumerates vertices,
edges and successors through the methods declared here. Vertices are opaque
objects compared by identity, so two equal-but-distinct objects are two
different vertices.
"""

import abc


class DirectedGraph(abc.ABC):
    """Read-only view of a directed graph.

    Subclasses must enumerate their vertices and successors in a stable
    order; depth-first hook sequences are only reproducible if the order
    does not change between two traversals of an unmodified graph.
    """

    @abc.abstractmethod
    def each_vertex(self):
        """Iterate over every vertex in the graph's native order."""

    @abc.abstractmethod
    def each_edge(self):
        """Iterate over every edge as a (tail, head) pair."""

    @abc.abstractmethod
    def each_adjacent(self, vertex):
        """Iterate over the successors of vertex.

        Raises:
            VertexNotFoundError: If vertex is not in the graph.
        """

    @abc.abstractmethod
    def has_vertex(self, vertex):
        """Return True if vertex (by identity) belongs to the graph."""

    def vertex_count(self):
        return sum(1 for _ in self.each_vertex())

    def edge_count(self):
        return sum(1 for _ in self.each_edge())

    def in_degree(self, vertex):
        """Count the edges whose head is vertex, self-loops included."""
        return sum(1 for _, head in self.each_edge() if head is vertex)
