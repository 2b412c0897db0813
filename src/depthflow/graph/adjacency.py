"""
Adjacency-list directed graph keyed on vertex identity.

Vertices may be any object. They are stored by id() together with a strong
reference, so a vertex object stays alive (and its id stays unique) for as
long as it belongs to the graph.
"""

from depthflow.application.errors import VertexNotFoundError
from depthflow.graph.base import DirectedGraph


class DirectedAdjacencyGraph(DirectedGraph):
    """Mutable directed graph backed by insertion-ordered adjacency lists.

    Attributes:
        _vertices: Maps id(vertex) to the vertex, in insertion order.
        _adjacency: Maps id(tail) to an ordered {id(head): head} mapping.
    """

    def __init__(self):
        self._vertices = {}
        self._adjacency = {}

    def __repr__(self):
        return "<%s %d vertices, %d edges>" % (
            type(self).__name__,
            len(self._vertices),
            self.edge_count(),
        )

    def __len__(self):
        return len(self._vertices)

    def __contains__(self, vertex):
        return self.has_vertex(vertex)

    def _successors(self, vertex):
        try:
            return self._adjacency[id(vertex)]
        except KeyError:
            raise VertexNotFoundError(vertex) from None

    def add_vertex(self, vertex):
        """Add vertex to the graph. Adding a present vertex does nothing.

        Returns:
            The graph, so calls can be chained.
        """
        key = id(vertex)
        if key not in self._vertices:
            self._vertices[key] = vertex
            self._adjacency[key] = {}
        return self

    def add_directed_edge(self, tail, head):
        """Add the edge tail -> head, adding either endpoint if missing.

        Adding an edge that already exists does nothing.
        """
        self.add_vertex(tail)
        self.add_vertex(head)
        self._adjacency[id(tail)].setdefault(id(head), head)
        return self

    def remove_vertex(self, vertex):
        """Remove vertex and every edge touching it."""
        key = id(vertex)
        if key not in self._vertices:
            raise VertexNotFoundError(vertex)
        del self._vertices[key]
        del self._adjacency[key]
        for heads in self._adjacency.values():
            heads.pop(key, None)
        return self

    def remove_directed_edge(self, tail, head):
        """Remove the edge tail -> head; both vertices stay in the graph."""
        heads = self._successors(tail)
        if not self.has_vertex(head):
            raise VertexNotFoundError(head)
        heads.pop(id(head), None)
        return self

    def has_vertex(self, vertex):
        return self._vertices.get(id(vertex)) is vertex

    def has_edge(self, tail, head):
        if not self.has_vertex(tail):
            return False
        return self._adjacency[id(tail)].get(id(head)) is head

    def each_vertex(self):
        # Snapshot so callers may mutate the graph while iterating.
        return iter(tuple(self._vertices.values()))

    def each_edge(self):
        edges = []
        for key, tail in self._vertices.items():
            for head in self._adjacency[key].values():
                edges.append((tail, head))
        return iter(edges)

    def each_adjacent(self, vertex):
        return iter(tuple(self._successors(vertex).values()))

    def vertex_count(self):
        return len(self._vertices)

    def edge_count(self):
        return sum(len(heads) for heads in self._adjacency.values())

    def transpose(self):
        """Return a new graph with every edge reversed.

        Vertex order is preserved; successor order of the new graph follows
        the edge enumeration order of this one.
        """
        reversed_graph = type(self)()
        for vertex in self._vertices.values():
            reversed_graph.add_vertex(vertex)
        for tail, head in self.each_edge():
            reversed_graph.add_directed_edge(head, tail)
        return reversed_graph
