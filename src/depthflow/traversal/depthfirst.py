"""Depth-first traversal of directed graphs driven by a visitor.

This module contains the two halves of a traversal:

- find_sources: classifies every vertex as a source (no incoming edges) or
  not, reports each classification to the visitor and builds the queue of
  roots used when the caller gives no explicit start.
- DepthFirstTraversal / traverse: drains a queue of roots, visiting each
  depth-first while tracking which vertices are on the active path and
  which are finished, and fires the visitor hooks at every transition.

The visit callback handed to the hooks is a bound method of the traversal
object, so a hook may call it to force a nested visit of any vertex; the
nested visit shares the traversal's single VisitationState.
"""

import collections
import enum
import logging

from depthflow.application.errors import EmptyTraversalError, InvalidStartError

LOG = logging.getLogger(__name__)

__all__ = [
    "VertexState",
    "VisitationState",
    "StartKind",
    "StartSpec",
    "DepthFirstTraversal",
    "find_sources",
    "traverse",
]

SEQUENCE_TYPES = (list, tuple, collections.deque)


class VertexState(enum.Enum):
    UNVISITED = "unvisited"
    VISITING = "visiting"
    VISITED = "visited"


class VisitationState(object):
    """Per-traversal map from vertex identity to VertexState.

    Vertices never seen are UNVISITED. Entries keep a reference to their
    vertex so that an id cannot be recycled while the traversal runs.
    """

    __slots__ = ("_entries",)

    def __init__(self):
        self._entries = {}

    def __getitem__(self, vertex):
        entry = self._entries.get(id(vertex))
        if entry is None:
            return VertexState.UNVISITED
        return entry[1]

    def __setitem__(self, vertex, state):
        self._entries[id(vertex)] = (vertex, state)

    def __len__(self):
        return len(self._entries)

    def count(self, state):
        return sum(1 for _, s in self._entries.values() if s is state)


class StartKind(enum.Enum):
    NONE = "none"
    SINGLE = "single"
    MANY = "many"


class StartSpec(object):
    """Resolved form of the start argument of traverse().

    Attributes:
        kind: Which of the three accepted forms was given.
        vertices: The start vertices in order (empty for StartKind.NONE).
    """

    __slots__ = "kind", "vertices"

    def __init__(self, kind, vertices=()):
        self.kind = kind
        self.vertices = tuple(vertices)

    def __repr__(self):
        return "StartSpec(%s, %r)" % (self.kind.name, self.vertices)

    @classmethod
    def resolve(cls, graph, start):
        """Classify start against graph.

        An object the graph reports as one of its vertices is a single start
        even if it happens to be a tuple or list; otherwise lists, tuples and
        deques are start sequences whose items must all be graph vertices.

        Raises:
            InvalidStartError: If start is none of the accepted forms.
        """
        if start is None:
            return cls(StartKind.NONE)

        if graph.has_vertex(start):
            return cls(StartKind.SINGLE, (start,))

        if isinstance(start, SEQUENCE_TYPES):
            for vertex in start:
                if not graph.has_vertex(vertex):
                    raise InvalidStartError(
                        start, "start sequence contains %r, which is not a graph vertex" % (vertex,)
                    )
            return cls(StartKind.MANY, start)

        raise InvalidStartError(start)

    def build_queue(self, graph, visitor):
        """Return the queue of roots, running source discovery if needed."""
        if self.kind is StartKind.NONE:
            return find_sources(graph, visitor)
        return collections.deque(self.vertices)


def find_sources(graph, visitor):
    """Find the vertices of graph that have no incoming edges.

    Every vertex is reported to visitor.on_initialize_vertex exactly once, in
    the graph's vertex order, together with its classification and the live
    queue built so far. The visitor may modify that queue; the traversal
    drains whatever the queue holds once discovery completes.

    Args:
        graph: DirectedGraph to inspect.
        visitor: DepthFirstVisitor to notify.

    Returns:
        collections.deque of source vertices in the graph's vertex order.
    """
    incomings = {}
    for tail, head in graph.each_edge():
        incomings.setdefault(id(head), []).append(tail)

    queue = collections.deque()
    for vertex in graph.each_vertex():
        if id(vertex) not in incomings:
            queue.append(vertex)
            visitor.on_initialize_vertex(vertex, True, queue)
        else:
            visitor.on_initialize_vertex(vertex, False, queue)

    LOG.debug("source discovery found %d source vertices", len(queue))
    return queue


class DepthFirstTraversal(object):
    """One depth-first traversal of a graph with a visitor.

    The object owns the VisitationState for its lifetime. ``visit`` is the
    re-entrant callback handed to every hook; it is either the recursive or
    the explicit-stack implementation, and both fire the same hooks in the
    same order.

    Attributes:
        graph: The DirectedGraph being traversed.
        visitor: The DepthFirstVisitor receiving events.
        state: The VisitationState shared by all visits.
        visit: Callable(vertex) performing a depth-first visit.
    """

    def __init__(self, graph, visitor, iterative=False):
        self.graph = graph
        self.visitor = visitor
        self.state = VisitationState()
        if iterative:
            self.visit = self.visit_iterative
        else:
            self.visit = self.visit_recursive

    def visit_recursive(self, vertex):
        state = self.state[vertex]
        if state is VertexState.VISITING:
            LOG.debug("back edge to %r", vertex)
            self.visitor.on_back_edge(vertex, self.visit)
        elif state is not VertexState.VISITED:
            self.state[vertex] = VertexState.VISITING
            self.visitor.on_start_vertex(vertex, self.visit)

            for to in self.graph.each_adjacent(vertex):
                self.visitor.on_examine_edge(vertex, to, self.visit)
                self.visit_recursive(to)

            self.visitor.on_finish_vertex(vertex, self.visit)
            self.state[vertex] = VertexState.VISITED

    def _enter(self, vertex):
        self.state[vertex] = VertexState.VISITING
        self.visitor.on_start_vertex(vertex, self.visit)
        return vertex, iter(self.graph.each_adjacent(vertex))

    def _leave(self, vertex):
        self.visitor.on_finish_vertex(vertex, self.visit)
        self.state[vertex] = VertexState.VISITED

    def visit_iterative(self, vertex):
        """Explicit-stack equivalent of visit_recursive.

        The native stack only grows when a hook calls visit re-entrantly;
        the depth of the graph itself lives in ``stack``.
        """
        state = self.state[vertex]
        if state is VertexState.VISITING:
            LOG.debug("back edge to %r", vertex)
            self.visitor.on_back_edge(vertex, self.visit)
            return
        if state is VertexState.VISITED:
            return

        # Each entry is (vertex, iterator over its remaining successors).
        stack = [self._enter(vertex)]
        while stack:
            current, successors = stack[-1]
            for to in successors:
                self.visitor.on_examine_edge(current, to, self.visit)
                # Checked after the hook, which may have visited `to` itself.
                state = self.state[to]
                if state is VertexState.VISITING:
                    LOG.debug("back edge to %r", to)
                    self.visitor.on_back_edge(to, self.visit)
                elif state is VertexState.UNVISITED:
                    stack.append(self._enter(to))
                    break
            else:
                stack.pop()
                self._leave(current)

    def drain(self, queue):
        """Visit every vertex popped from the front of queue until it is empty."""
        while queue:
            self.visit(queue.popleft())


def traverse(graph, visitor, start=None, iterative=False):
    """Perform a depth-first traversal of graph driven by visitor.

    Args:
        graph: DirectedGraph to traverse.
        visitor: DepthFirstVisitor receiving the traversal events.
        start: None to start from every source vertex, a single vertex, or a
            list/tuple/deque of vertices visited in order.
        iterative: Use the explicit-stack visit instead of recursion, for
            graphs whose paths are longer than the interpreter's recursion
            limit allows.

    Raises:
        InvalidStartError: If start is not None, a vertex or a sequence of
            vertices of graph.
        EmptyTraversalError: If there is nothing to start from.
    """
    spec = StartSpec.resolve(graph, start)
    queue = spec.build_queue(graph, visitor)
    if not queue:
        raise EmptyTraversalError()

    LOG.debug(
        "depth-first traversal from %s start, %d queued, %s",
        spec.kind.value,
        len(queue),
        "iterative" if iterative else "recursive",
    )
    DepthFirstTraversal(graph, visitor, iterative).drain(queue)
