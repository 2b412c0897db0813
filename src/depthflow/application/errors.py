"""
Error handling for depthflow traversals.

This module defines the exception classes raised while resolving and running
a depth-first traversal. Errors raised by visitor hooks are never wrapped in
these types; they propagate to the caller of traverse() unchanged.
"""


class TraversalError(Exception):
    """
    Base class for all errors reported by depthflow itself.

    Catching TraversalError separates depthflow's own error conditions from
    errors raised by user-supplied visitors or graphs.
    """
    pass


class InvalidStartError(TraversalError, ValueError):
    """
    Exception raised when the start argument of traverse() is unusable.

    The start argument must be None, a single vertex of the traversed graph,
    or an ordered sequence (list, tuple or deque) of vertices of that graph.
    """

    def __init__(self, start, reason=None):
        self.start = start
        if reason is None:
            reason = "start must be None, a graph vertex or a sequence of graph vertices"
        super().__init__("%s; got %r" % (reason, start))


class EmptyTraversalError(TraversalError, RuntimeError):
    """
    Exception raised when a traversal has nothing to start from.

    This happens when no start was given and source discovery found no vertex
    without incoming edges (an empty graph, or a graph in which every vertex
    lies on or below a cycle), or when an explicit empty sequence was given.
    """

    def __init__(self, message=None):
        if message is None:
            message = (
                "No start vertex or vertices were provided, and no source "
                "vertices could be found in the provided graph."
            )
        super().__init__(message)


class CycleError(TraversalError):
    """
    Exception raised by visitors whose policy forbids cycles.

    Attributes:
        vertex: The vertex whose revisit closed the cycle.
    """

    def __init__(self, vertex, message=None):
        self.vertex = vertex
        if message is None:
            message = "Cycle detected in provided graph at vertex %r." % (vertex,)
        super().__init__(message)


class VertexNotFoundError(TraversalError, KeyError):
    """
    Exception raised when a graph is asked about a vertex it does not contain.
    """

    def __init__(self, vertex):
        self.vertex = vertex
        super().__init__(vertex)

    def __str__(self):
        return "Vertex %r is not present in the graph." % (self.vertex,)
