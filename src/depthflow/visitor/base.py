"""Visitor interface driven by the depth-first traversal engine.

A visitor decides what a traversal means: the engine only decides the order
in which vertices and edges are reached. All five hooks must be implemented;
an empty body is a perfectly valid implementation.

Every hook except on_initialize_vertex receives ``visit``, the engine's
re-entrant visit callback. Calling ``visit(vertex)`` from inside a hook runs
a nested depth-first visit of ``vertex`` against the same visitation state
before the hook returns.
"""

import abc


class DepthFirstVisitor(abc.ABC):
    """Callbacks fired at each transition of a depth-first traversal."""

    @abc.abstractmethod
    def on_initialize_vertex(self, vertex, is_source, queue):
        """Called once per vertex during source discovery.

        Args:
            vertex: The vertex being classified.
            is_source: True if vertex has no incoming edges.
            queue: The live start queue (a collections.deque) built so far.
                Vertices appended to or removed from it change which roots
                the traversal will start from.
        """

    @abc.abstractmethod
    def on_start_vertex(self, vertex, visit):
        """Called when vertex moves from unvisited to visiting."""

    @abc.abstractmethod
    def on_examine_edge(self, tail, head, visit):
        """Called for each outgoing edge of a visiting vertex, before
        descending into head."""

    @abc.abstractmethod
    def on_back_edge(self, vertex, visit):
        """Called when the traversal reaches a vertex that is still being
        visited, meaning the edge just examined closes a cycle."""

    @abc.abstractmethod
    def on_finish_vertex(self, vertex, visit):
        """Called when vertex moves from visiting to visited, after all of
        its descendants have been processed."""
