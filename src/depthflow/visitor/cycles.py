"""Visitor collecting the cycles closed by back edges."""

from depthflow.visitor.noop import DepthFirstNoOpVisitor


class CycleCollectorVisitor(DepthFirstNoOpVisitor):
    """Keeps the active path and snapshots a cycle at every back edge.

    A cycle is reported as the slice of the active path starting at the
    back-edge target and ending at the vertex whose edge closed it, so
    ``cycle[-1] -> cycle[0]`` is the back edge itself.

    Attributes:
        path: Vertices currently being visited, outermost first.
        cycles: Collected cycles, in discovery order.
    """

    def __init__(self):
        self.path = []
        self._depth = {}
        self.cycles = []

    def on_start_vertex(self, vertex, visit):
        self._depth[id(vertex)] = len(self.path)
        self.path.append(vertex)

    def on_back_edge(self, vertex, visit):
        self.cycles.append(self.path[self._depth[id(vertex)]:])

    def on_finish_vertex(self, vertex, visit):
        # Nested visits always complete before their caller resumes, so
        # vertices finish in stack order.
        del self._depth[id(vertex)]
        self.path.pop()

    def has_cycles(self):
        return bool(self.cycles)
