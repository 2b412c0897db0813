"""General-purpose visitor tracking the active path, reachability and
finish order of an acyclic traversal."""

from depthflow.application.errors import CycleError
from depthflow.visitor.base import DepthFirstVisitor


class DepthFirstBasicVisitor(DepthFirstVisitor):
    """Records what each vertex can reach and the order vertices finish in.

    The visitor raises CycleError on the first back edge, so every result it
    exposes describes a DAG.

    Attributes:
        active: id(vertex) -> vertex for the vertices on the current path.
        paths: id(vertex) -> {id(reached): reached} for every started vertex.
        tsl: Finished vertices in finish order.
        sources: Vertices reported as sources during initialization.
    """

    def __init__(self):
        self.active = {}
        self.paths = {}
        self.tsl = []
        self.sources = []

    def on_initialize_vertex(self, vertex, is_source, queue):
        if is_source:
            self.sources.append(vertex)

    def on_start_vertex(self, vertex, visit):
        self.active[id(vertex)] = vertex
        self.paths[id(vertex)] = {}

    def on_examine_edge(self, tail, head, visit):
        reached = {id(head): head}
        # A finished head will not be started again, so carry over
        # everything it was already known to reach.
        if id(head) in self.paths and id(head) not in self.active:
            reached.update(self.paths[id(head)])
        for key in self.active:
            self.paths[key].update(reached)

    def on_back_edge(self, vertex, visit):
        raise CycleError(vertex)

    def on_finish_vertex(self, vertex, visit):
        del self.active[id(vertex)]
        self.tsl.append(vertex)

    def get_tsl(self):
        return list(self.tsl)

    def get_reachable(self, vertex):
        """Return the vertices reachable from vertex, in discovery order.

        Returns None if vertex was never started by the traversal.
        """
        reached = self.paths.get(id(vertex))
        if reached is None:
            return None
        return list(reached.values())
