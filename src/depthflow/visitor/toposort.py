"""Topological sort visitor.

Vertices are recorded in the order they finish. Following the direction of
the edges, every vertex therefore appears after all the vertices it points
to, which is the order dependencies must be processed in when edges mean
"depends on". topological_order() gives the opposite, edge-respecting order.
"""

import logging

from depthflow.application.errors import CycleError
from depthflow.visitor.noop import DepthFirstNoOpVisitor

LOG = logging.getLogger(__name__)


class DepthFirstToposortVisitor(DepthFirstNoOpVisitor):
    """Collects the finish order and refuses cyclic graphs.

    Attributes:
        tsl: Finished vertices in finish order.
    """

    def __init__(self):
        self.tsl = []

    def on_back_edge(self, vertex, visit):
        LOG.debug("toposort aborted by cycle through %r", vertex)
        raise CycleError(
            vertex, "Cycle detected in provided graph; toposort is not possible."
        )

    def on_finish_vertex(self, vertex, visit):
        self.tsl.append(vertex)

    def get_tsl(self):
        """Return a copy of the finish order (sinks first)."""
        return list(self.tsl)

    def topological_order(self):
        """Return vertices so that every edge points forward in the list."""
        return self.tsl[::-1]
