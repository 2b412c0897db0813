"""Visitor that ignores every event."""

from depthflow.visitor.base import DepthFirstVisitor


class DepthFirstNoOpVisitor(DepthFirstVisitor):
    """Do-nothing visitor, usable as a base class for partial visitors."""

    def on_initialize_vertex(self, vertex, is_source, queue):
        pass

    def on_start_vertex(self, vertex, visit):
        pass

    def on_examine_edge(self, tail, head, visit):
        pass

    def on_back_edge(self, vertex, visit):
        pass

    def on_finish_vertex(self, vertex, visit):
        pass
