"""Visitor that records every hook call, for debugging and testing."""

import logging

from depthflow.visitor.base import DepthFirstVisitor

LOG = logging.getLogger(__name__)


class RecordingVisitor(DepthFirstVisitor):
    """Appends one tuple per hook call to ``events``.

    Tuples are ``(hook_name, *arguments)`` without the visit callback and,
    for on_initialize_vertex, with a snapshot of the queue taken as a list
    at call time instead of the live queue.
    """

    def __init__(self):
        self.events = []

    def record(self, *event):
        LOG.debug("event %r", event)
        self.events.append(event)

    def on_initialize_vertex(self, vertex, is_source, queue):
        self.record("initialize", vertex, is_source, list(queue))

    def on_start_vertex(self, vertex, visit):
        self.record("start", vertex)

    def on_examine_edge(self, tail, head, visit):
        self.record("examine", tail, head)

    def on_back_edge(self, vertex, visit):
        self.record("back", vertex)

    def on_finish_vertex(self, vertex, visit):
        self.record("finish", vertex)

    def of(self, name):
        """Return the recorded arguments of every call to one hook."""
        out = []
        for event in self.events:
            if event[0] == name:
                out.append(event[1] if len(event) == 2 else event[1:])
        return out
