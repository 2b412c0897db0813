"""
Traversal policies for the depth-first engine.

- DepthFirstVisitor: abstract base declaring the five traversal hooks
- DepthFirstNoOpVisitor: ignores every hook
- DepthFirstToposortVisitor: finish order, refuses cycles
- DepthFirstBasicVisitor: finish order plus per-vertex reachability
- CycleCollectorVisitor: collects every cycle closed by a back edge
- RecordingVisitor: records the raw hook sequence
"""

from .base import DepthFirstVisitor
from .noop import DepthFirstNoOpVisitor
from .toposort import DepthFirstToposortVisitor
from .basic import DepthFirstBasicVisitor
from .cycles import CycleCollectorVisitor
from .recording import RecordingVisitor

__all__ = [
    "DepthFirstVisitor",
    "DepthFirstNoOpVisitor",
    "DepthFirstToposortVisitor",
    "DepthFirstBasicVisitor",
    "CycleCollectorVisitor",
    "RecordingVisitor",
]
