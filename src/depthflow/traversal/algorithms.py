"""
Ready-made traversals built from the engine and the stock visitors.
"""

from depthflow.traversal.depthfirst import traverse
from depthflow.visitor.cycles import CycleCollectorVisitor
from depthflow.visitor.toposort import DepthFirstToposortVisitor


def toposort(graph, start=None, iterative=False):
    """
    Topologically sort graph by depth-first finish order.

    Parameters
    ----------
    graph : DirectedGraph
    start : optional
        Passed to traverse(); by default every source vertex is a root.
    iterative : bool
        Use the explicit-stack traversal.

    Returns
    -------
    list
        Vertices in finish order: each vertex comes after every vertex its
        edges point to.

    Raises
    ------
    CycleError
        If the traversal meets a back edge.
    EmptyTraversalError
        If start is None and the graph has no source vertex. A non-empty
        graph without sources is necessarily cyclic.
    """
    visitor = DepthFirstToposortVisitor()
    traverse(graph, visitor, start, iterative)
    return visitor.get_tsl()


def find_cycles(graph, start=None, iterative=False):
    """
    Collect the cycles closed by back edges.

    When start is None every vertex of the graph is queued as a root, in
    vertex order, so cycles that no source vertex reaches are found too.
    Each cycle is listed once per back edge discovered, as a list of
    vertices whose last element points back to the first.

    Returns
    -------
    list of list
        Cycles in discovery order; empty for an acyclic graph.
    """
    if start is None:
        start = list(graph.each_vertex())
        if not start:
            return []
    visitor = CycleCollectorVisitor()
    traverse(graph, visitor, start, iterative)
    return visitor.cycles


def is_acyclic(graph, iterative=False):
    """Return True if graph has no directed cycle (an empty graph has none)."""
    return not find_cycles(graph, iterative=iterative)
