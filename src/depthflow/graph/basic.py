"""
Basic operations bridging plain mappings and DirectedGraph objects.

Many callers already hold a graph as a dictionary mapping each node to an
iterable of its successors. This module converts such mappings into
DirectedAdjacencyGraph instances and provides the small helpers that work on
either representation.
"""

from depthflow.graph.adjacency import DirectedAdjacencyGraph


def reverse_mapping(G):
    """
    Reverse the direction of all edges in a mapping-based graph.

    Parameters
    ----------
    G : dict
        A directed graph represented as a dictionary mapping nodes to
        iterables of successor nodes. Format: {node: [successor1, ...]}

    Returns
    -------
    dict
        A new mapping where every node that has a predecessor maps to the
        list of its predecessors, in the order the edges were found.

    Examples
    --------
    >>> reverse_mapping({1: [2, 3], 2: [3], 3: []})
    {2: [1], 3: [1, 2]}
    """
    out = {}
    for node, nexts in G.items():
        for next in nexts:
            if next not in out:
                out[next] = [node]
            else:
                out[next].append(node)
    return out


def graph_from_mapping(G, graph_type=DirectedAdjacencyGraph):
    """
    Build a graph object from a mapping of successors.

    Keys are added as vertices first, in mapping order, so that the resulting
    vertex order matches the mapping. Successors that are not themselves keys
    are added when their first edge is added.

    Parameters
    ----------
    G : dict
        Format: {node: [successor1, successor2, ...]}
    graph_type : type
        Graph class to instantiate; must provide add_vertex and
        add_directed_edge.

    Returns
    -------
    DirectedAdjacencyGraph
        The populated graph.
    """
    graph = graph_type()
    for node in G:
        graph.add_vertex(node)
    for node, nexts in G.items():
        for next in nexts:
            graph.add_directed_edge(node, next)
    return graph


def entry_points(graph):
    """
    Find all vertices with no incoming edges.

    Unlike find_sources this does not notify any visitor; it is a plain
    query. A vertex whose only incoming edge is a self-loop is not an entry
    point.

    Parameters
    ----------
    graph : DirectedGraph

    Returns
    -------
    list
        Entry vertices in the graph's vertex order.
    """
    targeted = set()
    for _, head in graph.each_edge():
        targeted.add(id(head))
    return [vertex for vertex in graph.each_vertex() if id(vertex) not in targeted]
