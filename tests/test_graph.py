"""
Tests for the adjacency-list graph and the mapping helpers.
"""

import unittest

from depthflow.application.errors import VertexNotFoundError
from depthflow.graph.adjacency import DirectedAdjacencyGraph
from depthflow.graph.basic import entry_points, graph_from_mapping, reverse_mapping

from .base import Vertex, make_graph, named


class TestDirectedAdjacencyGraph(unittest.TestCase):
    def testInsertionOrder(self):
        graph, v = make_graph("CAB", [("C", "B"), ("C", "A"), ("A", "B")])
        self.assertEqual(named(list(graph.each_vertex())), ["C", "A", "B"])
        self.assertEqual(named(list(graph.each_adjacent(v["C"]))), ["B", "A"])
        self.assertEqual(
            named(list(graph.each_edge())), [("C", "B"), ("C", "A"), ("A", "B")]
        )

    def testDuplicatesIgnored(self):
        graph, v = make_graph("AB", [("A", "B"), ("A", "B")])
        graph.add_vertex(v["A"])
        self.assertEqual(graph.vertex_count(), 2)
        self.assertEqual(graph.edge_count(), 1)
        self.assertEqual(len(graph), 2)

    def testIdentityNotEquality(self):
        graph = DirectedAdjacencyGraph()
        a, b = Vertex("A"), Vertex("A")
        graph.add_vertex(a)
        self.assertTrue(graph.has_vertex(a))
        self.assertFalse(graph.has_vertex(b))
        self.assertIn(a, graph)
        self.assertNotIn(b, graph)

    def testEdgeAddsVertices(self):
        graph = DirectedAdjacencyGraph()
        a, b = Vertex("A"), Vertex("B")
        graph.add_directed_edge(a, b)
        self.assertTrue(graph.has_edge(a, b))
        self.assertFalse(graph.has_edge(b, a))
        self.assertEqual(list(graph.each_vertex()), [a, b])

    def testRemoveVertex(self):
        graph, v = make_graph("ABC", [("A", "B"), ("B", "C"), ("C", "B")])
        graph.remove_vertex(v["B"])
        self.assertFalse(graph.has_vertex(v["B"]))
        self.assertEqual(list(graph.each_edge()), [])
        self.assertEqual(named(list(graph.each_vertex())), ["A", "C"])

    def testRemoveEdge(self):
        graph, v = make_graph("AB", [("A", "B")])
        graph.remove_directed_edge(v["A"], v["B"])
        self.assertFalse(graph.has_edge(v["A"], v["B"]))
        self.assertTrue(graph.has_vertex(v["B"]))

    def testUnknownVertex(self):
        graph, v = make_graph("A", [])
        stranger = Vertex("A")
        with self.assertRaises(VertexNotFoundError):
            graph.each_adjacent(stranger)
        with self.assertRaises(VertexNotFoundError):
            graph.remove_vertex(stranger)
        with self.assertRaises(KeyError):
            graph.remove_directed_edge(v["A"], stranger)

    def testInDegree(self):
        graph, v = make_graph("ABC", [("A", "C"), ("B", "C"), ("C", "C")])
        self.assertEqual(graph.in_degree(v["C"]), 3)
        self.assertEqual(graph.in_degree(v["A"]), 0)

    def testTranspose(self):
        graph, v = make_graph("ABC", [("A", "B"), ("A", "C"), ("B", "C")])
        reversed_graph = graph.transpose()
        self.assertEqual(named(list(reversed_graph.each_vertex())), ["A", "B", "C"])
        self.assertEqual(
            named(list(reversed_graph.each_edge())),
            [("B", "A"), ("C", "A"), ("C", "B")],
        )
        # The original is left untouched.
        self.assertTrue(graph.has_edge(v["A"], v["B"]))

    def testAdjacencySnapshot(self):
        graph, v = make_graph("ABC", [("A", "B")])
        seen = []
        for head in graph.each_adjacent(v["A"]):
            graph.add_directed_edge(v["A"], v["C"])
            seen.append(head)
        self.assertEqual(seen, [v["B"]])


class TestMappingHelpers(unittest.TestCase):
    def testReverseMapping(self):
        self.assertEqual(reverse_mapping({1: [2, 3], 2: [3], 3: []}), {2: [1], 3: [1, 2]})

    def testGraphFromMapping(self):
        graph = graph_from_mapping({"a": ["b", "c"], "c": ["d"]})
        self.assertEqual(list(graph.each_vertex()), ["a", "c", "b", "d"])
        self.assertEqual(list(graph.each_adjacent("a")), ["b", "c"])
        self.assertEqual(entry_points(graph), ["a"])
