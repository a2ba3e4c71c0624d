# -*- coding: utf-8 -*-

"""Test graph construction and structural transforms."""

import itertools as itt
import unittest

import networkx as nx
import numpy as np

from graphoid.cube import Cube
from graphoid.graph import (
    InvalidEdge,
    InvalidPermutation,
    UndirectedGraph,
    UnknownVertex,
    describe,
    iter_undirected_graphs,
)

path = UndirectedGraph.from_size(5, [(1, 2), (2, 3), (3, 4), (4, 5)])


class TestGraph(unittest.TestCase):
    """Test graph construction and accessors."""

    def setUp(self) -> None:
        """Set up the test case."""
        self.addTypeEqualityFunc(UndirectedGraph, self.assert_graph_equal)

    def assert_graph_equal(self, a: UndirectedGraph, b: UndirectedGraph, msg=None) -> None:
        """Check the graphs are equal (more nice than the builtin :meth:`UndirectedGraph.__eq__` for testing)."""
        self.assertEqual(a.vertices(), b.vertices(), msg=msg)
        self.assertEqual(a.edges(), b.edges(), msg=msg)

    def test_construct(self):
        """Test the adjacency is the symmetric closure of the edges."""
        graph = UndirectedGraph.from_edges(["a", "b", "c"], [("a", "b"), ("c", "b")])
        self.assertEqual(("a", "b", "c"), graph.vertices())
        self.assertEqual({frozenset("ab"), frozenset("bc")}, graph.edges())
        self.assertTrue(graph.has_edge("a", "b"))
        self.assertTrue(graph.has_edge("b", "a"))
        self.assertTrue(graph.has_edge("b", "c"))
        self.assertFalse(graph.has_edge("a", "c"))
        self.assertEqual({"a", "c"}, graph.neighbors("b"))
        self.assertEqual(3, len(graph))
        self.assertIn("a", graph)
        self.assertNotIn("d", graph)
        self.assertEqual(["a", "b", "c"], list(graph))

    def test_duplicate_edges(self):
        """Test adding the same edge twice is a no-op."""
        once = UndirectedGraph.from_size(3, [(1, 2)])
        twice = UndirectedGraph.from_size(3, [(1, 2), (2, 1), (1, 2)])
        self.assertEqual(once, twice)
        self.assertEqual(1, len(twice.edges()))

    def test_invalid_edge(self):
        """Test edges must be pairs of distinct vertices of the ground set."""
        with self.assertRaises(InvalidEdge):
            UndirectedGraph.from_size(3, [(1, 4)])
        with self.assertRaises(InvalidEdge):
            UndirectedGraph.from_size(3, [(2, 2)])
        with self.assertRaises(InvalidEdge):
            UndirectedGraph.from_size(3, [(1, 2, 3)])
        with self.assertRaises(InvalidEdge):
            UndirectedGraph(cube=Cube([1, 2]), graph=nx.Graph([(1, 3)]))
        with self.assertRaises(InvalidEdge):
            UndirectedGraph.from_edges(["a", "b"], ["ab"])
        self.assertTrue(issubclass(InvalidEdge, ValueError))

    def test_unknown_vertex(self):
        """Test queries on vertices outside the graph fail."""
        with self.assertRaises(UnknownVertex):
            path.has_edge(1, 6)
        with self.assertRaises(UnknownVertex):
            path.neighbors(0)
        with self.assertRaises(UnknownVertex):
            path.delete([6])
        with self.assertRaises(UnknownVertex):
            path.contract([1, 6])
        with self.assertRaises(KeyError):
            path.subgraph([7])

    def test_ground_set_order(self):
        """Test the vertex order is the ground set order, not sorted order."""
        graph = UndirectedGraph.from_edges([3, 1, 2], [(1, 2)])
        self.assertEqual((3, 1, 2), graph.vertices())
        self.assertEqual((3, 2), graph.delete([1]).vertices())
        matrix = graph.adjacency_matrix()
        self.assertEqual((3, 3), matrix.shape)
        self.assertTrue(matrix[1, 2])
        self.assertTrue(matrix[2, 1])
        self.assertFalse(matrix[0].any())

    def test_adjacency_matrix(self):
        """Test the dense adjacency matrix agrees with networkx."""
        expected = nx.to_numpy_array(path.graph, nodelist=list(path.vertices())) > 0
        self.assertTrue(np.array_equal(expected, path.adjacency_matrix()))
        self.assertEqual((0, 0), UndirectedGraph.from_size(0).adjacency_matrix().shape)

    def test_equality(self):
        """Test equality depends on vertex order and edges only."""
        self.assertEqual(path, path.copy())
        self.assertNotEqual(path, UndirectedGraph.from_size(5, [(1, 2)]))
        self.assertNotEqual(
            UndirectedGraph.from_edges([1, 2], []), UndirectedGraph.from_edges([2, 1], [])
        )
        self.assertNotEqual(path, path.to_networkx())

    def test_networkx_input_is_copied(self):
        """Test constructing a graph leaves the given networkx graph untouched."""
        nx_graph = nx.Graph([(1, 2)])
        graph = UndirectedGraph(cube=Cube([1, 2, 3]), graph=nx_graph)
        self.assertEqual([1, 2], sorted(nx_graph.nodes()))
        self.assertEqual((1, 2, 3), graph.vertices())
        nx_graph.add_edge(2, 3)
        self.assertFalse(graph.has_edge(2, 3))

    def test_to_networkx_is_independent(self):
        """Test the networkx graph is a copy."""
        graph = path.to_networkx()
        graph.add_edge(1, 5)
        self.assertFalse(path.has_edge(1, 5))

    def test_describe(self):
        """Test the textual form of a graph."""
        self.assertEqual("1-2, 2-3, 3-4, 4-5", describe(path))
        self.assertEqual("1-2, 3-4, 5", describe(UndirectedGraph.from_size(5, [(2, 1), (4, 3)])))
        self.assertEqual("1, 2, 3", describe(UndirectedGraph.from_size(3)))
        self.assertEqual("", describe(UndirectedGraph.from_size(0)))
        self.assertEqual("1-2, 2-3, 3-4, 4-5", str(path))

    def test_iter_undirected_graphs(self):
        """Test enumerating all graphs over a ground set."""
        graphs = list(iter_undirected_graphs([1, 2, 3]))
        self.assertEqual(8, len(graphs))
        self.assertEqual(8, len({frozenset(graph.edges()) for graph in graphs}))
        self.assertEqual(UndirectedGraph.from_size(3), graphs[0])
        self.assertEqual(64, sum(1 for _ in iter_undirected_graphs(Cube.from_size(4))))


class TestDelete(unittest.TestCase):
    """Test taking induced subgraphs."""

    def test_delete(self):
        """Test deleting a vertex removes its incident edges only."""
        reduced = path.delete([3])
        self.assertEqual((1, 2, 4, 5), reduced.vertices())
        self.assertEqual({frozenset({1, 2}), frozenset({4, 5})}, reduced.edges())
        # the source graph is untouched
        self.assertEqual(4, len(path.edges()))
        self.assertIn(3, path)

    def test_delete_empty(self):
        """Test deleting nothing gives an equal but independent graph."""
        reduced = path.delete([])
        self.assertEqual(path, reduced)
        self.assertIsNot(path.graph, reduced.graph)

    def test_delete_everything(self):
        """Test deleting all vertices gives the empty graph."""
        reduced = path.delete(path.vertices())
        self.assertEqual(0, len(reduced))
        self.assertEqual(set(), reduced.edges())

    def test_delete_idempotent(self):
        """Test deleting nothing after deleting a set does not change the result."""
        for k in range(len(path) + 1):
            for conditions in itt.combinations(path.vertices(), k):
                with self.subTest(conditions=conditions):
                    reduced = path.delete(conditions)
                    self.assertEqual(reduced, reduced.delete([]))

    def test_subgraph(self):
        """Test keeping vertices is the complement of deleting them."""
        self.assertEqual(path.delete([1, 5]), path.subgraph([4, 2, 3]))


class TestContract(unittest.TestCase):
    """Test vertex contraction."""

    def test_contract_single(self):
        """Test contracting a vertex joins its neighbors."""
        star = UndirectedGraph.from_size(4, [(1, 2), (1, 3), (1, 4)])
        expected = UndirectedGraph.from_edges([2, 3, 4], [(2, 3), (2, 4), (3, 4)])
        self.assertEqual(expected, star.contract([1]))
        self.assertEqual(
            UndirectedGraph.from_edges([1, 3, 4, 5], [(1, 3), (3, 4), (4, 5)]),
            path.contract([2]),
        )

    def test_contract_leaf(self):
        """Test contracting a leaf is the same as deleting it."""
        self.assertEqual(path.delete([1]), path.contract([1]))

    def test_contract_non_adjacent(self):
        """Test contracting two non-adjacent vertices does not depend on the order."""
        both = path.contract([2, 4])
        self.assertEqual(UndirectedGraph.from_edges([1, 3, 5], [(1, 3), (3, 5)]), both)
        self.assertEqual(both, path.contract([4, 2]))
        self.assertEqual(both, path.contract([2]).contract([4]))
        self.assertEqual(both, path.contract([4]).contract([2]))

    def test_contract_adjacent(self):
        """Test contracting adjacent vertices is the same as contracting one at a time."""
        both = path.contract([2, 3])
        self.assertEqual(UndirectedGraph.from_edges([1, 4, 5], [(1, 4), (4, 5)]), both)
        self.assertEqual(both, path.contract([2]).contract([3]))
        self.assertEqual(both, path.contract([3]).contract([2]))

    def test_contract_commutes(self):
        """Test contraction is order independent on all graphs over four vertices."""
        for graph in iter_undirected_graphs([1, 2, 3, 4]):
            for a, b in itt.permutations(graph.vertices(), 2):
                with self.subTest(graph=str(graph), a=a, b=b):
                    self.assertEqual(graph.contract([a, b]), graph.contract([b, a]))
                    self.assertEqual(graph.contract([a, b]), graph.contract([a]).contract([b]))

    def test_contract_does_not_mutate(self):
        """Test the source graph is untouched."""
        graph = path.copy()
        graph.contract([2, 3, 4])
        self.assertEqual(path, graph)


class TestPermute(unittest.TestCase):
    """Test relabeling."""

    def test_permute(self):
        """Test permuting the vertex set keeps the ground set order."""
        mapping = {1: 5, 2: 4, 3: 3, 4: 2, 5: 1}
        reversed_path = path.permute(mapping)
        self.assertEqual(path.vertices(), reversed_path.vertices())
        self.assertEqual(path, reversed_path)

        graph = UndirectedGraph.from_size(3, [(1, 2)])
        rotated = graph.permute({1: 2, 2: 3, 3: 1})
        self.assertEqual({frozenset({2, 3})}, rotated.edges())
        self.assertEqual((1, 2, 3), rotated.vertices())

    def test_relabel(self):
        """Test mapping onto new labels uses the images in ground set order."""
        graph = UndirectedGraph.from_size(3, [(1, 2), (2, 3)])
        relabeled = graph.permute({1: "a", 2: "b", 3: "c"})
        self.assertEqual(("a", "b", "c"), relabeled.vertices())
        self.assertEqual({frozenset("ab"), frozenset("bc")}, relabeled.edges())

    def test_invalid(self):
        """Test non-bijective mappings fail."""
        graph = UndirectedGraph.from_size(3, [(1, 2)])
        for mapping in [
            {1: 1, 2: 2},
            {1: 1, 2: 2, 3: 3, 4: 4},
            {1: 2, 2: 2, 3: 3},
            {1: "a", 2: "a", 3: "b"},
        ]:
            with self.subTest(mapping=mapping), self.assertRaises(InvalidPermutation):
                graph.permute(mapping)
