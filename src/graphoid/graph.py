# -*- coding: utf-8 -*-

"""Graph data structures."""

from __future__ import annotations

import itertools as itt
from dataclasses import dataclass, field
from typing import (
    Any,
    Collection,
    FrozenSet,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    Set,
    Tuple,
    Union,
)

import networkx as nx
import numpy as np

from .cube import Cube
from .util.combinatorics import powerset

__all__ = [
    "UndirectedGraph",
    "InvalidEdge",
    "UnknownVertex",
    "InvalidPermutation",
    "describe",
    "iter_undirected_graphs",
]

GroundSet = Union[Cube, Iterable[Hashable]]


class InvalidEdge(ValueError):
    """Raised when an edge is not a pair of distinct vertices of the ground set."""


class UnknownVertex(KeyError):
    """Raised when a query or transform names a vertex that is not in the graph."""


class InvalidPermutation(ValueError):
    """Raised when a relabeling is not a bijection on the vertex set."""


@dataclass(eq=False)
class UndirectedGraph:
    """A simple undirected graph over an ordered ground set.

    The ground set fixes the order of :meth:`vertices`, which is used for all
    matrix-style indexing. Graphs are not mutated by any of their methods:
    :meth:`delete`, :meth:`contract` and :meth:`permute` return new,
    independent graphs with their own, derived ground sets.

    Example usage:

    .. code-block:: python

        graph = UndirectedGraph.from_edges([1, 2, 3], [(1, 2), (2, 3)])
        graph.delete([2]).edges()  # empty
        graph.contract([2]).edges()  # {frozenset({1, 3})}
    """

    #: The ground set, which is also the vertex set
    cube: Cube
    #: The adjacency, over exactly the vertices of the ground set
    graph: nx.Graph = field(default_factory=nx.Graph)

    def __post_init__(self):
        """Check that the adjacency lives on the ground set.

        The given :class:`networkx.Graph` is copied, so the caller keeps ownership of it.
        """
        self.graph = self.graph.copy()
        for node in self.cube.set:
            self.graph.add_node(node)
        extra = [node for node in self.graph if node not in self.cube]
        if extra:
            raise InvalidEdge(f"vertices not in ground set: {extra}")

    @classmethod
    def from_edges(
        cls,
        ground_set: GroundSet,
        edges: Iterable[Collection[Hashable]] = (),
    ) -> UndirectedGraph:
        """Make a graph from a ground set and an edge list.

        :param ground_set: A cube, or a sequence of vertex labels
        :param edges: Unordered pairs of vertices. Duplicates are ignored.
        :returns: A graph whose adjacency is the symmetric closure of the edges
        :raises InvalidEdge: if an edge is not a pair of distinct ground set elements
        """
        cube = ground_set if isinstance(ground_set, Cube) else Cube(ground_set)
        graph = nx.Graph()
        graph.add_nodes_from(cube.set)
        for edge in edges:
            # a string is a sequence of labels, not an edge
            pair = () if isinstance(edge, str) else tuple(edge)
            if len(pair) != 2:
                raise InvalidEdge(f"not a pair of vertices: {edge!r}")
            u, v = pair
            if u not in cube or v not in cube:
                raise InvalidEdge(f"edge {u!r}-{v!r} references a vertex outside {cube!r}")
            if u == v:
                raise InvalidEdge(f"self-loops are not allowed: {u!r}")
            graph.add_edge(u, v)
        return cls(cube=cube, graph=graph)

    @classmethod
    def from_size(cls, n: int, edges: Iterable[Collection[Hashable]] = ()) -> UndirectedGraph:
        """Make a graph on the ground set ``1..n``."""
        return cls.from_edges(Cube.from_size(n), edges)

    def __eq__(self, other: Any) -> bool:
        """Check for equality of the vertex order and the edges."""
        return (
            isinstance(other, UndirectedGraph)
            and self.vertices() == other.vertices()
            and self.edges() == other.edges()
        )

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate over vertices in ground set order."""
        return iter(self.cube.set)

    def __len__(self) -> int:
        """Count the vertices in the graph."""
        return self.cube.dim

    def __contains__(self, item: Hashable) -> bool:
        """Check if the given item is a vertex in the graph."""
        return item in self.cube

    def __str__(self) -> str:
        return describe(self)

    def __repr__(self) -> str:
        return f"UndirectedGraph({list(self.cube.set)!r}, {describe(self)!r})"

    def copy(self) -> UndirectedGraph:
        """Get a copy of the graph."""
        return self.__class__(cube=self.cube, graph=self.graph)

    def to_networkx(self) -> nx.Graph:
        """Get an independent copy of the adjacency as a :class:`networkx.Graph`."""
        return self.graph.copy()

    def vertices(self) -> Tuple[Hashable, ...]:
        """Get the vertices in ground set order."""
        return self.cube.set

    def edges(self) -> Set[FrozenSet[Hashable]]:
        """Get the edges as unordered pairs."""
        return {frozenset(edge) for edge in self.graph.edges()}

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        """Check if two vertices are adjacent.

        :raises UnknownVertex: if either vertex is not in the graph
        """
        self._check_vertex(u)
        self._check_vertex(v)
        return self.graph.has_edge(u, v)

    def neighbors(self, vertex: Hashable) -> Set[Hashable]:
        """Get the vertices adjacent to the given one.

        :raises UnknownVertex: if the vertex is not in the graph
        """
        self._check_vertex(vertex)
        return set(self.graph.neighbors(vertex))

    def adjacency_matrix(self) -> np.ndarray:
        """Get the dense boolean adjacency matrix, indexed in ground set order."""
        n = self.cube.dim
        rv = np.zeros((n, n), dtype=bool)
        for u, v in self.graph.edges():
            i, j = self.cube.index(u), self.cube.index(v)
            rv[i, j] = rv[j, i] = True
        return rv

    def subgraph(self, vertices: Iterable[Hashable]) -> UndirectedGraph:
        """Return the induced subgraph on the given vertices.

        :param vertices: a subset of vertices
        :returns: A graph over the given vertices, in ground set order
        :raises UnknownVertex: if any of the vertices are not in the graph
        """
        keep = self._ensure_vertices(vertices)
        return self.from_edges(
            ground_set=[node for node in self.cube.set if node in keep],
            edges=_include_adjacent(self.graph, keep),
        )

    def delete(self, vertices: Iterable[Hashable]) -> UndirectedGraph:
        """Return the induced subgraph that does not contain any of the given vertices.

        :param vertices: a set of vertices to remove from graph
        :returns: A graph over the remaining vertices, in ground set order
        :raises UnknownVertex: if any of the vertices are not in the graph
        """
        remove = self._ensure_vertices(vertices)
        return self.from_edges(
            ground_set=[node for node in self.cube.set if node not in remove],
            edges=_exclude_adjacent(self.graph, remove),
        )

    def contract(self, vertices: Iterable[Hashable]) -> UndirectedGraph:
        """Marginalize the given vertices.

        Each removed vertex has its surviving neighbors joined into a clique.
        Neighborhoods are taken in this graph before anything is removed, and
        vertices of the same connected component of the removed set share
        their neighborhoods, so the result is the same as contracting the
        vertices one at a time in any order.

        :param vertices: a set of vertices to contract
        :returns: A graph over the remaining vertices, in ground set order
        :raises UnknownVertex: if any of the vertices are not in the graph
        """
        remove = self._ensure_vertices(vertices)
        cliques = []
        for component in nx.connected_components(self.graph.subgraph(remove)):
            boundary = set(itt.chain.from_iterable(self.graph[node] for node in component))
            cliques.extend(itt.combinations(self.cube.sort(boundary - remove), 2))
        return self.from_edges(
            ground_set=[node for node in self.cube.set if node not in remove],
            edges=itt.chain(_exclude_adjacent(self.graph, remove), cliques),
        )

    def permute(self, mapping: Mapping[Hashable, Hashable]) -> UndirectedGraph:
        """Relabel the vertices of the graph.

        :param mapping: A bijection from the vertices to new labels. If the new labels
            are the same vertex set, the ground set order is kept. Otherwise, the new
            ground set lists the images in the old ground set order.
        :returns: An isomorphic graph
        :raises InvalidPermutation: if the mapping is not a bijection on the vertex set
        """
        if set(mapping) != set(self.cube.set):
            missing = set(self.cube.set) - set(mapping)
            extra = set(mapping) - set(self.cube.set)
            raise InvalidPermutation(f"mapping domain mismatch: missing={missing}, extra={extra}")
        images = [mapping[node] for node in self.cube.set]
        if len(set(images)) != len(images):
            raise InvalidPermutation(f"mapping is not injective: {dict(mapping)}")
        cube = self.cube if set(images) == set(self.cube.set) else Cube(images)
        return self.from_edges(
            ground_set=cube,
            edges=[(mapping[u], mapping[v]) for u, v in self.graph.edges()],
        )

    def _check_vertex(self, vertex: Hashable) -> None:
        if vertex not in self.cube:
            raise UnknownVertex(f"{vertex!r} not found in graph")

    def _ensure_vertices(self, vertices: Iterable[Hashable]) -> Set[Hashable]:
        rv = set(vertices)
        missing = {vertex for vertex in rv if vertex not in self.cube}
        if missing:
            raise UnknownVertex(f"vertices missing from graph: {missing}")
        return rv


def _include_adjacent(
    graph: nx.Graph, vertices: Set[Hashable]
) -> Collection[Tuple[Hashable, Hashable]]:
    return [(u, v) for u, v in graph.edges() if u in vertices and v in vertices]


def _exclude_adjacent(
    graph: nx.Graph, vertices: Set[Hashable]
) -> Collection[Tuple[Hashable, Hashable]]:
    return [(u, v) for u, v in graph.edges() if u not in vertices and v not in vertices]


def describe(graph: UndirectedGraph) -> str:
    """Write the graph as its edges ``u-v`` followed by its isolated vertices.

    Edges are written with ``u`` before ``v`` in ground set order and are
    listed in that order, for example ``1-2, 2-3, 5`` for a path on three
    vertices and an isolated vertex.
    """
    index = graph.cube.index
    edges = sorted(
        (tuple(sorted(edge, key=index)) for edge in graph.edges()),
        key=lambda pair: (index(pair[0]), index(pair[1])),
    )
    isolated = [node for node in graph.vertices() if not graph.graph.degree(node)]
    return ", ".join([f"{u}-{v}" for u, v in edges] + [str(node) for node in isolated])


def iter_undirected_graphs(ground_set: GroundSet) -> Iterable[UndirectedGraph]:
    """Generate every simple undirected graph over the ground set.

    :param ground_set: A cube, or a sequence of vertex labels
    :yields: One graph per subset of the possible edges, with fewer edges first
    """
    cube = ground_set if isinstance(ground_set, Cube) else Cube(ground_set)
    pairs = list(itt.combinations(cube.set, 2))
    for edges in powerset(pairs):
        yield UndirectedGraph.from_edges(cube, edges)
