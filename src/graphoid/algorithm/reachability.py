# -*- coding: utf-8 -*-

"""Reachability in undirected graphs.

Two vertices reach each other if they are in the same connected component.
The transitive closure of the adjacency relation can be computed in two
equivalent ways:

==============  ===================================================================
Method          Description
==============  ===================================================================
``traversal``   Label connected components with :func:`networkx.connected_components`
``matrix``      Boolean sum of the powers $A^1, \\dots, A^n$ of the adjacency matrix
==============  ===================================================================

Traversal runs in $O(V + E)$ and is the default. Both include the reflexive
pairs, so every vertex reaches itself, including isolated ones.
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, List, Optional, Tuple

import networkx as nx
import numpy as np

from ..constants import DEFAULT_METHOD, ReachabilityMethod
from ..graph import UndirectedGraph, UnknownVertex

__all__ = [
    "ReachabilityTable",
    "reachability",
    "is_reachable",
    "connected_components",
]

logger = logging.getLogger(__name__)


class ReachabilityTable:
    """A symmetric, reflexive boolean table of which vertices reach each other."""

    def __init__(self, vertices: Tuple[Hashable, ...], matrix: np.ndarray) -> None:
        """Initialize the table.

        :param vertices: The vertices, in the order indexing the matrix
        :param matrix: A square boolean matrix
        """
        self.vertices = vertices
        self.matrix = matrix
        self._index = {vertex: idx for idx, vertex in enumerate(vertices)}

    def __getitem__(self, pair: Tuple[Hashable, Hashable]) -> bool:
        u, v = pair
        return bool(self.matrix[self._lookup(u), self._lookup(v)])

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, ReachabilityTable)
            and self.vertices == other.vertices
            and np.array_equal(self.matrix, other.matrix)
        )

    def __repr__(self) -> str:
        return f"ReachabilityTable({self.vertices!r})"

    def _lookup(self, vertex: Hashable) -> int:
        try:
            return self._index[vertex]
        except KeyError:
            raise UnknownVertex(f"{vertex!r} not found in graph") from None

    def to_dict(self) -> Dict[Hashable, Dict[Hashable, bool]]:
        """Get a nested dictionary such that ``d[u][v]`` tells if ``u`` reaches ``v``."""
        return {
            u: {v: bool(self.matrix[i, j]) for j, v in enumerate(self.vertices)}
            for i, u in enumerate(self.vertices)
        }


def reachability(
    graph: UndirectedGraph, method: Optional[ReachabilityMethod] = None
) -> ReachabilityTable:
    """Compute which vertices are connected by some path.

    :param graph: An undirected graph
    :param method: Either ``traversal`` or ``matrix``. If none, defaults to
        :data:`graphoid.constants.DEFAULT_METHOD`.
    :returns: The reflexive, transitive closure of the adjacency relation
    :raises ValueError: if the method is unknown
    """
    if method is None:
        method = DEFAULT_METHOD
    if method == "traversal":
        matrix = _traversal_closure(graph)
    elif method == "matrix":
        matrix = _matrix_closure(graph)
    else:
        raise ValueError(f"unknown reachability method: {method}")
    return ReachabilityTable(graph.vertices(), matrix)


def _traversal_closure(graph: UndirectedGraph) -> np.ndarray:
    n = len(graph)
    rv = np.zeros((n, n), dtype=bool)
    for component in nx.connected_components(graph.graph):
        idx = [graph.cube.index(vertex) for vertex in component]
        rv[np.ix_(idx, idx)] = True
    return rv


def _matrix_closure(graph: UndirectedGraph) -> np.ndarray:
    # a vertex reachable from another is reachable by a path of length at most n - 1,
    # so summing the powers up to the n-th suffices
    adjacency = graph.adjacency_matrix().astype(np.int64)
    n = len(graph)
    rv = np.eye(n, dtype=bool)
    power = np.eye(n, dtype=np.int64)
    for _ in range(n):
        # clip to booleans after every product to keep entries from growing
        power = (power @ adjacency > 0).astype(np.int64)
        rv |= power > 0
    return rv


def is_reachable(
    graph: UndirectedGraph,
    u: Hashable,
    v: Hashable,
    *,
    method: Optional[ReachabilityMethod] = None,
) -> bool:
    """Check if there is a path between two vertices.

    :raises UnknownVertex: if either vertex is not in the graph
    """
    if u not in graph:
        raise UnknownVertex(f"{u!r} not found in graph")
    if v not in graph:
        raise UnknownVertex(f"{v!r} not found in graph")
    if method is None or method == "traversal":
        return u == v or nx.has_path(graph.graph, u, v)
    return reachability(graph, method=method)[u, v]


def connected_components(graph: UndirectedGraph) -> List[UndirectedGraph]:
    """Split a graph into its connected components.

    :param graph: An undirected graph
    :returns: The components, each over its own vertices in ground set order,
        sorted by the position of their first vertex. A connected graph is
        returned itself as the only component and the empty graph has none.
    """
    if not len(graph):
        return []
    components = [
        graph.cube.sort(component) for component in nx.connected_components(graph.graph)
    ]
    if len(components) == 1:
        return [graph]
    logger.debug("splitting %s into %d components", graph, len(components))
    components.sort(key=lambda component: graph.cube.index(component[0]))
    return [graph.subgraph(component) for component in components]
