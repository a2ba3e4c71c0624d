# -*- coding: utf-8 -*-

"""Separation in undirected graphs.

Two vertices $i$ and $j$ are separated given a set of vertices $K$ if every
path between them passes through $K$, i.e., if they are disconnected after
$K$ is removed from the graph. This is the graphical counterpart of the
conditional independence statement $i \\perp j \\mid K$ in an undirected
graphical model.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from itertools import combinations
from typing import Callable, DefaultDict, Hashable, Iterable, List, Optional, Set, Tuple

from tqdm.auto import tqdm

from .reachability import is_reachable, reachability
from ..constants import ReachabilityMethod
from ..graph import UndirectedGraph, UnknownVertex
from ..relation import Relation
from ..struct import SeparationJudgement
from ..util.combinatorics import count_subsets, powerset

__all__ = [
    "InvalidQuery",
    "are_separated",
    "build_relation",
    "iter_separations",
    "get_separations",
    "minimal",
]

logger = logging.getLogger(__name__)


class InvalidQuery(ValueError):
    """Raised when a separation query does not name two distinct vertices outside the conditions."""


def are_separated(
    graph: UndirectedGraph,
    left: Hashable,
    right: Hashable,
    *,
    conditions: Optional[Iterable[Hashable]] = None,
    method: Optional[ReachabilityMethod] = None,
) -> SeparationJudgement:
    """Test if two vertices are separated by the conditions.

    ``left`` and ``right`` can be provided in either order and the order of
    conditions does not matter.

    :param graph: Graph to test
    :param left: A vertex in the graph
    :param right: A vertex in the graph
    :param conditions: A collection of graph vertices
    :param method: The reachability method, see :func:`graphoid.algorithm.reachability.reachability`
    :return: A judgement that is truthy if removing the conditions disconnects left and right
    :raises UnknownVertex: if the left/right arguments or any conditions are not in the graph
    :raises InvalidQuery: if left and right are the same or one of them is a condition
    """
    conditions = set() if conditions is None else set(conditions)
    if left not in graph:
        raise UnknownVertex(f"left argument is not in graph: {left!r}")
    if right not in graph:
        raise UnknownVertex(f"right argument is not in graph: {right!r}")
    if left == right:
        raise InvalidQuery(f"left and right arguments are the same: {left!r}")
    if left in conditions or right in conditions:
        raise InvalidQuery(f"conditions {conditions} repeat one of the primary arguments")

    separated = not is_reachable(graph.delete(conditions), left, right, method=method)
    return SeparationJudgement.create(
        left, right, conditions, separated=separated, key=graph.cube.index
    )


def build_relation(
    graph: UndirectedGraph,
    *,
    method: Optional[ReachabilityMethod] = None,
    default: bool = True,
    relation: Optional[Relation] = None,
    verbose: bool = False,
) -> Relation:
    """Compute the separation relation of a graph.

    For every conditioning set $K$ with $|K| \\leq n - 2$, the graph without $K$
    is built and its reachability table is computed once. Then, every pair of
    surviving vertices is written as separated if they do not reach each other.
    Each square of the graph's cube is written exactly once.

    :param graph: An undirected graph
    :param method: The reachability method, see :func:`graphoid.algorithm.reachability.reachability`
    :param default: The value a new relation is initialized with
    :param relation: A relation over the graph's cube to fill in place. If none, a new one is made.
    :param verbose: Show a progress bar over conditioning sets
    :returns: The separation relation
    :raises ValueError: if the given relation is over a different cube
    :raises AssertionError: if a generated conditioning set is not a subset of the
        vertices. Conditioning sets are drawn from the graph's own ground set, so
        this is an internal error and is never reported as :class:`UnknownVertex`.
    """
    cube = graph.cube
    if relation is None:
        relation = Relation(cube, default=default)
    elif relation.cube != cube:
        raise ValueError(f"relation is over {relation.cube!r} but graph is over {cube!r}")

    n = cube.dim
    # conditioning sets leaving fewer than two vertices have no pairs to judge
    stop = n - 1
    logger.debug("enumerating %d conditioning sets over %r", count_subsets(n, stop=stop), cube)
    for conditions in tqdm(
        powerset(cube.set, stop=stop),
        disable=not verbose,
        desc="Building separation relation",
        unit="set",
        total=count_subsets(n, stop=stop),
    ):
        assert all(vertex in graph for vertex in conditions), conditions
        reduced = graph.delete(conditions)
        table = reachability(reduced, method=method)
        for left, right in combinations(reduced.vertices(), 2):
            relation[(left, right), conditions] = not table[left, right]
    return relation


def iter_separations(
    graph: UndirectedGraph,
    *,
    max_conditions: Optional[int] = None,
    return_all: bool = False,
    method: Optional[ReachabilityMethod] = None,
    verbose: bool = False,
) -> Iterable[SeparationJudgement]:
    """Generate separations in the provided graph.

    :param graph: Graph to search for separations.
    :param max_conditions: Largest set of conditions to investigate
    :param return_all: If false (default) only returns the first separation per left/right pair.
    :param method: The reachability method, see :func:`graphoid.algorithm.reachability.reachability`
    :param verbose: If true, prints extra output with tqdm
    :yields: True separation judgements, with smaller sets of conditions first
    """
    vertices = graph.vertices()
    n = len(vertices)
    stop = None if max_conditions is None else max_conditions + 1
    for left, right in tqdm(
        combinations(vertices, 2),
        disable=not verbose,
        desc="Checking separations",
        unit="pair",
        total=n * (n - 1) // 2,
    ):
        rest = [vertex for vertex in vertices if vertex != left and vertex != right]
        for conditions in powerset(rest, stop=stop):
            judgement = are_separated(graph, left, right, conditions=conditions, method=method)
            if judgement.separated:
                yield judgement
                if not return_all:
                    break


def get_separations(
    graph: UndirectedGraph,
    *,
    policy: Optional[Callable[[SeparationJudgement], Tuple]] = None,
    **kwargs,
) -> Set[SeparationJudgement]:
    """Get the minimal separations of the graph.

    :param graph: An undirected graph
    :param policy: Retention policy when more than one separation exists for a pair
        (see :func:`minimal`)
    :param kwargs: Other keyword arguments are passed to :func:`iter_separations`
    :return: One separation for each pair of non-adjacent vertices
    """
    return minimal(iter_separations(graph, **kwargs), policy=policy)


def minimal(
    judgements: Iterable[SeparationJudgement],
    policy: Optional[Callable[[SeparationJudgement], Tuple]] = None,
) -> Set[SeparationJudgement]:
    r"""Given some separations, reduces to a 'minimal' collection.

    For separations of the form $A \perp B | {C_1, C_2, ...}$, the minimal collection will

    - Have only one separation with the same A/B vertices.
    - If there are multiples sets of C-vertices, the kept separation will be the first/minimal
      element in the group sorted according to `policy` argument.

    The default policy is to sort by the shortest set of conditions & then lexicographic.

    :param judgements: Collection of judgements to minimize
    :param policy: Function from separation to a representation suitable for sorting.
    :return: A set of judgements that is minimal (as described above)
    """
    if policy is None:
        policy = _len_lex
    groups: DefaultDict[Tuple[Hashable, Hashable], List[SeparationJudgement]] = defaultdict(list)
    for judgement in judgements:
        groups[_judgement_grouper(judgement)].append(judgement)
    return {min(group, key=policy) for group in groups.values()}


def _judgement_grouper(judgement: SeparationJudgement) -> Tuple[Hashable, Hashable]:
    """Simplify separation to just left & right element (for grouping left/right pairs)."""
    return judgement.left, judgement.right


def _len_lex(judgement: SeparationJudgement) -> Tuple[int, str]:
    """Sort by length of conditions & the lexicography a separation."""
    return len(judgement.conditions), ",".join(map(str, judgement.conditions))
