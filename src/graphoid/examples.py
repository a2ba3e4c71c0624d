# -*- coding: utf-8 -*-

"""Small undirected graphs with known separations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .graph import UndirectedGraph
from .struct import SeparationJudgement

__all__ = [
    "Example",
    "examples",
    "path",
    "two_edges",
    "empty_3",
    "cycle_4",
    "star",
]


@dataclass
class Example:
    """An example graph packaged with separations that hold or fail in it."""

    name: str
    graph: UndirectedGraph
    description: Optional[str] = None
    #: Judgements that hold in the graph
    separations: Sequence[SeparationJudgement] = field(default_factory=list)
    #: Judgements that fail in the graph
    dependencies: Sequence[SeparationJudgement] = field(default_factory=list)


def _sep(left, right, *conditions, separated: bool = True) -> SeparationJudgement:
    return SeparationJudgement.create(left, right, conditions, separated=separated)


path = Example(
    name="Path",
    description="A path 1-2-3-4-5, every inner vertex is a cut vertex",
    graph=UndirectedGraph.from_size(5, [(1, 2), (2, 3), (3, 4), (4, 5)]),
    separations=[_sep(1, 5, 3), _sep(1, 3, 2), _sep(2, 4, 3), _sep(1, 5, 2, 4)],
    dependencies=[
        _sep(1, 5, separated=False),
        _sep(1, 2, 3, 4, 5, separated=False),
    ],
)

two_edges = Example(
    name="Two edges",
    description="Two disjoint edges 1-2 and 3-4 and an isolated vertex 5",
    graph=UndirectedGraph.from_size(5, [(1, 2), (3, 4)]),
    separations=[_sep(1, 3), _sep(1, 5), _sep(2, 4), _sep(4, 5, 1, 2)],
    dependencies=[_sep(1, 2, separated=False), _sep(3, 4, 5, separated=False)],
)

empty_3 = Example(
    name="Empty",
    description="Three vertices and no edges",
    graph=UndirectedGraph.from_size(3),
    separations=[_sep(1, 2), _sep(1, 3), _sep(2, 3), _sep(1, 2, 3)],
)

cycle_4 = Example(
    name="Cycle",
    description="A 4-cycle 1-2-3-4-1, opposite vertices need both others removed",
    graph=UndirectedGraph.from_size(4, [(1, 2), (2, 3), (3, 4), (1, 4)]),
    separations=[_sep(1, 3, 2, 4), _sep(2, 4, 1, 3)],
    dependencies=[
        _sep(1, 3, separated=False),
        _sep(1, 3, 2, separated=False),
        _sep(2, 4, 3, separated=False),
    ],
)

star = Example(
    name="Star",
    description="A star with center 1 and leaves 2, 3, 4",
    graph=UndirectedGraph.from_size(4, [(1, 2), (1, 3), (1, 4)]),
    separations=[_sep(2, 3, 1), _sep(2, 4, 1), _sep(3, 4, 1), _sep(2, 3, 1, 4)],
    dependencies=[_sep(2, 3, separated=False), _sep(2, 3, 4, separated=False)],
)

examples: List[Example] = [path, two_edges, empty_3, cycle_4, star]
