# -*- coding: utf-8 -*-

"""Separation relations of undirected graphs."""

from .algorithm.reachability import connected_components, is_reachable, reachability
from .algorithm.separation import are_separated, build_relation, get_separations
from .cube import Cube
from .graph import UndirectedGraph, describe
from .relation import Relation
from .struct import SeparationJudgement

__all__ = [
    "Cube",
    "Relation",
    "SeparationJudgement",
    "UndirectedGraph",
    "describe",
    "reachability",
    "is_reachable",
    "connected_components",
    "are_separated",
    "build_relation",
    "get_separations",
]
