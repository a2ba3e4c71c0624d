"""Algorithms on undirected graphs.

====================  ==========================================================  ============================================================
Algorithm             Description                                                 Implementation
====================  ==========================================================  ============================================================
Reachability          Which vertices are connected by some path                   :func:`graphoid.algorithm.reachability.reachability`
Components            Split a graph into its maximal connected subgraphs          :func:`graphoid.algorithm.reachability.connected_components`
Separation            Whether removing a set of vertices disconnects two others   :func:`graphoid.algorithm.separation.are_separated`
Separation relation   The separation judgement of every square of the cube        :func:`graphoid.algorithm.separation.build_relation`
====================  ==========================================================  ============================================================
"""  # noqa:E501

from .reachability import connected_components, is_reachable, reachability
from .separation import are_separated, build_relation

__all__ = [
    "reachability",
    "is_reachable",
    "connected_components",
    "are_separated",
    "build_relation",
]
