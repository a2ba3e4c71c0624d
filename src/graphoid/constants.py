# -*- coding: utf-8 -*-

"""Constants for graphoid."""

from __future__ import annotations

from typing import Literal

__all__ = [
    "ReachabilityMethod",
    "DEFAULT_METHOD",
]

#: Strategies for computing the transitive closure of the adjacency relation
ReachabilityMethod = Literal["traversal", "matrix"]
#: The strategy used when none is given explicitly
DEFAULT_METHOD: ReachabilityMethod = "traversal"
