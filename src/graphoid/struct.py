# -*- coding: utf-8 -*-

"""Data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Optional, Tuple

__all__ = [
    "SeparationJudgement",
]

#: Maps a vertex label to a sort key, e.g., :meth:`graphoid.cube.Cube.index`
OrderKey = Callable[[Hashable], Any]


@dataclass(frozen=True)
class SeparationJudgement:
    """
    Record if a left/right pair are separated given the conditions.

    By default, acts like a boolean.
    """

    separated: bool
    left: Hashable
    right: Hashable
    conditions: Tuple[Hashable, ...]

    @classmethod
    def create(
        cls,
        left: Hashable,
        right: Hashable,
        conditions: Optional[Iterable[Hashable]] = None,
        *,
        separated: bool = True,
        key: Optional[OrderKey] = None,
    ) -> SeparationJudgement:
        """Create a separation judgement in canonical form.

        :param left: A vertex
        :param right: Another vertex
        :param conditions: The vertices being conditioned on
        :param separated: If the judgement holds
        :param key: Orders the vertices. Pass the index of the ground set so that
            judgements agree with the ones listed by :class:`graphoid.relation.Relation`.
            If none, labels are compared directly.
        :returns: A judgement with the pair and the conditions sorted
        """
        left, right = sorted([left, right], key=key)  # type:ignore
        if conditions is None:
            conditions = tuple()
        conditions = tuple(sorted(set(conditions), key=key))  # type:ignore
        return cls(separated, left, right, conditions)

    def __bool__(self) -> bool:
        return self.separated

    def __str__(self) -> str:
        symbol = "_||_" if self.separated else "~||~"
        rv = f"{self.left} {symbol} {self.right}"
        if self.conditions:
            rv += " | " + ", ".join(map(str, self.conditions))
        return rv

    def is_canonical(self, key: Optional[OrderKey] = None) -> bool:
        """Return if the judgement is in canonical form under the given order."""
        return (
            isinstance(self.conditions, tuple)
            and [self.left, self.right] == sorted([self.left, self.right], key=key)  # type:ignore
            and self.left != self.right
            and tuple(sorted(self.conditions, key=key)) == self.conditions  # type:ignore
        )
