# -*- coding: utf-8 -*-

"""A boolean table over the squares of a cube."""

from __future__ import annotations

from typing import Iterable, Union

import numpy as np

from .cube import Cube, Square
from .struct import SeparationJudgement

__all__ = [
    "Relation",
]

#: Characters used by :meth:`Relation.to_str` for separated and connected squares
SEPARATED_CHAR = "0"
CONNECTED_CHAR = "1"

Key = Union[int, Square]


class Relation:
    """A separation relation, i.e., one boolean per square of a cube.

    An entry is true if the pair of the square is separated given its
    conditioning set. Entries are addressed either by their offset or by the
    square itself, which is packed through :meth:`Cube.pack`.

    .. code-block:: python

        relation = Relation(Cube.from_size(3))
        relation[(1, 2), [3]] = False
        assert not relation[(2, 1), (3,)]
    """

    def __init__(self, cube: Cube, default: bool = True) -> None:
        """Initialize the relation with every entry set to ``default``."""
        self.cube = cube
        self.bits = np.full(len(cube), bool(default), dtype=bool)

    @classmethod
    def from_str(cls, cube: Cube, s: str) -> Relation:
        """Parse a relation from the output of :meth:`to_str`.

        :raises ValueError: if the string has the wrong length or unknown characters
        """
        if len(s) != len(cube):
            raise ValueError(f"expected {len(cube)} characters, got {len(s)}")
        unknown = set(s) - {SEPARATED_CHAR, CONNECTED_CHAR}
        if unknown:
            raise ValueError(f"unexpected characters in relation string: {sorted(unknown)}")
        rv = cls(cube)
        rv.bits[:] = [c == SEPARATED_CHAR for c in s]
        return rv

    def _offset(self, key: Key) -> int:
        if isinstance(key, (int, np.integer)):
            if not 0 <= key < len(self.bits):
                raise IndexError(f"offset {key} out of range for {len(self.bits)} squares")
            return int(key)
        pair, conditions = key
        return self.cube.pack(pair, conditions)

    def __getitem__(self, key: Key) -> bool:
        return bool(self.bits[self._offset(key)])

    def __setitem__(self, key: Key, value: bool) -> None:
        self.bits[self._offset(key)] = bool(value)

    def __len__(self) -> int:
        return len(self.bits)

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Relation)
            and self.cube == other.cube
            and np.array_equal(self.bits, other.bits)
        )

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f"Relation({self.cube!r}, {self.to_str()!r})"

    def count(self) -> int:
        """Count the separated squares."""
        return int(self.bits.sum())

    def to_str(self) -> str:
        """Write one character per square, ``0`` for separated and ``1`` for connected."""
        return "".join(SEPARATED_CHAR if bit else CONNECTED_CHAR for bit in self.bits)

    def judgements(self) -> Iterable[SeparationJudgement]:
        """Iterate over a judgement for every square, in order of offsets."""
        for ((left, right), conditions), bit in zip(self.cube.squares(), self.bits):
            yield SeparationJudgement.create(
                left, right, conditions, separated=bool(bit), key=self.cube.index
            )

    def independencies(self) -> Iterable[SeparationJudgement]:
        """Iterate over the judgements of the separated squares."""
        return (judgement for judgement in self.judgements() if judgement.separated)
