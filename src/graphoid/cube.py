# -*- coding: utf-8 -*-

r"""The ground set of a graph and the addressing of its squares.

A *square* is a triple $((i, j), K)$ of two distinct elements $i, j$ of the
ground set $N$ and a subset $K \subseteq N \setminus \{i, j\}$. Squares are the
2-faces of the $|N|$-dimensional cube and are exactly the statements
$i \perp j \mid K$ a conditional independence relation talks about. Each
square gets a unique offset in ``range(len(cube))``, which is how a
:class:`graphoid.relation.Relation` is addressed.
"""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Collection, Hashable, Iterable, Iterator, Sequence, Tuple

__all__ = [
    "Cube",
    "Square",
]

#: A pair of ground set elements and a conditioning set
Square = Tuple[Tuple[Hashable, Hashable], Tuple[Hashable, ...]]


class Cube:
    """An ordered, duplicate-free ground set.

    Example usage:

    .. code-block:: python

        cube = Cube([1, 2, 3, 4])
        offset = cube.pack((1, 3), [2])
        assert cube.unpack(offset) == ((1, 3), (2,))
    """

    def __init__(self, ground_set: Iterable[Hashable]) -> None:
        """Initialize the cube.

        :param ground_set: The vertex labels, in the order used for all indexing
        :raises ValueError: if a label occurs more than once
        """
        self.set: Tuple[Hashable, ...] = tuple(ground_set)
        self._lookup = {element: idx for idx, element in enumerate(self.set)}
        if len(self._lookup) != len(self.set):
            duplicates = {e for e, count in Counter(self.set).items() if count > 1}
            raise ValueError(f"ground set has duplicate elements: {duplicates}")

    @classmethod
    def from_size(cls, n: int) -> Cube:
        """Get the cube over the ground set ``1..n``."""
        if n < 0:
            raise ValueError(f"negative ground set size: {n}")
        return cls(range(1, n + 1))

    @property
    def dim(self) -> int:
        """The number of elements in the ground set."""
        return len(self.set)

    @property
    def _width(self) -> int:
        return max(self.dim - 2, 0)

    def __len__(self) -> int:
        """Count the squares of the cube."""
        n = self.dim
        if n < 2:
            return 0
        return n * (n - 1) // 2 * 2**self._width

    def __eq__(self, other) -> bool:
        return isinstance(other, Cube) and self.set == other.set

    def __hash__(self) -> int:
        return hash(self.set)

    def __contains__(self, item) -> bool:
        return item in self._lookup

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.set)

    def __repr__(self) -> str:
        return f"Cube({list(self.set)!r})"

    def index(self, element: Hashable) -> int:
        """Get the position of an element in the ground set.

        :raises KeyError: if the element is not in the ground set
        """
        try:
            return self._lookup[element]
        except KeyError:
            raise KeyError(f"element not in ground set: {element!r}") from None

    def sort(self, elements: Iterable[Hashable]) -> Tuple[Hashable, ...]:
        """Sort elements by their position in the ground set."""
        return tuple(sorted(elements, key=self.index))

    def pack(self, pair: Sequence[Hashable], conditions: Collection[Hashable] = ()) -> int:
        """Get the offset of a square.

        :param pair: Two distinct elements, in any order
        :param conditions: Elements of the ground set other than the pair, in any order
        :returns: The offset of the square, in ``range(len(self))``
        :raises ValueError: if the square is malformed
        """
        if len(pair) != 2:
            raise ValueError(f"not a pair: {pair!r}")
        p, q = sorted(map(self.index, pair))
        if p == q:
            raise ValueError(f"pair elements must be distinct: {pair!r}")
        mask = 0
        for element in conditions:
            k = self.index(element)
            if k == p or k == q:
                raise ValueError(f"conditioning set {conditions!r} intersects pair {pair!r}")
            # position among the remaining elements after skipping p and q
            mask |= 1 << (k - (k > p) - (k > q))
        return (self._pair_rank(p, q) << self._width) | mask

    def unpack(self, offset: int) -> Square:
        """Get the canonical square at the given offset.

        :raises IndexError: if the offset is out of range
        """
        if not 0 <= offset < len(self):
            raise IndexError(f"offset {offset} out of range for {len(self)} squares")
        rank, mask = offset >> self._width, offset & ((1 << self._width) - 1)
        p, q = self._pair_unrank(rank)
        rest = [e for idx, e in enumerate(self.set) if idx != p and idx != q]
        conditions = tuple(e for b, e in enumerate(rest) if mask >> b & 1)
        return (self.set[p], self.set[q]), conditions

    def squares(self) -> Iterator[Square]:
        """Iterate over all canonical squares in order of their offsets."""
        for p, q in combinations(range(self.dim), 2):
            pair = self.set[p], self.set[q]
            rest = [e for idx, e in enumerate(self.set) if idx != p and idx != q]
            for mask in range(1 << self._width):
                yield pair, tuple(e for b, e in enumerate(rest) if mask >> b & 1)

    def _pair_rank(self, p: int, q: int) -> int:
        n = self.dim
        return p * n - p * (p + 1) // 2 + (q - p - 1)

    def _pair_unrank(self, rank: int) -> Tuple[int, int]:
        n = self.dim
        for p in range(n - 1):
            row = n - p - 1
            if rank < row:
                return p, p + 1 + rank
            rank -= row
        raise IndexError(rank)
