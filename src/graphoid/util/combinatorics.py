# -*- coding: utf-8 -*-

"""Utilities."""

import math
from itertools import chain, combinations
from typing import Any, Iterable, Mapping, Optional, Tuple, TypeVar

from tqdm import tqdm

__all__ = [
    "powerset",
    "count_subsets",
]

X = TypeVar("X")


def count_subsets(n: int, start: int = 0, stop: Optional[int] = None) -> int:
    """Count the subsets of an n-element set with between ``start`` and ``stop - 1`` elements."""
    if stop is None:
        stop = n + 1
    return sum(math.comb(n, k) for k in range(max(start, 0), min(stop, n + 1)))


def powerset(
    iterable: Iterable[X],
    start: int = 0,
    stop: Optional[int] = None,
    *,
    reverse: bool = False,
    use_tqdm: Optional[bool] = False,
    tqdm_kwargs: Optional[Mapping[str, Any]] = None,
) -> Iterable[Tuple[X, ...]]:
    """Get successively longer combinations of the source.

    Subsets are generated lazily, each exactly once, so memory use does not
    depend on the number of subsets.

    :param iterable: List to get combinations from
    :param start: smallest combination to get (default 0)
    :param stop: Largest combination to get, exclusive (None means length of the list plus one
        and is the default)
    :param reverse: Should the bigger powersets be returned first?
    :param use_tqdm: Should a progress bar be shown
    :param tqdm_kwargs: Options for tqdm
    :return: Iterator of powerset of values.

    .. seealso: :func:`more_iterools.powerset` for a non-constrainable implementation
    """
    s = list(iterable)
    n = len(s)
    if stop is None:
        stop = n + 1
    sizes = range(max(start, 0), min(stop, n + 1))
    if reverse:
        sizes = sizes[::-1]

    rv: Iterable[Tuple[X, ...]] = chain.from_iterable(combinations(s, r) for r in sizes)

    if use_tqdm:
        total = count_subsets(n, start, stop)
        kwargs = {"total": total, **(tqdm_kwargs or {})}
        rv = tqdm(rv, **kwargs)

    return rv
