"""Bounded-cardinality subset generation.

Subsets are produced lazily, size by size, each size in lexicographic order
of item indices. Used for both mutation placement and bond placement.
"""

from __future__ import annotations

import math
from typing import Callable, Iterator, Optional, Sequence, TypeVar

T = TypeVar("T")


def combination_indices(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every k-combination of range(n) in lexicographic order.

    Starts at (0, 1, ..., k-1); each step increments the rightmost index that
    still has room and resets the indices to its right to consecutive values.
    """
    if k < 0 or k > n:
        return
    indices = list(range(k))
    while True:
        yield tuple(indices)
        a = k - 1
        while a >= 0 and indices[a] == n - k + a:
            a -= 1
        if a < 0:
            return
        indices[a] += 1
        for b in range(a + 1, k):
            indices[b] = indices[b - 1] + 1


def subsets(
    items: Sequence[T],
    min_size: int = 0,
    max_size: Optional[int] = None,
    predicate: Optional[Callable[[tuple[T, ...]], bool]] = None,
) -> Iterator[tuple[T, ...]]:
    """Yield every subset of `items` with size in [min_size, max_size].

    Args:
        items: Ordered, distinct items
        min_size: Smallest subset size (negative treated as 0)
        max_size: Largest subset size, clamped to len(items); None means len(items)
        predicate: Optional filter evaluated once per subset; rejected subsets
            are skipped

    Yields:
        Tuples of items, preserving the order of `items`.
    """
    n = len(items)
    kmax = n if max_size is None else min(n, max_size)
    for k in range(max(0, min_size), kmax + 1):
        for idx in combination_indices(n, k):
            subset = tuple(items[i] for i in idx)
            if predicate is None or predicate(subset):
                yield subset


def count_subsets(n: int, min_size: int = 0, max_size: Optional[int] = None) -> int:
    """Number of unfiltered subsets `subsets()` would consider."""
    kmax = n if max_size is None else min(n, max_size)
    return sum(math.comb(n, k) for k in range(max(0, min_size), kmax + 1))


__all__ = ["combination_indices", "subsets", "count_subsets"]
