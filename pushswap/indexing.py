"""Ranking the numbers on a stack."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.stacks import Pair

__all__ = ["is_descending", "index_values"]


def is_descending(pairs: Sequence[Pair]) -> bool:
    """True if values never increase from bottom to top (top is smallest)."""
    return all(prev.value >= cur.value for prev, cur in zip(pairs, pairs[1:]))


def index_values(pairs: Sequence[Pair]) -> bool:
    """Give each pair its rank by value, 0 for the smallest.

    Returns False, leaving the pairs untouched, when there is nothing to
    sort: fewer than two numbers, or already in order.
    """
    if len(pairs) < 2 or is_descending(pairs):
        return False
    for rank, pair in enumerate(sorted(pairs, key=lambda p: p.value)):
        pair.index = rank
    return True