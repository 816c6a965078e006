"""Sorting stack ``a`` with the help of stack ``b``."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.stacks import Pair, Stacks

__all__ = ["small_sort", "radix_sort", "max_index_bits", "sort_stacks"]

SMALL_LIMIT = 5


def _push_min(stacks: Stacks) -> None:
    """Bring the smallest rank of ``a`` to its top and push it onto ``b``."""
    a = stacks.a
    size = len(a)
    idx = min(range(size), key=lambda i: a[i].index)
    if idx == 2 and size == 5:
        stacks.ra()
    if (idx == 3 and size == 5) or idx == 2:
        stacks.sa()
    if idx == 1:
        stacks.rra()
    if idx in (0, 1):
        stacks.rra()
    stacks.pb()


def _sort_three(stacks: Stacks) -> None:
    idx0, idx1, idx2 = (pair.index for pair in stacks.a[:3])
    if idx2 < idx1 and idx2 < idx0 and idx0 < idx1:
        stacks.rra()
        stacks.sa()
    elif idx1 < idx2 and idx1 < idx0 and idx2 < idx0:
        stacks.sa()
    elif idx1 < idx2 and idx1 < idx0 and idx0 < idx2:
        stacks.ra()
    elif idx0 < idx2 and idx0 < idx1 and idx2 < idx1:
        stacks.rra()
    elif idx0 < idx2 and idx0 < idx1 and idx1 < idx2:
        stacks.ra()
        stacks.sa()


def small_sort(stacks: Stacks) -> None:
    """Sort a ranked stack ``a`` of two to five elements."""
    a = stacks.a
    if len(a) == 2:
        if a[0].index < a[1].index:
            stacks.sa()
        return
    while len(a) > 3:
        _push_min(stacks)
    _sort_three(stacks)
    while stacks.b:
        stacks.pa()


def max_index_bits(pairs: Sequence[Pair]) -> int:
    """Number of bits needed to write the largest rank among ``pairs``."""
    largest = max((pair.index for pair in pairs), default=-1)
    return max(largest, 0).bit_length()


def radix_sort(stacks: Stacks) -> None:
    """Sort a ranked stack ``a`` bit by bit, lowest bit first."""
    for bit in range(max_index_bits(stacks.a)):
        for _ in range(len(stacks.a)):
            if (stacks.a[-1].index >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        while stacks.b:
            stacks.pa()


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a`` so its smallest rank is on top, choosing the strategy by size."""
    if len(stacks.a) <= SMALL_LIMIT:
        small_sort(stacks)
    else:
        radix_sort(stacks)