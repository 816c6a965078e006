"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.numconv import split, strtol
from pushswap.stacks import Pair

__all__ = ["InputError", "parse_input"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class InputError(ValueError):
    """The arguments do not describe a list of distinct 32-bit integers."""


def _parse_number(word: str) -> int:
    value, rest = strtol(word)
    if rest is None or rest:
        raise InputError(f"not an integer: {word!r}")
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {word!r}")
    return value


def _check_duplicates(pairs: Iterable[Pair]) -> None:
    seen: set[int] = set()
    for pair in pairs:
        if pair.value in seen:
            raise InputError(f"duplicate value: {pair.value}")
        seen.add(pair.value)


def parse_input(args: Iterable[str]) -> list[Pair]:
    """Build stack ``a`` from the arguments, the first number on top.

    Each argument may hold several numbers separated by spaces. Raises
    InputError for an empty argument, a malformed or out-of-range number,
    or a repeated value.
    """
    pairs: list[Pair] = []
    for arg in reversed(list(args)):
        words = split(arg, " ")
        if not words:
            raise InputError("empty argument")
        pairs.extend(Pair(_parse_number(word)) for word in reversed(words))
    _check_duplicates(pairs)
    return pairs