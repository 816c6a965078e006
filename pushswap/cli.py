"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from pushswap.indexing import index_values
from pushswap.parsing import InputError, parse_input
from pushswap.sorting import sort_stacks
from pushswap.stacks import Pair, Stacks

__all__ = ["format_stack", "run", "main"]


def format_stack(pairs: Sequence[Pair]) -> str:
    """One line listing the values from top to bottom, each followed by a space."""
    return "".join(f"{pair.value} " for pair in reversed(pairs)) + "\n"


def run(args: Sequence[str], out: TextIO) -> int:
    """Sort the numbers in ``args``, writing the stack and moves to ``out``.

    Writes ``Error`` to standard error and returns 1 on invalid input;
    otherwise returns 0. Nothing is written when there is nothing to sort.
    """
    if not args:
        return 0
    try:
        pairs = parse_input(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    if not index_values(pairs):
        return 0
    stacks = Stacks(pairs, emit=lambda name: out.write(name + "\n"))
    out.write(format_stack(stacks.a))
    sort_stacks(stacks)
    out.write(format_stack(stacks.a))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    return run(args, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())