# pushswap

Sorts a list of distinct integers using only a small set of stack
operations, and prints each operation it uses, one per line.

Two stacks are used, `a` and `b`. The operations are:

- `sa`: swap the top two elements of `a`
- `pa`: move the top of `b` onto `a`
- `pb`: move the top of `a` onto `b`
- `ra`: rotate `a` so the top element goes to the bottom
- `rra`: reverse-rotate `a` so the bottom element goes to the top

Up to five numbers are sorted with fixed move patterns. Larger inputs use
a binary radix sort on the rank of each value, lowest bit first.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 5 1 4
push_swap "3 2 5" 1 4
python -m pushswap.cli 3 2 5 1 4
```

Numbers can be passed as separate arguments or together in one argument,
separated by spaces. The first number given is the top of stack `a`; the
goal is to leave the smallest number on top.

The output is three parts: a line with the stack from top to bottom (each
value followed by a space), the operations one per line, and a final line
with the sorted stack in the same form.

- With no arguments the program does nothing.
- Input that holds fewer than two numbers, or is already in order
  (smallest first), produces no output.
- If a value is not an integer, lies outside the 32-bit signed range,
  is repeated, or an argument is empty or only spaces, the program writes
  `Error` to standard error and exits with status 1.

## Library use

```python
import io

from pushswap.cli import run

out = io.StringIO()
status = run(["2", "1", "3"], out)
print(status, out.getvalue())
```

`run(args, out)` returns 0 on success and 1 on invalid input. The
building blocks can also be used on their own:

- `pushswap.parsing.parse_input(args)` turns arguments into a list of
  `Pair` values (the last element is the top). It raises `InputError`, a
  subclass of `ValueError`, on bad input.
- `pushswap.indexing.index_values(pairs)` sets each pair's `index` to its
  rank by value and returns `False` when there is nothing to sort.
- `pushswap.stacks.Stacks` holds the lists `a` and `b` and provides the
  methods `sa`, `pa`, `pb`, `ra` and `rra`. Each returns `False` and does
  nothing when it cannot apply; otherwise the move's name is appended to
  `ops` and passed to the optional `emit` callback.
- `pushswap.sorting.sort_stacks(stacks)` uses `small_sort` for up to five
  elements and `radix_sort` beyond that.
- `pushswap.cli.format_stack(pairs)` renders a stack as one output line.

The package also has general helpers: integer parsing and rendering in
arbitrary bases and word splitting in `pushswap.numconv`, scalar maths and
primes in `pushswap.mathutil`, immutable vector types `Vec2i`, `Vec2`,
`Vec3` and `Vec4` in `pushswap.vectors`, and a 4×4 matrix type `Mat4` in
`pushswap.matrix`.

## What it does not do

Only the five operations above exist; there are no `sb`, `rb`, `rrb` or
combined moves. There is no command that reads a list of operations and
checks whether they sort a given input.

## Tests

```
pip install .[test]
pytest
```