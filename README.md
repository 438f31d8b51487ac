# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small,
fixed set of operations. It prints the operations that sort the numbers into
ascending order on stack `a`, one per line.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the first two elements of `a`                  |
| `sb`  | swap the first two elements of `b`                  |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the first element becomes the last   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the last element becomes the first |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

## Installing

```
pip install .
```

## Command line

```
push_swap 3 2 5 1 4
push_swap "3 2 5 1 4"
python -m pushswap.cli 3 2 5 1 4
```

Numbers may be given as separate arguments or inside quoted strings separated
by spaces. The input may hold only digits, spaces and `+`/`-` signs directly
followed by a digit; the numbers must lie between -2147483648 and 2147483647
and must not repeat. Otherwise `Error` is written to standard error and the
exit status is 255. With no arguments, or with numbers already in ascending
order, nothing is printed.

Up to six numbers are sorted by `pushswap.bubble.small_sort`, which works
directly on the top elements of both stacks. Larger inputs go through
`pushswap.tim.tim_sort`: `pushswap.quick.quick_sort` splits stack `a` around
a middle pivot into sorted runs on `b` (runs of 8 to 16 numbers from 64 numbers
on), and `pushswap.merge.merge_runs` merges those runs back onto `a`.

## Library

```python
from pushswap.cli import sort_values
from pushswap.operations import Stacks

values = [3, 2, 5, 1, 4]
ops = sort_values(values)
print(" ".join(op.mnemonic for op in ops))

stacks = Stacks(values)
for op in ops:
    stacks.apply(op)
assert stacks.a_values == sorted(values)
```

- `pushswap.cli.sort_values(values)` returns the list of `Op` values that sort
  the numbers; `pushswap.cli.main(argv=None)` is the command itself and returns
  its exit status.
- `pushswap.parsing.parse_arguments(args)` turns command-line strings into a
  list of integers and raises `pushswap.parsing.InputError` (a `ValueError`)
  on bad input.
- `pushswap.operations.Op` is an `IntEnum` of the eleven operations plus
  `Op.NONE`; `op.mnemonic` gives its name as printed and `op.translate()` gives
  the same operation aimed at the other stack.
- `pushswap.operations.Stacks(values)` holds the stacks as lists of `Node`
  (`value`, `run`) in `a` and `b`, with `a_values` and `b_values` for the plain
  numbers. `apply(op)` executes an operation, returns whether it changed
  anything, and records it in `applied` only if it did.
- The single-stack operations `swap`, `push`, `rotate` and `reverse_rotate`
  work on any list of nodes.
- `pushswap.runs` and `pushswap.insertion` hold the queries the sorters use on
  stacks whose nodes are tagged with run numbers.

## What it does not do

There is no checker command: the package does not read a list of operations
from standard input to judge whether they sort a given input. Replaying
operations with `Stacks.apply`, as above, does that job in code.

## Tests

```
pip install .[test]
pytest
```