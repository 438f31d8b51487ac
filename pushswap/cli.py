"""Command line entry: print the instructions that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from pushswap.bubble import small_sort
from pushswap.operations import Op, Stacks
from pushswap.parsing import InputError, parse_arguments
from pushswap.runs import sort_errors
from pushswap.tim import tim_sort

_SMALL_INPUT = 6
ERROR_STATUS = 255


def sort_values(values: Iterable[int]) -> List[Op]:
    """Return the instructions that sort ``values`` ascending on stack A."""
    stacks = Stacks(values)
    if not sort_errors(stacks.a, -1):
        return []
    if len(stacks.a) <= _SMALL_INPUT:
        small_sort(stacks)
    else:
        tim_sort(stacks)
    return list(stacks.applied)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one instruction per line; report bad input as ``Error`` on stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return ERROR_STATUS
    for op in sort_values(values):
        print(op.mnemonic)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())