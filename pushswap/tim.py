"""Hybrid sort: split A into runs on B with quick sort, then merge them back."""

from __future__ import annotations

from typing import Sequence

from pushswap.merge import RunPair, merge_runs
from pushswap.operations import Node, Op, Stacks
from pushswap.quick import quick_sort
from pushswap.runs import run_size, sort_errors

_SINGLE_SPLIT_LIMIT = 64
_MIN_RUN_LENGTH = 8
_MAX_RUN_LENGTH = 16


def _run_count(stack: Sequence[Node]) -> int:
    """Count the blocks of consecutive nodes sharing a run, ignoring a leading -1 block."""
    current = -1
    count = 0
    for node in stack:
        if node.run != current:
            current = node.run
            count += 1
    return count


def _run_length(stacks: Stacks) -> int:
    """Pick a run length between 8 and 16 that divides the numbers evenly if possible."""
    size = len(stacks.a) - 1
    length = _MIN_RUN_LENGTH
    while size % length != 0 and length < _MAX_RUN_LENGTH:
        length += 1
    return length


def _merge_all(stacks: Stacks, run_total: int) -> None:
    """Merge pairs of runs from B into A until B is empty."""
    while stacks.b:
        if _run_count(stacks.b) <= run_total // 2:
            first = stacks.b[0].run
            if run_total % 2 != 0:
                runs = RunPair(first, first)
                run_total -= 1
            else:
                runs = RunPair(first, first - 1)
        else:
            last = stacks.b[-1].run
            runs = RunPair(last, last + 1)
        if len(stacks.b) == run_size(stacks.b, runs.a):
            runs.b = runs.a
        before = (len(stacks.b), len(stacks.applied))
        merge_runs(stacks, runs)
        if (len(stacks.b), len(stacks.applied)) == before:
            raise RuntimeError("merging the runs made no progress")


def tim_sort(stacks: Stacks) -> None:
    """Sort A ascending using quick sort for splitting and merge sort for joining."""
    if len(stacks.a) < _SINGLE_SPLIT_LIMIT:
        quick_sort(stacks, 0)
    else:
        quick_sort(stacks, _run_length(stacks))
    _merge_all(stacks, _run_count(stacks.b))
    rotations = 0
    while sort_errors(stacks.a, -1):
        if rotations > len(stacks.a):
            raise RuntimeError("stack A cannot be sorted by rotation")
        stacks.apply(Op.RRA)
        rotations += 1