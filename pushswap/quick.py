"""Pivot-driven splitting of stack A into sorted runs on stack B."""

from __future__ import annotations

from typing import Tuple

from pushswap.insertion import insertion_order
from pushswap.operations import Op, Stack, Stacks
from pushswap.runs import WHOLE_STACK, limit_node, next_number, run_size, run_sort_order


def _tag_by_pivot(stack: Stack, pivot: int) -> None:
    for node in stack:
        node.run = -1 if node.value <= pivot else 1


def _middle_pivot(stack: Stack) -> int:
    if len(stack) <= 3:
        return 0
    values = [node.value for node in stack]
    for pivot in values:
        above = sum(1 for value in values if value > pivot)
        below = sum(1 for value in values if value < pivot)
        if above == below or above - 1 == below:
            return pivot
    raise ValueError("no middle pivot found")


def _finish_run(stacks: Stacks, run: int) -> None:
    direction = -1 if run % 2 != 0 else 1
    exe_b = int(Op(run_sort_order(stacks.b, run, direction)).translate())
    limit = limit_node(stacks.b, run, direction).value
    while stacks.b[0].value != limit:
        _, exe_a = next_number(stacks.a, 1)
        if exe_a == exe_b - 3:
            stacks.apply(exe_b + 3)
        else:
            stacks.apply(exe_b)


def _next_orders(stacks: Stacks, pivot_run: int, run_length: int) -> Tuple[int, int, int]:
    run = 0
    direction = 1
    while run_length and run_size(stacks.b, run) >= run_length:
        run += 1
    if run % 2 != 0:
        direction = -1
    candidate, order_a = next_number(stacks.a, pivot_run)
    order_a = int(order_a)
    order_b = int(insertion_order(stacks.b, candidate.value, run, direction).translate())
    if run_length and stacks.b and run_size(stacks.b, run) >= run_length:
        previous = run
        run += 1
        if previous:
            order_b = Op.PB
    if order_a == Op.NONE and order_b == Op.PB and stacks.a[0].value == candidate.value:
        stacks.a[0].run = run
    if order_a != Op.NONE and order_b == Op.PB:
        order_b = Op.NONE
    if order_a == order_b - 3:
        order_b += 3
    if order_b >= Op.SS:
        order_a = Op.NONE
    return run, order_a, order_b


def quick_sort(stacks: Stacks, run_length: int) -> None:
    """Push all but one number of A onto B, sorted within runs of
    ``run_length`` (0 for a single split around the middle pivot)."""
    pivot_run = 1
    _tag_by_pivot(stacks.a, _middle_pivot(stacks.a))
    while len(stacks.a) > 1:
        if (
            run_length
            and not run_size(stacks.a, pivot_run)
            and len(stacks.a) > run_length
        ):
            _tag_by_pivot(stacks.a, _middle_pivot(stacks.a))
            pivot_run = -1
        elif not run_size(stacks.a, pivot_run):
            _tag_by_pivot(stacks.a, limit_node(stacks.a, WHOLE_STACK, -1).value)
        run, order_a, order_b = _next_orders(stacks, pivot_run, run_length)
        stacks.apply(order_a)
        stacks.apply(order_b)
        if (run_length and run_size(stacks.b, run) >= run_length) or len(stacks.a) == 1:
            _finish_run(stacks, run)