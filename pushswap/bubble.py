"""Direct sorting of small inputs, six numbers or fewer."""

from __future__ import annotations

from pushswap.merge import RunPair, merge_runs
from pushswap.operations import Op, Stack, Stacks
from pushswap.runs import sort_errors


def _descending_order(stack: Stack) -> int:
    if len(stack) < 2:
        return Op.NONE
    first, second, last = stack[0].value, stack[1].value, stack[-1].value
    small = len(stack) <= 3
    if first < second and small and last != second and first < last:
        return Op.RA
    if first > second and small and second < last:
        return Op.RRA
    if first < second:
        return Op.SA
    return Op.NONE


def _ascending_order(stack: Stack) -> int:
    if len(stack) < 2:
        return Op.NONE
    first, second, last = stack[0].value, stack[1].value, stack[-1].value
    small = len(stack) <= 3
    if first > second and small and last != second and first > last:
        return Op.RA
    if first < second and small and second > last:
        return Op.RRA
    if first > second:
        return Op.SA
    return Op.NONE


def _step(stacks: Stacks) -> None:
    order_a = int(_ascending_order(stacks.a))
    order_b = int(Op(_descending_order(stacks.b)).translate())
    if order_a == order_b - 3:
        order_b += 3
        order_a = Op.NONE
    stacks.apply(order_a)
    stacks.apply(order_b)


def small_sort(stacks: Stacks) -> None:
    """Sort A ascending; for more than six numbers only one step is taken."""
    size = len(stacks.a)
    if size > 6:
        _step(stacks)
        return
    while size > 3:
        size -= 1
        stacks.a[0].run = 0
        stacks.apply(Op.PB)
    while sort_errors(stacks.a, -1) or sort_errors(stacks.b, 1):
        _step(stacks)
    if stacks.b:
        merge_runs(stacks, RunPair(0, 0))
    while sort_errors(stacks.a, -1):
        stacks.apply(Op.RRA)