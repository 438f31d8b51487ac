"""Merging runs held on stack B back into stack A in ascending order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pushswap.insertion import insertion_order
from pushswap.operations import Op, Stack, Stacks
from pushswap.runs import WHOLE_STACK, limit_node, run_size


@dataclass
class RunPair:
    """The two runs to merge; equal values mean a single run."""

    a: int
    b: int


def _merge_step(src: Stack, des: Stack, run_a: int, run_b: int) -> int:
    """The next instruction that moves a node of the runs from B into A."""
    if not des:
        return Op.PA
    src_last = src[-1]
    des_last = des[-1]
    members = (run_a, run_b)
    order = Op.NONE
    if src_last.run in members and run_a != run_b:
        if src[0].run not in members or src[0].value < src_last.value:
            order = Op.RRB
    if (
        order == Op.RRB
        and des_last.value > src_last.value
        and src_last.run in members
        and des[0].value > des_last.value
    ):
        order = Op.RRR
    if order == Op.NONE:
        order = Op.PA
        if (
            des_last.value > src[0].value
            and des[0].value != limit_node(des, WHOLE_STACK, -1).value
        ):
            order = Op.RRA
    return order


def _target_position(stacks: Stacks, runs: RunPair) -> int:
    """The rotation of A that readies it for the runs, or ``Op.NONE``."""
    if not stacks.a:
        return Op.NONE
    src_limit = limit_node(stacks.b, runs.a, 1).value
    if runs.a >= 0:
        other = limit_node(stacks.b, runs.b, 1)
        if other is not None and src_limit < other.value:
            src_limit = other.value
    des_min = limit_node(stacks.a, WHOLE_STACK, -1).value
    des_max = limit_node(stacks.a, WHOLE_STACK, 1).value
    if src_limit > des_max and stacks.a[0].value == des_min:
        return Op.NONE
    order = insertion_order(stacks.a, src_limit, WHOLE_STACK, -1)
    return Op.NONE if order == Op.PA else order


def _position(stacks: Stacks, runs: RunPair, from_top: bool) -> None:
    if len(stacks.b) == run_size(stacks.b, runs.a):
        runs.a = WHOLE_STACK
    rotation = Op.RB if from_top else Op.RRB
    order_a: Optional[int] = None

    def edge_run() -> Optional[int]:
        if not stacks.b:
            return None
        return (stacks.b[0] if from_top else stacks.b[-1]).run

    while edge_run() == runs.a or order_a is None or order_a != Op.NONE:
        order_b = int(rotation)
        order_a = int(_target_position(stacks, runs))
        if edge_run() != runs.a or runs.a == WHOLE_STACK:
            order_b = Op.NONE
        elif from_top and runs.a == runs.b:
            order_b = Op.NONE
        if (runs.a == WHOLE_STACK or runs.a == runs.b) and order_a == Op.NONE:
            break
        if order_a == order_b - 3:
            order_a = order_b + 3
            order_b = Op.NONE
        stacks.apply(order_b)
        stacks.apply(order_a)


def merge_runs(stacks: Stacks, runs: RunPair) -> None:
    """Merge the runs named in ``runs`` from B into A, ascending.

    ``runs`` may be updated in place when one run fills all of B.
    """
    if not stacks.b:
        return
    _position(stacks, runs, from_top=stacks.b[0].run == runs.a)
    if runs.a == runs.b:
        order = _merge_step(stacks.b, stacks.a, runs.a, runs.b) if stacks.b else Op.PA
        while stacks.b and stacks.b[0].run == runs.a:
            stacks.apply(order)
        return
    while run_size(stacks.b, runs.a) or run_size(stacks.b, runs.b):
        stacks.apply(_merge_step(stacks.b, stacks.a, runs.a, runs.b))