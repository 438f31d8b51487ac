"""Choosing the rotation that makes room to push a number in sorted place."""

from __future__ import annotations

from typing import Callable, Sequence

from pushswap.operations import Node, Op
from pushswap.runs import WHOLE_STACK, distance, limit_node, run_size, run_start


def _ascending_misfit(value: int, current: int, previous: int) -> bool:
    return value > current or value < previous


def _descending_misfit(value: int, current: int, previous: int) -> bool:
    return value < current or value > previous


def _insert_position(
    stack: Sequence[Node],
    value: int,
    run: int,
    misfit: Callable[[int, int, int], bool],
) -> int:
    """Walk the run until ``value`` fits between two neighbours; return the steps."""
    size = run_size(stack, run)
    position = run_start(stack, run)
    steps = position
    previous = stack[-1]
    if run != WHOLE_STACK and previous.run != run:
        previous = stack[position]
        position += 1
        steps += 1
    while misfit(value, stack[position].value, previous.value):
        steps += 1
        if steps == size:
            break
        previous = stack[position]
        position += 1
        if position < len(stack) and run != WHOLE_STACK and stack[position].run != run:
            following = position + run_start(stack[position:], run)
            steps += following - position
            position = following
        if position >= len(stack):
            break
    return steps


def _rotation_towards(stack: Sequence[Node], steps: int) -> Op:
    return Op.RRA if steps > len(stack) // 2 else Op.RA


def _run_limit_order(stack: Sequence[Node], value: int, run: int, direction: int) -> Op:
    limit = limit_node(stack, run, direction).value
    anchor = stack[0]
    steps = distance(stack, limit)
    if (direction >= 0 and value < limit) or (direction < 0 and value > limit):
        anchor = stack[-1]
        limit = limit_node(stack, run, -direction).value
        steps = distance(stack, limit)
    if anchor.value == limit:
        return Op.PA
    return _rotation_towards(stack, steps)


def _limit_order(stack: Sequence[Node], value: int, run: int, direction: int) -> Op:
    if run != WHOLE_STACK:
        return _run_limit_order(stack, value, run, direction)
    limit = limit_node(stack, run, direction).value
    if stack[0].value == limit:
        return Op.PA
    return _rotation_towards(stack, distance(stack, limit))


def insertion_order(stack: Sequence[Node], value: int, run: int, direction: int) -> Op:
    """The instruction that readies ``stack`` to receive ``value`` in order.

    ``direction < 0`` keeps the run ascending, ``direction >= 0`` descending.
    Returns ``Op.PA`` when the number can be pushed now, otherwise ``Op.RA``
    or ``Op.RRA``; callers working on the other stack translate the result.
    """
    if len(stack) <= 1 or run_size(stack, run) == 0:
        return Op.PA
    misfit = _ascending_misfit if direction < 0 else _descending_misfit
    steps = _insert_position(stack, value, run, misfit)
    if steps == 0:
        return Op.PA
    if steps == run_size(stack, run) or steps == len(stack):
        return _limit_order(stack, value, run, direction)
    return _rotation_towards(stack, steps)