"""Queries over a stack whose nodes are grouped into numbered runs.

Run ``-1`` stands for "the whole stack" in every lookup below.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from pushswap.operations import Node, Op

WHOLE_STACK = -1


def run_size(stack: Sequence[Node], run: int) -> int:
    """Count the nodes that belong to ``run``."""
    return sum(1 for node in stack if node.run == run)


def run_start(stack: Sequence[Node], run: int) -> int:
    """Index of the first node of ``run``.

    For the whole stack this is always 0. When no node belongs to the run,
    the length of the stack is returned.
    """
    if run == WHOLE_STACK:
        return 0
    return next(
        (index for index, node in enumerate(stack) if node.run == run),
        len(stack),
    )


def limit_node(stack: Sequence[Node], run: int, direction: int) -> Optional[Node]:
    """Find the node holding the maximum (``direction >= 0``) or minimum
    (``direction < 0``) value of ``run``.

    Looking over the whole stack also tags every node below the top one as
    part of the whole-stack run. Returns None when the run has no nodes.
    """
    start = run_start(stack, run)
    if start >= len(stack):
        return None
    best = stack[start]
    for node in stack[start + 1:]:
        if run == WHOLE_STACK:
            node.run = WHOLE_STACK
        if node.run != run:
            continue
        if direction < 0 and node.value < best.value:
            best = node
        elif direction >= 0 and node.value > best.value:
            best = node
    return best


def run_sort_order(stack: Sequence[Node], run: int, direction: int) -> Op:
    """The rotation that brings the limit of ``run`` towards the top.

    Returns ``Op.NONE`` when the limit is already on top.
    """
    limit = limit_node(stack, run, direction)
    if limit is None:
        raise ValueError(f"run {run} has no numbers")
    position = distance(stack, limit.value)
    if position == 0:
        return Op.NONE
    if position <= (len(stack) - position) // 2:
        return Op.RA
    return Op.RRA


def distance(stack: Sequence[Node], value: int) -> int:
    """Position of ``value`` counted from the top, or the stack size if absent."""
    return next(
        (index for index, node in enumerate(stack) if node.value == value),
        len(stack),
    )


def next_number(stack: Sequence[Node], run: int) -> Tuple[Optional[Node], Op]:
    """Pick the next node of ``run`` to bring to the top, and the rotation for it.

    When the top node already belongs to the run (or the stack is empty) the
    top node is returned with ``Op.NONE``; otherwise the deepest node of the
    run is chosen, reached by reverse rotation.
    """
    if not stack:
        return None, Op.NONE
    if stack[0].run == run:
        return stack[0], Op.NONE
    deepest = None
    for node in stack:
        if node.run == run:
            deepest = node
    return deepest, Op.RRA


def sort_errors(stack: Sequence[Node], direction: int) -> int:
    """Count adjacent pairs out of order; 0 means sorted.

    ``direction < 0`` checks ascending order, ``direction >= 0`` descending.
    """
    values = [node.value for node in stack]
    pairs = zip(values, values[1:])
    if direction < 0:
        return sum(1 for upper, lower in pairs if upper > lower)
    return sum(1 for upper, lower in pairs if upper < lower)