"""Stack nodes, the eleven stack instructions, and the two-stack state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, List


class Op(IntEnum):
    """A stack instruction; ``NONE`` stands for "no instruction"."""

    NONE = -1
    PA = 0
    PB = 1
    SA = 2
    RRA = 3
    RA = 4
    SB = 5
    RRB = 6
    RB = 7
    SS = 8
    RRR = 9
    RR = 10

    @property
    def mnemonic(self) -> str:
        """The instruction as it is written out, e.g. ``"rra"``."""
        if self is Op.NONE:
            raise ValueError("Op.NONE has no mnemonic")
        return self.name.lower()

    def translate(self) -> Op:
        """Return the same instruction aimed at the other stack."""
        if self in (Op.SA, Op.RA, Op.RRA):
            return Op(self + 3)
        if self in (Op.SB, Op.RB, Op.RRB):
            return Op(self - 3)
        if self is Op.PA:
            return Op.PB
        if self is Op.PB:
            return Op.PA
        return self


@dataclass
class Node:
    """One number on a stack, tagged with the run it belongs to."""

    value: int
    run: int = -1


Stack = List[Node]


def swap(stack: Stack) -> bool:
    """Exchange the values of the two top nodes; runs stay in place."""
    if len(stack) < 2:
        return False
    stack[0].value, stack[1].value = stack[1].value, stack[0].value
    return True


def push(source: Stack, target: Stack) -> bool:
    """Move the top node of ``source`` onto the top of ``target``."""
    if not source:
        return False
    target.insert(0, source.pop(0))
    return True


def rotate(stack: Stack) -> bool:
    """Move the top node to the bottom."""
    if len(stack) < 2:
        return False
    stack.append(stack.pop(0))
    return True


def reverse_rotate(stack: Stack) -> bool:
    """Move the bottom node to the top."""
    if len(stack) < 2:
        return False
    stack.insert(0, stack.pop())
    return True


def _both(action: Callable[[Stack], bool], first: Stack, second: Stack) -> bool:
    done_first = action(first)
    done_second = action(second)
    return done_first or done_second


class Stacks:
    """The pair of stacks A and B, recording every instruction that took effect."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a: Stack = [Node(value) for value in values]
        self.b: Stack = []
        self.applied: List[Op] = []

    @property
    def a_values(self) -> List[int]:
        return [node.value for node in self.a]

    @property
    def b_values(self) -> List[int]:
        return [node.value for node in self.b]

    def apply(self, op: int) -> bool:
        """Execute ``op``; return whether it changed anything."""
        try:
            op = Op(op)
        except ValueError:
            return False
        actions = {
            Op.SA: lambda: swap(self.a),
            Op.SB: lambda: swap(self.b),
            Op.SS: lambda: _both(swap, self.a, self.b),
            Op.PA: lambda: push(self.b, self.a),
            Op.PB: lambda: push(self.a, self.b),
            Op.RA: lambda: rotate(self.a),
            Op.RB: lambda: rotate(self.b),
            Op.RR: lambda: _both(rotate, self.a, self.b),
            Op.RRA: lambda: reverse_rotate(self.a),
            Op.RRB: lambda: reverse_rotate(self.b),
            Op.RRR: lambda: _both(reverse_rotate, self.a, self.b),
        }
        action = actions.get(op)
        if action is None or not action():
            return False
        self.applied.append(op)
        return True