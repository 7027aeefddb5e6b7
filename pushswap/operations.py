"""The push_swap operations on a pair of stacks."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pushswap.stack import Stack


class Operation(str, Enum):
    """One instruction that acts on stack a, stack b or both."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _push(dst: Stack, src: Stack) -> None:
    if len(src):
        dst.push_front(src.pop_front())


class Piles:
    """Stack a, filled with the given values, and an empty stack b."""

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self.a = Stack(values)
        self.b = Stack()

    def __repr__(self) -> str:
        return f"Piles(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, op: Operation | str) -> None:
        """Carry out one operation, given as an Operation or its name."""
        op = Operation(op)
        a, b = self.a, self.b
        if op is Operation.SA:
            a.swap()
        elif op is Operation.SB:
            b.swap()
        elif op is Operation.SS:
            a.swap()
            b.swap()
        elif op is Operation.PA:
            _push(a, b)
        elif op is Operation.PB:
            _push(b, a)
        elif op is Operation.RA:
            a.rotate()
        elif op is Operation.RB:
            b.rotate()
        elif op is Operation.RR:
            a.rotate()
            b.rotate()
        elif op is Operation.RRA:
            a.reverse_rotate()
        elif op is Operation.RRB:
            b.reverse_rotate()
        elif op is Operation.RRR:
            a.reverse_rotate()
            b.reverse_rotate()


def parse_operation(line: str) -> Operation:
    """The operation named exactly by *line*."""
    try:
        return Operation(line)
    except ValueError:
        raise ValueError(f"unknown operation {line!r}") from None


def best_rotation(stack: Stack, search: int) -> tuple[int, bool]:
    """Fewest rotations that bring *search* to the top.

    Returns the number of steps and whether they are reverse rotations;
    plain rotations win a tie.
    """
    values = list(stack)
    try:
        index = values.index(search)
    except ValueError:
        raise ValueError(f"{search} is not in the stack") from None
    backward = (len(values) - index) % len(values)
    if backward < index:
        return backward, True
    return index, False


def fast_rotate(stack: Stack, search: int) -> list[Operation]:
    """Rotate *search* to the top of stack a the short way; return the moves made."""
    steps, reverse = best_rotation(stack, search)
    moves = []
    for _ in range(steps):
        if reverse:
            stack.reverse_rotate()
            moves.append(Operation.RRA)
        else:
            stack.rotate()
            moves.append(Operation.RA)
    return moves