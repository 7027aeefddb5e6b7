"""Computing a sequence of push_swap operations that sorts stack a."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pushswap.operations import Operation, Piles, fast_rotate
from pushswap.parse import ParseError, parse_args
from pushswap.stack import Stack

FORWARD = 1
BACKWARD = -1
NONE = 0


@dataclass(frozen=True)
class Move:
    """Rotations to make on each stack before pushing the top of b onto a.

    A direction is FORWARD (rotate), BACKWARD (reverse rotate) or NONE.
    """

    dir_a: int = NONE
    dir_b: int = NONE
    moves_a: int = 0
    moves_b: int = 0
    total: int = 0

    @classmethod
    def between(cls, dir_a: int, moves_a: int, dir_b: int, moves_b: int) -> Move:
        """A move whose total counts shared rotations only once."""
        if dir_a == dir_b:
            total = max(moves_a, moves_b)
        else:
            total = moves_a + moves_b
        return cls(dir_a, dir_b, moves_a, moves_b, total)


def _left_behind(values: Sequence[int], start: int) -> list[int]:
    """Values not on the falling run met walking backwards from *start*."""
    count = len(values)
    lowest = values[start]
    garbage = []
    for step in range(count):
        value = values[(start - step) % count]
        if value <= lowest:
            lowest = value
        else:
            garbage.append(value)
    return garbage


def unsorted_values(stack: Stack) -> list[int]:
    """Values to move off stack a so that the rest is in circular order."""
    values = list(stack)
    if not values:
        raise ValueError("no values in an empty stack")
    count = len(values)
    best_size = count
    best_index = 0
    for index in range(count + 1):
        size = len(_left_behind(values, index % count))
        if size < best_size:
            best_size = size
            best_index = index
    return _left_behind(values, (best_index + 1) % count)


def _swap_improves(piles: Piles, garbage: Sequence[int]) -> list[int] | None:
    """Swap the top of a if that leaves fewer values to move; undo it otherwise."""
    piles.a.swap()
    candidate = unsorted_values(piles.a)
    if len(candidate) < len(garbage):
        return candidate
    piles.a.swap()
    return None


def clear_pile_a(piles: Piles, garbage: Iterable[int]) -> list[Operation]:
    """Push every value of *garbage* onto stack b; return the operations made."""
    pending = list(garbage)
    ops: list[Operation] = []
    while pending:
        better = _swap_improves(piles, pending)
        if better is not None:
            pending = better
            ops.append(Operation.SA)
        elif piles.a.top() in pending:
            pending.remove(piles.a.top())
            piles.apply(Operation.PB)
            ops.append(Operation.PB)
        else:
            piles.apply(Operation.RA)
            ops.append(Operation.RA)
    return ops


def value_searched_in_a(stack: Stack, searched: int) -> int:
    """The value of a that *searched* must sit just above once pushed back.

    That is the next larger value met after a smaller one, walking down from
    the top; the minimum when *searched* is larger than everything.
    """
    values = list(stack)
    if not values:
        raise ValueError("no place in an empty stack")
    if searched > max(values):
        return min(values)
    count = len(values)
    index = 0
    for _ in range(count):
        if values[index] <= searched:
            break
        index = (index + 1) % count
    else:
        raise ValueError(f"no place for {searched} in the stack")
    for _ in range(count):
        if values[index] >= searched:
            return values[index]
        index = (index + 1) % count
    raise ValueError(f"no place for {searched} in the stack")


def path_to(stack: Stack, value: int) -> tuple[int, int]:
    """Direction and number of rotations that bring *value* to the top.

    Reverse rotation wins a tie.
    """
    values = list(stack)
    try:
        index = values.index(value)
    except ValueError:
        raise ValueError(f"{value} is not in the stack") from None
    back = (len(values) - index) % len(values)
    if index < back:
        return FORWARD, index
    return BACKWARD, back


def estimate_rotate(piles: Piles) -> list[Operation]:
    """Push back onto a the value of b that needs the fewest rotations."""
    best = Move(
        NONE, NONE, len(piles.a), len(piles.b), len(piles.a) + len(piles.b)
    )
    for value in list(piles.b):
        dir_b, moves_b = path_to(piles.b, value)
        dir_a, moves_a = path_to(piles.a, value_searched_in_a(piles.a, value))
        candidate = Move.between(dir_a, moves_a, dir_b, moves_b)
        if candidate.total < best.total:
            best = candidate
    return execute_move(best, piles)


def execute_move(move: Move, piles: Piles) -> list[Operation]:
    """Make the rotations of *move*, then push the top of b onto a."""
    ops: list[Operation] = []

    def run(op: Operation) -> None:
        piles.apply(op)
        ops.append(op)

    moves_a, moves_b = move.moves_a, move.moves_b
    if moves_a > 0 and moves_b > 0 and move.dir_a == move.dir_b:
        while moves_a and moves_b:
            if move.dir_a == FORWARD:
                run(Operation.RR)
            elif move.dir_a == BACKWARD:
                run(Operation.RRR)
            moves_a -= 1
            moves_b -= 1
    for _ in range(moves_a):
        if move.dir_a == FORWARD:
            run(Operation.RA)
        elif move.dir_a == BACKWARD:
            run(Operation.RRA)
    for _ in range(moves_b):
        if move.dir_b == FORWARD:
            run(Operation.RB)
        elif move.dir_b == BACKWARD:
            run(Operation.RRB)
    run(Operation.PA)
    return ops


def solve(values: Iterable[int]) -> list[Operation]:
    """Operations that sort *values* on stack a, smallest on top."""
    piles = Piles(values)
    if piles.a.is_sorted():
        return []
    if piles.a.has_duplicate():
        raise ValueError("values must be distinct")
    ops = clear_pile_a(piles, unsorted_values(piles.a))
    while len(piles.b):
        ops.extend(estimate_rotate(piles))
    ops.extend(fast_rotate(piles.a, piles.a.min_value()))
    return ops


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the integers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except ParseError:
        sys.stdout.write("Error\n")
        return 0
    if Stack(values).is_sorted():
        return 1
    for op in solve(values):
        sys.stdout.write(op.value + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())