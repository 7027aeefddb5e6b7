import random

import pytest

from pushswap.operations import Operation, Piles
from pushswap.solver import (
    BACKWARD,
    FORWARD,
    Move,
    clear_pile_a,
    estimate_rotate,
    execute_move,
    main,
    path_to,
    solve,
    unsorted_values,
    value_searched_in_a,
)
from pushswap.stack import Stack


def _circular_descents(values):
    values = list(values)
    if not values:
        return 0
    return sum(1 for x, y in zip(values, values[1:] + values[:1]) if x > y)


def _replay(values, ops):
    piles = Piles(values)
    for op in ops:
        piles.apply(op)
    return piles


def _random_cases():
    rng = random.Random(42)
    cases = []
    for size in (2, 3, 4, 5, 7, 10, 16, 25):
        for _ in range(3):
            cases.append(rng.sample(range(-50, 50), size))
    return cases


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4]) == []


@pytest.mark.parametrize(
    "values",
    [[2, 1], [3, 2, 1], [2, 3, 1], [1, 3, 2], [5, 4, 3, 2, 1], [4, 1, 5, 2, 3]]
    + _random_cases(),
)
def test_solve_sorts(values):
    piles = _replay(values, solve(values))
    assert list(piles.a) == sorted(values)
    assert len(piles.b) == 0


def test_solve_rejects_duplicates():
    with pytest.raises(ValueError):
        solve([3, 1, 3])


@pytest.mark.parametrize("values", _random_cases())
def test_unsorted_values_leaves_a_circular_run(values):
    garbage = unsorted_values(Stack(values))
    assert set(garbage) <= set(values)
    assert min(values) not in garbage
    kept = [v for v in values if v not in garbage]
    assert _circular_descents(kept) <= 1


def test_unsorted_values_of_empty_stack():
    with pytest.raises(ValueError):
        unsorted_values(Stack())


@pytest.mark.parametrize("values", _random_cases())
def test_clear_pile_a_moves_garbage(values):
    piles = Piles(values)
    ops = clear_pile_a(piles, unsorted_values(piles.a))
    assert set(ops) <= {Operation.SA, Operation.PB, Operation.RA}
    assert ops.count(Operation.PB) == len(piles.b)
    assert len(piles.a) + len(piles.b) == len(values)
    assert _circular_descents(piles.a) <= 1
    assert sorted(list(piles.a) + list(piles.b)) == sorted(values)


@pytest.mark.parametrize("searched, expected", [(4, 5), (2, 3), (6, 1)])
def test_value_searched_in_a(searched, expected):
    assert value_searched_in_a(Stack([3, 5, 1]), searched) == expected


def test_value_searched_in_a_with_negative_values():
    assert value_searched_in_a(Stack([-5, -3, -1]), 0) == -5


def test_value_searched_in_a_below_minimum():
    with pytest.raises(ValueError):
        value_searched_in_a(Stack([3, 5, 4]), 1)


def test_value_searched_in_empty_stack():
    with pytest.raises(ValueError):
        value_searched_in_a(Stack(), 1)


@pytest.mark.parametrize("value", [10, 20, 30, 40, 50, 60, 70])
def test_path_to_brings_value_to_top(value):
    stack = Stack([10, 20, 30, 40, 50, 60, 70])
    values = list(stack)
    direction, steps = path_to(stack, value)
    index = values.index(value)
    assert steps == min(index, len(values) - index)
    for _ in range(steps):
        if direction == FORWARD:
            stack.rotate()
        else:
            stack.reverse_rotate()
    assert stack.top() == value


def test_path_to_prefers_reverse_on_tie():
    assert path_to(Stack([1, 2, 3, 4]), 3)[0] == BACKWARD


def test_path_to_missing_value():
    with pytest.raises(ValueError):
        path_to(Stack([1, 2]), 9)


def test_estimate_rotate_inserts_in_order():
    piles = Piles([1, 4, 8])
    for value in (6, 2, 9):
        piles.b.push_back(value)
    ops = estimate_rotate(piles)
    assert ops[-1] is Operation.PA
    assert len(piles.b) == 2
    assert _circular_descents(piles.a) <= 1


def test_execute_move_shares_rotations():
    piles = Piles([1, 2, 3])
    piles.b.push_back(7)
    piles.b.push_back(8)
    move = Move.between(FORWARD, 2, FORWARD, 1)
    ops = execute_move(move, piles)
    assert ops == [Operation.RR, Operation.RA, Operation.PA]
    assert len(piles.b) == 1
    assert move.total == max(move.moves_a, move.moves_b)


def test_main_prints_sorting_operations(capsys):
    values = [3, 1, 4, 5, 2]
    assert main([str(v) for v in values]) == 0
    lines = capsys.readouterr().out.splitlines()
    piles = _replay(values, lines)
    assert list(piles.a) == sorted(values)
    assert len(piles.b) == 0


def test_main_sorted_input(capsys):
    assert main(["1", "2"]) == 1
    assert capsys.readouterr().out == ""


def test_main_rejects_duplicates(capsys):
    assert main(["1", "1"]) == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_rejects_non_numbers(capsys):
    assert main(["1", "x"]) == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""