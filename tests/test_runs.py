import pytest

from pushswap.operations import Node, Op, Stacks
from pushswap.runs import (
    distance,
    limit_node,
    next_number,
    run_size,
    run_sort_order,
    run_start,
    sort_errors,
)


def make_stack(values, runs=None):
    runs = runs if runs is not None else [-1] * len(values)
    return [Node(value, run) for value, run in zip(values, runs)]


def test_run_sizes_partition_the_stack():
    runs = [0, 0, 1, -1, 1, 2]
    stack = make_stack([4, 8, 15, 16, 23, 42], runs)
    assert sum(run_size(stack, run) for run in set(runs)) == len(stack)


def test_run_size_of_missing_run_is_zero():
    stack = make_stack([1, 2, 3], [0, 0, 0])
    assert run_size(stack, 7) == 0


def test_run_start_points_at_first_member():
    stack = make_stack([9, 8, 7, 6], [0, 0, 1, 1])
    index = run_start(stack, 1)
    assert stack[index].run == 1
    assert all(node.run != 1 for node in stack[:index])


def test_run_start_whole_stack_is_top():
    stack = make_stack([9, 8, 7], [3, 3, 3])
    assert run_start(stack, -1) == 0


def test_run_start_missing_run_is_stack_length():
    stack = make_stack([9, 8, 7], [0, 0, 0])
    assert run_start(stack, 5) == len(stack)


@pytest.mark.parametrize("values", [[5, 2, 9, -3, 7], [1], [10, 20, 30]])
def test_limit_node_whole_stack(values):
    stack = make_stack(values)
    assert limit_node(stack, -1, 1).value == max(values)
    assert limit_node(stack, -1, -1).value == min(values)


def test_limit_node_within_run():
    values = [50, 3, 8, 1, 99]
    runs = [1, 0, 0, 0, 1]
    stack = make_stack(values, runs)
    in_run = [v for v, r in zip(values, runs) if r == 0]
    assert limit_node(stack, 0, 1).value == max(in_run)
    assert limit_node(stack, 0, -1).value == min(in_run)


def test_limit_node_missing_run_is_none():
    stack = make_stack([1, 2], [0, 0])
    assert limit_node(stack, 4, 1) is None


def test_limit_node_whole_stack_retags_nodes_below_top():
    stack = make_stack([3, 1, 2], [5, 6, 7])
    limit_node(stack, -1, 1)
    assert stack[0].run == 5
    assert all(node.run == -1 for node in stack[1:])


def test_run_sort_order_limit_on_top():
    stack = make_stack([1, 5, 3])
    assert run_sort_order(stack, -1, -1) == Op.NONE


@pytest.mark.parametrize("values", [[3, 1, 4, 5], [3, 4, 5, 1], [6, 7, 8, 9, 2, 5]])
def test_run_sort_order_brings_minimum_up(values):
    stacks = Stacks(values)
    for _ in range(len(values)):
        order = run_sort_order(stacks.a, -1, -1)
        if order == Op.NONE:
            break
        stacks.apply(order)
    assert stacks.a_values[0] == min(values)


def test_run_sort_order_missing_run_raises():
    stack = make_stack([1, 2], [0, 0])
    with pytest.raises(ValueError):
        run_sort_order(stack, 3, 1)


def test_distance_matches_position():
    values = [7, 3, 11, 5]
    stack = make_stack(values)
    for position, value in enumerate(values):
        assert distance(stack, value) == position


def test_distance_missing_value_is_stack_size():
    stack = make_stack([7, 3])
    assert distance(stack, 100) == len(stack)


def test_next_number_top_in_run():
    stack = make_stack([1, 2, 3], [1, 0, 1])
    node, order = next_number(stack, 1)
    assert node is stack[0]
    assert order == Op.NONE


def test_next_number_picks_deepest_member():
    stack = make_stack([1, 2, 3, 4, 5], [0, 1, 0, 1, 0])
    node, order = next_number(stack, 1)
    assert node is stack[3]
    assert order == Op.RRA


def test_next_number_empty_stack():
    node, order = next_number([], 1)
    assert node is None
    assert order == Op.NONE


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [-5, 0, 12], [42]])
def test_sort_errors_ascending(values):
    assert sort_errors(make_stack(values), -1) == 0
    assert sort_errors(make_stack(values[::-1]), 1) == 0
    assert sort_errors(make_stack(values[::-1]), -1) == len(values) - 1


def test_sort_errors_empty_is_sorted():
    assert sort_errors([], 1) == 0