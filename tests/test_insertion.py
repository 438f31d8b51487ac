import pytest

from pushswap.insertion import insertion_order
from pushswap.operations import Node, Op, reverse_rotate, rotate


def is_rotation(values, expected):
    return any(values == expected[k:] + expected[:k] for k in range(len(expected)))


def insert_with_orders(values, value, run, direction):
    stack = [Node(v, run) for v in values]
    for _ in range(3 * len(values) + 2):
        order = insertion_order(stack, value, run, direction)
        if order == Op.PA:
            stack.insert(0, Node(value, run))
            return [node.value for node in stack]
        if order == Op.RA:
            rotate(stack)
        elif order == Op.RRA:
            reverse_rotate(stack)
        else:
            raise AssertionError(f"unexpected order {order!r}")
    raise AssertionError("no push after many rotations")


ASCENDING = [[1, 3, 5, 7], [5, 7, 1, 3], [3, 5, 7, 1]]
DESCENDING = [[7, 5, 3, 1], [3, 1, 7, 5], [5, 3, 1, 7]]


@pytest.mark.parametrize("run", [-1, 0])
@pytest.mark.parametrize("values", ASCENDING)
@pytest.mark.parametrize("value", [0, 4, 9])
def test_ascending_insertion_keeps_rotated_order(values, value, run):
    result = insert_with_orders(values, value, run, -1)
    assert sorted(result) == sorted(values + [value])
    assert is_rotation(result, sorted(values + [value]))


@pytest.mark.parametrize("run", [-1, 0])
@pytest.mark.parametrize("values", DESCENDING)
@pytest.mark.parametrize("value", [0, 4, 9])
def test_descending_insertion_keeps_rotated_order(values, value, run):
    result = insert_with_orders(values, value, run, 1)
    expected = sorted(values + [value], reverse=True)
    assert sorted(result) == sorted(values + [value])
    assert is_rotation(result, expected)


def test_empty_destination_pushes_directly():
    assert insertion_order([], 5, -1, 1) == Op.PA


def test_single_node_destination_pushes_directly():
    assert insertion_order([Node(3)], 5, -1, -1) == Op.PA


def test_missing_run_pushes_directly():
    stack = [Node(v, 0) for v in (1, 2, 3)]
    assert insertion_order(stack, 5, 4, -1) == Op.PA


def test_value_fitting_at_top_needs_no_rotation():
    stack = [Node(v) for v in (5, 7, 1, 3)]
    assert insertion_order(stack, 4, -1, -1) == Op.PA