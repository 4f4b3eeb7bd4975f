import pytest

from algopad.sliding import (
    can_jump,
    can_jump_backward,
    can_jump_dfs,
    num_subarray_product_less_than_k,
)


@pytest.mark.parametrize(
    "nums, k, expected",
    [
        ([10, 5, 2, 6], 100, 8),
        ([1, 2, 3], 0, 0),
        ([1, 1, 1], 1, 0),
        ([1, 1, 1], 2, 6),
    ],
)
def test_num_subarray_product_less_than_k(nums, k, expected):
    assert num_subarray_product_less_than_k(nums, k) == expected


def test_can_jump_backward_reachable():
    assert can_jump_backward([2, 3, 1, 1, 4]) is True


def test_can_jump_dfs_unreachable():
    assert can_jump_dfs([3, 2, 1, 0, 4]) is False


def test_can_jump_dfs_two_elements():
    assert can_jump_dfs([1, 2]) is True


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([2, 3, 1, 1, 4], True),
        ([3, 2, 1, 0, 4], False),
        ([1, 2], True),
        ([0], True),
        ([0, 1], False),
        ([2, 0, 0], True),
    ],
)
@pytest.mark.parametrize("solver", [can_jump, can_jump_backward, can_jump_dfs])
def test_all_jump_solvers_agree(solver, nums, expected):
    assert solver(nums) is expected


@pytest.mark.parametrize("solver", [can_jump_backward, can_jump_dfs])
def test_empty_input_raises(solver):
    with pytest.raises(ValueError):
        solver([])