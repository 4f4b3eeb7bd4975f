import pytest

from algopad.dp import (
    grid_game,
    is_match,
    job_scheduling,
    job_scheduling_dp,
    longest_common_subsequence,
    max_sub_array,
    minimum_total_distance,
)


def test_grid_game_example():
    assert grid_game([[2, 5, 4], [1, 5, 1]]) == 4


def test_grid_game_single_column():
    assert grid_game([[7], [9]]) == 0


def test_lcs_source_case():
    assert longest_common_subsequence("bsbininm", "jmjkbkjkv") == 1


def test_lcs_symmetric_and_bounded():
    a, b = "abcde", "ace"
    assert longest_common_subsequence(a, b) == longest_common_subsequence(b, a)
    assert longest_common_subsequence(a, b) == len(b)
    assert longest_common_subsequence(a, a) == len(a)
    assert longest_common_subsequence("abc", "xyz") == 0


JOB_CASES = [
    ([1, 2, 3, 3], [3, 4, 5, 6], [50, 10, 40, 70], 120),
    ([1, 2, 3, 4, 6], [3, 5, 10, 6, 9], [20, 20, 100, 70, 60], 150),
    ([1, 1, 1], [2, 3, 4], [5, 6, 4], 6),
    ([1], [2], [50], 50),
    ([1, 3, 5], [2, 4, 6], [10, 20, 30], 60),
    ([1, 1, 1], [10, 10, 10], [5, 6, 4], 6),
    ([1, 2, 3], [2, 3, 4], [10, 20, 30], 60),
    ([1, 2, 4], [3, 5, 6], [60, 10, 70], 130),
    ([1, 1_000_000_000], [1_000_000_000, 1_000_000_001], [100, 200], 300),
]


@pytest.mark.parametrize("start, end, profit, expected", JOB_CASES)
def test_job_scheduling_both(start, end, profit, expected):
    assert job_scheduling(list(start), list(end), list(profit)) == expected
    assert job_scheduling_dp(list(start), list(end), list(profit)) == expected


def test_max_sub_array():
    assert max_sub_array([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6
    assert max_sub_array([-3, -1, -2]) == -1


def test_max_sub_array_empty_raises():
    with pytest.raises(ValueError):
        max_sub_array([])


def test_minimum_total_distance_examples():
    assert minimum_total_distance([0, 4, 6], [[2, 2], [6, 2]]) == 4
    assert minimum_total_distance([1, -1], [[-2, 1], [2, 1]]) == 2


def test_minimum_total_distance_robot_on_factory():
    assert minimum_total_distance([5], [[5, 1]]) == 0


@pytest.mark.parametrize(
    "s, p, expected",
    [
        ("aa", "a", False),
        ("aa", "a*", True),
        ("ab", ".*", True),
        ("aab", "c*a*b", True),
        ("mississippi", "mis*is*p*.", False),
        ("", "a*", True),
        ("", "", True),
    ],
)
def test_is_match(s, p, expected):
    assert is_match(s, p) is expected