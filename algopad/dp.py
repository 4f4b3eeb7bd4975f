"""Dynamic programming problems."""

from __future__ import annotations

from bisect import bisect_right


def grid_game(grid: list[list[int]]) -> int:
    """Points the second robot collects when the first robot plays to minimise them."""
    top = sum(grid[0])
    bottom = 0
    result: int | None = None
    for upper, lower in zip(grid[0], grid[1]):
        top -= upper
        candidate = max(top, bottom)
        result = candidate if result is None else min(result, candidate)
        bottom += lower
    if result is None:
        raise ValueError("grid must have at least one column")
    return result


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    if len(text1) < len(text2):
        text1, text2 = text2, text1
    row = [0] * (len(text2) + 1)
    for a in text1:
        diagonal = 0
        for j, b in enumerate(text2):
            above = row[j + 1]
            row[j + 1] = diagonal + 1 if a == b else max(row[j], above)
            diagonal = above
    return row[-1]


def job_scheduling(start_time: list[int], end_time: list[int], profit: list[int]) -> int:
    """Maximum profit from non-overlapping jobs, via an ordered end-time map."""
    jobs = sorted(zip(start_time, end_time, profit), key=lambda job: job[1])
    ends = [0]
    best = [0]
    for start, end, gain in jobs:
        base = best[bisect_right(ends, start) - 1]
        total = base + gain
        if total > best[-1]:
            if ends[-1] == end:
                best[-1] = total
            else:
                ends.append(end)
                best.append(total)
    return best[-1]


def job_scheduling_dp(start_time: list[int], end_time: list[int], profit: list[int]) -> int:
    """Maximum profit from non-overlapping jobs, via DP and binary search on end times."""
    jobs = sorted(zip(end_time, start_time, profit), key=lambda job: job[0])
    ends = [end for end, _, _ in jobs]
    dp = [0] * (len(jobs) + 1)
    for i, (_, start, gain) in enumerate(jobs, start=1):
        j = bisect_right(ends, start, 0, i - 1)
        dp[i] = max(dp[i - 1], dp[j] + gain)
    return dp[-1]


def max_sub_array(nums: list[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane)."""
    if not nums:
        raise ValueError("nums must be non-empty")
    here = 0
    best = nums[0]
    for n in nums:
        here = max(here + n, n)
        best = max(best, here)
    return best


def minimum_total_distance(robot: list[int], factory: list[list[int]]) -> int:
    """Minimum total distance for robots to reach factories with limited capacity."""
    robots = sorted(robot)
    factories = sorted(factory)
    dp = [10**12] * (len(robots) + 1)
    dp[0] = 0
    for position, limit in factories:
        for _ in range(limit):
            for i in reversed(range(len(robots))):
                dp[i + 1] = min(dp[i + 1], abs(robots[i] - position) + dp[i])
    return dp[-1]


def is_match(s: str, p: str) -> bool:
    """Whether pattern ``p`` (with ``.`` and ``*``) matches all of ``s``."""
    n, m = len(s), len(p)
    dp = [[False] * (m + 1) for _ in range(n + 1)]
    dp[n][m] = True
    for i in range(n, -1, -1):
        for j in range(m - 1, -1, -1):
            first = i < n and p[j] in (s[i], ".")
            if j + 1 < m and p[j + 1] == "*":
                dp[i][j] = dp[i][j + 2] or (first and dp[i + 1][j])
            else:
                dp[i][j] = first and dp[i + 1][j + 1]
    return dp[0][0]