"""Sliding-window and reachability problems."""

from __future__ import annotations


def num_subarray_product_less_than_k(nums: list[int], k: int) -> int:
    """Number of contiguous subarrays of positive ints with product strictly below ``k``."""
    if k <= 1:
        return 0
    count = 0
    product = 1
    left = 0
    for right, value in enumerate(nums, start=1):
        product *= value
        while product >= k:
            product //= nums[left]
            left += 1
        count += right - left
    return count


def can_jump(nums: list[int]) -> bool:
    """Whether the last index is reachable, tracking the farthest reach going forward."""
    reach = 0
    last = len(nums) - 1
    for i, step in enumerate(nums):
        if reach < i:
            return False
        reach = max(reach, i + step)
        if reach >= last:
            return True
    return True


def can_jump_backward(nums: list[int]) -> bool:
    """Whether the last index is reachable, scanning backwards for the leftmost good index."""
    if not nums:
        raise ValueError("nums must be non-empty")
    smallest = len(nums) - 1
    for i in range(len(nums) - 2, -1, -1):
        if i + nums[i] >= smallest:
            smallest = i
    return smallest == 0


def can_jump_dfs(nums: list[int]) -> bool:
    """Whether the last index is reachable, by depth-first search over jumps."""
    if not nums:
        raise ValueError("nums must be non-empty")
    last = len(nums) - 1
    visited = [False] * last
    stack = [0]
    while stack:
        i = stack.pop()
        if i >= last:
            return True
        if visited[i]:
            continue
        visited[i] = True
        stack.extend(i + j for j in range(nums[i], 0, -1))
    return False