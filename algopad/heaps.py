"""Heap and ordered-set problems: greedy scoring, chair assignment, covering ranges."""

from __future__ import annotations

import heapq
from bisect import insort

_INT32_MAX = 2**31 - 1


def max_kelements(nums: list[int], k: int) -> int:
    """Maximum score after ``k`` operations taking the largest value and replacing it by ceil(v/3)."""
    heap = [-n for n in nums]
    heapq.heapify(heap)
    score = 0
    for _ in range(k):
        current = -heapq.heappop(heap)
        score += current
        heapq.heappush(heap, -((current + 2) // 3))
    return score


def _ordered_times(times: list[list[int]], target_friend: int) -> tuple[int, list[list[int]]]:
    arrival = times[target_friend][0]
    return arrival, sorted(times, key=lambda t: t[0])


def smallest_chair(times: list[list[int]], target_friend: int) -> int:
    """Chair taken by ``target_friend`` when each arrival takes the lowest free chair (heaps)."""
    target_arrival, ordered = _ordered_times(times, target_friend)
    available = list(range(len(times)))
    occupied: list[tuple[int, int]] = []
    chair = len(times) - 1
    for arrive, leave in ordered:
        while occupied and occupied[0][0] <= arrive:
            _, freed = heapq.heappop(occupied)
            heapq.heappush(available, freed)
        chair = heapq.heappop(available)
        if arrive == target_arrival:
            return chair
        heapq.heappush(occupied, (leave, chair))
    return chair


def smallest_chair_sorted(times: list[list[int]], target_friend: int) -> int:
    """Same as :func:`smallest_chair`, keeping free chairs in a sorted list."""
    target_arrival, ordered = _ordered_times(times, target_friend)
    free = list(range(len(times)))
    occupied: list[tuple[int, int]] = []
    chair = -1
    for arrive, leave in ordered:
        while occupied and occupied[0][0] <= arrive:
            _, freed = heapq.heappop(occupied)
            insort(free, freed)
        if free:
            chair = free.pop(0)
        if arrive == target_arrival:
            break
        heapq.heappush(occupied, (leave, chair))
    return chair


def smallest_range(nums: list[list[int]]) -> list[int]:
    """Smallest range containing at least one number from each sorted list (heap)."""
    heap: list[tuple[int, int, int]] = []
    highest = None
    for row, values in enumerate(nums):
        highest = values[0] if highest is None else max(highest, values[0])
        # Ties on value pop the higher row first.
        heap.append((values[0], -row, 0))
    heapq.heapify(heap)
    left, right = -(10**5), 10**5
    while heap:
        value, neg_row, col = heapq.heappop(heap)
        if highest - value < right - left:
            left, right = value, highest
        row = -neg_row
        if col + 1 == len(nums[row]):
            break
        col += 1
        value = nums[row][col]
        highest = max(highest, value)
        heapq.heappush(heap, (value, neg_row, col))
    return [left, right]


def smallest_range_sorted(nums: list[list[int]]) -> list[int]:
    """Same as :func:`smallest_range`, using an ordered set of (value, row) pairs."""
    positions = [0] * len(nums)
    best = [0, _INT32_MAX]
    window = sorted((values[0], row) for row, values in enumerate(nums))
    while window and len(window) == len(nums):
        low, row = window[0]
        high = window[-1][0]
        if high - low < best[1] - best[0]:
            best = [low, high]
        window.pop(0)
        positions[row] += 1
        if positions[row] < len(nums[row]):
            insort(window, (nums[row][positions[row]], row))
    return best