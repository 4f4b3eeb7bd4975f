"""Array and matrix problems: counting submatrices, binary search on answers, voting."""

from __future__ import annotations

import random
from collections import Counter


def number_of_submatrices(grid: list[list[str]]) -> int:
    """Count top-left-anchored submatrices with equal, non-zero counts of 'X' and 'Y'."""
    width = len(grid[0])
    col_x = [0] * width
    col_y = [0] * width
    result = 0
    for row in grid:
        row_x = row_y = 0
        for j, cell in enumerate(row):
            if cell == "X":
                col_x[j] += 1
            elif cell == "Y":
                col_y[j] += 1
            row_x += col_x[j]
            row_y += col_y[j]
            if row_x == row_y and row_x > 0:
                result += 1
    return result


def count_submatrices(grid: list[list[int]], k: int) -> int:
    """Count top-left-anchored submatrices whose sum is at most ``k``."""
    col_sum = [0] * len(grid[0])
    result = 0
    for row in grid:
        cur = 0
        for j, value in enumerate(row):
            col_sum[j] += value
            cur += col_sum[j]
            if cur > k:
                break
            result += 1
    return result


def _pieces(sweetness: list[int], minimum: int) -> int:
    total = count = 0
    for s in sweetness:
        total += s
        if total >= minimum:
            total = 0
            count += 1
    return count


def maximize_sweetness(sweetness: list[int], k: int) -> int:
    """Largest minimum piece sweetness when cutting the bar into ``k + 1`` pieces."""
    lo, hi = 0, sum(sweetness)
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if _pieces(sweetness, mid) < k + 1:
            hi = mid
        else:
            lo = mid + 1
    return lo - 1


def min_eating_speed(piles: list[int], h: int) -> int:
    """Smallest eating speed that finishes all (positive) piles within ``h`` hours."""
    if not piles:
        raise ValueError("piles must be non-empty")

    def feasible(speed: int) -> bool:
        return sum((p - 1) // speed + 1 for p in piles) <= h

    lo, hi = 1, max(piles)
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if feasible(mid):
            hi = mid
        else:
            lo = mid + 1
    return lo


def largest_submatrix(matrix: list[list[int]]) -> int:
    """Largest all-ones area after freely reordering columns (sorting heights)."""
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [h + 1 if cell == 1 else 0 for h, cell in zip(heights, row)]
        for width, h in enumerate(sorted(heights, reverse=True), start=1):
            if h == 0:
                break
            best = max(best, h * width)
    return best


def largest_submatrix_counting(matrix: list[list[int]]) -> int:
    """Same as :func:`largest_submatrix`, keeping columns ordered by height without sorting."""
    prev: list[tuple[int, int]] = []
    best = 0
    for row in matrix:
        cur = [(h + 1, col) for h, col in prev if row[col] == 1]
        seen = {col for _, col in cur}
        cur.extend(
            (1, col) for col, cell in enumerate(row) if cell == 1 and col not in seen
        )
        for width, (h, _) in enumerate(cur, start=1):
            best = max(best, h * width)
        prev = cur
    return best


def majority_element_bmv(nums: list[int]) -> int:
    """Majority element by Boyer-Moore voting."""
    candidate, count = 0, 0
    for n in nums:
        if count == 0:
            candidate = n
        count += 1 if candidate == n else -1
    return candidate


def majority_element_rand(nums: list[int]) -> int:
    """Majority element by sampling random candidates until one wins."""
    if not nums:
        raise ValueError("nums must be non-empty")
    while True:
        candidate = random.choice(nums)
        if nums.count(candidate) > len(nums) // 2:
            return candidate


def single_non_duplicate(nums: list[int]) -> int:
    """The one element that appears once in a sorted list where all others appear twice."""
    if not nums:
        raise ValueError("nums must be non-empty")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if nums[mid] != nums[mid ^ 1]:
            hi = mid
        else:
            lo = mid + 1
    return nums[lo]


def top_k_frequent(nums: list[int], k: int) -> list[int]:
    """The ``k`` most frequent values, in ascending order of frequency."""
    counts = Counter(nums)
    buckets: list[list[int]] = [[] for _ in range(len(nums) + 1)]
    for value, cnt in counts.items():
        buckets[cnt].append(value)
    flat = [value for bucket in buckets for value in bucket]
    return flat[len(counts) - k:]


def valid_word_abbreviation(word: str, abbr: str) -> bool:
    """Whether ``abbr`` abbreviates ``word`` (numbers skip letters; no leading zeros)."""
    i = j = skip = 0
    n, m = len(word), len(abbr)
    while i < n and j < m:
        ch = abbr[j]
        if ch.isdecimal():
            if ch == "0" and skip == 0:
                return False
            skip = skip * 10 + int(ch)
        else:
            i += skip
            skip = 0
            if i >= n or word[i] != ch:
                return False
            i += 1
        j += 1
    return i + skip == n and j == m