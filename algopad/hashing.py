"""Hash-based problems: remainder pairing, unique binary strings and two-sum."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterator
from itertools import product


def can_arrange(arr: list[int], k: int) -> bool:
    """Whether ``arr`` splits into pairs whose sums are all divisible by ``k``."""
    remainders = Counter(a % k for a in arr)
    for rem in (a % k for a in arr):
        if rem == 0:
            if remainders[rem] % 2 == 1:
                return False
        elif remainders[rem] != remainders[k - rem]:
            return False
    return True


def find_different_binary_string(nums: list[str]) -> str:
    """A binary string of the same length not in ``nums``, by flipping the diagonal."""
    return "".join("1" if s[i] == "0" else "0" for i, s in enumerate(nums))


def find_different_binary_string_set(nums: list[str]) -> str:
    """A binary string of the same length not in ``nums``, by enumerating candidates."""
    present = set(nums)
    for bits in product("01", repeat=len(nums)):
        candidate = "".join(bits)
        if candidate not in present:
            return candidate
    raise ValueError("every binary string of this length is present")


def two_sum(nums: list[int], target: int) -> list[int]:
    """Indices of two elements summing to ``target``."""
    seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        other = seen.get(target - value)
        if other is not None:
            return [other, i]
        seen[value] = i
    raise ValueError("no two elements sum to the target")


def two_sum_pairs(nums: list[int], target: int) -> Iterator[tuple[int, int]]:
    """Yield ``(value, partner)`` for every pair of positions summing to ``target``.

    Each pair is produced when its later element is reached, once for each
    earlier occurrence of the partner value.
    """
    counts: defaultdict[int, int] = defaultdict(int)
    for value in nums:
        partner = target - value
        for _ in range(counts.get(partner, 0)):
            yield value, partner
        counts[value] += 1