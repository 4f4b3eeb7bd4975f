"""Bit manipulation problems: a doubling string game, no-adjacent-ones counting, bit splicing."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def kth_character(k: int, operations: list[int]) -> str:
    """The ``k``-th (1-based) letter after applying the doubling operations to ``"a"``.

    Operation 0 appends a copy of the word; operation 1 appends a copy with
    every letter advanced by one (``'z'`` wraps to ``'a'``).
    """
    index = k - 1
    shifts = sum(
        operations[bit]
        for bit in reversed(range(index.bit_length()))
        if (index >> bit) & 1
    )
    return chr(ord("a") + shifts % 26)


def find_integers(n: int) -> int:
    """Count integers in ``[0, n]`` whose binary form has no two adjacent ones."""
    fib = [1, 2]
    while len(fib) < 32:
        fib.append(fib[-1] + fib[-2])
    result = 0
    prev_set = False
    for bit in range(30, -1, -1):
        if n & (1 << bit):
            result += fib[bit]
            if prev_set:
                return result
            prev_set = True
        else:
            prev_set = False
    return result + 1


def update_bits(n: int, m: int, i: int, j: int) -> int:
    """Replace bits ``i..=j`` of the 32-bit integer ``n`` with ``m``.

    The result is a signed 32-bit value.
    """
    if j < 31:
        mask = ~((1 << (j + 1)) - (1 << i)) & _MASK32
    else:
        mask = ((1 << i) - 1) & _MASK32
    return _to_int32((n & mask) | (m << i))