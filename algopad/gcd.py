"""Greatest common divisor, with a command that reduces its arguments."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

_U64 = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 1 << 64


def _parse_u64(text: str) -> int:
    if not _U64.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value >= _U64_LIMIT:
        raise ValueError(f"number too large: {text!r}")
    return value


def gcd(n: int, m: int) -> int:
    """Greatest common divisor of two positive integers by Euclid's algorithm."""
    if n <= 0 or m <= 0:
        raise ValueError("gcd needs two positive integers")
    while m:
        if m < n:
            n, m = m, n
        m %= n
    return n


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greatest common divisor of the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = [_parse_u64(arg) for arg in args]
    except ValueError as exc:
        print(f"error parsing argument: {exc}", file=sys.stderr)
        return 1
    if not numbers:
        print("Usage: gcd NUMBER ...", file=sys.stderr)
        return 1
    divisor = numbers[0]
    try:
        for m in numbers[1:]:
            divisor = gcd(divisor, m)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"The greatest common divisor of {numbers} is {divisor}")
    return 0


if __name__ == "__main__":
    sys.exit(main())