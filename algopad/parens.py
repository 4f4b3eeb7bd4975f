"""Bracket problems: validity checking and minimal removal."""

from __future__ import annotations

_CLOSING = {"(": ")", "[": "]", "{": "}"}


def is_valid(s: str) -> bool:
    """Whether every bracket in ``s`` is closed by the matching one in the right order."""
    expected: list[str] = []
    for ch in s:
        closing = _CLOSING.get(ch)
        if closing is not None:
            expected.append(closing)
        elif not expected or expected.pop() != ch:
            return False
    return not expected


def min_remove_to_make_valid(s: str) -> str:
    """Remove the fewest parentheses so that those remaining are balanced."""
    open_count = 0
    close_left = s.count(")")
    kept: list[str] = []
    for ch in s:
        if ch == "(":
            if open_count == close_left:
                continue
            open_count += 1
        elif ch == ")":
            close_left -= 1
            if open_count == 0:
                continue
            open_count -= 1
        kept.append(ch)
    return "".join(kept)