"""String problems: pair fixing, bracket placement, reorganising, prefix scores, palindromes."""

from __future__ import annotations

from collections import Counter

from algopad.structs import TrieNode


def min_changes(s: str) -> int:
    """Fewest flips to make ``s`` a run of equal-character pairs (even length required)."""
    if len(s) % 2:
        raise ValueError("string length must be even")
    return sum(a != b for a, b in zip(s[::2], s[1::2]))


def min_changes_pairs(s: str) -> int:
    """Same as :func:`min_changes`, counting unequal pairs directly."""
    if not s:
        raise ValueError("string must be non-empty")
    return sum(s[i] != s[i + 1] for i in range(0, len(s) - 1, 2))


def minimize_result(expression: str) -> str:
    """Place one pair of parentheses around the '+' in ``expression`` to minimise its value."""
    left, right = expression.split("+")[:2]
    best = None
    best_split = (0, 1)
    for i in range(len(left)):
        a = int(left[:i]) if i else 1
        b = int(left[i:])
        for j in range(1, len(right) + 1):
            c = int(right[:j])
            d = int(right[j:]) if j < len(right) else 1
            value = a * (b + c) * d
            if best is None or value < best:
                best = value
                best_split = (i, j)
    i, j = best_split
    return f"{left[:i]}({left[i:]}+{right[:j]}){right[j:]}"


def reorganize_string(s: str) -> str:
    """Rearrange ``s`` so no two neighbours are equal, or return "" if impossible."""
    if not s:
        return ""
    counts: Counter[str] = Counter()
    top_char, top_count = s[0], 0
    for ch in s:
        counts[ch] += 1
        if counts[ch] > top_count:
            top_char, top_count = ch, counts[ch]
    if top_count > (len(s) + 1) // 2:
        return ""

    result = [""] * len(s)
    result[0:2 * top_count:2] = [top_char] * top_count
    counts[top_char] = 0
    i = 2 * top_count
    for ch, count in counts.items():
        for _ in range(count):
            if i >= len(s):
                i = 1
            result[i] = ch
            i += 2
    return "".join(result)


def sum_prefix_scores(words: list[str]) -> list[int]:
    """For each word, the sum over its prefixes of how many words start with that prefix."""
    root = TrieNode()
    for word in words:
        root.insert(word)
    scores = []
    for word in words:
        node = root
        total = 0
        for ch in word:
            node = node.children[ch]
            total += node.cnt
        scores.append(total)
    return scores


def is_palindrome(s: str) -> bool:
    """Whether the alphanumeric characters of ``s`` read the same both ways, ignoring ASCII case."""
    chars = [c.upper() if c.isascii() else c for c in s if c.isalnum()]
    return chars == chars[::-1]


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        self.root.insert(word)

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted as a whole word."""
        return self.root.search(word)

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word starts with ``prefix``."""
        return self.root.starts_with(prefix)