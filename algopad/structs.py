"""Shared node types: binary tree nodes and prefix-tree (trie) nodes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass
class TrieNode:
    """A prefix-tree node.

    ``cnt`` is the number of inserted words that pass through this node,
    i.e. the number of words having the path to this node as a prefix.
    ``end`` marks that a whole word ends here.
    """

    children: dict[str, TrieNode] = field(default_factory=dict)
    end: bool = False
    cnt: int = 0

    def insert(self, word: str) -> None:
        """Add ``word``, bumping the prefix count of every node on its path."""
        node = self
        for ch in word:
            node = node.children.setdefault(ch, TrieNode())
            node.cnt += 1
        node.end = True

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted as a whole word."""
        node = self.get(word)
        return node is not None and node.end

    def starts_with(self, prefix: str) -> bool:
        """Return True if any inserted word starts with ``prefix``."""
        return self.get(prefix) is not None

    def get(self, s: str) -> TrieNode | None:
        """Return the node reached by following ``s``, or None if absent."""
        node = self
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node