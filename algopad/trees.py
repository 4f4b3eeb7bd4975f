"""Binary tree problems, lexicographic number ordering and parent-linked ancestor search."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass, field

from algopad.structs import TreeNode


def vertical_order(root: TreeNode | None) -> list[list[int]]:
    """Node values grouped by column from left to right, top to bottom within a column."""
    if root is None:
        return []
    columns: defaultdict[int, list[int]] = defaultdict(list)
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        node, col = queue.popleft()
        columns[col].append(node.val)
        if node.left is not None:
            queue.append((node.left, col - 1))
        if node.right is not None:
            queue.append((node.right, col + 1))
    return [columns[col] for col in range(min(columns), max(columns) + 1)]


def flip_equiv(r1: TreeNode | None, r2: TreeNode | None) -> bool:
    """Whether one tree can be turned into the other by swapping children of some nodes."""
    if r1 is None or r2 is None:
        return r1 is None and r2 is None
    if r1.val != r2.val:
        return False
    return (flip_equiv(r1.left, r2.left) and flip_equiv(r1.right, r2.right)) or (
        flip_equiv(r1.left, r2.right) and flip_equiv(r1.right, r2.left)
    )


def _count_steps(n: int, prefix: int) -> int:
    """How many numbers in ``[1, n]`` start with ``prefix``."""
    cur, nxt = prefix, prefix + 1
    steps = 0
    while cur <= n:
        steps += min(n + 1, nxt) - cur
        cur *= 10
        nxt *= 10
    return steps


def find_kth_number(n: int, k: int) -> int:
    """The ``k``-th smallest number in ``[1, n]`` in lexicographic order."""
    remaining = k - 1
    cur = 1
    while remaining:
        steps = _count_steps(n, cur)
        if steps <= remaining:
            remaining -= steps
            cur += 1
        else:
            cur *= 10
            remaining -= 1
    return cur


def lexical_order(n: int) -> list[int]:
    """The numbers ``1..=n`` sorted lexicographically."""
    result: list[int] = []
    cur = 1
    for _ in range(n):
        result.append(cur)
        if cur * 10 <= n:
            cur *= 10
        else:
            while cur >= n or cur % 10 == 9:
                cur //= 10
            cur += 1
    return result


def max_depth(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def max_path_sum(root: TreeNode | None) -> int:
    """Largest sum of node values along any path in the tree."""
    if root is None:
        raise ValueError("tree must be non-empty")
    best = root.val

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.val)
        return max(left, right) + node.val

    gain(root)
    return best


@dataclass(eq=False)
class ParentNode:
    """A binary tree node that also links to its parent."""

    val: int
    parent: ParentNode | None = field(default=None, repr=False)
    left: ParentNode | None = None
    right: ParentNode | None = None

    def connect(self, left: ParentNode, right: ParentNode) -> None:
        """Attach ``left`` and ``right`` as this node's children."""
        self.left, self.right = left, right
        left.parent = self
        right.parent = self


def lowest_common_ancestor(p: ParentNode | None, q: ParentNode | None) -> ParentNode | None:
    """The lowest common ancestor of two nodes of the same tree, or None if either is missing.

    Two walkers climb towards the root; on reaching it each restarts at the other
    node, so both meet after the same number of steps. Nodes are compared by value.
    """
    if p is None or q is None:
        return None
    a, b = p, q
    while a.val != b.val:
        a = a.parent if a.parent is not None else q
        b = b.parent if b.parent is not None else p
    return a