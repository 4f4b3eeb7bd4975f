"""Graph problems: longest-path scheduling, multi-source BFS and key-collecting BFS."""

from __future__ import annotations

from collections import deque

_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def minimum_time(n: int, relations: list[list[int]], time: list[int]) -> int:
    """Minimum months to finish ``n`` courses given prerequisite pairs and course durations."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for before, after in relations:
        adjacency[before].append(after)

    finish = [-1] * (n + 1)
    for root in range(1, n + 1):
        if finish[root] != -1:
            continue
        finish[root] = 0
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, successors = stack[-1]
            for nxt in successors:
                if finish[nxt] == -1:
                    finish[nxt] = 0
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
                finish[vertex] = max(finish[vertex], finish[nxt])
            else:
                stack.pop()
                finish[vertex] += time[vertex - 1]
                if stack:
                    parent = stack[-1][0]
                    finish[parent] = max(finish[parent], finish[vertex])
    return max(finish)


def oranges_rotting(grid: list[list[int]]) -> int:
    """Minutes until no fresh orange remains, or -1 if some can never rot."""
    cells = [list(row) for row in grid]
    rows, cols = len(cells), len(cells[0])
    queue: deque[tuple[int, int]] = deque()
    fresh = 0
    for i, row in enumerate(cells):
        for j, cell in enumerate(row):
            if cell == 2:
                queue.append((i, j))
            elif cell == 1:
                fresh += 1

    minutes = 0
    while queue and fresh > 0:
        for _ in range(len(queue)):
            x, y = queue.popleft()
            for dx, dy in _DIRECTIONS:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < rows and 0 <= ny < cols) or cells[nx][ny] != 1:
                    continue
                fresh -= 1
                cells[nx][ny] = 2
                queue.append((nx, ny))
        minutes += 1
    return minutes if fresh == 0 else -1


def shortest_path_all_keys(grid: list[str]) -> int:
    """Fewest moves from '@' to collect every key (a-f), or -1 if impossible."""
    rows, cols = len(grid), len(grid[0])
    start = (0, 0)
    key_count = 0
    for r, line in enumerate(grid):
        for c, ch in enumerate(line):
            if ch == "@":
                start = (r, c)
            if "a" <= ch <= "z":
                key_count = max(key_count, ord(ch) - ord("a") + 1)
    all_keys = (1 << key_count) - 1

    first = (start[0], start[1], 0)
    queue = deque([first])
    visited = {first}
    steps = 0
    while queue:
        for _ in range(len(queue)):
            r, c, keys = queue.popleft()
            if keys == all_keys:
                return steps
            for dr, dc in _DIRECTIONS:
                nr, nc = r + dr, c + dc
                if not (0 <= nr < rows and 0 <= nc < cols):
                    continue
                ch = grid[nr][nc]
                if ch == "#":
                    continue
                if "A" <= ch <= "Z" and not keys & (1 << (ord(ch) - ord("A"))):
                    continue
                new_keys = keys
                if "a" <= ch <= "z":
                    new_keys |= 1 << (ord(ch) - ord("a"))
                state = (nr, nc, new_keys)
                if state in visited:
                    continue
                visited.add(state)
                queue.append(state)
        steps += 1
    return -1