"""Reachability and path searches over small graphs and grids."""

from collections import deque

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _check_node(node, n):
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _adjacency(n, edges, *, directed):
    adjacency = [[] for _ in range(n + 1)]
    for source, target in edges:
        _check_node(source, n)
        _check_node(target, n)
        adjacency[source].append(target)
        if not directed:
            adjacency[target].append(source)
    return adjacency


def _reachable(adjacency, start):
    seen = {start}
    stack = [start]
    while stack:
        node = stack.pop()
        for neighbour in adjacency[node]:
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)
    return seen


def most_hackable(n, trusts):
    """Return, ascending, the computers whose hacking compromises the most machines.

    Each pair ``(a, b)`` in ``trusts`` means a trusts b, so hacking b also
    hacks a.
    """
    adjacency = _adjacency(n, ((b, a) for a, b in trusts), directed=True)
    counts = {node: len(_reachable(adjacency, node)) for node in range(1, n + 1)}
    if not counts:
        return []
    best = max(counts.values())
    return [node for node, count in counts.items() if count == best]


def tree_parents(n, edges):
    """Return the parents of nodes 2..n in the tree rooted at node 1."""
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adjacency = _adjacency(n, edges, directed=False)
    parent = {1: None}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                queue.append(neighbour)
    if len(parent) != n:
        raise ValueError("the edges do not connect every node to the root")
    return [parent[node] for node in range(2, n + 1)]


def infected_count(n, links):
    """Return how many computers besides computer 1 a worm on computer 1 reaches."""
    if n < 1:
        raise ValueError("there must be at least one computer")
    adjacency = _adjacency(n, links, directed=False)
    return len(_reachable(adjacency, 1)) - 1


def _rectangular(grid):
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same width")
    return rows


def can_reach(grid):
    """Return True if the bottom-right cell is reachable from the top-left.

    Only cells holding 1 may be entered, and moves go right or down.
    """
    rows = _rectangular(grid)
    previous = [False] * len(rows[0])
    for i, row in enumerate(rows):
        left = False
        current = []
        for (j, cell), above in zip(enumerate(row), previous):
            left = cell == 1 and (left or above or (i == 0 and j == 0))
            current.append(left)
        previous = current
    return previous[-1]


def longest_unique_path(board):
    """Return the most cells a walk from the top-left can visit without repeating a letter."""
    rows = _rectangular(board)
    if any(not ("A" <= cell <= "Z") for row in rows for cell in row):
        raise ValueError("board cells must be upper-case letters")
    height, width = len(rows), len(rows[0])

    def bit(r, c):
        return 1 << (ord(rows[r][c]) - ord("A"))

    def walk(r, c, used, length):
        best = length
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width:
                mask = bit(nr, nc)
                if not used & mask:
                    best = max(best, walk(nr, nc, used | mask, length + 1))
        return best

    return walk(0, 0, bit(0, 0), 1)