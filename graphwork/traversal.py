"""Breadth- and depth-first traversals over edge lists."""

from collections import defaultdict, deque
from collections.abc import Hashable, Iterable, Iterator

Edge = tuple[Hashable, Hashable]


def _undirected(edges: Iterable[Edge]) -> defaultdict:
    adjacency: defaultdict = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _children(edges: Iterable[Edge]) -> defaultdict:
    adjacency: defaultdict = defaultdict(list)
    for parent, child in edges:
        adjacency[parent].append(child)
    return adjacency


def _discoveries(adjacency, source) -> Iterator[tuple[Hashable, int]]:
    """Yield (node, level) for each node as BFS first discovers it, source excluded."""
    levels = {source: 0}
    queue = deque([source])
    while queue:
        parent = queue.popleft()
        for child in adjacency[parent]:
            if child not in levels:
                levels[child] = levels[parent] + 1
                queue.append(child)
                yield child, levels[child]


def bfs_levels(edges: Iterable[Edge], source: Hashable) -> dict:
    """Return the BFS level of every node reachable from ``source`` in an undirected graph."""
    levels = {source: 0}
    levels.update(_discoveries(_undirected(edges), source))
    return levels


def reaches_bfs(edges: Iterable[Edge], source: Hashable, target: Hashable) -> bool:
    """Tell whether BFS from ``source`` discovers ``target``.

    The target counts only when it is discovered from another node, so a
    search from a node to itself reports False.
    """
    adjacency = _undirected(edges)
    return any(node == target for node, _ in _discoveries(adjacency, source))


def reaches_dfs(edges: Iterable[Edge], source: Hashable, target: Hashable) -> bool:
    """Tell whether DFS from ``source`` meets ``target`` as a neighbour of a visited node."""
    adjacency = _undirected(edges)
    seen = {source}
    stack = [source]
    while stack:
        node = stack.pop()
        for neighbour in adjacency[node]:
            if neighbour == target:
                return True
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)
    return False


def _preorder(edges: Iterable[Edge], root: Hashable):
    children = _children(edges)
    order = []
    seen = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if node in seen:
            raise ValueError(
                f"node {node!r} is reached twice from {root!r}; edges do not form a rooted tree"
            )
        seen.add(node)
        order.append(node)
        stack.extend(children[node])
    return order, children


def subtree_sizes(edges: Iterable[Edge], root: Hashable) -> dict:
    """Return the number of nodes in each subtree of a tree given as (parent, child) edges."""
    order, children = _preorder(edges, root)
    sizes: dict = {}
    for node in reversed(order):
        sizes[node] = 1 + sum(sizes[child] for child in children[node])
    return sizes


def subtree_max_depth(edges: Iterable[Edge], root: Hashable) -> dict:
    """Return the distance to the deepest descendant for each subtree; leaves have 0."""
    order, children = _preorder(edges, root)
    depths: dict = {}
    for node in reversed(order):
        depths[node] = max((depths[child] + 1 for child in children[node]), default=0)
    return depths