"""Shortest cycles and two-colouring of undirected graphs."""

from collections import defaultdict, deque
from collections.abc import Iterable


def _adjacency(node_count: int, edges: Iterable[tuple[int, int]]):
    edge_list = list(edges)
    adjacency: defaultdict = defaultdict(list)
    for u, v in edge_list:
        for node in (u, v):
            if not 0 <= node < node_count:
                raise ValueError(f"node {node!r} is outside 0..{node_count - 1}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency, edge_list


def _cycle_from(adjacency, source) -> int | None:
    distances = {source: 0}
    finished: set = set()
    queue = deque([source])
    best = None
    while queue:
        parent = queue.popleft()
        for child in adjacency[parent]:
            if child not in distances:
                distances[child] = distances[parent] + 1
                queue.append(child)
            elif child not in finished:
                length = distances[child] + distances[parent] + 1
                if length > 2 and (best is None or length < best):
                    best = length
        finished.add(parent)
    return best


def shortest_cycle(node_count: int, edges: Iterable[tuple[int, int]]) -> int | None:
    """Return the length of the shortest cycle on nodes 0..node_count-1, or None.

    Repeated edges between the same pair of nodes do not form a cycle.
    """
    adjacency, _ = _adjacency(node_count, edges)
    lengths = [
        length
        for length in (_cycle_from(adjacency, source) for source in range(node_count))
        if length is not None
    ]
    return min(lengths, default=None)


def is_bicolorable(node_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the graph on nodes 0..node_count-1 can be two-coloured.

    Only the component holding the smallest edge endpoint is examined.
    """
    adjacency, edge_list = _adjacency(node_count, edges)
    if not edge_list:
        return True
    root = min(min(u, v) for u, v in edge_list)
    colour = {root: 0}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour in colour:
                if colour[neighbour] == colour[node]:
                    return False
            else:
                colour[neighbour] = 1 - colour[node]
                queue.append(neighbour)
    return True