"""Bridges, strong orientations and strongly connected components."""

from collections import defaultdict
from collections.abc import Hashable, Iterable, Iterator

Edge = tuple[Hashable, Hashable]

_ROOT = object()


def _undirected(edges: Iterable[Edge]) -> defaultdict:
    adjacency: defaultdict = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _lowlink_events(adjacency, root) -> Iterator[tuple[str, Hashable, Hashable, bool]]:
    """Walk the graph depth-first from ``root`` and report its edges.

    Yields ``("back", node, ancestor, False)`` for each edge to a node still on
    the DFS path and ``("tree", parent, child, is_bridge)`` when a child's
    subtree is finished. Every neighbour equal to the DFS parent is skipped.
    """
    entry = {root: 0}
    low = {root: 0}
    active = {root}
    timer = 1
    stack = [(root, _ROOT, iter(adjacency[root]))]
    while stack:
        node, parent, neighbours = stack[-1]
        for child in neighbours:
            if child == parent:
                continue
            if child in active:
                low[node] = min(low[node], entry[child])
                yield "back", node, child, False
            elif child not in entry:
                entry[child] = low[child] = timer
                timer += 1
                active.add(child)
                stack.append((child, node, iter(adjacency[child])))
                break
        else:
            stack.pop()
            active.discard(node)
            if stack:
                up = stack[-1][0]
                yield "tree", up, node, low[node] > entry[up]
                low[up] = min(low[up], low[node])


def find_bridges(edges: Iterable[Edge], root: Hashable) -> list[tuple]:
    """Return the bridges reachable from ``root`` as (parent, child) pairs.

    Bridges are listed in the order their lower subtree is finished.
    """
    return [
        (u, v)
        for kind, u, v, is_bridge in _lowlink_events(_undirected(edges), root)
        if kind == "tree" and is_bridge
    ]


def orient_edges(edges: Iterable[Edge], root: Hashable) -> list[tuple] | None:
    """Direct every edge reachable from ``root`` so the result is strongly connected.

    Returns the directed edges, or None if the graph has a bridge and so no
    such orientation exists.
    """
    oriented = []
    for kind, u, v, is_bridge in _lowlink_events(_undirected(edges), root):
        oriented.append((u, v))
        if is_bridge:
            return None
    oriented.reverse()
    return oriented


def strongly_connected_components(
    node_count: int, edges: Iterable[Edge]
) -> list[list[int]]:
    """Split the directed graph on nodes 1..node_count into strongly connected components.

    Components come in topological order of the condensation; within a
    component nodes are listed in discovery order.
    """
    forward: defaultdict = defaultdict(list)
    backward: defaultdict = defaultdict(list)
    for u, v in edges:
        for node in (u, v):
            if not 1 <= node <= node_count:
                raise ValueError(f"node {node!r} is outside 1..{node_count}")
        forward[u].append(v)
        backward[v].append(u)

    seen: set = set()
    finished: list = []
    for start in range(1, node_count + 1):
        if start in seen:
            continue
        seen.add(start)
        stack = [(start, iter(forward[start]))]
        while stack:
            node, successors = stack[-1]
            for child in successors:
                if child not in seen:
                    seen.add(child)
                    stack.append((child, iter(forward[child])))
                    break
            else:
                stack.pop()
                finished.append(node)

    seen = set()
    components = []
    for start in reversed(finished):
        if start in seen:
            continue
        seen.add(start)
        component = [start]
        frames = [iter(backward[start])]
        while frames:
            for child in frames[-1]:
                if child not in seen:
                    seen.add(child)
                    component.append(child)
                    frames.append(iter(backward[child]))
                    break
            else:
                frames.pop()
        components.append(component)
    return components