"""Dijkstra's algorithm on undirected weighted graphs."""

import heapq
from collections import defaultdict
from collections.abc import Hashable, Iterable

WeightedEdge = tuple[Hashable, Hashable, float]


def _adjacency(edges: Iterable[WeightedEdge]) -> defaultdict:
    adjacency: defaultdict = defaultdict(list)
    for u, v, weight in edges:
        if weight < 0:
            raise ValueError(f"edge {u!r}-{v!r} has negative weight {weight!r}")
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    return adjacency


def _search(edges: Iterable[WeightedEdge], source: Hashable):
    adjacency = _adjacency(edges)
    distances = {source: 0}
    parents = {source: None}
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > distances[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            if neighbour not in distances or candidate < distances[neighbour]:
                distances[neighbour] = candidate
                parents[neighbour] = node
                heapq.heappush(heap, (candidate, neighbour))
    return distances, parents


def dijkstra(edges: Iterable[WeightedEdge], source: Hashable) -> dict:
    """Return shortest distances from ``source`` to every reachable node."""
    distances, _ = _search(edges, source)
    return distances


def shortest_path(
    edges: Iterable[WeightedEdge], source: Hashable, target: Hashable
) -> list | None:
    """Return the nodes of a shortest path from ``source`` to ``target``, or None."""
    _, parents = _search(edges, source)
    if target not in parents:
        return None
    path = []
    node = target
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path