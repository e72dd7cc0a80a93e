"""Largest minimum-excluded value along root-to-node paths of a tree."""

import heapq
from collections import Counter, defaultdict
from collections.abc import Hashable, Iterable, Mapping


def max_path_mex(
    values: Mapping[Hashable, int],
    edges: Iterable[tuple[Hashable, Hashable]],
    root: Hashable,
) -> int:
    """Return the largest mex of the values on any path from ``root`` down the tree.

    Values must be non-negative integers.
    """
    adjacency: defaultdict = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    limit = len(set(adjacency) | {root})

    counts: Counter = Counter()
    missing = list(range(limit + 1))

    def enter(node) -> int:
        value = values[node]
        if value < 0:
            raise ValueError(f"node {node!r} has negative value {value}")
        counts[value] += 1
        while counts[missing[0]]:
            heapq.heappop(missing)
        return missing[0]

    def leave(node) -> None:
        value = values[node]
        counts[value] -= 1
        if counts[value] == 0 and value <= limit:
            heapq.heappush(missing, value)

    visited = {root}
    best = enter(root)
    stack = [(root, iter(adjacency[root]))]
    while stack:
        node, neighbours = stack[-1]
        for child in neighbours:
            if child not in visited:
                visited.add(child)
                best = max(best, enter(child))
                stack.append((child, iter(adjacency[child])))
                break
        else:
            stack.pop()
            leave(node)
    return best