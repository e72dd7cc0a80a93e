"""Exhaustive searches for long trails and fixed-length walks."""

from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence


def longest_trail(node_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the most edges a trail can use, starting from a node in 0..node_count-1.

    A trail may revisit nodes but uses each edge at most once; repeated edges
    between the same pair count as one.
    """
    adjacency: defaultdict = defaultdict(set)
    for u, v in edges:
        adjacency[u].add(v)
        adjacency[v].add(u)
    used: set = set()

    def extend(node) -> int:
        best = 0
        for neighbour in adjacency[node]:
            edge = frozenset((node, neighbour))
            if edge not in used:
                used.add(edge)
                best = max(best, 1 + extend(neighbour))
                used.discard(edge)
        return best

    return max((extend(start) for start in range(node_count)), default=0)


def walks_of_length(adjacency: Sequence[Sequence[int]], length: int) -> list[tuple[int, ...]]:
    """List every path of ``length`` edges from node 1 that repeats no node.

    ``adjacency`` is a square matrix whose row and column ``i`` stand for node
    ``i + 1``; a non-zero entry marks an edge. Paths come in lexicographic order.
    """
    matrix = [list(row) for row in adjacency]
    size = len(matrix)
    if size == 0:
        raise ValueError("adjacency matrix is empty")
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    path = [0]
    visited = {0}

    def extend(index: int) -> Iterator[tuple[int, ...]]:
        if len(path) - 1 == length:
            yield tuple(node + 1 for node in path)
            return
        for following, linked in enumerate(matrix[index]):
            if linked and following not in visited:
                visited.add(following)
                path.append(following)
                yield from extend(following)
                path.pop()
                visited.discard(following)

    return list(extend(0))