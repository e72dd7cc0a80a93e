"""Disjoint-set forest and a cycle check built on it."""

from collections.abc import Hashable, Iterable


class DisjointSet:
    """Union-find over hashable items with path compression."""

    def __init__(self, items: Iterable[Hashable] = ()):
        self._parent: dict = {item: item for item in items}

    def __contains__(self, item: Hashable) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def add(self, item: Hashable) -> None:
        """Add ``item`` as a singleton set unless it is already present."""
        self._parent.setdefault(item, item)

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``."""
        parent = self._parent
        if item not in parent:
            raise KeyError(item)
        root = item
        while parent[root] != root:
            root = parent[root]
        while parent[item] != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True


def is_tree(node_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether no edge among nodes 1..node_count closes a cycle."""
    sets = DisjointSet(range(1, node_count + 1))
    for u, v in edges:
        for node in (u, v):
            if node not in sets:
                raise ValueError(f"node {node!r} is outside 1..{node_count}")
        if not sets.union(u, v):
            return False
    return True