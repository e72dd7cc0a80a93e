"""Lowest common ancestors by binary lifting, and path queries built on them."""

from collections import defaultdict
from collections.abc import Hashable, Iterable, Sequence

Edge = tuple[Hashable, Hashable]

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class LcaTree:
    """A rooted tree answering ancestor and lowest-common-ancestor queries."""

    def __init__(self, edges: Iterable[Edge], root: Hashable):
        adjacency: defaultdict = defaultdict(list)
        for u, v in edges:
            adjacency[u].append(v)
            adjacency[v].append(u)

        self.root = root
        self.parent: dict = {}
        parent_of = {root: root}
        entry = {root: 0}
        exit_: dict = {}
        order = [root]
        timer = 1
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for child in neighbours:
                if child == parent_of[node]:
                    continue
                if child in entry:
                    raise ValueError(
                        f"node {child!r} is reached twice from {root!r}; edges do not form a tree"
                    )
                parent_of[child] = node
                self.parent[child] = node
                entry[child] = timer
                timer += 1
                order.append(child)
                stack.append((child, iter(adjacency[child])))
                break
            else:
                stack.pop()
                exit_[node] = timer
                timer += 1

        unreached = set(adjacency) - entry.keys()
        if unreached:
            raise ValueError(f"nodes {sorted(map(repr, unreached))} are not connected to {root!r}")

        self._entry = entry
        self._exit = exit_
        self.preorder = tuple(order)
        self._levels = max(1, len(order).bit_length())
        up = {root: [root] * self._levels}
        for node in order[1:]:
            row = [parent_of[node]]
            for step in range(1, self._levels):
                row.append(up[row[step - 1]][step - 1])
            up[node] = row
        self._up = up

    def __contains__(self, node: Hashable) -> bool:
        return node in self._entry

    def __len__(self) -> int:
        return len(self.preorder)

    def _check(self, node: Hashable) -> None:
        if node not in self._entry:
            raise KeyError(node)

    def is_ancestor(self, u: Hashable, v: Hashable) -> bool:
        """Tell whether ``u`` lies on the path from the root to ``v``, ``v`` included."""
        self._check(u)
        self._check(v)
        return self._entry[u] <= self._entry[v] and self._exit[u] >= self._exit[v]

    def lca(self, u: Hashable, v: Hashable) -> Hashable:
        """Return the deepest node that is an ancestor of both ``u`` and ``v``."""
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for step in reversed(range(self._levels)):
            ancestor = self._up[u][step]
            if not self.is_ancestor(ancestor, v):
                u = ancestor
        return self._up[u][0]


def tree_path_sums(
    edges: Iterable[tuple[Hashable, Hashable, int]],
    root: Hashable,
    queries: Iterable[Edge],
) -> list[int]:
    """Return the total edge weight of the tree path for each (u, v) query."""
    weight: dict = {}
    pairs = []
    for u, v, w in edges:
        weight[u, v] = w
        weight[v, u] = w
        pairs.append((u, v))
    tree = LcaTree(pairs, root)
    cost = {root: 0}
    for node in tree.preorder[1:]:
        up = tree.parent[node]
        cost[node] = cost[up] + weight[up, node]
    return [cost[u] + cost[v] - 2 * cost[tree.lca(u, v)] for u, v in queries]


def palindrome_pair_queries(
    letters: str, edges: Iterable[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[bool]:
    """For each (u, v) query, tell whether some letter occurs on both sides of the path.

    Node ``i`` (numbered from 1, the root) carries ``letters[i - 1]``. The side of
    ``u`` runs from ``u`` up to, but not including, the lowest common ancestor;
    likewise for ``v``.
    """
    if not letters:
        raise ValueError("the tree needs at least one node")
    bad = set(letters) - set(_ALPHABET)
    if bad:
        raise ValueError(f"letters must be lower-case a-z, got {sorted(bad)}")
    node_count = len(letters)
    edge_list = list(edges)
    for u, v in edge_list:
        for node in (u, v):
            if not 1 <= node <= node_count:
                raise ValueError(f"node {node!r} is outside 1..{node_count}")
    tree = LcaTree(edge_list, 1)

    def own(node: int) -> list[int]:
        counts = [0] * len(_ALPHABET)
        counts[_ALPHABET.index(letters[node - 1])] = 1
        return counts

    prefix = {1: own(1)}
    for node in tree.preorder[1:]:
        above = prefix[tree.parent[node]]
        prefix[node] = [a + b for a, b in zip(above, own(node))]

    answers = []
    for u, v in queries:
        meet = prefix[tree.lca(u, v)]
        answers.append(
            any(
                cu - cm and cv - cm
                for cu, cv, cm in zip(prefix[u], prefix[v], meet)
            )
        )
    return answers


def count_weight_on_path(
    weights: Sequence[int],
    edges: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, int, int]],
) -> list[int]:
    """For each (u, v, k) query, count the nodes on the u-v path whose weight is ``k``.

    Nodes are numbered 0..len(weights)-1 and node 0 is the root.
    """
    if not weights:
        raise ValueError("the tree needs at least one node")
    node_count = len(weights)
    edge_list = list(edges)
    for u, v in edge_list:
        for node in (u, v):
            if not 0 <= node < node_count:
                raise ValueError(f"node {node!r} is outside 0..{node_count - 1}")
    tree = LcaTree(edge_list, 0)
    memo: dict = {}

    def from_root(node: int, k: int) -> int:
        climb = []
        current = node
        while (current, k) not in memo and current != tree.root:
            climb.append(current)
            current = tree.parent[current]
        if (current, k) not in memo:
            memo[current, k] = int(weights[current] == k)
        total = memo[current, k]
        for step in reversed(climb):
            total += weights[step] == k
            memo[step, k] = total
        return total

    answers = []
    for u, v, k in queries:
        meet = tree.lca(u, v)
        count = from_root(u, k) + from_root(v, k) - 2 * from_root(meet, k)
        if weights[meet] == k:
            count += 1
        answers.append(count)
    return answers


def colorful_path_sums(
    parents: Sequence[int], digits: str, queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each (u, v) query, sum the digits on the path below the meeting point, plus one.

    Node ``i + 2`` hangs from ``parents[i]``; node 1 is the root. Node ``i``
    carries the digit ``digits[i - 1]``. The lowest common ancestor always counts
    as one, whatever its own digit.
    """
    node_count = len(parents) + 1
    if len(digits) != node_count:
        raise ValueError(f"expected {node_count} digits, got {len(digits)}")
    if not all(ch in "0123456789" for ch in digits):
        raise ValueError(f"digits must be 0-9, got {digits!r}")
    edges = []
    for child, parent in enumerate(parents, start=2):
        if not 1 <= parent <= node_count:
            raise ValueError(f"parent {parent!r} of node {child} is outside 1..{node_count}")
        edges.append((parent, child))
    tree = LcaTree(edges, 1)
    total = {1: 0}
    for node in tree.preorder[1:]:
        total[node] = total[tree.parent[node]] + int(digits[node - 1])
    return [total[u] + total[v] - 2 * total[tree.lca(u, v)] + 1 for u, v in queries]