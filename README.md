# graphwork

Graph and tree algorithms for plain Python data. Graphs are given as iterables
of edges, `(u, v)` or `(u, v, weight)`. Most functions accept any hashable node
labels; those that take a `node_count` work on integer nodes in a fixed range,
stated below.

## Install

```
pip install .
pip install ".[test]"   # with pytest and hypothesis
```

## Modules

### `graphwork.traversal`

- `bfs_levels(edges, source)`: dict of BFS level for every node reachable from
  `source` in an undirected graph.
- `reaches_bfs(edges, source, target)`: whether BFS from `source` discovers
  `target`. A search from a node to itself gives `False`.
- `reaches_dfs(edges, source, target)`: whether a depth-first search from
  `source` meets `target` as the neighbour of a visited node.
- `subtree_sizes(edges, root)` and `subtree_max_depth(edges, root)`: for a tree
  given as `(parent, child)` edges, the node count of each subtree and the
  distance to its deepest descendant (0 for leaves). A node reached twice raises
  `ValueError`.

### `graphwork.dsu`

- `DisjointSet(items=())`: union-find with path compression. `add(item)`,
  `find(item)` (raises `KeyError` for unknown items), `union(a, b)` (returns
  `False` if already joined), plus `in` and `len()`.
- `is_tree(node_count, edges)`: `True` if no edge among nodes `1..node_count`
  closes a cycle. Nodes outside that range raise `ValueError`.

### `graphwork.shortest_path`

- `dijkstra(edges, source)`: shortest distances from `source` to every
  reachable node of an undirected weighted graph.
- `shortest_path(edges, source, target)`: the list of nodes on a shortest
  route, or `None` if `target` is unreachable.

Negative weights raise `ValueError`.

### `graphwork.connectivity`

- `find_bridges(edges, root)`: bridges reachable from `root` as
  `(parent, child)` pairs, in the order their lower subtree finishes.
- `orient_edges(edges, root)`: directs every reachable edge so the result is
  strongly connected, or returns `None` if a bridge makes that impossible.
- `strongly_connected_components(node_count, edges)`: components of a directed
  graph on nodes `1..node_count`, in topological order of the condensation.

### `graphwork.cycles`

Both functions work on nodes `0..node_count-1`.

- `shortest_cycle(node_count, edges)`: length of the shortest cycle, or `None`.
  Parallel edges between the same pair do not count as a cycle.
- `is_bicolorable(node_count, edges)`: whether the graph can be two-coloured.
  Only the component holding the smallest edge endpoint is examined.

### `graphwork.walks`

- `longest_trail(node_count, edges)`: the most edges a trail can use, starting
  from any node in `0..node_count-1`, using each edge at most once.
- `walks_of_length(adjacency, length)`: every path of `length` edges from node
  1 that repeats no node, given a square 0/1 matrix whose row `i` is node
  `i + 1`. Paths are tuples in lexicographic order.

### `graphwork.mex`

- `max_path_mex(values, edges, root)`: the largest MEX of the non-negative
  values on any path from `root` down the tree.

### `graphwork.lca`

- `LcaTree(edges, root)`: a rooted tree using binary lifting, with
  `is_ancestor(u, v)`, `lca(u, v)`, `parent`, `preorder`, `in` and `len()`.
- `tree_path_sums(edges, root, queries)`: total edge weight of each `(u, v)` path.
- `palindrome_pair_queries(letters, edges, queries)`: for each `(u, v)`, whether
  some letter occurs on both sides of the path below the common ancestor.
- `count_weight_on_path(weights, edges, queries)`: for each `(u, v, k)`, the
  number of nodes on the path with weight `k`; node 0 is the root.
- `colorful_path_sums(parents, digits, queries)`: for each `(u, v)`, the sum of
  digits on the path below the common ancestor, plus one.

## Example

```python
from graphwork.shortest_path import dijkstra, shortest_path
from graphwork.lca import LcaTree

edges = [(1, 2, 2), (2, 5, 5), (2, 3, 4), (1, 4, 1), (4, 3, 3), (3, 5, 1)]
distances = dijkstra(edges, 1)       # {1: 0, 2: 2, 4: 1, 3: 4, 5: 5}
route = shortest_path(edges, 1, 5)   # [1, 4, 3, 5]

tree = LcaTree([(1, 2), (1, 3), (3, 4), (3, 5)], root=1)
tree.lca(4, 5)   # 3
```

## What it does not do

There is no command-line tool: nothing reads graphs from standard input or
files, or prints results. Every function takes Python values and returns them.

## Tests

```
pytest
```