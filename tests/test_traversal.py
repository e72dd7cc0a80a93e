import pytest
from hypothesis import given
from hypothesis import strategies as st

from graphwork.traversal import (
    bfs_levels,
    reaches_bfs,
    reaches_dfs,
    subtree_max_depth,
    subtree_sizes,
)

SAMPLE_TREE = [(1, 2), (1, 3), (1, 4), (3, 5), (3, 7), (5, 6)]


@st.composite
def trees(draw, max_nodes=30):
    n = draw(st.integers(1, max_nodes))
    edges = [(draw(st.integers(1, child - 1)), child) for child in range(2, n + 1)]
    return n, edges


def _children(edges):
    result = {}
    for parent, child in edges:
        result.setdefault(parent, []).append(child)
    return result


def test_bfs_levels_on_chain():
    n = 6
    edges = [(i, i + 1) for i in range(1, n)]
    assert bfs_levels(edges, 1) == {i: i - 1 for i in range(1, n + 1)}


@given(trees())
def test_bfs_levels_invariants(tree):
    n, edges = tree
    levels = bfs_levels(edges, 1)
    assert levels[1] == 0
    assert set(levels) == set(range(1, n + 1))
    for u, v in edges:
        assert abs(levels[u] - levels[v]) == 1


def test_bfs_levels_ignores_other_components():
    levels = bfs_levels([(1, 2), (3, 4)], 1)
    assert set(levels) == {1, 2}


@given(trees())
def test_every_tree_node_is_reached(tree):
    n, edges = tree
    for target in range(2, n + 1):
        assert reaches_bfs(edges, 1, target)
        assert reaches_dfs(edges, 1, target)


def test_unreachable_target():
    edges = [(1, 2), (3, 4)]
    assert not reaches_bfs(edges, 1, 4)
    assert not reaches_dfs(edges, 1, 4)


def test_self_target_differs_between_searches():
    edges = [(1, 2)]
    assert reaches_bfs(edges, 1, 1) is False
    assert reaches_dfs(edges, 1, 1) is True


def test_subtree_sizes_sample():
    sizes = subtree_sizes(SAMPLE_TREE, 1)
    assert sizes[1] == 7
    assert sizes[5] == 2
    assert sizes[3] == 4
    assert all(sizes[leaf] == 1 for leaf in (2, 4, 6, 7))


@given(trees())
def test_subtree_sizes_invariants(tree):
    n, edges = tree
    sizes = subtree_sizes(edges, 1)
    children = _children(edges)
    assert sizes[1] == n
    for node, size in sizes.items():
        assert size == 1 + sum(sizes[c] for c in children.get(node, []))


def test_subtree_max_depth_sample():
    depths = subtree_max_depth(SAMPLE_TREE, 1)
    assert depths[1] == 3
    assert depths[6] == 0


def test_subtree_max_depth_chain():
    n = 5
    edges = [(i, i + 1) for i in range(1, n)]
    depths = subtree_max_depth(edges, 1)
    assert depths == {i: n - i for i in range(1, n + 1)}


@given(trees())
def test_subtree_max_depth_invariants(tree):
    _, edges = tree
    depths = subtree_max_depth(edges, 1)
    children = _children(edges)
    for node, depth in depths.items():
        kids = children.get(node, [])
        if kids:
            assert depth == 1 + max(depths[c] for c in kids)
        else:
            assert depth == 0


def test_cycle_is_rejected():
    with pytest.raises(ValueError):
        subtree_sizes([(1, 2), (2, 1)], 1)
    with pytest.raises(ValueError):
        subtree_max_depth([(1, 2), (1, 3), (2, 4), (3, 4)], 1)