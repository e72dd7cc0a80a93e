import pytest
from hypothesis import given, strategies as st

from graphwork.walks import longest_trail, walks_of_length

SQUARE_WITH_DIAGONAL = [
    [0, 1, 1, 0],
    [1, 0, 1, 1],
    [1, 1, 0, 1],
    [0, 1, 1, 0],
]


def test_trail_on_path():
    assert longest_trail(3, [(0, 1), (1, 2)]) == 2


def test_trail_on_two_cycles():
    edges = [
        (0, 2), (1, 2), (2, 3), (3, 4), (3, 5), (4, 6), (5, 7), (6, 8),
        (7, 8), (7, 9), (8, 10), (9, 11), (10, 12), (11, 12), (10, 13), (12, 14),
    ]
    assert longest_trail(15, edges) == 12


def test_trail_without_edges():
    assert longest_trail(4, []) == 0


def test_repeated_edge_counts_once():
    assert longest_trail(2, [(0, 1), (0, 1)]) == 1


@given(st.integers(min_value=3, max_value=9))
def test_trail_on_ring_uses_every_edge(size):
    edges = [(i, (i + 1) % size) for i in range(size)]
    assert longest_trail(size, edges) == size


@given(st.integers(min_value=2, max_value=10))
def test_trail_on_line(size):
    edges = [(i, i + 1) for i in range(size - 1)]
    assert longest_trail(size, edges) == size - 1


def test_walks_of_length_two():
    assert walks_of_length(SQUARE_WITH_DIAGONAL, 2) == [
        (1, 2, 3), (1, 2, 4), (1, 3, 2), (1, 3, 4),
    ]


def test_walk_of_length_zero_is_start_only():
    assert walks_of_length([[0, 1], [1, 0]], 0) == [(1,)]


def test_no_walk_longer_than_node_count():
    assert walks_of_length(SQUARE_WITH_DIAGONAL, 4) == []


@pytest.mark.parametrize("length", [1, 2, 3])
def test_walks_are_simple_adjacent_and_sorted(length):
    walks = walks_of_length(SQUARE_WITH_DIAGONAL, length)
    assert walks == sorted(walks)
    for walk in walks:
        assert walk[0] == 1
        assert len(walk) == length + 1
        assert len(set(walk)) == len(walk)
        for a, b in zip(walk, walk[1:]):
            assert SQUARE_WITH_DIAGONAL[a - 1][b - 1] == 1


def test_walks_reject_non_square_matrix():
    with pytest.raises(ValueError):
        walks_of_length([[0, 1], [1]], 1)


def test_walks_reject_negative_length():
    with pytest.raises(ValueError):
        walks_of_length([[0]], -1)