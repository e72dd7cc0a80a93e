import pytest
from hypothesis import given, strategies as st

from graphwork.mex import max_path_mex


@st.composite
def valued_trees(draw):
    size = draw(st.integers(min_value=1, max_value=12))
    edges = [(draw(st.integers(min_value=0, max_value=i - 1)), i) for i in range(1, size)]
    values = {i: draw(st.integers(min_value=0, max_value=15)) for i in range(size)}
    return values, edges


def test_single_zero_node():
    assert max_path_mex({1: 0}, [], 1) == 1


def test_single_nonzero_node():
    assert max_path_mex({1: 1}, [], 1) == 0


def test_values_in_separate_branches_do_not_combine():
    values = {1: 0, 2: 1, 3: 2}
    assert max_path_mex(values, [(1, 2), (1, 3)], 1) == 2


def test_duplicate_values_on_path():
    values = {1: 0, 2: 0, 3: 1}
    assert max_path_mex(values, [(1, 2), (2, 3)], 1) == 2


def test_duplicate_leaving_keeps_value_present():
    values = {1: 0, 2: 1, 3: 1, 4: 2}
    edges = [(1, 2), (2, 3), (2, 4)]
    assert max_path_mex(values, edges, 1) == 3


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        max_path_mex({1: 0, 2: -1}, [(1, 2)], 1)


@given(st.integers(min_value=1, max_value=30))
def test_path_holding_every_value_in_order(size):
    values = {i: i for i in range(size)}
    edges = [(i, i + 1) for i in range(size - 1)]
    assert max_path_mex(values, edges, 0) == size


@given(valued_trees())
def test_result_is_bounded_and_absent_below(tree):
    values, edges = tree
    result = max_path_mex(values, edges, 0)
    assert 0 <= result <= len(values)
    if result > 0:
        assert set(range(result)) <= set(values.values())
    if 0 not in values.values():
        assert result == 0