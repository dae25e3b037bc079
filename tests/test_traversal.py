from hypothesis import given, strategies as st

from bstree import BinarySearchTree


def test_dfs_pre_order(sample_tree):
    assert sample_tree.dfs_pre_order() == [5, 3, 1, 4, 8, 7, 9]


def test_dfs_in_order(sample_tree):
    assert sample_tree.dfs_in_order() == [1, 3, 4, 5, 7, 8, 9]


def test_dfs_post_order(sample_tree):
    assert sample_tree.dfs_post_order() == [1, 4, 3, 7, 9, 8, 5]


def test_bfs(sample_tree):
    assert sample_tree.bfs() == [5, 3, 8, 1, 4, 7, 9]


def test_bfs_on_chain(chain_tree):
    assert chain_tree.bfs() == [1, 2, 3, 4, 5]


def test_traversals_on_empty_tree(empty_tree):
    assert empty_tree.dfs_pre_order() == []
    assert empty_tree.dfs_in_order() == []
    assert empty_tree.dfs_post_order() == []
    assert empty_tree.bfs() == []
    assert list(empty_tree) == []


def test_traversals_return_fresh_lists(sample_tree):
    first = sample_tree.bfs()
    first.append(99)
    assert sample_tree.bfs() == [5, 3, 8, 1, 4, 7, 9]
    assert isinstance(sample_tree.dfs_in_order(), list)


def test_repeated_traversals_are_identical(sample_tree):
    for method in (sample_tree.dfs_pre_order, sample_tree.dfs_in_order,
                   sample_tree.dfs_post_order, sample_tree.bfs):
        assert method() == method()


def test_iteration_and_positions_are_in_order(sample_tree):
    assert list(sample_tree) == [1, 3, 4, 5, 7, 8, 9]
    assert [p.get_element() for p in sample_tree.positions()] == [1, 3, 4, 5, 7, 8, 9]


def test_iteration_survives_mutation(sample_tree):
    seen = []
    for value in sample_tree:
        seen.append(value)
        sample_tree.remove(value)
    assert seen == [1, 3, 4, 5, 7, 8, 9]
    assert sample_tree.is_empty()


@given(st.lists(st.integers()))
def test_in_order_is_sorted(xs):
    tree = BinarySearchTree(xs)
    assert tree.dfs_in_order() == sorted(xs)


@given(st.lists(st.integers()))
def test_every_traversal_visits_every_value(xs):
    tree = BinarySearchTree(xs)
    for order in (tree.dfs_pre_order(), tree.dfs_post_order(), tree.bfs()):
        assert sorted(order) == sorted(xs)
    if xs:
        assert tree.dfs_pre_order()[0] == xs[0]
        assert tree.bfs()[0] == xs[0]
        assert tree.dfs_post_order()[-1] == xs[0]
