import pytest

from bstree import BinarySearchTree

SAMPLE_VALUES = [5, 3, 8, 1, 4, 7, 9]


@pytest.fixture
def empty_tree():
    return BinarySearchTree()


@pytest.fixture
def sample_tree():
    """Balanced seven-node tree: 5 at the root, 3 and 8 below it."""
    return BinarySearchTree(SAMPLE_VALUES)


@pytest.fixture
def chain_tree():
    return BinarySearchTree([1, 2, 3, 4, 5])


def assert_bst(tree):
    """Check ordering and parent links of every node in tree."""
    def _check(node, lo, hi):
        if node is None:
            return
        value = node.get_element()
        if lo is not None:
            assert value >= lo
        if hi is not None:
            assert value < hi
        for child in (node.get_left(), node.get_right()):
            if child is not None:
                assert child.get_parent() is node
        _check(node.get_left(), lo, value)
        _check(node.get_right(), value, hi)

    root = tree.root()
    if root is not None:
        assert root.get_parent() is None
    _check(root, None, None)
