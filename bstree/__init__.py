from bstree.indexing import BinarySearchTree, Node, Position

__all__ = ["BinarySearchTree", "Node", "Position"]
