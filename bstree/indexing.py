
import logging
import weakref
from abc import ABC, abstractmethod
from typing import Iterable, Any, Optional, List

from bstree import analysis, traversal

logger = logging.getLogger(__name__)


class Position(ABC):
    """Handle on one node of a tree; stays valid while the node is linked in."""
    __slots__ = ()

    @abstractmethod
    def get_element(self):
        """Return the value held by this node."""
        pass

class Tree(ABC):
    """Rooted tree whose nodes are handed out as Positions."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of stored values."""
        pass

    @abstractmethod
    def root(self) -> Optional[Position]:
        """Return the root node, or None for an empty tree."""
        pass

    @abstractmethod
    def parent(self, p: Position) -> Optional[Position]:
        """Return p's parent node; None for the root."""
        pass

    @abstractmethod
    def children(self, p: Position) -> Iterable[Position]:
        """Return the nodes directly below p."""
        pass

    @abstractmethod
    def num_children(self, p: Position) -> int:
        """Return how many nodes sit directly below p."""
        pass

    def is_empty(self) -> bool:
        return self.root() is None

    def is_leaf(self, p: Position) -> bool:
        return self.num_children(p) == 0

    def is_root(self, p: Position) -> bool:
        return p is self.root()

    def depth(self, p: Position) -> int:
        """Return the number of edges on the path from the root down to p."""
        levels = 0
        walk = self.parent(p)
        while walk is not None:
            levels += 1
            walk = walk.get_parent()
        return levels

class BinaryTree(Tree):
    """Tree in which every node has at most a left and a right child."""

    @abstractmethod
    def left(self, p: Position) -> Optional[Position]:
        """Return p's left child, or None."""
        pass

    @abstractmethod
    def right(self, p: Position) -> Optional[Position]:
        """Return p's right child, or None."""
        pass

    def sibling(self, p: Position) -> Optional[Position]:
        """Return the other child of p's parent; None for the root or an only child."""
        parent = self.parent(p)
        if parent is None:
            return None
        if p is self.left(parent):
            return self.right(parent)
        else:
            return self.left(parent)

class AbstractBinaryTree(BinaryTree):
    """Child counting and enumeration built on left() and right()."""

    def num_children(self, p: Position) -> int:
        count = 0
        if self.left(p) is not None:
            count += 1
        if self.right(p) is not None:
            count += 1
        return count

    def children(self, p: Position) -> Iterable[Position]:
        """Yield p's left child, then its right child, skipping empty slots."""
        if self.left(p) is not None:
            yield self.left(p)
        if self.right(p) is not None:
            yield self.right(p)



class BinarySearchTree(AbstractBinaryTree):
    """Unbalanced binary search tree; equal values are placed in the right subtree.

    Lookups that miss return None rather than raising. Nothing is rebalanced,
    so ascending input degenerates the tree into a right-leaning chain.
    """

    class _Node(Position):
        """Nested Node class that acts as a Position."""
        __slots__ = '_element', '_parent', '_left', '_right', '__weakref__'

        def __init__(self, e, parent=None):
            self._element = e
            self._parent = None
            self._left = None
            self._right = None
            self.set_parent(parent)

        def get_element(self):
            return self._element

        @property
        def val(self):
            return self._element

        def get_parent(self):
            # parent links are weak; children are owned by their parent
            return self._parent() if self._parent is not None else None

        def get_left(self): return self._left
        def get_right(self): return self._right
        def set_element(self, e): self._element = e
        def set_left(self, left): self._left = left
        def set_right(self, right): self._right = right

        def set_parent(self, parent):
            self._parent = weakref.ref(parent) if parent is not None else None

        def __repr__(self):
            return f"Node({self._element!r})"

    def __init__(self, values: Optional[Iterable[Any]] = None):
        self._root = None
        if values is not None:
            self.extend(values)

    # ------------------ Position helpers ------------------
    def _validate(self, p):
        """Validates the position and returns it as a node."""
        if not isinstance(p, self._Node):
            raise RuntimeError("Not valid position type")
        walk = p
        while walk.get_parent() is not None:
            walk = walk.get_parent()
        if walk is not self._root:
            raise RuntimeError("p is no longer in the tree")
        return p

    def _replace_child(self, parent, old, new) -> None:
        """Point parent's link (or the root) that held old at new instead."""
        if new is not None:
            new.set_parent(parent)
        if parent is None:
            self._root = new
            logger.debug("root replaced by %r", new)
        elif parent.get_left() is old:
            parent.set_left(new)
        else:
            parent.set_right(new)

    @staticmethod
    def _detach(node) -> None:
        node.set_parent(None)
        node.set_left(None)
        node.set_right(None)

    # ------------------ Accessors ------------------
    def __len__(self) -> int: return len(self.dfs_in_order())
    def root(self) -> Optional[Position]: return self._root
    def parent(self, p: Position) -> Optional[Position]: return self._validate(p).get_parent()
    def left(self, p: Position) -> Optional[Position]: return self._validate(p).get_left()
    def right(self, p: Position) -> Optional[Position]: return self._validate(p).get_right()

    def __iter__(self) -> Iterable[Any]:
        """Iterate the tree's elements in order (snapshot taken up front)."""
        return iter(self.dfs_in_order())

    def __contains__(self, value) -> bool:
        return self.find(value) is not None

    def positions(self) -> Iterable[Position]:
        """Generate the tree's positions in order (snapshot taken up front)."""
        nodes: List[Position] = []
        traversal.in_order(self._root, nodes.append)
        yield from nodes

    # ------------------ Insertion ------------------
    def insert(self, value) -> "BinarySearchTree":
        """Insert value by iterative descent. Returns the tree."""
        if self._root is None:
            self._root = self._Node(value)
            return self

        walk = self._root
        parent = None
        while walk is not None:
            parent = walk
            walk = walk.get_left() if value < walk.get_element() else walk.get_right()

        node = self._Node(value, parent)
        if value < parent.get_element():
            parent.set_left(node)
        else:
            parent.set_right(node)
        return self

    def insert_recursively(self, value) -> "BinarySearchTree":
        """Insert value by recursive descent. Same resulting tree as insert()."""

        def _insert(node, parent):
            if node is None:
                return self._Node(value, parent)
            if value < node.get_element():
                node.set_left(_insert(node.get_left(), node))
            else:
                node.set_right(_insert(node.get_right(), node))
            return node

        self._root = _insert(self._root, None)
        return self

    def extend(self, values: Iterable[Any]) -> "BinarySearchTree":
        """Insert every value of an iterable, in order."""
        for value in values:
            self.insert(value)
        return self

    # ------------------ Search ------------------
    def find(self, value) -> Optional[Position]:
        """Return the node holding value, or None."""
        walk = self._root
        while walk is not None:
            element = walk.get_element()
            if value < element:
                walk = walk.get_left()
            elif value > element:
                walk = walk.get_right()
            else:
                return walk
        return None

    def find_recursively(self, value) -> Optional[Position]:
        """Recursive counterpart of find(); always agrees with it."""
        return self._tree_search(self._root, value)

    def _tree_search(self, p, value) -> Optional[Position]:
        if p is None:
            return None
        element = p.get_element()
        if value < element:
            return self._tree_search(p.get_left(), value)
        elif value > element:
            return self._tree_search(p.get_right(), value)
        return p

    # ------------------ Traversals ------------------
    def dfs_pre_order(self) -> List[Any]:
        return traversal.collect(traversal.pre_order, self._root)

    def dfs_in_order(self) -> List[Any]:
        return traversal.collect(traversal.in_order, self._root)

    def dfs_post_order(self) -> List[Any]:
        return traversal.collect(traversal.post_order, self._root)

    def bfs(self) -> List[Any]:
        return traversal.collect(traversal.level_order, self._root)

    # ------------------ Deletion ------------------
    def remove(self, value) -> Optional[Position]:
        """Remove one node holding value and return it, or None if absent.

        A node with two children keeps its place in the tree: it takes the
        value of its in-order successor, the successor is unlinked, and the
        node itself is returned. Its element is then the successor's value,
        not the value that was asked for.
        """
        walk = self._root
        parent = None
        while walk is not None:
            element = walk.get_element()
            if value < element:
                parent = walk
                walk = walk.get_left()
            elif value > element:
                parent = walk
                walk = walk.get_right()
            else:
                break
        if walk is None:
            return None

        if self.num_children(walk) < 2:
            child = walk.get_left() if walk.get_left() is not None else walk.get_right()
            logger.debug("removing %r with %d child(ren)", walk, self.num_children(walk))
            self._replace_child(parent, walk, child)
            self._detach(walk)
            return walk

        successor = walk.get_right()
        successor_parent = walk
        while successor.get_left() is not None:
            successor_parent = successor
            successor = successor.get_left()

        logger.debug("removing %r via successor %r", walk, successor)
        walk.set_element(successor.get_element())
        # successor has no left child, so its right subtree (possibly empty) moves up
        self._replace_child(successor_parent, successor, successor.get_right())
        self._detach(successor)
        return walk

    # ------------------ Queries ------------------
    def height(self, p: Optional[Position] = None) -> int:
        """Return the height of the subtree at p (whole tree by default); -1 if empty."""
        node = self._root if p is None else self._validate(p)
        return analysis.subtree_height(node)

    def is_balanced(self) -> bool:
        """Return True if every node's subtree heights differ by at most one."""
        balanced, _ = analysis.check_balance(self._root)
        return balanced

    def find_second_highest(self) -> Optional[Any]:
        """Return the value before the maximum on the right spine, or None.

        Only the right spine is walked, so a left subtree under the maximum is
        not consulted and a root without a right child yields None.
        """
        return analysis.second_highest(self._root)


Node = BinarySearchTree._Node
