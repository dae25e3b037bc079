"""
Depth-first and breadth-first walks over linked binary tree nodes.

Nodes are anything exposing get_element(), get_left() and get_right().
Each walk calls visit(node) once per node; collect() turns a walk into a
list of elements. Walks keep their own stack, so a degenerate chain of
any length is fine.
"""

from collections import deque
from typing import Any, Callable, List, Optional

Visit = Callable[[Any], None]


# ------------------ Depth-first ------------------
def pre_order(root: Optional[Any], visit: Visit) -> None:
    """Visit a node, then its left subtree, then its right subtree."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        visit(node)
        # right goes on first so the left subtree is popped first
        if node.get_right() is not None:
            stack.append(node.get_right())
        if node.get_left() is not None:
            stack.append(node.get_left())


def in_order(root: Optional[Any], visit: Visit) -> None:
    """Visit the left subtree, then the node, then the right subtree."""
    stack: List[Any] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.get_left()
        node = stack.pop()
        visit(node)
        node = node.get_right()


def post_order(root: Optional[Any], visit: Visit) -> None:
    """Visit both subtrees, left first, before the node itself."""
    stack = [(root, False)] if root is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            visit(node)
            continue
        stack.append((node, True))
        if node.get_right() is not None:
            stack.append((node.get_right(), False))
        if node.get_left() is not None:
            stack.append((node.get_left(), False))


# ------------------ Breadth-first ------------------
def level_order(root: Optional[Any], visit: Visit) -> None:
    """Visit nodes level by level, left to right."""
    if root is None:
        return

    queue = deque([root])
    while queue:
        node = queue.popleft()
        visit(node)
        if node.get_left() is not None:
            queue.append(node.get_left())
        if node.get_right() is not None:
            queue.append(node.get_right())


def collect(walk: Callable[[Optional[Any], Visit], None], root: Optional[Any]) -> List[Any]:
    """Run walk from root and return the visited elements as a new list."""
    order: List[Any] = []
    walk(root, lambda node: order.append(node.get_element()))
    return order
