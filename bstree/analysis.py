"""
Shape queries over linked binary tree nodes: height, balance, second highest.
"""

from typing import Any, Dict, List, Optional, Tuple

# (balanced, height) for one subtree
BalanceResult = Tuple[bool, int]


def check_balance(node: Optional[Any]) -> BalanceResult:
    """Return whether the subtree at node is height-balanced, and its height.

    An empty subtree is balanced with height -1, so a single node has
    height 0. Subtrees are settled bottom-up with an explicit stack. The
    first unbalanced node ends the pass; its own height is reported, which
    is then only a lower bound for the whole subtree.
    """
    if node is None:
        return True, -1

    heights: Dict[int, int] = {}

    def _height(child) -> int:
        return -1 if child is None else heights.pop(id(child))

    stack: List[Tuple[Any, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if not expanded:
            stack.append((current, True))
            if current.get_right() is not None:
                stack.append((current.get_right(), False))
            if current.get_left() is not None:
                stack.append((current.get_left(), False))
            continue

        left_height = _height(current.get_left())
        right_height = _height(current.get_right())
        height = 1 + max(left_height, right_height)
        if abs(left_height - right_height) > 1:
            return False, height
        heights[id(current)] = height

    return True, heights[id(node)]


def subtree_height(node: Optional[Any]) -> int:
    """Return the height of the subtree at node (-1 when empty)."""
    height = -1
    level = [node] if node is not None else []
    while level:
        height += 1
        level = [child for parent in level
                 for child in (parent.get_left(), parent.get_right())
                 if child is not None]
    return height


def second_highest(root: Optional[Any]) -> Optional[Any]:
    """Walk the right spine from root and return the element before its end.

    Returns None if the walk never leaves root. A left subtree hanging off
    the last spine node is ignored, so for root=10, right=20, 20.left=15
    this returns 10.
    """
    walk = root
    previous = None
    while walk is not None and walk.get_right() is not None:
        previous = walk
        walk = walk.get_right()
    return previous.get_element() if previous is not None else None
