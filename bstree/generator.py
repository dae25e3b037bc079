"""
Insertion-order generators for building trees of a known shape.

balanced_order() yields the values so that plain insertion produces a
height-balanced tree; ascending_order() produces the degenerate
right-leaning chain; shuffled_order() gives a reproducible random order.
"""

import random
from typing import Any, Iterable, List, Optional


def balanced_order(values: Iterable[Any]) -> List[Any]:
    """Return values ordered median-first, recursively, for each half.

    Inserting distinct values in this order yields a balanced tree.
    """
    ordered = sorted(values)
    result: List[Any] = []

    def _emit(lo: int, hi: int) -> None:
        if lo > hi:
            return
        mid = (lo + hi) // 2
        result.append(ordered[mid])
        _emit(lo, mid - 1)
        _emit(mid + 1, hi)

    _emit(0, len(ordered) - 1)
    return result


def ascending_order(values: Iterable[Any]) -> List[Any]:
    return sorted(values)


def shuffled_order(values: Iterable[Any], seed: Optional[int] = None) -> List[Any]:
    """Return the values in a random order; the same seed gives the same order."""
    result = list(values)
    random.Random(seed).shuffle(result)
    return result
