
import os
import time
from typing import List

from bstree import BinarySearchTree
from bstree.generator import ascending_order, balanced_order, shuffled_order

DEFAULT_VALUES = "5,3,8,1,4,7,9"
DEMO_VALUES = os.environ.get("BSTREE_DEMO_VALUES", DEFAULT_VALUES)
DEMO_SEED = os.environ.get("BSTREE_DEMO_SEED", "0")


def parse_values(raw: str) -> List[int]:
    """Parse comma-separated integers, skipping (and reporting) bad entries."""
    values: List[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            values.append(int(part))
        except ValueError:
            print(f"[config] Skipping non-integer value: {part!r}")
    return values


def parse_seed(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        print(f"[config] Invalid seed {raw!r}; using 0")
        return 0


def describe(label: str, tree: BinarySearchTree) -> None:
    print(f"--- {label} ---")
    print(f"  pre-order:      {tree.dfs_pre_order()}")
    print(f"  in-order:       {tree.dfs_in_order()}")
    print(f"  post-order:     {tree.dfs_post_order()}")
    print(f"  bfs:            {tree.bfs()}")
    print(f"  height:         {tree.height()}")
    print(f"  balanced:       {tree.is_balanced()}")
    print(f"  second highest: {tree.find_second_highest()}")


def run_smoke_test():
    print("--- BinarySearchTree smoke test ---")
    values = parse_values(DEMO_VALUES)
    if not values:
        print("No values to insert.")
        return

    start_time = time.time()
    tree = BinarySearchTree(values)
    end_time = time.time()
    print(f"Inserted {len(tree)} values in {end_time - start_time:.4f}s")
    describe("As given", tree)

    describe("Balanced order", BinarySearchTree(balanced_order(values)))
    describe("Ascending order", BinarySearchTree(ascending_order(values)))
    seed = parse_seed(DEMO_SEED)
    describe(f"Shuffled (seed={seed})", BinarySearchTree(shuffled_order(values, seed)))

    target = values[0]
    node = tree.find(target)
    print(f"find({target}) -> {node}")
    removed = tree.remove(target)
    print(f"remove({target}) -> {removed}; in-order now {tree.dfs_in_order()}")
    print(f"find({target}) after remove -> {tree.find(target)}")


if __name__ == "__main__":
    run_smoke_test()
