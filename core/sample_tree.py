'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import random
from typing import Optional

from core.tree_node import TreeNode

__all__ = ["build_sample_forest"]

def _populate(node: TreeNode, level: int, max_depth: int, rng: random.Random,
              min_children: int, counter: list) -> None:
    if level >= max_depth:
        return

    for _ in range(min_children + rng.randint(0, 2)):
        counter[0] += 1
        child = node.add_child(TreeNode(f"Node {counter[0]}"))
        _populate(child, level + 1, max_depth, rng, 1, counter)

def build_sample_forest(seed: Optional[int] = None, max_depth: int = 3,
                        top_level: int = 4) -> TreeNode:
    """
    Build a random forest under a fresh virtual root for the demo.
    The same seed always yields the same shape and labels. Everything starts collapsed.
    """
    if max_depth < 1:
        raise ValueError("max_depth must be at least 1")

    rng = random.Random(seed)
    root = TreeNode.virtual_root()
    _populate(root, 0, max_depth, rng, top_level, [0])
    return root
