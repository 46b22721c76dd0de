'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import List

from ui.types import VisibleRow

def _gather_children(node, level: int, out: List[VisibleRow]) -> None:
    """Append node's children (and, where expanded, their subtrees) to out."""
    for index, child in enumerate(node.children):
        out.append(VisibleRow(node=child, level=level, index=index, parent=node))
        # Skip children if this node is collapsed
        if child.is_expanded and not child.is_leaf:
            _gather_children(child, level + 1, out)

def flatten_tree(root) -> List[VisibleRow]:
    """
    Flatten the forest under `root` into display rows, excluding root itself.
    Top-level nodes are level 0. Rows are fresh objects on every call.
    """
    rows: List[VisibleRow] = []
    _gather_children(root, 0, rows)
    return rows
