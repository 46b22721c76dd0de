# core/cycle_guard.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Optional

from core.log import Log
from core.tree_node import NodeLike
from core.tree_utils import find_child_index, is_descendant_of, parent_or_root

__all__ = ["is_valid_move", "is_noop_move"]

def is_noop_move(dragged: NodeLike, new_parent: NodeLike, index: int,
                 root: Optional[NodeLike] = None) -> bool:
    """
    True if inserting dragged into new_parent at `index` (an index into the
    sibling list before dragged is removed) leaves it exactly where it is.
    Pass `root` for hosts whose top-level nodes report no parent.
    """
    current_parent = dragged.parent if root is None else parent_or_root(dragged, root)
    if current_parent is None or current_parent is not new_parent:
        return False

    current = find_child_index(new_parent, dragged)
    if current < 0:
        return False

    # Slot `current` is before dragged, slot `current + 1` is right after it;
    # both collapse to the same position once dragged is removed.
    return index in (current, current + 1)

def is_valid_move(dragged: NodeLike, new_parent: NodeLike, index: Optional[int] = None,
                  root: Optional[NodeLike] = None) -> bool:
    """
    Check that making dragged a child of new_parent is a real, acyclic move.

    Rejects self-parenting, dropping into dragged's own subtree, and (when
    `index` is given) a reinsertion at dragged's current position.
    """
    if getattr(dragged, "is_virtual_root", False):
        Log.debug("Rejected move: the virtual root is not draggable.", 1)
        return False

    if new_parent is dragged:
        Log.debug(f"Rejected move: {dragged!r} onto itself.", 1)
        return False

    # Walk up from the new parent; meeting dragged means a cycle.
    if is_descendant_of(new_parent, dragged):
        Log.debug(f"Rejected move: {new_parent!r} is inside {dragged!r}.", 1)
        return False

    if index is not None and is_noop_move(dragged, new_parent, index, root):
        Log.debug(f"Rejected move: {dragged!r} already at index {index} of {new_parent!r}.", 1)
        return False

    return True
