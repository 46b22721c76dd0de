# core/drop_resolver.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.log import Log
from core.tree_node import NodeLike
from core.tree_utils import parent_or_root, move_node

__all__ = ["DropZone", "Placement", "resolve", "apply_drop", "reveal_parent"]


class DropZone(Enum):
    """Where a drop lands relative to the target row."""
    ABOVE = "above"                # previous sibling of target
    INSIDE = "inside"              # last child of target
    INSIDE_FIRST = "inside_first"  # first child of target
    BELOW = "below"                # next sibling of target


@dataclass(slots=True, frozen=True)
class Placement:
    """
    A resolved drop.

    • parent – node that will own the dragged node
    • index  – insertion index in parent's pre-removal child list
    • zone   – zone the placement was derived from
    • target – row the pointer was over
    """
    parent: NodeLike
    index: int
    zone: DropZone
    target: NodeLike

    def fresh_index(self) -> int:
        """Re-derive the index from the tree as it is right now."""
        if self.zone is DropZone.INSIDE:
            return len(self.target.children)
        if self.zone is DropZone.INSIDE_FIRST:
            return 0
        if self.zone is DropZone.ABOVE:
            return self.target.index
        return self.target.index + 1


def resolve(zone: DropZone, target: NodeLike, root: NodeLike) -> Placement:
    """Turn a zone over `target` into a (parent, index) edit."""
    if zone is DropZone.INSIDE:
        # Append so repeated inside-drops keep drop order.
        return Placement(target, len(target.children), zone, target)
    if zone is DropZone.INSIDE_FIRST:
        return Placement(target, 0, zone, target)

    parent = parent_or_root(target, root)
    if zone is DropZone.ABOVE:
        return Placement(parent, target.index, zone, target)
    return Placement(parent, target.index + 1, zone, target)


def reveal_parent(parent: NodeLike, controller) -> None:
    """Expand a collapsed parent; otherwise re-flatten so the insertion shows."""
    if parent.is_expanded:
        controller.rebuild()
    else:
        controller.expand(parent)


def apply_drop(dragged: NodeLike, placement: Placement, controller) -> int:
    """
    Perform a validated placement and make the result visible.

    The target index is looked up again after `dragged` is detached, since
    removing an earlier sibling shifts the target down by one.
    Returns the final index of `dragged` under its new parent.
    """
    final_index = move_node(dragged, placement.parent, placement.fresh_index)
    Log.debug(
        f"Moved {dragged!r} {placement.zone.value} {placement.target!r} "
        f"-> {placement.parent!r}[{final_index}]", 1
    )
    reveal_parent(placement.parent, controller)
    return final_index
