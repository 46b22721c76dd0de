# ui/flat_tree.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

from __future__ import annotations
from typing import Callable, List, Optional, Set

from core.log import Log
from ui.model import flatten_tree
from ui.types import VisibleRow


__all__ = ["FlatTree"]

class FlatTree:
    """
    List controller for the demo view: keeps the flat row list in sync with
    the node forest and owns expand / collapse / rebuild.

    `on_change` is called after every re-flatten so the view can re-layout.
    """

    def __init__(self, root, on_change: Optional[Callable[[], None]] = None):
        self.root = root
        self.on_change = on_change
        self.rows: List[VisibleRow] = []
        self._visible: Set[int] = set()
        self.rebuild()

    # ------------------------------------------------------------------ #
    # Flattening
    # ------------------------------------------------------------------ #

    def rebuild(self) -> None:
        """Re-flatten the whole forest."""
        self.rows = flatten_tree(self.root)
        self._visible = {id(row.node) for row in self.rows}
        Log.debug(f"Rebuilt flat tree: {len(self.rows)} rows.", 3)
        if self.on_change is not None:
            self.on_change()

    def is_visible(self, node) -> bool:
        return id(node) in self._visible

    def find_row_index(self, node) -> Optional[int]:
        """Find row index for node."""
        for i, row in enumerate(self.rows):
            if row.node is node:
                return i
        return None

    # ------------------------------------------------------------------ #
    # Collapse / Show / Toggle display of children.
    # ------------------------------------------------------------------ #

    def set_collapsed_state(self, node, collapsed: bool) -> bool:
        """Set the collapsed state of a node. Returns True if state changed."""
        if node is self.root:
            return False
        if node.is_expanded == (not collapsed):
            return False  # No change needed

        node.is_expanded = not collapsed
        self.rebuild()
        return True

    def expand(self, node) -> None:
        self.set_collapsed_state(node, False)

    def collapse(self, node) -> None:
        self.set_collapsed_state(node, True)

    def toggle_collapse(self, node) -> bool:
        """Toggle collapse state of node."""
        if node.is_leaf:
            return False
        return self.set_collapsed_state(node, node.is_expanded)

