# ui/mouse.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

from __future__ import annotations

import wx
from typing import Optional

from core.log import Log
from ui.scroll import scroll_y_px
from ui.types import RowBounds, RowHit, Viewport

# Pixels the pointer must travel with the button down before a press becomes a drag.
DRAG_THRESHOLD_PX = 4

# ---------------------------------------------------------------------------
# row hit-testing helpers
# ---------------------------------------------------------------------------

def row_at_window_y(view, ywin: int) -> int:
    """Map a window-Y coordinate to a row index via LayoutIndex (-1 = none)."""
    if not view.flat_tree.rows:
        return -1
    idx, _ = view._index.find_row_at_y(scroll_y_px(view) + int(ywin))
    return int(idx)

def row_hit_at(view, ywin: int) -> Optional[RowHit]:
    """Row under window-Y with its bounds in window coordinates, fresh each call."""
    idx = row_at_window_y(view, ywin)
    if idx < 0:
        return None
    top, bottom = view._index.row_span(idx)
    scroll_y = scroll_y_px(view)
    bounds = RowBounds(top=float(top - scroll_y), height=float(bottom - top))
    return RowHit(node=view.flat_tree.rows[idx].node, bounds=bounds)

def window_viewport(view) -> Viewport:
    return Viewport(top=0.0, height=float(view.GetClientSize().height))

def caret_hit(view, row, pos: wx.Point) -> bool:
    """True if x lands on the expand/collapse caret of row."""
    left = view.PADDING + row.level * view.INDENT_W
    return left <= pos.x < left + view.GUTTER_W

# ---------------------------------------------------------------------------
# event handlers
# ---------------------------------------------------------------------------

def handle_left_down(view, evt: wx.MouseEvent) -> bool:
    """
    • caret click → collapse/expand
    • row click → select, remember press for a potential drag
    • empty space → clear selection
    """
    pos = evt.GetPosition()
    idx = row_at_window_y(view, pos.y)

    if idx < 0:
        view.select_node(None)
        view._press = None
        return True

    row = view.flat_tree.rows[idx]

    if caret_hit(view, row, pos) and not row.node.is_leaf:
        view.flat_tree.toggle_collapse(row.node)
        view.select_node(row.node)
        view.SetFocus()
        return True

    view.select_node(row.node)
    view._press = (row.node, pos.y)
    view.SetFocus()
    return True

def handle_motion(view, evt: wx.MouseEvent) -> bool:
    if not evt.LeftIsDown():
        return False

    pos = evt.GetPosition()
    view._last_pointer_y = pos.y

    session = view.session
    if not session.active:
        if view._press is None:
            return False
        node, y0 = view._press
        if abs(pos.y - y0) < DRAG_THRESHOLD_PX:
            return False
        view._press = None
        if not session.start(node):
            return False
        if not view.HasCapture():
            view.CaptureMouse()
        Log.debug(f"Dragging {node!r}.", 2)

    session.move(pos.y, row_hit_at(view, pos.y), window_viewport(view))
    return True

def handle_left_up(view, evt: wx.MouseEvent) -> bool:
    view._press = None
    session = view.session
    if not session.active:
        return False

    # Refresh hover from the release point in case no motion preceded it.
    pos = evt.GetPosition()
    session.move(pos.y, row_hit_at(view, pos.y))
    dragged = session.dragged
    placement = session.drop()
    if view.HasCapture():
        view.ReleaseMouse()

    if placement is not None:
        view.select_node(dragged)
        view.ensure_node_visible(dragged)
    return True

def handle_capture_lost(view, _evt) -> bool:
    view._press = None
    view.session.cancel()
    return True

def handle_mousewheel(view, evt: wx.MouseEvent) -> bool:
    """Scroll ~48 px per wheel notch."""
    rotation = evt.GetWheelRotation()
    delta = evt.GetWheelDelta() or 120

    unit_x, unit_y = view.GetScrollPixelsPerUnit()
    notches = rotation / float(delta)
    pixels = -int(notches * 48)

    start_x, start_y_units = view.GetViewStart()
    new_y_units = max(0, start_y_units + pixels // (unit_y or 1))

    view.Scroll(start_x, new_y_units)
    return True
