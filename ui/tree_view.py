# ui/tree_view.py

from __future__ import annotations

import wx
from typing import Optional

# -----------------------------------------------------------------------------
# project imports
# -----------------------------------------------------------------------------

from core.log import Log
from core.drop_resolver import DropZone
from ui.constants import INDENT_W, GUTTER_W, PADDING, DEFAULT_ROW_H
from ui.drag_config import DragConfig
from ui.drag_session import DragSession
from ui.flat_tree import FlatTree
from ui.index import LayoutIndex
from ui.mouse import (
    handle_left_down,
    handle_left_up,
    handle_motion,
    handle_capture_lost,
    handle_mousewheel,
    row_hit_at,
)
from ui.paint import DEFAULT_BG_COLOR, paint_background, paint_rows
from ui.scroll import WxScrollAnchor, scroll_y_px, soft_ensure_visible
from ui.timers import WxScheduler

# =============================================================================
class TreeDragView(wx.ScrolledWindow):
    """
    Pixel-scrolled view of a node forest with drag-and-drop reordering.

    Rows come from a FlatTree; every drag gesture is handed to a DragSession
    which owns the drop-zone logic, the hover-expand timer and auto-scroll.
    """

    def __init__(self, parent: wx.Window, root, config: Optional[DragConfig] = None):
        super().__init__(parent, style=wx.BORDER_SIMPLE | wx.WANTS_CHARS)

        self.root = root
        self.config = config or DragConfig()

        # layout constants
        self.INDENT_W = INDENT_W
        self.GUTTER_W = GUTTER_W
        self.PADDING = PADDING
        self.ROW_H = DEFAULT_ROW_H

        # layout index + scroll anchor must exist before the first flatten
        self._index: LayoutIndex = LayoutIndex()
        self.anchor = WxScrollAnchor(self, on_scrolled=self.on_auto_scrolled)
        self.flat_tree = FlatTree(root, on_change=self._on_rows_changed)

        # selection + press state
        self.selected_node = None
        self._press = None
        self._last_pointer_y: Optional[int] = None

        # drop feedback, driven by the session
        self.drop_target = None
        self.drop_zone: Optional[DropZone] = None
        self.tap_toggle_masked = False

        self.session = DragSession(
            root,
            self.flat_tree,
            WxScheduler(),
            anchor=self.anchor,
            config=self.config,
            on_decoration=self._on_decoration,
            on_tap_mask=self._on_tap_mask,
            on_rejected=self._on_rejected,
            on_end=self._on_drag_end,
        )

        # appearance + scrolling
        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)
        self.SetDoubleBuffered(True)
        self.SetBackgroundColour(DEFAULT_BG_COLOR)
        self.SetScrollRate(0, 1)

        self._font = self.GetFont()
        self._bold = wx.Font(
            self._font.GetPointSize(),
            self._font.GetFamily(),
            wx.FONTSTYLE_NORMAL,
            wx.FONTWEIGHT_BOLD,
        )
        self.ROW_H = max(DEFAULT_ROW_H, self.GetTextExtent("Ag")[1] + 2 * PADDING)
        self._on_rows_changed()

        self.Bind(wx.EVT_PAINT, self._on_paint)
        self.Bind(wx.EVT_SIZE, self._on_size)
        self.Bind(wx.EVT_LEFT_DOWN, self._on_left_down)
        self.Bind(wx.EVT_LEFT_UP, self._on_left_up)
        self.Bind(wx.EVT_MOTION, self._on_motion)
        self.Bind(wx.EVT_MOUSEWHEEL, self._on_mousewheel)
        self.Bind(wx.EVT_MOUSE_CAPTURE_LOST, self._on_capture_lost)
        self.Bind(wx.EVT_WINDOW_DESTROY, self._on_destroy)

    # ------------------------------------------------------------------ #
    # rows / selection
    # ------------------------------------------------------------------ #

    def _on_rows_changed(self) -> None:
        """FlatTree re-flattened: re-layout, and tell the auto-scroller the position was reset."""
        self._index.rebuild(self.flat_tree.rows, lambda _row: self.ROW_H)
        self.SetVirtualSize((-1, self._index.content_height()))
        self.anchor.reattach()
        self.Refresh(False)

    def select_node(self, node) -> None:
        if node is self.selected_node:
            return
        self.selected_node = node
        self.Refresh(False)

    def ensure_node_visible(self, node) -> None:
        idx = self.flat_tree.find_row_index(node)
        if idx is not None:
            soft_ensure_visible(self, idx)

    def SetStatusText(self, text: str):
        frame = self.GetTopLevelParent()
        if hasattr(frame, "SetStatusText"):
            frame.SetStatusText(text)

    # ------------------------------------------------------------------ #
    # drag session callbacks
    # ------------------------------------------------------------------ #

    def _on_decoration(self, target, zone: Optional[DropZone]) -> None:
        self.drop_target = target
        self.drop_zone = zone
        self.Refresh(False)

    def _on_tap_mask(self, masked: bool) -> None:
        self.tap_toggle_masked = masked
        self.Refresh(False)

    def _on_rejected(self, dragged, _placement) -> None:
        # Rejected drops stay silent in the view; only the status bar notes it.
        self.SetStatusText(f"Can't move {dragged.data} there.")

    def _on_drag_end(self, committed: bool) -> None:
        if committed:
            self.SetStatusText("Moved.")
        self.Refresh(False)

    def on_auto_scrolled(self) -> None:
        """Rows slid under a stationary pointer; re-evaluate the hover target."""
        if self.session.active and self._last_pointer_y is not None:
            y = self._last_pointer_y
            self.session.move(y, row_hit_at(self, y))

    # ------------------------------------------------------------------ #
    # painting
    # ------------------------------------------------------------------ #

    def _on_paint(self, _evt: wx.PaintEvent):
        dc = wx.AutoBufferedPaintDC(self)
        gc = wx.GraphicsContext.Create(dc)
        ch = self.GetClientSize().height

        paint_background(self, gc, ch)

        i0, y_into = self._index.find_row_at_y(scroll_y_px(self))
        if 0 <= i0 < len(self.flat_tree.rows):
            paint_rows(self, gc, i0, -y_into, ch)

    # ------------------------------------------------------------------ #
    # event dispatch
    # ------------------------------------------------------------------ #

    def _on_left_down(self, evt):
        if handle_left_down(self, evt):
            return
        evt.Skip()

    def _on_left_up(self, evt):
        if handle_left_up(self, evt):
            return
        evt.Skip()

    def _on_motion(self, evt):
        if handle_motion(self, evt):
            return
        evt.Skip()

    def _on_mousewheel(self, evt):
        if handle_mousewheel(self, evt):
            return
        evt.Skip()

    def _on_capture_lost(self, evt):
        handle_capture_lost(self, evt)

    def _on_size(self, evt: wx.SizeEvent):
        self.Refresh(False)
        evt.Skip()

    def _on_destroy(self, evt):
        if evt.GetEventObject() is self:
            Log.debug("Tree view destroyed; disposing drag session.", 2)
            self.session.dispose()
        evt.Skip()
