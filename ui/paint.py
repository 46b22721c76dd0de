'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import wx

from core.drop_resolver import DropZone

DEFAULT_BG_COLOR = wx.Colour(240, 240, 255)
DRAGGED_FG_COLOR = wx.Colour(150, 150, 160)
DROP_LINE_COLOR = wx.Colour(60, 60, 90)
DROP_LINE_W = 2

def paint_background(view, gc: wx.GraphicsContext, client_h: int) -> None:
    """Fill full client area with the background color."""
    w = view.GetClientSize().width

    bg = view.GetBackgroundColour()
    if not bg.IsOk():
        bg = DEFAULT_BG_COLOR

    gc.SetBrush(wx.Brush(bg))
    gc.SetPen(wx.Pen(bg))
    gc.DrawRectangle(0, 0, w, client_h)

def _caret_for(node) -> str:
    if node.is_leaf:
        return "•"
    return "▼" if node.is_expanded else "▶"

def paint_drop_indicator(gc: wx.GraphicsContext, rect: wx.Rect, zone: DropZone, indent: int = 0) -> None:
    """Top line for ABOVE, outline for INSIDE, bottom line for BELOW, indented bottom line for INSIDE_FIRST."""
    gc.SetPen(wx.Pen(DROP_LINE_COLOR, DROP_LINE_W))
    gc.SetBrush(wx.TRANSPARENT_BRUSH)
    if zone is DropZone.ABOVE:
        gc.StrokeLine(rect.x, rect.y + 1, rect.x + rect.width, rect.y + 1)
    elif zone is DropZone.BELOW:
        y = rect.y + rect.height - 1
        gc.StrokeLine(rect.x, y, rect.x + rect.width, y)
    elif zone is DropZone.INSIDE_FIRST:
        y = rect.y + rect.height - 1
        gc.StrokeLine(rect.x + indent, y, rect.x + rect.width, y)
    else:
        gc.DrawRectangle(rect.x + 1, rect.y + 1, rect.width - 2, rect.height - 2)

def paint_rows(view, gc: wx.GraphicsContext, first_idx: int, y0: int, max_h: int) -> int:
    """
    Draw rows starting at first_idx, placing that row's top at window Y y0,
    and continue until we reach max_h. Returns the Y coordinate just past
    the last painted row.
    """
    rows = view.flat_tree.rows
    if first_idx < 0 or first_idx >= len(rows):
        return max(0, y0)

    w = view.GetClientSize().width
    fg = wx.SystemSettings.GetColour(wx.SYS_COLOUR_WINDOWTEXT)
    sel_bg = wx.SystemSettings.GetColour(wx.SYS_COLOUR_HIGHLIGHT)
    sel_fg = wx.SystemSettings.GetColour(wx.SYS_COLOUR_HIGHLIGHTTEXT)
    dragged = view.session.dragged

    y = y0
    i = first_idx
    while i < len(rows) and y < max_h:
        row = rows[i]
        h = view._index.row_height(i)
        rect = wx.Rect(0, y, w, h)

        color = fg
        if row.node is view.selected_node:
            gc.SetBrush(wx.Brush(sel_bg))
            gc.SetPen(wx.Pen(sel_bg))
            gc.DrawRectangle(rect.x, rect.y, rect.width, rect.height)
            color = sel_fg
        if row.node is dragged:
            color = DRAGGED_FG_COLOR

        x0 = view.PADDING + row.level * view.INDENT_W
        ty = y + view.PADDING
        # The hovered row's caret is inert while its ABOVE band is targeted.
        caret_color = color
        if view.tap_toggle_masked and row.node is view.drop_target:
            caret_color = DRAGGED_FG_COLOR
        gc.SetFont(view._bold if not row.node.is_leaf else view._font, caret_color)
        gc.DrawText(_caret_for(row.node), x0, ty)
        gc.SetFont(view._font, color)
        gc.DrawText(str(row.node.data), x0 + view.GUTTER_W, ty)

        if row.node is view.drop_target and view.drop_zone is not None:
            paint_drop_indicator(gc, rect, view.drop_zone, x0 + view.INDENT_W)

        y += h
        i += 1

    return y
