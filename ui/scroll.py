from __future__ import annotations

import wx

# Scroll behavior constants
SCROLL_MARGIN = 0  # Pixels to leave at edge when scrolling

def scroll_y_px(view) -> int:
    """Current vertical scroll position of a wx.ScrolledWindow in pixels."""
    _, scroll_y = view.GetViewStart()
    return scroll_y * view.GetScrollPixelsPerUnit()[1]

def content_height(view) -> int:
    """Total content height in pixels, from the view's LayoutIndex."""
    return int(view._index.content_height())

def clamp_scroll_y(view, y: int) -> int:
    """Clamp pixel scroll position to [0 .. max_scroll]."""
    ch = view.GetClientSize().height
    h = max(0, content_height(view) - ch)
    return max(0, min(y, h))

def scroll_to_px(view, y: int) -> None:
    unit_y = view.GetScrollPixelsPerUnit()[1] or 1
    view.Scroll(-1, clamp_scroll_y(view, int(y)) // unit_y)

def soft_ensure_visible(view, idx: int) -> None:
    """Ensure row idx is visible using pixel-based scrolling."""
    n = len(view.flat_tree.rows)
    if n <= 0 or not (0 <= idx < n):
        return

    ch = view.GetClientSize().height
    top, bottom = view._index.row_span(idx)
    h = bottom - top
    cur = scroll_y_px(view)

    # If above, scroll up to top; if below, scroll so bottom fits;
    # else no change.
    if top < cur or h >= ch:
        new_y = top - SCROLL_MARGIN
    elif bottom > (cur + ch):
        new_y = bottom - ch + SCROLL_MARGIN
    else:
        return

    scroll_to_px(view, new_y)


class WxScrollAnchor:
    """
    Scroll anchor over a wx.ScrolledWindow for the auto-scroller.

    wx keeps no notion of a scroll-position owner, so `authority` is a
    generation number the view bumps whenever it resets its virtual size;
    a re-layout clamping the position then reads as a re-attach rather
    than as the user scrolling.
    """

    def __init__(self, view: wx.ScrolledWindow, on_scrolled=None):
        self.view = view
        self.on_scrolled = on_scrolled
        self._generation = 0

    def reattach(self) -> None:
        self._generation += 1

    @property
    def authority(self) -> int:
        return self._generation

    @property
    def offset(self) -> float:
        return float(scroll_y_px(self.view))

    @property
    def min_offset(self) -> float:
        return 0.0

    @property
    def max_offset(self) -> float:
        return float(max(0, content_height(self.view) - self.view.GetClientSize().height))

    def animate_scroll_to(self, offset: float) -> None:
        scroll_to_px(self.view, int(round(offset)))
        self.view.Refresh(False)
        if self.on_scrolled is not None:
            self.on_scrolled()
