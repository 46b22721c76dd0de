# ui/auto_scroll.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Optional, Tuple

from core.log import Log
from ui.constants import (
    SCROLL_BAND_PX,
    SCROLL_MIN_STEP_PX,
    SCROLL_MAX_STEP_PX,
    SCROLL_FRAME_MS,
)
from ui.types import ScrollAnchor, Scheduler, TimerHandle

__all__ = ["AutoScrollController"]

class AutoScrollController:
    """
    Scrolls a vertical list while a drag pointer sits near its top or bottom edge.

    Each edge has a band `band_px` thick. Inside a band the offset moves one
    step per frame tick, the step growing linearly from `min_step_px` at the
    band's inner edge to `max_step_px` at (or past) the viewport edge.
    """

    def __init__(
            self,
            anchor: ScrollAnchor,
            scheduler: Scheduler,
            band_px: float = SCROLL_BAND_PX,
            min_step_px: float = SCROLL_MIN_STEP_PX,
            max_step_px: float = SCROLL_MAX_STEP_PX,
            frame_ms: int = SCROLL_FRAME_MS,
    ):
        self.anchor = anchor
        self.scheduler = scheduler
        self.band_px = float(band_px)
        self.min_step_px = float(min_step_px)
        self.max_step_px = float(max_step_px)
        self.frame_ms = int(frame_ms)

        self._ticker: Optional[TimerHandle] = None
        self._direction = 0      # -1 up, +1 down, 0 idle
        self._depth = 0.0        # how far into the band, 0 .. band
        self._band = self.band_px
        self._expected_offset: Optional[float] = None
        self._authority: Optional[object] = None

    @property
    def scrolling(self) -> bool:
        return self._ticker is not None and self._ticker.active

    @property
    def direction(self) -> int:
        return self._direction

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def update(self, pointer_y: float, viewport_top: float, viewport_height: float) -> None:
        """Feed the latest pointer position; starts, steers or stops scrolling."""
        direction, depth, band = self._band_hit(pointer_y, viewport_top, viewport_height)
        if direction == 0:
            self.stop()
            return

        self._direction = direction
        self._depth = depth
        self._band = band

        if self.scrolling:
            # The running ticker picks up the new depth/direction.
            return

        if not self._room_to_scroll(direction):
            return

        self._attach()
        self._ticker = self.scheduler.call_every(self.frame_ms, self._tick)
        Log.debug(f"Auto-scroll started ({'up' if direction < 0 else 'down'}).", 2)

    def stop(self) -> None:
        """Stop scrolling and release the ticker. Safe to call repeatedly."""
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None
            Log.debug("Auto-scroll stopped.", 2)
        self._direction = 0
        self._depth = 0.0

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _band_hit(self, pointer_y: float, top: float, height: float) -> Tuple[int, float, float]:
        """Return (direction, depth into band, band thickness) for a pointer."""
        if height <= 0:
            return (0, 0.0, self.band_px)

        # Short viewports: bands may not overlap.
        band = min(self.band_px, height / 2.0)
        from_top = pointer_y - top
        from_bottom = (top + height) - pointer_y

        if from_top < band:
            return (-1, min(band - from_top, band), band)
        if from_bottom < band:
            return (1, min(band - from_bottom, band), band)
        return (0, 0.0, band)

    def step_px(self) -> float:
        """Pixels to move on the next tick for the current depth."""
        if self._direction == 0 or self._band <= 0:
            return 0.0
        ratio = max(0.0, min(1.0, self._depth / self._band))
        return self.min_step_px + (self.max_step_px - self.min_step_px) * ratio

    def _room_to_scroll(self, direction: int) -> bool:
        offset = self.anchor.offset
        if direction < 0:
            return offset > self.anchor.min_offset
        return offset < self.anchor.max_offset

    def _attach(self) -> None:
        self._authority = self.anchor.authority
        self._expected_offset = self.anchor.offset

    def _tick(self) -> None:
        if self._direction == 0:
            self.stop()
            return

        anchor = self.anchor
        if anchor.authority != self._authority:
            # Same scrollable, new position owner: adopt it and carry on.
            Log.debug("Auto-scroll re-attached to a new scroll position.", 2)
            self._attach()
        elif anchor.offset != self._expected_offset:
            # Someone else scrolled; don't fight them.
            Log.debug("Auto-scroll yielded to an external scroll.", 1)
            self.stop()
            return

        current = anchor.offset
        target = current + self._direction * self.step_px()
        target = max(anchor.min_offset, min(target, anchor.max_offset))
        if target == current:
            self.stop()
            return

        anchor.animate_scroll_to(target)
        self._expected_offset = anchor.offset
