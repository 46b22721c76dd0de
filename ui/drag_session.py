# ui/drag_session.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from enum import Enum
from functools import partial
from typing import Any, Callable, FrozenSet, Optional

from core.log import Log
from core.cycle_guard import is_valid_move
from core.drop_resolver import DropZone, Placement, resolve, apply_drop
from core.tree_utils import get_ancestors
from ui.auto_scroll import AutoScrollController
from ui.decorators import check_read_only
from ui.drag_config import DragConfig
from ui.hit_zone import classify, refine_zone
from ui.types import ListController, RowHit, Scheduler, ScrollAnchor, TimerHandle, Viewport

__all__ = ["DragState", "DragSession"]


class DragState(Enum):
    IDLE = "idle"
    ARMED = "armed"            # pressed on a row, nothing hovered yet
    HOVERING = "hovering"      # over a candidate target row
    COMMITTING = "committing"  # drop being applied


class DragSession:
    """
    State machine for one drag gesture at a time over a tree view.

    The host feeds it pointer events (start / move / drop / cancel) and row
    geometry; the session classifies drop zones, runs the cascading-expand
    timer and the auto-scroller, and on drop resolves, validates and applies
    the structural edit. Only one gesture may be active: a press while a
    gesture is running is ignored.

    Host callbacks (all optional):
      on_decoration(target, zone) – drop indicator changed (None, None = clear)
      on_tap_mask(masked)         – mask/unmask the row's toggle-on-tap gesture
      on_rejected(dragged, placement) – drop discarded by the cycle/no-op guard
      on_end(committed)           – gesture finished
    """

    def __init__(
            self,
            root: Any,
            controller: ListController,
            scheduler: Scheduler,
            anchor: Optional[ScrollAnchor] = None,
            config: Optional[DragConfig] = None,
            on_decoration: Optional[Callable[[Any, Optional[DropZone]], None]] = None,
            on_tap_mask: Optional[Callable[[bool], None]] = None,
            on_rejected: Optional[Callable[[Any, Placement], None]] = None,
            on_end: Optional[Callable[[bool], None]] = None,
    ):
        self.root = root
        self.controller = controller
        self.scheduler = scheduler
        self.config = config or DragConfig()

        self.on_decoration = on_decoration
        self.on_tap_mask = on_tap_mask
        self.on_rejected = on_rejected
        self.on_end = on_end

        self.auto_scroller: Optional[AutoScrollController] = None
        if anchor is not None:
            self.attach_scrollable(anchor)

        self._state = DragState.IDLE
        self._dragged = None
        self._target = None
        self._zone: Optional[DropZone] = None
        self._path: FrozenSet[int] = frozenset()
        self._expand_timer: Optional[TimerHandle] = None
        self._tap_masked = False

    # ------------------------------------------------------------------ #
    # Read-only state
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state is not DragState.IDLE

    @property
    def dragged(self):
        return self._dragged

    @property
    def target(self):
        return self._target

    @property
    def zone(self) -> Optional[DropZone]:
        return self._zone

    @property
    def tap_toggle_masked(self) -> bool:
        return self._tap_masked

    @property
    def expand_timer_pending(self) -> bool:
        return self._expand_timer is not None and self._expand_timer.active

    def is_read_only(self) -> bool:
        return self.config.read_only

    def in_dragged_path(self, node) -> bool:
        """True for the dragged node and each of its ancestors."""
        return id(node) in self._path

    # ------------------------------------------------------------------ #
    # Scrollable
    # ------------------------------------------------------------------ #

    def attach_scrollable(self, anchor: ScrollAnchor) -> None:
        """Use `anchor` for auto-scrolling; replacing it stops the old driver."""
        if self.auto_scroller is not None:
            if self.auto_scroller.anchor is anchor:
                return
            self.auto_scroller.stop()

        cfg = self.config
        self.auto_scroller = AutoScrollController(
            anchor,
            self.scheduler,
            band_px=cfg.scroll_band_px,
            min_step_px=cfg.scroll_min_step_px,
            max_step_px=cfg.scroll_max_step_px,
            frame_ms=cfg.scroll_frame_ms,
        )

    # ------------------------------------------------------------------ #
    # Gesture events
    # ------------------------------------------------------------------ #

    @check_read_only
    def start(self, node) -> bool:
        """Press on a draggable row: IDLE -> ARMED. Ignored while a gesture is active."""
        if self._state is not DragState.IDLE:
            Log.debug(f"Ignored drag start on {node!r}: a drag is already {self._state.value}.", 1)
            return False
        if node is None or node is self.root or getattr(node, "is_virtual_root", False):
            return False

        self._dragged = node
        self._path = frozenset(id(n) for n in [node] + get_ancestors(node))
        self._state = DragState.ARMED
        Log.debug(f"Drag armed: {node!r}.", 2)

        if self.config.collapse_on_drag_start and node.is_expanded and not node.is_leaf:
            self.controller.collapse(node)
        return True

    def move(self, pointer_y: float, hit: Optional[RowHit] = None, viewport: Optional[Viewport] = None) -> None:
        """Pointer moved during the drag. Updates hover target, zone, timers; never edits the tree."""
        if self._state not in (DragState.ARMED, DragState.HOVERING):
            return

        if viewport is not None and self.auto_scroller is not None:
            self.auto_scroller.update(pointer_y, viewport.top, viewport.height)

        # No row, the dragged row itself, or a row with no usable geometry.
        if hit is None or hit.node is self._dragged or hit.bounds.height <= 0:
            self._leave_target()
            return

        divisions = self.config.divisions
        zone = classify(pointer_y, hit.bounds.top, hit.bounds.height, divisions)
        zone = refine_zone(zone, hit.node, divisions)

        changed = (hit.node is not self._target) or (zone is not self._zone)
        self._target = hit.node
        self._zone = zone
        self._state = DragState.HOVERING

        if changed:
            self._set_tap_mask(zone is DropZone.ABOVE)
            self._restart_expand_timer()
            self._notify_decoration()

    def drop(self) -> Optional[Placement]:
        """
        Pointer released. Applies the move if it is valid and returns its
        Placement; returns None for a cancel or a rejected drop.
        """
        if self._state is DragState.ARMED:
            self.cancel()
            return None
        if self._state is not DragState.HOVERING:
            return None

        dragged, target, zone = self._dragged, self._target, self._zone
        self._state = DragState.COMMITTING
        self._cancel_expand_timer()

        placement = None
        try:
            if not self.controller.is_visible(target):
                # Row went away between hover and release.
                Log.debug(f"Drop target {target!r} no longer visible; cancelled.", 1)
            else:
                candidate = resolve(zone, target, self.root)
                if is_valid_move(dragged, candidate.parent, candidate.index, self.root):
                    apply_drop(dragged, candidate, self.controller)
                    placement = candidate
                else:
                    Log.debug(f"Drop of {dragged!r} {zone.value} {target!r} rejected.", 1)
                    if self.on_rejected is not None:
                        self.on_rejected(dragged, candidate)
        finally:
            self._teardown(committed=placement is not None)

        return placement

    def cancel(self) -> None:
        """Abort the gesture without touching the tree."""
        if self._state in (DragState.ARMED, DragState.HOVERING):
            Log.debug(f"Drag of {self._dragged!r} cancelled.", 2)
            self._teardown(committed=False)

    def dispose(self) -> None:
        """Host view is going away mid-drag."""
        self.cancel()
        if self.auto_scroller is not None:
            self.auto_scroller.stop()

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _leave_target(self) -> None:
        if self._state is not DragState.HOVERING:
            return
        self._cancel_expand_timer()
        self._set_tap_mask(False)
        self._target = None
        self._zone = None
        self._state = DragState.ARMED
        self._notify_decoration()

    def _restart_expand_timer(self) -> None:
        self._cancel_expand_timer()

        target, zone = self._target, self._zone
        cfg = self.config
        if not cfg.auto_expand_enabled or zone not in cfg.auto_expand_zones:
            return
        if target.is_leaf or target.is_expanded:
            return
        # Toggling an ancestor of the dragged node would unmount the drag source.
        if self.in_dragged_path(target):
            return

        self._expand_timer = self.scheduler.call_later(
            cfg.expand_delay_ms, partial(self._on_expand_timeout, target, zone)
        )

    def _cancel_expand_timer(self) -> None:
        if self._expand_timer is not None:
            self._expand_timer.cancel()
            self._expand_timer = None

    def _on_expand_timeout(self, target, zone: DropZone) -> None:
        self._expand_timer = None
        if self._state is not DragState.HOVERING:
            return
        if target is not self._target or zone is not self._zone:
            return
        if target.is_expanded:
            return
        Log.debug(f"Hover expanded {target!r}.", 2)
        self.controller.expand(target)

    def _set_tap_mask(self, masked: bool) -> None:
        if masked == self._tap_masked:
            return
        self._tap_masked = masked
        if self.on_tap_mask is not None:
            self.on_tap_mask(masked)

    def _notify_decoration(self) -> None:
        if self.on_decoration is not None:
            self.on_decoration(self._target, self._zone)

    def _teardown(self, committed: bool) -> None:
        """Exit action shared by every path back to IDLE."""
        self._cancel_expand_timer()
        if self.auto_scroller is not None:
            self.auto_scroller.stop()
        self._set_tap_mask(False)

        dragged = self._dragged
        had_target = self._target is not None

        self._dragged = None
        self._target = None
        self._zone = None
        self._path = frozenset()
        self._state = DragState.IDLE

        if had_target:
            self._notify_decoration()

        if dragged is not None and self.config.expand_on_drag_end:
            if not dragged.is_leaf and not dragged.is_expanded:
                self.controller.expand(dragged)

        Log.debug(f"Drag of {dragged!r} ended ({'committed' if committed else 'no change'}).", 2)
        if self.on_end is not None:
            self.on_end(committed)
