# ui/drag_config.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

from core.drop_resolver import DropZone
from ui.constants import (
    DEFAULT_DIVISIONS,
    EXPAND_DELAY_MS,
    SCROLL_BAND_PX,
    SCROLL_MIN_STEP_PX,
    SCROLL_MAX_STEP_PX,
    SCROLL_FRAME_MS,
)
from ui.hit_zone import VALID_DIVISIONS


@dataclass(frozen=True)
class DragConfig:
    """
    Tunables for one tree view's drag-and-drop behaviour.

    • divisions             – 3 for ABOVE/INSIDE/BELOW bands, 2 for ABOVE/BELOW
    • expand_delay_ms       – hover time before a collapsed row auto-expands (0 = never)
    • auto_expand_zones     – zones in which that timer may run
    • collapse_on_drag_start / expand_on_drag_end – dragged node's own expansion
    • read_only             – ignore drag starts entirely
    • scroll_*              – auto-scroll band thickness, per-tick steps and tick interval
    """
    divisions: int = DEFAULT_DIVISIONS
    expand_delay_ms: int = EXPAND_DELAY_MS
    auto_expand_zones: FrozenSet[DropZone] = field(
        default_factory=lambda: frozenset({DropZone.INSIDE, DropZone.INSIDE_FIRST})
    )
    collapse_on_drag_start: bool = False
    expand_on_drag_end: bool = False
    read_only: bool = False
    scroll_band_px: float = SCROLL_BAND_PX
    scroll_min_step_px: float = SCROLL_MIN_STEP_PX
    scroll_max_step_px: float = SCROLL_MAX_STEP_PX
    scroll_frame_ms: int = SCROLL_FRAME_MS

    def __post_init__(self):
        if self.divisions not in VALID_DIVISIONS:
            raise ValueError(f"divisions must be 2 or 3, got {self.divisions!r}")
        if self.expand_delay_ms < 0:
            raise ValueError("expand_delay_ms cannot be negative")
        if self.scroll_band_px <= 0:
            raise ValueError("scroll_band_px must be positive")
        if not (0 < self.scroll_min_step_px <= self.scroll_max_step_px):
            raise ValueError("Need 0 < scroll_min_step_px <= scroll_max_step_px")
        if self.scroll_frame_ms <= 0:
            raise ValueError("scroll_frame_ms must be positive")

    @property
    def auto_expand_enabled(self) -> bool:
        return self.expand_delay_ms > 0

    @classmethod
    def from_args(cls, args) -> "DragConfig":
        """Build from the command-line namespace produced by treedrop.py."""
        return cls(
            divisions=getattr(args, "divisions", DEFAULT_DIVISIONS),
            expand_delay_ms=getattr(args, "expand_delay", EXPAND_DELAY_MS),
            collapse_on_drag_start=getattr(args, "collapse_on_drag", False),
            read_only=getattr(args, "read_only", False),
        )
