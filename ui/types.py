# ui/types.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol


@dataclass(slots=True, frozen=True)
class VisibleRow:
    """
    A single flattened row for one rendering pass.

    • node   – the tree node shown on this row
    • level  – tree-indent level (top-level = 0)
    • index  – position among its siblings
    • parent – owning node (the virtual root for top-level rows)
    """
    node: Any
    level: int
    index: int
    parent: Any


@dataclass(slots=True, frozen=True)
class RowBounds:
    """Top edge and height of a row in viewport coordinates."""
    top: float
    height: float


@dataclass(slots=True, frozen=True)
class RowHit:
    """The row under the pointer on this move, as reported by the host."""
    node: Any
    bounds: RowBounds


@dataclass(slots=True, frozen=True)
class Viewport:
    """Visible part of the scrollable list in the same coordinates as the pointer."""
    top: float
    height: float


class TimerHandle(Protocol):
    def cancel(self) -> None: ...

    @property
    def active(self) -> bool: ...


class Scheduler(Protocol):
    """Source of cancellable one-shot and repeating callbacks on the UI loop."""

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> TimerHandle: ...

    def call_every(self, interval_ms: int, fn: Callable[[], None]) -> TimerHandle: ...


class ListController(Protocol):
    """The host list's flattening controller."""

    def expand(self, node: Any) -> None: ...

    def collapse(self, node: Any) -> None: ...

    def rebuild(self) -> None: ...

    def is_visible(self, node: Any) -> bool: ...


class ScrollAnchor(Protocol):
    """
    A vertical scrollable.

    `authority` identifies whatever currently owns the scroll position; a
    different value mid-drag means the scrollable was re-attached.
    """

    @property
    def offset(self) -> float: ...

    @property
    def min_offset(self) -> float: ...

    @property
    def max_offset(self) -> float: ...

    @property
    def authority(self) -> Optional[object]: ...

    def animate_scroll_to(self, offset: float) -> None: ...
