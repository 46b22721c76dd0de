from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate
from typing import Callable, List, Optional, Tuple

from ui.constants import DEFAULT_ROW_H
from ui.types import VisibleRow

class LayoutIndex:
    """
    Row geometry for one flatten: where each row starts in content pixels
    and how tall it is. The drag session needs fresh bounds for the row
    under the pointer on every move, so lookups go through bisect here.
    """

    __slots__ = ("offsets", "heights", "total_height")

    def __init__(self) -> None:
        self.offsets: List[int] = []
        self.heights: List[int] = []
        self.total_height: int = 0

    def rebuild(self, rows: List[VisibleRow],
                measure: Optional[Callable[[VisibleRow], int]] = None) -> None:
        """Lay out `rows` top to bottom. Rows are DEFAULT_ROW_H tall unless `measure` says otherwise."""
        self.heights = [max(0, int(measure(r) if measure else DEFAULT_ROW_H)) for r in rows]
        ends = list(accumulate(self.heights))
        self.offsets = [0] + ends[:-1] if ends else []
        self.total_height = ends[-1] if ends else 0

    def row_top(self, i: int) -> int:
        return self.offsets[i] if 0 <= i < len(self.offsets) else 0

    def row_height(self, i: int) -> int:
        return self.heights[i] if 0 <= i < len(self.heights) else 0

    def row_span(self, i: int) -> Tuple[int, int]:
        """(top, bottom) of row i; bottom is exclusive."""
        top = self.row_top(i)
        return (top, top + self.row_height(i))

    def find_row_at_y(self, y: int) -> Tuple[int, int]:
        """
        Map a content Y to (row_index, y_into_row).
        Empty space above or below the rows gives (-1, 0).
        """
        if not (0 <= y < self.total_height):
            return (-1, 0)

        i = bisect_right(self.offsets, y) - 1
        return (i, y - self.offsets[i])

    def content_height(self) -> int:
        return self.total_height
