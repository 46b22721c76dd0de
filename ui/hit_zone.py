# ui/hit_zone.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from core.drop_resolver import DropZone

__all__ = ["classify", "refine_zone", "VALID_DIVISIONS"]

VALID_DIVISIONS = (2, 3)

def classify(pointer_y: float, target_top: float, target_height: float, divisions: int = 3) -> DropZone:
    """
    Map a pointer Y over a row to a drop zone.

    Three bands: top third ABOVE, middle INSIDE, bottom BELOW.
    Two bands: top half ABOVE, bottom half BELOW (refine_zone turns it into a child drop).
    A pointer exactly on a band boundary belongs to the upper band.
    """
    if divisions not in VALID_DIVISIONS:
        raise ValueError(f"divisions must be 2 or 3, got {divisions!r}")
    if target_height <= 0:
        raise ValueError(f"Row height must be positive, got {target_height!r}")

    offset = min(max(pointer_y - target_top, 0.0), float(target_height))

    if divisions == 2:
        return DropZone.ABOVE if offset <= target_height / 2.0 else DropZone.BELOW

    if offset <= target_height / 3.0:
        return DropZone.ABOVE
    if offset <= target_height * 2.0 / 3.0:
        return DropZone.INSIDE
    return DropZone.BELOW

def refine_zone(zone: DropZone, target, divisions: int = 3) -> DropZone:
    """
    Two-band mode has no INSIDE band, so its lower half always drops as a
    child. On an open row with children the row right below it is its first
    child, so the node goes in first; on a collapsed row or a leaf it is
    appended last.
    """
    if divisions == 2 and zone is DropZone.BELOW:
        if target.is_expanded and not target.is_leaf:
            return DropZone.INSIDE_FIRST
        return DropZone.INSIDE
    return zone
