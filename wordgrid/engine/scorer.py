"""Compactness scoring for finished grids."""

from __future__ import annotations

from typing import Optional

from ..core.models import BoundingBox
from .grid import CharGrid


def bounding_box(grid: CharGrid) -> Optional[BoundingBox]:
    """Return the smallest rectangle holding every filled cell, if any."""

    min_row = min_col = grid.size
    max_row = max_col = -1
    for r, c, _ in grid.iter_filled():
        min_row = min(min_row, r)
        max_row = max(max_row, r)
        min_col = min(min_col, c)
        max_col = max(max_col, c)

    if max_row < min_row or max_col < min_col:
        return None
    return BoundingBox(min_row=min_row, max_row=max_row, min_col=min_col, max_col=max_col)


def compactness(grid: CharGrid) -> int:
    """Bounding-box area of the placed letters; 0 for a blank grid. Lower is tighter."""

    box = bounding_box(grid)
    return box.area if box is not None else 0
