"""Data models supporting the word grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import Orientation


@dataclass(frozen=True)
class Placement:
    """A candidate start cell and run direction for one word."""

    row: int
    col: int
    orientation: Orientation


@dataclass(frozen=True)
class PlacementReport:
    """Outcome of placing one word.

    ``placement`` is the accepted placement, or the attempted one for policies
    that make a single attempt. It is ``None`` when a scanning policy found no
    valid position at all.
    """

    word: str
    placement: Optional[Placement]
    placed: bool


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive row/column extent of the filled cells."""

    min_row: int
    max_row: int
    min_col: int
    max_col: int

    @property
    def height(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def width(self) -> int:
        return self.max_col - self.min_col + 1

    @property
    def area(self) -> int:
        return self.height * self.width
