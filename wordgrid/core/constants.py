"""Shared constants and enumerations for the word grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Orientation(str, Enum):
    """Run directions a word can take on the grid."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def flipped(self) -> "Orientation":
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL

    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Orientation.HORIZONTAL else (1, 0)


class PolicyName(str, Enum):
    """Placement policies selectable from configuration."""

    SEQUENTIAL = "sequential"
    GREEDY = "greedy"
    PROXIMITY = "proximity"
    ROWS = "rows"


class SourceFormat(str, Enum):
    """Line shapes accepted by the word source."""

    SECOND_TOKEN = "second"
    LENGTH_PREFIXED = "length"
    FIRST_TOKEN = "first"


class DuplicateMode(str, Enum):
    KEEP = "keep"
    UNIQUE = "unique"


# Greedy scans try vertical first.
SCAN_ORIENTATIONS: Tuple[Orientation, ...] = (Orientation.VERTICAL, Orientation.HORIZONTAL)

ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))

DEFAULT_GRID_SIZE = 15
MAX_GRID_SIZE = 1000
SEQUENTIAL_GRID_SIZE = 20
DEFAULT_CURSOR: Tuple[int, int] = (5, 5)
DEFAULT_STEP: Tuple[int, int] = (2, 2)

# Words containing this symbol are rejected by the word source.
BLANK_SYMBOL = "."
RULE_SYMBOL = "-"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
