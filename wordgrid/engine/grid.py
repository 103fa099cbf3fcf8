"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import ORTHOGONAL_STEPS, Bounds, Orientation
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

GridSnapshot = Tuple[Tuple[Optional[str], ...], ...]


class CharGrid:
    """Square character surface where ``None`` marks a blank cell."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self.cells: List[List[Optional[str]]] = [[None] * size for _ in range(size)]
        self._filled_count = 0

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def try_write(self, word: str, row: int, col: int, orientation: Orientation) -> bool:
        """Write ``word`` starting at ``(row, col)`` if every cell agrees.

        Returns ``False`` and leaves the grid untouched when any target cell
        falls outside the grid or already holds a different character.
        """

        if not word:
            return False
        targets = self.cells_for(len(word), row, col, orientation)
        for index, (r, c) in enumerate(targets):
            if not self.bounds.contains(r, c):
                LOGGER.debug("'%s' leaves the grid at (%s,%s)", word, r, c)
                return False
            existing = self.cells[r][c]
            if existing is not None and existing != word[index]:
                LOGGER.debug("'%s' conflicts with '%s' at (%s,%s)", word, existing, r, c)
                return False

        # All checks passed, mutate grid
        for index, (r, c) in enumerate(targets):
            if self.cells[r][c] is None:
                self._filled_count += 1
            self.cells[r][c] = word[index]
        return True

    @staticmethod
    def cells_for(length: int, row: int, col: int, orientation: Orientation) -> List[Tuple[int, int]]:
        dr, dc = orientation.step()
        return [(row + dr * i, col + dc * i) for i in range(length)]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def cell(self, row: int, col: int) -> Optional[str]:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell outside grid: {(row, col)}")
        return self.cells[row][col]

    def is_blank(self, row: int, col: int) -> bool:
        return self.cell(row, col) is None

    @property
    def filled_count(self) -> int:
        return self._filled_count

    def is_empty(self) -> bool:
        return self._filled_count == 0

    def iter_filled(self) -> Iterator[Tuple[int, int, str]]:
        for r, row in enumerate(self.cells):
            for c, letter in enumerate(row):
                if letter is not None:
                    yield r, c, letter

    def neighbors(self, row: int, col: int) -> Iterable[Tuple[int, int]]:
        for dr, dc in ORTHOGONAL_STEPS:
            nr, nc = row + dr, col + dc
            if self.bounds.contains(nr, nc):
                yield nr, nc

    def touches_letters(self, targets: Sequence[Tuple[int, int]]) -> bool:
        """Return True if any in-bounds target is filled or borders a filled cell."""

        for r, c in targets:
            if not self.bounds.contains(r, c):
                continue
            if self.cells[r][c] is not None:
                return True
            if any(self.cells[nr][nc] is not None for nr, nc in self.neighbors(r, c)):
                return True
        return False

    def rows(self) -> List[List[Optional[str]]]:
        return [list(row) for row in self.cells]

    def snapshot(self) -> GridSnapshot:
        return tuple(tuple(row) for row in self.cells)
