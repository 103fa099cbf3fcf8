"""Placement policies deciding where each word goes on the grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Protocol, Sequence, Tuple

from ..core.constants import DEFAULT_CURSOR, DEFAULT_STEP, SCAN_ORIENTATIONS, Orientation, PolicyName
from ..core.exceptions import ConfigurationError
from ..core.models import Placement, PlacementReport
from ..utils.logger import get_logger
from .grid import CharGrid

if TYPE_CHECKING:
    from .generator import GeneratorConfig


LOGGER = get_logger(__name__)

CellFilter = Callable[[Sequence[Tuple[int, int]]], bool]


class PlacementPolicy(Protocol):
    """Protocol implemented by all placement policies."""

    name: PolicyName

    def reset(self) -> None:
        ...

    def place(self, grid: CharGrid, word: str) -> PlacementReport:
        ...

    def place_all(self, grid: CharGrid, words: Iterable[str]) -> List[PlacementReport]:
        ...


def first_fit(grid: CharGrid, word: str, cell_filter: Optional[CellFilter] = None) -> Optional[Placement]:
    """Write ``word`` at the first valid position in row-major order.

    Each coordinate tries vertical before horizontal. ``cell_filter`` can
    restrict the candidates by their target cells before a write is tried.
    """

    for row in range(grid.size):
        for col in range(grid.size):
            for orientation in SCAN_ORIENTATIONS:
                if cell_filter is not None:
                    targets = grid.cells_for(len(word), row, col, orientation)
                    if not cell_filter(targets):
                        continue
                if grid.try_write(word, row, col, orientation):
                    return Placement(row, col, orientation)
    return None


class _BasePolicy:
    name: PolicyName

    def reset(self) -> None:
        """Clear any per-run cursor state."""

    def place(self, grid: CharGrid, word: str) -> PlacementReport:
        raise NotImplementedError

    def place_all(self, grid: CharGrid, words: Iterable[str]) -> List[PlacementReport]:
        """Place ``words`` in arrival order; failures are logged and skipped."""

        reports: List[PlacementReport] = []
        for word in words:
            report = self.place(grid, word)
            if report.placed:
                LOGGER.debug("Placed '%s' at %s", word, report.placement)
            else:
                LOGGER.warning("Could not place word: %s", word)
            reports.append(report)
        return reports


class SequentialDiagonalPolicy(_BasePolicy):
    """One attempt per word at a cursor stepping diagonally across the grid."""

    name = PolicyName.SEQUENTIAL

    def __init__(
        self,
        start: Tuple[int, int] = DEFAULT_CURSOR,
        step: Tuple[int, int] = DEFAULT_STEP,
        start_orientation: Orientation = Orientation.VERTICAL,
    ) -> None:
        self.start = start
        self.step = step
        self.start_orientation = start_orientation
        self.reset()

    def reset(self) -> None:
        self.row, self.col = self.start
        self.orientation = self.start_orientation

    def place(self, grid: CharGrid, word: str) -> PlacementReport:
        attempt = Placement(self.row, self.col, self.orientation)
        placed = grid.try_write(word, attempt.row, attempt.col, attempt.orientation)
        # The cursor moves on whether or not the write succeeded.
        self.row += self.step[0]
        self.col += self.step[1]
        self.orientation = self.orientation.flipped()
        return PlacementReport(word=word, placement=attempt, placed=placed)


class GreedyFirstFitPolicy(_BasePolicy):
    """Full row-major scan; the first valid position wins."""

    name = PolicyName.GREEDY

    def place(self, grid: CharGrid, word: str) -> PlacementReport:
        placement = first_fit(grid, word)
        return PlacementReport(word=word, placement=placement, placed=placement is not None)


class ProximityPolicy(_BasePolicy):
    """Prefer positions touching placed letters, then fall back to a full scan.

    With ``locality=False`` the first pass is an unrestricted scan, so the
    fallback never finds anything new.
    """

    name = PolicyName.PROXIMITY

    def __init__(self, locality: bool = True) -> None:
        self.locality = locality

    def place(self, grid: CharGrid, word: str) -> PlacementReport:
        near_filter: Optional[CellFilter] = grid.touches_letters if self.locality else None
        placement = first_fit(grid, word, near_filter)
        if placement is None:
            LOGGER.debug("No nearby position for '%s', scanning the whole grid", word)
            placement = first_fit(grid, word)
        return PlacementReport(word=word, placement=placement, placed=placement is not None)


class RowStackPolicy(_BasePolicy):
    """Write the n-th word horizontally at the start of row n."""

    name = PolicyName.ROWS

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.next_row = 0

    def place(self, grid: CharGrid, word: str) -> PlacementReport:
        attempt = Placement(self.next_row, 0, Orientation.HORIZONTAL)
        self.next_row += 1
        placed = grid.try_write(word, attempt.row, attempt.col, attempt.orientation)
        return PlacementReport(word=word, placement=attempt, placed=placed)


def build_policy(config: "GeneratorConfig") -> PlacementPolicy:
    """Instantiate the policy named by ``config``."""

    try:
        name = PolicyName(config.policy)
    except ValueError as exc:
        choices = ", ".join(p.value for p in PolicyName)
        raise ConfigurationError(f"Unknown placement policy '{config.policy}' (choose from {choices})") from exc

    if name == PolicyName.SEQUENTIAL:
        return SequentialDiagonalPolicy(
            start=(config.start_row, config.start_col),
            step=(config.step_rows, config.step_cols),
            start_orientation=config.start_orientation,
        )
    if name == PolicyName.GREEDY:
        return GreedyFirstFitPolicy()
    if name == PolicyName.PROXIMITY:
        return ProximityPolicy(locality=config.locality)
    return RowStackPolicy()
