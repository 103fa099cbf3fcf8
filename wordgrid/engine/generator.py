"""Word grid generation orchestration.

Words are placed strictly in arrival order by the configured policy, then the
finished grid is scored by the area of its bounding box.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import (
    DEFAULT_CURSOR,
    DEFAULT_GRID_SIZE,
    DEFAULT_STEP,
    MAX_GRID_SIZE,
    SEQUENTIAL_GRID_SIZE,
    Orientation,
    PolicyName,
)
from ..core.exceptions import ConfigurationError
from ..core.models import BoundingBox, PlacementReport
from ..utils.logger import get_logger
from .grid import CharGrid
from .placer import PlacementPolicy, build_policy
from .scorer import bounding_box, compactness


LOGGER = get_logger(__name__)


def derived_size(words: Sequence[str]) -> int:
    """Smallest square that fits the longest word and one row per word."""

    longest = max((len(word) for word in words), default=0)
    return max(1, longest, len(words))


def _check_ceiling(size: int) -> int:
    if size > MAX_GRID_SIZE:
        raise ConfigurationError(f"Grid size {size} exceeds the maximum of {MAX_GRID_SIZE}")
    return size


@dataclass
class GeneratorConfig:
    policy: PolicyName | str = PolicyName.PROXIMITY
    size: Optional[int] = None
    derive_size: bool = False
    start_row: int = DEFAULT_CURSOR[0]
    start_col: int = DEFAULT_CURSOR[1]
    step_rows: int = DEFAULT_STEP[0]
    step_cols: int = DEFAULT_STEP[1]
    start_orientation: Orientation = Orientation.VERTICAL
    locality: bool = True

    def resolve_size(self, words: Sequence[str]) -> int:
        """Pick the grid dimension for ``words``.

        An explicit ``size`` wins, then ``derive_size``; otherwise each policy
        has its own default and the row stack always derives. Sizes above
        ``MAX_GRID_SIZE`` are refused.
        """

        if self.size is not None:
            if self.size <= 0:
                raise ConfigurationError(f"Grid size must be positive, got {self.size}")
            return _check_ceiling(self.size)
        if self.derive_size or self.policy == PolicyName.ROWS:
            return _check_ceiling(derived_size(words))
        if self.policy == PolicyName.SEQUENTIAL:
            return SEQUENTIAL_GRID_SIZE
        return DEFAULT_GRID_SIZE


@dataclass
class PuzzleResult:
    grid: CharGrid
    reports: List[PlacementReport] = field(default_factory=list)
    score: int = 0
    bounds: Optional[BoundingBox] = None

    @property
    def placed_words(self) -> List[str]:
        return [report.word for report in self.reports if report.placed]

    @property
    def failed_words(self) -> List[str]:
        return [report.word for report in self.reports if not report.placed]


class PuzzleGenerator:
    """High-level orchestrator: size the grid, place every word, score."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        policy: Optional[PlacementPolicy] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.policy = policy or build_policy(self.config)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str]) -> PuzzleResult:
        size = self.config.resolve_size(words)
        LOGGER.info(
            "Placing %d words on a %dx%d grid with the %s policy",
            len(words),
            size,
            size,
            self.policy.name.value,
        )
        grid = CharGrid(size)
        self.policy.reset()
        reports = self.policy.place_all(grid, words)

        result = PuzzleResult(
            grid=grid,
            reports=reports,
            score=compactness(grid),
            bounds=bounding_box(grid),
        )
        LOGGER.info(
            "Placed %d/%d words, compactness %d",
            len(result.placed_words),
            len(words),
            result.score,
        )
        return result
