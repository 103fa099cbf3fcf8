"""Pretty-print helpers for word grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional

from ..core.constants import BLANK_SYMBOL, RULE_SYMBOL

if TYPE_CHECKING:
    from ..engine.generator import PuzzleResult
    from ..engine.grid import CharGrid


def cell_symbol(letter: Optional[str]) -> str:
    return BLANK_SYMBOL if letter is None else letter


def format_grid(grid: CharGrid, *, coordinates: bool = False) -> str:
    """Render one line per row with blanks shown as ``BLANK_SYMBOL``."""

    if not coordinates:
        return "\n".join("".join(cell_symbol(letter) for letter in row) for row in grid.rows())

    width = grid.size
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + RULE_SYMBOL * (3 * width - 1))
    for r, row in enumerate(grid.rows()):
        row_render = " ".join(f"{cell_symbol(letter):>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_puzzle(result: PuzzleResult, *, coordinates: bool = False) -> str:
    """Full text dump: heading, ruled grid, and compactness score."""

    rule = RULE_SYMBOL * (result.grid.size * 2)
    lines: List[str] = ["Crossword Puzzle:", rule]
    lines.append(format_grid(result.grid, coordinates=coordinates))
    lines.append(rule)
    lines.append(f"Compactness Score: {result.score}")
    return "\n".join(lines)


def pretty_print_puzzle(result: PuzzleResult, *, coordinates: bool = False, stream=None) -> None:
    """Print the finished puzzle in a human-friendly format."""

    stream = stream or sys.stdout
    print(format_puzzle(result, coordinates=coordinates), file=stream)


def print_word_list(words: List[str], *, stream=None) -> None:
    stream = stream or sys.stdout
    for word in words:
        print(word, file=stream)
