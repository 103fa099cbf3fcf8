"""Word grid placement package.

This package exposes the public API surface via:

- ``wordgrid.engine.generator.PuzzleGenerator``: places a word list and scores it.
- ``wordgrid.engine.grid.CharGrid``: the conflict-checked character surface.
- ``wordgrid.data.word_source`` helpers: turn text lines into word lists.
"""

from .data.word_source import WordSourceConfig, load_words, read_words
from .engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult
from .engine.grid import CharGrid
from .engine.scorer import compactness

__all__ = [
    "CharGrid",
    "GeneratorConfig",
    "PuzzleGenerator",
    "PuzzleResult",
    "WordSourceConfig",
    "compactness",
    "load_words",
    "read_words",
]

__version__ = "0.1.0"
