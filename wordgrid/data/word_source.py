"""Word list loading from line-oriented text sources."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from ..core.constants import DuplicateMode, SourceFormat
from ..core.exceptions import EmptyWordListError, WordSourceReadError
from ..utils.logger import get_logger
from .normalization import normalize_token, split_tokens


LOGGER = get_logger(__name__)


@dataclass
class WordSourceConfig:
    """Configuration for turning input lines into words."""

    format: SourceFormat = SourceFormat.SECOND_TOKEN
    duplicates: DuplicateMode = DuplicateMode.KEEP


def extract_word(line: str, source_format: SourceFormat) -> Optional[str]:
    """Return the word carried by ``line``, or ``None`` if the line is skipped."""

    tokens = split_tokens(line)
    if source_format == SourceFormat.FIRST_TOKEN:
        if not tokens:
            return None
        return normalize_token(tokens[0])

    if source_format == SourceFormat.SECOND_TOKEN:
        if len(tokens) < 2:
            return None
        return normalize_token(tokens[1])

    # Length-prefixed lines must be exactly "<length> <word>".
    if len(tokens) != 2:
        return None
    try:
        expected_length = int(tokens[0])
    except ValueError:
        return None
    word = normalize_token(tokens[1])
    if len(word) != expected_length:
        LOGGER.debug("Skipping %r: expected %d letters", word, expected_length)
        return None
    return word


def read_words(lines: Iterable[str], config: Optional[WordSourceConfig] = None) -> List[str]:
    """Parse ``lines`` into an ordered list of lowercase words.

    With ``DuplicateMode.UNIQUE`` repeats are dropped and the first arrival
    of each word fixes its position.
    """

    config = config or WordSourceConfig()
    words: List[str] = []
    seen = set()
    for line in lines:
        word = extract_word(line, config.format)
        if not word:
            continue
        if config.duplicates == DuplicateMode.UNIQUE:
            if word in seen:
                continue
            seen.add(word)
        words.append(word)

    if not words:
        raise EmptyWordListError("No valid words found in the input")
    LOGGER.debug("Read %d words (%s format)", len(words), config.format.value)
    return words


def load_words(path: Path | str, config: Optional[WordSourceConfig] = None) -> List[str]:
    """Read words from a file, one entry per line."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordSourceReadError(f"{source}: {exc}") from exc
    words = read_words(text.splitlines(), config)
    LOGGER.info("Loaded %d words from %s", len(words), source)
    return words
