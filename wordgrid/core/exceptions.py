"""Custom exception hierarchy for word grid generation."""


class CrosswordError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(CrosswordError):
    """Raised when generator settings cannot produce a grid."""


class WordSourceError(CrosswordError):
    """Raised when the word list cannot be produced."""


class WordSourceReadError(WordSourceError):
    """Raised when the word file cannot be opened or read."""


class EmptyWordListError(WordSourceError):
    """Raised when no valid words remain after filtering."""
