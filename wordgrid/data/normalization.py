"""Shared helpers for word token normalization."""

from __future__ import annotations

from typing import List

from ..core.constants import BLANK_SYMBOL


def split_tokens(line: str) -> List[str]:
    """Split ``line`` on any run of whitespace."""

    return line.split()


def normalize_token(token: str) -> str:
    """Return the lowercase form of ``token`` used for placement.

    Tokens holding the blank render symbol or non-printable characters come
    back empty.
    """

    if not token:
        return ""
    word = token.strip().lower()
    if BLANK_SYMBOL in word or not word.isprintable():
        return ""
    return word


__all__ = ["normalize_token", "split_tokens"]
