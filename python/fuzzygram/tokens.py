"""Whitespace and delimiter tokenization used by the token modifiers."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Optional


@lru_cache(maxsize=32)
def _delimiter_pattern(delimiters: str) -> "re.Pattern[str]":
    return re.compile("[" + re.escape(delimiters) + "]+")


def split_tokens(s: str, delimiters: Optional[str] = None) -> List[str]:
    """Split ``s`` into tokens, keeping their original order.

    Args:
        s: String to split.
        delimiters: Characters that separate tokens. ``None`` (default) splits
            on any run of Unicode whitespace, like ``str.split()``.

    Returns:
        List of non-empty tokens.

    Example:
        >>> split_tokens("  fuzzy  wuzzy ")
        ['fuzzy', 'wuzzy']
        >>> split_tokens("a,b;;c", delimiters=",;")
        ['a', 'b', 'c']
    """
    if delimiters is None:
        return s.split()
    if not delimiters:
        return [s] if s else []
    return [token for token in _delimiter_pattern(delimiters).split(s) if token]


def has_delimiter(s: str, delimiters: Optional[str] = None) -> bool:
    """Return True if ``s`` contains at least one delimiter character."""
    if delimiters is None:
        return any(ch.isspace() for ch in s)
    return any(ch in delimiters for ch in s)


__all__ = ["split_tokens", "has_delimiter"]
