"""Matching blocks for Ratcliff-Obershelp comparison.

Wraps :class:`difflib.SequenceMatcher`, which implements the
Ratcliff-Obershelp "gestalt pattern matching" alignment.
"""

from __future__ import annotations

from difflib import SequenceMatcher
from typing import List, Tuple

Block = Tuple[int, int, int]


def matching_blocks(s1: str, s2: str) -> List[Block]:
    """Return the maximal common substrings of ``s1`` and ``s2``.

    Each block is ``(pos1, pos2, size)`` with 0-based offsets, meaning
    ``s1[pos1:pos1 + size] == s2[pos2:pos2 + size]``. Blocks are ordered by
    position and never have zero size.

    Example:
        >>> matching_blocks("abc", "xxabcxx")
        [(0, 2, 3)]
    """
    matcher = SequenceMatcher(None, s1, s2, autojunk=False)
    return [(b.a, b.b, b.size) for b in matcher.get_matching_blocks() if b.size]


def matched_length(s1: str, s2: str) -> int:
    """Total number of characters covered by the matching blocks."""
    return sum(size for _, _, size in matching_blocks(s1, s2))


__all__ = ["Block", "matching_blocks", "matched_length"]
