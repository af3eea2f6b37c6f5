"""Fuzzy-matching modifiers in the style of fuzzywuzzy.

Each modifier wraps an arbitrary metric and is itself a metric, so they nest:
``TokenSort(Partial(RatcliffObershelp()))`` is the classic
"partial token sort ratio". See
http://chairnerd.seatgeek.com/fuzzywuzzy-fuzzy-string-matching-in-python/
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import List, Optional, Tuple

from fuzzygram.blocks import matching_blocks
from fuzzygram.core import Metric, compare
from fuzzygram.distances import RatcliffObershelp
from fuzzygram.qgram import QGramSequence
from fuzzygram.tokens import has_delimiter, split_tokens

UNBASE_SCALE = 0.95
PARTIAL_SCALE = 0.9
LONG_PARTIAL_SCALE = 0.6
PARTIAL_LENGTH_RATIO = 1.5
LONG_LENGTH_RATIO = 8


@dataclass(frozen=True)
class Partial:
    """Best score of the shorter string against equal-length windows of the longer.

    With a :class:`RatcliffObershelp` base metric only the windows anchored on
    matching blocks are scored instead of every window, and an empty shorter
    string, having no blocks, scores 0.0.

    Example:
        >>> from fuzzygram import QGram, compare
        >>> compare(Partial(QGram(2)), "abc", "xxabcxx")
        1.0
    """

    dist: Metric

    def compare(self, s1: str, s2: str, len1: int, len2: int) -> float:
        if len1 == len2:
            return self.dist.compare(s1, s2, len1, len2)
        if len1 > len2:
            s1, s2, len1, len2 = s2, s1, len2, len1
        if isinstance(self.dist, RatcliffObershelp):
            return self._compare_blocks(s1, s2, len1, len2)
        if len1 == 0:
            return self.dist.compare("", "", 0, 0)
        return max(compare(self.dist, s1, window) for window in QGramSequence(s2, len1))

    def _compare_blocks(self, s1: str, s2: str, len1: int, len2: int) -> float:
        out = 0.0
        for pos1, pos2, _ in matching_blocks(s1, s2):
            # window of exactly len1 characters, shifted back inside s2
            start = min(max(pos2 - pos1, 0), len2 - len1)
            window = s2[start : start + len1]
            out = max(out, self.dist.compare(s1, window, len1, len1))
        return out

    def evaluate(self, s1: str, s2: str, len1: int, len2: int) -> float:
        return 1.0 - self.compare(s1, s2, len1, len2)


@dataclass(frozen=True)
class TokenSort:
    """Compare after sorting each string's tokens and joining them with a space.

    Strings without any delimiter are compared as they are.
    """

    dist: Metric
    delimiters: Optional[str] = None

    def _sort_tokens(self, s: str) -> str:
        if not has_delimiter(s, self.delimiters):
            return s
        return " ".join(sorted(split_tokens(s, self.delimiters)))

    def compare(self, s1: str, s2: str, len1: int, len2: int) -> float:
        return compare(self.dist, self._sort_tokens(s1), self._sort_tokens(s2))

    def evaluate(self, s1: str, s2: str, len1: int, len2: int) -> float:
        return 1.0 - self.compare(s1, s2, len1, len2)


def separate_tokens(
    tokens1: List[str], tokens2: List[str]
) -> Tuple[List[str], List[str], List[str]]:
    """Split two token lists into (shared, only in first, only in second).

    Shared tokens are matched pairwise, so a token repeated twice on one side
    and once on the other is shared once and left over once. All three lists
    come back sorted. The inputs are not modified.

    Example:
        >>> separate_tokens(["a", "b", "b", "c"], ["b", "c", "c", "d"])
        (['b', 'c'], ['a', 'b'], ['c', 'd'])
    """
    v1 = sorted(tokens1)
    v2 = sorted(tokens2)
    shared: List[str] = []
    start = 0
    i1 = 0
    while i1 < len(v1):
        x = v1[i1]
        i2 = bisect_left(v2, x, start)
        if i2 >= len(v2):
            break
        if v2[i2] == x:
            del v1[i1]
            del v2[i2]
            shared.append(x)
            start = i2
        else:
            i1 += 1
    return shared, v1, v2


@dataclass(frozen=True)
class TokenSet:
    """Compare the shared tokens against each side's shared-plus-leftover tokens.

    Returns the best of comparing ``shared`` with ``shared + only1``, ``shared +
    only1`` with ``shared + only2``, and ``shared`` with ``shared + only2``.
    When nothing is shared only the middle comparison is made, since an empty
    string would otherwise be compared against the others.
    """

    dist: Metric
    delimiters: Optional[str] = None

    def compare(self, s1: str, s2: str, len1: int, len2: int) -> float:
        shared, only1, only2 = separate_tokens(
            split_tokens(s1, self.delimiters), split_tokens(s2, self.delimiters)
        )
        base = " ".join(shared)
        combined1 = " ".join(shared + only1)
        combined2 = " ".join(shared + only2)
        if not base:
            return compare(self.dist, combined1, combined2)
        return max(
            compare(self.dist, base, combined1),
            compare(self.dist, combined1, combined2),
            compare(self.dist, base, combined2),
        )

    def evaluate(self, s1: str, s2: str, len1: int, len2: int) -> float:
        return 1.0 - self.compare(s1, s2, len1, len2)


@dataclass(frozen=True)
class TokenMax:
    """Best of the plain, partial and token-based scores, with fixed scaling.

    When the second string is at least 1.5 times longer than the first, the
    partial variants are used and scaled by 0.9 (0.6 beyond 8 times longer);
    token variants are further scaled by 0.95. The module-level
    :func:`fuzzygram.compare` always passes the shorter string first.

    Example:
        >>> from fuzzygram import RatcliffObershelp, compare
        >>> compare(TokenMax(RatcliffObershelp()), "b a", "a b")
        0.95
    """

    dist: Metric
    delimiters: Optional[str] = None

    def compare(self, s1: str, s2: str, len1: int, len2: int) -> float:
        base = self.dist.compare(s1, s2, len1, len2)
        if len2 >= PARTIAL_LENGTH_RATIO * len1:
            partial = Partial(self.dist)
            partial_score = partial.compare(s1, s2, len1, len2)
            ptsor = TokenSort(partial, self.delimiters).compare(s1, s2, len1, len2)
            ptser = TokenSet(partial, self.delimiters).compare(s1, s2, len1, len2)
            partial_scale = LONG_PARTIAL_SCALE if len2 > LONG_LENGTH_RATIO * len1 else PARTIAL_SCALE
            return max(
                base,
                partial_score * partial_scale,
                ptsor * UNBASE_SCALE * partial_scale,
                ptser * UNBASE_SCALE * partial_scale,
            )
        ptsor = TokenSort(self.dist, self.delimiters).compare(s1, s2, len1, len2)
        ptser = TokenSet(self.dist, self.delimiters).compare(s1, s2, len1, len2)
        return max(base, ptsor * UNBASE_SCALE, ptser * UNBASE_SCALE)

    def evaluate(self, s1: str, s2: str, len1: int, len2: int) -> float:
        return 1.0 - self.compare(s1, s2, len1, len2)


def partial_ratio(s1: str, s2: str, dist: Optional[Metric] = None) -> float:
    """Similarity of the shorter string to its best-aligned window in the longer."""
    return compare(Partial(dist or RatcliffObershelp()), s1, s2)


def token_sort_ratio(s1: str, s2: str, dist: Optional[Metric] = None) -> float:
    """Similarity ignoring token order."""
    return compare(TokenSort(dist or RatcliffObershelp()), s1, s2)


def token_set_ratio(s1: str, s2: str, dist: Optional[Metric] = None) -> float:
    """Similarity of shared tokens against each side's full token set."""
    return compare(TokenSet(dist or RatcliffObershelp()), s1, s2)


def token_max_ratio(s1: str, s2: str, dist: Optional[Metric] = None) -> float:
    """Best of plain, partial and token-based similarity."""
    return compare(TokenMax(dist or RatcliffObershelp()), s1, s2)


__all__ = [
    "Partial",
    "TokenSort",
    "TokenSet",
    "TokenMax",
    "separate_tokens",
    "partial_ratio",
    "token_sort_ratio",
    "token_set_ratio",
    "token_max_ratio",
    "UNBASE_SCALE",
    "PARTIAL_SCALE",
    "LONG_PARTIAL_SCALE",
]
