"""Base metrics: q-gram distances and Ratcliff-Obershelp.

The q-gram metrics view a string as the multiset of its length-q substrings.
For instance, the bigram multiset of "leila" is {le, ei, il, la}.

- ``QGram``: sum over q-grams of ``|count1 - count2|``
- ``Cosine``: ``1 - v1.v2 / (||v1|| * ||v2||)`` on the count vectors
- ``Jaccard``: ``1 - |Q1 & Q2| / |Q1 | Q2|`` on the distinct q-grams

All three consume the pair-count stream from :func:`fuzzygram.qgram.pair_counts`
rather than building a dictionary of counts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from fuzzygram.blocks import matched_length
from fuzzygram.core import evaluate
from fuzzygram.qgram import qgram_pair_counts, validate_q


@dataclass(frozen=True)
class QGram:
    """Q-gram distance: total count difference over all q-grams."""

    q: int = 2

    def __post_init__(self) -> None:
        validate_q(self.q)

    def evaluate(self, s1: str, s2: str, len1: int, len2: int) -> int:
        n = 0
        for c1, c2 in qgram_pair_counts(s1, s2, self.q):
            n += abs(c1 - c2)
        return n

    def compare(self, s1: str, s2: str, len1: int, len2: int) -> float:
        if min(len1, len2) <= self.q - 1:
            return float(s1 == s2)
        distance = self.evaluate(s1, s2, len1, len2)
        return 1.0 - distance / (len1 + len2 - 2 * self.q + 2)


@dataclass(frozen=True)
class Cosine:
    """Cosine distance between q-gram count vectors.

    A first string shorter than ``q`` skips the vector computation and scores
    0.0 if both strings are equal, 1.0 otherwise. A zero-norm side (no q-gram
    mass) is resolved before dividing: 0.0 when both sides are empty, 1.0 when
    only one is.
    """

    q: int = 2

    def __post_init__(self) -> None:
        validate_q(self.q)

    def evaluate(self, s1: str, s2: str, len1: int, len2: int) -> float:
        if len1 <= self.q - 1:
            return float(s1 != s2)
        norm1 = norm2 = dot = 0
        for c1, c2 in qgram_pair_counts(s1, s2, self.q):
            norm1 += c1 * c1
            norm2 += c2 * c2
            dot += c1 * c2
        if norm1 == 0 or norm2 == 0:
            return float(norm1 != norm2)
        return 1.0 - dot / math.sqrt(norm1 * norm2)

    def compare(self, s1: str, s2: str, len1: int, len2: int) -> float:
        return 1.0 - self.evaluate(s1, s2, len1, len2)


@dataclass(frozen=True)
class Jaccard:
    """Jaccard distance between the sets of distinct q-grams."""

    q: int = 2

    def __post_init__(self) -> None:
        validate_q(self.q)

    def evaluate(self, s1: str, s2: str, len1: int, len2: int) -> float:
        if len1 <= self.q - 1:
            return float(s1 != s2)
        distinct1 = distinct2 = intersect = 0
        for c1, c2 in qgram_pair_counts(s1, s2, self.q):
            distinct1 += c1 > 0
            distinct2 += c2 > 0
            intersect += c1 > 0 and c2 > 0
        union = distinct1 + distinct2 - intersect
        if union == 0:
            return 0.0
        return 1.0 - intersect / union

    def compare(self, s1: str, s2: str, len1: int, len2: int) -> float:
        return 1.0 - self.evaluate(s1, s2, len1, len2)


@dataclass(frozen=True)
class RatcliffObershelp:
    """Ratcliff-Obershelp similarity: ``2 * matched / (len1 + len2)``."""

    def compare(self, s1: str, s2: str, len1: int, len2: int) -> float:
        total = len1 + len2
        if total == 0:
            return 1.0
        return 2.0 * matched_length(s1, s2) / total

    def evaluate(self, s1: str, s2: str, len1: int, len2: int) -> float:
        return 1.0 - self.compare(s1, s2, len1, len2)


def qgram(s1: str, s2: str, q: int = 2) -> int:
    """Q-gram distance between two strings.

    Example:
        >>> qgram("night", "nacht")
        6
    """
    return evaluate(QGram(q), s1, s2)


def cosine(s1: str, s2: str, q: int = 2) -> float:
    """Cosine distance between the q-gram count vectors of two strings.

    Example:
        >>> cosine("night", "nacht")
        0.75
    """
    return evaluate(Cosine(q), s1, s2)


def jaccard(s1: str, s2: str, q: int = 2) -> float:
    """Jaccard distance between the q-gram sets of two strings.

    Example:
        >>> round(jaccard("night", "nacht"), 3)
        0.857
    """
    return evaluate(Jaccard(q), s1, s2)


def ratcliff_obershelp(s1: str, s2: str) -> float:
    """Ratcliff-Obershelp distance (``1 - similarity``)."""
    return evaluate(RatcliffObershelp(), s1, s2)


__all__ = [
    "QGram",
    "Cosine",
    "Jaccard",
    "RatcliffObershelp",
    "qgram",
    "cosine",
    "jaccard",
    "ratcliff_obershelp",
]
