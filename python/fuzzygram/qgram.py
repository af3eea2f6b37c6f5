"""Q-gram extraction and sorted multiset comparison.

``QGramSequence`` is a lazy, restartable view of the length-q substrings of a
string. ``pair_counts`` walks two sorted q-gram lists in lockstep and yields,
for every distinct q-gram, how many times it occurs on each side, without
building a frequency map.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from fuzzygram.errors import ValidationError


def validate_q(q: int) -> int:
    """Check that q is a positive integer and return it.

    Raises:
        ValidationError: If q is not an int or is smaller than 1.
    """
    if isinstance(q, bool) or not isinstance(q, int):
        raise ValidationError(f"q must be an integer, got {type(q).__name__}")
    if q < 1:
        raise ValidationError(f"q must be at least 1, got {q}")
    return q


@dataclass(frozen=True)
class QGramSequence:
    """Overlapping substrings of length ``q`` of ``s``, left to right.

    ``len()`` reports ``max(len(s) - q + 1, 0)`` without enumerating. A string
    shorter than ``q`` iterates as a single element equal to the whole string,
    so short inputs compare whole against whole.

    Example:
        >>> list(QGramSequence("leila", 2))
        ['le', 'ei', 'il', 'la']
        >>> list(QGramSequence("a", 3)), len(QGramSequence("a", 3))
        (['a'], 0)
    """

    s: str
    q: int

    def __post_init__(self) -> None:
        validate_q(self.q)

    def __len__(self) -> int:
        return max(len(self.s) - self.q + 1, 0)

    def __iter__(self) -> Iterator[str]:
        s, q = self.s, self.q
        if len(s) < q:
            yield s
            return
        for start in range(len(s) - q + 1):
            yield s[start : start + q]

    def sorted(self) -> List[str]:
        """Materialize the q-grams in lexicographic order, duplicates kept."""
        return sorted(self)


def pair_counts(v1: Sequence[str], v2: Sequence[str]) -> Iterator[Tuple[int, int]]:
    """Yield ``(count in v1, count in v2)`` for each distinct element.

    Both inputs must be sorted in the same order. Elements are emitted in
    ascending order, each distinct value exactly once, never as ``(0, 0)``.

    Example:
        >>> list(pair_counts(["ab", "ab", "bc"], ["ab", "cd"]))
        [(2, 1), (1, 0), (0, 1)]
    """
    n1, n2 = len(v1), len(v2)
    i1 = i2 = 0
    while i1 < n1 or i2 < n2:
        if i2 >= n2:
            take1, take2 = True, False
        elif i1 >= n1:
            take1, take2 = False, True
        else:
            x1, x2 = v1[i1], v2[i2]
            take1 = x1 <= x2
            take2 = x2 <= x1
        next1 = bisect_right(v1, v1[i1], i1) if take1 else i1
        next2 = bisect_right(v2, v2[i2], i2) if take2 else i2
        yield next1 - i1, next2 - i2
        i1, i2 = next1, next2


def qgram_pair_counts(s1: str, s2: str, q: int) -> Iterator[Tuple[int, int]]:
    """Sort the q-grams of both strings and merge them with ``pair_counts``."""
    return pair_counts(QGramSequence(s1, q).sorted(), QGramSequence(s2, q).sorted())


__all__ = ["QGramSequence", "pair_counts", "qgram_pair_counts", "validate_q"]
