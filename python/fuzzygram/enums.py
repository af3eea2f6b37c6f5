"""Enums for fuzzygram API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available base similarity algorithms.

    This enum provides type-safe algorithm selection for batch operations.
    String values are accepted wherever an Algorithm is.

    Example:
        >>> from fuzzygram import Algorithm
        >>> from fuzzygram.batch import best_matches
        >>> matches = best_matches(
        ...     ["apple", "apply", "banana"],
        ...     "appel",
        ...     scorer=Algorithm.JACCARD,
        ...     limit=2
        ... )
    """

    QGRAM = "qgram"
    """Sum of absolute q-gram count differences"""

    COSINE = "cosine"
    """Cosine distance between q-gram count vectors"""

    JACCARD = "jaccard"
    """Jaccard distance between distinct q-gram sets"""

    RATCLIFF_OBERSHELP = "ratcliff_obershelp"
    """Gestalt pattern matching on longest common blocks"""


class Modifier(str, Enum):
    """Fuzzy-matching modifiers that wrap a base algorithm.

    Example:
        >>> from fuzzygram import Modifier
        >>> from fuzzygram.batch import pairwise
        >>> pairwise(["new york mets"], ["mets new york"], modifier=Modifier.TOKEN_SORT)
        [1.0]
    """

    PARTIAL = "partial"
    """Best-aligned substring of the longer string"""

    TOKEN_SORT = "token_sort"
    """Compare after sorting whitespace-separated tokens"""

    TOKEN_SET = "token_set"
    """Compare shared tokens against each side's leftovers"""

    TOKEN_MAX = "token_max"
    """Best of the plain, partial and token comparisons with fixed scaling"""


__all__ = ["Algorithm", "Modifier"]
