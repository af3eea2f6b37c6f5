"""Batch operations API for fuzzygram.

This module provides list-based batch operations on strings. Every function
accepts a ``scorer`` (algorithm name, Algorithm enum, or metric instance), an
optional ``modifier`` and the q-gram length ``q``; they are resolved once per
call and reused for every pair.

Example usage:
    >>> import fuzzygram.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [(r.text, round(r.score, 2)) for r in results]
    [('hello', 0.89), ('hallo', 0.67), ('world', 0.22)]

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.text for m in matches]
    ['apple', 'apply']

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["new york mets"], ["mets new york"], modifier="token_sort")
    [1.0]

    # Full similarity matrix
    >>> matrix = batch.similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
    >>> # matrix[0] = similarities of "hello" with each choice
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from fuzzygram._utils import DEFAULT_Q, Scorer, resolve_metric
from fuzzygram.core import compare
from fuzzygram.errors import ValidationError

if TYPE_CHECKING:
    from fuzzygram.enums import Modifier

log = logging.getLogger(__name__)

__all__ = [
    "MatchResult",
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
]


@dataclass(frozen=True)
class MatchResult:
    """A scored candidate string.

    Attributes:
        text: The candidate string.
        score: Similarity to the query, between 0.0 and 1.0.
        id: Index of the candidate in the input list.
    """

    text: str
    score: float
    id: int


def similarity(
    strings: list[str],
    query: str,
    scorer: Scorer = "ratcliff_obershelp",
    modifier: Optional[Union[str, Modifier]] = None,
    q: int = DEFAULT_Q,
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        scorer: Base algorithm (string or Algorithm enum) or a metric instance.
            Options:
            - "qgram": Q-gram similarity
            - "cosine": Q-gram cosine similarity
            - "jaccard": Q-gram Jaccard similarity
            - "ratcliff_obershelp": Gestalt pattern matching (default)
        modifier: Optional modifier wrapping the scorer: "partial",
            "token_sort", "token_set" or "token_max".
        q: Q-gram length for the q-gram algorithms (default: 2).

    Returns:
        List of MatchResult objects in the same order as input strings.
        Each result has `text`, `score`, and `id` fields where `id` is
        the original index in the input list.

    Example:
        >>> results = similarity(["hello", "hallo", "world"], "helo")
        >>> for r in results:
        ...     print(f"{r.text}: {r.score:.2f}")
        hello: 0.89
        hallo: 0.67
        world: 0.22
    """
    metric = resolve_metric(scorer, modifier, q)
    return [MatchResult(text, compare(metric, query, text), i) for i, text in enumerate(strings)]


def best_matches(
    strings: list[str],
    query: str,
    scorer: Scorer = "ratcliff_obershelp",
    modifier: Optional[Union[str, Modifier]] = None,
    q: int = DEFAULT_Q,
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Computes similarity scores for all strings against the query, filters
    by minimum similarity, sorts by score descending (ties keep input order),
    and returns the top matches up to the specified limit.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        scorer: Base algorithm or metric instance (see :func:`similarity`).
        modifier: Optional modifier wrapping the scorer.
        q: Q-gram length for the q-gram algorithms.
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum similarity score to include in results
            (default: 0.0, meaning all results are included).

    Returns:
        List of MatchResult objects sorted by score descending.

    Raises:
        ValidationError: If limit is negative or min_similarity is outside [0, 1].

    Example:
        >>> matches = best_matches(["apple", "apply", "banana"], "appel", limit=2)
        >>> [m.text for m in matches]
        ['apple', 'apply']
    """
    if limit < 0:
        raise ValidationError(f"limit must be non-negative, got {limit}")
    if not 0.0 <= min_similarity <= 1.0:
        raise ValidationError(f"min_similarity must be between 0.0 and 1.0, got {min_similarity}")

    results = [r for r in similarity(strings, query, scorer, modifier, q) if r.score >= min_similarity]
    results.sort(key=lambda r: (-r.score, r.id))
    log.debug("best_matches: %d of %d candidates above %s", len(results), len(strings), min_similarity)
    return results[:limit]


def pairwise(
    left: list[str],
    right: list[str],
    scorer: Scorer = "ratcliff_obershelp",
    modifier: Optional[Union[str, Modifier]] = None,
    q: int = DEFAULT_Q,
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Takes two lists of strings and computes the similarity for each
    corresponding pair (left[i], right[i]).

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        scorer: Base algorithm or metric instance (see :func:`similarity`).
        modifier: Optional modifier wrapping the scorer.
        q: Q-gram length for the q-gram algorithms.

    Returns:
        List of similarity scores (0.0 to 1.0), one for each pair.

    Raises:
        ValidationError: If left and right have different lengths.

    Example:
        >>> [round(s, 3) for s in pairwise(["night", "abc"], ["nacht", "abc"], scorer="jaccard")]
        [0.143, 1.0]
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    metric = resolve_metric(scorer, modifier, q)
    return [compare(metric, a, b) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    scorer: Scorer = "ratcliff_obershelp",
    modifier: Optional[Union[str, Modifier]] = None,
    q: int = DEFAULT_Q,
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Similar to scipy.spatial.distance.cdist, this function computes the
    similarity between every pair of strings from queries and choices,
    returning a 2D matrix.

    Returns:
        2D list where result[i][j] is the similarity between queries[i]
        and choices[j].

    Example:
        >>> matrix = similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    metric = resolve_metric(scorer, modifier, q)
    log.debug("similarity_matrix: %d x %d with %r", len(queries), len(choices), metric)
    return [[compare(metric, query, choice) for choice in choices] for query in queries]
