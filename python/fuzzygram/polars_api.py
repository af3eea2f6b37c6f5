"""Polars API for column-wise fuzzy matching.

Functions in This Module
------------------------
- ``batch_similarity()``: Compute similarity between two aligned Series
- ``batch_best_match()``: Find the best target for each query in a Series

Both accept the same ``scorer`` / ``modifier`` / ``q`` arguments as
:mod:`fuzzygram.batch`. Null inputs produce null outputs.

Example Usage
-------------
>>> import polars as pl
>>> from fuzzygram.polars_api import batch_similarity, batch_best_match
>>>
>>> df = pl.DataFrame({"a": ["new york mets", None], "b": ["mets new york", "x"]})
>>> df = df.with_columns(score=batch_similarity(df["a"], df["b"], modifier="token_sort"))
>>>
>>> categories = ["Electronics", "Clothing", "Food", "Home"]
>>> df = df.with_columns(category=batch_best_match(df["b"], categories))
"""

import logging
from typing import Optional, Union

import polars as pl

from fuzzygram._utils import DEFAULT_Q, Scorer, resolve_metric
from fuzzygram.batch import best_matches
from fuzzygram.core import compare
from fuzzygram.enums import Modifier
from fuzzygram.errors import ValidationError

log = logging.getLogger(__name__)


def batch_similarity(
    left: "pl.Series",
    right: "pl.Series",
    scorer: Scorer = "ratcliff_obershelp",
    modifier: Optional[Union[str, Modifier]] = None,
    q: int = DEFAULT_Q,
) -> "pl.Series":
    """
    Compute similarity between two Series row by row.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)
        scorer: Base algorithm name, Algorithm enum, or metric instance
        modifier: Optional modifier wrapping the scorer
        q: Q-gram length for the q-gram algorithms

    Returns:
        Float64 Series named "similarity" with scores (0.0 to 1.0), null
        where either input is null

    Raises:
        ValidationError: If the Series have different lengths

    Example:
        >>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
        >>> df = df.with_columns(score=batch_similarity(df["a"], df["b"]))
    """
    if len(left) != len(right):
        raise ValidationError("Series must have equal length")

    metric = resolve_metric(scorer, modifier, q)

    scores = []
    for a, b in zip(left.to_list(), right.to_list()):
        if a is None or b is None:
            scores.append(None)
        else:
            scores.append(compare(metric, str(a), str(b)))

    return pl.Series("similarity", scores, dtype=pl.Float64)


def batch_best_match(
    queries: "pl.Series",
    targets: list[str],
    scorer: Scorer = "ratcliff_obershelp",
    modifier: Optional[Union[str, Modifier]] = None,
    q: int = DEFAULT_Q,
    min_similarity: float = 0.0,
) -> "pl.Series":
    """
    Find the best matching target for each query.

    Args:
        queries: Series of query strings
        targets: List of target strings to match against
        scorer: Base algorithm name, Algorithm enum, or metric instance
        modifier: Optional modifier wrapping the scorer
        q: Q-gram length for the q-gram algorithms
        min_similarity: Minimum similarity threshold (0.0 to 1.0)

    Returns:
        Utf8 Series named "best_match" with the best target, or null when the
        query is null or no target reaches min_similarity

    Example:
        >>> categories = ["Electronics", "Clothing", "Food", "Home"]
        >>> df = df.with_columns(
        ...     category=batch_best_match(df["raw_category"], categories)
        ... )
    """
    if not 0.0 <= min_similarity <= 1.0:
        raise ValidationError(f"min_similarity must be between 0.0 and 1.0, got {min_similarity}")
    metric = resolve_metric(scorer, modifier, q)

    matches = []
    for query in queries.to_list():
        if query is None:
            matches.append(None)
            continue
        found = best_matches(targets, str(query), metric, limit=1, min_similarity=min_similarity)
        matches.append(found[0].text if found else None)

    log.debug(
        "batch_best_match: %d of %d queries matched",
        sum(m is not None for m in matches),
        len(matches),
    )
    return pl.Series("best_match", matches, dtype=pl.Utf8)


__all__ = ["batch_similarity", "batch_best_match"]
