"""
fuzzygram - q-gram string distances and fuzzy-matching modifiers

A pure-Python library for scoring how alike two strings are, built from
q-gram multiset distances (QGram, Cosine, Jaccard), Ratcliff-Obershelp
matching, and composable modifiers (Partial, TokenSort, TokenSet, TokenMax).

Example usage:
    >>> import fuzzygram as fg

    # Distances (0 means identical)
    >>> fg.qgram("night", "nacht")
    6
    >>> fg.cosine("night", "nacht")
    0.75

    # Similarities (1 means identical) through a metric object
    >>> fg.compare(fg.Partial(fg.RatcliffObershelp()), "abc", "xxabcxx")
    1.0
    >>> fg.compare(fg.TokenSort(fg.QGram(2)), "new york mets", "mets new york")
    1.0

    # Modifiers nest
    >>> metric = fg.TokenSet(fg.Partial(fg.Jaccard(3)))
    >>> fg.compare(metric, "fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear")
    1.0
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from fuzzygram.blocks import matching_blocks
from fuzzygram.core import Metric, compare, evaluate
from fuzzygram.distances import (
    Cosine,
    Jaccard,
    QGram,
    RatcliffObershelp,
    cosine,
    jaccard,
    qgram,
    ratcliff_obershelp,
)
from fuzzygram.enums import Algorithm, Modifier
from fuzzygram.errors import AlgorithmError, FuzzyGramError, ValidationError
from fuzzygram.modifiers import (
    Partial,
    TokenMax,
    TokenSet,
    TokenSort,
    partial_ratio,
    separate_tokens,
    token_max_ratio,
    token_set_ratio,
    token_sort_ratio,
)
from fuzzygram.qgram import QGramSequence, pair_counts
from fuzzygram.tokens import split_tokens

try:
    __version__ = _get_version("fuzzygram")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    # Dispatch
    "Metric",
    "evaluate",
    "compare",
    # Base metrics
    "QGram",
    "Cosine",
    "Jaccard",
    "RatcliffObershelp",
    "qgram",
    "cosine",
    "jaccard",
    "ratcliff_obershelp",
    # Modifiers
    "Partial",
    "TokenSort",
    "TokenSet",
    "TokenMax",
    "partial_ratio",
    "token_sort_ratio",
    "token_set_ratio",
    "token_max_ratio",
    # Building blocks
    "QGramSequence",
    "pair_counts",
    "matching_blocks",
    "separate_tokens",
    "split_tokens",
    # Enums
    "Algorithm",
    "Modifier",
    # Exceptions
    "FuzzyGramError",
    "ValidationError",
    "AlgorithmError",
]
