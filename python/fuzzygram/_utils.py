"""Internal utilities for fuzzygram."""

import logging
from typing import Optional, Union

from fuzzygram.core import Metric
from fuzzygram.distances import Cosine, Jaccard, QGram, RatcliffObershelp
from fuzzygram.enums import Algorithm, Modifier
from fuzzygram.errors import AlgorithmError
from fuzzygram.modifiers import Partial, TokenMax, TokenSet, TokenSort

log = logging.getLogger(__name__)

DEFAULT_Q = 2

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)
VALID_MODIFIERS = frozenset(m.value for m in Modifier)

Scorer = Union[str, Algorithm, Metric]

_MODIFIER_TYPES = {
    Modifier.PARTIAL.value: Partial,
    Modifier.TOKEN_SORT.value: TokenSort,
    Modifier.TOKEN_SET.value: TokenSet,
    Modifier.TOKEN_MAX.value: TokenMax,
}


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> str:
    """Convert Algorithm enum to string, or validate string algorithm name.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        Lowercase string algorithm name.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.JACCARD)
        'jaccard'
        >>> normalize_algorithm("QGram")
        'qgram'
    """
    if isinstance(algorithm, Algorithm):
        return algorithm.value

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        if algo_lower in VALID_ALGORITHMS:
            return algo_lower
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise TypeError(f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}")


def normalize_modifier(modifier: Union[str, Modifier]) -> str:
    """Convert Modifier enum to string, or validate string modifier name.

    Raises:
        AlgorithmError: If the modifier name is not recognized.
        TypeError: If modifier is not a string or Modifier enum.
    """
    if isinstance(modifier, Modifier):
        return modifier.value

    if isinstance(modifier, str):
        mod_lower = modifier.lower()
        if mod_lower in VALID_MODIFIERS:
            return mod_lower
        raise AlgorithmError(
            f"Unknown modifier: '{modifier}'. Valid options: {sorted(VALID_MODIFIERS)}"
        )

    raise TypeError(f"modifier must be str or Modifier enum, got {type(modifier).__name__}")


def _base_metric(algorithm: str, q: int) -> Metric:
    if algorithm == Algorithm.QGRAM.value:
        return QGram(q)
    if algorithm == Algorithm.COSINE.value:
        return Cosine(q)
    if algorithm == Algorithm.JACCARD.value:
        return Jaccard(q)
    return RatcliffObershelp()


def resolve_metric(
    scorer: Scorer,
    modifier: Optional[Union[str, Modifier]] = None,
    q: int = DEFAULT_Q,
) -> Metric:
    """Build a metric object from a scorer name and an optional modifier.

    Args:
        scorer: An algorithm name, an Algorithm enum, or a ready-made metric
            instance (returned as is when no modifier is given).
        modifier: Optional modifier name or Modifier enum wrapping the scorer.
        q: Q-gram length for the q-gram algorithms. Ignored for
            Ratcliff-Obershelp and for metric instances.

    Returns:
        An object implementing the Metric protocol.

    Example:
        >>> resolve_metric("jaccard", q=3)
        Jaccard(q=3)
        >>> resolve_metric("ratcliff_obershelp", modifier="partial")
        Partial(dist=RatcliffObershelp())
    """
    if isinstance(scorer, (str, Algorithm)):
        metric = _base_metric(normalize_algorithm(scorer), q)
    elif isinstance(scorer, Metric):
        metric = scorer
    else:
        raise TypeError(
            f"scorer must be str, Algorithm enum or a metric, got {type(scorer).__name__}"
        )

    if modifier is not None:
        metric = _MODIFIER_TYPES[normalize_modifier(modifier)](metric)

    log.debug("Resolved scorer=%r modifier=%r to %r", scorer, modifier, metric)
    return metric


__all__ = [
    "DEFAULT_Q",
    "Scorer",
    "VALID_ALGORITHMS",
    "VALID_MODIFIERS",
    "normalize_algorithm",
    "normalize_modifier",
    "resolve_metric",
]
