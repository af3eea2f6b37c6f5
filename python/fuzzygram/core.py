"""Metric protocol and the two dispatch entry points.

Every metric and modifier exposes ``evaluate(s1, s2, len1, len2)`` (distance)
and ``compare(s1, s2, len1, len2)`` (similarity in ``[0, 1]``). The module
level :func:`evaluate` and :func:`compare` compute the lengths and pass the
shorter string first, so metrics may rely on ``len1 <= len2``.
"""

from __future__ import annotations

from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class Metric(Protocol):
    """Anything that can score a pair of strings."""

    def evaluate(self, s1: str, s2: str, len1: int, len2: int) -> Union[int, float]: ...

    def compare(self, s1: str, s2: str, len1: int, len2: int) -> float: ...


def evaluate(metric: Metric, s1: str, s2: str) -> Union[int, float]:
    """Distance between ``s1`` and ``s2`` under ``metric`` (0 means identical).

    Example:
        >>> from fuzzygram import QGram
        >>> evaluate(QGram(2), "night", "nacht")
        6
    """
    len1, len2 = len(s1), len(s2)
    if len1 > len2:
        return metric.evaluate(s2, s1, len2, len1)
    return metric.evaluate(s1, s2, len1, len2)


def compare(metric: Metric, s1: str, s2: str) -> float:
    """Similarity between ``s1`` and ``s2`` under ``metric`` (1 means identical).

    Example:
        >>> from fuzzygram import Partial, RatcliffObershelp
        >>> compare(Partial(RatcliffObershelp()), "xxabcxx", "abc")
        1.0
    """
    len1, len2 = len(s1), len(s2)
    if len1 > len2:
        return metric.compare(s2, s1, len2, len1)
    return metric.compare(s1, s2, len1, len2)


__all__ = ["Metric", "evaluate", "compare"]
