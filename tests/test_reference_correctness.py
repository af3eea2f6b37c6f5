"""Reference correctness tests comparing fuzzygram against direct formulas.

The q-gram distances are recomputed here from ``collections.Counter``
frequency maps, and Ratcliff-Obershelp from ``difflib.SequenceMatcher``, to
check that the sorted-merge implementation agrees with the textbook
definitions.
"""

import math
from collections import Counter
from difflib import SequenceMatcher

import hypothesis.strategies as st
import pytest
from hypothesis import HealthCheck, given, settings

import fuzzygram as fg

# Strategy for ASCII strings
ascii_text = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126), min_size=0, max_size=40
)
q_strategy = st.integers(min_value=1, max_value=4)


def _profile(s: str, q: int) -> Counter:
    return Counter(s[i : i + q] for i in range(len(s) - q + 1))


class TestQGramReference:
    """Q-gram distances against Counter-based definitions."""

    @given(ascii_text, ascii_text, q_strategy)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_qgram_matches_counter(self, a: str, b: str, q: int):
        if min(len(a), len(b)) < q:
            return
        p1, p2 = _profile(a, q), _profile(b, q)
        expected = sum(abs(p1[k] - p2[k]) for k in p1.keys() | p2.keys())
        assert fg.qgram(a, b, q) == expected

    @given(ascii_text, ascii_text, q_strategy)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_cosine_matches_counter(self, a: str, b: str, q: int):
        if min(len(a), len(b)) < q:
            return
        p1, p2 = _profile(a, q), _profile(b, q)
        dot = sum(p1[k] * p2[k] for k in p1)
        norm1 = math.sqrt(sum(v * v for v in p1.values()))
        norm2 = math.sqrt(sum(v * v for v in p2.values()))
        assert fg.cosine(a, b, q) == pytest.approx(1 - dot / (norm1 * norm2), abs=1e-12)

    @given(ascii_text, ascii_text, q_strategy)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_jaccard_matches_sets(self, a: str, b: str, q: int):
        if min(len(a), len(b)) < q:
            return
        set1, set2 = set(_profile(a, q)), set(_profile(b, q))
        expected = 1 - len(set1 & set2) / len(set1 | set2)
        assert fg.jaccard(a, b, q) == pytest.approx(expected, abs=1e-12)


class TestRatcliffObershelpReference:
    """Ratcliff-Obershelp against difflib's ratio."""

    @given(ascii_text, ascii_text)
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_matches_difflib_ratio(self, a: str, b: str):
        s1, s2 = (a, b) if len(a) <= len(b) else (b, a)
        expected = SequenceMatcher(None, s1, s2, autojunk=False).ratio()
        if not s1 and not s2:
            expected = 1.0
        assert fg.compare(fg.RatcliffObershelp(), a, b) == pytest.approx(expected)


class TestPartialReference:
    """Partial against an explicit scan of every window."""

    @given(ascii_text, ascii_text)
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_generic_partial_is_window_max(self, a: str, b: str):
        short, long = (a, b) if len(a) <= len(b) else (b, a)
        if not short or len(short) == len(long):
            return
        metric = fg.Jaccard(2)
        windows = [long[i : i + len(short)] for i in range(len(long) - len(short) + 1)]
        expected = max(fg.compare(metric, short, w) for w in windows)
        assert fg.compare(fg.Partial(metric), a, b) == expected

    @given(st.text(alphabet="abcd", min_size=1, max_size=6), st.text(alphabet="abcd", max_size=10))
    @settings(max_examples=100)
    def test_fast_path_finds_exact_substring(self, needle: str, padding: str):
        haystack = padding[: len(padding) // 2] + needle + padding[len(padding) // 2 :]
        assert fg.compare(fg.Partial(fg.RatcliffObershelp()), needle, haystack) == 1.0
