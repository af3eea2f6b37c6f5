"""Tests for parameter validation, enums and scorer resolution."""

import pytest

import fuzzygram as fg
from fuzzygram._utils import (
    VALID_ALGORITHMS,
    VALID_MODIFIERS,
    normalize_algorithm,
    normalize_modifier,
    resolve_metric,
)


class TestNormalizeAlgorithm:
    """Tests for normalize_algorithm."""

    def test_enum(self):
        assert normalize_algorithm(fg.Algorithm.JACCARD) == "jaccard"

    def test_case_insensitive(self):
        assert normalize_algorithm("QGram") == "qgram"
        assert normalize_algorithm("RATCLIFF_OBERSHELP") == "ratcliff_obershelp"

    def test_all_enum_values_valid(self):
        assert VALID_ALGORITHMS == {a.value for a in fg.Algorithm}

    def test_unknown_raises(self):
        with pytest.raises(fg.AlgorithmError, match="Unknown algorithm: 'levenshtein'"):
            normalize_algorithm("levenshtein")

    def test_wrong_type_raises(self):
        with pytest.raises(TypeError, match="algorithm must be str or Algorithm enum"):
            normalize_algorithm(3)

    def test_algorithm_error_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_algorithm("nope")


class TestNormalizeModifier:
    """Tests for normalize_modifier."""

    def test_enum(self):
        assert normalize_modifier(fg.Modifier.TOKEN_MAX) == "token_max"

    def test_string(self):
        assert normalize_modifier("Token_Set") == "token_set"

    def test_all_enum_values_valid(self):
        assert VALID_MODIFIERS == {m.value for m in fg.Modifier}

    def test_unknown_raises(self):
        with pytest.raises(fg.AlgorithmError, match="Unknown modifier"):
            normalize_modifier("fuzzy")

    def test_wrong_type_raises(self):
        with pytest.raises(TypeError):
            normalize_modifier(None)


class TestResolveMetric:
    """Tests for resolve_metric."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("qgram", fg.QGram(3)),
            ("cosine", fg.Cosine(3)),
            ("jaccard", fg.Jaccard(3)),
            ("ratcliff_obershelp", fg.RatcliffObershelp()),
        ],
    )
    def test_base_metrics(self, name, expected):
        assert resolve_metric(name, q=3) == expected

    @pytest.mark.parametrize(
        "modifier,wrapper",
        [
            ("partial", fg.Partial),
            ("token_sort", fg.TokenSort),
            ("token_set", fg.TokenSet),
            ("token_max", fg.TokenMax),
        ],
    )
    def test_modifiers(self, modifier, wrapper):
        assert resolve_metric("qgram", modifier) == wrapper(fg.QGram(2))

    def test_instance_passthrough(self):
        metric = fg.TokenSet(fg.Jaccard(4))
        assert resolve_metric(metric) is metric

    def test_instance_wrapped_by_modifier(self):
        assert resolve_metric(fg.Cosine(3), fg.Modifier.PARTIAL) == fg.Partial(fg.Cosine(3))

    def test_invalid_scorer_type(self):
        with pytest.raises(TypeError, match="scorer must be"):
            resolve_metric(42)

    def test_invalid_q(self):
        with pytest.raises(fg.ValidationError, match="q must be at least 1"):
            resolve_metric("cosine", q=0)

    def test_q_ignored_for_ratcliff_obershelp(self):
        assert resolve_metric("ratcliff_obershelp", q=0) == fg.RatcliffObershelp()


class TestExceptionHierarchy:
    """All fuzzygram errors share a base class."""

    def test_subclasses(self):
        assert issubclass(fg.ValidationError, fg.FuzzyGramError)
        assert issubclass(fg.AlgorithmError, fg.FuzzyGramError)

    def test_catch_base(self):
        with pytest.raises(fg.FuzzyGramError):
            fg.Jaccard(0)


class TestTokenizer:
    """Tests for split_tokens."""

    def test_whitespace(self):
        assert fg.split_tokens("  fuzzy\twuzzy\n was ") == ["fuzzy", "wuzzy", "was"]

    def test_custom_delimiters(self):
        assert fg.split_tokens("a,b;;c", delimiters=",;") == ["a", "b", "c"]

    def test_regex_characters_are_literal(self):
        assert fg.split_tokens("a.b|c", delimiters=".|") == ["a", "b", "c"]

    def test_empty(self):
        assert fg.split_tokens("") == []
        assert fg.split_tokens("", delimiters=",") == []

    def test_empty_delimiters_keeps_string(self):
        assert fg.split_tokens("a b", delimiters="") == ["a b"]
