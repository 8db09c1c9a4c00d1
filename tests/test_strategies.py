"""Tests for the three-tier matching strategies."""

import pytest

from fuzzy_substring.services.matching import (
    ExactSubstringStrategy,
    FuzzyMatchSettings,
    FuzzyWindowStrategy,
    SkipStrategy,
    TieredStrategy,
)


@pytest.fixture
def settings():
    return FuzzyMatchSettings()


@pytest.fixture
def case_sensitive():
    return FuzzyMatchSettings(case_sensitive_match=True)


class TestTierSelection:
    """TieredStrategy picks the tier from the query length."""

    def test_empty_query_skips(self, settings):
        assert isinstance(TieredStrategy().select("", settings), SkipStrategy)

    def test_below_search_length_skips(self):
        settings = FuzzyMatchSettings(minimum_length_for_search=3)
        assert isinstance(TieredStrategy().select("ab", settings), SkipStrategy)

    def test_below_fuzzy_length_is_exact(self, settings):
        assert isinstance(TieredStrategy().select("abcd", settings), ExactSubstringStrategy)

    def test_at_fuzzy_length_is_fuzzy(self, settings):
        assert isinstance(TieredStrategy().select("abcde", settings), FuzzyWindowStrategy)

    def test_result_reports_tier(self, settings):
        strategy = TieredStrategy()
        assert strategy.evaluate("", "x", settings).strategy_used == "skip"
        assert strategy.evaluate("ell", "hello", settings).strategy_used == "exact"
        assert strategy.evaluate("hellow", "hello world", settings).strategy_used == "fuzzy"


class TestExactSubstringStrategy:
    """Literal containment, case-folded per settings."""

    def test_contains(self, settings):
        assert ExactSubstringStrategy().evaluate("ell", "Hello", settings).matched is True

    def test_no_tolerance(self, settings):
        """'helo' has no exact occurrence in 'hello'"""
        assert ExactSubstringStrategy().evaluate("helo", "hello", settings).matched is False

    def test_case_folded_by_default(self, settings):
        assert ExactSubstringStrategy().evaluate("ELL", "hello", settings).matched is True

    def test_case_sensitive(self, case_sensitive):
        assert ExactSubstringStrategy().evaluate("ELL", "hello", case_sensitive).matched is False


class TestFuzzyWindowStrategy:
    """Sliding-window matching with bounded substitutions."""

    def test_one_substitution_allowed(self, settings):
        assert FuzzyWindowStrategy().evaluate("hellow", "hello world", settings).matched is True

    def test_exact_substring_always_matches(self, settings):
        assert FuzzyWindowStrategy().evaluate("world", "hello world", settings).matched is True

    def test_too_many_substitutions(self, settings):
        """floor(6 * 25 / 100) = 1, 'hexxow' needs 2"""
        assert FuzzyWindowStrategy().evaluate("hexxow", "hello world", settings).matched is False

    def test_candidate_shorter_than_query(self, settings):
        assert FuzzyWindowStrategy().evaluate("hellowww", "hello", settings).matched is False

    def test_case_folded_by_default(self, settings):
        assert FuzzyWindowStrategy().evaluate("HELLOW", "Hello World", settings).matched is True

    def test_mismatch_bound_uses_folded_query_length(self, settings):
        """'İab' folds to four code points, so floor(4 * 25 / 100) = 1 mismatch is allowed"""
        assert FuzzyWindowStrategy().evaluate("İab", "ixab", settings).matched is True

    def test_case_sensitive_counts_case_as_mismatch(self, case_sensitive):
        assert FuzzyWindowStrategy().evaluate("HELLOW", "hello world", case_sensitive).matched is False


class TestSkipStrategy:

    def test_never_matches(self, settings):
        assert SkipStrategy().evaluate("hello", "hello", settings).matched is False
