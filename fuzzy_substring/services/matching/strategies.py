"""
Matching Strategy Implementations

Three-tier matching policy driven by query length:
- skip: query empty or shorter than minimum_length_for_search
- exact: query shorter than minimum_length_for_fuzzy_match, literal containment
- fuzzy: sliding window with a bounded number of substitution mismatches

Strategies decide match / no match only; no position or score is exposed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from fuzzy_substring.services.matching.settings import FuzzyMatchSettings
from fuzzy_substring.services.matching.signals import (
    find_matching_window,
    max_allowed_mismatches,
)


@dataclass(frozen=True)
class StrategyResult:
    """Result from a matching strategy evaluation."""
    matched: bool
    strategy_used: str  # "skip", "exact", "fuzzy"


def fold_case(text: str, settings: FuzzyMatchSettings) -> str:
    """Lower-case text unless the settings ask for case-sensitive matching."""
    if settings.case_sensitive_match:
        return text
    return text.lower()


class MatchingStrategy(ABC):
    """Base class for matching strategies."""

    name = "base"

    @abstractmethod
    def evaluate(
        self,
        query: str,
        text: str,
        settings: FuzzyMatchSettings
    ) -> StrategyResult:
        """
        Decide whether text contains a match for query.

        Args:
            query: Search string as supplied by the caller
            text: Candidate comparison text
            settings: Active FuzzyMatchSettings

        Returns:
            StrategyResult with the boolean decision
        """
        pass


class SkipStrategy(MatchingStrategy):
    """Never matches. Used when the query is below the search length gate."""

    name = "skip"

    def evaluate(self, query, text, settings) -> StrategyResult:
        return StrategyResult(matched=False, strategy_used=self.name)


class ExactSubstringStrategy(MatchingStrategy):
    """
    Literal substring containment (after case folding).
    No mismatch tolerance applies.
    """

    name = "exact"

    def evaluate(self, query, text, settings) -> StrategyResult:
        matched = fold_case(query, settings) in fold_case(text, settings)
        return StrategyResult(matched=matched, strategy_used=self.name)


class FuzzyWindowStrategy(MatchingStrategy):
    """
    Sliding-window substitution matching.

    A window of len(query) characters is moved across the text; the first
    window with at most floor(len(query) * percentage_allowed_mismatch / 100)
    differing positions makes the candidate a match.
    """

    name = "fuzzy"

    def evaluate(self, query, text, settings) -> StrategyResult:
        # Folding can change length ("İ".lower() is two code points); size
        # the window and the mismatch bound from the folded query
        folded_query = fold_case(query, settings)
        max_mismatches = max_allowed_mismatches(len(folded_query), settings.percentage_allowed_mismatch)
        offset = find_matching_window(folded_query, fold_case(text, settings), max_mismatches)
        return StrategyResult(matched=offset is not None, strategy_used=self.name)


class TieredStrategy(MatchingStrategy):
    """
    Default strategy: pick skip, exact or fuzzy tier from the query length.
    """

    name = "tiered"

    def __init__(self):
        self.skip = SkipStrategy()
        self.exact = ExactSubstringStrategy()
        self.fuzzy = FuzzyWindowStrategy()

    def select(self, query: str, settings: FuzzyMatchSettings) -> MatchingStrategy:
        """Return the tier that applies to this query."""
        query_length = len(query)
        if query_length == 0 or query_length < settings.minimum_length_for_search:
            return self.skip
        if query_length < settings.minimum_length_for_fuzzy_match:
            return self.exact
        return self.fuzzy

    def evaluate(self, query, text, settings) -> StrategyResult:
        return self.select(query, settings).evaluate(query, text, settings)
