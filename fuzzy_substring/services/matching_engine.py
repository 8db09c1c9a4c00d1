"""
Fuzzy Substring Matching Engine

Filters candidate collections down to those containing a substring close to
the query:
- Length gate: queries shorter than minimum_length_for_search match nothing
- Exact tier below minimum_length_for_fuzzy_match
- Fuzzy window tier at or above it

The engine keeps no state between calls. Candidates are evaluated
independently and returned in input order.
"""

from typing import List, Optional, Sequence, TypeVar

from fuzzy_substring.services.matching import (
    FieldSelector,
    FuzzyMatchSettings,
    MatchingStrategy,
    TieredStrategy,
    default_settings,
    resolve_text_source,
)
from fuzzy_substring.services.monitoring.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class FuzzyMatchingEngine:
    """
    Fuzzy substring matching over strings or objects with a string field.

    Usage:
        engine = FuzzyMatchingEngine(FuzzyMatchSettings(percentage_allowed_mismatch=20))

        engine.matches("hellow", "hello world")  # True
        engine.filter("hellow", ["hello world", "goodbye"])  # ["hello world"]
        engine.filter("alice", users, field="name")  # users whose name matches

    Reuse one engine (or one settings object) when searching repeatedly.
    """

    def __init__(
        self,
        settings: Optional[FuzzyMatchSettings] = None,
        strategy: Optional[MatchingStrategy] = None
    ):
        """
        Initialize matching engine.

        Args:
            settings: Match settings (default: shared default settings)
            strategy: Matching strategy (default: TieredStrategy)
        """
        self.settings = settings or default_settings()
        self.strategy = strategy or TieredStrategy()

    def matches(self, query: str, candidate: str) -> bool:
        """Decide whether a single candidate string contains a fuzzy match for query."""
        if len(query) < self.settings.minimum_length_for_search:
            return False
        return self.strategy.evaluate(query, candidate, self.settings).matched

    def filter(
        self,
        query: str,
        candidates: Sequence[T],
        field: Optional[FieldSelector] = None
    ) -> List[T]:
        """
        Return the candidates that contain a fuzzy match for query.

        Args:
            query: Search string
            candidates: Strings, or objects when field is given
            field: Attribute/key name or callable selecting the comparison text

        Returns:
            Matching candidates in input order (original objects)

        Raises:
            UnsearchableItemsError: candidates are not strings and field does
                not select a string on the first candidate
        """
        if not query or not candidates:
            return []

        # Usage errors surface even when the length gate would return nothing
        source = resolve_text_source(candidates[0], field)

        if len(query) < self.settings.minimum_length_for_search:
            logger.debug("query_below_search_length",
                         query_length=len(query),
                         minimum_length_for_search=self.settings.minimum_length_for_search)
            return []

        result = [
            item for item in candidates
            if self.strategy.evaluate(query, source.text_of(item), self.settings).matched
        ]

        logger.debug("fuzzy_filter_complete",
                     query_length=len(query),
                     candidates=len(candidates),
                     matched=len(result),
                     source=type(source).__name__)

        return result


def fuzzy_search(
    query: str,
    items: Sequence[str],
    settings: Optional[FuzzyMatchSettings] = None
) -> List[str]:
    """
    Filter strings that contain a fuzzy match for query.

    Returns an empty list for an empty query or empty items.

    Example:
        >>> fuzzy_search("hellow", ["hello world", "world"])
        ['hello world']
    """
    return FuzzyMatchingEngine(settings).filter(query, items)


def fuzzy_search_by_field(
    query: str,
    items: Sequence[T],
    field: Optional[FieldSelector],
    settings: Optional[FuzzyMatchSettings] = None
) -> List[T]:
    """
    Filter objects whose field contains a fuzzy match for query.

    Args:
        query: Search string
        items: Objects (or strings when field is None)
        field: Attribute/key name or callable selecting the comparison text
        settings: Match settings (default: shared default settings)

    Returns:
        Matching items in input order

    Raises:
        UnsearchableItemsError: items are not strings and field is None or
            does not resolve to a string on the first item
    """
    return FuzzyMatchingEngine(settings).filter(query, items, field)
