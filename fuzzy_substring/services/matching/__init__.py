"""
Fuzzy Matching Service Package

Provides the settings model, window signal functions, matching strategies
and candidate text sources used by the fuzzy substring matching engine.
"""

from fuzzy_substring.services.matching.settings import (
    FuzzyMatchSettings,
    InvalidSettingError,
    SettingsResult,
    build_settings,
    default_settings,
)
from fuzzy_substring.services.matching.signals import (
    count_window_mismatches,
    find_matching_window,
    max_allowed_mismatches,
)
from fuzzy_substring.services.matching.strategies import (
    MatchingStrategy,
    SkipStrategy,
    ExactSubstringStrategy,
    FuzzyWindowStrategy,
    TieredStrategy,
    StrategyResult,
)
from fuzzy_substring.services.matching.candidates import (
    FieldOf,
    FieldSelector,
    PlainText,
    TextSource,
    UnsearchableItemsError,
    resolve_text_source,
)

__all__ = [
    # Settings
    "FuzzyMatchSettings",
    "InvalidSettingError",
    "SettingsResult",
    "build_settings",
    "default_settings",
    # Window signals
    "count_window_mismatches",
    "find_matching_window",
    "max_allowed_mismatches",
    # Strategies
    "MatchingStrategy",
    "SkipStrategy",
    "ExactSubstringStrategy",
    "FuzzyWindowStrategy",
    "TieredStrategy",
    "StrategyResult",
    # Candidate text sources
    "FieldOf",
    "FieldSelector",
    "PlainText",
    "TextSource",
    "UnsearchableItemsError",
    "resolve_text_source",
]
