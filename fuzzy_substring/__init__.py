"""
Fuzzy Substring Search

Approximate substring matching over strings or objects with a string field.
"""

import logging

from fuzzy_substring.services.matching import (
    FuzzyMatchSettings,
    InvalidSettingError,
    SettingsResult,
    UnsearchableItemsError,
    build_settings,
)
from fuzzy_substring.services.matching_engine import (
    FuzzyMatchingEngine,
    fuzzy_search,
    fuzzy_search_by_field,
)

__version__ = "0.1.0"

# Silent unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FuzzyMatchSettings",
    "InvalidSettingError",
    "SettingsResult",
    "UnsearchableItemsError",
    "build_settings",
    "FuzzyMatchingEngine",
    "fuzzy_search",
    "fuzzy_search_by_field",
]
