"""
Window Signal Functions

Provides the per-window mismatch scan used by the fuzzy tier.

Design decisions:
- Only substitutions are counted: query and window always have equal length
- RapidFuzz Hamming distance with score_cutoff gives the early exit; once the
  count exceeds the cutoff the window is abandoned and cutoff + 1 is returned
- Leftmost qualifying window decides the match; no state crosses windows
"""

from typing import Optional

from rapidfuzz.distance import Hamming

from fuzzy_substring.services.monitoring.logging import get_logger

logger = get_logger(__name__)


def max_allowed_mismatches(query_length: int, percentage_allowed_mismatch: int) -> int:
    """
    Number of positions allowed to differ inside a matched window.

    Example:
        >>> max_allowed_mismatches(6, 25)  # floor(6 * 25 / 100)
        1
    """
    return (query_length * percentage_allowed_mismatch) // 100


def count_window_mismatches(query: str, window: str, max_mismatches: int) -> int:
    """
    Count positions where query and window differ.

    Stops counting once the count exceeds max_mismatches, in which case
    max_mismatches + 1 is returned.

    Args:
        query: Search string (already case-folded if needed)
        window: Candidate slice of the same length as query
        max_mismatches: Largest count still considered a match

    Returns:
        Mismatch count, capped at max_mismatches + 1
    """
    if len(query) != len(window):
        raise ValueError(
            f"Window length {len(window)} does not match query length {len(query)}"
        )
    return Hamming.distance(query, window, score_cutoff=max_mismatches)


def find_matching_window(query: str, text: str, max_mismatches: int) -> Optional[int]:
    """
    Slide a query-sized window across text and return the first matching offset.

    Offsets run from 0 to len(text) - len(query) inclusive. A text shorter
    than the query has no offsets.

    Args:
        query: Search string (already case-folded if needed)
        text: Candidate text (already case-folded if needed)
        max_mismatches: Largest mismatch count accepted for a window

    Returns:
        Leftmost offset whose window stays within max_mismatches, else None

    Example:
        >>> find_matching_window("hellow", "hello world", 1)
        0
    """
    window_size = len(query)
    if window_size == 0:
        return None

    for left in range(len(text) - window_size + 1):
        mismatches = count_window_mismatches(query, text[left:left + window_size], max_mismatches)
        if mismatches <= max_mismatches:
            logger.debug("window_matched",
                         offset=left,
                         mismatches=mismatches,
                         max_mismatches=max_mismatches)
            return left

    return None
