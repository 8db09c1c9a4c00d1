"""
Candidate Text Sources

Resolves, once per search call, how comparison text is read from candidates:
- PlainText: candidates are strings
- FieldOf: candidates are objects; text comes from a field selector

Only the first candidate is inspected. Later candidates are assumed to have
the same shape and their values are coerced with str().
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union
from fuzzy_substring.services.monitoring.logging import get_logger

logger = get_logger(__name__)

# Attribute / key name, or a callable returning the comparison text
FieldSelector = Union[str, Callable[[Any], Any]]

_MISSING = object()


class UnsearchableItemsError(TypeError):
    """Raised when candidates cannot be resolved to comparison strings."""

    def __init__(
        self,
        field: Optional[FieldSelector],
        item_type: str,
        message: Optional[str] = None
    ):
        self.field = field
        self.item_type = item_type

        if message is None:
            if field is None:
                message = (
                    f"A string field must be provided to perform fuzzy search "
                    f"on {item_type} items"
                )
            else:
                message = (
                    f"Field {_describe_field(field)} of {item_type} items "
                    f"is not a string"
                )
        super().__init__(message)


def _describe_field(field: FieldSelector) -> str:
    if callable(field):
        return getattr(field, "__name__", repr(field))
    return repr(field)


def read_field(item: Any, field: FieldSelector) -> Any:
    """
    Read a field value from a candidate.

    Callables are invoked with the item; names are looked up as mapping keys
    for mappings and as attributes otherwise. Lookup errors propagate.
    """
    if callable(field):
        return field(item)
    if isinstance(item, Mapping):
        return item[field]
    return getattr(item, field)


@dataclass(frozen=True)
class PlainText:
    """Candidates are strings and are compared as-is."""

    def text_of(self, item: Any) -> str:
        return str(item)


@dataclass(frozen=True)
class FieldOf:
    """Candidates are objects compared through a field selector."""
    field: FieldSelector

    def text_of(self, item: Any) -> str:
        return str(read_field(item, self.field))


TextSource = Union[PlainText, FieldOf]


def resolve_text_source(first_item: Any, field: Optional[FieldSelector]) -> TextSource:
    """
    Decide how comparison text is read, using the first candidate as representative.

    Args:
        first_item: First element of the candidate collection
        field: Field selector, or None for string candidates

    Returns:
        PlainText or FieldOf

    Raises:
        UnsearchableItemsError: first_item is not a string and field is None,
            missing, or does not resolve to a string
    """
    if isinstance(first_item, str):
        return PlainText()

    item_type = type(first_item).__name__

    if field is None:
        logger.warning("unsearchable_items", item_type=item_type, reason="no_field")
        raise UnsearchableItemsError(field, item_type)

    try:
        value = read_field(first_item, field)
    except (KeyError, AttributeError):
        value = _MISSING

    if not isinstance(value, str):
        logger.warning("unsearchable_items",
                       item_type=item_type,
                       field=_describe_field(field),
                       reason="missing_field" if value is _MISSING else "non_string_field")
        raise UnsearchableItemsError(field, item_type)

    return FieldOf(field)
