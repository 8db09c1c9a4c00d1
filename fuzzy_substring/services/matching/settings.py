"""
Fuzzy Match Settings

Immutable, validated configuration bundle controlling search behavior.

Design decisions:
- Construct once, reuse across searches (instances are frozen and hashable)
- Falsy values (None, 0, False) fall back to the defaults before validation,
  so an explicit 0 cannot be requested for any numeric field
- First invalid field wins: validation runs in declaration order
"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fuzzy_substring.services.monitoring.logging import get_logger

logger = get_logger(__name__)

# Upper bound for percentage_allowed_mismatch
MAXIMUM_ALLOWED_MISMATCH = 50

DEFAULT_MINIMUM_LENGTH_FOR_SEARCH = 1
DEFAULT_MINIMUM_LENGTH_FOR_FUZZY_MATCH = 5
DEFAULT_PERCENTAGE_ALLOWED_MISMATCH = 25
DEFAULT_CASE_SENSITIVE_MATCH = False

_DEFAULTS = {
    "minimum_length_for_search": DEFAULT_MINIMUM_LENGTH_FOR_SEARCH,
    "minimum_length_for_fuzzy_match": DEFAULT_MINIMUM_LENGTH_FOR_FUZZY_MATCH,
    "percentage_allowed_mismatch": DEFAULT_PERCENTAGE_ALLOWED_MISMATCH,
    "case_sensitive_match": DEFAULT_CASE_SENSITIVE_MATCH,
}


class InvalidSettingError(ValueError):
    """Raised when a fuzzy match setting is outside its valid range."""

    def __init__(self, field: str, value: Any, message: Optional[str] = None):
        self.field = field
        self.value = value

        if message is None:
            message = f"Invalid value provided for {field} in FuzzyMatchSettings: {value!r}"
        super().__init__(message)


class FuzzyMatchSettings(BaseModel):
    """
    Settings passed to the matching engine.

    Usage:
        settings = FuzzyMatchSettings()  # all defaults

        settings = FuzzyMatchSettings(
            minimum_length_for_search=2,
            minimum_length_for_fuzzy_match=6,
            percentage_allowed_mismatch=20,
            case_sensitive_match=True,
        )

    Choice of settings impacts search speed. Invalid settings raise
    InvalidSettingError naming the offending field, both from the constructor
    and from model_validate(). model_copy(update=...) skips validation; build a
    new instance instead.
    """

    model_config = ConfigDict(frozen=True)

    minimum_length_for_search: int = Field(DEFAULT_MINIMUM_LENGTH_FOR_SEARCH, gt=0)
    minimum_length_for_fuzzy_match: int = Field(DEFAULT_MINIMUM_LENGTH_FOR_FUZZY_MATCH, gt=0)
    percentage_allowed_mismatch: int = Field(
        DEFAULT_PERCENTAGE_ALLOWED_MISMATCH, ge=0, le=MAXIMUM_ALLOWED_MISMATCH
    )
    case_sensitive_match: bool = DEFAULT_CASE_SENSITIVE_MATCH

    @field_validator("*", mode="before")
    @classmethod
    def falsy_means_default(cls, value, info):
        # 0 / None / False are indistinguishable from "not supplied"
        if not value:
            return _DEFAULTS[info.field_name]
        return value

    def __init__(
        self,
        minimum_length_for_search: Optional[int] = None,
        minimum_length_for_fuzzy_match: Optional[int] = None,
        percentage_allowed_mismatch: Optional[int] = None,
        case_sensitive_match: Optional[bool] = None,
    ):
        try:
            super().__init__(
                minimum_length_for_search=minimum_length_for_search,
                minimum_length_for_fuzzy_match=minimum_length_for_fuzzy_match,
                percentage_allowed_mismatch=percentage_allowed_mismatch,
                case_sensitive_match=case_sensitive_match,
            )
        except ValidationError as e:
            raise _setting_error(e) from e

    @classmethod
    def model_validate(cls, obj, *args, **kwargs):
        """Validate a mapping of settings; failures raise InvalidSettingError."""
        try:
            return super().model_validate(obj, *args, **kwargs)
        except ValidationError as e:
            raise _setting_error(e) from e


def _setting_error(e: ValidationError) -> InvalidSettingError:
    # Errors are reported in field declaration order; the first one wins
    error = e.errors()[0]
    field_name = str(error["loc"][0]) if error["loc"] else "unknown"
    value = error.get("input")
    logger.warning("fuzzy_settings_invalid",
                   field=field_name,
                   value=value,
                   error_type=error["type"])
    return InvalidSettingError(field_name, value)


@dataclass(frozen=True)
class SettingsResult:
    """Outcome of build_settings: either settings or the validation error."""
    settings: Optional[FuzzyMatchSettings] = None
    error: Optional[InvalidSettingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_settings(
    minimum_length_for_search: Optional[int] = None,
    minimum_length_for_fuzzy_match: Optional[int] = None,
    percentage_allowed_mismatch: Optional[int] = None,
    case_sensitive_match: Optional[bool] = None,
) -> SettingsResult:
    """
    Construct FuzzyMatchSettings, returning failures instead of raising.

    Example:
        >>> result = build_settings(percentage_allowed_mismatch=51)
        >>> result.ok
        False
        >>> result.error.field
        'percentage_allowed_mismatch'
    """
    try:
        settings = FuzzyMatchSettings(
            minimum_length_for_search,
            minimum_length_for_fuzzy_match,
            percentage_allowed_mismatch,
            case_sensitive_match,
        )
    except InvalidSettingError as e:
        return SettingsResult(error=e)
    return SettingsResult(settings=settings)


_default_settings: Optional[FuzzyMatchSettings] = None


def default_settings() -> FuzzyMatchSettings:
    """Shared all-defaults instance, constructed on first use."""
    global _default_settings
    if _default_settings is None:
        _default_settings = FuzzyMatchSettings()
    return _default_settings
