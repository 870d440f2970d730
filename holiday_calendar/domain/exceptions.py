"""
Exception hierarchy for the holiday calendar engine.

Every failure surfaces synchronously from a single computation call;
there is no partial-result mode.
"""

from typing import Any, Dict, Optional


class HolidayCalendarError(Exception):
    """
    Base exception for all holiday calendar errors.

    Attributes:
        message: Human-readable error description
        details: Additional context as a dictionary
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}


class InvalidArgumentError(HolidayCalendarError, ValueError):
    """Malformed construction argument (timezone, calendar date, year)."""


class UnknownRegionError(HolidayCalendarError, LookupError):
    """No provider is registered under the requested region identifier."""


class DuplicateHolidayError(HolidayCalendarError):
    """
    Two occurrences with the same key were added to one collection.

    This is a programming error in a rule or provider, never deduplicated.
    """
