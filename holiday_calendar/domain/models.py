"""
Domain Models using Pydantic for validation.

A holiday occurrence is one concrete, dated instance of a holiday in a
specific year. Occurrences are frozen once built; a provider computation
collects them into a HolidayCollection.
"""

import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from holiday_calendar.domain.dates import Weekday, get_zone, weekday_of
from holiday_calendar.domain.exceptions import DuplicateHolidayError
from holiday_calendar.i18n import DEFAULT_LOCALE, get_fallback_locale, resolve_name

SUBSTITUTE_PREFIX = "substituteHoliday:"


class HolidayType(str, Enum):
    """Legal or practical weight of a holiday."""
    OFFICIAL = "official"
    OBSERVANCE = "observance"
    BANK = "bank"
    SEASON = "seasonal"
    OTHER = "other"

    # Legacy classification, folded into OFFICIAL
    NATIONAL = "official"


class HolidayOccurrence(BaseModel):
    """
    Represents one holiday on one date.

    Examples: New Year's Day 2017 in Chile, the 1992 census day.
    """
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    date: datetime.date
    names: Mapping[str, str] = Field(default_factory=dict)
    type: HolidayType = HolidayType.OFFICIAL
    timezone: str = "UTC"
    locale: str = DEFAULT_LOCALE
    # Pinned when the occurrence is built so later setting changes do not rename it
    fallback_locale: str = Field(default_factory=get_fallback_locale)

    @field_validator("names")
    @classmethod
    def freeze_names(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        get_zone(value)
        return value

    @property
    def name(self) -> str:
        """Display name in the occurrence's locale"""
        return self.get_name()

    @property
    def weekday(self) -> Weekday:
        """Weekday of the occurrence, 0 = Sunday"""
        return weekday_of(self.date)

    def get_name(self, locale: Optional[str] = None) -> str:
        """
        Get the display name of the holiday.

        Args:
            locale: Locale to display (defaults to the occurrence's locale)

        Returns:
            The best matching translation, or the key if none matches.
        """
        locale = locale or self.locale
        name = resolve_name(self.names, locale, self.fallback_locale)
        if name is None:
            return self.fallback_name(locale)
        return name

    def fallback_name(self, locale: str) -> str:
        return self.key

    def __hash__(self) -> int:
        return hash((self.key, self.date, frozenset(self.names.items()), self.type,
                     self.timezone, self.locale, self.fallback_locale))

    def format(self, fmt: str = "%Y-%m-%d") -> str:
        return self.date.strftime(fmt)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dictionary"""
        return {
            "key": self.key,
            "date": self.date.isoformat(),
            "name": self.name,
            "type": self.type.value,
            "names": dict(self.names),
        }


class SubstituteHoliday(HolidayOccurrence):
    """
    A makeup day for a holiday whose own date is not observed.

    The key is always derived from the observed holiday. When no names
    are given, the observed holiday's name is displayed.
    """

    observed_holiday: HolidayOccurrence

    @model_validator(mode="before")
    @classmethod
    def derive_from_observed(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        observed = data.get("observed_holiday")
        if isinstance(observed, dict):
            observed = HolidayOccurrence(**observed)
        if not isinstance(observed, HolidayOccurrence):
            return data

        data = dict(data)
        data["observed_holiday"] = observed
        data["key"] = SUBSTITUTE_PREFIX + observed.key
        data.setdefault("type", observed.type)
        data.setdefault("timezone", observed.timezone)
        data.setdefault("locale", observed.locale)
        data.setdefault("fallback_locale", observed.fallback_locale)
        return data

    def fallback_name(self, locale: str) -> str:
        return self.observed_holiday.get_name(locale)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["observed"] = self.observed_holiday.key
        return result


class HolidayCollection:
    """
    The holidays of one region in one year.

    Iterates in date order (insertion order for equal dates) and rejects
    duplicate keys.
    """

    def __init__(self, occurrences: Optional[List[HolidayOccurrence]] = None):
        self._items: List[HolidayOccurrence] = []
        self._by_key: Dict[str, HolidayOccurrence] = {}
        for occurrence in occurrences or []:
            self.add(occurrence)

    def add(self, occurrence: HolidayOccurrence) -> None:
        """
        Add an occurrence.

        Raises:
            DuplicateHolidayError: If the key is already present
        """
        if occurrence.key in self._by_key:
            raise DuplicateHolidayError(
                f"Duplicate holiday key: {occurrence.key}",
                {"key": occurrence.key, "date": occurrence.date.isoformat()},
            )
        self._by_key[occurrence.key] = occurrence
        self._items.append(occurrence)

    def extend(self, occurrences) -> None:
        for occurrence in occurrences:
            self.add(occurrence)

    def __iter__(self) -> Iterator[HolidayOccurrence]:
        return iter(sorted(self._items, key=lambda h: h.date))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: str) -> bool:
        return key in self._by_key

    def contains(self, key: str) -> bool:
        return key in self._by_key

    def keys(self) -> List[str]:
        """Keys in date order"""
        return [h.key for h in self]

    def get(self, key: str) -> Optional[HolidayOccurrence]:
        return self._by_key.get(key)

    def on(self, date_obj: datetime.date) -> List[HolidayOccurrence]:
        """All occurrences falling on a date"""
        return [h for h in self if h.date == date_obj]

    def between(self, start: datetime.date, end: datetime.date,
                inclusive: bool = True) -> List[HolidayOccurrence]:
        """
        Occurrences within a date range.

        Args:
            start: Start of range
            end: End of range
            inclusive: Whether the boundaries themselves are included
        """
        if inclusive:
            return [h for h in self if start <= h.date <= end]
        return [h for h in self if start < h.date < end]

    def of_type(self, holiday_type: HolidayType) -> List[HolidayOccurrence]:
        return [h for h in self if h.type == holiday_type]

    def dates(self) -> List[datetime.date]:
        return [h.date for h in self]

    def to_dict(self) -> List[Dict[str, Any]]:
        return [h.to_dict() for h in self]


class CalendarPreferences(BaseModel):
    """
    User configuration for holiday lookups.

    This allows users to customize behavior without touching code.
    """
    model_config = ConfigDict(from_attributes=True)

    default_region: str = Field(default="Chile", description="Region name or ISO 3166 code")
    default_locale: str = Field(default="es_CL", description="Locale for holiday names")
    fallback_locale: str = Field(default="en", description="Locale used when a translation is missing")

    respect_holidays: bool = Field(default=True, description="Holidays are non-working days")
    respect_weekends: bool = Field(default=True, description="Weekends are non-working days")

    log_level: str = Field(default="WARNING", description="Logging level for the command line")
