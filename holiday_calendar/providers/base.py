"""
Base class for region holiday providers.

Architecture Decision: Template Method + explicit composition
A provider is parameterized by {year, timezone, locale} and produces one
HolidayCollection. A sub-region names its parent provider class and
builds on the parent's complete computation instead of inheriting it.
"""

import datetime
import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Mapping, Optional, Type

from holiday_calendar.domain.dates import get_zone, make_date
from holiday_calendar.domain.exceptions import InvalidArgumentError
from holiday_calendar.domain.models import (
    HolidayCollection, HolidayOccurrence, HolidayType, SubstituteHoliday,
)
from holiday_calendar.i18n import DEFAULT_LOCALE, get_fallback_locale

logger = logging.getLogger(__name__)

Rule = Callable[..., HolidayOccurrence]


class HolidayProvider(ABC):
    """
    Abstract base class for the holidays of one country or sub-region.

    Region-specific implementations inherit from this class and implement
    ``calculate``.
    """

    # ISO 3166 code of the region (e.g. 'CL', 'CL-AP')
    ID: str = ""
    # Registry name, a path below the country (e.g. 'Chile/AricaAndParinacota')
    NAME: str = ""
    TIMEZONE: str = "UTC"
    # Provider whose complete result this region extends
    PARENT: Optional[Type["HolidayProvider"]] = None

    def __init__(self, year: int, timezone: Optional[str] = None,
                 locale: Optional[str] = None,
                 translations: Optional[Mapping[str, Mapping[str, str]]] = None,
                 fallback_locale: Optional[str] = None):
        """
        Initialize the provider.

        Args:
            year: Calendar year to compute
            timezone: IANA timezone (defaults to the region's own)
            locale: Display locale for holiday names
            translations: Translation table (defaults to the bundled one)
            fallback_locale: Locale for missing translations (defaults to the
                i18n setting at construction time)

        Raises:
            InvalidArgumentError: If the year is not an integer or the
                timezone is unknown
        """
        if isinstance(year, bool) or not isinstance(year, int):
            raise InvalidArgumentError(f"Year must be an integer, got {year!r}", {"year": year})

        self.year = year
        self.timezone = timezone or self.TIMEZONE
        self.locale = locale or DEFAULT_LOCALE
        self.translations = translations
        self.fallback_locale = fallback_locale or get_fallback_locale()
        get_zone(self.timezone)

    @abstractmethod
    def calculate(self) -> List[HolidayOccurrence]:
        """Compute every occurrence of this region for the year"""
        raise NotImplementedError("Subclasses must implement calculate")

    def holidays(self) -> HolidayCollection:
        """
        Compute the holidays of the year.

        Returns:
            A fresh collection ordered by date

        Raises:
            DuplicateHolidayError: If two rules produce the same key
        """
        collection = HolidayCollection(self.calculate())
        logger.debug(f"{self.NAME or type(self).__name__} {self.year}: {len(collection)} holidays")
        return collection

    def parent_holidays(self) -> List[HolidayOccurrence]:
        """Run the parent provider's full computation with the same inputs"""
        if self.PARENT is None:
            return []
        parent = self.PARENT(self.year, self.timezone, self.locale, self.translations,
                             self.fallback_locale)
        return parent.calculate()

    def rule(self, rule: Rule,
             holiday_type: HolidayType = HolidayType.OFFICIAL) -> HolidayOccurrence:
        """Evaluate a shared rule for this provider's inputs"""
        holiday = rule(self.year, self.timezone, self.locale, holiday_type, self.translations)
        return holiday.model_copy(update={"fallback_locale": self.fallback_locale})

    def fixed(self, key: str, month: int, day: int, names: Dict[str, str],
              holiday_type: HolidayType = HolidayType.OFFICIAL,
              year: Optional[int] = None) -> HolidayOccurrence:
        """
        Create a region-specific holiday on a fixed date.

        Args:
            key: Holiday key
            month: Month of the holiday
            day: Day of the holiday
            names: Locale -> name mapping
            holiday_type: Classification of the holiday
            year: Year of the date (defaults to the provider's year)
        """
        return HolidayOccurrence(
            key=key,
            date=make_date(self.year if year is None else year, month, day, self.timezone),
            names=names,
            type=holiday_type,
            timezone=self.timezone,
            locale=self.locale,
            fallback_locale=self.fallback_locale,
        )

    def substitute(self, holiday: HolidayOccurrence, date_obj: datetime.date,
                   names: Optional[Dict[str, str]] = None) -> SubstituteHoliday:
        """
        Create a substitute day observed in place of ``holiday``.

        Args:
            holiday: The original occurrence
            date_obj: The date the substitute is observed on
            names: Own names; empty means the original name is displayed
        """
        logger.debug(f"Substitute for {holiday.key} on {date_obj.isoformat()}")
        return SubstituteHoliday(
            observed_holiday=holiday,
            date=date_obj,
            names=names or {},
            timezone=self.timezone,
            locale=self.locale,
            fallback_locale=self.fallback_locale,
        )
