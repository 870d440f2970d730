"""
Calendar Service - Handles holiday queries and working day logic.

Architecture Decision: Strategy Pattern
The region provider is the strategy; the service works for any region
the provider factory knows.
"""

import datetime
import logging
from typing import Dict, List, Optional

from holiday_calendar.domain.dates import is_weekend
from holiday_calendar.domain.models import HolidayCollection, HolidayOccurrence
from holiday_calendar.providers.factory import create_provider, get_provider_class

logger = logging.getLogger(__name__)


class CalendarService:
    """
    Answers "is date D a holiday in region R" style questions.
    Holidays are computed once per year and cached on the instance.
    """

    def __init__(self, region: str = 'Chile', locale: Optional[str] = None,
                 respect_holidays: bool = True, respect_weekends: bool = True,
                 fallback_locale: Optional[str] = None):
        """
        Initialize with a region.

        Args:
            region: Region name or ISO 3166 code (e.g., 'Chile' or 'CL-AP')
            locale: Locale for holiday names
            respect_holidays: Whether to consider holidays as non-working days
            respect_weekends: Whether to consider weekends as non-working days
            fallback_locale: Locale used when a translation is missing
        """
        # Fail early on unknown regions
        get_provider_class(region)

        self.region = region
        self.locale = locale
        self.respect_holidays = respect_holidays
        self.respect_weekends = respect_weekends
        self.fallback_locale = fallback_locale
        self._years: Dict[int, HolidayCollection] = {}

    @classmethod
    def from_preferences(cls, preferences) -> "CalendarService":
        """Build a service from CalendarPreferences"""
        return cls(
            region=preferences.default_region,
            locale=preferences.default_locale,
            respect_holidays=preferences.respect_holidays,
            respect_weekends=preferences.respect_weekends,
            fallback_locale=preferences.fallback_locale,
        )

    def holidays_for_year(self, year: int) -> HolidayCollection:
        """
        Get all holidays of a year.

        Args:
            year: Calendar year

        Returns:
            The holiday collection of the region for that year
        """
        if year not in self._years:
            provider = create_provider(self.region, year, locale=self.locale,
                                       fallback_locale=self.fallback_locale)
            self._years[year] = provider.holidays()
            logger.debug(f"Computed holidays for {self.region} {year}")
        return self._years[year]

    def holidays_on(self, date_obj: datetime.date) -> List[HolidayOccurrence]:
        """All holidays falling on a date"""
        return self.holidays_for_year(date_obj.year).on(date_obj)

    def is_working_day(self, date_obj: datetime.date) -> bool:
        """
        Check if a given date is a working day.

        Args:
            date_obj: The date to check

        Returns:
            True if it's a working day, False otherwise
        """
        if self.respect_weekends and is_weekend(date_obj):
            return False

        if self.respect_holidays and self.is_holiday(date_obj):
            return False

        return True

    def get_holiday_name(self, date_obj: datetime.date) -> str:
        """
        Get the name of the holiday for a given date.

        Args:
            date_obj: The date to check

        Returns:
            Holiday name or empty string if not a holiday.
            Several holidays on one day are joined with ', '.
        """
        return ", ".join(h.name for h in self.holidays_on(date_obj))

    def is_weekend(self, date_obj: datetime.date) -> bool:
        """Check if date is a weekend"""
        return is_weekend(date_obj)

    def is_holiday(self, date_obj: datetime.date) -> bool:
        """Check if date is a holiday in the region"""
        return bool(self.holidays_on(date_obj))

    def holidays_between(self, start_date: datetime.date,
                         end_date: datetime.date) -> List[HolidayOccurrence]:
        """
        Get holidays in a date range, possibly spanning several years.

        Args:
            start_date: Start of range (inclusive)
            end_date: End of range (inclusive)
        """
        result = []
        for year in range(start_date.year, end_date.year + 1):
            result.extend(self.holidays_for_year(year).between(start_date, end_date))
        return result

    def next_holiday(self, date_obj: datetime.date) -> Optional[HolidayOccurrence]:
        """
        Get the first holiday strictly after a date.

        Looks into the following year when none is left in the current one.
        """
        for year in (date_obj.year, date_obj.year + 1):
            for holiday in self.holidays_for_year(year):
                if holiday.date > date_obj:
                    return holiday
        return None

    def get_working_days_in_range(self, start_date: datetime.date,
                                  end_date: datetime.date) -> int:
        """
        Count working days in a date range.

        Args:
            start_date: Start of range (inclusive)
            end_date: End of range (inclusive)

        Returns:
            Number of working days
        """
        working_days = 0
        current = start_date

        while current <= end_date:
            if self.is_working_day(current):
                working_days += 1
            current += datetime.timedelta(days=1)

        return working_days
