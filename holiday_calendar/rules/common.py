"""
Holidays shared by most countries.

Each rule is a pure function of (year, timezone, locale) returning one
occurrence. Rules never decide whether a holiday applies in a year;
establishment and abolition guards belong to the calling provider.
"""

import datetime
from typing import Mapping, Optional

from holiday_calendar.domain.dates import make_date
from holiday_calendar.domain.models import HolidayOccurrence, HolidayType
from holiday_calendar.i18n import translations_for

Translations = Optional[Mapping[str, Mapping[str, str]]]


def build_holiday(key: str, date_obj: datetime.date, timezone: str, locale: str,
                  holiday_type: HolidayType = HolidayType.OFFICIAL,
                  translations: Translations = None) -> HolidayOccurrence:
    """
    Create an occurrence named from the translation table.

    Args:
        key: Holiday key, also the translation table key
        date_obj: Date of the occurrence
        timezone: IANA timezone of the region
        locale: Display locale
        holiday_type: Classification of the holiday
        translations: Translation table (defaults to the bundled one)
    """
    return HolidayOccurrence(
        key=key,
        date=date_obj,
        names=translations_for(key, translations),
        type=holiday_type,
        timezone=timezone,
        locale=locale,
    )


def new_years_day(year: int, timezone: str, locale: str,
                  holiday_type: HolidayType = HolidayType.OFFICIAL,
                  translations: Translations = None) -> HolidayOccurrence:
    """New Year's Day, January 1st."""
    return build_holiday("newYearsDay", make_date(year, 1, 1, timezone),
                         timezone, locale, holiday_type, translations)


def international_workers_day(year: int, timezone: str, locale: str,
                              holiday_type: HolidayType = HolidayType.OFFICIAL,
                              translations: Translations = None) -> HolidayOccurrence:
    """International Workers' Day (Labour Day), May 1st."""
    return build_holiday("internationalWorkersDay", make_date(year, 5, 1, timezone),
                         timezone, locale, holiday_type, translations)
