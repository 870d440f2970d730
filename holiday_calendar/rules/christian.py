"""
Christian holidays.

Moveable feasts are fixed offsets from Western Easter Sunday; the others
fall on fixed dates.
"""

import datetime

from holiday_calendar.domain.dates import compute_easter, get_zone, make_date
from holiday_calendar.domain.models import HolidayOccurrence, HolidayType
from holiday_calendar.rules.common import Translations, build_holiday


def _easter_offset(key: str, days: int, year: int, timezone: str, locale: str,
                   holiday_type: HolidayType, translations: Translations) -> HolidayOccurrence:
    get_zone(timezone)
    date_obj = compute_easter(year) + datetime.timedelta(days=days)
    return build_holiday(key, date_obj, timezone, locale, holiday_type, translations)


def easter(year: int, timezone: str, locale: str,
           holiday_type: HolidayType = HolidayType.OFFICIAL,
           translations: Translations = None) -> HolidayOccurrence:
    """Easter Sunday."""
    return _easter_offset("easter", 0, year, timezone, locale, holiday_type, translations)


def maundy_thursday(year: int, timezone: str, locale: str,
                    holiday_type: HolidayType = HolidayType.OFFICIAL,
                    translations: Translations = None) -> HolidayOccurrence:
    """Maundy Thursday, three days before Easter."""
    return _easter_offset("maundyThursday", -3, year, timezone, locale, holiday_type, translations)


def good_friday(year: int, timezone: str, locale: str,
                holiday_type: HolidayType = HolidayType.OFFICIAL,
                translations: Translations = None) -> HolidayOccurrence:
    """Good Friday, two days before Easter."""
    return _easter_offset("goodFriday", -2, year, timezone, locale, holiday_type, translations)


def holy_saturday(year: int, timezone: str, locale: str,
                  holiday_type: HolidayType = HolidayType.OFFICIAL,
                  translations: Translations = None) -> HolidayOccurrence:
    """Holy Saturday, the day before Easter."""
    return _easter_offset("holySaturday", -1, year, timezone, locale, holiday_type, translations)


def st_peter_and_paul_day(year: int, timezone: str, locale: str,
                          holiday_type: HolidayType = HolidayType.OFFICIAL,
                          translations: Translations = None) -> HolidayOccurrence:
    """Feast of Saints Peter and Paul, June 29th."""
    return build_holiday("stPeterPaulsDay", make_date(year, 6, 29, timezone),
                         timezone, locale, holiday_type, translations)


def assumption_of_mary(year: int, timezone: str, locale: str,
                       holiday_type: HolidayType = HolidayType.OFFICIAL,
                       translations: Translations = None) -> HolidayOccurrence:
    """Assumption of Mary, August 15th."""
    return build_holiday("assumptionOfMary", make_date(year, 8, 15, timezone),
                         timezone, locale, holiday_type, translations)


def all_saints_day(year: int, timezone: str, locale: str,
                   holiday_type: HolidayType = HolidayType.OFFICIAL,
                   translations: Translations = None) -> HolidayOccurrence:
    """All Saints' Day, November 1st."""
    return build_holiday("allSaintsDay", make_date(year, 11, 1, timezone),
                         timezone, locale, holiday_type, translations)


def immaculate_conception(year: int, timezone: str, locale: str,
                          holiday_type: HolidayType = HolidayType.OFFICIAL,
                          translations: Translations = None) -> HolidayOccurrence:
    """Immaculate Conception, December 8th."""
    return build_holiday("immaculateConception", make_date(year, 12, 8, timezone),
                         timezone, locale, holiday_type, translations)


def christmas_day(year: int, timezone: str, locale: str,
                  holiday_type: HolidayType = HolidayType.OFFICIAL,
                  translations: Translations = None) -> HolidayOccurrence:
    """Christmas Day, December 25th."""
    return build_holiday("christmasDay", make_date(year, 12, 25, timezone),
                         timezone, locale, holiday_type, translations)
