"""
Tests for the shared holiday rules.

Rules are pure functions of (year, timezone, locale) and never decide
whether a holiday applies in a given year.
"""

import datetime
import pytest

from holiday_calendar.domain.exceptions import InvalidArgumentError
from holiday_calendar.domain.models import HolidayType
from holiday_calendar.rules import (
    all_saints_day, assumption_of_mary, christmas_day, easter, good_friday,
    holy_saturday, immaculate_conception, international_workers_day,
    maundy_thursday, new_years_day, st_peter_and_paul_day,
)

TIMEZONE = "America/Santiago"


class TestFixedDateRules:

    @pytest.mark.parametrize("rule,key,month,day", [
        (new_years_day, "newYearsDay", 1, 1),
        (international_workers_day, "internationalWorkersDay", 5, 1),
        (st_peter_and_paul_day, "stPeterPaulsDay", 6, 29),
        (assumption_of_mary, "assumptionOfMary", 8, 15),
        (all_saints_day, "allSaintsDay", 11, 1),
        (immaculate_conception, "immaculateConception", 12, 8),
        (christmas_day, "christmasDay", 12, 25),
    ])
    @pytest.mark.parametrize("year", [1000, 1931, 2017])
    def test_fixed_date(self, rule, key, month, day, year):
        holiday = rule(year, TIMEZONE, "en")
        assert holiday.key == key
        assert holiday.date == datetime.date(year, month, day)
        assert holiday.timezone == TIMEZONE


class TestEasterRules:

    @pytest.mark.parametrize("rule,expected", [
        (maundy_thursday, datetime.date(2017, 4, 13)),
        (good_friday, datetime.date(2017, 4, 14)),
        (holy_saturday, datetime.date(2017, 4, 15)),
        (easter, datetime.date(2017, 4, 16)),
    ])
    def test_offsets_2017(self, rule, expected):
        assert rule(2017, TIMEZONE, "en").date == expected

    def test_good_friday_2026(self):
        """Good Friday 2026 is April 3rd"""
        assert good_friday(2026, TIMEZONE, "en").date == datetime.date(2026, 4, 3)


class TestRuleParameters:

    def test_holiday_type_is_passed_through(self):
        holiday = holy_saturday(2017, TIMEZONE, "en", HolidayType.OBSERVANCE)
        assert holiday.type == HolidayType.OBSERVANCE

    def test_names_from_injected_table(self):
        table = {"newYearsDay": {"en": "Fixture New Year"}}
        holiday = new_years_day(2017, TIMEZONE, "en", translations=table)
        assert holiday.name == "Fixture New Year"

    def test_locale_selects_name(self):
        assert good_friday(2017, TIMEZONE, "es_CL").name == "Viernes Santo"
        assert good_friday(2017, TIMEZONE, "en_US").name == "Good Friday"

    def test_invalid_timezone(self):
        with pytest.raises(InvalidArgumentError):
            new_years_day(2017, "Invalid/Zone", "en")
        with pytest.raises(InvalidArgumentError):
            good_friday(2017, "Invalid/Zone", "en")

    @pytest.mark.parametrize("rule", [easter, maundy_thursday, good_friday, holy_saturday])
    def test_year_outside_date_range(self, rule):
        with pytest.raises(InvalidArgumentError):
            rule(0, TIMEZONE, "en")

    def test_rules_are_pure(self):
        assert christmas_day(2017, TIMEZONE, "en") == christmas_day(2017, TIMEZONE, "en")
