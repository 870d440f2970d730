"""
Tests for holiday occurrences, substitutes and collections.
"""

import datetime
import pytest
from pydantic import ValidationError

from holiday_calendar.domain.exceptions import DuplicateHolidayError
from holiday_calendar.domain.models import (
    HolidayCollection, HolidayOccurrence, HolidayType, SubstituteHoliday,
)
from holiday_calendar.domain.dates import Weekday
from holiday_calendar.i18n import set_fallback_locale


def _new_year(locale="es_CL"):
    return HolidayOccurrence(
        key="newYearsDay",
        date=datetime.date(2017, 1, 1),
        names={"en": "New Year's Day", "es": "Año Nuevo"},
        timezone="America/Santiago",
        locale=locale,
    )


class TestHolidayType:

    def test_national_is_legacy_alias_of_official(self):
        assert HolidayType.NATIONAL is HolidayType.OFFICIAL

    def test_closed_set(self):
        assert {t.value for t in HolidayType} == {"official", "observance", "bank", "seasonal", "other"}


class TestHolidayOccurrence:

    def test_name_uses_language_fallback(self):
        """es_CL is not in the names, es is."""
        assert _new_year().name == "Año Nuevo"

    def test_get_name_for_other_locale(self):
        assert _new_year().get_name("en_US") == "New Year's Day"

    def test_unknown_locale_falls_back_to_english(self):
        assert _new_year(locale="xx_YY").name == "New Year's Day"

    def test_key_is_last_resort(self):
        holiday = HolidayOccurrence(key="mystery", date=datetime.date(2017, 3, 3), names={"fr": "Mystère"})
        assert holiday.get_name("de") == "mystery"

    def test_weekday(self):
        assert _new_year().weekday == Weekday.SUNDAY

    def test_default_type_is_official(self):
        assert _new_year().type == HolidayType.OFFICIAL

    def test_is_immutable(self):
        holiday = _new_year()
        with pytest.raises(ValidationError):
            holiday.date = datetime.date(2018, 1, 1)

    def test_invalid_timezone_rejected(self):
        with pytest.raises(ValueError):
            HolidayOccurrence(key="x", date=datetime.date(2017, 1, 1), timezone="Nowhere/City")

    def test_empty_key_rejected(self):
        with pytest.raises(ValidationError):
            HolidayOccurrence(key="", date=datetime.date(2017, 1, 1))

    def test_to_dict(self):
        data = _new_year().to_dict()
        assert data["key"] == "newYearsDay"
        assert data["date"] == "2017-01-01"
        assert data["type"] == "official"
        assert data["name"] == "Año Nuevo"

    def test_names_cannot_be_mutated(self):
        holiday = _new_year()
        with pytest.raises(TypeError):
            holiday.names["es_CL"] = "Mutated"
        assert holiday.name == "Año Nuevo"

    def test_names_are_copied_from_input(self):
        names = {"en": "Harvest Day"}
        holiday = HolidayOccurrence(key="harvestDay", date=datetime.date(2017, 3, 3), names=names)
        names["en"] = "Changed"
        assert holiday.name == "Harvest Day"

    def test_is_hashable(self):
        assert hash(_new_year()) == hash(_new_year())
        assert len({_new_year(), _new_year()}) == 1

    def test_fallback_locale_is_pinned_at_construction(self):
        set_fallback_locale("es")
        holiday = _new_year(locale="ja")
        set_fallback_locale("en")
        assert holiday.fallback_locale == "es"
        assert holiday.name == "Año Nuevo"

    def test_explicit_fallback_locale(self):
        holiday = HolidayOccurrence(
            key="newYearsDay", date=datetime.date(2017, 1, 1),
            names={"en": "New Year's Day", "de": "Neujahr"}, fallback_locale="de",
        )
        assert holiday.get_name("ja") == "Neujahr"


class TestSubstituteHoliday:

    def test_key_is_derived_from_observed(self):
        substitute = SubstituteHoliday(observed_holiday=_new_year(), date=datetime.date(2017, 1, 2))
        assert substitute.key == "substituteHoliday:newYearsDay"

    def test_given_key_is_ignored(self):
        substitute = SubstituteHoliday(
            key="somethingElse", observed_holiday=_new_year(), date=datetime.date(2017, 1, 2)
        )
        assert substitute.key == "substituteHoliday:newYearsDay"

    def test_empty_names_show_observed_name(self):
        substitute = SubstituteHoliday(observed_holiday=_new_year(), date=datetime.date(2017, 1, 2))
        assert substitute.names == {}
        assert substitute.name == "Año Nuevo"
        assert substitute.get_name("en") == "New Year's Day"

    def test_own_names_take_precedence(self):
        substitute = SubstituteHoliday(
            observed_holiday=_new_year(),
            date=datetime.date(2017, 1, 2),
            names={"es_CL": "San Lunes"},
        )
        assert substitute.name == "San Lunes"

    def test_inherits_type_timezone_and_locale(self):
        observed = HolidayOccurrence(
            key="bankDay", date=datetime.date(2017, 1, 1), type=HolidayType.BANK,
            timezone="America/Santiago", locale="en",
        )
        substitute = SubstituteHoliday(observed_holiday=observed, date=datetime.date(2017, 1, 2))
        assert substitute.type == HolidayType.BANK
        assert substitute.timezone == "America/Santiago"
        assert substitute.locale == "en"

    def test_observed_is_untouched(self):
        observed = _new_year()
        SubstituteHoliday(observed_holiday=observed, date=datetime.date(2017, 1, 2))
        assert observed.date == datetime.date(2017, 1, 1)

    def test_to_dict_names_observed(self):
        substitute = SubstituteHoliday(observed_holiday=_new_year(), date=datetime.date(2017, 1, 2))
        assert substitute.to_dict()["observed"] == "newYearsDay"

    def test_inherits_fallback_locale(self):
        observed = _new_year().model_copy(update={"fallback_locale": "es"})
        substitute = SubstituteHoliday(observed_holiday=observed, date=datetime.date(2017, 1, 2))
        assert substitute.fallback_locale == "es"

    def test_is_hashable(self):
        substitute = SubstituteHoliday(observed_holiday=_new_year(), date=datetime.date(2017, 1, 2))
        assert substitute in {substitute}


class TestHolidayCollection:

    def _collection(self):
        new_year = _new_year()
        return HolidayCollection([
            HolidayOccurrence(key="christmasDay", date=datetime.date(2017, 12, 25)),
            new_year,
            SubstituteHoliday(observed_holiday=new_year, date=datetime.date(2017, 1, 2)),
            HolidayOccurrence(key="sameDay", date=datetime.date(2017, 1, 1), type=HolidayType.OBSERVANCE),
        ])

    def test_iterates_in_date_order(self):
        assert self._collection().keys() == [
            "newYearsDay", "sameDay", "substituteHoliday:newYearsDay", "christmasDay",
        ]

    def test_duplicate_key_raises(self):
        collection = self._collection()
        with pytest.raises(DuplicateHolidayError):
            collection.add(HolidayOccurrence(key="christmasDay", date=datetime.date(2017, 12, 26)))

    def test_lookup(self):
        collection = self._collection()
        assert "christmasDay" in collection
        assert collection.contains("newYearsDay")
        assert collection.get("missing") is None
        assert len(collection) == 4

    def test_on_date(self):
        keys = [h.key for h in self._collection().on(datetime.date(2017, 1, 1))]
        assert keys == ["newYearsDay", "sameDay"]

    def test_between(self):
        collection = self._collection()
        start, end = datetime.date(2017, 1, 1), datetime.date(2017, 1, 2)
        assert len(collection.between(start, end)) == 3
        assert collection.between(start, end, inclusive=False) == []

    def test_of_type(self):
        assert [h.key for h in self._collection().of_type(HolidayType.OBSERVANCE)] == ["sameDay"]

    def test_to_dict(self):
        assert [item["date"] for item in self._collection().to_dict()][0] == "2017-01-01"
