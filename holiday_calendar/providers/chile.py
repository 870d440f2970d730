# -*- coding: utf-8 -*-
"""
Holidays of Chile.

Besides the regular calendar this provider carries the substitute-day
laws (Law 20,983 for New Year, Law 19,668 for the moveable feasts) and
the one-off holidays declared for censuses and elections.
"""

from typing import List

from holiday_calendar.domain.dates import Weekday, next_weekday, shift_to_monday, weekday_of
from holiday_calendar.domain.models import HolidayOccurrence
from holiday_calendar.providers.base import HolidayProvider
from holiday_calendar.rules import (
    new_years_day, good_friday, holy_saturday, international_workers_day,
    st_peter_and_paul_day, assumption_of_mary, all_saints_day,
    immaculate_conception, christmas_day,
)

# Holidays declared for exactly one year: key -> (date, names)
ONE_OFF_HOLIDAYS = {
    "1982CensusDay": ((1982, 4, 21), {
        "es_CL": "XV censo nacional de población y IV de vivienda",
        "en": "1982 Census Day",
    }),
    "1992CensusDay": ((1992, 4, 22), {
        "es_CL": "XVI censo nacional de población y V de vivienda",
        "en": "1992 Census Day",
    }),
    "2002CensusDay": ((2002, 4, 24), {
        "es_CL": "XVII censo nacional de población y VI de vivienda",
        "en": "2002 Census Day",
    }),
    "2017CensusDay": ((2017, 4, 19), {
        "es_CL": "Censo abreviado 2017",
        "en": "2017 Census Day",
    }),
    "2020MunicipalElections": ((2020, 10, 25), {
        "es_CL": "Elecciones municipales 2020",
        "en": "2020 Municipal Elections",
    }),
}


class ChileProvider(HolidayProvider):
    """
    Provider for all holidays in Chile.
    """

    ID = "CL"
    NAME = "Chile"
    TIMEZONE = "America/Santiago"

    def calculate(self) -> List[HolidayOccurrence]:
        holidays: List[HolidayOccurrence] = []

        holidays.extend(self.calculate_new_years_day())
        holidays.append(self.rule(good_friday))
        holidays.append(self.rule(holy_saturday))

        if self.year >= 1932:
            holidays.append(self.rule(international_workers_day))
        if self.year >= 1915:
            holidays.append(self.fixed("navyDay", 5, 21, {
                "es_CL": "Día de las Glorias Navales",
                "en": "Navy Day",
            }))

        holidays.extend(self.with_monday_substitute(self.rule(st_peter_and_paul_day)))

        if self.year >= 2007:
            holidays.append(self.fixed("ourLadyOfMountCarmel", 7, 16, {
                "es_CL": "Virgen del Carmen",
                "en": "Our Lady of Mount Carmel",
            }))

        holidays.append(self.rule(assumption_of_mary))
        holidays.append(self.fixed("independenceDay", 9, 18, {
            "es_CL": "Independencia Nacional",
            "en": "Independence Day",
        }))
        holidays.append(self.fixed("armyDay", 9, 19, {
            "es_CL": "Día de las Glorias del Ejército",
            "en": "Army Day",
        }))
        holidays.extend(self.with_monday_substitute(self.fixed("dayOfTheRace", 10, 12, {
            "es_CL": "Encuentro de Dos Mundos",
            "en": "Day of the Race",
        })))

        if self.year >= 2008:
            holidays.append(self.fixed("reformationDay", 10, 31, {
                "es_CL": "Día Nacional de las Iglesias Evangélicas y Protestantes",
                "en": "Reformation Day",
            }))

        holidays.append(self.rule(all_saints_day))
        holidays.append(self.rule(immaculate_conception))
        holidays.append(self.rule(christmas_day))

        holidays.extend(self.calculate_one_off_holidays())
        return holidays

    def calculate_new_years_day(self) -> List[HolidayOccurrence]:
        """
        New Year's Day, January 1st.

        Law 20,983 declares the following Monday a holiday when January 1st
        falls on a Sunday (2017 going forward).
        """
        holiday = self.rule(new_years_day)
        if self.year >= 2017 and weekday_of(holiday.date) == Weekday.SUNDAY:
            return [holiday, self.substitute(
                holiday,
                next_weekday(holiday.date, Weekday.MONDAY),
                {"es_CL": "San Lunes", "en": "San Lunes"},
            )]
        return [holiday]

    def with_monday_substitute(self, holiday: HolidayOccurrence) -> List[HolidayOccurrence]:
        """
        Apply Law 19,668 to a holiday (2000 going forward).

        A holiday on Tuesday, Wednesday or Thursday is observed the preceding
        Monday, one on Friday the following Monday. The substitute has no
        names of its own and displays the original holiday's name.
        """
        if self.year < 2000:
            return [holiday]

        observed = shift_to_monday(holiday.date)
        if observed == holiday.date:
            return [holiday]
        return [holiday, self.substitute(holiday, observed)]

    def calculate_one_off_holidays(self) -> List[HolidayOccurrence]:
        """Census and election days, each valid only in its own year"""
        holidays = []
        for key, ((year, month, day), names) in ONE_OFF_HOLIDAYS.items():
            if self.year != year:
                continue
            holidays.append(self.fixed(key, month, day, names, year=year))
        return holidays
