# -*- coding: utf-8 -*-
"""
Holidays of Arica and Parinacota (Chile).

The XV Arica and Parinacota Region borders Peru and Bolivia. It observes
every Chilean holiday plus the anniversary of the Battle of Arica.
"""

from typing import List

from holiday_calendar.domain.models import HolidayOccurrence
from holiday_calendar.providers.base import HolidayProvider
from holiday_calendar.providers.chile import ChileProvider


class AricaAndParinacotaProvider(HolidayProvider):
    """Provider for all holidays in Arica and Parinacota (Chile)."""

    ID = "CL-AP"
    NAME = "Chile/AricaAndParinacota"
    TIMEZONE = ChileProvider.TIMEZONE
    PARENT = ChileProvider

    def calculate(self) -> List[HolidayOccurrence]:
        holidays = self.parent_holidays()

        # Battle of Arica (7 June 1880), celebrated in the region since 2013
        if self.year >= 2013:
            holidays.append(self.fixed("battleOfArica", 6, 7, {
                "es_CL": "Aniversario del Asalto y Toma del Morro de Arica",
                "en": "Battle of Arica",
            }))
        return holidays
