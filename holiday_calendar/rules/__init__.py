"""Reusable holiday rules"""

from .common import build_holiday, new_years_day, international_workers_day
from .christian import (
    easter, maundy_thursday, good_friday, holy_saturday, st_peter_and_paul_day,
    assumption_of_mary, all_saints_day, immaculate_conception, christmas_day,
)

__all__ = [
    "build_holiday", "new_years_day", "international_workers_day",
    "easter", "maundy_thursday", "good_friday", "holy_saturday", "st_peter_and_paul_day",
    "assumption_of_mary", "all_saints_day", "immaculate_conception", "christmas_day",
]
