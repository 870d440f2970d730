"""Domain layer - Holiday entities and date arithmetic"""

from .exceptions import (
    HolidayCalendarError, InvalidArgumentError, UnknownRegionError, DuplicateHolidayError,
)
from .models import HolidayType, HolidayOccurrence, SubstituteHoliday, HolidayCollection

__all__ = [
    "HolidayCalendarError", "InvalidArgumentError", "UnknownRegionError", "DuplicateHolidayError",
    "HolidayType", "HolidayOccurrence", "SubstituteHoliday", "HolidayCollection",
]
