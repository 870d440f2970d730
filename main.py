#!/usr/bin/env python

"""
Holiday Calendar - Main Entry Point

Lists the public holidays of a region for a year.

Usage:
    python main.py [region] [year] [locale]

Examples:
    python main.py Chile 2017 es_CL
    python main.py CL-AP 2014

Region and locale default to the configured preferences, the year to the
current one.
"""

import sys
import logging
import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from holiday_calendar.domain.exceptions import HolidayCalendarError
from holiday_calendar.infra.config import get_settings
from holiday_calendar.providers.factory import available_regions, get_holidays


def main(argv=None):
    """Main entry point"""
    argv = sys.argv[1:] if argv is None else argv
    prefs = get_settings().preferences

    logging.basicConfig(level=prefs.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    region = argv[0] if len(argv) > 0 else prefs.default_region
    locale = argv[2] if len(argv) > 2 else prefs.default_locale
    try:
        year = int(argv[1]) if len(argv) > 1 else datetime.date.today().year
    except ValueError:
        print(f"Error: Year must be a number, got '{argv[1]}'.")
        return 1

    try:
        holidays = get_holidays(region, year, locale=locale, fallback_locale=prefs.fallback_locale)
    except HolidayCalendarError as e:
        print(f"Error: {e.message}")
        print(f"Available regions: {', '.join(available_regions())}")
        return 1

    print(f"Holidays for {region} in {year}:")
    for holiday in holidays:
        print(f"  {holiday.format()} {holiday.date.strftime('%a')}  "
              f"{holiday.type.value:<10} {holiday.key:<32} {holiday.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
