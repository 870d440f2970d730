"""
Factory for creating region holiday providers.

Architecture Decision: Factory Pattern
Instantiates the correct provider from a region name ('Chile',
'Chile/AricaAndParinacota') or ISO 3166 code ('CL', 'CL-AP').
"""

import logging
from typing import Dict, List, Optional, Type

from holiday_calendar.domain.exceptions import UnknownRegionError
from holiday_calendar.domain.models import HolidayCollection
from holiday_calendar.providers.arica_and_parinacota import AricaAndParinacotaProvider
from holiday_calendar.providers.base import HolidayProvider
from holiday_calendar.providers.chile import ChileProvider

logger = logging.getLogger(__name__)

PROVIDERS: Dict[str, Type[HolidayProvider]] = {
    provider.NAME: provider
    for provider in (ChileProvider, AricaAndParinacotaProvider)
}


def get_provider_class(region: str) -> Type[HolidayProvider]:
    """
    Look up the provider class for a region.

    Args:
        region: Region name or ISO 3166 code (codes are case-insensitive)

    Raises:
        UnknownRegionError: If no provider is registered for the region
    """
    if region in PROVIDERS:
        return PROVIDERS[region]

    code = (region or "").upper()
    for provider in PROVIDERS.values():
        if provider.ID == code:
            return provider

    logger.warning(f"Unknown holiday region requested: {region!r}")
    raise UnknownRegionError(f"Unknown region: {region!r}", {"region": region})


def create_provider(region: str, year: int, locale: Optional[str] = None,
                    timezone: Optional[str] = None,
                    fallback_locale: Optional[str] = None) -> HolidayProvider:
    """
    Create the provider for a region and year.

    Args:
        region: Region name or ISO 3166 code
        year: Calendar year
        locale: Display locale for holiday names
        timezone: Override of the region's timezone
        fallback_locale: Locale used when a translation is missing

    Returns:
        HolidayProvider instance for the region
    """
    provider_class = get_provider_class(region)
    return provider_class(year, timezone=timezone, locale=locale, fallback_locale=fallback_locale)


def get_holidays(region: str, year: int, locale: Optional[str] = None,
                 fallback_locale: Optional[str] = None) -> HolidayCollection:
    """Compute the holidays of a region for a year"""
    return create_provider(region, year, locale=locale, fallback_locale=fallback_locale).holidays()


def available_regions() -> List[str]:
    """Get the names of all registered regions"""
    return sorted(PROVIDERS)
