"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from holiday_calendar import i18n
from holiday_calendar.providers import ChileProvider, AricaAndParinacotaProvider

CHILE_LOCALE = "es_CL"


@pytest.fixture(autouse=True)
def reset_fallback_locale():
    """Restore the i18n fallback locale after each test"""
    previous = i18n.get_fallback_locale()
    yield
    i18n.set_fallback_locale(previous)


@pytest.fixture
def chile_holidays():
    """Compute Chilean holidays for a year in the Chilean locale"""
    def _compute(year, locale=CHILE_LOCALE):
        return ChileProvider(year, locale=locale).holidays()
    return _compute


@pytest.fixture
def arica_holidays():
    """Compute Arica and Parinacota holidays for a year in the Chilean locale"""
    def _compute(year, locale=CHILE_LOCALE):
        return AricaAndParinacotaProvider(year, locale=locale).holidays()
    return _compute
