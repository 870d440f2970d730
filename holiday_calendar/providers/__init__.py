"""Region holiday providers"""

from .base import HolidayProvider
from .chile import ChileProvider
from .arica_and_parinacota import AricaAndParinacotaProvider
from .factory import create_provider, get_holidays, get_provider_class, available_regions

__all__ = [
    "HolidayProvider", "ChileProvider", "AricaAndParinacotaProvider",
    "create_provider", "get_holidays", "get_provider_class", "available_regions",
]
