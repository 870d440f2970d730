"""Public holiday calculation for countries and their sub-regions."""

__version__ = "1.0.0"
