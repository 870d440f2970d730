# -*- coding: utf-8 -*-
"""
Internationalization (i18n) module for holiday names.

This module resolves holiday display names from a translation table.
Lookups never fail: a missing locale falls back to the language part of
the locale and then to the fallback locale.
"""

from typing import Dict, List, Mapping, Optional

from holiday_calendar.i18n.translations import TRANSLATIONS

# Locale used when the caller does not ask for one
DEFAULT_LOCALE = "en"

# Locale consulted when the requested one has no translation
_fallback_locale = "en"


def get_fallback_locale() -> str:
    """Get the current fallback locale."""
    return _fallback_locale


def set_fallback_locale(locale: str) -> None:
    """
    Set the default fallback locale.

    Providers and occurrences read it when they are built and keep their
    own copy, so changing it does not rename existing occurrences.

    Args:
        locale: Locale identifier (e.g. 'en' or 'es_CL')
    """
    global _fallback_locale
    _fallback_locale = locale or "en"


def candidate_locales(locale: str, fallback: Optional[str] = None) -> List[str]:
    """
    Get the ordered list of locales tried for a lookup.

    'es_CL' yields ['es_CL', 'es', 'en'] with the default fallback.
    """
    fallback = fallback or _fallback_locale
    candidates = []
    if locale:
        candidates.append(locale)
        language = locale.replace("-", "_").split("_")[0]
        if language != locale:
            candidates.append(language)
    for extra in (fallback, fallback.split("_")[0]):
        if extra not in candidates:
            candidates.append(extra)
    return candidates


def resolve_name(names: Mapping[str, str], locale: str,
                 fallback: Optional[str] = None) -> Optional[str]:
    """
    Pick the best translation from a locale -> name mapping.

    Args:
        names: Mapping of locale to display name
        locale: Requested locale
        fallback: Fallback locale (defaults to the module setting)

    Returns:
        The translated name, or None if no candidate locale is present.
    """
    for candidate in candidate_locales(locale, fallback):
        name = names.get(candidate)
        if name:
            return name
    return None


def translations_for(key: str,
                     translations: Optional[Mapping[str, Mapping[str, str]]] = None
                     ) -> Dict[str, str]:
    """
    Get all translations of a holiday key.

    Args:
        key: Holiday key (e.g. 'newYearsDay')
        translations: Table to read from (defaults to the bundled table)

    Returns:
        A copy of the locale -> name mapping, empty if the key is unknown.
    """
    table = TRANSLATIONS if translations is None else translations
    return dict(table.get(key, {}))


def tr(key: str, locale: str,
       translations: Optional[Mapping[str, Mapping[str, str]]] = None) -> str:
    """
    Get the translated name for the given holiday key.

    Returns:
        Translated name, or the key itself if not found.
    """
    name = resolve_name(translations_for(key, translations), locale)
    return name if name is not None else key


def get_available_locales(
        translations: Optional[Mapping[str, Mapping[str, str]]] = None) -> List[str]:
    """Get every locale that appears in the translation table."""
    table = TRANSLATIONS if translations is None else translations
    locales = set()
    for names in table.values():
        locales.update(names)
    return sorted(locales)
