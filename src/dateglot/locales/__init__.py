"""Locales: localized weekday, month and day period names.

Public API:
    Locale - Structural protocol consumed by the translator
    GenericLocale - Immutable five-table locale record
    new_default_locale - Resolve a BCP 47 tag to CLDR names
    available_locales - Tags with CLDR data
    TableConfig - CLDR extraction settings

Python 3.11+. Uses Babel for CLDR data.
"""

from .base import GenericLocale, Locale, canonical_table, table_for
from .cldr import TableConfig, build_generic_locale
from .registry import (
    available_locales,
    clear_locale_cache,
    locale_cache_info,
    new_default_locale,
    normalize_locale,
)

__all__ = [
    "GenericLocale",
    "Locale",
    "TableConfig",
    "available_locales",
    "build_generic_locale",
    "canonical_table",
    "clear_locale_cache",
    "locale_cache_info",
    "new_default_locale",
    "normalize_locale",
    "table_for",
]
