"""dateglot - Translate localized date/time strings to English.

Given a Go reference layout ("Monday Jan _2 2006 15:04:05"), a value
written in another language ("lunes oct 27 1988 11:53:29") and the names
of that language, produces the English value ("Monday Oct 27 1988
11:53:29") that an English-only date parser accepts.

Public API:
    translate - Translate a localized value to English
    parse - Translate, then parse to datetime
    parse_in_location - Translate, then parse in a time zone
    new_default_locale - Resolve a BCP 47 tag to CLDR names
    Locale - Protocol for custom locales
    GenericLocale - Immutable five-table locale record

Errors (returned in tuples, never raised):
    DateglotError - Base exception class
    UnsupportedLocaleError - No locale data for a language tag
    UnsupportedLayoutElementError - Locale lacks names the layout needs
    LayoutMismatchError - Value does not match the layout
    DateParseError - Standard parser rejected the translated value

Submodules:
    dateglot.constants - Canonical English tables and reference layouts
    dateglot.locales - Locale protocol, CLDR tables and resolution
    dateglot.layout - Layout to strptime conversion
    dateglot.diagnostics - Error types, codes and formatting
"""

from .diagnostics import (
    DateglotError,
    DateParseError,
    LayoutMismatchError,
    TranslationError,
    UnsupportedLayoutElementError,
    UnsupportedLocaleError,
)
from .locales import GenericLocale, Locale, available_locales, new_default_locale
from .parsing import parse, parse_in_location
from .translate import translate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    # importlib.metadata is stdlib since 3.8
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("dateglot")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateParseError",
    "DateglotError",
    "GenericLocale",
    "LayoutMismatchError",
    "Locale",
    "TranslationError",
    "UnsupportedLayoutElementError",
    "UnsupportedLocaleError",
    "__version__",
    "available_locales",
    "new_default_locale",
    "parse",
    "parse_in_location",
    "translate",
]
