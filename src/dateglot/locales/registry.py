"""Resolution of language tags to default CLDR locales.

Tags are matched exactly: "pt-BR" resolves only if CLDR ships "pt_BR"
data. There is no fallback to a parent or base language at lookup time;
inherited names are already merged into every CLDR locale.

Resolved locales are built once per tag and cached in a bounded,
process-wide LRU cache. Cached GenericLocale records are immutable and
shared by reference between callers and threads.

Python 3.11+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from threading import RLock

from babel import Locale as BabelLocale
from babel import UnknownLocaleError, localedata

from dateglot.constants import MAX_LOCALE_CACHE_SIZE
from dateglot.diagnostics import ErrorTemplate, UnsupportedLocaleError
from dateglot.locales.base import GenericLocale
from dateglot.locales.cldr import build_generic_locale

__all__ = [
    "available_locales",
    "clear_locale_cache",
    "locale_cache_info",
    "new_default_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Resolved locales keyed by Babel identifier (OrderedDict gives LRU order).
# None records a tag whose CLDR data was rejected, so it is not rebuilt.
_cache: OrderedDict[str, GenericLocale | None] = OrderedDict()
_cache_lock = RLock()


def normalize_locale(language: str) -> str:
    """Convert a BCP 47 tag to the Babel identifier of its CLDR data file.

    BCP 47 uses hyphens (pt-BR), while Babel/POSIX uses underscores (pt_BR).
    No other rewriting takes place, matching stays exact.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("es")
        'es'
    """
    return language.replace("-", "_")


def _exists(identifier: str) -> bool:
    """Return True if Babel ships a data file for exactly this identifier."""
    try:
        return localedata.exists(identifier)
    except ValueError:
        # Babel rejects identifiers that are not valid file names
        return False


def _build(language: str, identifier: str) -> GenericLocale | None:
    try:
        babel_locale = BabelLocale.parse(identifier)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Babel could not load locale '%s': %s", language, e)
        return None
    return build_generic_locale(language, babel_locale)


def new_default_locale(
    language: str,
) -> tuple[GenericLocale | None, tuple[UnsupportedLocaleError, ...]]:
    """Resolve a language tag to its default CLDR locale.

    Never raises for unknown tags. Errors are returned in tuple.

    Args:
        language: BCP 47 language tag (e.g., "es", "pt-BR", "en-AU")

    Returns:
        Tuple of (locale, errors):
        - locale: GenericLocale with the CLDR names, or None
        - errors: Tuple holding one UnsupportedLocaleError if no usable
          CLDR data exists for exactly this tag (empty tuple on success)

    Examples:
        >>> locale, errors = new_default_locale("es")
        >>> locale.long_day_names[1]
        'lunes'

        >>> locale, errors = new_default_locale("xx-unknown")
        >>> locale is None
        True
        >>> errors[0].language
        'xx-unknown'

    Thread Safety:
        Thread-safe. Concurrent calls with the same tag return the same
        instance.
    """
    identifier = normalize_locale(language) if isinstance(language, str) else ""

    with _cache_lock:
        if identifier in _cache:
            _cache.move_to_end(identifier)
            cached = _cache[identifier]
            logger.debug("Locale cache hit: %s", identifier)
            if cached is not None:
                return (cached, ())
            return (None, (_unsupported(language),))

    if not identifier or not _exists(identifier):
        return (None, (_unsupported(language),))

    tag = identifier.replace("_", "-")
    locale = _build(tag, identifier)
    logger.debug("Built locale tables for '%s'", tag)

    with _cache_lock:
        # Another thread may have finished first; keep its instance
        if identifier in _cache:
            locale = _cache[identifier]
        else:
            if len(_cache) >= MAX_LOCALE_CACHE_SIZE:
                _cache.popitem(last=False)
            _cache[identifier] = locale

    if locale is None:
        return (None, (_unsupported(language),))
    return (locale, ())


def _unsupported(language: object) -> UnsupportedLocaleError:
    tag = language if isinstance(language, str) else repr(language)
    return UnsupportedLocaleError(ErrorTemplate.unsupported_locale(tag), language=tag)


def available_locales() -> tuple[str, ...]:
    """List the BCP 47 tags Babel ships CLDR data for, sorted.

    Some listed tags can still resolve to UnsupportedLocaleError when their
    calendar data is empty or incomplete.

    Example:
        >>> "pt-BR" in available_locales()
        True
    """
    return tuple(
        sorted(
            identifier.replace("_", "-")
            for identifier in localedata.locale_identifiers()
        )
    )


def clear_locale_cache() -> None:
    """Drop every resolved locale. Use to free memory or reset state in tests."""
    with _cache_lock:
        _cache.clear()


def locale_cache_info() -> dict[str, int | tuple[str, ...]]:
    """Get cache statistics.

    Returns:
        Dictionary with:
        - size: Current number of cached tags
        - max_size: Maximum cache size
        - locales: Cached Babel identifiers (LRU order)
    """
    with _cache_lock:
        return {
            "size": len(_cache),
            "max_size": MAX_LOCALE_CACHE_SIZE,
            "locales": tuple(_cache.keys()),
        }
