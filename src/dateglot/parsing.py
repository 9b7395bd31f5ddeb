"""Parsing of localized date/time values.

- parse() returns tuple[datetime | None, tuple[DateglotError, ...]]
- parse_in_location() returns tuple[datetime | None, tuple[DateglotError, ...]]
- Functions NEVER raise for bad input - errors are returned in tuple

The value is translated to English first, then handed to the standard
parser (datetime.strptime) with the layout converted to a strptime format.
Translation errors are returned as they are; parser errors are wrapped in
DateParseError with the parser's message unchanged.

Zone names ("MST" in a layout) are read by strptime %Z, which drops them.
UTC and GMT are re-attached as UTC; other names leave the result naive.

Thread-safe. Uses stdlib datetime for parsing.

Python 3.11+.
"""

from __future__ import annotations

import re
import time
from datetime import UTC, datetime, tzinfo

from dateglot.diagnostics import DateglotError, DateParseError, ErrorTemplate
from dateglot.layout import layout_to_strptime
from dateglot.locales.base import Locale
from dateglot.translate import translate

__all__ = ["parse", "parse_in_location"]

# Zone names strptime %Z accepts that denote UTC.
_UTC_ZONE_NAMES: frozenset[str] = frozenset({"UTC", "GMT"})


def parse(
    layout: str,
    value: str,
    locale: Locale,
) -> tuple[datetime | None, tuple[DateglotError, ...]]:
    """Translate a localized value and parse it to a datetime.

    Args:
        layout: Go reference layout (e.g., "Monday Jan _2 2006 15:04:05")
        value: Value following the layout, in the locale's language
        locale: Locale providing the localized names

    Returns:
        Tuple of (result, errors):
        - result: Parsed datetime, or None. Naive unless the value carries
          an offset or the UTC/GMT zone name
        - errors: Tuple of DateglotError (empty tuple on success)

    Examples:
        >>> es, _ = new_default_locale("es")
        >>> result, errors = parse("Monday Jan _2 2006", "lunes oct 27 1988", es)
        >>> result
        datetime.datetime(1988, 10, 27, 0, 0)
        >>> errors
        ()
    """
    translated, errors = translate(layout, value, locale)
    if translated is None:
        return (None, errors)

    try:
        return (_strptime(translated, layout_to_strptime(layout)), ())
    except (ValueError, re.error) as e:
        # re.error: a layout element used twice yields a repeated directive
        return (None, (_parse_error(translated, layout, e),))


def parse_in_location(
    layout: str,
    value: str,
    locale: Locale,
    location: tzinfo,
) -> tuple[datetime | None, tuple[DateglotError, ...]]:
    """Translate and parse a localized value, interpreting it in a time zone.

    A value without zone information is taken to be local time in location.
    A value carrying its own UTC offset, or the zone name UTC or GMT,
    keeps it.

    Args:
        layout: Go reference layout
        value: Value following the layout, in the locale's language
        locale: Locale providing the localized names
        location: Time zone for values without zone information
            (e.g., zoneinfo.ZoneInfo("Europe/Madrid"))

    Returns:
        Tuple of (result, errors):
        - result: Aware datetime, or None if translation or parsing failed
        - errors: Tuple of DateglotError (empty tuple on success)
    """
    parsed, errors = parse(layout, value, locale)
    if parsed is None:
        return (None, errors)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=location)
    return (parsed, ())


def _strptime(translated: str, fmt: str) -> datetime:
    """Parse with strptime, keeping a UTC or GMT zone name as UTC."""
    parsed = datetime.strptime(translated, fmt)
    if parsed.tzinfo is None and "%Z" in fmt:
        zone = time.strptime(translated, fmt).tm_zone
        if zone is not None and zone.upper() in _UTC_ZONE_NAMES:
            parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _parse_error(translated: str, layout: str, cause: Exception) -> DateParseError:
    reason = str(cause)
    error = DateParseError(
        ErrorTemplate.parse_failed(translated, layout, reason),
        input_value=translated,
        layout=layout,
        reason=reason,
    )
    error.__cause__ = cause
    return error
