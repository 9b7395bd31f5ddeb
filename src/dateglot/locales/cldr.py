"""Locale tables extracted from Babel's CLDR data.

Babel ships the Unicode CLDR locale database with parent locales already
merged in, so "en-AU" carries every name it inherits from "en-001" and
"en". This module reads the Gregorian calendar names from it and orders
them the way the translator expects.

Extraction rules:
    - Context "format" for days, months and day periods
    - Days: "abbreviated" and "wide" widths, re-ordered Sunday first
      (CLDR numbers Monday as 0)
    - Months: "abbreviated" and "wide" widths, 1 to 12
    - Day periods: the first of "abbreviated", "narrow" that defines both
      "am" and "pm"; U+202F NARROW NO-BREAK SPACE is removed
    - Missing data for a kind yields an empty table; incomplete data makes
      the whole locale invalid

Python 3.11+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dateglot.constants import TABLE_CARDINALITY, TokenKind
from dateglot.locales.base import GenericLocale

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = ["TableConfig", "build_generic_locale"]

logger = logging.getLogger(__name__)

# CLDR numbers weekdays from Monday (0) to Sunday (6).
_SUNDAY_FIRST: tuple[int, ...] = (6, 0, 1, 2, 3, 4, 5)
_MONTHS: tuple[int, ...] = tuple(range(1, 13))
_PERIODS: tuple[str, ...] = ("am", "pm")


@dataclass(frozen=True, slots=True)
class TableConfig:
    """Immutable configuration for CLDR table extraction.

    Attributes:
        context: CLDR context to read names from (default: "format").
        short_width: Width used for short day and month names
            (default: "abbreviated").
        long_width: Width used for long day and month names (default: "wide").
        day_period_widths: Widths tried in order for AM/PM markers; the
            first one defining both markers wins
            (default: ("abbreviated", "narrow")).
        strip_chars: Characters removed from day period markers
            (default: U+202F NARROW NO-BREAK SPACE).

    Example:
        >>> config = TableConfig(day_period_widths=("wide",))
        >>> build_generic_locale("en", babel.Locale.parse("en"), config)
    """

    context: str = "format"
    short_width: str = "abbreviated"
    long_width: str = "wide"
    day_period_widths: tuple[str, ...] = ("abbreviated", "narrow")
    strip_chars: str = "\u202f"

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If a context or width is empty, or no day period
                width is given.
        """
        if not self.context:
            msg = "context must be non-empty"
            raise ValueError(msg)
        if not self.short_width or not self.long_width:
            msg = "short_width and long_width must be non-empty"
            raise ValueError(msg)
        if not self.day_period_widths:
            msg = "day_period_widths must name at least one width"
            raise ValueError(msg)


DEFAULT_TABLE_CONFIG = TableConfig()


def _width_table(
    data: Mapping[str, Any], context: str, width: str
) -> Mapping[Any, str] | None:
    """Return the names for a context and width, None when absent."""
    by_context = data.get(context)
    if not by_context:
        return None
    names = by_context.get(width)
    if not names:
        return None
    return names


def _ordered(names: Mapping[Any, str] | None, keys: tuple[Any, ...]) -> tuple[str, ...]:
    """Order CLDR names by canonical keys; missing keys are left out."""
    if names is None:
        return ()
    return tuple(names[key] for key in keys if key in names)


def _day_periods(babel_locale: BabelLocale, config: TableConfig) -> tuple[str, ...]:
    for width in config.day_period_widths:
        names = _width_table(babel_locale.day_periods, config.context, width)
        if names is None or not all(period in names for period in _PERIODS):
            continue
        return tuple(
            "".join(ch for ch in names[period] if ch not in config.strip_chars)
            for period in _PERIODS
        )
    return ()


def build_generic_locale(
    language: str,
    babel_locale: BabelLocale,
    config: TableConfig = DEFAULT_TABLE_CONFIG,
) -> GenericLocale | None:
    """Build a GenericLocale from a Babel locale.

    Args:
        language: BCP 47 tag stored on the resulting locale
        babel_locale: Babel Locale holding merged CLDR data
        config: Extraction settings

    Returns:
        The locale record, or None if the CLDR data is empty or incomplete
        for any kind (a warning is logged for incomplete data).
    """
    days = babel_locale.days
    months = babel_locale.months

    tables: dict[TokenKind, tuple[str, ...]] = {
        TokenKind.SHORT_DAY_NAMES: _ordered(
            _width_table(days, config.context, config.short_width), _SUNDAY_FIRST
        ),
        TokenKind.LONG_DAY_NAMES: _ordered(
            _width_table(days, config.context, config.long_width), _SUNDAY_FIRST
        ),
        TokenKind.SHORT_MONTH_NAMES: _ordered(
            _width_table(months, config.context, config.short_width), _MONTHS
        ),
        TokenKind.LONG_MONTH_NAMES: _ordered(
            _width_table(months, config.context, config.long_width), _MONTHS
        ),
        TokenKind.DAY_PERIODS: _day_periods(babel_locale, config),
    }

    for kind, table in tables.items():
        if table and len(table) != TABLE_CARDINALITY[kind]:
            logger.warning(
                "Skipped invalid locale '%s': %s table has %d of %d entries",
                language,
                kind.name,
                len(table),
                TABLE_CARDINALITY[kind],
            )
            return None

    locale = GenericLocale(
        language=language,
        short_day_names=tables[TokenKind.SHORT_DAY_NAMES],
        long_day_names=tables[TokenKind.LONG_DAY_NAMES],
        short_month_names=tables[TokenKind.SHORT_MONTH_NAMES],
        long_month_names=tables[TokenKind.LONG_MONTH_NAMES],
        day_periods=tables[TokenKind.DAY_PERIODS],
    )
    if locale.is_empty():
        logger.debug("Skipped locale with empty dates: %s", language)
        return None
    return locale
