"""Shared constants for dateglot.

Constants are grouped by domain:
- Canonical tables: English names used as translation output
- Token kinds: layout elements that select a locale table
- Reference layouts: well-known layouts of the Go time package
- Cache limits: memory bounds for locale resolution

Python 3.11+. Zero external dependencies.
"""

from enum import StrEnum

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Canonical tables
    "SHORT_DAY_NAMES_STD",
    "LONG_DAY_NAMES_STD",
    "SHORT_MONTH_NAMES_STD",
    "LONG_MONTH_NAMES_STD",
    "DAY_PERIODS_STD",
    "TABLE_CARDINALITY",
    "TokenKind",
    # Reference layouts
    "ANSIC",
    "UNIX_DATE",
    "RUBY_DATE",
    "RFC822",
    "RFC822Z",
    "RFC850",
    "RFC1123",
    "RFC1123Z",
    "RFC3339",
    "RFC3339_NANO",
    "KITCHEN",
    "STAMP",
    "STAMP_MILLI",
    "STAMP_MICRO",
    "STAMP_NANO",
    "DATE_TIME",
    "DATE_ONLY",
    "TIME_ONLY",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# CANONICAL TABLES
# ============================================================================
#
# Order is significant and shared with every locale table:
#   weekdays Sunday -> Saturday, months January -> December, AM -> PM.

SHORT_DAY_NAMES_STD: tuple[str, ...] = (
    "Sun",
    "Mon",
    "Tue",
    "Wed",
    "Thu",
    "Fri",
    "Sat",
)

LONG_DAY_NAMES_STD: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

SHORT_MONTH_NAMES_STD: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

LONG_MONTH_NAMES_STD: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_PERIODS_STD: tuple[str, ...] = ("AM", "PM")


class TokenKind(StrEnum):
    """Layout elements that are translated through a locale table.

    The value is the layout element text reported in errors. Declaration
    order matches the field order of a locale record.
    """

    SHORT_DAY_NAMES = "Mon"
    LONG_DAY_NAMES = "Monday"
    SHORT_MONTH_NAMES = "Jan"
    LONG_MONTH_NAMES = "January"
    DAY_PERIODS = "PM"


TABLE_CARDINALITY: dict[TokenKind, int] = {
    TokenKind.SHORT_DAY_NAMES: len(SHORT_DAY_NAMES_STD),
    TokenKind.LONG_DAY_NAMES: len(LONG_DAY_NAMES_STD),
    TokenKind.SHORT_MONTH_NAMES: len(SHORT_MONTH_NAMES_STD),
    TokenKind.LONG_MONTH_NAMES: len(LONG_MONTH_NAMES_STD),
    TokenKind.DAY_PERIODS: len(DAY_PERIODS_STD),
}

# ============================================================================
# REFERENCE LAYOUTS
# ============================================================================
#
# Layouts are written against the reference time
#   Mon Jan 2 15:04:05 MST 2006
# exactly as the Go time package defines them.

ANSIC: str = "Mon Jan _2 15:04:05 2006"
UNIX_DATE: str = "Mon Jan _2 15:04:05 MST 2006"
RUBY_DATE: str = "Mon Jan 02 15:04:05 -0700 2006"
RFC822: str = "02 Jan 06 15:04 MST"
RFC822Z: str = "02 Jan 06 15:04 -0700"
RFC850: str = "Monday, 02-Jan-06 15:04:05 MST"
RFC1123: str = "Mon, 02 Jan 2006 15:04:05 MST"
RFC1123Z: str = "Mon, 02 Jan 2006 15:04:05 -0700"
RFC3339: str = "2006-01-02T15:04:05Z07:00"
RFC3339_NANO: str = "2006-01-02T15:04:05.999999999Z07:00"
KITCHEN: str = "3:04PM"
STAMP: str = "Jan _2 15:04:05"
STAMP_MILLI: str = "Jan _2 15:04:05.000"
STAMP_MICRO: str = "Jan _2 15:04:05.000000"
STAMP_NANO: str = "Jan _2 15:04:05.000000000"
DATE_TIME: str = "2006-01-02 15:04:05"
DATE_ONLY: str = "2006-01-02"
TIME_ONLY: str = "15:04:05"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of resolved default locales kept in memory.
# CLDR ships several hundred locales; typical processes use a handful.
MAX_LOCALE_CACHE_SIZE: int = 256
