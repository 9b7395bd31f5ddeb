"""Locale capability consumed by the translator.

A locale provides, for each translatable layout element, the localized names
in canonical order: weekdays Sunday to Saturday, months January to
December, day periods AM then PM. An empty table means the language does
not support that element.

Architecture:
    - Locale: structural protocol, any conforming object is accepted
    - GenericLocale: immutable record holding the five tables
    - table_for / canonical_table: TokenKind based accessors

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, fields
from typing import Protocol, runtime_checkable

from dateglot.constants import (
    DAY_PERIODS_STD,
    LONG_DAY_NAMES_STD,
    LONG_MONTH_NAMES_STD,
    SHORT_DAY_NAMES_STD,
    SHORT_MONTH_NAMES_STD,
    TABLE_CARDINALITY,
    TokenKind,
)

__all__ = [
    "GenericLocale",
    "Locale",
    "canonical_table",
    "table_for",
]


@runtime_checkable
class Locale(Protocol):
    """Localized names for weekdays, months and day periods.

    Every table is either empty (unsupported by the language) or holds
    exactly the canonical number of entries, in canonical order.
    """

    @property
    def language(self) -> str:
        """BCP 47 language tag of this locale (e.g. 'es', 'pt-BR')."""
        ...

    @property
    def short_day_names(self) -> Sequence[str]:
        """Abbreviated weekday names, Sunday to Saturday (7 entries)."""
        ...

    @property
    def long_day_names(self) -> Sequence[str]:
        """Full weekday names, Sunday to Saturday (7 entries)."""
        ...

    @property
    def short_month_names(self) -> Sequence[str]:
        """Abbreviated month names, January to December (12 entries)."""
        ...

    @property
    def long_month_names(self) -> Sequence[str]:
        """Full month names, January to December (12 entries)."""
        ...

    @property
    def day_periods(self) -> Sequence[str]:
        """Day period markers, AM then PM (2 entries)."""
        ...


# Field name on a Locale for every token kind, in record order.
_KIND_FIELDS: dict[TokenKind, str] = {
    TokenKind.SHORT_DAY_NAMES: "short_day_names",
    TokenKind.LONG_DAY_NAMES: "long_day_names",
    TokenKind.SHORT_MONTH_NAMES: "short_month_names",
    TokenKind.LONG_MONTH_NAMES: "long_month_names",
    TokenKind.DAY_PERIODS: "day_periods",
}

_CANONICAL_TABLES: dict[TokenKind, tuple[str, ...]] = {
    TokenKind.SHORT_DAY_NAMES: SHORT_DAY_NAMES_STD,
    TokenKind.LONG_DAY_NAMES: LONG_DAY_NAMES_STD,
    TokenKind.SHORT_MONTH_NAMES: SHORT_MONTH_NAMES_STD,
    TokenKind.LONG_MONTH_NAMES: LONG_MONTH_NAMES_STD,
    TokenKind.DAY_PERIODS: DAY_PERIODS_STD,
}


@dataclass(frozen=True, slots=True)
class GenericLocale:
    """Immutable locale record holding the five name tables.

    Tables are validated and normalized to tuples at construction, so a
    GenericLocale can be shared freely between threads.

    Examples:
        >>> es = GenericLocale(
        ...     language="es",
        ...     long_day_names=("domingo", "lunes", "martes", "miércoles",
        ...                     "jueves", "viernes", "sábado"),
        ... )
        >>> es.short_day_names
        ()

    Raises:
        ValueError: If a non-empty table does not hold exactly the canonical
            number of entries, or holds something other than strings.
    """

    language: str
    short_day_names: tuple[str, ...] = field(default=())
    long_day_names: tuple[str, ...] = field(default=())
    short_month_names: tuple[str, ...] = field(default=())
    long_month_names: tuple[str, ...] = field(default=())
    day_periods: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.language, str) or not self.language:
            msg = "GenericLocale.language must be a non-empty string"
            raise ValueError(msg)

        for kind, name in _KIND_FIELDS.items():
            table = tuple(getattr(self, name))
            if table and len(table) != TABLE_CARDINALITY[kind]:
                msg = (
                    f"GenericLocale.{name} for '{self.language}' must hold "
                    f"{TABLE_CARDINALITY[kind]} entries or none, got {len(table)}"
                )
                raise ValueError(msg)
            if not all(isinstance(entry, str) for entry in table):
                msg = f"GenericLocale.{name} for '{self.language}' must only hold strings"
                raise ValueError(msg)
            # frozen dataclass: normalize lists to tuples in place
            object.__setattr__(self, name, table)

    def is_empty(self) -> bool:
        """Return True when no table is populated."""
        return not any(getattr(self, f.name) for f in fields(self) if f.name != "language")


def table_for(locale: Locale, kind: TokenKind) -> Sequence[str]:
    """Return the locale table selected by a layout element."""
    return getattr(locale, _KIND_FIELDS[kind])


def canonical_table(kind: TokenKind) -> tuple[str, ...]:
    """Return the English table a layout element is translated to."""
    return _CANONICAL_TABLES[kind]
