"""Translation of localized date/time values to English.

- translate() returns tuple[str | None, tuple[TranslationError, ...]]
- Functions NEVER raise for bad input - errors are returned in tuple
- No partial output: a failed translation returns None

Thread-safe. Pure in-memory string transformation, no shared mutable state.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

from dateglot.constants import TokenKind
from dateglot.diagnostics import (
    ErrorTemplate,
    LayoutMismatchError,
    TranslationError,
    UnsupportedLayoutElementError,
)
from dateglot.locales.base import Locale, canonical_table, table_for

__all__ = ["LookupResult", "lookup", "translate"]

logger = logging.getLogger(__name__)


# ==============================================================================
# DUAL-CURSOR SCANNER
# ==============================================================================
# ruff: noqa: ERA001 - Documentation table is not commented-out code
#
# ARCHITECTURAL OVERVIEW:
#
# The layout is written against the Go reference time
#   Mon Jan 2 15:04:05 MST 2006
# and the value is that layout filled in using another language. Two cursors
# walk layout and value in lockstep. Wherever the layout holds a translatable
# element, the localized text at the value cursor is looked up in the
# locale table for that element and replaced by its English counterpart.
# Localized names have a different length than the layout element, so the
# cursors advance by different amounts.
#
# Layout elements:
#   Element  | Table               | Layout chars | Value chars
#   ---------|---------------------|--------------|------------------------
#   January  | long month names    | 7            | matched entry
#   Jan      | short month names   | 3            | matched entry
#   Monday   | long day names      | 6            | matched entry
#   Mon      | short day names     | 3            | matched entry
#   PM / pm  | day periods         | 2            | matched entry
#   _2006    | (none)              | 5            | up to 5 non-space
#   _2       | (none)              | 2            | up to 2 non-space
#   __2      | (none)              | 3            | up to 3 non-space
#   other    | (none)              | 1            | 1 (copied verbatim)
#
# "Jan" and "Mon" are only elements when the next layout character is not
# an ASCII lowercase letter, so "Janet" or "Monet" stay literal.
#
# Underscore elements are never translated. Their value side varies in width
# ("4" vs "14" for a space padded day), so they are consumed as a unit to
# keep the cursors synchronized.
#
# Whitespace skipped before a looked-up or underscore element is written to
# the output unchanged. Value text left after the layout is exhausted is
# appended verbatim.
#
# ==============================================================================

# Widths of the underscore elements, longest first.
_PADDING_ELEMENTS: tuple[tuple[str, int], ...] = (
    ("_2006", 5),
    ("__2", 3),
    ("_2", 2),
)


class LookupResult(NamedTuple):
    """Outcome of a table lookup at a value position.

    Attributes:
        offset: Value position after leading whitespace
        skipped_spaces: Number of whitespace characters skipped
        local: Matched text as written in the value ("" when nothing matched)
        canonical: English entry for the match ("" when nothing matched)
    """

    offset: int
    skipped_spaces: int
    local: str
    canonical: str


def translate(
    layout: str,
    value: str,
    locale: Locale,
) -> tuple[str | None, tuple[TranslationError, ...]]:
    """Translate a localized date/time value to English.

    Replaces short and long weekday names, short and long month names and
    day periods by their English equivalents. Everything else in the value
    is kept as is, so the result can be parsed with the same layout by a
    standard, English-only parser.

    Args:
        layout: Go reference layout (e.g., "Monday Jan _2 2006 15:04:05")
        value: Value following the layout, written in the locale's language
        locale: Locale providing the localized names

    Returns:
        Tuple of (result, errors):
        - result: English value, or None if translation failed
        - errors: Tuple of TranslationError (empty tuple on success)

    Examples:
        >>> es, _ = new_default_locale("es")
        >>> translate("Monday Jan _2 2006 15:04:05", "lunes oct 27 1988 11:53:29", es)
        ('Monday Oct 27 1988 11:53:29', ())

        >>> result, errors = translate("Mon January", "febrero lun", es)
        >>> result is None
        True
        >>> errors[0].layout_element
        'Mon'
    """
    result, error = _scan(layout, value, locale)
    if error is not None:
        logger.debug("Translation of '%s' with layout '%s' aborted: %s", value, layout, error)
        return (None, (error,))
    return (result, ())


def _scan(layout: str, value: str, locale: Locale) -> tuple[str | None, TranslationError | None]:
    """Run the dual-cursor scanner.

    Returns:
        (translated value, None) on success, (None, error) at the first
        element that cannot be translated.
    """
    parts: list[str] = []
    layout_pos = 0
    value_pos = 0

    while layout_pos < len(layout):
        kind, size = _table_element_at(layout, layout_pos)
        if kind is not None:
            table = table_for(locale, kind)
            if not table:
                return (None, _unsupported_element(kind, locale))
            value_pos, mismatch = _write_table_value(kind, table, value, value_pos, parts)
            if mismatch is not None:
                return (None, mismatch)
            layout_pos += size
            continue

        width = _padding_element_at(layout, layout_pos, len(value) - value_pos)
        if width:
            value_pos = _write_next_non_space(value, value_pos, width, parts)
            layout_pos += width
            continue

        # Literal: one character on both sides
        if value_pos < len(value):
            parts.append(value[value_pos])
            value_pos += 1
        layout_pos += 1

    parts.append(value[value_pos:])
    return ("".join(parts), None)


def _unsupported_element(kind: TokenKind, locale: Locale) -> UnsupportedLayoutElementError:
    return UnsupportedLayoutElementError(
        ErrorTemplate.unsupported_layout_element(kind.value, locale.language),
        layout_element=kind.value,
        language=locale.language,
    )


def _table_element_at(layout: str, pos: int) -> tuple[TokenKind | None, int]:
    """Classify the layout element starting at pos.

    Returns:
        (kind, layout_size) for a translatable element, (None, 0) otherwise.
    """
    match layout[pos]:
        case "J" if layout.startswith("Jan", pos):
            if layout.startswith("January", pos):
                return (TokenKind.LONG_MONTH_NAMES, 7)
            if not _starts_with_lowercase(layout, pos + 3):
                return (TokenKind.SHORT_MONTH_NAMES, 3)
        case "M" if layout.startswith("Mon", pos):
            if layout.startswith("Monday", pos):
                return (TokenKind.LONG_DAY_NAMES, 6)
            if not _starts_with_lowercase(layout, pos + 3):
                return (TokenKind.SHORT_DAY_NAMES, 3)
        case "P" | "p" if pos + 1 < len(layout) and layout[pos + 1] in "Mm":
            return (TokenKind.DAY_PERIODS, 2)
    return (None, 0)


def _padding_element_at(layout: str, pos: int, remaining: int) -> int:
    """Return the width of the underscore element at pos, 0 if none applies.

    An element only applies when the value has at least that many
    characters left from its cursor.
    """
    if layout[pos] != "_":
        return 0
    for element, width in _PADDING_ELEMENTS:
        if layout.startswith(element, pos):
            return width if remaining >= width else 0
    return 0


def _starts_with_lowercase(text: str, pos: int) -> bool:
    return pos < len(text) and "a" <= text[pos] <= "z"


def _skip_spaces(value: str, pos: int) -> int:
    while pos < len(value) and value[pos].isspace():
        pos += 1
    return pos


def _write_table_value(
    kind: TokenKind,
    table: Sequence[str],
    value: str,
    value_pos: int,
    parts: list[str],
) -> tuple[int, LayoutMismatchError | None]:
    """Write the English name found at value_pos.

    Returns:
        (new value position, None), or (value_pos, error) with nothing
        written when no table entry matches.
    """
    found = lookup(table, value, value_pos, canonical_table(kind))
    if not found.canonical:
        unmatched = value[found.offset :]
        error = LayoutMismatchError(
            ErrorTemplate.layout_mismatch(kind.value, unmatched, found.offset),
            layout_element=kind.value,
            value=unmatched,
            position=found.offset,
        )
        return (value_pos, error)

    parts.append(value[value_pos : found.offset])
    parts.append(found.canonical)
    return (found.offset + len(found.local), None)


def _write_next_non_space(value: str, value_pos: int, width: int, parts: list[str]) -> int:
    """Copy leading whitespace plus up to width non-space characters."""
    end = start = _skip_spaces(value, value_pos)
    while end < len(value) and end - start < width and not value[end].isspace():
        end += 1
    parts.append(value[value_pos:end])
    return end


def lookup(
    candidates: Sequence[str],
    value: str,
    offset: int,
    canonical: Sequence[str],
) -> LookupResult:
    """Find which candidate is written at offset (after leading whitespace).

    Every candidate is compared case-insensitively with the value slice of
    the same length. The longest matching candidate wins, since a localized
    name can be a prefix of another one in the same table. Among matches of
    equal length the first in table order wins. Empty candidates never match.

    Args:
        candidates: Locale table, in canonical order
        value: Value being translated
        offset: Position to look at
        canonical: English table with the same order and cardinality

    Returns:
        LookupResult; local and canonical are empty strings if no candidate
        matched.
    """
    start = _skip_spaces(value, offset)
    best_index = -1
    best_size = 0

    for index, candidate in enumerate(candidates):
        size = len(candidate)
        # Empty, or not longer than a match already found
        if size <= best_size:
            continue
        end = start + size
        if end > len(value):
            continue
        if value[start:end].casefold() == candidate.casefold():
            best_index = index
            best_size = size

    if best_index < 0:
        return LookupResult(start, start - offset, "", "")
    return LookupResult(
        start,
        start - offset,
        value[start : start + best_size],
        canonical[best_index],
    )
