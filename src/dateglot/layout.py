"""Conversion of Go reference layouts to strptime formats.

Layouts describe a value by writing the reference time
    Mon Jan 2 15:04:05 MST 2006
the way the value is formatted. Python's standard parser uses % directives
instead, so every layout element is mapped to its strptime equivalent and
everything else is kept as literal text.

KNOWN LIMITATIONS:
    - Fractional seconds: strptime %f accepts 1 to 6 digits; nanosecond
      values (7 to 9 digits) are rejected. ".999" fractions are not
      optional as they are for Go.
    - Zone names: strptime %Z only knows UTC, GMT and the local zone names.
    - Hour-only offsets ("-07", "Z07") need minutes for strptime %z.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

from functools import lru_cache

__all__ = ["layout_to_strptime", "tokenize_layout"]

# ruff: noqa: ERA001 - Documentation table is not commented-out code
#
# Layout element -> strptime directive
#   Element            | Meaning                    | Directive
#   -------------------|----------------------------|----------
#   2006 / 06          | year, 4 / 2 digits         | %Y / %y
#   January / Jan      | month name, full / short   | %B / %b
#   01 / 1             | month number               | %m
#   Monday / Mon       | weekday name, full / short | %A / %a
#   02 / _2 / 2        | day of month               | %d
#   002 / __2          | day of year                | %j
#   15                 | hour, 24h                  | %H
#   03 / 3             | hour, 12h                  | %I
#   04 / 4             | minute                     | %M
#   05 / 5             | second                     | %S
#   PM / pm            | day period                 | %p
#   MST                | zone abbreviation          | %Z
#   -0700, Z07:00, ... | numeric zone offset        | %z
#   .000 / ,999 ...    | fractional second          | .%f / ,%f
_LAYOUT_TOKEN_MAP: dict[str, str] = {
    "2006": "%Y",
    "06": "%y",
    "January": "%B",
    "Jan": "%b",
    "01": "%m",
    "1": "%m",
    "Monday": "%A",
    "Mon": "%a",
    "02": "%d",
    "_2": "%d",
    "2": "%d",
    "002": "%j",
    "__2": "%j",
    "15": "%H",
    "03": "%I",
    "3": "%I",
    "04": "%M",
    "4": "%M",
    "05": "%S",
    "5": "%S",
    "PM": "%p",
    "pm": "%p",
    "MST": "%Z",
}

# Numeric zone elements, longest first so that prefixes do not win.
_ZONE_ELEMENTS: tuple[str, ...] = (
    "-07:00:00",
    "-070000",
    "-07:00",
    "-0700",
    "-07",
    "Z07:00:00",
    "Z070000",
    "Z07:00",
    "Z0700",
    "Z07",
)


def _starts_with_lowercase(text: str, pos: int) -> bool:
    return pos < len(text) and "a" <= text[pos] <= "z"


def _element_at(layout: str, i: int) -> str | None:
    """Return the layout element starting at i, None for literal text."""
    rest = layout[i:]
    match layout[i]:
        case "J":
            if rest.startswith("January"):
                return "January"
            if rest.startswith("Jan") and not _starts_with_lowercase(layout, i + 3):
                return "Jan"
        case "M":
            if rest.startswith("Monday"):
                return "Monday"
            if rest.startswith("Mon") and not _starts_with_lowercase(layout, i + 3):
                return "Mon"
            if rest.startswith("MST"):
                return "MST"
        case "0":
            if rest.startswith("002"):
                return "002"
            if len(rest) > 1 and "1" <= rest[1] <= "6":
                return rest[:2]
        case "1":
            return "15" if rest.startswith("15") else "1"
        case "2":
            return "2006" if rest.startswith("2006") else "2"
        case "_":
            # "_2006" is a literal underscore followed by the year
            if rest.startswith("_2") and not rest.startswith("_2006"):
                return "_2"
            if rest.startswith("__2"):
                return "__2"
        case "3" | "4" | "5":
            return layout[i]
        case "P" if rest.startswith("PM"):
            return "PM"
        case "p" if rest.startswith("pm"):
            return "pm"
        case "-" | "Z":
            for zone in _ZONE_ELEMENTS:
                if rest.startswith(zone):
                    return zone
        case "." | "," if len(rest) > 1 and rest[1] in "09":
            digit = rest[1]
            j = 1
            while j < len(rest) and rest[j] == digit:
                j += 1
            # Only a fraction when the run of digits ends here
            if j == len(rest) or not rest[j].isdigit():
                return rest[:j]
    return None


def tokenize_layout(layout: str) -> list[str]:
    """Split a layout into elements and single literal characters.

    Examples:
        "Mon Jan _2" -> ["Mon", " ", "Jan", " ", "_2"]
        "15:04:05.000" -> ["15", ":", "04", ":", "05", ".000"]
        "Janet" -> ["J", "a", "n", "e", "t"]

    Args:
        layout: Go reference layout

    Returns:
        List of tokens; joining them gives back the layout
    """
    tokens: list[str] = []
    i = 0
    while i < len(layout):
        element = _element_at(layout, i)
        if element is None:
            tokens.append(layout[i])
            i += 1
        else:
            tokens.append(element)
            i += len(element)
    return tokens


def _directive(token: str) -> str:
    if token in _LAYOUT_TOKEN_MAP:
        return _LAYOUT_TOKEN_MAP[token]
    if token in _ZONE_ELEMENTS:
        return "%z"
    if len(token) > 1 and token[0] in ".,":
        return f"{token[0]}%f"
    # Literal text; strptime treats % as a directive
    return "%%" if token == "%" else token


@lru_cache(maxsize=128)
def layout_to_strptime(layout: str) -> str:
    """Convert a Go reference layout to a strptime format.

    Results are cached per layout.

    Examples:
        >>> layout_to_strptime("Mon Jan _2 15:04:05 2006")
        '%a %b %d %H:%M:%S %Y'
        >>> layout_to_strptime("3:04PM")
        '%I:%M%p'

    Args:
        layout: Go reference layout

    Returns:
        Format string for datetime.strptime
    """
    return "".join(_directive(token) for token in tokenize_layout(layout))
