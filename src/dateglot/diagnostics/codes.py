"""Diagnostic codes and data structures.

Defines error codes, value spans, and diagnostic messages.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale errors (resolution of language tags)
        2000-2999: Translation errors (layout scanning)
        3000-3999: Parsing errors (standard parser delegation)
    """

    # Locale errors (1000-1999)
    UNSUPPORTED_LOCALE = 1001

    # Translation errors (2000-2999)
    UNSUPPORTED_LAYOUT_ELEMENT = 2001
    LAYOUT_MISMATCH = 2002

    # Parsing errors (3000-3999)
    PARSE_FAILED = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside the translated value for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int = 1
    column: int = 1

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at(cls, start: int, end: int) -> "SourceSpan":
        """Span on a single-line value, column derived from start."""
        return cls(start=start, end=end, line=1, column=start + 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the value (None when not tied to a position)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        layout_element: Layout element involved (translation errors)
        language: Language tag of the active locale
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    layout_element: str | None = None
    language: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[LAYOUT_MISMATCH]: Value 'febrero 3' does not match layout element 'Mon'
              --> column 1
              = element: Mon
              = help: Check that the value follows the layout

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
