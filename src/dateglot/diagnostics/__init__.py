"""Diagnostic system for dateglot errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DateglotError,
    DateParseError,
    LayoutMismatchError,
    TranslationError,
    UnsupportedLayoutElementError,
    UnsupportedLocaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DateParseError",
    "DateglotError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LayoutMismatchError",
    "OutputFormat",
    "SourceSpan",
    "TranslationError",
    "UnsupportedLayoutElementError",
    "UnsupportedLocaleError",
]
