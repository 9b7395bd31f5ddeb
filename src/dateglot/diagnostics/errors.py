"""dateglot exception hierarchy with structured diagnostics.

Errors are returned to callers inside ``(result, errors)`` tuples, never
raised by the public translation and parsing functions. Every instance
stores a Diagnostic for rich error information.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic


class DateglotError(Exception):
    """Base exception for all dateglot errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateglotError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnsupportedLocaleError(DateglotError):
    """No locale data exists for the requested language tag.

    Surfaced by locale resolution; translation never starts.

    Attributes:
        language: The requested language tag
    """

    def __init__(self, message: str | Diagnostic, *, language: str = "") -> None:
        super().__init__(message)
        self.language = language


class TranslationError(DateglotError):
    """Translation of a value against its layout failed.

    Translation aborts at the first error and returns no partial output.
    """


class UnsupportedLayoutElementError(TranslationError):
    """The layout requires a token kind the locale does not provide.

    Example:
        Layout "Mon 2006" with a locale whose short day names table is empty.

    Attributes:
        layout_element: The layout token ('Mon', 'Monday', 'Jan', 'January', 'PM')
        language: Language tag of the locale
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        layout_element: str = "",
        language: str = "",
    ) -> None:
        super().__init__(message)
        self.layout_element = layout_element
        self.language = language


class LayoutMismatchError(TranslationError):
    """The value holds no table entry where the layout expects one.

    Example:
        Layout "Mon January" with value "February Mon".

    Attributes:
        layout_element: The layout token expected at the position
        value: The unmatched value text from the position onwards
        position: Character offset of the unmatched text in the value
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        layout_element: str = "",
        value: str = "",
        position: int = 0,
    ) -> None:
        super().__init__(message)
        self.layout_element = layout_element
        self.value = value
        self.position = position


class DateParseError(DateglotError):
    """The standard parser rejected a successfully translated value.

    The parser's own exception is kept as ``__cause__`` and its message is
    reproduced verbatim in ``reason``.

    Attributes:
        input_value: The translated value handed to the parser
        layout: The reference layout
        reason: The parser's error message
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        layout: str = "",
        reason: str = "",
    ) -> None:
        super().__init__(message)
        self.input_value = input_value
        self.layout = layout
        self.reason = reason
