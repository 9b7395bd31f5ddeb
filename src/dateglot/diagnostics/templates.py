"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    # Reference layout documentation
    _LAYOUT_DOCS = "https://pkg.go.dev/time#pkg-constants"

    @staticmethod
    def unsupported_locale(language: str) -> Diagnostic:
        """No locale data exists for a language tag.

        Args:
            language: The requested BCP 47 language tag

        Returns:
            Diagnostic for UNSUPPORTED_LOCALE
        """
        msg = f"Locale '{language}' not supported"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_LOCALE,
            message=msg,
            hint="Use an exact CLDR tag (e.g., 'es', 'pt-BR', 'en-AU') or a custom Locale",
            language=language,
        )

    @staticmethod
    def unsupported_layout_element(layout_element: str, language: str) -> Diagnostic:
        """Layout names a token kind the locale has no table for.

        Args:
            layout_element: Layout token text ('Mon', 'Monday', 'Jan', 'January', 'PM')
            language: Language tag of the active locale

        Returns:
            Diagnostic for UNSUPPORTED_LAYOUT_ELEMENT
        """
        msg = f"Layout element '{layout_element}' is not supported by language '{language}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_LAYOUT_ELEMENT,
            message=msg,
            hint="Remove the element from the layout or use a locale that provides it",
            help_url=ErrorTemplate._LAYOUT_DOCS,
            layout_element=layout_element,
            language=language,
        )

    @staticmethod
    def layout_mismatch(layout_element: str, value: str, position: int) -> Diagnostic:
        """Value text matches no entry of the table the layout requires.

        Args:
            layout_element: Layout token text expected at this position
            value: Unmatched value text, starting at the cursor
            position: Character offset of the unmatched text in the value

        Returns:
            Diagnostic for LAYOUT_MISMATCH
        """
        msg = f"Value '{value}' does not match layout element '{layout_element}'"
        return Diagnostic(
            code=DiagnosticCode.LAYOUT_MISMATCH,
            message=msg,
            span=SourceSpan.at(position, position + len(value)),
            hint="Check that the value follows the layout and is written in the locale's language",
            help_url=ErrorTemplate._LAYOUT_DOCS,
            layout_element=layout_element,
        )

    @staticmethod
    def parse_failed(value: str, layout: str, reason: str) -> Diagnostic:
        """The standard parser rejected a translated value.

        Args:
            value: The translated value handed to the parser
            layout: The reference layout
            reason: The parser's own message, unmodified

        Returns:
            Diagnostic for PARSE_FAILED
        """
        msg = f"Failed to parse '{value}' with layout '{layout}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FAILED,
            message=msg,
            hint="Translation succeeded; the value is not a valid date for this layout",
            help_url=ErrorTemplate._LAYOUT_DOCS,
        )
