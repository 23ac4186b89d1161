"""
Error handling for the TinyScript lexer.

Lexer errors are raised inside the scanner and caught by its main loop,
which records them and hands their message to the diagnostics reporter.
Callers of `Lexer.tokenize()` never see them raised.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single lexer diagnostic."""
    message: str
    location: SourceLocation
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters malformed input.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def line(self) -> int:
        return self.diagnostic.location.line

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedCharacterError(LexerError):
    """A character that starts no token. Scanning resumes after it."""

    def __init__(self, char: str, location: SourceLocation, **kwargs):
        super().__init__(
            f"Unexpected character '{char}' at line {location.line}",
            location,
            **kwargs
        )
        self.char = char


class UnterminatedStringError(LexerError):
    """End of input inside a string literal. Scanning stops here."""

    def __init__(self, location: SourceLocation, **kwargs):
        super().__init__(
            f"Unterminated string at line {location.line}",
            location,
            **kwargs
        )


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


def create_unexpected_character_error(char: str, location: SourceLocation) -> UnexpectedCharacterError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in TinyScript source code."
    else:
        help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed."

    return UnexpectedCharacterError(
        char,
        location,
        code="L001",
        help_text=help_text
    )


def create_unterminated_string_error(location: SourceLocation) -> UnterminatedStringError:
    """Create an error for a string literal that is never closed."""
    return UnterminatedStringError(
        location,
        code="L002",
        help_text='String literals must be closed with a matching " quote.'
    )
