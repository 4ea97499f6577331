"""
Error handling for the Lox scanner.

Provides structured diagnostics carrying the source line, an error code and a
human-readable message. Lexical errors never abort a scan: the scanner raises
them from the branch that detects the problem and records them in its main
loop, so a single pass can surface several independent errors.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
    "L003": "Invalid decimal literal",
}


@dataclass(frozen=True)
class Diagnostic:
    """A single lexical diagnostic."""
    message: str
    line: int
    severity: str = "error"  # "error" or "warning"
    code: Optional[str] = None
    hint: str = ""

    @property
    def kind(self) -> str:
        """Human-readable category for the diagnostic code."""
        return ERROR_CODES.get(self.code, "Lexical error")

    def __str__(self) -> str:
        return f"[line {self.line}] Error {self.hint}: {self.message}"


class LexerError(Exception):
    """
    Exception raised when the scanner encounters a lexical error.

    Contains the diagnostic for error reporting.
    """

    def __init__(self, message: str, line: int, code: Optional[str] = None):
        super().__init__(message)
        self.diagnostic = Diagnostic(message=message, line=line, code=code)

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        message = f"Unexpected character '{char}'."
    else:
        message = f"Unexpected character U+{ord(char):04X}."
    return LexerError(message, line, code="L001")


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal that reaches end of input."""
    return LexerError("Unterminated string.", line, code="L002")


def create_invalid_number_error(lexeme: str, line: int) -> LexerError:
    """Create an error for a numeric literal that fails to parse."""
    return LexerError("Invalid decimal literal.", line, code="L003")
