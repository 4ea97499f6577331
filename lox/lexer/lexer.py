"""
Lox scanner - turns source text into tokens

Single left-to-right pass with at most two characters of lookahead.
Lexical errors are recorded and scanning carries on with the next
character, so one run reports every bad character and unterminated
string it finds.

xwest
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, COMPARISON_TOKENS
from .errors import (
    Diagnostic, LexerError, create_unexpected_character_error,
    create_unterminated_string_error, create_invalid_number_error
)

logger = logging.getLogger(__name__)

# Collaborator notified of every lexical error: (line, message) -> None
ErrorCallback = Callable[[int, str], None]

# Returned by _peek/_peek_next past end of input
NO_CHAR = "\0"


class Scanner:
    """
    Lox lexical analyzer.

    Holds two cursors into the source: ``start`` marks the beginning of the
    lexeme being scanned and ``current`` the next unconsumed character.
    ``line`` tracks the source line of ``current``.
    """

    def __init__(self, source: str, reporter: Optional[ErrorCallback] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            reporter: Optional callback invoked with (line, message) for each error
        """
        self.source = source
        self.reporter = reporter
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def scan_all(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens terminated by a single EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        logger.debug("Scanning %d characters", len(self.source))

        while not self._is_at_end():
            # We are at the beginning of the next lexeme.
            self.start = self.current
            try:
                self._scan_token()
            except LexerError as e:
                self._record(e)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line, self.current))

        logger.debug("Scanned %d tokens with %d errors", len(self.tokens), len(self.errors))
        return self.tokens

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in COMPARISON_TOKENS:
            one, two = COMPARISON_TOKENS[char]
            self._add_token(two if self._match("=") else one)
        elif char == "/":
            if self._match("/"):
                # A comment goes until the end of the line.
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in " \r\t":
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._string()
        elif self._is_digit(char):
            self._number()
        elif self._is_alpha(char):
            self._identifier()
        else:
            # Already consumed, so the next step resumes after it
            raise create_unexpected_character_error(char, self.line)

    def _string(self):
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self.line)

        # The closing quote.
        self._advance()

        # Trim the surrounding quotes.
        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self):
        while self._is_digit(self._peek()):
            self._advance()

        # A fractional part needs a digit after the dot
        if self._peek() == "." and self._is_digit(self._peek_next()):
            self._advance()
            while self._is_digit(self._peek()):
                self._advance()

        lexeme = self.source[self.start:self.current]
        try:
            value = float(lexeme)
        except ValueError:
            raise create_invalid_number_error(lexeme, self.line)

        self._add_token(TokenType.NUMBER, value)

    def _identifier(self):
        while self._is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        token_type = KEYWORDS.get(text)
        if token_type is None:
            self._add_token(TokenType.IDENTIFIER, text)
        else:
            self._add_token(token_type)

    def _record(self, error: LexerError):
        self.errors.append(error)
        logger.debug("Lexical error at line %d: %s", error.line, error.message)
        if self.reporter is not None:
            self.reporter(error.line, error.message)

    def _add_token(self, token_type: TokenType, literal=None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line, self.start))

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it equals ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def _peek(self) -> str:
        if self._is_at_end():
            return NO_CHAR
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return NO_CHAR
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    @staticmethod
    def _is_digit(char: str) -> bool:
        return "0" <= char <= "9"

    @staticmethod
    def _is_alpha(char: str) -> bool:
        return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"

    def _is_alphanumeric(self, char: str) -> bool:
        return self._is_alpha(char) or self._is_digit(char)

    def has_errors(self) -> bool:
        """Check if the scanner encountered any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[Diagnostic]:
        """Get the diagnostics recorded by the last scan."""
        return [error.diagnostic for error in self.errors]


@dataclass(frozen=True)
class ScanResult:
    """Tokens and diagnostics produced by one scan."""
    tokens: Tuple[Token, ...]
    diagnostics: Tuple[Diagnostic, ...]

    @property
    def had_error(self) -> bool:
        return any(d.severity == "error" for d in self.diagnostics)


def scan(source: str) -> ScanResult:
    """
    Scan a source string without side effects.

    Args:
        source: Source code string

    Returns:
        ScanResult with the token sequence and every diagnostic, in order
    """
    scanner = Scanner(source)
    tokens = scanner.scan_all()
    return ScanResult(tuple(tokens), tuple(scanner.get_diagnostics()))


def tokenize_string(source: str) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning reported any error
    """
    scanner = Scanner(source)
    tokens = scanner.scan_all()

    if scanner.has_errors():
        # Raise the first error encountered
        raise scanner.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        LexerError: If scanning reported any error
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source)
