"""
Token definitions for the Lox scanner.

This module defines every token type the scanner can produce:
- Single-character punctuation
- One or two character operators
- Literals (identifiers, strings, numbers)
- Reserved words
- End of input

Author: xwest
"""

from decimal import Decimal
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Dict


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # counter, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


# Lookup tables for token recognition

SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that may be followed by '=': (one-char type, two-char type)
COMPARISON_TOKENS = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

OPERATORS: Dict[str, TokenType] = {
    "/": TokenType.SLASH,
    **SINGLE_CHAR_TOKENS,
    **{one: pair[0] for one, pair in COMPARISON_TOKENS.items()},
    **{one + "=": pair[1] for one, pair in COMPARISON_TOKENS.items()},
}

LITERAL_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.STRING, TokenType.NUMBER})

# Display text for the non-literal kinds used in the debug form of a token
_TYPE_TEXT: Dict[TokenType, str] = {
    **{token_type: text for text, token_type in OPERATORS.items()},
    **{token_type: token_type.name for token_type in KEYWORDS.values()},
    TokenType.EOF: "EOF",
}

_LITERAL_TAGS = {
    TokenType.IDENTIFIER: "ID",
    TokenType.STRING: "STRING",
    TokenType.NUMBER: "NUM",
}


def format_number(value: float) -> str:
    """
    Render a number literal in plain positional notation.

    Integral values drop the trailing '.0' and exponent forms such as 1e-07
    are expanded to 0.0000001.
    """
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text:
        # Decimal keeps the shortest round-trip digits of repr
        text = format(Decimal(text), "f")
    return text


def format_literal(token_type: TokenType, literal: Any) -> str:
    """Render a decoded literal value, or '' for kinds that carry none."""
    if token_type == TokenType.NUMBER:
        return format_number(literal)
    if token_type in LITERAL_TYPES:
        return str(literal)
    return ""


def type_text(token_type: TokenType, literal: Any = None) -> str:
    """Return the display text of a token kind, e.g. '!=', 'WHILE' or 'NUM(3.14)'."""
    if token_type in LITERAL_TYPES:
        return f"{_LITERAL_TAGS[token_type]}({format_literal(token_type, literal)})"
    return _TYPE_TEXT[token_type]


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw text), decoded literal value and
    the source line in effect when the token's last character was consumed.
    The start offset is kept for diagnostics but is not part of equality.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Any                    # Decoded value for IDENTIFIER/STRING/NUMBER, else None
    line: int
    offset: int = field(default=0, compare=False)

    def __post_init__(self):
        if self.type in LITERAL_TYPES and self.literal is None:
            raise ValueError(f"{self.type.name} token requires a decoded literal value")
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")

    def __str__(self) -> str:
        return (f"{type_text(self.type, self.literal)} {self.lexeme} "
                f"{format_literal(self.type, self.literal)}")

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a decoded literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type.name.lower() in KEYWORDS

    @property
    def is_operator(self) -> bool:
        """Check if this token is punctuation or an operator."""
        return self.lexeme in OPERATORS and OPERATORS[self.lexeme] == self.type
