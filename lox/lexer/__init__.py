"""
Lox Lexer Package

Implements a hand-written scanner for the Lox language.

Key Features:
- Single pass with two characters of lookahead
- Multi-line string literals
- Identifier and reserved-word recognition
- Non-fatal error recovery with structured diagnostics
- Source line tracking for every token

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Scanner, ScanResult, scan, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Scanner",
    "ScanResult",
    "scan",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
]
