"""
Lox Scanner Package

A hand-written scanner for the Lox language plus the expression tree and
visitor scaffold a parser will build on.

Architecture:
    lox/
    ├── lexer/           # Tokens, scanner and lexical diagnostics
    ├── parser/          # Expression nodes, visitor and tree printer
    ├── reporter.py      # (line, message) error reporter
    └── cli.py           # Command-line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@lox-scanner.org"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, scan
from .parser import AstPrinter

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "AstPrinter",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
