"""
Lox Parser Package

Expression tree nodes and the visitor used to traverse them. There is no
parser yet: trees are built directly by callers and rendered with
``AstPrinter``.

Author: xwest
"""

from .ast_nodes import ExprVisitor, Expr, Binary, Grouping, Literal, Unary
from .printer import AstPrinter

__all__ = [
    # Visitor
    "ExprVisitor",
    "AstPrinter",

    # AST nodes
    "Expr", "Binary", "Grouping", "Literal", "Unary",
]
