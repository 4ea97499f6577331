"""
Abstract Syntax Tree node definitions for Lox expressions.

Defines the expression node types and the visitor interface used to traverse
them. Nodes are immutable and each one exclusively owns its children, so an
expression is always a strict tree.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any
from dataclasses import dataclass

from ..lexer.tokens import Token


class ExprVisitor(ABC):
    """
    Abstract visitor interface for traversing expression nodes.

    ``Expr.accept`` picks the method matching the node's variant and passes
    the node itself, so a visitor decides what to compute and the node only
    decides which method to call.
    """

    @abstractmethod
    def visit_binary_expr(self, expr: 'Binary') -> Any:
        pass

    @abstractmethod
    def visit_grouping_expr(self, expr: 'Grouping') -> Any:
        pass

    @abstractmethod
    def visit_literal_expr(self, expr: 'Literal') -> Any:
        pass

    @abstractmethod
    def visit_unary_expr(self, expr: 'Unary') -> Any:
        pass


class Expr(ABC):
    """Base class for expressions."""

    @abstractmethod
    def accept(self, visitor: ExprVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['Expr']:
        """Get all child expressions."""
        pass


@dataclass(frozen=True)
class Binary(Expr):
    """Binary operation expression."""
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_binary_expr(self)

    def children(self) -> List[Expr]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized expression."""
    expression: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_grouping_expr(self)

    def children(self) -> List[Expr]:
        return [self.expression]


@dataclass(frozen=True)
class Literal(Expr):
    """Literal value; a missing token is the nil literal."""
    value: Optional[Token] = None

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_literal_expr(self)

    def children(self) -> List[Expr]:
        return []

    @property
    def is_nil(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class Unary(Expr):
    """Unary operation expression."""
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_unary_expr(self)

    def children(self) -> List[Expr]:
        return [self.right]
