"""
Parenthesized prefix rendering of expression trees.

Two trees print identically only when they have the same shape and the same
operator and literal lexemes, which makes the printer a convenient oracle for
tree-shape assertions in tests.

Author: xwest
"""

from .ast_nodes import Expr, ExprVisitor, Binary, Grouping, Literal, Unary


class AstPrinter(ExprVisitor):
    """Renders an expression as e.g. ``(* (- 123) (group 45.67))``."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary_expr(self, expr: Binary) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self.parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr: Literal) -> str:
        if expr.value is None:
            return "nil"
        return expr.value.lexeme

    def visit_unary_expr(self, expr: Unary) -> str:
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name]
        parts.extend(expr.accept(self) for expr in exprs)
        return "(" + " ".join(parts) + ")"
