"""Prefix-notation rendering of a syntax tree, for debugging."""

from lox.ast import (
    BinaryExpr,
    Expr,
    ExpressionStmt,
    ExprVisitor,
    GroupingExpr,
    LiteralExpr,
    PrintStmt,
    Stmt,
    StmtVisitor,
    UnaryExpr,
)
from lox.values import stringify


class AstPrinter(ExprVisitor[str], StmtVisitor[str]):
    """Renders nodes Lisp-style, e.g. ``(* (- 123) (group 45.67))``."""

    def print(self, node: Expr | Stmt) -> str:
        return node.accept(self)

    def visit_binary_expr(self, expr: BinaryExpr) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: GroupingExpr) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr: LiteralExpr) -> str:
        return stringify(expr.value)

    def visit_unary_expr(self, expr: UnaryExpr) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def visit_expression_stmt(self, stmt: ExpressionStmt) -> str:
        return self._parenthesize(";", stmt.expression)

    def visit_print_stmt(self, stmt: PrintStmt) -> str:
        return self._parenthesize("print", stmt.expression)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = " ".join(expr.accept(self) for expr in exprs)
        return f"({name} {parts})"
