"""Abstract syntax tree for Lox.

Nodes are immutable and each node owns its children, so the tree is acyclic.
Operations over the tree (evaluation, printing) are written as visitors:
a node's ``accept`` calls the visitor method for its own variant.

Every visitor method is abstract. A visitor that forgets a variant cannot be
instantiated, and a static type checker reports the missing method.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol, TypeVar

from lox.tokens import Token
from lox.values import Value

R = TypeVar("R", covariant=True)


# -----------------------------------------------------------------------------
# Visitor protocols
# -----------------------------------------------------------------------------


class ExprVisitor(Protocol[R]):
    """One method per expression variant."""

    @abstractmethod
    def visit_binary_expr(self, expr: BinaryExpr) -> R: ...

    @abstractmethod
    def visit_grouping_expr(self, expr: GroupingExpr) -> R: ...

    @abstractmethod
    def visit_literal_expr(self, expr: LiteralExpr) -> R: ...

    @abstractmethod
    def visit_unary_expr(self, expr: UnaryExpr) -> R: ...


class StmtVisitor(Protocol[R]):
    """One method per statement variant."""

    @abstractmethod
    def visit_expression_stmt(self, stmt: ExpressionStmt) -> R: ...

    @abstractmethod
    def visit_print_stmt(self, stmt: PrintStmt) -> R: ...


# -----------------------------------------------------------------------------
# Expressions
# -----------------------------------------------------------------------------


class Expr:
    """Base class for expression nodes."""

    __slots__ = ()

    def accept(self, visitor: ExprVisitor[R]) -> R:
        raise NotImplementedError


@dataclass(frozen=True)
class BinaryExpr(Expr):
    """Infix operation (e.g., a + b, x == y)."""
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class GroupingExpr(Expr):
    """Parenthesized expression."""
    expression: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_grouping_expr(self)


@dataclass(frozen=True)
class LiteralExpr(Expr):
    """A literal value (number, string, boolean, nil)."""
    value: Value

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class UnaryExpr(Expr):
    """Prefix operation (e.g., !x, -y)."""
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_unary_expr(self)


# -----------------------------------------------------------------------------
# Statements
# -----------------------------------------------------------------------------


class Stmt:
    """Base class for statement nodes."""

    __slots__ = ()

    def accept(self, visitor: StmtVisitor[R]) -> R:
        raise NotImplementedError


@dataclass(frozen=True)
class ExpressionStmt(Stmt):
    """Expression evaluated for its side effects; the value is discarded."""
    expression: Expr

    def accept(self, visitor: StmtVisitor[R]) -> R:
        return visitor.visit_expression_stmt(self)


@dataclass(frozen=True)
class PrintStmt(Stmt):
    """``print expr;``"""
    expression: Expr

    def accept(self, visitor: StmtVisitor[R]) -> R:
        return visitor.visit_print_stmt(self)
