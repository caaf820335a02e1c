"""Tree-walking interpreter for Lox.

Evaluates statements in order against one Environment. Evaluation stops at the
first runtime error; nothing after it runs.
"""

import logging
import math
import sys
from typing import TextIO

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
from lox.environment import Environment
from lox.errors import ErrorCode, LoxRuntimeError
from lox.tokens import Token, TokenType
from lox.values import Value, as_number, as_string, is_equal, is_truthy, stringify

logger = logging.getLogger(__name__)


class Interpreter(ExprVisitor[Value], StmtVisitor[None]):
    """Evaluates a syntax tree.

    Usage:
        interpreter = Interpreter(output=sys.stdout)
        interpreter.interpret(parse(tokens))

    Attributes:
        output: Where ``print`` statements write
        environment: Variable bindings shared by every statement this
            interpreter runs
    """

    def __init__(self, output: TextIO | None = None, environment: Environment | None = None):
        self.output = output if output is not None else sys.stdout
        self.environment = environment if environment is not None else Environment()

    def interpret(self, statements: list[Stmt]) -> None:
        """Execute statements in order.

        Raises:
            LoxRuntimeError: The first runtime error; later statements do not run
        """
        try:
            for statement in statements:
                self.execute(statement)
        except LoxRuntimeError as e:
            logger.debug("Runtime error: %s", e)
            raise

    def execute(self, stmt: Stmt) -> None:
        stmt.accept(self)

    def evaluate(self, expr: Expr) -> Value:
        """Evaluate an expression node and return its value."""
        return expr.accept(self)

    # -------------------------------------------------------------------------
    # Statements
    # -------------------------------------------------------------------------

    def visit_expression_stmt(self, stmt: ExpressionStmt) -> None:
        self.evaluate(stmt.expression)

    def visit_print_stmt(self, stmt: PrintStmt) -> None:
        value = self.evaluate(stmt.expression)
        self.output.write(stringify(value) + "\n")

    # -------------------------------------------------------------------------
    # Expressions
    # -------------------------------------------------------------------------

    def visit_literal_expr(self, expr: LiteralExpr) -> Value:
        return expr.value

    def visit_grouping_expr(self, expr: GroupingExpr) -> Value:
        return self.evaluate(expr.expression)

    def visit_unary_expr(self, expr: UnaryExpr) -> Value:
        right = self.evaluate(expr.right)
        op = expr.operator.type

        if op == TokenType.BANG:
            return not is_truthy(right)

        if op == TokenType.MINUS:
            number = as_number(right)
            if number is None:
                raise LoxRuntimeError(
                    ErrorCode.INVALID_OPERAND,
                    "invalid operand, expected number",
                    token=expr.operator,
                )
            return -number

        raise AssertionError(f"unhandled unary operator {expr.operator.lexeme!r}")

    def visit_binary_expr(self, expr: BinaryExpr) -> Value:
        # Left operand is fully evaluated before the right one
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op = expr.operator.type

        # Equality never fails
        if op == TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if op == TokenType.BANG_EQUAL:
            return not is_equal(left, right)

        if op == TokenType.PLUS:
            return self._add(expr.operator, left, right)

        a, b = self._number_operands(expr.operator, left, right)

        if op == TokenType.MINUS:
            return a - b
        if op == TokenType.STAR:
            return a * b
        if op == TokenType.SLASH:
            return _divide(a, b)
        if op == TokenType.GREATER:
            return a > b
        if op == TokenType.GREATER_EQUAL:
            return a >= b
        if op == TokenType.LESS:
            return a < b
        if op == TokenType.LESS_EQUAL:
            return a <= b

        raise AssertionError(f"unhandled binary operator {expr.operator.lexeme!r}")

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------

    def _add(self, operator: Token, left: Value, right: Value) -> Value:
        """Numeric addition or string concatenation; numbers are tried first."""
        a, b = as_number(left), as_number(right)
        if a is not None and b is not None:
            return a + b

        s, t = as_string(left), as_string(right)
        if s is not None and t is not None:
            return s + t

        raise LoxRuntimeError(
            ErrorCode.OPERANDS_MUST_BE_NUMBERS_OR_STRINGS,
            "operands must be strings or numbers",
            token=operator,
        )

    def _number_operands(self, operator: Token, left: Value, right: Value) -> tuple[float, float]:
        a, b = as_number(left), as_number(right)
        if a is None or b is None:
            raise LoxRuntimeError(
                ErrorCode.OPERANDS_MUST_BE_NUMBERS,
                "operands must be numbers",
                token=operator,
            )
        return a, b


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor gives a signed infinity, or NaN for 0/0."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)
