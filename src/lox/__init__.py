"""Lox: scanner, parser and tree-walking interpreter.

This package provides:
- Scanner: Tokenizes source text
- Parser: Produces statements and expressions from tokens
- Interpreter: Evaluates the syntax tree
- Lox: Runs source through the whole pipeline
"""

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
from lox.config import LoxConfig
from lox.environment import Environment
from lox.errors import ErrorCode, ErrorKind, LexError, LoxError, LoxRuntimeError, ParseError
from lox.interpreter import Interpreter
from lox.parser import Parser, parse, parse_expression
from lox.printer import AstPrinter
from lox.runner import Lox, RunResult
from lox.scanner import Scanner, scan
from lox.tokens import KEYWORDS, Token, TokenType
from lox.values import Value, is_equal, is_truthy, stringify

__all__ = [
    # AST
    "BinaryExpr",
    "Expr",
    "ExpressionStmt",
    "ExprVisitor",
    "GroupingExpr",
    "LiteralExpr",
    "PrintStmt",
    "Stmt",
    "StmtVisitor",
    "UnaryExpr",
    # Config
    "LoxConfig",
    # Environment
    "Environment",
    # Errors
    "ErrorCode",
    "ErrorKind",
    "LexError",
    "LoxError",
    "LoxRuntimeError",
    "ParseError",
    # Interpreter
    "Interpreter",
    # Parser
    "Parser",
    "parse",
    "parse_expression",
    # Printer
    "AstPrinter",
    # Runner
    "Lox",
    "RunResult",
    # Scanner
    "Scanner",
    "scan",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenType",
    # Values
    "Value",
    "is_equal",
    "is_truthy",
    "stringify",
]
