"""Parser for the Lox language.

Converts a list of tokens into statements and expressions.
Uses recursive descent, one method per precedence level.

Grammar (lowest precedence first):

    program     -> declaration* EOF
    declaration -> statement
    statement   -> exprStmt | printStmt
    exprStmt    -> expression ";"
    printStmt   -> "print" expression ";"
    expression  -> equality
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | primary
    primary     -> NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"

All binary levels are left-associative.
"""

import logging

from lox.ast import (
    BinaryExpr,
    Expr,
    ExpressionStmt,
    GroupingExpr,
    LiteralExpr,
    PrintStmt,
    Stmt,
    UnaryExpr,
)
from lox.errors import ErrorCode, ParseError
from lox.tokens import Token, TokenType

logger = logging.getLogger(__name__)


# Keywords that can begin a statement; synchronize() stops in front of them
STATEMENT_KEYWORDS = frozenset(
    {
        TokenType.CLASS,
        TokenType.FOR,
        TokenType.FUN,
        TokenType.IF,
        TokenType.PRINT,
        TokenType.RETURN,
        TokenType.VAR,
        TokenType.WHILE,
    }
)


class Parser:
    """Recursive descent parser for Lox.

    Usage:
        tokens, _ = scan('print 1 + 2;')
        statements = Parser(tokens).parse()
    """

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.current = 0
        self.errors: list[ParseError] = []

    def parse(self) -> list[Stmt]:
        """Parse a whole program.

        After a syntax error the parser skips to the next statement boundary
        and keeps going, so later errors are collected too. If anything failed,
        the first error is raised once the input is exhausted.

        Raises:
            ParseError: The first syntax error; ``errors`` lists all of them
        """
        statements: list[Stmt] = []

        while not self._is_at_end():
            stmt = self._declaration()
            if stmt is not None:
                statements.append(stmt)

        if self.errors:
            first = self.errors[0]
            first.errors = list(self.errors)
            raise first

        logger.debug("Parsed %d statements", len(statements))
        return statements

    def parse_expression(self) -> Expr:
        """Parse a single expression that must span the whole input.

        Raises:
            ParseError: On the first syntax error, or on trailing tokens
        """
        try:
            expr = self._expression()
        except RecursionError:
            raise self._nesting_error() from None

        if not self._is_at_end():
            raise ParseError(
                ErrorCode.EXPECT_END,
                f"expect end of expression, got '{self._peek().lexeme}'",
                token=self._peek(),
            )

        return expr

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------

    def _peek(self) -> Token:
        """Current token, not yet consumed."""
        if self.current >= len(self.tokens):
            line = self.tokens[-1].line if self.tokens else 1
            return Token(TokenType.EOF, "", None, line)
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _check(self, token_type: TokenType) -> bool:
        """Check the current token's type without consuming it."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _match(self, *types: TokenType) -> bool:
        """Consume the current token if it has any of the given types."""
        for token_type in types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _consume(self, token_type: TokenType, code: ErrorCode, message: str) -> Token:
        """Consume a token of the expected type, or raise error."""
        if self._check(token_type):
            return self._advance()
        raise ParseError(code, message, token=self._peek())

    def _nesting_error(self) -> ParseError:
        """Error for input nested deeper than the Python call stack allows."""
        return ParseError(
            ErrorCode.NESTING_TOO_DEEP, "expression nested too deeply", token=self._peek()
        )

    def synchronize(self) -> None:
        """Discard tokens until the start of the next statement.

        Stops just after a ";" or just before a keyword that begins a statement.
        """
        self._advance()

        while not self._is_at_end():
            if self._previous().type == TokenType.SEMICOLON:
                return
            if self._peek().type in STATEMENT_KEYWORDS:
                return
            self._advance()

    # -------------------------------------------------------------------------
    # Statements
    # -------------------------------------------------------------------------

    def _declaration(self) -> Stmt | None:
        """Parse one declaration, recovering at the next boundary on error."""
        try:
            try:
                return self._statement()
            except RecursionError:
                raise self._nesting_error() from None
        except ParseError as e:
            logger.debug("Recovering from parse error: %s", e)
            self.errors.append(e)
            self.synchronize()
            return None

    def _statement(self) -> Stmt:
        if self._match(TokenType.PRINT):
            return self._print_statement()
        return self._expression_statement()

    def _print_statement(self) -> Stmt:
        value = self._expression()
        self._consume(TokenType.SEMICOLON, ErrorCode.EXPECT_SEMICOLON, "expect ';' after value")
        return PrintStmt(value)

    def _expression_statement(self) -> Stmt:
        expr = self._expression()
        self._consume(
            TokenType.SEMICOLON, ErrorCode.EXPECT_SEMICOLON, "expect ';' after expression"
        )
        return ExpressionStmt(expr)

    # -------------------------------------------------------------------------
    # Expressions (in order of precedence, lowest to highest)
    # -------------------------------------------------------------------------

    def _expression(self) -> Expr:
        return self._equality()

    def _equality(self) -> Expr:
        """Parse equality expression (==, !=)."""
        expr = self._comparison()

        while self._match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self._previous()
            right = self._comparison()
            expr = BinaryExpr(expr, operator, right)

        return expr

    def _comparison(self) -> Expr:
        """Parse comparison expression (>, >=, <, <=)."""
        expr = self._term()

        while self._match(
            TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL
        ):
            operator = self._previous()
            right = self._term()
            expr = BinaryExpr(expr, operator, right)

        return expr

    def _term(self) -> Expr:
        """Parse additive expression (+, -)."""
        expr = self._factor()

        while self._match(TokenType.MINUS, TokenType.PLUS):
            operator = self._previous()
            right = self._factor()
            expr = BinaryExpr(expr, operator, right)

        return expr

    def _factor(self) -> Expr:
        """Parse multiplicative expression (*, /)."""
        expr = self._unary()

        while self._match(TokenType.SLASH, TokenType.STAR):
            operator = self._previous()
            right = self._unary()
            expr = BinaryExpr(expr, operator, right)

        return expr

    def _unary(self) -> Expr:
        """Parse prefix expression (!, -). Prefix operators nest to the right."""
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            right = self._unary()
            return UnaryExpr(operator, right)

        return self._primary()

    def _primary(self) -> Expr:
        """Parse literals and grouped expressions."""
        if self._match(TokenType.FALSE):
            return LiteralExpr(False)
        if self._match(TokenType.TRUE):
            return LiteralExpr(True)
        if self._match(TokenType.NIL):
            return LiteralExpr(None)

        if self._match(TokenType.NUMBER, TokenType.STRING):
            return LiteralExpr(self._previous().literal)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(
                TokenType.RIGHT_PAREN,
                ErrorCode.EXPECT_CLOSING_PAREN,
                "expect closing parenthesis",
            )
            return GroupingExpr(expr)

        raise ParseError(ErrorCode.EXPECT_EXPRESSION, "expect expression", token=self._peek())


def parse(tokens: list[Token]) -> list[Stmt]:
    """Convenience function to parse a token list into statements."""
    return Parser(tokens).parse()


def parse_expression(tokens: list[Token]) -> Expr:
    """Convenience function to parse a token list as one expression."""
    return Parser(tokens).parse_expression()
