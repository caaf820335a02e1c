"""Scanner for the Lox language.

Converts source text into a list of tokens in a single forward pass.
Invalid input does not stop the scan: every problem is recorded as a
LexError and scanning continues, so all lexical errors are reported at once.
"""

import logging

from lox.errors import ErrorCode, LexError
from lox.tokens import KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)


# Characters that always form a token on their own
SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that become a two-character token when followed by "="
EQUAL_SUFFIX_TOKENS = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

WHITESPACE = " \r\t"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Scanner:
    """Tokenizer for Lox source text.

    Usage:
        scanner = Scanner('print 1 + 2;')
        tokens, errors = scanner.scan_tokens()
    """

    def __init__(self, source: str | bytes):
        if isinstance(source, bytes):
            # Undecodable bytes become U+FFFD and are reported as unexpected characters
            source = source.decode("utf-8", errors="replace")
        self.source = source
        self.tokens: list[Token] = []
        self.errors: list[LexError] = []

        # First character of the lexeme being scanned
        self.start = 0
        # Character currently being considered
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> tuple[list[Token], list[LexError]]:
        """Scan the whole source and return the tokens and any lexical errors.

        The token list always ends with an EOF token on the last line.
        """
        while not self._is_at_end():
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug(
            "Scanned %d tokens with %d errors", len(self.tokens), len(self.errors)
        )
        return self.tokens, self.errors

    # -------------------------------------------------------------------------
    # Cursor helpers
    # -------------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _add_token(self, token_type: TokenType, literal: float | str | None = None) -> None:
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, lexeme, literal, self.line))

    def _error(self, code: ErrorCode, message: str) -> None:
        self.errors.append(LexError(code, message, self.line))

    # -------------------------------------------------------------------------
    # Token recognizers
    # -------------------------------------------------------------------------

    def _scan_token(self) -> None:
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])

        elif char in EQUAL_SUFFIX_TOKENS:
            single, double = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(double if self._match("=") else single)

        elif char == "/":
            if self._match("/"):
                # Line comment runs to the end of the line; the newline itself
                # is left for the next call so the line count stays correct.
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)

        elif char == '"':
            self._scan_string()

        elif char in WHITESPACE:
            pass

        elif char == "\n":
            self.line += 1

        elif _is_digit(char):
            self._scan_number()

        elif _is_alpha(char):
            self._scan_identifier()

        else:
            self._error(ErrorCode.UNEXPECTED_CHARACTER, f"unexpected character '{char}'")

    def _scan_string(self) -> None:
        """Scan a string literal. Contents are taken verbatim, newlines included."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            self._error(ErrorCode.UNTERMINATED_STRING, "unterminated string")
            return

        # Closing quote
        self._advance()

        self._add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def _scan_number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()

        # A fractional part needs at least one digit after the dot
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _scan_identifier(self) -> None:
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan(source: str | bytes) -> tuple[list[Token], list[LexError]]:
    """Convenience function to scan a source string.

    Args:
        source: Lox source text (bytes are decoded as UTF-8, invalid bytes replaced)

    Returns:
        The token list (ending with EOF) and the list of lexical errors
    """
    return Scanner(source).scan_tokens()
