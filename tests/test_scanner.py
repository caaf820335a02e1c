"""Tests for the Lox scanner."""

import pytest

from lox import ErrorCode, LexError, Scanner, Token, TokenType, scan


def types(source):
    tokens, errors = scan(source)
    assert errors == []
    return [t.type for t in tokens]


class TestScanner:
    """Tests for token recognition."""

    def test_empty_source_yields_only_eof(self):
        tokens, errors = scan("")
        assert tokens == [Token(TokenType.EOF, "", None, 1)]
        assert errors == []

    def test_punctuation(self):
        assert types("(){},.-+;*/") == [
            TokenType.LEFT_PAREN,
            TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE,
            TokenType.RIGHT_BRACE,
            TokenType.COMMA,
            TokenType.DOT,
            TokenType.MINUS,
            TokenType.PLUS,
            TokenType.SEMICOLON,
            TokenType.STAR,
            TokenType.SLASH,
            TokenType.EOF,
        ]

    def test_one_and_two_character_operators(self):
        assert types("! != = == < <= > >=") == [
            TokenType.BANG,
            TokenType.BANG_EQUAL,
            TokenType.EQUAL,
            TokenType.EQUAL_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.EOF,
        ]

    def test_operators_without_spaces(self):
        tokens, _ = scan("1*2 >= 3*4")
        assert [(t.type, t.lexeme) for t in tokens] == [
            (TokenType.NUMBER, "1"),
            (TokenType.STAR, "*"),
            (TokenType.NUMBER, "2"),
            (TokenType.GREATER_EQUAL, ">="),
            (TokenType.NUMBER, "3"),
            (TokenType.STAR, "*"),
            (TokenType.NUMBER, "4"),
            (TokenType.EOF, ""),
        ]

    def test_integer_number_is_float(self):
        tokens, _ = scan("1234")
        assert tokens[0] == Token(TokenType.NUMBER, "1234", 1234.0, 1)
        assert isinstance(tokens[0].literal, float)

    def test_decimal_number(self):
        tokens, _ = scan("12.34")
        assert tokens[0] == Token(TokenType.NUMBER, "12.34", 12.34, 1)

    def test_trailing_dot_is_not_part_of_number(self):
        tokens, _ = scan("1.")
        assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.DOT, TokenType.EOF]
        assert tokens[0].literal == 1.0

    def test_negative_number_is_minus_then_number(self):
        tokens, _ = scan("-12/0.34")
        assert [(t.type, t.literal) for t in tokens] == [
            (TokenType.MINUS, None),
            (TokenType.NUMBER, 12.0),
            (TokenType.SLASH, None),
            (TokenType.NUMBER, 0.34),
            (TokenType.EOF, None),
        ]

    def test_string_literal(self):
        tokens, _ = scan('"string literal"')
        assert tokens[0] == Token(TokenType.STRING, '"string literal"', "string literal", 1)

    def test_string_has_no_escape_processing(self):
        tokens, _ = scan(r'"a\nb"')
        assert tokens[0].literal == "a\\nb"

    def test_multiline_string_advances_line(self):
        tokens, _ = scan('"multiline\nstring"')
        assert tokens[0].literal == "multiline\nstring"
        assert tokens[0].line == 2
        assert tokens[1] == Token(TokenType.EOF, "", None, 2)

    def test_identifiers(self):
        tokens, _ = scan("foo _bar baz123")
        assert [(t.type, t.lexeme) for t in tokens[:-1]] == [
            (TokenType.IDENTIFIER, "foo"),
            (TokenType.IDENTIFIER, "_bar"),
            (TokenType.IDENTIFIER, "baz123"),
        ]

    def test_keywords(self):
        assert types("and class else false for fun if nil or print return super this true var while") == [
            TokenType.AND,
            TokenType.CLASS,
            TokenType.ELSE,
            TokenType.FALSE,
            TokenType.FOR,
            TokenType.FUN,
            TokenType.IF,
            TokenType.NIL,
            TokenType.OR,
            TokenType.PRINT,
            TokenType.RETURN,
            TokenType.SUPER,
            TokenType.THIS,
            TokenType.TRUE,
            TokenType.VAR,
            TokenType.WHILE,
            TokenType.EOF,
        ]

    def test_keywords_are_case_sensitive(self):
        assert types("Print TRUE") == [TokenType.IDENTIFIER, TokenType.IDENTIFIER, TokenType.EOF]

    def test_keyword_prefix_is_identifier(self):
        tokens, _ = scan("orchid")
        assert tokens[0].type == TokenType.IDENTIFIER

    def test_comment_is_skipped(self):
        tokens, _ = scan("1 // the rest is ignored ( @\n2")
        assert [(t.type, t.line) for t in tokens] == [
            (TokenType.NUMBER, 1),
            (TokenType.NUMBER, 2),
            (TokenType.EOF, 2),
        ]

    def test_newlines_count_lines(self):
        tokens, _ = scan("1\n\n2\r\n\t3")
        assert [t.line for t in tokens] == [1, 3, 4, 4]

    def test_bytes_input(self):
        tokens, errors = Scanner(b'print "hi";').scan_tokens()
        assert errors == []
        assert [t.type for t in tokens] == [
            TokenType.PRINT,
            TokenType.STRING,
            TokenType.SEMICOLON,
            TokenType.EOF,
        ]


class TestScannerErrors:
    """Tests for lexical error collection."""

    def test_unexpected_character(self):
        tokens, errors = scan("@")
        assert len(errors) == 1
        assert isinstance(errors[0], LexError)
        assert errors[0].code == ErrorCode.UNEXPECTED_CHARACTER
        assert errors[0].line == 1
        assert "@" in errors[0].message
        assert [t.type for t in tokens] == [TokenType.EOF]

    def test_scanning_continues_after_error(self):
        tokens, errors = scan("1\n@ + 2")
        assert len(errors) == 1
        assert errors[0].line == 2
        assert [t.type for t in tokens] == [
            TokenType.NUMBER,
            TokenType.PLUS,
            TokenType.NUMBER,
            TokenType.EOF,
        ]

    def test_all_errors_collected(self):
        _, errors = scan("# 1 $\n^")
        assert [(e.line, e.message) for e in errors] == [
            (1, "unexpected character '#'"),
            (1, "unexpected character '$'"),
            (2, "unexpected character '^'"),
        ]

    def test_unterminated_string(self):
        tokens, errors = scan('"')
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.UNTERMINATED_STRING
        assert errors[0].message == "unterminated string"
        assert [t.type for t in tokens] == [TokenType.EOF]

    def test_unterminated_string_reports_last_line(self):
        tokens, errors = scan('1 "abc\ndef')
        assert errors[0].line == 2
        assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.EOF]

    @pytest.mark.parametrize("source", ["@", '"open'])
    def test_error_str_includes_line(self, source):
        _, errors = scan(source)
        assert str(errors[0]).startswith("[line 1] Error: ")

    def test_invalid_utf8_byte_is_unexpected_character(self):
        tokens, errors = scan(b"1 + \xff;")
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.UNEXPECTED_CHARACTER
        assert errors[0].line == 1
        assert [t.type for t in tokens] == [
            TokenType.NUMBER,
            TokenType.PLUS,
            TokenType.SEMICOLON,
            TokenType.EOF,
        ]
