"""Tests for variable bindings and runtime values."""

import math

import pytest

from lox import Environment, ErrorCode, LoxRuntimeError, is_equal, is_truthy, stringify


class TestEnvironment:
    def test_define_and_get(self):
        env = Environment()
        env.define("a", 1.0)
        assert env.get("a") == 1.0

    def test_redefine_overwrites(self):
        env = Environment()
        env.define("a", 1.0)
        env.define("a", "two")
        assert env.get("a") == "two"
        assert len(env) == 1

    def test_nil_binding_is_defined(self):
        env = Environment()
        env.define("a", None)
        assert "a" in env
        assert env.get("a") is None

    def test_undefined_name(self):
        env = Environment()
        with pytest.raises(LoxRuntimeError) as exc_info:
            env.get("missing", line=7)
        assert exc_info.value.code == ErrorCode.UNDEFINED_VARIABLE
        assert exc_info.value.message == "undefined variable missing"
        assert exc_info.value.line == 7


class TestValues:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, False),
            (False, False),
            (True, True),
            (0.0, True),
            (1.0, True),
            (-1.0, True),
            ("", True),
            ("hello", True),
        ],
    )
    def test_is_truthy(self, value, expected):
        assert is_truthy(value) is expected

    def test_equality_does_not_cross_types(self):
        assert is_equal(1.0, 1.0)
        assert not is_equal(1.0, True)
        assert not is_equal(0.0, False)
        assert not is_equal(None, False)
        assert not is_equal("1", 1.0)

    def test_nan_is_not_equal_to_itself(self):
        assert not is_equal(math.nan, math.nan)

    @pytest.mark.parametrize(
        "value,text",
        [
            (None, "nil"),
            (True, "true"),
            (False, "false"),
            (3.0, "3"),
            (-0.0, "-0"),
            (2.5, "2.5"),
            (math.inf, "inf"),
            (-math.inf, "-inf"),
            (math.nan, "nan"),
            ("text", "text"),
        ],
    )
    def test_stringify(self, value, text):
        assert stringify(value) == text
