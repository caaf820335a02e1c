"""Runtime values and the coercion rules between them.

A Lox value is one of four tagged variants, mapped onto Python types:

    nil     -> None
    boolean -> bool
    number  -> float
    string  -> str

Python's ``bool`` is a subclass of ``int`` and ``True == 1.0``, so every helper
here checks the exact type rather than relying on Python's own equality.
"""

from typing import Union

Value = Union[None, bool, float, str]


def type_name(value: Value) -> str:
    """Lox name of a value's type, used in diagnostics."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float):
        return "number"
    return "string"


def as_number(value: Value) -> float | None:
    """Return the value as a number, or None if it is not one."""
    if isinstance(value, float):
        return value
    return None


def as_string(value: Value) -> str | None:
    """Return the value as a string, or None if it is not one."""
    if isinstance(value, str):
        return value
    return None


def is_truthy(value: Value) -> bool:
    """nil and false are falsy; everything else (0 and "" included) is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left: Value, right: Value) -> bool:
    """Equality that never crosses tags: values of different types are unequal."""
    if type(left) is not type(right):
        return False
    return left == right


def stringify(value: Value) -> str:
    """Textual form of a value as written by ``print``."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        if text.endswith(".0"):
            text = text[:-2]
        return text
    return value
