"""Variable bindings used during evaluation."""

from lox.errors import ErrorCode, LoxRuntimeError
from lox.values import Value


class Environment:
    """Flat name-to-value table owned by one interpreter.

    Names are plain strings rather than tokens: two references to the same
    name at different places in the source share one binding.
    """

    def __init__(self) -> None:
        self._values: dict[str, Value] = {}

    def define(self, name: str, value: Value) -> None:
        """Bind ``name``, replacing any earlier binding."""
        self._values[name] = value

    def get(self, name: str, line: int | None = None) -> Value:
        """Look up ``name``.

        An unknown name is a runtime error rather than a parse error, so code
        may mention a name before it is defined as long as it is not evaluated
        first.

        Raises:
            LoxRuntimeError: If ``name`` has never been defined
        """
        if name not in self._values:
            raise LoxRuntimeError(
                ErrorCode.UNDEFINED_VARIABLE,
                f"undefined variable {name}",
                line,
            )
        return self._values[name]

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)
