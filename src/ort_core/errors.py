"""Exception types raised by ORT Core."""

from __future__ import annotations


class OrtError(Exception):
    """Base class for every error raised by ORT Core."""


class OrtParseError(OrtError, ValueError):
    """Fatal error while parsing ORT text.

    ``line_num`` is 1-based and ``line`` is the raw, untrimmed source line so
    that editors can jump straight to the fault.
    """

    def __init__(
        self,
        line_num: int,
        line: str,
        message: str,
        column: int | None = None,
    ) -> None:
        self.line_num = line_num
        self.line = line
        self.message = message
        self.column = column
        location = f"Line {line_num}"
        if column is not None:
            location += f", column {column}"
        super().__init__(f"{location}: {message}\n  {line}")


class OrtTypeError(OrtError, TypeError):
    """Value accessed as the wrong kind ("not an object", "not an array")."""


class OrtKeyError(OrtError, KeyError):
    """Object key not found."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class OrtIndexError(OrtError, IndexError):
    """Array index out of bounds."""
