"""Exception hierarchy for minijson.

Every error raised by the library derives from MiniJsonError and, where one
fits, from the closest builtin exception as well, so callers can catch either
``MiniJsonError`` or e.g. ``ValueError``.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._kind import Kind

__all__ = [
    "JSONSyntaxError",
    "KeyNotFoundError",
    "LimitError",
    "MiniJsonError",
    "TypeMismatchError",
]


class MiniJsonError(Exception):
    """Base class for all minijson errors."""


class TypeMismatchError(MiniJsonError, TypeError):
    """An operation required a different variant than the value holds.

    Attributes:
        expected: The variant the operation required.
        actual: The variant the value actually holds.
    """

    expected: "Kind"
    actual: "Kind"

    def __init__(self, expected: "Kind", actual: "Kind") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} value, got {actual}")

    def __reduce__(self) -> tuple[type["TypeMismatchError"], tuple["Kind", "Kind"]]:
        return self.__class__, (self.expected, self.actual)


class KeyNotFoundError(MiniJsonError, KeyError):
    """A read-only object lookup found no entry for the key.

    Attributes:
        key: The missing key.
    """

    key: str

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"key not found: {key!r}")

    def __reduce__(self) -> tuple[type["KeyNotFoundError"], tuple[str]]:
        return self.__class__, (self.key,)

    def __str__(self) -> str:
        # KeyError.__str__ would repr the message
        return str(self.args[0])


class JSONSyntaxError(MiniJsonError, ValueError):
    """Input text violates the JSON grammar.

    Attributes:
        reason: Short description of the violation, e.g. "bad number".
        doc: The text being parsed.
        pos: Index in doc where the violation was detected.
        lineno: 1-based line corresponding to pos.
        colno: 1-based column corresponding to pos.
    """

    reason: str
    doc: str
    pos: int
    lineno: int
    colno: int

    def __init__(self, reason: str, doc: str, pos: int) -> None:
        self.reason = reason
        self.doc = doc
        self.pos = pos
        self.lineno = doc.count("\n", 0, pos) + 1
        self.colno = pos - doc.rfind("\n", 0, pos)
        super().__init__(
            f"{reason}: line {self.lineno} column {self.colno} (char {pos})"
        )

    def __reduce__(self) -> tuple[type["JSONSyntaxError"], tuple[str, str, int]]:
        return self.__class__, (self.reason, self.doc, self.pos)


class LimitError(MiniJsonError):
    """Nesting depth exceeded a configured or interpreter limit."""
