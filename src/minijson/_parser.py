"""Recursive-descent JSON parser.

The parser walks a single string with a cursor and one character of
lookahead, building the tree through Value's public API. Escape sequences
are resolved except ``\\uXXXX``, which is copied into the string verbatim.
"""

import logging
import math
import re
from typing import ClassVar

from ._constants import DIGITS, MAX_NESTING_DEPTH, UTF8_BOM, WHITESPACE
from ._exceptions import JSONSyntaxError, LimitError
from ._value import Value

__all__ = ["parse"]

logger = logging.getLogger(__name__)

# A run of ordinary string characters followed by a quote or backslash
_STRING_CHUNK = re.compile(r'([^"\\]*)(["\\])', re.DOTALL)

_SIMPLE_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def parse(
    text: "str | bytes | bytearray", *, max_depth: int = MAX_NESTING_DEPTH
) -> Value:
    """Parse exactly one JSON value from text.

    Args:
        text: The JSON text. Bytes and bytearrays are decoded as UTF-8 after
            dropping a leading byte order mark.
        max_depth: Maximum number of nested arrays/objects.

    Returns:
        The parsed value.

    Raises:
        JSONSyntaxError: If text is not a single well-formed JSON value,
            optionally surrounded by whitespace, or is not valid UTF-8.
        LimitError: If nesting exceeds max_depth.
        TypeError: If text is not str, bytes or bytearray.
    """
    if isinstance(text, (bytes, bytearray)):
        text = _decode(bytes(text))
    elif not isinstance(text, str):  # pyright: ignore[reportUnnecessaryIsInstance]
        kind = type(text).__name__
        msg = f"the JSON text must be str, bytes or bytearray, not {kind}"
        raise TypeError(msg)
    parser = _Parser(text, max_depth)
    try:
        return parser.parse_document()
    except RecursionError:
        logger.debug("recursion limit hit at char %d", parser.pos)
        msg = "nesting depth exceeds maximum supported by the interpreter"
        raise LimitError(msg) from None


def _decode(data: bytes) -> str:
    data = data.removeprefix(UTF8_BOM)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        # Report the position in the text decoded so far
        prefix = data[: exc.start].decode("utf-8")
        raise JSONSyntaxError("invalid UTF-8", prefix, len(prefix)) from exc


class _Parser:
    """Cursor over one JSON document."""

    __slots__: ClassVar[tuple[str, ...]] = ("depth", "max_depth", "pos", "text")

    text: str
    pos: int
    depth: int
    max_depth: int

    def __init__(self, text: str, max_depth: int) -> None:
        self.text = text
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth

    def error(self, reason: str) -> JSONSyntaxError:
        return JSONSyntaxError(reason, self.text, self.pos)

    def peek(self) -> str:
        """Return the current character, or "" at end of input."""
        return self.text[self.pos : self.pos + 1]

    def skip_ws(self) -> None:
        text = self.text
        pos = self.pos
        while pos < len(text) and text[pos] in WHITESPACE:
            pos += 1
        self.pos = pos

    def expect(self, char: str) -> None:
        if self.peek() != char:
            raise self.error(f"expected {char!r}")
        self.pos += 1

    def parse_document(self) -> Value:
        value = self.parse_value()
        self.skip_ws()
        if self.pos < len(self.text):
            raise self.error("trailing characters")
        return value

    def parse_value(self) -> Value:
        self.skip_ws()
        char = self.peek()
        if char == "n":
            return self.parse_literal("null", None)
        if char == "t":
            return self.parse_literal("true", True)
        if char == "f":
            return self.parse_literal("false", False)
        if char == '"':
            return Value(self.parse_string())
        if char == "-" or char in DIGITS:
            return self.parse_number()
        if char == "{":
            return self.parse_object()
        if char == "[":
            return self.parse_array()
        raise self.error("unexpected token")

    def parse_literal(self, word: str, result: "bool | None") -> Value:
        for char in word:
            self.expect(char)
        return Value(result)

    def skip_digits(self) -> None:
        """Consume one or more digits."""
        if self.peek() not in DIGITS:
            raise self.error("bad number")
        text = self.text
        pos = self.pos + 1
        while pos < len(text) and text[pos] in DIGITS:
            pos += 1
        self.pos = pos

    def parse_number(self) -> Value:
        start = self.pos
        if self.peek() == "-":
            self.pos += 1
        if self.peek() == "0":
            self.pos += 1
        else:
            self.skip_digits()
        if self.peek() == ".":
            self.pos += 1
            self.skip_digits()
        if self.peek() in ("e", "E"):
            self.pos += 1
            if self.peek() in ("+", "-"):
                self.pos += 1
            self.skip_digits()
        number = float(self.text[start : self.pos])
        if math.isinf(number):
            self.pos = start
            raise self.error("number out of range")
        return Value(number)

    def parse_string(self) -> str:
        self.expect('"')
        text = self.text
        chunks: list[str] = []
        while True:
            match = _STRING_CHUNK.match(text, self.pos)
            if match is None:
                self.pos = len(text)
                raise self.error("unterminated string")
            content, terminator = match.groups()
            chunks.append(content)
            self.pos = match.end()
            if terminator == '"':
                return "".join(chunks)
            chunks.append(self.parse_escape())

    def parse_escape(self) -> str:
        """Decode the escape whose backslash was just consumed."""
        char = self.peek()
        if not char:
            raise self.error("unterminated string")
        if char == "u":
            # \uXXXX stays as written; the four characters are not validated
            end = self.pos + 5
            if end > len(self.text):
                self.pos = len(self.text)
                raise self.error("unterminated string")
            escape = "\\" + self.text[self.pos : end]
            self.pos = end
            return escape
        try:
            decoded = _SIMPLE_ESCAPES[char]
        except KeyError:
            raise self.error("bad escape") from None
        self.pos += 1
        return decoded

    def enter(self) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            logger.debug("nesting limit %d reached at char %d", self.max_depth, self.pos)
            msg = f"nesting depth {self.depth} exceeds maximum {self.max_depth}"
            raise LimitError(msg)

    def parse_array(self) -> Value:
        self.expect("[")
        self.enter()
        result = Value.array()
        items = result.as_array()
        self.skip_ws()
        if self.peek() == "]":
            self.pos += 1
            self.depth -= 1
            return result
        while True:
            items.append(self.parse_value())
            self.skip_ws()
            char = self.peek()
            if char == "]":
                self.pos += 1
                break
            if char != ",":
                raise self.error("expected ',' or ']'")
            self.pos += 1
        self.depth -= 1
        return result

    def parse_object(self) -> Value:
        self.expect("{")
        self.enter()
        result = Value.object()
        members = result.as_object()
        self.skip_ws()
        if self.peek() == "}":
            self.pos += 1
            self.depth -= 1
            return result
        while True:
            self.skip_ws()
            if self.peek() != '"':
                raise self.error("expected string key")
            key = self.parse_string()
            self.skip_ws()
            self.expect(":")
            # Later duplicates overwrite earlier ones
            members[key] = self.parse_value()
            self.skip_ws()
            char = self.peek()
            if char == "}":
                self.pos += 1
                break
            if char != ",":
                raise self.error("expected ',' or '}'")
            self.pos += 1
        self.depth -= 1
        return result
