"""JSON serialization.

This module renders a Value as compact or indented JSON text. It reads the
value tree only through Value's public accessors.
"""

import math
from typing import TYPE_CHECKING

from ._constants import FLOAT_PRECISIONS
from ._exceptions import LimitError
from ._kind import Kind
from ._value import Value

if TYPE_CHECKING:
    from ._types import Indent, ValueLike

__all__ = ["dump", "escape_string", "format_number"]

_ESCAPES: dict[int, str] = {
    ord('"'): '\\"',
    ord("\\"): "\\\\",
    ord("\b"): "\\b",
    ord("\f"): "\\f",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
}
_ESCAPE_TABLE: dict[int, str] = {
    code: _ESCAPES.get(code, f"\\u{code:04X}") for code in range(0x20)
}
_ESCAPE_TABLE.update(_ESCAPES)


def escape_string(text: str) -> str:
    """Escape text for use between JSON string quotes.

    Quote, backslash and the named control characters get their short
    escapes; other characters below U+0020 become ``\\u00XX`` with uppercase
    hex digits. Everything else, non-ASCII included, passes through.
    """
    return text.translate(_ESCAPE_TABLE)


def format_number(number: float) -> str:
    """Format a number with the fewest digits (15 to 17) that round-trip.

    Integral values carry no fractional part. Non-finite values, which only
    programmatic construction can produce, render as ``null``.
    """
    if not math.isfinite(number):
        return "null"
    text = ""
    for precision in FLOAT_PRECISIONS:
        text = f"{number:.{precision}g}"
        if float(text) == number:
            break
    return text


def dump(value: "Value | ValueLike", indent: "Indent" = None) -> str:
    """Serialize a value to JSON text.

    Args:
        value: The value to serialize. Plain Python data is converted to a
            Value first.
        indent: None for compact output. Otherwise the number of spaces per
            nesting level; each array element and object member then goes
            on its own line and keys are followed by ``": "``.

    Returns:
        The JSON text, with no trailing newline.

    Raises:
        ValueError: If indent is negative.
        LimitError: If the tree is nested deeper than the interpreter's
            recursion limit allows.
    """
    if indent is not None and indent < 0:
        msg = f"indent must be None or non-negative, got {indent}"
        raise ValueError(msg)
    if not isinstance(value, Value):
        value = Value(value)
    out: list[str] = []
    try:
        _dump_value(value, out, indent, 0)
    except RecursionError:
        msg = "nesting depth exceeds maximum supported for serialization"
        raise LimitError(msg) from None
    return "".join(out)


def _dump_value(value: Value, out: list[str], indent: "Indent", depth: int) -> None:
    kind = value.kind
    if kind is Kind.NULL:
        out.append("null")
    elif kind is Kind.BOOL:
        out.append("true" if value.as_bool() else "false")
    elif kind is Kind.NUMBER:
        out.append(format_number(value.as_number()))
    elif kind is Kind.STRING:
        out.append(f'"{escape_string(value.as_string())}"')
    elif kind is Kind.ARRAY:
        _dump_array(value.as_array(), out, indent, depth)
    else:
        _dump_object(value.items(), out, indent, depth)


def _dump_array(
    items: list[Value], out: list[str], indent: "Indent", depth: int
) -> None:
    if not items:
        out.append("[]")
        return
    out.append("[")
    last = len(items) - 1
    for index, item in enumerate(items):
        _newline(out, indent, depth + 1)
        _dump_value(item, out, indent, depth + 1)
        if index < last:
            out.append(",")
    _newline(out, indent, depth)
    out.append("]")


def _dump_object(
    members: list[tuple[str, Value]], out: list[str], indent: "Indent", depth: int
) -> None:
    if not members:
        out.append("{}")
        return
    separator = ":" if indent is None else ": "
    out.append("{")
    last = len(members) - 1
    for index, (key, item) in enumerate(members):
        _newline(out, indent, depth + 1)
        out.append(f'"{escape_string(key)}"{separator}')
        _dump_value(item, out, indent, depth + 1)
        if index < last:
            out.append(",")
    _newline(out, indent, depth)
    out.append("}")


def _newline(out: list[str], indent: "Indent", depth: int) -> None:
    if indent is not None:
        out.append("\n" + " " * (indent * depth))
