"""Constants shared by the parser and serializer."""

MAX_NESTING_DEPTH: int = 256
"""Default maximum number of nested arrays/objects accepted by the parser.

Each array or object level counts one. The default keeps recursive parsing
well inside the interpreter's default recursion limit.
"""

FLOAT_PRECISIONS: tuple[int, ...] = (15, 16, 17)
"""Significant-digit counts tried, in order, when formatting a number.

The first precision whose output converts back to the same double wins;
17 digits always round-trip an IEEE 754 double.
"""

WHITESPACE: frozenset[str] = frozenset(" \t\n\v\f\r")
"""Characters skipped between tokens (the ASCII isspace set)."""

DIGITS: frozenset[str] = frozenset("0123456789")
"""ASCII decimal digits."""

UTF8_BOM: bytes = b"\xef\xbb\xbf"
"""Byte order mark stripped from the start of bytes input."""
