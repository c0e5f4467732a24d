"""Type aliases for minijson.

This module contains ONLY TypeAlias definitions. Its only imports of other
minijson modules happen under TYPE_CHECKING, so every module can import from
it at runtime without creating a cycle.
"""

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from ._value import Value

# Using string annotations for forward references to avoid runtime | issues
JSONPrimitive: TypeAlias = "str | int | float | bool | None"
"""A JSON primitive value as plain Python data."""

JSONArray: TypeAlias = "list[JSONValue]"
"""A JSON array as plain Python data."""

JSONObject: TypeAlias = "dict[str, JSONValue]"
"""A JSON object as plain Python data."""

JSONValue: TypeAlias = "JSONPrimitive | JSONArray | JSONObject"
"""Any JSON value as plain Python data."""

ValueLike: TypeAlias = (
    "Value | JSONPrimitive | Sequence[ValueLike] | Mapping[str, ValueLike]"
)
"""Anything that converts to a Value.

A ValueLike is one of:
- An existing Value (deep-copied on conversion)
- None, a bool, an int or float, or a str
- A non-string sequence of ValueLike (becomes an array)
- A mapping from str to ValueLike (becomes an object)
"""

Indent: TypeAlias = "int | None"
"""Serializer layout: None for compact output, spaces per level otherwise."""
