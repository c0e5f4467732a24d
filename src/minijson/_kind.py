"""The six variants a JSON value can take."""

from enum import Enum

__all__ = ["Kind"]


class Kind(Enum):
    """Variant tag of a :class:`~minijson.Value`."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value
