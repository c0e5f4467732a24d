"""JSON value model.

This module provides Value, a tagged union over the six JSON variants, with
conversion from plain Python data, type predicates, checked accessors and
the array/object building conveniences.
"""

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, TypeAlias, cast

from ._exceptions import KeyNotFoundError, LimitError, TypeMismatchError
from ._kind import Kind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ._types import JSONValue, ValueLike

__all__ = ["Value"]

logger = logging.getLogger(__name__)

_Payload: TypeAlias = "None | bool | float | str | list[Value] | dict[str, Value]"


def _convert(raw: "ValueLike") -> "tuple[Kind, _Payload]":
    """Convert plain Python data (or a Value) to a variant tag and payload.

    Containers are converted recursively and Values are deep-copied, so the
    result never shares children with its input.

    Raises:
        TypeError: If raw, or anything nested in it, has no JSON counterpart,
            or if a mapping has a non-str key.
        ValueError: If an int is too large to store as a float.
    """
    if isinstance(raw, Value):
        return raw._kind, _copy_payload(raw._kind, raw._payload)
    if raw is None:
        return Kind.NULL, None
    # bool before int: bool is an int subclass
    if isinstance(raw, bool):
        return Kind.BOOL, raw
    if isinstance(raw, (int, float)):
        try:
            return Kind.NUMBER, float(raw)
        except OverflowError:
            msg = "int too large to convert to a JSON number"
            raise ValueError(msg) from None
    if isinstance(raw, str):
        return Kind.STRING, raw
    if isinstance(raw, Mapping):
        mapping = cast("Mapping[object, ValueLike]", raw)
        members: dict[str, Value] = {}
        for key, item in mapping.items():
            if not isinstance(key, str):
                msg = f"object keys must be str, not {type(key).__name__}"
                raise TypeError(msg)
            members[key] = _build(item)
        return Kind.OBJECT, members
    if isinstance(raw, Sequence) and not isinstance(raw, (bytes, bytearray)):
        items: list[Value] = []
        for item in cast("Sequence[ValueLike]", raw):
            items.append(_build(item))  # noqa: PERF401
        return Kind.ARRAY, items
    msg = f"Object of type {type(raw).__name__} is not JSON serializable"
    raise TypeError(msg)


def _build(raw: "ValueLike") -> "Value":
    # Bypasses __init__ so each nesting level costs two frames
    value = Value.__new__(Value)
    value._kind, value._payload = _convert(raw)
    return value


def _copy_payload(kind: Kind, payload: "_Payload") -> "_Payload":
    if kind is Kind.ARRAY:
        items: list[Value] = []
        for item in cast("list[Value]", payload):
            items.append(_copy_value(item))  # noqa: PERF401
        return items
    if kind is Kind.OBJECT:
        members: dict[str, Value] = {}
        for key, item in cast("dict[str, Value]", payload).items():
            members[key] = _copy_value(item)
        return members
    return payload


def _copy_value(value: "Value") -> "Value":
    clone = Value.__new__(Value)
    clone._kind = value._kind
    clone._payload = _copy_payload(value._kind, value._payload)
    return clone


def _guarded_convert(raw: "ValueLike") -> "tuple[Kind, _Payload]":
    try:
        return _convert(raw)
    except RecursionError:
        logger.debug("recursion limit hit while converting %s", type(raw).__name__)
        msg = "nesting depth exceeds maximum supported for conversion"
        raise LimitError(msg) from None


class Value:
    """A JSON datum: exactly one of null, bool, number, string, array, object.

    A Value converts from plain Python data (``None``, ``bool``, ``int``,
    ``float``, ``str``, sequences and str-keyed mappings) and owns its
    children exclusively: every conversion and copy is deep. All numbers are
    stored as ``float``. A default-constructed Value is null.

    Object entries iterate in sorted key order, whatever order they were
    inserted in.

    Warning:
        ``value[key]``, ``value[key] = ...`` and ``append`` retype the value
        when it does not already hold an object (or array, for ``append``):
        any previous content, including a non-empty array or object, is
        discarded without error. Use ``setdefault`` and ``push`` to fail
        with TypeMismatchError instead.
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_kind", "_payload")

    _kind: Kind
    _payload: "_Payload"

    def __init__(self, raw: "ValueLike" = None) -> None:
        """Create a value from plain Python data.

        Args:
            raw: The data to convert. Defaults to None (a null value).

        Raises:
            TypeError: If raw has no JSON counterpart.
            ValueError: If raw holds an int too large for a float.
            LimitError: If raw nests deeper than the interpreter can convert.
        """
        self._kind, self._payload = _guarded_convert(raw)

    @property
    def kind(self) -> Kind:
        """The variant this value currently holds."""
        return self._kind

    def is_null(self) -> bool:
        """Return True if the value is null."""
        return self._kind is Kind.NULL

    def is_bool(self) -> bool:
        """Return True if the value is a bool."""
        return self._kind is Kind.BOOL

    def is_number(self) -> bool:
        """Return True if the value is a number."""
        return self._kind is Kind.NUMBER

    def is_string(self) -> bool:
        """Return True if the value is a string."""
        return self._kind is Kind.STRING

    def is_array(self) -> bool:
        """Return True if the value is an array."""
        return self._kind is Kind.ARRAY

    def is_object(self) -> bool:
        """Return True if the value is an object."""
        return self._kind is Kind.OBJECT

    def _require(self, kind: Kind) -> None:
        if self._kind is not kind:
            raise TypeMismatchError(kind, self._kind)

    def _retype(self, kind: Kind) -> None:
        """Reset to an empty container of the given kind unless already one."""
        if self._kind is kind:
            return
        if self._kind is not Kind.NULL:
            logger.debug("discarding %s content to retype value as %s", self._kind, kind)
        self._kind = kind
        self._payload = {} if kind is Kind.OBJECT else []

    def as_bool(self) -> bool:
        """Return the boolean payload.

        Raises:
            TypeMismatchError: If the value is not a bool.
        """
        self._require(Kind.BOOL)
        return cast("bool", self._payload)

    def as_number(self) -> float:
        """Return the number payload.

        Raises:
            TypeMismatchError: If the value is not a number.
        """
        self._require(Kind.NUMBER)
        return cast("float", self._payload)

    def as_string(self) -> str:
        """Return the string payload.

        Raises:
            TypeMismatchError: If the value is not a string.
        """
        self._require(Kind.STRING)
        return cast("str", self._payload)

    def as_array(self) -> "list[Value]":
        """Return the array's element list. Mutating it mutates the value.

        Raises:
            TypeMismatchError: If the value is not an array.
        """
        self._require(Kind.ARRAY)
        return cast("list[Value]", self._payload)

    def as_object(self) -> "dict[str, Value]":
        """Return the object's member dict. Mutating it mutates the value.

        Raises:
            TypeMismatchError: If the value is not an object.
        """
        self._require(Kind.OBJECT)
        return cast("dict[str, Value]", self._payload)

    def view_array(self) -> "tuple[Value, ...]":
        """Return the array's elements as a tuple.

        Raises:
            TypeMismatchError: If the value is not an array.
        """
        return tuple(self.as_array())

    def view_object(self) -> "Mapping[str, Value]":
        """Return a read-only view of the object's members.

        Raises:
            TypeMismatchError: If the value is not an object.
        """
        return MappingProxyType(self.as_object())

    def set(self, raw: "ValueLike") -> None:
        """Replace this value's content, and variant, with raw.

        Raises:
            TypeError: If raw has no JSON counterpart.
            ValueError: If raw holds an int too large for a float.
            LimitError: If raw nests deeper than the interpreter can convert.
        """
        self._kind, self._payload = _guarded_convert(raw)

    def __getitem__(self, key: "str | int") -> "Value":
        """Return the child at key, creating it for object keys.

        A str key makes this value an object (discarding non-object content)
        and inserts a null child if the key is absent. An int key indexes an
        existing array.

        Args:
            key: An object key or an array index.

        Returns:
            The child value itself, so it can be mutated in place.

        Raises:
            TypeMismatchError: If key is an int and the value is not an array.
            IndexError: If key is an out-of-range array index.
        """
        if isinstance(key, str):
            self._retype(Kind.OBJECT)
            members = cast("dict[str, Value]", self._payload)
            child = members.get(key)
            if child is None:
                child = members[key] = Value()
            return child
        if isinstance(key, int):
            return self.as_array()[key]
        msg = f"indices must be str or int, not {type(key).__name__}"
        raise TypeError(msg)

    def __setitem__(self, key: "str | int", raw: "ValueLike") -> None:
        """Store a copy of raw at key.

        Same retyping policy as ``__getitem__``: a str key makes this value an
        object first, an int key requires an existing array element.

        Raises:
            TypeMismatchError: If key is an int and the value is not an array.
            IndexError: If key is an out-of-range array index.
        """
        child = Value(raw)
        if isinstance(key, str):
            self._retype(Kind.OBJECT)
            cast("dict[str, Value]", self._payload)[key] = child
        elif isinstance(key, int):
            self.as_array()[key] = child
        else:
            msg = f"indices must be str or int, not {type(key).__name__}"
            raise TypeError(msg)

    def at(self, key: str) -> "Value":
        """Look up an object member without modifying anything.

        Raises:
            TypeMismatchError: If the value is not an object.
            KeyNotFoundError: If the key is absent.
        """
        members = self.as_object()
        try:
            return members[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def get(self, key: str, default: "Value | None" = None) -> "Value | None":
        """Return the member for key, or default if absent or not an object."""
        if self._kind is not Kind.OBJECT:
            return default
        return cast("dict[str, Value]", self._payload).get(key, default)

    def contains(self, key: str) -> bool:
        """Check for an object member. Never raises."""
        if self._kind is not Kind.OBJECT:
            return False
        return key in cast("dict[str, Value]", self._payload)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def setdefault(self, key: str, default: "ValueLike" = None) -> "Value":
        """Return the member for key, inserting a copy of default if absent.

        Unlike ``value[key]`` this never retypes the value.

        Raises:
            TypeMismatchError: If the value is not an object.
        """
        members = self.as_object()
        child = members.get(key)
        if child is None:
            child = members[key] = Value(default)
        return child

    def keys(self) -> list[str]:
        """Return the object's keys in sorted order.

        Raises:
            TypeMismatchError: If the value is not an object.
        """
        return sorted(self.as_object())

    def items(self) -> "list[tuple[str, Value]]":
        """Return the object's (key, child) pairs in sorted key order.

        Raises:
            TypeMismatchError: If the value is not an object.
        """
        members = self.as_object()
        return [(key, members[key]) for key in sorted(members)]

    def append(self, item: "ValueLike") -> None:
        """Append a copy of item, making this value an array first if needed.

        Any non-array content is discarded.
        """
        child = Value(item)
        self._retype(Kind.ARRAY)
        cast("list[Value]", self._payload).append(child)

    def push(self, item: "ValueLike") -> None:
        """Append a copy of item to an existing array.

        Raises:
            TypeMismatchError: If the value is not an array.
        """
        self.as_array().append(Value(item))

    def __iter__(self) -> "Iterator[Value | str]":
        """Iterate over array elements, or over object keys in sorted order.

        Raises:
            TypeMismatchError: If the value is neither an array nor an object.
        """
        if self._kind is Kind.OBJECT:
            return iter(self.keys())
        return iter(self.as_array())

    def to_python(self) -> "JSONValue":
        """Convert to plain Python data.

        Numbers come back as float and objects as dicts in sorted key order.
        """
        if self._kind is Kind.ARRAY:
            return [item.to_python() for item in cast("list[Value]", self._payload)]
        if self._kind is Kind.OBJECT:
            return {key: item.to_python() for key, item in self.items()}
        return cast("JSONValue", self._payload)

    def copy(self) -> "Value":
        """Return a deep copy."""
        return Value(self)

    def __copy__(self) -> "Value":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> "Value":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            try:
                other = Value(cast("ValueLike", other))
            except (TypeError, ValueError, LimitError):
                return NotImplemented
        return self._kind is other._kind and self._payload == other._payload

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __repr__(self) -> str:
        return f"Value({self.to_python()!r})"

    # Keep these last: "object" shadows the builtin for the rest of the body.

    @classmethod
    def array(cls, items: "Iterable[ValueLike]" = ()) -> "Value":
        """Create an array value holding copies of items."""
        return cls(list(items))

    @classmethod
    def object(cls, members: "Mapping[str, ValueLike] | None" = None) -> "Value":
        """Create an object value holding copies of members."""
        return cls(dict(members) if members is not None else {})
