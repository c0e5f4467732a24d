"""A small JSON value model with a recursive-descent parser and serializer."""

import logging
from importlib.metadata import version

from ._exceptions import (
    JSONSyntaxError,
    KeyNotFoundError,
    LimitError,
    MiniJsonError,
    TypeMismatchError,
)
from ._kind import Kind
from ._parser import parse
from ._serializer import dump
from ._value import Value

__version__ = version("minijson")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "JSONSyntaxError",
    "KeyNotFoundError",
    "Kind",
    "LimitError",
    "MiniJsonError",
    "TypeMismatchError",
    "Value",
    "__version__",
    "dump",
    "parse",
]
