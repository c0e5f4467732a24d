"""Shared fixtures for unit tests."""

from typing import TYPE_CHECKING

import pytest

from minijson import Value

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def sample_text() -> str:
    """Provide a small document exercising every variant.

    Returns:
        JSON text with nested containers, escapes, and all literal kinds.
    """
    return (
        '{"name": "sample", "count": 3, "ratio": 0.25, "active": true,'
        ' "parent": null, "tags": ["a", "b"], "meta": {"path": "c:\\\\tmp"}}'
    )


@pytest.fixture
def make_value() -> "Callable[..., Value]":
    """Factory fixture for populated object values.

    Returns a callable that builds an object value from keyword arguments,
    starting from a small default record that the keywords override.

    Returns:
        A callable that takes member keyword arguments and returns a Value.

    Example:
        def test_with_value(make_value) -> None:
            value = make_value(extra=[1, 2])
            assert value.at("extra").is_array()
    """

    def create_value(**members: object) -> Value:
        record: dict[str, object] = {"id": "alice", "score": 10}
        record.update(members)
        return Value(record)  # pyright: ignore[reportArgumentType]

    return create_value
