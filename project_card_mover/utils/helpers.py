"""General utility functions and helper classes."""

from typing import Any, TypeVar

T = TypeVar("T")


def get_nested_value(data: Any, *path: str | int, expected_type: type[T] | None = None) -> Any | None:
    """Walk a decoded JSON document along `path`, returning None when any step is absent.

    String keys index into dicts and integer keys index into lists. When
    `expected_type` is given, a value of any other type is also treated as
    absent. Booleans never count as integers.

    >>> get_nested_value({"data": {"node": {"number": 7}}}, "data", "node", "number", expected_type=int)
    7
    """
    current = data
    for key in path:
        if isinstance(key, str):
            if not isinstance(current, dict) or key not in current:
                return None
            current = current[key]
        else:
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
            current = current[key]
    if current is None:
        return None
    if expected_type is not None:
        if not isinstance(current, expected_type):
            return None
        if expected_type is int and isinstance(current, bool):
            return None
    return current
