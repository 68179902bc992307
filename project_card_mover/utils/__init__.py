"""Utility modules for shared functionality."""

from .helpers import get_nested_value

__all__ = [
    "get_nested_value",
]
