"""Exceptions raised to callers.

Failures inside a traversal never surface; only the root of a call can fail.
"""

from __future__ import annotations


class RandomValuesError(Exception):
    """Base class for errors surfaced by randpop."""

    def __init__(self, message: str, *, code: str = "random_values_error"):
        super().__init__(message)
        self.code = code


class InstantiationError(RandomValuesError):
    """Raised when the type a caller explicitly asked for cannot be constructed."""

    def __init__(self, type_name: str, reason: str):
        super().__init__(f"Unable to create a {type_name} instance: {reason}", code="instantiation_failed")
        self.type_name = type_name
        self.reason = reason
