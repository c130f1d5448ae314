"""Stable error taxonomy for queryspec.

Every error raised by the specification core inherits from
QuerySpecException, so callers can catch the whole family at once or
target a single kind. Backend-native errors caught at the repository's
mapped call sites are chained as ``__cause__``.

Kinds:
- InvalidArgumentError: malformed specification input
- NoResultError: a single-result request matched zero rows
- NonUniqueResultError: a single-result request matched more than one row
"""

from __future__ import annotations


class QuerySpecException(Exception):
    """Base exception for all queryspec errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "NO_RESULT").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    default_code: str | None = None

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code if code is not None else self.default_code
        self.context: dict = context if context is not None else {}


class InvalidArgumentError(QuerySpecException, ValueError):
    """A specification, modifier or leaf received an argument it cannot use."""

    default_code = "INVALID_ARGUMENT"


class NoResultError(QuerySpecException):
    """A single-result query matched no rows."""

    default_code = "NO_RESULT"


class NonUniqueResultError(QuerySpecException):
    """A single-result query matched more than one row."""

    default_code = "NON_UNIQUE_RESULT"


def type_name(value: object) -> str:
    """Qualified type name of *value*, used in error messages."""
    cls = value if isinstance(value, type) else type(value)
    return f"{cls.__module__}.{cls.__qualname__}" if cls.__module__ != "builtins" else cls.__qualname__
