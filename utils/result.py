"""
Result type returned by the repository and the auth flow.

Expected failures travel as values tagged with an ``ErrorKind``; only the
HTTP layer turns a kind into a status code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_CREDENTIALS = "invalid_credentials"
    CONSTRAINT_VIOLATION = "constraint_violation"
    UNKNOWN = "unknown"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_CREDENTIALS: 400,
    ErrorKind.CONSTRAINT_VIOLATION: 409,
    ErrorKind.UNKNOWN: 500,
}


@dataclass(frozen=True)
class AppError:
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return self.kind.status_code


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a ``value`` or an ``error``, never both."""

    value: Optional[T] = None
    error: Optional[AppError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=AppError(kind=kind, message=message))

    def unwrap(self) -> T:
        """Return the value; raise ``ValueError`` if this is a failure."""
        if self.error is not None:
            raise ValueError(f"{self.error.kind.value}: {self.error.message}")
        return self.value
