"""
Outcome types threaded through every layer of the identity context.

An operation returns either Success(value) or Failure(error), never
both and never neither. Failures always carry a DomainError.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from app.domain.identity.errors import DomainError, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome holding an operation-specific payload."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """Failed outcome holding the normalized domain error."""

    error: DomainError

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


Result = Union[Success[T], Failure]


def fail(kind: ErrorKind, message: str) -> Failure:
    """Shorthand for Failure(DomainError(kind, message))."""
    return Failure(DomainError(kind=kind, message=message))
