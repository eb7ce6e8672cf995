from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .errors import OutcomeError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Success[U]:
        return Success(fn(self.value))

    def map_error(self, fn: Callable[[Any], F]) -> Success[T]:
        return self

    def flat_map(self, fn: Callable[[T], Outcome[U, Any]]) -> Outcome[U, Any]:
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], U]) -> Failure[E]:
        return self

    def map_error(self, fn: Callable[[E], F]) -> Failure[F]:
        return Failure(fn(self.error))

    def flat_map(self, fn: Callable[[Any], Outcome[U, Any]]) -> Failure[E]:
        return self

    def unwrap(self):
        raise OutcomeError(self.error)

    def unwrap_or(self, default: T) -> T:
        return default


# Generic alias: Outcome[bytes, NetworkError] etc.
Outcome = Union[Success[T], Failure[E]]


def outcome_from(value: T | None, error: E | None) -> Outcome[T, E]:
    """Build an outcome from the (value, error) pair a callback-style transport reports.

    An error always wins over a value. Having neither is a contract violation.
    """
    if error is not None:
        return Failure(error)
    if value is not None:
        return Success(value)
    raise ValueError("Cannot build an outcome without a value or an error")
