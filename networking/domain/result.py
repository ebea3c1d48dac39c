"""Two-variant result container: Success(value) or Failure(error)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from networking.domain.errors import NetworkingError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def map(self, transform: Callable[[T], U]) -> "Success[U]":
        return Success(transform(self.value))

    def flat_map(self, transform: Callable[[T], "Result[U]"]) -> "Result[U]":
        return transform(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: NetworkingError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def map(self, transform: Callable[[object], object]) -> "Failure":
        return self

    def flat_map(self, transform: Callable[[object], object]) -> "Failure":
        return self

    def unwrap(self):
        raise self.error


Result = Union[Success[T], Failure]
