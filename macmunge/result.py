"""Tagged success/failure values returned by fallible operations."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):  # noqa: UP046
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        return Ok(func(self.value))


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):  # noqa: UP046
    error: E

    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        """Raise the carried error."""

        raise self.error

    def unwrap_or(self, default):
        return default

    def map(self, func: Callable) -> "Err[E]":
        return self


Result = Ok[T] | Err[E]
