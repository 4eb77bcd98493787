"""Result type for recoverable failures.

Parsing of user-authored filter text never raises into the UI layer; the
parsers hand back a ``Success`` or a ``Failure`` and the caller decides which
safe default to fall back to.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar('T')
E = TypeVar('E')


@dataclass(frozen=True)
class Success(Generic[T]):
    """A computed value."""
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], Any]) -> Result[Any, Exception]:
        """Transform the value; an exception raised by ``fn`` becomes a Failure."""
        try:
            return Success(fn(self.value))
        except Exception as e:
            return Failure(e)

    def and_then(self, fn: Callable[[T], Result[Any, E]]) -> Result[Any, E]:
        """Chain another Result-returning step."""
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[Any], T]) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A failure carrying the error that caused it."""
    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable) -> Failure[E]:
        return self

    def and_then(self, fn: Callable) -> Failure[E]:
        return self

    def unwrap(self):
        """Raise the carried error."""
        if isinstance(self.error, Exception):
            raise self.error
        raise Exception(str(self.error))

    def unwrap_or(self, default):
        return default

    def unwrap_or_else(self, fn: Callable[[E], Any]):
        """Build the fallback from the error, e.g. an unbounded range with a diagnostic."""
        return fn(self.error)


Result = Union[Success[T], Failure[E]]
