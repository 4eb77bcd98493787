"""Decorator that turns raised exceptions into Result values."""
from __future__ import annotations

import functools
from typing import Callable, TypeVar

from core.result import Success, Failure, Result

T = TypeVar('T')


def as_result(*exceptions: type) -> Callable[[Callable[..., T]], Callable[..., Result[T, Exception]]]:
    """Wrap the return value in Success and the listed exceptions in Failure.

    With no arguments every ``Exception`` is captured; anything not listed
    propagates unchanged.

    Example:
        @as_result(CatchRecordError, OSError)
        def load_records(path): ...
    """
    caught = exceptions or (Exception,)

    def decorator(func: Callable[..., T]) -> Callable[..., Result[T, Exception]]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Result[T, Exception]:
            try:
                return Success(func(*args, **kwargs))
            except caught as e:
                return Failure(e)
        return wrapper
    return decorator
