"""Core infrastructure: exception hierarchy, Result type and error handling helpers."""
from __future__ import annotations

from .exceptions import (
    CatchLogException,
    InvalidMeasurementError,
    UnitMismatchError,
    RangeParseError,
    QueryFilterError,
    CatchRecordError,
    ExportError,
    ConfigurationError,
)
from .result import Result, Success, Failure

__all__ = [
    "CatchLogException",
    "InvalidMeasurementError",
    "UnitMismatchError",
    "RangeParseError",
    "QueryFilterError",
    "CatchRecordError",
    "ExportError",
    "ConfigurationError",
    "Result",
    "Success",
    "Failure",
]
