"""Custom exception hierarchy for the application."""
from __future__ import annotations


class CatchLogException(Exception):
    """Base exception for all catch logging errors."""
    pass


class InvalidMeasurementError(CatchLogException, ValueError):
    """Raised when a measurement magnitude is negative, NaN or out of range."""
    pass


class UnitMismatchError(CatchLogException, ValueError):
    """Raised when converting between a weight unit and a length unit."""
    pass


class RangeParseError(CatchLogException):
    """Raised when filter range text does not match its grammar."""
    pass


class QueryFilterError(CatchLogException, ValueError):
    """Raised when a query filter is internally inconsistent."""
    pass


class CatchRecordError(CatchLogException, ValueError):
    """Raised when a catch record carries an illegal value."""
    pass


class ExportError(CatchLogException):
    """Raised when exporting catches fails."""
    pass


class ConfigurationError(CatchLogException):
    """Raised when configuration is invalid or missing."""
    pass
