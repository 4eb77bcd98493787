"""Parsing of human-authored filter range text.

Grammar:
    size range   <number> - <number>          "1.0 - 5.5", "0 - 9999"
    date range   <YYYY-MM-DD> to <YYYY-MM-DD>  "2025-02-01 to 2025-02-28"
    either       All                           unbounded

Malformed text never raises into the UI: it degrades to the unbounded range
and carries a ``diagnostic`` the UI can show as a hint.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from loguru import logger

from core.exceptions import RangeParseError
from core.result import Failure, Result, Success

ALL = "all"

_NUMBER = r"[0-9]+(?:\.[0-9]+)?|\.[0-9]+"
_SIZE_RANGE = re.compile(rf"^\s*({_NUMBER})\s*-\s*({_NUMBER})\s*$")
_SINGLE_NUMBER = re.compile(rf"^\s*({_NUMBER})\s*-?\s*$")
_DATE_RANGE = re.compile(r"^\s*([0-9]{4}-[0-9]{2}-[0-9]{2})\s+to\s+([0-9]{4}-[0-9]{2}-[0-9]{2})\s*$", re.IGNORECASE)


def _format_bound(value: float) -> str:
    return format(Decimal(repr(value)), "f")


def _is_wildcard(text: Optional[str]) -> bool:
    return text is None or not text.strip() or text.strip().lower() == ALL


@dataclass(frozen=True)
class SizeRange:
    """Inclusive numeric range in the unit named by ``unit_system_label``.

    The unbounded range runs from -inf to +inf. ``diagnostic`` is set when it
    was produced from text that failed to parse.
    """
    lower_bound: float = -math.inf
    upper_bound: float = math.inf
    unit_system_label: str = ""
    diagnostic: Optional[str] = None

    @classmethod
    def unbounded(cls, unit_system_label: str = "", diagnostic: Optional[str] = None) -> SizeRange:
        return cls(unit_system_label=unit_system_label, diagnostic=diagnostic)

    @property
    def is_unbounded(self) -> bool:
        return self.lower_bound == -math.inf and self.upper_bound == math.inf

    def contains(self, value: float) -> bool:
        return self.lower_bound <= value <= self.upper_bound

    def __str__(self) -> str:
        if self.is_unbounded:
            return "All"
        return f"{_format_bound(self.lower_bound)} - {_format_bound(self.upper_bound)}"


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range; ``start`` and ``end`` are None when unbounded."""
    start: Optional[date] = None
    end: Optional[date] = None
    diagnostic: Optional[str] = None

    @classmethod
    def unbounded(cls, diagnostic: Optional[str] = None) -> DateRange:
        return cls(diagnostic=diagnostic)

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, day: date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True

    def __str__(self) -> str:
        if self.is_unbounded:
            return "All"
        return f"{self.start.isoformat()} to {self.end.isoformat()}"


def try_parse_size_range(text: Optional[str], unit_system_label: str = "") -> Result[SizeRange, RangeParseError]:
    """Parse size range text, returning a Failure for malformed input.

    "All" and empty text succeed with the unbounded range.
    """
    if _is_wildcard(text):
        return Success(SizeRange.unbounded(unit_system_label))

    match = _SIZE_RANGE.match(text)
    if match is None:
        if _SINGLE_NUMBER.match(text):
            return Failure(RangeParseError(f"Size range {text!r} needs both a minimum and a maximum"))
        return Failure(RangeParseError(f"Size range {text!r} is not of the form '<min> - <max>'"))

    low, high = float(match.group(1)), float(match.group(2))
    if low > high:
        low, high = high, low
    return Success(SizeRange(low, high, unit_system_label))


def try_parse_date_range(text: Optional[str]) -> Result[DateRange, RangeParseError]:
    """Parse date range text, returning a Failure for malformed input."""
    if _is_wildcard(text):
        return Success(DateRange.unbounded())

    match = _DATE_RANGE.match(text)
    if match is None:
        return Failure(RangeParseError(f"Date range {text!r} is not of the form 'YYYY-MM-DD to YYYY-MM-DD'"))
    try:
        start = date.fromisoformat(match.group(1))
        end = date.fromisoformat(match.group(2))
    except ValueError as e:
        return Failure(RangeParseError(f"Date range {text!r} has an invalid date: {e}"))

    if start > end:
        start, end = end, start
    return Success(DateRange(start, end))


def parse_size_range(text: Optional[str], unit_system_label: str = "") -> SizeRange:
    """Parse size range text; malformed text yields the unbounded range with a diagnostic."""
    def degrade(error: RangeParseError) -> SizeRange:
        logger.warning(f"[filters] {error}; size filter disabled")
        return SizeRange.unbounded(unit_system_label, diagnostic=str(error))

    return try_parse_size_range(text, unit_system_label).unwrap_or_else(degrade)


def parse_date_range(text: Optional[str]) -> DateRange:
    """Parse date range text; malformed text yields the unbounded range with a diagnostic."""
    def degrade(error: RangeParseError) -> DateRange:
        logger.warning(f"[filters] {error}; date filter disabled")
        return DateRange.unbounded(diagnostic=str(error))

    return try_parse_date_range(text).unwrap_or_else(degrade)
