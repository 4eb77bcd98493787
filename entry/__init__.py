"""Text-entry helpers: keystroke sanitizing, focus handling and typed value building."""
from __future__ import annotations

from .sanitizer import (
    SanitizeOptions,
    OUNCES_FIELD,
    WHOLE_NUMBER_FIELD,
    sanitize,
    sanitize_text,
    parse_integer,
    exceeds_ounce_ceiling,
)
from .text_field import ClearOnEditField
from .builder import MeasurementEntryForm, build_measurement, parse_whole

__all__ = [
    "SanitizeOptions",
    "OUNCES_FIELD",
    "WHOLE_NUMBER_FIELD",
    "sanitize",
    "sanitize_text",
    "parse_integer",
    "exceeds_ounce_ceiling",
    "ClearOnEditField",
    "MeasurementEntryForm",
    "build_measurement",
    "parse_whole",
]
