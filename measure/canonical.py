"""Integer encodings of stored catch measurements and their display text.

Records store sizes as whole integers so no floating point ever reaches
storage:

    total ounces                 lbs * 16 + oz      (oz clamped to 0..15)
    hundredths of a pound / kg   whole * 100 + h    (h clamped to 0..99)
    quarter inches               whole * 4 + q      (q clamped to 0..3)
    tenths of a centimetre       whole * 10 + t     (t clamped to 0..9)
"""
from __future__ import annotations

from typing import Optional, Tuple

from measure.measurement import Measurement
from measure.rounding import round_half_away, to_decimal
from measure.units import LengthUnit, WeightUnit

QUARTER_GLYPHS = ("", "¼", "½", "¾")


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


# Merge: UI parts -> canonical ints

def total_ounces(lbs: int, oz: int) -> int:
    return max(0, lbs) * 16 + _clamp(oz, 0, 15)


def hundredths(whole: int, hundredths_part: int) -> int:
    """Pounds or kilograms with two decimals as an integer count of hundredths."""
    return max(0, whole) * 100 + _clamp(hundredths_part, 0, 99)


def quarters(whole: int, quarter: int) -> int:
    return max(0, whole) * 4 + _clamp(quarter, 0, 3)


def tenths(whole: int, tenth: int) -> int:
    return max(0, whole) * 10 + _clamp(tenth, 0, 9)


# Split: canonical ints -> UI parts

def split_total_ounces(total: int) -> Tuple[int, int]:
    total = max(0, total)
    return total // 16, total % 16


def split_hundredths(value: int) -> Tuple[int, int]:
    value = abs(value)
    return value // 100, value % 100


def split_quarters(value: int) -> Tuple[int, int]:
    value = abs(value)
    return value // 4, value % 4


def split_tenths(value: int) -> Tuple[int, int]:
    value = abs(value)
    return value // 10, value % 10


# Integer-only formatting for labels

def format_pounds_ounces(total: int) -> str:
    lbs, oz = split_total_ounces(total)
    return f"{lbs} lb {oz} oz"


def format_pounds_hundredths(value: int) -> str:
    whole, part = split_hundredths(value)
    return f"{whole}.{part:02d} lb"


def format_kilograms_hundredths(value: int) -> str:
    whole, part = split_hundredths(value)
    return f"{whole}.{part:02d} kg"


def format_inches_quarters(value: int) -> str:
    whole, quarter = split_quarters(value)
    if quarter == 0:
        return f'{whole}"'
    return f'{whole} {QUARTER_GLYPHS[quarter]}"'


def format_centimeters_tenths(value: int) -> str:
    whole, tenth = split_tenths(value)
    return f"{whole}.{tenth} cm"


def degrees_from_e7(e7: int) -> str:
    """Fixed-point E7 coordinate as decimal degrees text, e.g. -759123456 -> "-75.9123456"."""
    sign = "-" if e7 < 0 else ""
    value = abs(e7)
    return f"{sign}{value // 10_000_000}.{value % 10_000_000:07d}"


# Canonical ints <-> Measurement

def measurement_from_canonical(value: int, unit) -> Measurement:
    """Decode a stored integer in the encoding of ``unit``."""
    if unit is WeightUnit.POUNDS_OUNCES:
        lbs, oz = split_total_ounces(value)
        return Measurement.pounds_ounces(lbs, oz)
    if unit is WeightUnit.DECIMAL_POUNDS:
        return Measurement.decimal_pounds(max(0, value) / 100)
    if unit is WeightUnit.KILOGRAMS:
        return Measurement.kilograms(max(0, value) / 100)
    if unit is LengthUnit.INCHES:
        return Measurement.inches(max(0, value) / 4)
    return Measurement.centimeters(max(0, value) / 10)


def canonical_from_measurement(value: Measurement) -> int:
    """Encode a measurement as the stored integer of its own unit."""
    if value.unit is WeightUnit.POUNDS_OUNCES:
        return total_ounces(value.pounds, value.ounces)
    scale = {
        WeightUnit.DECIMAL_POUNDS: 100,
        WeightUnit.KILOGRAMS: 100,
        LengthUnit.INCHES: 4,
        LengthUnit.CENTIMETERS: 10,
    }[value.unit]
    return int(round_half_away(to_decimal(value.magnitude) * scale, 0))


def format_measurement(value: Optional[Measurement]) -> str:
    """Display text for a measurement, empty when absent."""
    if value is None:
        return ""
    encoded = canonical_from_measurement(value)
    formatters = {
        WeightUnit.POUNDS_OUNCES: format_pounds_ounces,
        WeightUnit.DECIMAL_POUNDS: format_pounds_hundredths,
        WeightUnit.KILOGRAMS: format_kilograms_hundredths,
        LengthUnit.INCHES: format_inches_quarters,
        LengthUnit.CENTIMETERS: format_centimeters_tenths,
    }
    return formatters[value.unit](encoded)
