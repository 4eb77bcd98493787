"""Typed measurements from the sanitized text parts of an entry form.

Each entry mode splits a size into a whole part and a sub-unit part:

    lbs_oz       pounds        + ounces (0..15)
    decimal_lbs  whole pounds  + hundredths (0..99)
    kgs          whole kg      + hundredths (0..99)
    inches       whole inches  + quarters (0..3)
    centimeters  whole cm      + tenths (0..9)

Parts are read as integers here (this is where "016" becomes 16); out of
range sub-units are clamped by the canonical encoders.
"""
from __future__ import annotations

from typing import Optional

from measure import canonical
from measure.measurement import Measurement
from measure.preferences import UnitPreferences
from measure.units import LengthUnit, SizeType, Unit, WeightUnit

MAX_WHOLE_DIGITS = 9
MAX_WHOLE = 10 ** MAX_WHOLE_DIGITS - 1


def parse_whole(text: Optional[str]) -> Optional[int]:
    """Digits of ``text`` as an int; None when the field holds no digits.

    Values longer than ``MAX_WHOLE_DIGITS`` digits are clamped to ``MAX_WHOLE``.
    """
    digits = "".join(ch for ch in (text or "") if ch in "0123456789")
    if not digits:
        return None
    significant = digits.lstrip("0")
    if len(significant) > MAX_WHOLE_DIGITS:
        return MAX_WHOLE
    return int(significant or "0")


def build_measurement(unit: Unit, whole_text: str, part_text: str = "") -> Optional[Measurement]:
    """Build a Measurement in ``unit`` from the two entry fields.

    Returns None when both fields are empty (nothing entered).
    """
    whole = parse_whole(whole_text)
    part = parse_whole(part_text)
    if whole is None and part is None:
        return None
    whole = whole or 0
    part = part or 0

    if unit is WeightUnit.POUNDS_OUNCES:
        encoded = canonical.total_ounces(whole, part)
    elif unit in (WeightUnit.DECIMAL_POUNDS, WeightUnit.KILOGRAMS):
        encoded = canonical.hundredths(whole, part)
    elif unit is LengthUnit.INCHES:
        encoded = canonical.quarters(whole, part)
    else:
        encoded = canonical.tenths(whole, part)
    return canonical.measurement_from_canonical(encoded, unit)


class MeasurementEntryForm:
    """Builds weight and length values in the user's preferred entry units."""

    def __init__(self, preferences: UnitPreferences):
        self.preferences = preferences

    def weight(self, whole_text: str, part_text: str = "") -> Optional[Measurement]:
        return build_measurement(self.preferences.unit_for(SizeType.WEIGHT), whole_text, part_text)

    def length(self, whole_text: str, part_text: str = "") -> Optional[Measurement]:
        return build_measurement(self.preferences.unit_for(SizeType.LENGTH), whole_text, part_text)
