"""Unit-system enums shared by the measurement and query layers.

Enum values are the exact strings persisted by the settings store and the
saved map filters, so they double as the wire format and must not change.
"""
from __future__ import annotations

from enum import Enum
from typing import Union


class WeightUnit(str, Enum):
    POUNDS_OUNCES = "lbs_oz"
    DECIMAL_POUNDS = "decimal_lbs"
    KILOGRAMS = "kgs"

    @property
    def label(self) -> str:
        """Short display label used for size ranges."""
        return "kg" if self is WeightUnit.KILOGRAMS else "lb"


class LengthUnit(str, Enum):
    INCHES = "inches"
    CENTIMETERS = "centimeters"

    @property
    def label(self) -> str:
        return "cm" if self is LengthUnit.CENTIMETERS else "in"


Unit = Union[WeightUnit, LengthUnit]


class MeasurementSystem(str, Enum):
    IMPERIAL = "Imperial (lbs/oz, inches)"
    METRIC = "Metric (kg, cm)"


class SizeType(str, Enum):
    WEIGHT = "Weight"
    LENGTH = "Length"


class EventType(str, Enum):
    """Catch event category. ``BOTH`` only exists as a filter wildcard."""
    FUN_DAY = "Fun Day"
    TOURNAMENT = "Tournament"
    BOTH = "Both"


def comparison_unit(size_type: SizeType, system: MeasurementSystem) -> Unit:
    """Unit a record's size is converted into before range comparison."""
    if size_type is SizeType.WEIGHT:
        if system is MeasurementSystem.METRIC:
            return WeightUnit.KILOGRAMS
        return WeightUnit.DECIMAL_POUNDS
    if system is MeasurementSystem.METRIC:
        return LengthUnit.CENTIMETERS
    return LengthUnit.INCHES


__all__ = [
    "WeightUnit",
    "LengthUnit",
    "Unit",
    "MeasurementSystem",
    "SizeType",
    "EventType",
    "comparison_unit",
]
