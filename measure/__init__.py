"""
Measurement package for the catch query engine.

Unit enums, the immutable Measurement value, conversion between unit systems
with fixed rounding, integer storage encodings and the mapping of unit-setting
strings onto enums.

Main Components:
    Measurement: Non-negative magnitude in a weight or length unit
    MeasurementConverter: Pounds/ounces, decimal pounds, kilograms, inches, cm
    UnitPreferences: Active entry units resolved from settings strings
"""
from __future__ import annotations

from .units import WeightUnit, LengthUnit, MeasurementSystem, SizeType, EventType, comparison_unit
from .measurement import Measurement, MAX_OUNCES
from .converter import MeasurementConverter, convert
from .preferences import UnitPreferences, weight_unit_from_setting, length_unit_from_setting

__all__ = [
    "WeightUnit",
    "LengthUnit",
    "MeasurementSystem",
    "SizeType",
    "EventType",
    "comparison_unit",
    "Measurement",
    "MAX_OUNCES",
    "MeasurementConverter",
    "convert",
    "UnitPreferences",
    "weight_unit_from_setting",
    "length_unit_from_setting",
]
