"""Mapping of persisted unit-setting strings onto unit enums.

Unknown strings fail closed to a fixed default (decimal pounds, inches) and
are logged; they are never surfaced to the user as an error.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from measure.units import LengthUnit, MeasurementSystem, SizeType, Unit, WeightUnit

DEFAULT_WEIGHT_UNIT = WeightUnit.DECIMAL_POUNDS
DEFAULT_LENGTH_UNIT = LengthUnit.INCHES


def weight_unit_from_setting(value: Optional[str]) -> WeightUnit:
    try:
        return WeightUnit(value)
    except ValueError:
        logger.warning(
            f"[units] Unknown weight mode {value!r}, falling back to {DEFAULT_WEIGHT_UNIT.value}"
        )
        return DEFAULT_WEIGHT_UNIT


def length_unit_from_setting(value: Optional[str]) -> LengthUnit:
    try:
        return LengthUnit(value)
    except ValueError:
        logger.warning(
            f"[units] Unknown length mode {value!r}, falling back to {DEFAULT_LENGTH_UNIT.value}"
        )
        return DEFAULT_LENGTH_UNIT


@dataclass(frozen=True)
class UnitPreferences:
    """The user's active entry units, passed explicitly to whatever needs them."""
    weight_unit: WeightUnit = DEFAULT_WEIGHT_UNIT
    length_unit: LengthUnit = DEFAULT_LENGTH_UNIT

    @classmethod
    def from_settings(cls, weight_mode: Optional[str], length_mode: Optional[str]) -> UnitPreferences:
        """Build from the settings-store strings ("lbs_oz", "kgs", "centimeters", ...)."""
        return cls(
            weight_unit=weight_unit_from_setting(weight_mode),
            length_unit=length_unit_from_setting(length_mode),
        )

    @property
    def measurement_system(self) -> MeasurementSystem:
        """Filter measurement system matching the weight preference."""
        if self.weight_unit is WeightUnit.KILOGRAMS:
            return MeasurementSystem.METRIC
        return MeasurementSystem.IMPERIAL

    def unit_for(self, size_type: SizeType) -> Unit:
        return self.weight_unit if size_type is SizeType.WEIGHT else self.length_unit
