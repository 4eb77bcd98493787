"""Immutable measurement value type."""
from __future__ import annotations

import math
from dataclasses import dataclass

from core.exceptions import InvalidMeasurementError
from measure.units import LengthUnit, Unit, WeightUnit

MAX_OUNCES = 15


@dataclass(frozen=True)
class Measurement:
    """A non-negative magnitude in a weight or length unit.

    For ``WeightUnit.POUNDS_OUNCES`` the magnitude holds whole pounds and
    ``ounces`` the 0..15 remainder. Every other unit keeps ``ounces`` at 0.

    Raises:
        InvalidMeasurementError: On a negative, NaN or infinite magnitude, or ounces
            outside 0..15.
    """
    magnitude: float
    unit: Unit
    ounces: int = 0

    def __post_init__(self):
        if not isinstance(self.unit, (WeightUnit, LengthUnit)):
            raise InvalidMeasurementError(f"Unknown unit: {self.unit!r}")
        if not math.isfinite(self.magnitude) or self.magnitude < 0:
            raise InvalidMeasurementError(f"Magnitude must be >= 0, got {self.magnitude}")
        if self.unit is WeightUnit.POUNDS_OUNCES:
            if self.magnitude != int(self.magnitude):
                raise InvalidMeasurementError(
                    f"Pounds/ounces needs whole pounds, got {self.magnitude}"
                )
            if not 0 <= self.ounces <= MAX_OUNCES:
                raise InvalidMeasurementError(f"Ounces must be in 0..{MAX_OUNCES}, got {self.ounces}")
        elif self.ounces:
            raise InvalidMeasurementError(f"Ounces only apply to pounds/ounces, not {self.unit.value}")

    @classmethod
    def pounds_ounces(cls, pounds: int, ounces: int = 0) -> Measurement:
        return cls(float(pounds), WeightUnit.POUNDS_OUNCES, ounces)

    @classmethod
    def decimal_pounds(cls, pounds: float) -> Measurement:
        return cls(float(pounds), WeightUnit.DECIMAL_POUNDS)

    @classmethod
    def kilograms(cls, kg: float) -> Measurement:
        return cls(float(kg), WeightUnit.KILOGRAMS)

    @classmethod
    def inches(cls, inches: float) -> Measurement:
        return cls(float(inches), LengthUnit.INCHES)

    @classmethod
    def centimeters(cls, cm: float) -> Measurement:
        return cls(float(cm), LengthUnit.CENTIMETERS)

    @property
    def is_weight(self) -> bool:
        return isinstance(self.unit, WeightUnit)

    @property
    def is_length(self) -> bool:
        return isinstance(self.unit, LengthUnit)

    @property
    def pounds(self) -> int:
        """Whole pounds of a pounds/ounces value."""
        return int(self.magnitude)

    def __str__(self) -> str:
        if self.unit is WeightUnit.POUNDS_OUNCES:
            return f"{self.pounds} lb {self.ounces} oz"
        return f"{self.magnitude:g} {self.unit.label}"
