"""Measurement conversion between unit representations.

Conversion rules (all rounding is half away from zero):

    pounds/ounces -> decimal pounds   pounds + ounces / 16, 2 dp
    decimal pounds -> pounds/ounces   fraction x 16 to the nearest ounce,
                                      16 oz carries into the next pound
    pounds <-> kilograms              x / 0.45359237, 2 dp
    inches <-> centimeters            x / 2.54, 1 dp

Pounds/ounces to and from kilograms goes through the exact pound value and
rounds once, at the target unit.
"""
from __future__ import annotations

import math
from decimal import Context, Decimal, ROUND_FLOOR, ROUND_HALF_EVEN

from loguru import logger

from core.exceptions import InvalidMeasurementError, UnitMismatchError
from measure.measurement import Measurement
from measure.rounding import round_half_away, to_decimal
from measure.units import LengthUnit, Unit, WeightUnit

KG_PER_POUND = Decimal("0.45359237")
CM_PER_INCH = Decimal("2.54")
OUNCES_PER_POUND = 16

WEIGHT_PLACES = 2
LENGTH_PLACES = 1

# Fixed context for the conversion arithmetic; the final rounding step uses
# its own context from measure.rounding. Neither reads the thread's context.
_CONTEXT = Context(prec=28, rounding=ROUND_HALF_EVEN)


class MeasurementConverter:
    """Pure, stateless converter between weight units and between length units.

    Usage:
        converter = MeasurementConverter()
        converter.convert(Measurement.pounds_ounces(5, 8), WeightUnit.DECIMAL_POUNDS)
        # -> Measurement(5.5, DECIMAL_POUNDS)
    """

    def convert(self, value: Measurement, to: Unit) -> Measurement:
        """Convert ``value`` into unit ``to``.

        Raises:
            InvalidMeasurementError: If the magnitude is negative or NaN
            UnitMismatchError: If converting between weight and length
        """
        self._validate(value)
        if value.unit is to:
            return value

        if isinstance(value.unit, WeightUnit) and isinstance(to, WeightUnit):
            return self._from_pounds(self._exact_pounds(value), to)
        if isinstance(value.unit, LengthUnit) and isinstance(to, LengthUnit):
            return self._convert_length(value, to)

        raise UnitMismatchError(f"Cannot convert {value.unit.value} to {to.value}")

    @staticmethod
    def _validate(value: Measurement) -> None:
        magnitude = value.magnitude
        if magnitude is None or math.isnan(magnitude) or magnitude < 0:
            logger.error(f"[units] Rejected measurement with magnitude {magnitude!r}")
            raise InvalidMeasurementError(f"Magnitude must be >= 0, got {magnitude!r}")

    @staticmethod
    def _exact_pounds(value: Measurement) -> Decimal:
        if value.unit is WeightUnit.POUNDS_OUNCES:
            ounces = _CONTEXT.divide(Decimal(value.ounces), Decimal(OUNCES_PER_POUND))
            return Decimal(value.pounds) + ounces
        if value.unit is WeightUnit.KILOGRAMS:
            return _CONTEXT.divide(to_decimal(value.magnitude), KG_PER_POUND)
        return to_decimal(value.magnitude)

    @staticmethod
    def _from_pounds(pounds: Decimal, to: WeightUnit) -> Measurement:
        if to is WeightUnit.DECIMAL_POUNDS:
            return Measurement.decimal_pounds(float(round_half_away(pounds, WEIGHT_PLACES)))
        if to is WeightUnit.KILOGRAMS:
            kg = _CONTEXT.multiply(pounds, KG_PER_POUND)
            return Measurement.kilograms(float(round_half_away(kg, WEIGHT_PLACES)))

        whole = int(pounds.to_integral_value(rounding=ROUND_FLOOR))
        fraction = pounds - whole
        ounces = int(round_half_away(fraction * OUNCES_PER_POUND, 0))
        if ounces == OUNCES_PER_POUND:
            whole, ounces = whole + 1, 0
        return Measurement.pounds_ounces(whole, ounces)

    @staticmethod
    def _convert_length(value: Measurement, to: LengthUnit) -> Measurement:
        magnitude = to_decimal(value.magnitude)
        if to is LengthUnit.CENTIMETERS:
            cm = round_half_away(_CONTEXT.multiply(magnitude, CM_PER_INCH), LENGTH_PLACES)
            return Measurement.centimeters(float(cm))
        inches = round_half_away(_CONTEXT.divide(magnitude, CM_PER_INCH), LENGTH_PLACES)
        return Measurement.inches(float(inches))


_default_converter = MeasurementConverter()


def convert(value: Measurement, to: Unit) -> Measurement:
    """Module-level shortcut for ``MeasurementConverter().convert``."""
    return _default_converter.convert(value, to)
