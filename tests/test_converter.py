"""Unit tests for measurement values and unit conversion."""
import decimal
import math
from dataclasses import FrozenInstanceError
from types import SimpleNamespace

import pytest

from core.exceptions import InvalidMeasurementError, UnitMismatchError
from measure.converter import MeasurementConverter, convert
from measure.measurement import Measurement
from measure.rounding import round_half_away, round_to_float
from measure.units import LengthUnit, WeightUnit


class TestMeasurement:
    """Tests for the Measurement value type."""

    def test_pounds_ounces_factory(self):
        value = Measurement.pounds_ounces(5, 8)

        assert value.unit is WeightUnit.POUNDS_OUNCES
        assert value.pounds == 5
        assert value.ounces == 8
        assert value.is_weight
        assert not value.is_length

    def test_negative_magnitude_rejected(self):
        with pytest.raises(InvalidMeasurementError):
            Measurement.decimal_pounds(-1.0)

    def test_nan_magnitude_rejected(self):
        with pytest.raises(InvalidMeasurementError):
            Measurement.centimeters(math.nan)

    def test_ounces_out_of_range_rejected(self):
        with pytest.raises(InvalidMeasurementError):
            Measurement.pounds_ounces(5, 16)

    def test_fractional_pounds_rejected_for_pounds_ounces(self):
        with pytest.raises(InvalidMeasurementError):
            Measurement(5.5, WeightUnit.POUNDS_OUNCES)

    def test_ounces_only_allowed_with_pounds_ounces(self):
        with pytest.raises(InvalidMeasurementError):
            Measurement(5.0, WeightUnit.DECIMAL_POUNDS, ounces=3)

    def test_measurement_is_immutable(self):
        value = Measurement.inches(12.0)

        with pytest.raises(FrozenInstanceError):
            value.magnitude = 13.0

    def test_str(self):
        assert str(Measurement.pounds_ounces(5, 8)) == "5 lb 8 oz"
        assert str(Measurement.decimal_pounds(5.5)) == "5.5 lb"
        assert str(Measurement.centimeters(30.0)) == "30 cm"


class TestRounding:
    """Tests for half-away-from-zero rounding on decimal text."""

    def test_rounds_half_up_on_decimal_text(self):
        # 2.675 is 2.67499999... in binary; round() would give 2.67
        assert round_to_float(2.675, 2) == 2.68

    def test_rounds_negative_ties_away_from_zero(self):
        assert round_half_away(-2.5, 0) == -3

    def test_integer_input(self):
        assert round_to_float(3, 1) == 3.0

    def test_large_magnitude_does_not_overflow_precision(self):
        assert round_to_float(1e30, 2) == 1e30
        assert round_half_away(123456789012345678901234567890.0, 2) == decimal.Decimal("1.2345678901234568E+29")

    def test_thread_context_is_ignored(self):
        with decimal.localcontext() as ctx:
            ctx.prec = 3
            ctx.rounding = decimal.ROUND_DOWN

            assert round_to_float(12345.675, 2) == 12345.68


class TestMeasurementConverter:
    """Tests for MeasurementConverter."""

    @pytest.fixture
    def converter(self):
        return MeasurementConverter()

    def test_pounds_ounces_to_decimal_pounds(self, converter):
        # Act
        result = converter.convert(Measurement.pounds_ounces(5, 8), WeightUnit.DECIMAL_POUNDS)

        # Assert
        assert result.unit is WeightUnit.DECIMAL_POUNDS
        assert result.magnitude == 5.5

    def test_decimal_pounds_to_pounds_ounces(self, converter):
        result = converter.convert(Measurement.decimal_pounds(5.5), WeightUnit.POUNDS_OUNCES)

        assert (result.pounds, result.ounces) == (5, 8)

    def test_sixteen_ounces_carry_into_next_pound(self, converter):
        # .99 lb is 15.84 oz, which rounds to 16
        result = converter.convert(Measurement.decimal_pounds(5.99), WeightUnit.POUNDS_OUNCES)

        assert (result.pounds, result.ounces) == (6, 0)

    def test_ounces_to_two_decimal_pounds(self, converter):
        # 3 oz is 0.1875 lb
        result = converter.convert(Measurement.pounds_ounces(2, 3), WeightUnit.DECIMAL_POUNDS)

        assert result.magnitude == 2.19

    def test_decimal_pounds_to_kilograms(self, converter):
        result = converter.convert(Measurement.decimal_pounds(10.0), WeightUnit.KILOGRAMS)

        assert result.unit is WeightUnit.KILOGRAMS
        assert result.magnitude == 4.54

    def test_kilograms_to_decimal_pounds(self, converter):
        result = converter.convert(Measurement.kilograms(1.0), WeightUnit.DECIMAL_POUNDS)

        assert result.magnitude == 2.2

    def test_pounds_ounces_to_kilograms(self, converter):
        result = converter.convert(Measurement.pounds_ounces(1, 0), WeightUnit.KILOGRAMS)

        assert result.magnitude == 0.45

    def test_kilograms_to_pounds_ounces(self, converter):
        result = converter.convert(Measurement.kilograms(2.27), WeightUnit.POUNDS_OUNCES)

        assert (result.pounds, result.ounces) == (5, 0)

    def test_inches_to_centimeters(self, converter):
        result = converter.convert(Measurement.inches(10.0), LengthUnit.CENTIMETERS)

        assert result.unit is LengthUnit.CENTIMETERS
        assert result.magnitude == 25.4

    def test_centimeters_to_inches(self, converter):
        result = converter.convert(Measurement.centimeters(30.0), LengthUnit.INCHES)

        assert result.magnitude == 11.8

    def test_same_unit_returns_value_unchanged(self, converter):
        value = Measurement.decimal_pounds(4.2)

        assert converter.convert(value, WeightUnit.DECIMAL_POUNDS) is value

    def test_pounds_ounces_round_trip(self, converter):
        original = Measurement.pounds_ounces(7, 12)

        decimal = converter.convert(original, WeightUnit.DECIMAL_POUNDS)
        back = converter.convert(decimal, WeightUnit.POUNDS_OUNCES)

        assert back == original

    def test_weight_to_length_raises(self, converter):
        with pytest.raises(UnitMismatchError):
            converter.convert(Measurement.decimal_pounds(4.2), LengthUnit.INCHES)

    def test_length_to_weight_raises(self, converter):
        with pytest.raises(UnitMismatchError):
            converter.convert(Measurement.centimeters(40.0), WeightUnit.KILOGRAMS)

    @pytest.mark.parametrize("magnitude", [math.nan, -1.0, None])
    def test_invalid_magnitude_raises(self, converter, magnitude):
        # Bypass Measurement validation to reach the converter's own check
        value = SimpleNamespace(magnitude=magnitude, unit=WeightUnit.DECIMAL_POUNDS, ounces=0)

        with pytest.raises(InvalidMeasurementError):
            converter.convert(value, WeightUnit.KILOGRAMS)

    def test_module_level_convert(self):
        result = convert(Measurement.inches(1.0), LengthUnit.CENTIMETERS)

        assert result.magnitude == 2.5

    def test_huge_magnitude_converts(self, converter):
        result = converter.convert(Measurement.decimal_pounds(1e30), WeightUnit.KILOGRAMS)

        assert result.magnitude == pytest.approx(4.5359237e29)

    def test_huge_length_converts(self, converter):
        result = converter.convert(Measurement.inches(1e40), LengthUnit.CENTIMETERS)

        assert result.magnitude == pytest.approx(2.54e40)


class TestDecimalPoundsRoundTrip:
    """Decimal pounds -> pounds/ounces -> decimal pounds."""

    # Half an ounce from rounding to the nearest ounce, plus the 2 dp rounding
    TOLERANCE = 1 / 32 + 0.005

    @pytest.fixture
    def converter(self):
        return MeasurementConverter()

    def round_trip(self, converter, pounds):
        ounces = converter.convert(Measurement.decimal_pounds(pounds), WeightUnit.POUNDS_OUNCES)
        return converter.convert(ounces, WeightUnit.DECIMAL_POUNDS).magnitude

    @pytest.mark.parametrize("pounds", [0.0, 2.25, 3.0, 5.5, 10.75])
    def test_exact_sixteenths_come_back_unchanged(self, converter, pounds):
        assert self.round_trip(converter, pounds) == pounds

    @pytest.mark.parametrize("pounds", [0.01, 1.33, 4.2, 7.07, 12.97])
    def test_other_values_stay_within_half_an_ounce(self, converter, pounds):
        assert abs(self.round_trip(converter, pounds) - pounds) <= self.TOLERANCE

    def test_carry_comes_back_as_next_pound(self, converter):
        # 5.99 lb -> 6 lb 0 oz -> 6.00 lb
        assert self.round_trip(converter, 5.99) == 6.0
