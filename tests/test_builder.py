"""Unit tests for building measurements from entry form text."""
import pytest

from entry.builder import MAX_WHOLE, MeasurementEntryForm, build_measurement, parse_whole
from measure.measurement import Measurement
from measure.preferences import UnitPreferences
from measure.units import LengthUnit, WeightUnit


class TestParseWhole:
    """Tests for reading sanitized field text as an integer."""

    @pytest.mark.parametrize("text,expected", [
        ("016", 16),
        ("7", 7),
        ("", None),
        (None, None),
        ("abc", None),
    ])
    def test_parse_whole(self, text, expected):
        assert parse_whole(text) == expected

    def test_pasted_huge_number_clamps(self):
        assert parse_whole("9" * 5000) == MAX_WHOLE

    def test_leading_zeros_do_not_count_towards_length(self):
        assert parse_whole("0" * 5000 + "42") == 42


class TestBuildMeasurement:
    """Tests for build_measurement."""

    def test_pounds_and_ounces(self):
        assert build_measurement(WeightUnit.POUNDS_OUNCES, "5", "8") == Measurement.pounds_ounces(5, 8)

    def test_ounces_clamped_at_fifteen(self):
        assert build_measurement(WeightUnit.POUNDS_OUNCES, "5", "016") == Measurement.pounds_ounces(5, 15)

    def test_decimal_pounds_part_is_hundredths(self):
        assert build_measurement(WeightUnit.DECIMAL_POUNDS, "4", "20") == Measurement.decimal_pounds(4.2)

    def test_single_digit_part_is_hundredths(self):
        assert build_measurement(WeightUnit.DECIMAL_POUNDS, "5", "5") == Measurement.decimal_pounds(5.05)

    def test_inches_part_is_quarters(self):
        assert build_measurement(LengthUnit.INCHES, "12", "3") == Measurement.inches(12.75)

    def test_centimeters_part_is_tenths(self):
        assert build_measurement(LengthUnit.CENTIMETERS, "30", "5") == Measurement.centimeters(30.5)

    def test_only_part_entered(self):
        assert build_measurement(WeightUnit.POUNDS_OUNCES, "", "8") == Measurement.pounds_ounces(0, 8)

    def test_huge_whole_part_does_not_raise(self):
        value = build_measurement(WeightUnit.POUNDS_OUNCES, "9" * 5000, "9" * 5000)

        assert value == Measurement.pounds_ounces(MAX_WHOLE, 15)

    def test_nothing_entered_returns_none(self):
        assert build_measurement(WeightUnit.KILOGRAMS, "", "") is None


class TestMeasurementEntryForm:
    """Tests for building sizes in the preferred units."""

    def test_metric_preferences(self):
        form = MeasurementEntryForm(UnitPreferences.from_settings("kgs", "centimeters"))

        assert form.weight("2", "27") == Measurement.kilograms(2.27)
        assert form.length("41") == Measurement.centimeters(41.0)

    def test_imperial_preferences(self):
        form = MeasurementEntryForm(UnitPreferences.from_settings("lbs_oz", "inches"))

        assert form.weight("3", "4") == Measurement.pounds_ounces(3, 4)
        assert form.length("") is None
