"""Tests for the length converter."""

import pytest

from unitconverter.core.conversion.converter import (
    ConversionResult,
    ParseError,
    UnsupportedUnitError,
    convert,
    format_value,
    parse_value,
)
from unitconverter.core.conversion.units import Unit


def _tolerance(unit: Unit) -> float:
    return 10 ** -unit.decimals


class TestKnownValues:
    def test_metre_to_millimetre(self):
        result = convert("1", Unit.METRE, Unit.MILLIMETRE)
        assert result.ok
        assert result.values[Unit.MILLIMETRE] == "1000.00"
        assert result.selected_output == "1000.00"

    def test_metre_to_mile_has_six_digits(self):
        result = convert("1", Unit.METRE, Unit.MILE)
        assert result.selected_output == "0.000621"

    def test_mile_to_foot(self):
        # 1609.34 / 0.3048 = 5280.0105
        result = convert("1", Unit.MILE, Unit.FOOT)
        assert result.values[Unit.FOOT] == "5280.01"
        assert abs(float(result.values[Unit.FOOT]) - 5280) < 0.02

    def test_mile_to_metre(self):
        result = convert("1", Unit.MILE, Unit.METRE)
        assert result.selected_output == "1609.34"

    def test_foot_to_millimetre(self):
        result = convert("1", Unit.FOOT, Unit.MILLIMETRE)
        assert result.selected_output == "304.80"

    def test_zero(self):
        result = convert("0", Unit.FOOT, Unit.METRE)
        assert result.values == {
            Unit.METRE: "0.00",
            Unit.MILLIMETRE: "0.00",
            Unit.MILE: "0.000000",
            Unit.FOOT: "0.00",
        }

    def test_all_units_present(self):
        result = convert("2.5", Unit.METRE, Unit.FOOT)
        assert set(result.values) == set(Unit)

    def test_negative_value(self):
        result = convert("-1", Unit.METRE, Unit.MILLIMETRE)
        assert result.selected_output == "-1000.00"

    def test_tiny_negative_rounds_without_sign(self):
        result = convert("-0.001", Unit.METRE, Unit.METRE)
        assert result.selected_output == "0.00"

    def test_no_thousands_grouping(self):
        result = convert("5", Unit.MILE, Unit.MILLIMETRE)
        assert "," not in result.selected_output
        assert result.selected_output == "8046700.00"

    def test_unit_names_as_strings(self):
        result = convert("1", "metre", "mm")
        assert isinstance(result, ConversionResult)
        assert result.to_unit is Unit.MILLIMETRE


class TestFormatting:
    @pytest.mark.parametrize("value", ["0.0001", "1", "123456.789", "1e6"])
    def test_fixed_digits(self, value):
        result = convert(value, Unit.METRE, Unit.METRE)
        for unit, text in result.values.items():
            assert len(text.split(".")[1]) == unit.decimals

    def test_format_value_mile(self):
        assert format_value(0.5, Unit.MILE) == "0.500000"


class TestRoundTrip:
    @pytest.mark.parametrize("unit", list(Unit))
    def test_identity(self, unit):
        result = convert("12.5", unit, unit)
        assert abs(float(result.selected_output) - 12.5) <= _tolerance(unit)

    @pytest.mark.parametrize("source,target", [
        (Unit.METRE, Unit.FOOT),
        (Unit.FOOT, Unit.MILLIMETRE),
        (Unit.MILE, Unit.METRE),
        (Unit.MILLIMETRE, Unit.FOOT),
    ])
    def test_there_and_back(self, source, target):
        forward = convert("4200", source, target)
        back = convert(forward.selected_output, target, source)
        assert float(back.selected_output) == pytest.approx(4200, rel=1e-3)

    def test_pure(self):
        assert convert("3.3", "Foot", "Mile") == convert("3.3", "Foot", "Mile")


class TestErrors:
    @pytest.mark.parametrize("text", ["abc", "", "   ", "1,5", "1.2.3", "inf", "nan", "1_000", "0x10", "١٢"])
    def test_parse_error(self, text):
        result = convert(text, Unit.METRE, Unit.MILE)
        assert isinstance(result, ParseError)
        assert not result.ok
        assert result.kind == "parse"

    def test_overflow_is_parse_error(self):
        result = convert("1e308", Unit.MILE, Unit.MILLIMETRE)
        assert isinstance(result, ParseError)

    def test_unsupported_unit(self):
        result = convert("1", "parsec", Unit.METRE)
        assert isinstance(result, UnsupportedUnitError)
        assert "parsec" in result.message

    def test_non_string_unit(self):
        result = convert("1", Unit.METRE, 42)
        assert isinstance(result, UnsupportedUnitError)


class TestParseValue:
    def test_whitespace_trimmed(self):
        assert parse_value(" 2.5 ") == 2.5

    def test_exponent(self):
        assert parse_value("1e3") == 1000.0

    def test_leading_dot(self):
        assert parse_value(".5") == 0.5

    def test_not_a_string(self):
        assert parse_value(None) is None
