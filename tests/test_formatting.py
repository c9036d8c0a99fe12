"""Tests for float formatting"""
import pytest

from metrics_lines.formatting import format_double


class TestFormatDouble:
    """Test locale independent float formatting"""

    @pytest.mark.parametrize("value", [0, -0, 0.0, -0.0, .0000000000000, -0.0000000000000])
    def test_zero(self, value):
        """Test all zeros render as 0"""
        assert format_double(value) == "0"

    @pytest.mark.parametrize("value,expected", [
        (123.456, "123.456"),
        (-123.456, "-123.456"),
        (1.0 / 3, "0.3333333333333333"),
        (1.1234567890123456789, "1.1234567890123457"),
        (-1.1234567890123456789, "-1.1234567890123457"),
        (200.00000000000, "200"),
        (-200.000000000000, "-200"),
        (1e15, "1000000000000000"),
        (1e-15, "0.000000000000001"),
        (0.0001, "0.0001"),
        (12345678.9, "12345678.9"),
    ])
    def test_positional(self, value, expected):
        """Test values within range are written without exponent"""
        assert format_double(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (-1.7976931348623157e308, "-1.7976931348623157E+308"),
        (1.7976931348623157e308, "1.7976931348623157E+308"),
        (1e100, "1.0E+100"),
        (1e-100, "1.0E-100"),
        (-1e100, "-1.0E+100"),
        (-1e-100, "-1.0E-100"),
        (1.234e100, "1.234E+100"),
        (1.234e-100, "1.234E-100"),
        (-1.234e100, "-1.234E+100"),
        (-1.234e-100, "-1.234E-100"),
        (1_000_000_000_000_000_000, "1.0E+18"),
        (-1_000_000_000_000_000_000, "-1.0E+18"),
        (0.000_000_000_000_000_001, "1.0E-18"),
        (-0.000_000_000_000_000_001, "-1.0E-18"),
        (1_234_000_000_000_000_000, "1.234E+18"),
        (-1_234_000_000_000_000_000, "-1.234E+18"),
        (0.000_000_000_000_000_001_234, "1.234E-18"),
        (-0.000_000_000_000_000_001_234, "-1.234E-18"),
        (1e16, "1.0E+16"),
        (5000000000000001.0, "5.000000000000001E+15"),
        (1e-16, "1.0E-16"),
    ])
    def test_exponential(self, value, expected):
        """Test very large and very small values use exponential notation"""
        assert format_double(value) == expected

    def test_non_finite(self):
        """Test diagnostic output for values constructors would reject"""
        assert format_double(float("-inf")) == "-Infinity"
        assert format_double(float("inf")) == "Infinity"
        assert format_double(float("nan")) == "NaN"

    @pytest.mark.parametrize("value", [
        1.0 / 3, 123.456, -9.87654321e-12, 1e-300, 6.02214076e23, 2.5e15, 0.1 + 0.2, -42.0,
    ])
    def test_round_trip(self, value):
        """Test parsing the output yields the original value"""
        formatted = format_double(value)

        assert float(formatted) == value
        assert "," not in formatted
