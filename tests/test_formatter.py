"""
Tests for result formatting.
"""

import math

from CalcEngine.Formatter import format_result, shortest_string


class TestSpecialValues:
    """NaN, infinities and noise around zero."""

    def test_nan_is_error(self):
        assert format_result(math.nan) == "Error"

    def test_infinity(self):
        assert format_result(math.inf) == "Infinity"

    def test_negative_infinity_collapses_by_default(self):
        assert format_result(-math.inf) == "Infinity"

    def test_signed_infinity_setting(self):
        assert format_result(-math.inf, {"signed_infinity": True}) == "-Infinity"
        assert format_result(math.inf, {"signed_infinity": True}) == "Infinity"

    def test_near_zero_snaps_to_zero(self):
        assert format_result(1.2246467991473532e-16) == "0"
        assert format_result(-5e-11) == "0"

    def test_zero_threshold_setting(self):
        assert format_result(1e-5, {"zero_threshold": 1e-4}) == "0"

    def test_negative_zero(self):
        assert format_result(-0.0) == "0"


class TestRendering:
    """Shortest round-trip decimal strings."""

    def test_integral_values_have_no_fraction(self):
        assert format_result(14.0) == "14"
        assert format_result(-4.0) == "-4"

    def test_large_integers_are_positional(self):
        assert format_result(1e16) == "10000000000000000"

    def test_integers_beyond_double_precision_show_significant_digits(self):
        assert format_result(2.0 ** 60) == "1152921504606847000"
        assert format_result(123456789012345678901.0) == "123456789012345680000"
        assert format_result(1e20) == "100000000000000000000"

    def test_huge_values_use_exponent(self):
        assert format_result(1.5e21) == "1.5e+21"
        assert format_result(1e300) == "1e+300"

    def test_small_values(self):
        assert format_result(0.000123) == "0.000123"
        assert format_result(1e-7) == "1e-7"

    def test_simple_fraction(self):
        assert format_result(0.5) == "0.5"
        assert format_result(2.25) == "2.25"

    def test_shortest_string_round_trips(self):
        assert shortest_string(0.1 + 0.2) == "0.30000000000000004"


class TestRounding:
    """Long fractions are rounded to eight places."""

    def test_long_decimal(self):
        assert format_result(0.123456789123) == "0.12345679"

    def test_trailing_zeros_are_stripped(self):
        assert format_result(0.1 + 0.2) == "0.3"
        assert format_result(1.0000000001) == "1"

    def test_repeating_fraction(self):
        assert format_result(1 / 3) == "0.33333333"
        assert format_result(2 / 3) == "0.66666667"

    def test_decimal_places_setting(self):
        assert format_result(math.pi, {"decimal_places": 2}) == "3.14"
        assert format_result(2.5, {"decimal_places": 0}) == "3"

    def test_formatting_is_idempotent(self):
        for x in (1 / 3, math.pi, 0.123456789123, 1e-7, 1.5e21, 42.0, -2 / 7, 1e16, 2.0 ** 60, 123456789012345678901.0):
            text = format_result(x)
            assert format_result(float(text)) == text
