"""
Tests for the angle format-code parser and renderer.
"""

import math
import unittest
from decimal import Decimal

from anglekit import (
    Angle,
    AngleFormatter,
    AngleUnit,
    FormatCode,
    InvalidFormatError,
    NullInputError,
    parse_format_code,
)


class TestParseFormatCode(unittest.TestCase):
    """Test resolution of format codes into a letter and digit count."""

    def test_native_code(self):
        """Test that "" and "C" select the angle's own unit letter."""
        self.assertEqual(parse_format_code("", AngleUnit.DEGREES), FormatCode("d", 2))
        self.assertEqual(parse_format_code(None, AngleUnit.GRADIANS), FormatCode("g", 2))
        self.assertEqual(parse_format_code("C", AngleUnit.RADIANS), FormatCode("r", 5))
        self.assertEqual(parse_format_code("c7", AngleUnit.TURNS), FormatCode("t", 7))

    def test_letters_are_case_insensitive(self):
        """Test that upper-case letters are folded."""
        self.assertEqual(parse_format_code("D", AngleUnit.TURNS), FormatCode("d", 2))
        self.assertEqual(parse_format_code("P3", AngleUnit.DEGREES), FormatCode("p", 3))

    def test_default_digits(self):
        """Test the default precision of each letter."""
        for letter, digits in (("d", 2), ("g", 2), ("t", 2), ("r", 5), ("p", 5)):
            with self.subTest(letter=letter):
                self.assertEqual(parse_format_code(letter, AngleUnit.DEGREES).digits, digits)

    def test_digits_are_clamped(self):
        """Test that digit counts are clamped into [0, 9]."""
        self.assertEqual(parse_format_code("d12", AngleUnit.DEGREES).digits, 9)
        self.assertEqual(parse_format_code("d-3", AngleUnit.DEGREES).digits, 0)
        self.assertEqual(parse_format_code("r0", AngleUnit.DEGREES).digits, 0)

    def test_unparsable_digits_use_default(self):
        """Test that non-integer suffixes fall back to the default precision."""
        self.assertEqual(parse_format_code("dx", AngleUnit.DEGREES).digits, 2)
        self.assertEqual(parse_format_code("r1.5", AngleUnit.DEGREES).digits, 5)

    def test_unknown_letter(self):
        """Test that unknown letters are rejected."""
        for code in ("x", "z5", "?"):
            with self.subTest(code=code):
                with self.assertRaises(InvalidFormatError):
                    parse_format_code(code, AngleUnit.DEGREES)


class TestAngleFormatter(unittest.TestCase):
    """Test rendering angles to text."""

    def setUp(self):
        self.formatter = AngleFormatter()
        self.right_angle_rad = Angle(math.pi / 2, AngleUnit.RADIANS)

    def test_degrees(self):
        """Test degree output with explicit and default codes."""
        self.assertEqual(self.formatter.format("d", Angle(90)), "90.00°")
        self.assertEqual(self.formatter.format("", Angle(90)), "90.00°")
        self.assertEqual(str(Angle(90)), "90.00°")

    def test_pi_radians(self):
        """Test radians expressed as a multiple of π."""
        self.assertEqual(self.formatter.format("p", self.right_angle_rad), "0.50000πrad")
        self.assertEqual(format(Angle(180), "p"), "1.00000πrad")

    def test_radians(self):
        """Test radian output and integer rounding."""
        self.assertEqual(self.formatter.format("r", self.right_angle_rad), "1.57080rad")
        self.assertEqual(self.formatter.format("r0", self.right_angle_rad), "2rad")
        self.assertEqual(self.formatter.format("C", self.right_angle_rad), "1.57080rad")
        self.assertEqual(self.formatter.format("c3", self.right_angle_rad), "1.571rad")

    def test_conversion_before_rendering(self):
        """Test that angles are converted into the unit of the format letter."""
        angle = Angle(45)
        self.assertEqual(format(angle, "g"), "50.00g")
        self.assertEqual(format(angle, "G"), "50.00g")
        self.assertEqual(format(angle, "r3"), "0.785rad")
        self.assertEqual(format(angle, "t3"), "0.125tr")
        self.assertEqual(format(Angle(90), "g"), "100.00g")

    def test_ties_round_away_from_zero(self):
        """Test fixed-point rounding of midpoints."""
        self.assertEqual(format(Angle(Decimal("0.125"), AngleUnit.TURNS), "t"), "0.13tr")
        self.assertEqual(format(Angle(Decimal("10.5")), "d0"), "11°")

    def test_native_unit_output(self):
        """Test the default code for each unit."""
        self.assertEqual(str(Angle(100, AngleUnit.GRADIANS)), "100.00g")
        self.assertEqual(str(Angle(0.75, AngleUnit.TURNS)), "0.75tr")
        self.assertEqual(str(Angle(0)), "0.00°")

    def test_zero_has_no_sign(self):
        """Test that zero angles produced by negation render without a minus sign."""
        self.assertEqual(str(Angle(0) * -1), "0.00°")
        self.assertEqual(str(Angle(-0.0)), "0.00°")
        self.assertEqual(format(Angle(0) / -5, "p"), "0.00000πrad")
        self.assertEqual(format(Angle(-0.0, AngleUnit.TURNS), "g"), "0.00g")

    def test_precision_bounds(self):
        """Test the clamped digit counts in the output."""
        self.assertEqual(format(Angle(90), "d12"), "90.000000000°")
        self.assertEqual(format(Angle(90), "d-1"), "90°")

    def test_f_string(self):
        """Test the formatter through f-string format specs."""
        self.assertEqual(f"{Angle(0.25, AngleUnit.TURNS):p3}", "0.500πrad")
        self.assertEqual(f"{Angle(90)}", "90.00°")

    def test_invalid_format(self):
        """Test that unknown codes raise without partial output."""
        with self.assertRaises(InvalidFormatError):
            self.formatter.format("x", Angle(90))
        with self.assertRaises(ValueError):
            format(Angle(90), "q2")

    def test_null_input(self):
        """Test that None is rejected."""
        with self.assertRaises(NullInputError):
            self.formatter.format("d", None)
        with self.assertRaises(TypeError):
            self.formatter.format("", None)

    def test_non_angle_passthrough(self):
        """Test that other values are rendered by their own formatting."""

        class Plain:
            def __str__(self):
                return "plain"

        self.assertEqual(self.formatter.format("05d", 42), "00042")
        self.assertEqual(self.formatter.format(".2f", 1.005), format(1.005, ".2f"))
        self.assertEqual(self.formatter.format("d", Plain()), "plain")
        self.assertEqual(self.formatter.format(None, "text"), "text")

    def test_format_angle(self):
        """Test the rendering half on its own."""
        self.assertEqual(self.formatter.format_angle(Angle(90), "c", 1), "90.0°")
        self.assertEqual(self.formatter.format_angle(Angle(90), "D", 20), "90.000000000°")
        with self.assertRaises(InvalidFormatError):
            self.formatter.format_angle(Angle(90), "q")


if __name__ == "__main__":
    unittest.main()
