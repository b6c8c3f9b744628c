"""
Tests for the console demonstration command.
"""

import contextlib
import io
import unittest

from rich.console import Console

from anglekit import Angle
from anglekit.demo import build_parser, format_table, main


def _console():
    return Console(file=io.StringIO(), width=200, record=True)


class TestDemo(unittest.TestCase):
    """Test the demonstration command."""

    def test_default_run(self):
        """Test a run with the default format codes."""
        console = _console()
        self.assertEqual(main(["90"], console), 0)
        output = console.export_text()
        self.assertIn("90.00°", output)
        self.assertIn("100.00g", output)
        self.assertIn("1.57080rad", output)
        self.assertIn("0.50000πrad", output)
        self.assertIn("Class tags", output)
        self.assertIn("AngleFormatter", output)

    def test_wraparound_arithmetic(self):
        """Test the arithmetic rows for an angle near a full turn."""
        console = _console()
        main(["350"], console)
        self.assertIn("10.00°", console.export_text())

    def test_requested_codes_and_unit(self):
        """Test explicit units and format codes."""
        console = _console()
        self.assertEqual(main(["0.25", "--unit", "turns", "-f", "p3", "-f", "d0"], console), 0)
        output = console.export_text()
        self.assertIn("0.500πrad", output)
        self.assertIn("90°", output)

    def test_invalid_code_is_reported(self):
        """Test that a bad format code becomes an error row."""
        table = format_table(Angle(90), ["x", "d"])
        console = _console()
        console.print(table)
        output = console.export_text()
        self.assertIn("Invalid format code", output)
        self.assertIn("90.00°", output)

    def test_argument_errors_exit_with_status_2(self):
        """Test that bad arguments exit through argparse."""
        for argv in (["abc"], ["1", "--unit", "parsecs"], ["nan"]):
            with self.subTest(argv=argv):
                with contextlib.redirect_stderr(io.StringIO()):
                    with self.assertRaises(SystemExit) as ctx:
                        main(argv, _console())
                self.assertEqual(ctx.exception.code, 2)

    def test_parser_defaults(self):
        """Test the default arguments."""
        args = build_parser().parse_args([])
        self.assertEqual(args.value, 45)
        self.assertIsNone(args.codes)


if __name__ == "__main__":
    unittest.main()
