"""Console demonstration of the angle library.

Renders one angle in every unit and format code, shows wraparound
arithmetic, compares the angle against a reference angle and lists the class
tags of the core types. Output is drawn with Rich tables.

Usage:
    $ python -m anglekit 350 --unit degrees
    $ python -m anglekit 1.5 --unit radians --format p3 --format r0
    $ anglekit 0.25 --unit turns --reference 100 --reference-unit gradians
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from decimal import Decimal

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .angle import Angle, equals, greater_than, less_than
from .errors import AngleError, InvalidFormatError
from .formatter import RENDER_RULES
from .registry import tagged_classes
from .unit import AngleUnit, to_decimal

CONSOLE = Console()

DEFAULT_CODES = ("C", *sorted(RENDER_RULES))
ARITHMETIC_STEP = Decimal(20)


def _magnitude(text: str) -> Decimal:
    try:
        return to_decimal(text)
    except AngleError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _unit(text: str) -> AngleUnit:
    try:
        return AngleUnit.from_name(text)
    except AngleError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anglekit",
        description="Render an angle in every unit and format code.",
    )
    parser.add_argument("value", nargs="?", type=_magnitude, default=Decimal(45), help="Angle magnitude (default 45)")
    parser.add_argument("--unit", "-u", type=_unit, default=AngleUnit.DEGREES, help="degrees, gradians, radians or turns")
    parser.add_argument(
        "--format",
        "-f",
        dest="codes",
        action="append",
        metavar="CODE",
        help="Format code to render; repeatable. Defaults to every letter.",
    )
    parser.add_argument("--reference", type=_magnitude, default=Decimal(180), help="Angle to compare against")
    parser.add_argument("--reference-unit", type=_unit, default=AngleUnit.DEGREES)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_table(angle: Angle, codes: Sequence[str]) -> Table:
    """Table of ``angle`` rendered with each format code; bad codes become error rows."""
    table = Table(title=f"Formats of {angle!r}")
    table.add_column("Code", style="bold")
    table.add_column("Text", justify="right")
    for code in codes:
        try:
            text = escape(format(angle, code))
        except InvalidFormatError as exc:
            text = f"[red]{escape(str(exc))}[/red]"
        table.add_row(escape(repr(code)), text)
    return table


def unit_table(angle: Angle) -> Table:
    table = Table(title="Conversions")
    table.add_column("Unit", style="bold")
    table.add_column("Magnitude", justify="right")
    table.add_column("Text", justify="right")
    for unit in AngleUnit:
        converted = angle.to_unit(unit)
        table.add_row(unit.name.lower(), str(converted.magnitude), str(converted))
    return table


def arithmetic_table(angle: Angle) -> Table:
    step = Angle(ARITHMETIC_STEP)
    table = Table(title="Arithmetic")
    table.add_column("Expression", style="bold")
    table.add_column("Result", justify="right")
    table.add_row(f"{angle} + {step}", str(angle + step))
    table.add_row(f"{angle} - {step}", str(angle - step))
    table.add_row(f"{angle} * 2", str(angle * 2))
    table.add_row(f"{angle} / 2", str(angle / 2))
    return table


def comparison_table(angle: Angle, reference: Angle) -> Table:
    table = Table(title="Comparison")
    table.add_column("Relation", style="bold")
    table.add_column("Holds", justify="center")
    table.add_row(f"{angle} < {reference}", str(less_than(angle, reference)))
    table.add_row(f"{angle} == {reference}", str(equals(angle, reference)))
    table.add_row(f"{angle} > {reference}", str(greater_than(angle, reference)))
    return table


def tag_table() -> Table:
    table = Table(title="Class tags")
    table.add_column("Type", style="bold")
    table.add_column("Tag", justify="right")
    for cls, tag in tagged_classes():
        table.add_row(cls.__name__, str(tag))
    return table


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the demonstration and return the exit status.

    Argument errors exit through argparse with status 2.
    """
    args = build_parser().parse_args(argv)
    console = console or CONSOLE

    angle = Angle(args.value, args.unit)
    reference = Angle(args.reference, args.reference_unit)
    codes = args.codes or DEFAULT_CODES

    console.print(format_table(angle, codes))
    console.print(unit_table(angle))
    console.print(arithmetic_table(angle))
    console.print(comparison_table(angle, reference))
    console.print(tag_table())
    return 0
