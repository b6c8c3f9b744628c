"""Format-code parser and text renderer for angles.

A format code is a letter optionally followed by a digit count:

    ""  or "C"   Use the letter of the angle's own unit.
    "d"          Degrees, e.g. ``45.00°``
    "g"          Gradians, e.g. ``50.00g``
    "r"          Radians, e.g. ``0.78540rad``
    "t"          Turns, e.g. ``0.13tr``
    "p"          Radians as a multiple of π, e.g. ``0.25000πrad``

The letter is case-insensitive. Trailing digits give the number of decimal
places, clamped into ``[0, 9]``; without them radians and π-radians use 5
places and every other letter uses 2. Values are rendered fixed-point with
ties rounded away from zero.

The formatter is wired into Python's formatting protocol through
``Angle.__format__``, so ``format(angle, "r3")`` and ``f"{angle:p}"`` work
anywhere a format spec is accepted.

Example:
    >>> from anglekit import Angle, AngleFormatter, AngleUnit
    >>> AngleFormatter().format("g", Angle(90))
    '100.00g'
    >>> f"{Angle(0.25, AngleUnit.TURNS):p3}"
    '0.500πrad'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .angle import Angle
from .config import ANGLE_CONTEXT, DEFAULT_DIGITS, MAX_DIGITS, MIN_DIGITS, PI, RADIAN_DIGITS
from .errors import InvalidFormatError, NullInputError
from .registry import special_class
from .unit import UNIT_DESCRIPTORS, AngleUnit, constrain, describe

NATIVE_CODE = "c"
PI_CODE = "p"

_DIGITS_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class _RenderRule:
    unit: AngleUnit
    divisor: Decimal
    symbol: str
    default_digits: int


def _build_render_rules() -> dict[str, _RenderRule]:
    rules = {
        d.code: _RenderRule(
            unit=u,
            divisor=Decimal(1),
            symbol=d.symbol,
            default_digits=RADIAN_DIGITS if u is AngleUnit.RADIANS else DEFAULT_DIGITS,
        )
        for u, d in UNIT_DESCRIPTORS.items()
    }
    rules[PI_CODE] = _RenderRule(
        unit=AngleUnit.RADIANS,
        divisor=PI,
        symbol="π" + AngleUnit.RADIANS.symbol,
        default_digits=RADIAN_DIGITS,
    )
    return rules


RENDER_RULES: dict[str, _RenderRule] = _build_render_rules()


@dataclass(frozen=True)
class FormatCode:
    """Resolved format code.

    Attributes:
        letter (str): Lower-case format letter, one of ``RENDER_RULES``.
        digits (int): Number of decimal places, within ``[0, 9]``.
    """

    letter: str
    digits: int


def parse_format_code(code: str | None, unit: AngleUnit) -> FormatCode:
    """Resolve a format code against the unit of the angle being rendered.

    Args:
        code: Format code such as ``""``, ``"C"``, ``"d"`` or ``"r3"``.
        unit: Unit of the angle, used for ``""`` and ``"C"``.

    Returns:
        FormatCode: The format letter and decimal place count.

    Raises:
        InvalidFormatError: If the letter is not a known format letter.
    """
    code = code or ""
    if not code or code[0].lower() == NATIVE_CODE:
        letter = describe(unit).code
    else:
        letter = code[0].lower()
        if letter not in RENDER_RULES:
            raise InvalidFormatError(f"Invalid format code: {code!r}")

    rest = code[1:]
    if _DIGITS_PATTERN.fullmatch(rest):
        digits = constrain(int(rest), MIN_DIGITS, MAX_DIGITS)
    else:
        digits = RENDER_RULES[letter].default_digits
    return FormatCode(letter=letter, digits=digits)


@special_class(3)
class AngleFormatter:
    """Renders angles to text from format codes.

    Values that are not angles are passed through to their own formatting so
    the formatter can sit behind generic formatting call sites.
    """

    def format(self, format_code: str | None, arg: object) -> str:
        """Render ``arg`` according to ``format_code``.

        Args:
            format_code: Format code, see the module documentation.
            arg: Angle to render, or any other value to pass through.

        Returns:
            str: The rendered text.

        Raises:
            NullInputError: If ``arg`` is None.
            InvalidFormatError: If ``arg`` is an Angle and the format letter is unknown.
        """
        if arg is None:
            raise NullInputError("Input object argument is None")

        if not isinstance(arg, Angle):
            if type(arg).__format__ is not object.__format__:
                return format(arg, format_code or "")
            return str(arg)

        parsed = parse_format_code(format_code, arg.unit)
        return self.format_angle(arg, parsed.letter, parsed.digits)

    def format_angle(self, angle: Angle, letter: str = NATIVE_CODE, digits: int = DEFAULT_DIGITS) -> str:
        """Render ``angle`` with an already-resolved letter and digit count.

        Args:
            angle: Angle to render.
            letter: Format letter; ``"c"`` selects the angle's own unit.
            digits: Decimal places, clamped into ``[0, 9]``.

        Raises:
            InvalidFormatError: If ``letter`` is not a known format letter.
        """
        letter = letter.lower()
        if letter == NATIVE_CODE:
            letter = angle.unit.code
        rule = RENDER_RULES.get(letter)
        if rule is None:
            raise InvalidFormatError(f"Invalid format code: {letter!r}")

        digits = constrain(digits, MIN_DIGITS, MAX_DIGITS)
        value = angle.to_unit(rule.unit).magnitude
        with localcontext(ANGLE_CONTEXT):
            value = (value / rule.divisor).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
        return f"{value:f}{rule.symbol}"
