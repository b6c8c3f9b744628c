"""Circular angles with exact unit conversion and a format-code mini-language.

anglekit models an angle on the unit circle that can be expressed in degrees,
gradians, radians or turns. Magnitudes are stored as ``decimal.Decimal`` and
kept in the canonical range ``[0, period)`` of their unit, so arithmetic wraps
around the circle and equality holds across units.

Architecture:
    The package is organized leaves first:

    - unit: ``AngleUnit`` enumeration, descriptor table and conversion engine
    - angle: ``Angle`` value type and the named arithmetic/comparison operations
    - formatter: format-code parser and renderer behind ``format(angle, code)``
    - registry: static table of integer class tags for the core types
    - errors: exception hierarchy rooted at ``AngleError``
    - demo: console demonstration command (``python -m anglekit``)

Key Features:
    - Normalization: every angle satisfies ``0 <= magnitude < period``
    - Exact Conversion: table-driven conversion with 34-digit decimals
    - Tolerant Equality: ``Angle(180) == Angle(0.5, AngleUnit.TURNS)``
    - Consistent Ordering: ``<``, ``==`` and ``>`` never contradict
    - Formatting: ``f"{angle:r3}"``, ``f"{angle:p}"``, ``f"{angle:C}"``

Example:
    >>> from anglekit import Angle, AngleUnit
    >>>
    >>> heading = Angle(350)  # 350°
    >>> turn = Angle(20)
    >>> print(heading + turn)  # "10.00°", wraps around
    >>> print(f"{Angle(90):p}")  # "0.50000πrad"
    >>> Angle(100, AngleUnit.GRADIANS) == Angle(90)  # True
"""

from .angle import (
    Angle,
    add,
    divide,
    equals,
    greater_or_equal,
    greater_than,
    less_or_equal,
    less_than,
    multiply,
    subtract,
)
from .config import DEFAULT_TOLERANCE, PI
from .errors import (
    AngleDivisionByZeroError,
    AngleError,
    InvalidFormatError,
    InvalidMagnitudeError,
    InvalidUnitError,
    NullInputError,
)
from .formatter import AngleFormatter, FormatCode, parse_format_code
from .registry import CLASS_TAGS, class_tag, special_class
from .unit import AngleUnit, UnitDescriptor

__version__ = "1.0.0"

__all__ = [
    # value type
    "Angle",
    "AngleUnit",
    "UnitDescriptor",
    # operations
    "add",
    "subtract",
    "multiply",
    "divide",
    "equals",
    "less_than",
    "greater_than",
    "less_or_equal",
    "greater_or_equal",
    # formatting
    "AngleFormatter",
    "FormatCode",
    "parse_format_code",
    # class tags
    "CLASS_TAGS",
    "class_tag",
    "special_class",
    # errors
    "AngleError",
    "InvalidUnitError",
    "InvalidMagnitudeError",
    "AngleDivisionByZeroError",
    "InvalidFormatError",
    "NullInputError",
    # constants
    "PI",
    "DEFAULT_TOLERANCE",
]
