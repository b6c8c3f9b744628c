"""Global configuration and numeric type definitions for the angle library.

This module centralizes the numeric settings shared by every component of
the package: the accepted input types, the decimal arithmetic context, the
high-precision π constant and the default tolerance and precision values.

Magnitudes are stored as ``decimal.Decimal`` rather than binary floats so
that repeated conversions through π do not compound rounding error. All
decimal arithmetic runs inside ``localcontext(ANGLE_CONTEXT)``; the
process-wide decimal context is left untouched.

Type Definitions:
    BASE_TYPE: Union of the numeric types accepted as a magnitude or scalar
               operand. Supports Python native types, ``Decimal``,
               ``Fraction`` and NumPy integer/floating scalars.

Example:
    >>> from anglekit.config import PI, ANGLE_CONTEXT
    >>> from decimal import localcontext
    >>> with localcontext(ANGLE_CONTEXT):
    ...     half_turn = PI * 1
"""

from decimal import ROUND_HALF_EVEN, Context, Decimal, localcontext
from fractions import Fraction

from numpy import floating, integer

BASE_TYPE = int | float | Decimal | Fraction | integer | floating

# 34 significant digits, the IEEE 754 decimal128 precision.
ANGLE_CONTEXT = Context(prec=34, rounding=ROUND_HALF_EVEN)

PI = Decimal("3.14159265358979323846264338327950288419716939937510")
with localcontext(ANGLE_CONTEXT):
    TWO_PI = 2 * PI

DEFAULT_TOLERANCE = Decimal("1e-10")

# Hashes are computed on degrees quantized to this step.
HASH_QUANTUM = Decimal("1e-9")

DEFAULT_DIGITS = 2
RADIAN_DIGITS = 5
MIN_DIGITS = 0
MAX_DIGITS = 9
