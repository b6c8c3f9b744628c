"""Stateless conversion engine for angular magnitudes.

All functions are pure: they take plain magnitudes and unit tags and return
new ``Decimal`` values without touching any shared state. Arithmetic runs in
``localcontext(ANGLE_CONTEXT)`` so the caller's decimal context is never
changed.

Functions:
    to_decimal: Coerce an accepted numeric value to a finite ``Decimal``.
    normalize: Reduce a magnitude into ``[0, period)`` of a unit.
    convert: Scale a magnitude from one unit to another and normalize it.
    conversion_factor: Look up one entry of the conversion factor table.
    approximately_equal: Compare two magnitudes within a tolerance.
    constrain: Clamp an integer into a closed range.

Conversion Table:
    ``CONVERSION_FACTORS[target][source]`` is the multiplier taking a value in
    ``source`` units to ``target`` units. Rows and columns are indexed by the
    ``AngleUnit`` integer value. Each entry is ``period(target) / period(source)``,
    which yields 9/10 for gradians to degrees, π/180 for degrees to radians,
    360 for turns to degrees and 1 on the diagonal.

Example:
    >>> convert(180, AngleUnit.DEGREES, AngleUnit.TURNS) == Decimal("0.5")
    True
    >>> normalize(-90, AngleUnit.DEGREES)
    Decimal('270')
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal, InvalidOperation, localcontext
from fractions import Fraction

from numpy import floating, integer

from ..config import ANGLE_CONTEXT, BASE_TYPE, DEFAULT_TOLERANCE
from ..errors import InvalidMagnitudeError
from .unit_base import AngleUnit, describe


def to_decimal(value: BASE_TYPE | str) -> Decimal:
    """Coerce a numeric value to a finite ``Decimal`` rounded to the angle context.

    Args:
        value: ``int``, ``float``, ``Decimal``, ``Fraction``, decimal literal
            string, or NumPy integer/floating scalar.

    Returns:
        Decimal: The value with at most ``ANGLE_CONTEXT.prec`` significant digits.

    Raises:
        InvalidMagnitudeError: If the value is a bool, an unparsable string,
            NaN or infinite.
        TypeError: If the value is of an unsupported type.
    """
    if isinstance(value, bool):
        raise InvalidMagnitudeError(f"A bool is not an angle magnitude: {value!r}")

    with localcontext(ANGLE_CONTEXT) as ctx:
        if isinstance(value, float | floating):
            result = ctx.create_decimal_from_float(float(value))
        elif isinstance(value, int | Decimal):
            result = ctx.create_decimal(value)
        elif isinstance(value, integer):
            result = ctx.create_decimal(int(value))
        elif isinstance(value, Fraction):
            result = Decimal(value.numerator) / Decimal(value.denominator)
        elif isinstance(value, str):
            try:
                result = ctx.create_decimal(value.strip())
            except InvalidOperation:
                raise InvalidMagnitudeError(f"Not a decimal number: {value!r}") from None
        else:
            raise TypeError(f"Unsupported magnitude type: {type(value).__name__}")

    if not result.is_finite():
        raise InvalidMagnitudeError(f"Angle magnitude must be finite, got {value!r}")
    return result


def normalize(value: BASE_TYPE, unit: AngleUnit) -> Decimal:
    """Reduce ``value`` into the canonical range ``[0, period)`` of ``unit``.

    Whole periods are removed in one step by subtracting ``floor(value / period)``
    periods. The step is repeated only when decimal rounding of a very large
    input leaves the result outside the range, so the loop always terminates
    and values already in range are returned untouched. A negative zero is
    returned as positive zero.

    Args:
        value: Raw magnitude in ``unit``.
        unit: Unit whose period bounds the range.

    Returns:
        Decimal: Equivalent magnitude with ``0 <= result < period``.

    Raises:
        InvalidUnitError: If ``unit`` is not an ``AngleUnit`` member.
    """
    period = describe(unit).period
    value = to_decimal(value)
    with localcontext(ANGLE_CONTEXT):
        while value < 0 or value >= period:
            value -= (value / period).to_integral_value(rounding=ROUND_FLOOR) * period
    # Decimal('-0') passes the range check; store zero unsigned.
    if value == 0:
        value = value.copy_abs()
    return value


def _build_conversion_factors() -> tuple[tuple[Decimal, ...], ...]:
    units = sorted(AngleUnit)
    if [int(u) for u in units] != list(range(len(units))):
        raise RuntimeError("AngleUnit values must be contiguous table indices starting at 0")
    with localcontext(ANGLE_CONTEXT):
        return tuple(
            tuple(
                Decimal(1) if target is source else describe(target).period / describe(source).period
                for source in units
            )
            for target in units
        )


CONVERSION_FACTORS: tuple[tuple[Decimal, ...], ...] = _build_conversion_factors()


def conversion_factor(target: AngleUnit, source: AngleUnit) -> Decimal:
    """Return the multiplier converting a ``source`` magnitude to ``target``.

    Raises:
        InvalidUnitError: If either unit is not an ``AngleUnit`` member.
    """
    describe(target)
    describe(source)
    return CONVERSION_FACTORS[target][source]


def convert(value: BASE_TYPE, from_unit: AngleUnit, to_unit: AngleUnit) -> Decimal:
    """Convert a magnitude between units and normalize it into the target range.

    Args:
        value: Magnitude expressed in ``from_unit``.
        from_unit: Unit of ``value``.
        to_unit: Unit of the result.

    Returns:
        Decimal: Normalized magnitude in ``to_unit``.
    """
    factor = conversion_factor(to_unit, from_unit)
    with localcontext(ANGLE_CONTEXT):
        scaled = to_decimal(value) * factor
    return normalize(scaled, to_unit)


def approximately_equal(a: BASE_TYPE, b: BASE_TYPE, tolerance: BASE_TYPE = DEFAULT_TOLERANCE) -> bool:
    """Return True if ``|b - a|`` is strictly below ``tolerance``."""
    with localcontext(ANGLE_CONTEXT):
        return abs(to_decimal(b) - to_decimal(a)) < to_decimal(tolerance)


def constrain(value: int, minimum: int, maximum: int) -> int:
    """Clamp ``value`` into ``[minimum, maximum]``."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value
