"""Circular angle value type with unit-aware arithmetic and comparison.

This module provides the ``Angle`` class and the named operations it is built
on. An Angle stores a ``Decimal`` magnitude and an ``AngleUnit`` tag and keeps
the magnitude inside ``[0, period)`` of its unit at all times: on
construction, after assigning ``magnitude`` and after assigning ``unit``.

Operations:
    add, subtract: Combine an angle with another angle (converted into the
        left operand's unit first) or with a scalar.
    multiply, divide: Scale an angle by a scalar. Division by an exact zero
        raises ``AngleDivisionByZeroError``.
    equals: Tolerance-aware equality across units.
    less_than: Strict ordering that excludes the equality band.
    greater_than, less_or_equal, greater_or_equal: Derived from ``equals`` and
        ``less_than`` only, so the three-way ordering never contradicts itself.

Every operation returns a new Angle in the left operand's unit; the Python
operators ``+ - * / == != < > <= >=`` delegate to these functions.

Absent angles:
    The comparison functions accept ``None``. Two absent angles are equal, an
    absent angle is less than any present angle, and an absent angle is not
    less than another absent angle.

Example:
    >>> heading = Angle(350)
    >>> print(heading + Angle(20))
    10.00°
    >>> Angle(180) == Angle(0.5, AngleUnit.TURNS)
    True
    >>> f"{Angle(90):r3}"
    '1.571rad'
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from .config import ANGLE_CONTEXT, BASE_TYPE, DEFAULT_TOLERANCE, HASH_QUANTUM
from .errors import AngleDivisionByZeroError
from .registry import special_class
from .unit import AngleUnit, approximately_equal, convert, describe, normalize, to_decimal


@special_class(4)
class Angle:
    """Angle on the unit circle, expressed in degrees, gradians, radians or turns.

    Attributes:
        magnitude (Decimal): Value in the current unit, ``0 <= magnitude < unit.period``.
            Assigning renormalizes into the current unit.
        unit (AngleUnit): Unit of ``magnitude``. Assigning converts the stored
            magnitude into the new unit before the tag changes.

    Example:
        >>> a = Angle(-90)
        >>> a.magnitude
        Decimal('270')
        >>> a.unit = AngleUnit.TURNS
        >>> print(a)
        0.75tr
    """

    __slots__ = ("_magnitude", "_unit")

    def __init__(self, value: BASE_TYPE | Angle = 0, unit: AngleUnit = AngleUnit.DEGREES):
        """Create an angle from a magnitude and unit, or copy another angle.

        The unit is assigned before the value so the value is normalized
        against the caller's unit rather than a default degree scale.

        Args:
            value: Magnitude in ``unit``, or an Angle to copy. When an Angle is
                given its magnitude and unit are copied and ``unit`` is ignored.
            unit: Unit of ``value``. Defaults to degrees.

        Raises:
            InvalidUnitError: If ``unit`` is not an ``AngleUnit`` member.
            InvalidMagnitudeError: If ``value`` is NaN, infinite or a bool.
            TypeError: If ``value`` is not a supported numeric type.
        """
        if isinstance(value, Angle):
            self._unit = value._unit
            self._magnitude = value._magnitude
            return
        describe(unit)
        self._unit = unit
        self._magnitude = Decimal(0)
        self.magnitude = value

    @classmethod
    def from_angle(cls, other: Angle) -> Angle:
        """Return a copy of ``other`` with the same magnitude and unit."""
        if not isinstance(other, Angle):
            raise TypeError(f"Expected an Angle, got {type(other).__name__}")
        return cls(other)

    @property
    def magnitude(self) -> Decimal:
        return self._magnitude

    @magnitude.setter
    def magnitude(self, value: BASE_TYPE) -> None:
        self._magnitude = normalize(value, self._unit)

    @property
    def unit(self) -> AngleUnit:
        return self._unit

    @unit.setter
    def unit(self, unit: AngleUnit) -> None:
        self._magnitude = convert(self._magnitude, self._unit, unit)
        self._unit = unit

    # -------------------------------- Unit Conversion --------------------------------
    def to_unit(self, target: AngleUnit) -> Angle:
        """Return a new angle equal to this one expressed in ``target``.

        Raises:
            InvalidUnitError: If ``target`` is not an ``AngleUnit`` member.
        """
        return Angle(convert(self._magnitude, self._unit, target), target)

    def to_degrees(self) -> Angle:
        return self.to_unit(AngleUnit.DEGREES)

    def to_gradians(self) -> Angle:
        return self.to_unit(AngleUnit.GRADIANS)

    def to_radians(self) -> Angle:
        return self.to_unit(AngleUnit.RADIANS)

    def to_turns(self) -> Angle:
        return self.to_unit(AngleUnit.TURNS)

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: Angle | BASE_TYPE) -> Angle:
        if not isinstance(other, Angle | BASE_TYPE):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: BASE_TYPE) -> Angle:
        if not isinstance(other, BASE_TYPE):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Angle | BASE_TYPE) -> Angle:
        if not isinstance(other, Angle | BASE_TYPE):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, k: BASE_TYPE) -> Angle:
        if not isinstance(k, BASE_TYPE):
            return NotImplemented
        return multiply(self, k)

    def __rmul__(self, k: BASE_TYPE) -> Angle:
        return self.__mul__(k)

    def __truediv__(self, k: BASE_TYPE) -> Angle:
        if not isinstance(k, BASE_TYPE):
            return NotImplemented
        return divide(self, k)

    # -------------------------------- Comparison Operations --------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return equals(self, other)

    def __lt__(self, other: Angle | None) -> bool:
        if other is not None and not isinstance(other, Angle):
            return NotImplemented
        return less_than(self, other)

    def __gt__(self, other: Angle | None) -> bool:
        if other is not None and not isinstance(other, Angle):
            return NotImplemented
        return greater_than(self, other)

    def __le__(self, other: Angle | None) -> bool:
        if other is not None and not isinstance(other, Angle):
            return NotImplemented
        return less_or_equal(self, other)

    def __ge__(self, other: Angle | None) -> bool:
        if other is not None and not isinstance(other, Angle):
            return NotImplemented
        return greater_or_equal(self, other)

    def __hash__(self) -> int:
        # Degrees quantized so the same angle in any unit shares a hash. Equality
        # applies the tolerance in the left operand's unit, which in turns or
        # radians spans far more than HASH_QUANTUM degrees, so angles that
        # compare equal only through the tolerance may hash differently.
        degrees = convert(self._magnitude, self._unit, AngleUnit.DEGREES)
        with localcontext(ANGLE_CONTEXT):
            degrees = degrees.quantize(HASH_QUANTUM)
            if degrees >= AngleUnit.DEGREES.period:
                degrees -= AngleUnit.DEGREES.period
        return hash(degrees)

    # -------------------------------- Conversions to Python Types --------------------------------
    def __float__(self) -> float:
        """Return the magnitude in the current unit as a float."""
        return float(self._magnitude)

    def __format__(self, format_spec: str) -> str:
        from .formatter import AngleFormatter

        return AngleFormatter().format(format_spec, self)

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"Angle({self._magnitude!r}, AngleUnit.{self._unit.name})"


def _require_angle(a: object) -> Angle:
    if not isinstance(a, Angle):
        raise TypeError(f"Expected an Angle, got {type(a).__name__}")
    return a


def _operand_in_unit(operand: Angle | BASE_TYPE, unit: AngleUnit) -> Decimal:
    """Return ``operand`` as a magnitude in ``unit``; scalars are taken as-is."""
    if isinstance(operand, Angle):
        return convert(operand.magnitude, operand.unit, unit)
    return to_decimal(operand)


def _scalar(k: BASE_TYPE) -> Decimal:
    if isinstance(k, Angle):
        raise TypeError("An angle can only be scaled by a number, not by another Angle")
    return to_decimal(k)


def add(a: Angle, b: Angle | BASE_TYPE) -> Angle:
    """Return ``a + b`` in ``a``'s unit; ``b`` may be an Angle or a scalar."""
    a = _require_angle(a)
    other = _operand_in_unit(b, a.unit)
    with localcontext(ANGLE_CONTEXT):
        return Angle(a.magnitude + other, a.unit)


def subtract(a: Angle, b: Angle | BASE_TYPE) -> Angle:
    """Return ``a - b`` in ``a``'s unit; ``b`` may be an Angle or a scalar."""
    a = _require_angle(a)
    other = _operand_in_unit(b, a.unit)
    with localcontext(ANGLE_CONTEXT):
        return Angle(a.magnitude - other, a.unit)


def multiply(a: Angle, k: BASE_TYPE) -> Angle:
    """Return ``a`` scaled by ``k`` and renormalized."""
    a = _require_angle(a)
    factor = _scalar(k)
    with localcontext(ANGLE_CONTEXT):
        return Angle(a.magnitude * factor, a.unit)


def divide(a: Angle, k: BASE_TYPE) -> Angle:
    """Return ``a`` divided by ``k`` and renormalized.

    Raises:
        AngleDivisionByZeroError: If ``k`` is exactly zero.
    """
    a = _require_angle(a)
    divisor = _scalar(k)
    if divisor == 0:
        raise AngleDivisionByZeroError("Cannot divide an angle by zero")
    with localcontext(ANGLE_CONTEXT):
        return Angle(a.magnitude / divisor, a.unit)


def equals(a: Angle | None, b: Angle | None, tolerance: BASE_TYPE = DEFAULT_TOLERANCE) -> bool:
    """Return True if ``b`` converted into ``a``'s unit lies within ``tolerance`` of ``a``.

    Two absent angles are equal; an absent and a present angle are not.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    a = _require_angle(a)
    other = _operand_in_unit(_require_angle(b), a.unit)
    return approximately_equal(a.magnitude, other, tolerance)


def less_than(a: Angle | None, b: Angle | None, tolerance: BASE_TYPE = DEFAULT_TOLERANCE) -> bool:
    """Return True if ``a`` is strictly less than ``b`` and not approximately equal to it.

    An absent ``a`` is less than any present ``b``. Absent is not less than
    absent, which keeps this consistent with ``equals(None, None)``.
    """
    if a is None:
        return b is not None
    if b is None:
        return False
    a = _require_angle(a)
    other = _operand_in_unit(_require_angle(b), a.unit)
    return not approximately_equal(a.magnitude, other, tolerance) and a.magnitude < other


def greater_than(a: Angle | None, b: Angle | None, tolerance: BASE_TYPE = DEFAULT_TOLERANCE) -> bool:
    return not (equals(a, b, tolerance) or less_than(a, b, tolerance))


def less_or_equal(a: Angle | None, b: Angle | None, tolerance: BASE_TYPE = DEFAULT_TOLERANCE) -> bool:
    return less_than(a, b, tolerance) or equals(a, b, tolerance)


def greater_or_equal(a: Angle | None, b: Angle | None, tolerance: BASE_TYPE = DEFAULT_TOLERANCE) -> bool:
    return greater_than(a, b, tolerance) or equals(a, b, tolerance)
