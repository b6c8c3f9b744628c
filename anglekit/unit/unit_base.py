"""Angular unit enumeration and its static descriptor table.

Every unit of angular measure is one ``AngleUnit`` member plus one row in
``UNIT_DESCRIPTORS``. The member's integer value is its index into the
conversion factor table, and its period, symbol and format letter are read
from the descriptor row, never from conditional branches.

Units:
    DEGREES: 360 per turn, symbol "°", format letter "d".
    GRADIANS: 400 per turn, symbol "g", format letter "g".
    RADIANS: 2π per turn, symbol "rad", format letter "r".
    TURNS: 1 per turn, symbol "tr", format letter "t".

Adding a unit:
    Append a member to ``AngleUnit`` with the next integer value and add its
    ``UnitDescriptor`` row. The conversion table is derived from the periods
    and picks the new unit up automatically.

Example:
    >>> AngleUnit.RADIANS.symbol
    'rad'
    >>> AngleUnit.GRADIANS.period
    Decimal('400')
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum

from ..config import TWO_PI
from ..errors import InvalidUnitError


@dataclass(frozen=True)
class UnitDescriptor:
    """Fixed attributes of one angular unit.

    Attributes:
        period (Decimal): Magnitude of one full revolution in this unit.
        symbol (str): Suffix appended when the angle is rendered.
        code (str): Lower-case format letter that selects this unit.
    """

    period: Decimal
    symbol: str
    code: str

    def __post_init__(self) -> None:
        if self.period <= 0:
            raise ValueError(f"period must be positive, got {self.period}")
        if len(self.code) != 1 or not self.code.islower():
            raise ValueError(f"code must be a single lower-case letter, got {self.code!r}")


class AngleUnit(IntEnum):
    """Closed set of angular units; the value is the conversion table index."""

    DEGREES = 0
    GRADIANS = 1
    RADIANS = 2
    TURNS = 3

    @property
    def descriptor(self) -> UnitDescriptor:
        return UNIT_DESCRIPTORS[self]

    @property
    def period(self) -> Decimal:
        """Magnitude of a full revolution, the exclusive upper bound of the range."""
        return self.descriptor.period

    @property
    def symbol(self) -> str:
        return self.descriptor.symbol

    @property
    def code(self) -> str:
        return self.descriptor.code

    @classmethod
    def from_name(cls, name: str) -> AngleUnit:
        """Look up a unit by case-insensitive member name (``"degrees"``, ``"Turns"``).

        Raises:
            InvalidUnitError: If no member has that name.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise InvalidUnitError(f"Unknown angle unit name: {name!r}") from None


UNIT_DESCRIPTORS: dict[AngleUnit, UnitDescriptor] = {
    AngleUnit.DEGREES: UnitDescriptor(period=Decimal(360), symbol="°", code="d"),
    AngleUnit.GRADIANS: UnitDescriptor(period=Decimal(400), symbol="g", code="g"),
    AngleUnit.RADIANS: UnitDescriptor(period=TWO_PI, symbol="rad", code="r"),
    AngleUnit.TURNS: UnitDescriptor(period=Decimal(1), symbol="tr", code="t"),
}


def describe(unit: AngleUnit) -> UnitDescriptor:
    """Return the descriptor row for ``unit``.

    Args:
        unit: Member of ``AngleUnit``.

    Returns:
        UnitDescriptor: Period, symbol and format letter of the unit.

    Raises:
        InvalidUnitError: If ``unit`` is not an ``AngleUnit`` member. Plain
            integers are rejected even when they equal a member's value.
    """
    if not isinstance(unit, AngleUnit):
        raise InvalidUnitError(f"The angle unit {unit!r} is not a valid AngleUnit")
    return UNIT_DESCRIPTORS[unit]
